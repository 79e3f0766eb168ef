"""ID and value generators (CUID ids, avatar URLs)."""

from urllib.parse import quote_plus

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

AVATAR_SERVICE_URL = "https://ui-avatars.com/api/"


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2) for a new row."""
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def default_avatar_url(name: str) -> str:
    """Initials avatar for a profile created without a picture."""
    return f"{AVATAR_SERVICE_URL}?name={quote_plus(name)}&background=random"
