"""Shared utilities: datetime, generators."""

from app.shared.utils.datetime import ensure_utc, get_zone, utc_now
from app.shared.utils.generators import default_avatar_url, generate_cuid

__all__ = [
    "default_avatar_url",
    "ensure_utc",
    "generate_cuid",
    "get_zone",
    "utc_now",
]
