"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Writes are limited per acting profile,
falling back to the client address when no identity header is present.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.config import get_settings


def rate_limit_key(request: Request) -> str:
    """Key requests by the identity header, else by remote address."""
    user_id = request.headers.get(get_settings().user_header_name)
    if user_id:
        return f"user:{user_id.strip()}"
    return get_remote_address(request)


limiter = Limiter(key_func=rate_limit_key)

# Single source of truth for rate limit decorators.
WRITE_ENDPOINT_LIMIT = "120/minute"
CLOSE_WEEK_LIMIT = "5/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_close_week = limiter.limit(CLOSE_WEEK_LIMIT)
