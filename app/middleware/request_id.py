"""Request ID and mutation access log middleware.

Generates or forwards X-Request-ID and sets it on the response. Mutating
requests (POST/PUT/PATCH/DELETE) are logged with the acting profile id, the
status and the duration. Client-provided ids are sanitized (length and
character set) to prevent log injection. Raw ASGI (no BaseHTTPMiddleware).
"""

import logging
import re
import time
import uuid
from typing import Callable

logger = logging.getLogger(__name__)

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)
_MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _sanitize(raw: str | None) -> str | None:
    """Return raw stripped if it matches the safe pattern; otherwise None."""
    if not raw or not REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return None
    return raw.strip()


def RequestIDMiddleware(
    app: Callable,
    header_name: str = "X-Request-ID",
    user_header_name: str = "X-User-ID",
) -> Callable:
    """Add or forward the request id; log mutations. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize(_get_header(scope, header_name)) or str(uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        method = scope.get("method", "")
        started = time.perf_counter()
        status_holder: dict[str, int] = {}

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
                headers = list(message.get("headers", []))
                headers.append((header_name.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            if method in _MUTATING_METHODS:
                logger.info(
                    "%s %s status=%s user=%s request_id=%s duration_ms=%.1f",
                    method,
                    scope.get("path", ""),
                    status_holder.get("status", 500),
                    _sanitize(_get_header(scope, user_header_name)) or "-",
                    request_id,
                    (time.perf_counter() - started) * 1000,
                )

    return asgi_app
