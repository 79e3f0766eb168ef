"""Shared utilities: telemetry and cross-cutting helpers.

Used by application, infrastructure and api layers. No business logic.
"""

from app.shared.utils import ensure_utc, generate_cuid, get_zone, utc_now

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "get_zone",
    "utc_now",
]
