"""Domain value objects and shared value types."""

from app.domain.value_objects.core import Duration

__all__ = ["Duration"]
