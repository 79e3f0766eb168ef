"""Domain value objects for the Vontta application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

# Two non-negative integer parts separated by a colon (e.g. 01:30, 120:05).
_DURATION_RE = re.compile(r"^(\d+):(\d+)$")
# Input form: at least two hour digits, minutes 00-59.
_DURATION_INPUT_RE = re.compile(r"^(\d{2,}):([0-5]\d)$")


@dataclass(frozen=True)
class Duration:
    """Value object for an hours-dedicated duration, written as ``HH:mm``.

    Stored task durations are only loosely constrained: any two non-negative
    integers separated by a colon are accepted when reading (minutes are not
    capped at 59). New input is validated strictly via from_input().
    """

    minutes: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValueError("Duration must not be negative")

    @classmethod
    def parse(cls, value: str | None) -> "Duration | None":
        """Parse a stored ``HH:mm`` string; return None when absent or malformed."""
        if not value:
            return None
        match = _DURATION_RE.match(value.strip())
        if match is None:
            return None
        hours, minutes = int(match.group(1)), int(match.group(2))
        return cls(hours * 60 + minutes)

    @classmethod
    def from_input(cls, value: str) -> "Duration":
        """Parse user input strictly (``HH:mm``, minutes below 60).

        Raises:
            ValueError: When the value is not a valid duration.
        """
        match = _DURATION_INPUT_RE.match(value.strip()) if value else None
        if match is None:
            raise ValueError(f"Invalid duration {value!r}: expected HH:mm")
        return cls(int(match.group(1)) * 60 + int(match.group(2)))

    def __str__(self) -> str:
        hours, minutes = divmod(self.minutes, 60)
        return f"{hours:02d}:{minutes:02d}"

    @property
    def whole_hours(self) -> int:
        return self.minutes // 60

    def display(self) -> str:
        """Human format used in dashboards, e.g. ``3h 05``."""
        hours, minutes = divmod(self.minutes, 60)
        return f"{hours}h {minutes:02d}"


ZERO_DURATION = Duration(0)
