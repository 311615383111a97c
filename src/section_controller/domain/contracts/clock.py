"""Protocol for reading the current wall-clock time."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current time on the section."""

    def now(self) -> datetime:
        """Return the current naive wall-clock time of the section."""
        ...
