"""Clock adapters."""

from datetime import datetime
from zoneinfo import ZoneInfo

from section_controller.domain.contracts import Clock


class SystemClock(Clock):
    """Reads the system clock as wall-clock time in the section's timezone."""

    def __init__(self, timezone: str = "Asia/Kolkata") -> None:
        self._timezone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._timezone).replace(tzinfo=None)


class FixedClock(Clock):
    """A clock stopped at one moment, which can be moved by hand."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        self._moment = moment
