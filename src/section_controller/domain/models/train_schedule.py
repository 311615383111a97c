"""Train schedule domain model."""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta


@dataclass(frozen=True)
class TrainSchedule:
    """One scheduled stop of a train."""

    station_code: str
    arrival_time: datetime
    departure_time: datetime
    distance: int  # Copied from the station when the stop is loaded

    def shifted(self, *, arrival_days: int = 0, departure_days: int = 0) -> "TrainSchedule":
        """Return a copy with the arrival and departure dates moved by whole days."""
        return replace(
            self,
            arrival_time=self.arrival_time + timedelta(days=arrival_days),
            departure_time=self.departure_time + timedelta(days=departure_days),
        )

    def contains(self, moment: datetime) -> bool:
        """Check whether the train is halted here at the moment (both ends inclusive)."""
        return self.arrival_time <= moment <= self.departure_time
