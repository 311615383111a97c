"""Determines where a train is on the section from its timetable."""

from datetime import datetime

from section_controller.domain.exceptions import TrainPositionError
from section_controller.domain.models import (
    PositionFix,
    Station,
    Timetable,
    TrainDirection,
    TrainRunningStatus,
)

SECONDS_PER_HOUR = 3600


def _hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / SECONDS_PER_HOUR


class PositionLocator:
    """Locates a train at a moment, given its timetable.

    Distances are always measured from the home end of the section, whatever the
    direction of travel. Outside its running window the train is placed beyond the
    end of the section it enters or leaves by, as if running at the nominal speed.
    """

    def __init__(self, section_length: float, nominal_speed: float = 60.0) -> None:
        """Initialize the locator.

        Args:
            section_length: Distance from the home end to the far end of the section.
            nominal_speed: Speed in distance units per hour assumed outside the section.
        """
        self._section_length = section_length
        self._nominal_speed = nominal_speed

    @property
    def section_length(self) -> float:
        return self._section_length

    @property
    def nominal_speed(self) -> float:
        return self._nominal_speed

    def locate(
        self, timetable: Timetable, direction: TrainDirection, moment: datetime
    ) -> PositionFix:
        """Locate the train.

        The cases are checked in order: not yet entered the section, already left
        it, halted at a stop, running between two stops.

        Raises:
            TrainPositionError: If none of the cases applies, which means the timetable
                is malformed.
        """
        entry_time = timetable.get_section_entry_time()
        if moment < entry_time:
            offset = self._nominal_speed * _hours_between(moment, entry_time)
            return PositionFix(
                TrainRunningStatus.RUNNING_BETWEEN, self._from_home(direction, -offset)
            )

        exit_time = timetable.get_section_exit_time()
        if moment > exit_time:
            offset = self._nominal_speed * _hours_between(exit_time, moment)
            return PositionFix(
                TrainRunningStatus.RUNNING_BETWEEN,
                self._from_home(direction, self._section_length + offset),
            )

        halted_at = timetable.get_station_halted_at(moment)
        if halted_at is not None:
            return PositionFix(TrainRunningStatus.SCHEDULED_STOP, halted_at.distance_from_home)

        crossed, upcoming = timetable.get_stations_travelling_between(moment)
        if crossed is not None and upcoming is not None:
            return PositionFix(
                TrainRunningStatus.RUNNING_BETWEEN,
                self._distance_between(timetable, crossed, upcoming, direction, moment),
            )

        raise TrainPositionError(
            f"Cannot place the train at {moment.isoformat()}: it is neither halted nor "
            "running between two stops of its timetable"
        )

    def _distance_between(
        self,
        timetable: Timetable,
        crossed: Station,
        upcoming: Station,
        direction: TrainDirection,
        moment: datetime,
    ) -> float:
        """Distance from home of a train running on time between two stops."""
        departed = timetable.get_schedule(crossed)
        arriving = timetable.get_schedule(upcoming)
        if departed is None or arriving is None:
            raise TrainPositionError(f"No schedule between {crossed.code} and {upcoming.code}")

        gap = abs(crossed.distance_from_home - upcoming.distance_from_home)
        expected_speed = gap / _hours_between(departed.departure_time, arriving.arrival_time)
        covered = expected_speed * _hours_between(departed.departure_time, moment)
        return self._from_home(direction, covered)

    def _from_home(self, direction: TrainDirection, covered: float) -> float:
        """Convert distance covered along the direction of travel into distance from home."""
        if direction == TrainDirection.AWAY_FROM_HOME:
            return covered
        return self._section_length - covered
