"""Loads a train's raw stop schedule from the section repository."""

import logging
from collections.abc import Sequence
from datetime import date, datetime
from typing import TYPE_CHECKING

from section_controller.domain.exceptions import TrainLoadError
from section_controller.domain.models import Station, TrainDirection, TrainSchedule

if TYPE_CHECKING:
    from section_controller.domain.ports import SectionRepository

logger = logging.getLogger(__name__)


class ScheduleLoader:
    """Reads a train's stops and turns them into dated schedules in encounter order.

    Every stop is dated on the service date, so the schedules of a run that crosses
    midnight are not yet corrected. Use ``OvernightCorrector`` on top of this loader.
    """

    def __init__(self, repository: "SectionRepository") -> None:
        """Initialize with a section repository."""
        self._repository = repository

    def load(
        self,
        train_number: str,
        direction: TrainDirection,
        stations: Sequence[Station],
        service_date: date,
    ) -> list[TrainSchedule]:
        """Load the train's stops.

        Args:
            train_number: The train whose stops are loaded.
            direction: The train's direction, which fixes the order of the stops.
            stations: Stations on the section.
            service_date: Date given to every bare clock time.

        Returns:
            The train's schedules ordered as the train encounters the stations.

        Raises:
            TrainLoadError: If the train has no stops or stops at an unknown station.
        """
        stops = self._repository.get_stops(train_number)
        if not stops:
            raise TrainLoadError(f"Train {train_number} has no stops")

        stations_by_code = {station.code.lower(): station for station in stations}
        schedules: list[TrainSchedule] = []
        for stop in stops:
            station = stations_by_code.get(stop.code.lower())
            if station is None:
                raise TrainLoadError(
                    f"Train {train_number} stops at {stop.code}, which is not on the section"
                )
            schedules.append(
                TrainSchedule(
                    station_code=station.code,
                    arrival_time=datetime.combine(service_date, stop.arrival_time),
                    departure_time=datetime.combine(service_date, stop.departure_time),
                    distance=station.distance_from_home,
                )
            )

        schedules.sort(
            key=lambda schedule: schedule.distance,
            reverse=direction == TrainDirection.TOWARDS_HOME,
        )
        logger.debug(f"Loaded {len(schedules)} stop(s) for train {train_number}")
        return schedules
