"""Factory that assembles trains from section data."""

import logging
from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING

from section_controller.application.initializers.overnight_corrector import OvernightCorrector
from section_controller.application.initializers.position_locator import PositionLocator
from section_controller.application.initializers.schedule_loader import ScheduleLoader
from section_controller.domain.exceptions import TrainLoadError
from section_controller.domain.models import (
    Station,
    Timetable,
    Train,
    TrainDirection,
    TrainPosition,
)

if TYPE_CHECKING:
    from section_controller.domain.contracts import Clock
    from section_controller.domain.ports import SectionRepository

logger = logging.getLogger(__name__)


class TrainFactory:
    """Creates trains with a corrected timetable and their position at the current time.

    Trains for real use and for tests go through the same path; tests inject a fixed
    clock to choose the moment the game loads.
    """

    def __init__(
        self,
        repository: "SectionRepository",
        clock: "Clock",
        locator: PositionLocator,
    ) -> None:
        """Initialize the factory.

        Args:
            repository: Source of each train's stops.
            clock: Source of the current time.
            locator: Places the train on the section when it is created.
        """
        self._schedules = OvernightCorrector(ScheduleLoader(repository))
        self._clock = clock
        self._locator = locator

    def create(
        self,
        train_number: str,
        name: str,
        direction: "TrainDirection | str",
        stations: Sequence[Station],
        service_date: date | None = None,
    ) -> Train:
        """Create a train positioned where its timetable puts it now.

        Args:
            train_number: The train number.
            name: The train name.
            direction: A ``TrainDirection``, or "TowardsHome" / "AwayFromHome".
            stations: Stations on the section.
            service_date: Date the run starts on. Defaults to the clock's date.

        Raises:
            TrainLoadError: If the direction is unknown or the stops cannot be loaded.
            TimetableError: If the timetable does not cover both ends of the section.
            TrainPositionError: If no position matches the current time.
        """
        try:
            direction = TrainDirection.parse(direction)
        except ValueError as e:
            raise TrainLoadError(f"Train {train_number}: {e}") from e

        logger.info(f"Loading data for train {train_number}")
        timetable = self.build_timetable(train_number, direction, stations, service_date)
        fix = self._locator.locate(timetable, direction, self._clock.now())
        logger.debug(f"Train {train_number} starts at {fix}")
        return Train(train_number, name, direction, timetable, TrainPosition.from_fix(fix))

    def build_timetable(
        self,
        train_number: str,
        direction: TrainDirection,
        stations: Sequence[Station],
        service_date: date | None = None,
    ) -> Timetable:
        """Build the train's timetable, with dates corrected for overnight running."""
        if service_date is None:
            service_date = self._clock.now().date()
        schedules = self._schedules.load(train_number, direction, stations, service_date)

        stations_by_code = {station.code: station for station in stations}
        timetable = Timetable(stations, direction)
        for schedule in schedules:
            timetable.update(
                stations_by_code[schedule.station_code],
                schedule.arrival_time,
                schedule.departure_time,
            )
        return timetable
