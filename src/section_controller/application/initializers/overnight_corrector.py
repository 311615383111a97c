"""Corrects calendar dates of schedules for trains that run past midnight."""

import logging
from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING

from section_controller.domain.models import Station, TrainDirection, TrainSchedule

if TYPE_CHECKING:
    from section_controller.application.initializers.schedule_loader import ScheduleLoader

logger = logging.getLogger(__name__)


class OvernightCorrector:
    """Wraps a ``ScheduleLoader`` and moves after-midnight times onto the following day.

    Walking the stops in encounter order, midnight has been crossed whenever a time
    goes backwards: either a stop departs before it arrives (the stop itself straddles
    midnight) or a stop is reached before the previous one was left. From that point
    on, every time is one more day later.
    """

    def __init__(self, loader: "ScheduleLoader") -> None:
        """Initialize with the loader whose schedules are corrected."""
        self._loader = loader

    def load(
        self,
        train_number: str,
        direction: TrainDirection,
        stations: Sequence[Station],
        service_date: date,
    ) -> list[TrainSchedule]:
        """Load the train's stops with dates corrected for overnight running."""
        schedules = self._loader.load(train_number, direction, stations, service_date)
        corrected = correct_overnight_dates(schedules)
        if corrected != schedules:
            logger.info(f"Train {train_number} runs overnight, adjusted dates after midnight")
        return corrected


def correct_overnight_dates(schedules: Sequence[TrainSchedule]) -> list[TrainSchedule]:
    """Return the schedules with dates moved forward wherever the run crosses midnight.

    Args:
        schedules: Schedules in encounter order, all dated on the service date.
    """
    corrected: list[TrainSchedule] = []
    days_passed = 0
    previous: TrainSchedule | None = None
    for schedule in schedules:
        shifted = schedule.shifted(arrival_days=days_passed, departure_days=days_passed)
        if previous is not None and shifted.arrival_time < previous.departure_time:
            days_passed += 1
            shifted = shifted.shifted(arrival_days=1, departure_days=1)
        if shifted.departure_time < shifted.arrival_time:
            days_passed += 1
            shifted = shifted.shifted(departure_days=1)
        corrected.append(shifted)
        previous = shifted
    return corrected
