"""Builders that turn section data into trains."""

from section_controller.application.initializers.overnight_corrector import (
    OvernightCorrector,
    correct_overnight_dates,
)
from section_controller.application.initializers.position_locator import PositionLocator
from section_controller.application.initializers.schedule_loader import ScheduleLoader
from section_controller.application.initializers.train_factory import TrainFactory

__all__ = [
    "OvernightCorrector",
    "PositionLocator",
    "ScheduleLoader",
    "TrainFactory",
    "correct_overnight_dates",
]
