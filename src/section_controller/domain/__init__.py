"""Domain layer - simulation models, contracts and ports."""

from section_controller.domain.models import (
    SignalAspect,
    Station,
    Timetable,
    Train,
    TrainDirection,
    TrainPosition,
    TrainRunningStatus,
    TrainSchedule,
)
from section_controller.domain.ports import SectionRepository

__all__ = [
    "SectionRepository",
    "SignalAspect",
    "Station",
    "Timetable",
    "Train",
    "TrainDirection",
    "TrainPosition",
    "TrainRunningStatus",
    "TrainSchedule",
]
