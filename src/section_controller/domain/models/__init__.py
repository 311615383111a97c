"""Domain models for the section simulation."""

from section_controller.domain.models.aspect_change import AspectChange
from section_controller.domain.models.game_settings import GameSettings
from section_controller.domain.models.records import (
    SectionRecord,
    StationRecord,
    StopRecord,
    TrainRecord,
)
from section_controller.domain.models.signal_aspect import SignalAspect
from section_controller.domain.models.snapshots import StationSnapshot, TrainSnapshot
from section_controller.domain.models.station import Station
from section_controller.domain.models.timetable import Timetable, TimetableEntry
from section_controller.domain.models.track import Track, TrackType
from section_controller.domain.models.train import Train
from section_controller.domain.models.train_direction import TrainDirection
from section_controller.domain.models.train_position import PositionFix, TrainPosition
from section_controller.domain.models.train_running_status import TrainRunningStatus
from section_controller.domain.models.train_schedule import TrainSchedule

__all__ = [
    "AspectChange",
    "GameSettings",
    "PositionFix",
    "SectionRecord",
    "SignalAspect",
    "Station",
    "StationRecord",
    "StationSnapshot",
    "StopRecord",
    "Timetable",
    "TimetableEntry",
    "Track",
    "TrackType",
    "Train",
    "TrainDirection",
    "TrainPosition",
    "TrainRecord",
    "TrainRunningStatus",
    "TrainSchedule",
    "TrainSnapshot",
]
