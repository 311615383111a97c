"""Read-only views of simulation state for the presentation layer."""

from pydantic import BaseModel, ConfigDict

from section_controller.domain.models.signal_aspect import SignalAspect
from section_controller.domain.models.train_direction import TrainDirection
from section_controller.domain.models.train_running_status import TrainRunningStatus


class TrainSnapshot(BaseModel):
    """A train's position at the time the snapshot was taken."""

    model_config = ConfigDict(frozen=True)

    number: str
    name: str
    distance_from_home: float
    direction: TrainDirection
    running_status: TrainRunningStatus


class StationSnapshot(BaseModel):
    """A station's signal aspects at the time the snapshot was taken."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    distance_from_home: int
    aspects: tuple[SignalAspect, SignalAspect]  # (towards home, away from home)
