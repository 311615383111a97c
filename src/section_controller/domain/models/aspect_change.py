"""Aspect change event domain model."""

from dataclasses import dataclass

from section_controller.domain.models.signal_aspect import SignalAspect
from section_controller.domain.models.train_direction import TrainDirection


@dataclass(frozen=True)
class AspectChange:
    """A change of one directional signal aspect at a station."""

    station_code: str
    direction: TrainDirection
    old_aspect: SignalAspect
    new_aspect: SignalAspect
