"""Track domain model."""

from enum import Enum

from section_controller.domain.models.signal_aspect import SignalAspect
from section_controller.domain.models.train_direction import TrainDirection


class TrackType(str, Enum):
    """Kind of track inside a station."""

    # Every station has exactly one main track; it never has a platform.
    MAIN_TRACK = "MAIN_TRACK"
    # Platforms are on loop tracks, so a train can only stop where one exists.
    LOOP_TRACK = "LOOP_TRACK"


class Track:
    """A physical track inside a station, carrying one signal aspect per direction."""

    def __init__(self, track_type: TrackType) -> None:
        self._track_type = track_type
        self._aspects: dict[TrainDirection, SignalAspect] = {
            TrainDirection.TOWARDS_HOME: SignalAspect.STOP,
            TrainDirection.AWAY_FROM_HOME: SignalAspect.STOP,
        }

    @property
    def track_type(self) -> TrackType:
        return self._track_type

    def get_aspect(self, direction: TrainDirection) -> SignalAspect:
        return self._aspects[direction]

    def set_aspect(self, direction: TrainDirection, aspect: SignalAspect) -> None:
        self._aspects[direction] = aspect

    def get_aspects(self) -> tuple[SignalAspect, SignalAspect]:
        """Return the (towards home, away from home) aspects."""
        return (
            self._aspects[TrainDirection.TOWARDS_HOME],
            self._aspects[TrainDirection.AWAY_FROM_HOME],
        )
