"""Train position domain model."""

import threading
from dataclasses import dataclass, replace

from section_controller.domain.models.train_running_status import TrainRunningStatus


@dataclass(frozen=True)
class PositionFix:
    """Where a train is at one moment."""

    running_status: TrainRunningStatus
    distance_from_home: float


class TrainPosition:
    """The current position of a train, shared between its runner and readers.

    The position is published as an immutable ``PositionFix`` through a single locked
    store, so a reader always sees a status and distance that belong together. The
    object itself is never replaced, only updated in place.
    """

    def __init__(self, running_status: TrainRunningStatus, distance_from_home: float) -> None:
        self._lock = threading.Lock()
        self._fix = PositionFix(running_status, float(distance_from_home))

    @classmethod
    def from_fix(cls, fix: PositionFix) -> "TrainPosition":
        return cls(fix.running_status, fix.distance_from_home)

    def snapshot(self) -> PositionFix:
        """Return the current position."""
        with self._lock:
            return self._fix

    def publish(self, fix: PositionFix) -> None:
        """Replace the current position with a new fix."""
        with self._lock:
            self._fix = fix

    def set_distance_from_home(self, distance_from_home: float) -> None:
        """Move the train, keeping its running status."""
        with self._lock:
            self._fix = replace(self._fix, distance_from_home=float(distance_from_home))

    @property
    def running_status(self) -> TrainRunningStatus:
        return self.snapshot().running_status

    @property
    def distance_from_home(self) -> float:
        return self.snapshot().distance_from_home

    def __repr__(self) -> str:
        fix = self.snapshot()
        return (
            f"TrainPosition(running_status={fix.running_status.value}, "
            f"distance_from_home={fix.distance_from_home:.2f})"
        )
