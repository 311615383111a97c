"""Recurring job that moves one train along the section."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from section_controller.application.initializers.position_locator import SECONDS_PER_HOUR

if TYPE_CHECKING:
    from section_controller.application.initializers.position_locator import PositionLocator
    from section_controller.domain.contracts import Clock
    from section_controller.domain.models import Timetable, TrainDirection, TrainPosition

logger = logging.getLogger(__name__)


class TrainRunner:
    """Updates a train's position from its timetable and the current time.

    The runner keeps no state between runs; it is meant to be run over and over by a
    periodic scheduler, each run moving the train a little further.

    By default the train is moved as if it ran at the nominal speed from the moment it
    entered the section, measured from the entry station, without regard to direction
    or intermediate stops. When given a ``PositionLocator`` and the train's direction,
    the runner instead publishes the full timetable position, the same one used when
    the train is created.
    """

    def __init__(
        self,
        timetable: Timetable,
        train_position: TrainPosition,
        clock: Clock,
        nominal_speed: float = 60.0,
        locator: PositionLocator | None = None,
        direction: TrainDirection | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            timetable: The train's timetable.
            train_position: The position this runner updates.
            clock: Source of the current time.
            nominal_speed: Speed in distance units per hour for the simple model.
            locator: Enables the timetable model when given together with ``direction``.
            direction: The train's direction, needed by the timetable model.
        """
        if (locator is None) != (direction is None):
            raise ValueError("locator and direction must be given together")
        self._timetable = timetable
        self._train_position = train_position
        self._clock = clock
        self._nominal_speed = nominal_speed
        self._locator = locator
        self._direction = direction

    def __call__(self) -> None:
        """Move the train to where it should be now."""
        now = self._clock.now()
        if self._locator is not None and self._direction is not None:
            self._train_position.publish(self._locator.locate(self._timetable, self._direction, now))
            return

        entry_time = self._timetable.get_section_entry_time()
        if entry_time < now:
            elapsed_seconds = (now - entry_time).total_seconds()
            self._train_position.set_distance_from_home(
                self._nominal_speed * elapsed_seconds / SECONDS_PER_HOUR
            )
