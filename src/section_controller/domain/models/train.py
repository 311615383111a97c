"""Train domain model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from section_controller.domain.models.aspect_change import AspectChange
    from section_controller.domain.models.timetable import Timetable
    from section_controller.domain.models.train_direction import TrainDirection
    from section_controller.domain.models.train_position import TrainPosition

logger = logging.getLogger(__name__)


class Train:
    """A train running on the section.

    The number is a string because train numbers can carry letters or leading zeros,
    e.g. "4021A" or "03064". The train owns its timetable and position; only its
    runner writes the position after creation.
    """

    def __init__(
        self,
        number: str,
        name: str,
        direction: TrainDirection,
        timetable: Timetable,
        train_position: TrainPosition,
    ) -> None:
        """Initialize the train.

        Args:
            number: The train number.
            name: The train name.
            direction: Direction of travel, fixed for the train's lifetime.
            timetable: The train's corrected timetable.
            train_position: The train's position when the game loads.
        """
        self._number = number
        self._name = name
        self._direction = direction
        self._timetable = timetable
        self._train_position = train_position

    @property
    def number(self) -> str:
        return self._number

    @property
    def name(self) -> str:
        return self._name

    @property
    def direction(self) -> TrainDirection:
        return self._direction

    @property
    def timetable(self) -> Timetable:
        return self._timetable

    @property
    def train_position(self) -> TrainPosition:
        return self._train_position

    @property
    def distance_from_home(self) -> float:
        return self._train_position.distance_from_home

    def on_aspect_changed(self, change: AspectChange) -> None:
        """Receive an aspect change from a station the train observes."""
        logger.info(
            f"Train {self._number} sees {change.direction.value} signal at {change.station_code} "
            f"change {change.old_aspect.value} -> {change.new_aspect.value}"
        )

    def __repr__(self) -> str:
        return f"Train(number={self._number!r}, direction={self._direction.value})"
