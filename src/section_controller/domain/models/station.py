"""Station domain model."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from section_controller.domain.models.aspect_change import AspectChange
from section_controller.domain.models.signal_aspect import SignalAspect
from section_controller.domain.models.track import Track, TrackType
from section_controller.domain.models.train_direction import TrainDirection

if TYPE_CHECKING:
    from section_controller.domain.contracts.aspect_observer import AspectObserver

logger = logging.getLogger(__name__)

_TRACK_LAYOUT = (TrackType.MAIN_TRACK, TrackType.LOOP_TRACK, TrackType.LOOP_TRACK)


class Station:
    """A station on the section.

    A station owns one main track and up to two loop tracks, and shows one signal
    aspect for each direction of travel. Aspects are set station-wide: every track
    carries the same aspect for a given direction. Trains register per direction to
    be told when that direction's aspect is set.
    """

    def __init__(self, code: str, name: str, track_count: int, distance_from_home: int) -> None:
        """Initialize the station with every aspect at STOP.

        Args:
            code: Unique station code, e.g. "CAL".
            name: Display name.
            track_count: Number of tracks, 1 to 3 (one main plus loop tracks).
            distance_from_home: Distance from the home end of the section.

        Raises:
            ValueError: If the track count or distance is out of range.
        """
        if not 1 <= track_count <= len(_TRACK_LAYOUT):
            raise ValueError(f"Station {code} must have between 1 and 3 tracks, got {track_count}")
        if distance_from_home < 0:
            raise ValueError(
                f"Station {code} distance from home must be non-negative, got {distance_from_home}"
            )
        self._code = code
        self._name = name
        self._distance_from_home = distance_from_home
        self._tracks = [Track(track_type) for track_type in _TRACK_LAYOUT[:track_count]]
        # Points at both ends of the station are set to the main track.
        self._points = [TrackType.MAIN_TRACK, TrackType.MAIN_TRACK]
        self._observers: dict[TrainDirection, list[AspectObserver]] = {
            TrainDirection.TOWARDS_HOME: [],
            TrainDirection.AWAY_FROM_HOME: [],
        }
        self._lock = threading.RLock()

    @property
    def code(self) -> str:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def distance_from_home(self) -> int:
        return self._distance_from_home

    @property
    def tracks(self) -> tuple[Track, ...]:
        return tuple(self._tracks)

    @property
    def points(self) -> tuple[TrackType, ...]:
        return tuple(self._points)

    def has_code(self, code: str) -> bool:
        """Check whether this station has the given code, ignoring case."""
        return self._code.lower() == code.lower()

    def get_aspect(self, direction: TrainDirection) -> SignalAspect:
        with self._lock:
            return self._tracks[0].get_aspect(direction)

    def get_aspects(self) -> tuple[SignalAspect, SignalAspect]:
        """Return the (towards home, away from home) aspects of the station."""
        with self._lock:
            return self._tracks[0].get_aspects()

    def set_aspect(self, direction: TrainDirection, aspect: SignalAspect) -> None:
        """Set the aspect for one direction on every track and notify that direction's observers.

        Any aspect may follow any other. Observers registered for the other direction
        are not notified.

        Args:
            direction: The direction whose signal is set.
            aspect: The new aspect.
        """
        with self._lock:
            old_aspect = self._tracks[0].get_aspect(direction)
            for track in self._tracks:
                track.set_aspect(direction, aspect)
            change = AspectChange(
                station_code=self._code,
                direction=direction,
                old_aspect=old_aspect,
                new_aspect=aspect,
            )
            logger.debug(
                f"Station {self._code}: {direction.value} aspect {old_aspect.value} -> {aspect.value}"
            )
            for observer in list(self._observers[direction]):
                try:
                    observer.on_aspect_changed(change)
                except Exception:
                    logger.exception(
                        f"Observer {observer!r} failed to handle aspect change at {self._code}"
                    )

    def add_observer_for_signal(self, observer: AspectObserver, direction: TrainDirection) -> None:
        """Register an observer for aspect changes in one direction."""
        with self._lock:
            observers = self._observers[direction]
            if observer not in observers:
                observers.append(observer)

    def remove_observer_for_signal(
        self, observer: AspectObserver, direction: TrainDirection
    ) -> None:
        """Deregister an observer from one direction. Unknown observers are ignored."""
        with self._lock:
            observers = self._observers[direction]
            if observer in observers:
                observers.remove(observer)

    def __repr__(self) -> str:
        return f"Station(code={self._code!r}, distance_from_home={self._distance_from_home})"
