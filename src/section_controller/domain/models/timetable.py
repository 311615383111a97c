"""Timetable domain model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from section_controller.domain.exceptions import TimetableError
from section_controller.domain.models.station import Station
from section_controller.domain.models.train_direction import TrainDirection
from section_controller.domain.models.train_schedule import TrainSchedule

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class TimetableEntry:
    """A station the train passes, with its schedule if the train stops there."""

    station: Station
    schedule: TrainSchedule | None = None


class Timetable:
    """The timetable of one train over the whole section.

    There is an entry for every station on the section, in the order the train
    encounters them: ascending distance from home for trains moving away from home,
    descending for trains moving towards home. Only the stations where the train
    stops carry a schedule.

    Raw stop times carry no date, so a run that passes midnight looks like it goes
    back in time. ``update`` corrects the dates as stops are added, which is why
    stops must be added in encounter order.
    """

    def __init__(self, stations_on_section: Iterable[Station], direction: TrainDirection) -> None:
        """Create a timetable with one schedule-less entry per station.

        Args:
            stations_on_section: Stations on the section, in any order. Distances must be unique.
            direction: The train's direction, which fixes the encounter order.
        """
        self._direction = direction
        ordered = sorted(
            stations_on_section,
            key=lambda station: station.distance_from_home,
            reverse=direction == TrainDirection.TOWARDS_HOME,
        )
        self._entries: list[TimetableEntry] = [TimetableEntry(station) for station in ordered]

    @property
    def direction(self) -> TrainDirection:
        return self._direction

    @property
    def entries(self) -> tuple[TimetableEntry, ...]:
        return tuple(self._entries)

    def update(self, station: Station, arrival_time: datetime, departure_time: datetime) -> None:
        """Insert or replace the schedule of a station, correcting dates for overnight runs.

        1. If the departure is before the arrival, the stop straddles midnight and the
           departure moves to the next day.
        2. If the nearest earlier stop departs after this arrival, midnight was crossed
           before reaching this station and both times move to the next day.

        Rule 2 only sees stops that are already in the timetable, so calls must be made
        in encounter order.

        Args:
            station: The station where the train stops.
            arrival_time: Arrival at the station.
            departure_time: Departure from the station.

        Raises:
            TimetableError: If the station is not on the section.
        """
        if departure_time < arrival_time:
            departure_time += _ONE_DAY

        index = self._index_of(station.code)
        previous = self._previous_schedule(index)
        if previous is not None and previous.departure_time > arrival_time:
            arrival_time += _ONE_DAY
            departure_time += _ONE_DAY

        entry_station = self._entries[index].station
        self._entries[index] = TimetableEntry(
            entry_station,
            TrainSchedule(
                station_code=entry_station.code,
                arrival_time=arrival_time,
                departure_time=departure_time,
                distance=entry_station.distance_from_home,
            ),
        )

    def get_section_entry_time(self) -> datetime:
        """Return the arrival time at the first station the train encounters.

        Raises:
            TimetableError: If the first station has no schedule.
        """
        return self._required_schedule(self._entries[0]).arrival_time

    def get_section_exit_time(self) -> datetime:
        """Return the departure time from the last station the train encounters.

        Raises:
            TimetableError: If the last station has no schedule.
        """
        return self._required_schedule(self._entries[-1]).departure_time

    def get_station_halted_at(self, moment: datetime) -> Station | None:
        """Return the station the train is halted at, or None if it is not at any stop."""
        for entry in self._entries:
            if entry.schedule is not None and entry.schedule.contains(moment):
                return entry.station
        return None

    def get_stations_travelling_between(
        self, moment: datetime
    ) -> tuple[Station | None, Station | None]:
        """Return the (last departed, next arriving) stations the train runs between.

        Both are None when the train is at a stop or outside its running window.
        """
        stops = [
            (entry.station, entry.schedule) for entry in self._entries if entry.schedule is not None
        ]
        for (previous, departed), (upcoming, arriving) in zip(stops, stops[1:]):
            if departed.departure_time < moment < arriving.arrival_time:
                return previous, upcoming
        return None, None

    def get_schedule(self, station: Station) -> TrainSchedule | None:
        """Return the schedule at a station, or None if the train passes through."""
        for entry in self._entries:
            if entry.station.has_code(station.code):
                return entry.schedule
        return None

    def scheduled_stops(self) -> list[TrainSchedule]:
        """Return the schedules of every stop, in encounter order."""
        return [entry.schedule for entry in self._entries if entry.schedule is not None]

    def runs_overnight(self) -> bool:
        """Check whether the train leaves the section on a later date than it enters."""
        return self.get_section_exit_time().date() > self.get_section_entry_time().date()

    def _index_of(self, station_code: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.station.has_code(station_code):
                return index
        raise TimetableError(f"Station {station_code} is not on the section")

    def _previous_schedule(self, index: int) -> TrainSchedule | None:
        for entry in reversed(self._entries[:index]):
            if entry.schedule is not None:
                return entry.schedule
        return None

    @staticmethod
    def _required_schedule(entry: TimetableEntry) -> TrainSchedule:
        if entry.schedule is None:
            raise TimetableError(f"Station {entry.station.code} has no schedule in the timetable")
        return entry.schedule
