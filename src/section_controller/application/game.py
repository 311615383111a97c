"""Game session: loads the section, runs the trains and exposes read-only views."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from section_controller.application.initializers import PositionLocator, TrainFactory
from section_controller.application.runners import TrainRunner
from section_controller.domain.exceptions import GameNotStartedError, SimulationError
from section_controller.domain.models import (
    GameSettings,
    SectionRecord,
    SignalAspect,
    Station,
    StationSnapshot,
    Timetable,
    Train,
    TrainDirection,
    TrainRecord,
    TrainSnapshot,
)

if TYPE_CHECKING:
    from section_controller.domain.contracts import Clock, PeriodicSchedulerProtocol
    from section_controller.domain.ports import SectionRepository

logger = logging.getLogger(__name__)


class Game:
    """One session of the game over a single section.

    ``load`` reads the stations and the trains that are on or about to enter the
    section, ``start`` schedules one runner per train, and ``stop`` cancels them.
    Presentation code polls ``get_trains`` and ``get_stations`` and sets signals through
    ``set_station_aspect``.
    """

    def __init__(
        self,
        repository: SectionRepository,
        clock: Clock,
        scheduler: PeriodicSchedulerProtocol,
        settings: GameSettings | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            repository: Source of the section and train data.
            clock: Source of the current time.
            scheduler: Runs the train runners.
            settings: Session settings; defaults apply when omitted.
        """
        self._repository = repository
        self._clock = clock
        self._scheduler = scheduler
        self._settings = settings or GameSettings()
        self._section: SectionRecord | None = None
        self._stations: list[Station] = []
        self._trains: list[Train] = []
        self._locator: PositionLocator | None = None
        self._factory: TrainFactory | None = None
        self._started = False

    @property
    def stations(self) -> tuple[Station, ...]:
        return tuple(self._stations)

    @property
    def trains(self) -> tuple[Train, ...]:
        return tuple(self._trains)

    @property
    def section_length(self) -> float:
        if self._locator is None:
            raise GameNotStartedError("Game has not been loaded")
        return self._locator.section_length

    def load(self) -> None:
        """Load the stations and the trains running now.

        A train that fails to load is logged and left out.

        Raises:
            GameNotStartedError: If the section cannot be loaded.
        """
        self._stations = self._load_stations()
        self._locator = PositionLocator(
            self._resolve_section_length(), self._settings.nominal_speed
        )
        self._factory = TrainFactory(self._repository, self._clock, self._locator)
        self._trains = self._load_trains(self._factory)

        for train in self._trains:
            for station in self._stations:
                station.add_observer_for_signal(train, train.direction)

        logger.info(
            f"Total trains on or within {self._settings.lookahead_minutes} minutes of "
            f"the section: {len(self._trains)}"
        )
        for train in self._trains:
            logger.info(f"  - {train.number} {train.name} ({train.direction.value})")

    def start(self) -> None:
        """Schedule one runner per loaded train."""
        if self._locator is None:
            raise GameNotStartedError("Game must be loaded before it is started")
        if self._started:
            logger.warning("Game already started")
            return

        for train in self._trains:
            runner = TrainRunner(
                train.timetable,
                train.train_position,
                self._clock,
                nominal_speed=self._settings.nominal_speed,
                locator=self._locator if self._settings.interpolate_runner_positions else None,
                direction=train.direction if self._settings.interpolate_runner_positions else None,
            )
            self._scheduler.schedule(
                f"train-{train.number}", runner, self._settings.runner_interval_seconds
            )
        self._started = True
        logger.info(f"Started {len(self._trains)} train runner(s)")

    async def stop(self) -> None:
        """Cancel every train runner."""
        await self._scheduler.stop()
        self._started = False
        logger.info("Stopped train runners")

    def get_trains(self) -> tuple[TrainSnapshot, ...]:
        """Return a snapshot of every train on the section."""
        snapshots = []
        for train in self._trains:
            fix = train.train_position.snapshot()
            snapshots.append(
                TrainSnapshot(
                    number=train.number,
                    name=train.name,
                    distance_from_home=fix.distance_from_home,
                    direction=train.direction,
                    running_status=fix.running_status,
                )
            )
        return tuple(snapshots)

    def get_stations(self) -> tuple[StationSnapshot, ...]:
        """Return a snapshot of every station on the section."""
        return tuple(
            StationSnapshot(
                code=station.code,
                name=station.name,
                distance_from_home=station.distance_from_home,
                aspects=station.get_aspects(),
            )
            for station in self._stations
        )

    def set_station_aspect(
        self,
        station_name: str,
        towards_home_aspect: SignalAspect,
        away_from_home_aspect: SignalAspect,
    ) -> None:
        """Set both signals of a station.

        Raises:
            KeyError: If no station has that name.
        """
        station = next((s for s in self._stations if s.name == station_name), None)
        if station is None:
            raise KeyError(f"No station named {station_name!r}")
        station.set_aspect(TrainDirection.TOWARDS_HOME, towards_home_aspect)
        station.set_aspect(TrainDirection.AWAY_FROM_HOME, away_from_home_aspect)

    def timetable_for(self, train_number: str, service_date: date | None = None) -> Timetable:
        """Build the timetable of any train listed on the section, running now or not.

        Raises:
            GameNotStartedError: If the game has not been loaded.
            KeyError: If no train has that number.
        """
        if self._factory is None:
            raise GameNotStartedError("Game must be loaded before building timetables")
        record = next(
            (r for r in self._repository.get_trains() if r.number == train_number), None
        )
        if record is None:
            raise KeyError(f"No train numbered {train_number!r}")
        return self._factory.build_timetable(
            record.number, record.direction, self._stations, service_date
        )

    def _load_stations(self) -> list[Station]:
        try:
            section = self._repository.get_section()
            records = self._repository.get_stations()
            if not records:
                raise ValueError(f"Section {section.code} has no stations")
            codes = [record.code.lower() for record in records]
            if len(codes) != len(set(codes)):
                raise ValueError(f"Station codes in section {section.code} must be unique")
            distances = [record.distance_from_home for record in records]
            if len(distances) != len(set(distances)):
                raise ValueError(f"Station distances in section {section.code} must be unique")
            stations = [
                Station(record.code, record.name, record.tracks, record.distance_from_home)
                for record in records
            ]
        except (SimulationError, ValueError) as e:
            logger.error(f"Failed to load section: {e}")
            raise GameNotStartedError() from e
        self._section = section
        logger.info(f"Loaded {len(stations)} station(s) on section {section.code}")
        return stations

    def _resolve_section_length(self) -> float:
        if self._settings.section_length is not None:
            return self._settings.section_length
        if self._section is not None and self._section.length is not None:
            return self._section.length
        return float(max(station.distance_from_home for station in self._stations))

    def _load_trains(self, factory: TrainFactory) -> list[Train]:
        try:
            records = self._repository.get_trains()
        except SimulationError as e:
            logger.error(f"Failed to load the train list: {e}")
            raise GameNotStartedError() from e

        now = self._clock.now()
        trains = []
        for record in records:
            train = self._load_train_if_running(factory, record, now)
            if train is not None:
                trains.append(train)
        return trains

    def _load_train_if_running(
        self, factory: TrainFactory, record: TrainRecord, now: datetime
    ) -> Train | None:
        """Create the train if its run covers now, trying yesterday's run for overnight trains.

        A run already on the section wins over one that is only about to enter it, so
        yesterday's overnight run is kept while today's run is still in the lookahead.
        """
        lookahead = timedelta(minutes=self._settings.lookahead_minutes)
        today = now.date()
        approaching: Train | None = None
        for service_date in (today, today - timedelta(days=1)):
            if not record.operates_on(service_date.weekday()):
                continue
            try:
                train = factory.create(
                    record.number, record.name, record.direction, self._stations, service_date
                )
            except SimulationError as e:
                logger.error(f"Skipping train {record.number}: {e}")
                return None
            timetable = train.timetable
            entry_time = timetable.get_section_entry_time()
            if not entry_time - lookahead <= now <= timetable.get_section_exit_time():
                continue
            if entry_time <= now:
                return train
            if approaching is None:
                approaching = train
        if approaching is None:
            logger.debug(f"Train {record.number} is not running at {now.isoformat()}")
        return approaching
