"""Tests for the game session."""

import asyncio
import logging
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from section_controller.adapters.clock import FixedClock
from section_controller.adapters.scheduling import AsyncioPeriodicScheduler
from section_controller.application import Game, GameSettings
from section_controller.application.runners import TrainRunner
from section_controller.domain.exceptions import GameNotStartedError, SectionLoadError
from section_controller.domain.models import (
    SectionRecord,
    SignalAspect,
    StationRecord,
    TrainDirection,
    TrainRecord,
    TrainRunningStatus,
)
from tests.fakes import STATION_RECORDS, TRAIN_RECORDS, InMemorySectionRepository, at


def _scheduler() -> MagicMock:
    scheduler = MagicMock()
    scheduler.stop = AsyncMock()
    return scheduler


def _game(
    moment: datetime,
    repository: InMemorySectionRepository | None = None,
    settings: GameSettings | None = None,
    scheduler: MagicMock | None = None,
) -> Game:
    game = Game(
        repository or InMemorySectionRepository(),
        FixedClock(moment),
        scheduler or _scheduler(),
        settings,
    )
    game.load()
    return game


def _numbers(game: Game) -> list[str]:
    return [train.number for train in game.get_trains()]


def test_load_keeps_only_trains_running_now() -> None:
    """Given 05:10 on a Wednesday, when loading, then only train 2653 is on the section."""
    game = _game(at(5, 10))

    assert _numbers(game) == ["2653"]
    snapshot = game.get_trains()[0]
    assert snapshot.name == "Maveli Express"
    assert snapshot.direction is TrainDirection.AWAY_FROM_HOME
    assert snapshot.running_status is TrainRunningStatus.RUNNING_BETWEEN
    assert snapshot.distance_from_home == pytest.approx(41 / 45 * 5)


def test_load_includes_trains_about_to_enter() -> None:
    """Given half an hour before 2653 enters, when loading, then it is loaded outside the home end."""
    game = _game(at(4, 30))

    assert _numbers(game) == ["2653"]
    assert game.get_trains()[0].distance_from_home == pytest.approx(-30.0)


def test_lookahead_limits_trains_about_to_enter() -> None:
    """Given no lookahead, when loading before 2653 enters, then it is not loaded."""
    game = _game(at(4, 30), settings=GameSettings(lookahead_minutes=0))

    assert _numbers(game) == []


def test_load_picks_up_runs_that_started_yesterday() -> None:
    """Given 00:30, when loading, then the overnight runs that started the evening before are on the section."""
    game = _game(at(0, 30))

    trains = {train.number: train for train in game.get_trains()}
    assert sorted(trains) == ["16356", "22637"]
    assert trains["22637"].running_status is TrainRunningStatus.SCHEDULED_STOP
    assert trains["22637"].distance_from_home == 41
    assert trains["16356"].running_status is TrainRunningStatus.RUNNING_BETWEEN
    overnight = next(train for train in game.trains if train.number == "16356")
    assert overnight.timetable.get_section_entry_time() == at(23, 20, day=-1)


def test_run_on_the_section_wins_over_run_in_lookahead() -> None:
    """Given a lookahead covering tonight's run, when loading at 00:30, then yesterday's run still on the section is kept."""
    game = _game(at(0, 30), settings=GameSettings(lookahead_minutes=24 * 60))

    trains = {train.number: train for train in game.get_trains()}
    assert trains["22637"].running_status is TrainRunningStatus.SCHEDULED_STOP
    assert trains["22637"].distance_from_home == 41
    overnight = next(train for train in game.trains if train.number == "22637")
    assert overnight.timetable.get_section_entry_time() == at(23, 50, day=-1)


def test_load_respects_operating_days() -> None:
    """Given a Sunday-only train, when loading on Wednesday and on Sunday, then it runs only on Sunday."""
    assert "16307" not in _numbers(_game(at(9, 30)))
    assert "16307" in _numbers(_game(at(9, 30, day=4)))


def test_train_that_fails_to_load_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    """Given a train without stops, when loading, then it is logged and the other trains still load."""
    repository = InMemorySectionRepository(
        trains=[*TRAIN_RECORDS, TrainRecord(number="999", name="Ghost", direction="TowardsHome")]
    )

    with caplog.at_level(logging.ERROR):
        game = _game(at(5, 10), repository=repository)

    assert _numbers(game) == ["2653"]
    assert "Skipping train 999" in caplog.text


def test_section_without_stations_cannot_start() -> None:
    """Given a section with no stations, when loading, then GameNotStartedError is raised."""
    game = Game(InMemorySectionRepository(stations=[]), FixedClock(at(5, 0)), _scheduler())

    with pytest.raises(GameNotStartedError):
        game.load()


def test_duplicate_station_distances_cannot_start() -> None:
    """Given two stations at the same distance, when loading, then GameNotStartedError is raised."""
    repository = InMemorySectionRepository(
        stations=[
            *STATION_RECORDS,
            StationRecord(code="KTU", name="Kuttippuram", tracks=2, distance_from_home=41),
        ]
    )
    game = Game(repository, FixedClock(at(5, 0)), _scheduler())

    with pytest.raises(GameNotStartedError) as excinfo:
        game.load()

    assert "unique" in str(excinfo.value.__cause__)


def test_section_load_error_is_the_cause() -> None:
    """Given an unreadable section, when loading, then GameNotStartedError wraps the load error."""
    repository = MagicMock()
    repository.get_section.side_effect = SectionLoadError("Cannot read section file")
    game = Game(repository, FixedClock(at(5, 0)), _scheduler())

    with pytest.raises(GameNotStartedError, match="Unable to start game") as excinfo:
        game.load()

    assert isinstance(excinfo.value.__cause__, SectionLoadError)


def test_section_length_comes_from_settings_section_or_stations() -> None:
    """Given the three sources of section length, when loading, then they apply in priority order."""
    with_length = InMemorySectionRepository(section=SectionRecord(code="CAL-SRR", length=90))

    assert _game(at(5, 10)).section_length == 86
    assert _game(at(5, 10), repository=with_length).section_length == 90
    assert (
        _game(at(5, 10), repository=with_length, settings=GameSettings(section_length=100))
        .section_length
        == 100
    )


def test_section_length_before_load_raises() -> None:
    """Given a game not loaded, when asking for the section length, then GameNotStartedError is raised."""
    game = Game(InMemorySectionRepository(), FixedClock(at(5, 0)), _scheduler())

    with pytest.raises(GameNotStartedError):
        game.section_length


def test_snapshots_cannot_change_simulation_state() -> None:
    """Given snapshots, when trying to modify them, then they refuse and the game is unaffected."""
    game = _game(at(5, 10))
    train = game.get_trains()[0]
    station = game.get_stations()[0]

    with pytest.raises(ValidationError):
        train.distance_from_home = 0  # type: ignore[misc]
    with pytest.raises(ValidationError):
        station.aspects = (SignalAspect.PROCEED, SignalAspect.PROCEED)  # type: ignore[misc]

    assert game.get_trains()[0].distance_from_home == train.distance_from_home
    assert game.get_stations()[0].aspects == (SignalAspect.STOP, SignalAspect.STOP)


def test_stations_are_listed_with_their_aspects() -> None:
    """Given a loaded game, when listing stations, then each shows code, distance and aspects."""
    game = _game(at(5, 10))

    assert [(s.code, s.distance_from_home) for s in game.get_stations()] == [
        ("CAL", 0),
        ("TIR", 41),
        ("SRR", 86),
    ]


def test_set_station_aspect_updates_station_and_notifies_trains(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given train 2653 observing the section, when Tirur's signals are set, then the train hears the away change."""
    game = _game(at(5, 10))

    with caplog.at_level(logging.INFO):
        game.set_station_aspect("Tirur", SignalAspect.CAUTION, SignalAspect.PROCEED)

    tirur = next(s for s in game.get_stations() if s.code == "TIR")
    assert tirur.aspects == (SignalAspect.CAUTION, SignalAspect.PROCEED)
    assert "Train 2653 sees AWAY_FROM_HOME signal at TIR change STOP -> PROCEED" in caplog.text
    assert "Train 2653 sees TOWARDS_HOME" not in caplog.text


def test_set_aspect_of_unknown_station_raises() -> None:
    """Given no station of that name, when setting its aspect, then KeyError is raised."""
    game = _game(at(5, 10))

    with pytest.raises(KeyError, match="Palakkad"):
        game.set_station_aspect("Palakkad", SignalAspect.STOP, SignalAspect.STOP)


def test_start_before_load_raises() -> None:
    """Given a game not loaded, when starting, then GameNotStartedError is raised."""
    game = Game(InMemorySectionRepository(), FixedClock(at(5, 0)), _scheduler())

    with pytest.raises(GameNotStartedError):
        game.start()


def test_start_schedules_one_runner_per_train() -> None:
    """Given two trains on the section, when starting, then each gets a runner at the configured interval."""
    scheduler = _scheduler()
    game = _game(at(0, 30), scheduler=scheduler, settings=GameSettings(runner_interval_seconds=5))

    game.start()
    game.start()

    names = [c.args[0] for c in scheduler.schedule.call_args_list]
    assert sorted(names) == ["train-16356", "train-22637"]
    assert all(isinstance(c.args[1], TrainRunner) for c in scheduler.schedule.call_args_list)
    assert all(c.args[2] == 5 for c in scheduler.schedule.call_args_list)


@pytest.mark.parametrize(
    "interpolate,status,distance",
    [
        (False, TrainRunningStatus.RUNNING_BETWEEN, 52.0),
        (True, TrainRunningStatus.SCHEDULED_STOP, 41.0),
    ],
)
def test_runner_model_follows_setting(
    interpolate: bool, status: TrainRunningStatus, distance: float
) -> None:
    """Given the runner model setting, when 2653 runs at 05:52, then the matching model moves it."""
    scheduler = _scheduler()
    clock = FixedClock(at(5, 10))
    game = Game(
        InMemorySectionRepository(),
        clock,
        scheduler,
        GameSettings(interpolate_runner_positions=interpolate),
    )
    game.load()
    game.start()
    runner = scheduler.schedule.call_args.args[1]

    clock.set(at(5, 52))
    runner()

    train = game.get_trains()[0]
    assert train.running_status is status
    assert train.distance_from_home == pytest.approx(distance)


@pytest.mark.asyncio
async def test_stop_cancels_runners() -> None:
    """Given a started game, when stopping, then the scheduler is stopped."""
    scheduler = _scheduler()
    game = _game(at(5, 10), scheduler=scheduler)
    game.start()

    await game.stop()

    scheduler.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_running_game_moves_trains() -> None:
    """Given a game on the asyncio scheduler, when runners tick, then train positions are updated."""
    clock = FixedClock(at(5, 10))
    game = Game(
        InMemorySectionRepository(),
        clock,
        AsyncioPeriodicScheduler(),
        GameSettings(runner_interval_seconds=0.01),
    )
    game.load()

    game.start()
    clock.set(at(5, 30))
    await asyncio.sleep(0.05)
    await game.stop()

    assert game.get_trains()[0].distance_from_home == pytest.approx(30.0)


def test_timetable_for_builds_any_listed_train() -> None:
    """Given a train not running now, when asking for its timetable, then it is built in encounter order."""
    game = _game(at(5, 10))

    timetable = game.timetable_for("616")

    assert [entry.station.code for entry in timetable.entries] == ["SRR", "TIR", "CAL"]
    assert timetable.get_section_entry_time() == at(12, 30)


def test_timetable_for_unknown_train_raises() -> None:
    """Given no train with that number, when asking for its timetable, then KeyError is raised."""
    game = _game(at(5, 10))

    with pytest.raises(KeyError, match="12345"):
        game.timetable_for("12345")
