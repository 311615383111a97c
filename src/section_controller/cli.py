"""CLI for inspecting a section and its trains without running the simulation."""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import Any

from section_controller.adapters import (
    AppConfig,
    AsyncioPeriodicScheduler,
    FixedClock,
    SystemClock,
    TomlSectionRepository,
)
from section_controller.application import Game
from section_controller.domain.contracts import Clock
from section_controller.domain.exceptions import SimulationError
from section_controller.domain.models import Timetable

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M"


def build_game(config: AppConfig, clock: Clock) -> Game:
    """Create and load a game over the configured section."""
    game = Game(
        TomlSectionRepository(config.get_section_file()),
        clock,
        AsyncioPeriodicScheduler(),
        config.game_settings(),
    )
    game.load()
    return game


def stations_data(game: Game) -> list[dict[str, Any]]:
    """Return the stations of the section as JSON-ready dicts."""
    return [station.model_dump(mode="json") for station in game.get_stations()]


def positions_data(game: Game) -> list[dict[str, Any]]:
    """Return the trains on the section as JSON-ready dicts."""
    return [train.model_dump(mode="json") for train in game.get_trains()]


def timetable_data(timetable: Timetable) -> list[dict[str, Any]]:
    """Return every entry of a timetable, pass-through stations included."""
    rows = []
    for entry in timetable.entries:
        schedule = entry.schedule
        rows.append(
            {
                "code": entry.station.code,
                "name": entry.station.name,
                "distance_from_home": entry.station.distance_from_home,
                "arrival_time": (
                    schedule.arrival_time.strftime(TIME_FORMAT) if schedule else None
                ),
                "departure_time": (
                    schedule.departure_time.strftime(TIME_FORMAT) if schedule else None
                ),
            }
        )
    return rows


def _print_stations(rows: list[dict[str, Any]]) -> None:
    for row in rows:
        towards, away = row["aspects"]
        print(
            f"{row['code']:<6} {row['name']:<20} {row['distance_from_home']:>5}  "
            f"towards home: {towards:<8} away from home: {away}"
        )


def _print_timetable(rows: list[dict[str, Any]]) -> None:
    for row in rows:
        if row["arrival_time"] is None:
            print(f"{row['code']:<6} {row['name']:<20} {row['distance_from_home']:>5}  (passes)")
        else:
            print(
                f"{row['code']:<6} {row['name']:<20} {row['distance_from_home']:>5}  "
                f"{row['arrival_time']} - {row['departure_time']}"
            )


def _print_positions(rows: list[dict[str, Any]]) -> None:
    if not rows:
        print("No trains on the section.")
    for row in rows:
        print(
            f"{row['number']:<6} {row['name']:<28} {row['direction']:<13} "
            f"{row['running_status']:<16} {row['distance_from_home']:.1f}"
        )


def _parse_moment(value: str) -> datetime:
    try:
        moment = datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"expected an ISO date and time such as 2024-05-01T05:10, got {value!r}"
        ) from e
    if moment.tzinfo is not None:
        raise argparse.ArgumentTypeError("give the section's local time without a UTC offset")
    return moment


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"expected an ISO date such as 2024-05-01, got {value!r}"
        ) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Section controller inspection tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the stations of the section and their signals
  section-controller-cli stations

  # Show the timetable of a train
  section-controller-cli timetable 2653

  # Show where the trains are at a given moment
  section-controller-cli positions --at 2024-05-01T05:10
        """,
    )
    parser.add_argument("--section-file", help="Section TOML file to read")
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("stations", help="List the stations of the section")

    timetable_parser = subparsers.add_parser("timetable", help="Show the timetable of a train")
    timetable_parser.add_argument("train_number", help="Train number (e.g., 2653)")
    timetable_parser.add_argument(
        "--date", type=_parse_date, help="Date the run starts on. Defaults to today"
    )

    positions_parser = subparsers.add_parser(
        "positions", help="Show the trains on the section and where they are"
    )
    positions_parser.add_argument(
        "--at", type=_parse_moment, help="Moment to locate the trains at. Defaults to now"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    overrides = {"section_file": args.section_file} if args.section_file else {}
    config = AppConfig(**overrides).apply_config_file()

    moment = getattr(args, "at", None)
    clock: Clock = FixedClock(moment) if moment else SystemClock(config.timezone)

    try:
        game = build_game(config, clock)
        if args.command == "stations":
            rows = stations_data(game)
            printer = _print_stations
        elif args.command == "timetable":
            rows = timetable_data(game.timetable_for(args.train_number, args.date))
            printer = _print_timetable
        else:
            rows = positions_data(game)
            printer = _print_positions
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    except SimulationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(rows, indent=2, ensure_ascii=False))
    else:
        printer(rows)
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
