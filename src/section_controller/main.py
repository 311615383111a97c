"""Main entry point for the section controller simulation."""

import asyncio
import logging
import sys

from section_controller.adapters import (
    AppConfig,
    AsyncioPeriodicScheduler,
    SystemClock,
    TomlSectionRepository,
)
from section_controller.application import Game
from section_controller.domain.exceptions import GameNotStartedError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def log_snapshots(game: Game) -> None:
    """Log where every train is and what every signal shows."""
    for station in game.get_stations():
        towards, away = station.aspects
        logger.info(
            f"Station {station.code} at {station.distance_from_home}: "
            f"towards home {towards.value}, away from home {away.value}"
        )
    for train in game.get_trains():
        logger.info(
            f"Train {train.number} {train.name} ({train.direction.value}): "
            f"{train.running_status.value} at {train.distance_from_home:.1f}"
        )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig().apply_config_file()
    logging.getLogger().setLevel(config.log_level)

    section_file = config.get_section_file()
    logger.info(f"Using section file {section_file}")

    scheduler = AsyncioPeriodicScheduler()
    game = Game(
        TomlSectionRepository(section_file),
        SystemClock(config.timezone),
        scheduler,
        config.game_settings(),
    )

    try:
        game.load()
    except GameNotStartedError as e:
        logger.error(f"{e}: check the section file {section_file}")
        sys.exit(1)

    game.start()
    try:
        while True:
            log_snapshots(game)
            await asyncio.sleep(config.snapshot_interval_seconds)
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("Shutting down...")
    finally:
        await game.stop()


def run() -> None:
    """Synchronous entry point for the console script."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
