"""Settings of a game session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameSettings:
    """Tunable values of a game session."""

    runner_interval_seconds: float = 2.0
    nominal_speed: float = 60.0
    section_length: float | None = None  # None: from the section data
    lookahead_minutes: int = 60
    interpolate_runner_positions: bool = False
