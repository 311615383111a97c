"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from section_controller.domain.models import GameSettings

BUNDLED_SECTION_FILE = Path(__file__).resolve().parents[2] / "data" / "CAL-SRR.toml"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Section data
    section_file: str | None = Field(
        default=None,
        description="Path to the section TOML file. Defaults to the bundled Calicut - Shoranur section",
    )
    section_length: float | None = Field(
        default=None,
        gt=0,
        description="Length of the section. Defaults to the section file's length or farthest station",
    )

    # Simulation
    nominal_speed: float = Field(
        default=60.0, gt=0, description="Nominal train speed in distance units per hour"
    )
    runner_interval_seconds: float = Field(
        default=2.0, gt=0, description="Interval between train position updates in seconds"
    )
    lookahead_minutes: int = Field(
        default=60,
        ge=0,
        description="Load trains that enter the section within this many minutes",
    )
    interpolate_runner_positions: bool = Field(
        default=False,
        description="Move trains along their timetable instead of at nominal speed from section entry",
    )
    timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone of the section's timetables (IANA timezone name)",
    )

    # Console presentation
    snapshot_interval_seconds: float = Field(
        default=10.0, gt=0, description="Interval between logged snapshots in seconds"
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    # TOML config file path, overlays the [simulation] table onto the settings above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with a [simulation] table",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that ignores the .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got {v!r}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging level names."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    def apply_config_file(self) -> "AppConfig":
        """Overlay settings from the [simulation] table of the TOML config file, if set."""
        if not self.config_file:
            return self

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        simulation = toml_data.get("simulation", {})
        if not isinstance(simulation, dict):
            raise ValueError("TOML config 'simulation' must be a table")
        values = self.model_dump()
        values.update({key: value for key, value in simulation.items() if key in values})
        # Re-validate so values from the file get the same checks as the environment
        validated = type(self).for_testing(**values)
        for key in simulation:
            if key in values:
                setattr(self, key, getattr(validated, key))
        return self

    def get_section_file(self) -> Path:
        """Return the path of the section file to load."""
        if self.section_file:
            return Path(self.section_file)
        return BUNDLED_SECTION_FILE

    def game_settings(self) -> GameSettings:
        """Return the settings of a game session."""
        return GameSettings(
            runner_interval_seconds=self.runner_interval_seconds,
            nominal_speed=self.nominal_speed,
            section_length=self.section_length,
            lookahead_minutes=self.lookahead_minutes,
            interpolate_runner_positions=self.interpolate_runner_positions,
        )
