"""Raw section and train records, as read from section data files."""

from datetime import datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from section_controller.domain.models.train_direction import TrainDirection

DAILY = "Daily"
DAY_CODES = ("M", "Tu", "W", "Th", "F", "Sa", "Su")  # Indexed by date.weekday()


class SectionRecord(BaseModel):
    """Identity of the section."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    name: str = ""
    length: float | None = Field(default=None, gt=0)


class StationRecord(BaseModel):
    """A station as defined in the section file."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    name: str
    tracks: int = Field(ge=1, le=3)
    distance_from_home: int = Field(ge=0)


class StopRecord(BaseModel):
    """One stop of a train with bare clock times."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    arrival_time: time
    departure_time: time

    @field_validator("arrival_time", "departure_time", mode="before")
    @classmethod
    def parse_clock_time(cls, v: Any) -> Any:
        """Parse "HH:MM" strings; times already parsed by the TOML reader pass through."""
        if isinstance(v, str):
            try:
                return datetime.strptime(v.strip(), "%H:%M").time()
            except ValueError as e:
                raise ValueError(f"time must be formatted HH:MM, got {v!r}") from e
        return v


class TrainRecord(BaseModel):
    """A train as listed in the section file."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(min_length=1)
    name: str
    direction: TrainDirection
    days: tuple[str, ...] = (DAILY,)

    @field_validator("number", mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> Any:
        """Accept numeric train numbers written without quotes."""
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, v: Any) -> Any:
        """Accept "TowardsHome" / "AwayFromHome" as written in section files."""
        if isinstance(v, str):
            return TrainDirection.parse(v)
        return v

    @field_validator("days", mode="before")
    @classmethod
    def parse_days(cls, v: Any) -> Any:
        """Accept "Daily", a space separated string of day codes, or a list of day codes."""
        if isinstance(v, str):
            v = v.split()
        if not isinstance(v, list | tuple):
            raise ValueError(f"days must be a string or a list of day codes, got {v!r}")
        days = tuple(v)
        for day in days:
            if day != DAILY and day not in DAY_CODES:
                raise ValueError(f"unknown day code {day!r}, expected {DAILY} or one of {DAY_CODES}")
        return days

    def operates_on(self, weekday: int) -> bool:
        """Check whether the train runs on a weekday (0 is Monday)."""
        return DAILY in self.days or DAY_CODES[weekday] in self.days
