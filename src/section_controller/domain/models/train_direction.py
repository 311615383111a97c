"""Train direction domain model."""

from enum import Enum


class TrainDirection(str, Enum):
    """Direction of travel relative to the home end of the section (distance 0)."""

    TOWARDS_HOME = "TOWARDS_HOME"
    AWAY_FROM_HOME = "AWAY_FROM_HOME"

    @classmethod
    def parse(cls, value: "str | TrainDirection") -> "TrainDirection":
        """Parse a direction from section data.

        Accepts the enum itself, its name, or the section file spellings
        "TowardsHome" and "AwayFromHome".

        Raises:
            ValueError: If the value names no known direction.
        """
        if isinstance(value, TrainDirection):
            return value
        normalized = value.strip().replace("_", "").replace("-", "").lower()
        if normalized == "towardshome":
            return cls.TOWARDS_HOME
        if normalized == "awayfromhome":
            return cls.AWAY_FROM_HOME
        raise ValueError(f"Unknown train direction: {value!r}")
