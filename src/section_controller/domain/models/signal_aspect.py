"""Signal aspect domain model."""

from enum import Enum


class SignalAspect(str, Enum):
    """Displayed state of a station signal."""

    STOP = "STOP"
    CAUTION = "CAUTION"
    PROCEED = "PROCEED"
