"""Exceptions raised by the simulation engine."""


class SimulationError(Exception):
    """Base class for simulation errors."""


class SectionLoadError(SimulationError):
    """The section definition could not be read or is malformed."""


class TrainLoadError(SimulationError):
    """A train's definition or stops could not be read or are malformed."""


class TimetableError(SimulationError):
    """A timetable was used in a way its preconditions do not allow."""


class TrainPositionError(SimulationError):
    """No position could be determined for a train from its timetable."""


class GameNotStartedError(SimulationError):
    """The game session could not be started. The cause is chained as ``__cause__``."""

    def __init__(self, message: str = "Unable to start game") -> None:
        super().__init__(message)
