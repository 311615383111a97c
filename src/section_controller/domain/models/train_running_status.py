"""Train running status domain model."""

from enum import Enum


class TrainRunningStatus(str, Enum):
    """Whether a train is halted at a scheduled stop or running between stations."""

    SCHEDULED_STOP = "SCHEDULED_STOP"
    RUNNING_BETWEEN = "RUNNING_BETWEEN"
