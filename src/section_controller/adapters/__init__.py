"""Adapters layer - configuration, data files, clocks and scheduling."""

from section_controller.adapters.clock import FixedClock, SystemClock
from section_controller.adapters.config import AppConfig
from section_controller.adapters.data import TomlSectionRepository
from section_controller.adapters.scheduling import AsyncioPeriodicScheduler

__all__ = [
    "AppConfig",
    "AsyncioPeriodicScheduler",
    "FixedClock",
    "SystemClock",
    "TomlSectionRepository",
]
