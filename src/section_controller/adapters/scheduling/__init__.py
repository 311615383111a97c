"""Scheduling adapters."""

from section_controller.adapters.scheduling.periodic_scheduler import AsyncioPeriodicScheduler

__all__ = ["AsyncioPeriodicScheduler"]
