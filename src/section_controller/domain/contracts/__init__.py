"""Contracts (protocols) implemented by domain objects and adapters."""

from section_controller.domain.contracts.aspect_observer import AspectObserver
from section_controller.domain.contracts.clock import Clock
from section_controller.domain.contracts.periodic_scheduler import PeriodicSchedulerProtocol

__all__ = [
    "AspectObserver",
    "Clock",
    "PeriodicSchedulerProtocol",
]
