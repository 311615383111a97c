"""Protocol for running recurring jobs."""

from collections.abc import Callable
from typing import Protocol


class PeriodicSchedulerProtocol(Protocol):
    """Runs callables repeatedly with a fixed delay between runs."""

    def schedule(self, name: str, job: Callable[[], None], period_seconds: float) -> None:
        """Register a job that first runs after one period, then every period.

        Args:
            name: Name used when logging the job.
            job: The callable to run.
            period_seconds: Delay between the end of one run and the start of the next.
        """
        ...

    async def stop(self) -> None:
        """Cancel every registered job."""
        ...
