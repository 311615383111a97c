"""Periodic scheduler running jobs as asyncio tasks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from section_controller.domain.contracts import PeriodicSchedulerProtocol

logger = logging.getLogger(__name__)


class AsyncioPeriodicScheduler(PeriodicSchedulerProtocol):
    """Runs each job in its own asyncio task with a fixed delay between runs.

    Runs of one job never overlap. A job that raises is logged and not run again;
    the other jobs keep running.
    """

    def __init__(self) -> None:
        """Initialize the scheduler with no jobs."""
        self._tasks: dict[str, asyncio.Task] = {}

    @property
    def job_names(self) -> list[str]:
        return [name for name, task in self._tasks.items() if not task.done()]

    def schedule(self, name: str, job: Callable[[], None], period_seconds: float) -> None:
        """Register a job. Must be called while the event loop is running.

        Args:
            name: Name used when logging the job.
            job: The callable to run.
            period_seconds: Delay before the first run and between runs.
        """
        existing = self._tasks.get(name)
        if existing is not None and not existing.done():
            logger.warning(f"Job {name} already scheduled")
            return
        self._tasks[name] = asyncio.create_task(self._run(name, job, period_seconds), name=name)
        logger.debug(f"Scheduled job {name} every {period_seconds}s")

    async def stop(self) -> None:
        """Cancel every job and wait for them to finish."""
        tasks = [task for task in self._tasks.values() if not task.done()]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        if tasks:
            logger.info(f"Cancelled {len(tasks)} job(s)")

    async def _run(self, name: str, job: Callable[[], None], period_seconds: float) -> None:
        try:
            while True:
                await asyncio.sleep(period_seconds)
                try:
                    job()
                except Exception:
                    logger.exception(f"Job {name} failed, it will not be run again")
                    return
        except asyncio.CancelledError:
            logger.debug(f"Job {name} cancelled")
            raise
