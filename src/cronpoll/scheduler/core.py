"""Core scheduler implementation using APScheduler."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, Callable, Dict, Optional
import logging

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from ..config import Settings
from ..executors import HTTPExecutor
from .cron_parser import CronSchedule
from .executor import PollJob

logger = logging.getLogger(__name__)

JOB_ID = "poll"

DEFAULT_JOB_DEFAULTS = {
    "coalesce": True,
    "max_instances": 1,
    "misfire_grace_time": 30
}


class CronScheduler:
    """Runs one job on a cron schedule.

    Missed fire times are coalesced into a single run and a run never
    overlaps the previous one.
    """

    def __init__(self, schedule: CronSchedule, job: Callable[[], Awaitable[Any]],
                 job_defaults: Optional[Dict[str, Any]] = None):
        self.schedule = schedule
        self.job = job
        self.job_defaults = job_defaults or DEFAULT_JOB_DEFAULTS
        self.scheduler = None
        self.run_count = 0
        self.error_count = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "CronScheduler":
        """Build the IP poller described by the settings.

        Raises:
            InvalidScheduleError: If the schedule expression is invalid.
        """
        tz = timezone(timedelta(minutes=settings.scheduler_utc_offset))
        schedule = CronSchedule(settings.schedule_expression, tz)
        job = PollJob(HTTPExecutor(timeout=settings.http_timeout), settings.poll_url)
        return cls(schedule, job, job_defaults=settings.scheduler_job_defaults)

    def start(self):
        """Start the scheduler on the running event loop."""
        if self.running:
            return

        self.scheduler = AsyncIOScheduler(
            jobstores={'default': MemoryJobStore()},
            executors={'default': AsyncIOExecutor()},
            job_defaults=self.job_defaults,
            timezone=self.schedule.tz
        )
        self.scheduler.add_job(
            func=self._run_job,
            trigger=self.schedule.trigger,
            id=JOB_ID,
            name=f"poll ({self.schedule.expression})",
            replace_existing=True
        )
        self.scheduler.start()
        logger.info(f"Scheduler started with '{self.schedule.expression}' ({self.schedule.tz})")

    async def _run_job(self):
        self.run_count += 1
        try:
            await self.job()
        except Exception as e:
            self.error_count += 1
            logger.error(f"Scheduled job failed: {e}", exc_info=True)

    def get_next_run_time(self) -> Optional[datetime]:
        """Next fire time of the job, or None when not running."""
        if not self.running:
            return None
        job = self.scheduler.get_job(JOB_ID)
        return job.next_run_time if job else None

    async def shutdown(self):
        """Shutdown the scheduler, cancelling a run in progress."""
        if self.running:
            self.scheduler.shutdown(wait=False)
            # APScheduler applies the shutdown on the next loop iteration
            await asyncio.sleep(0)
            logger.info("Scheduler shut down")

    @property
    def running(self) -> bool:
        """Whether the scheduler is currently running."""
        return self.scheduler is not None and self.scheduler.running
