"""Cron scheduling of the poll job."""

from .core import CronScheduler
from .cron_parser import CronSchedule, InvalidScheduleError
from .executor import PollJob

__all__ = [
    "CronScheduler",
    "CronSchedule",
    "InvalidScheduleError",
    "PollJob"
]
