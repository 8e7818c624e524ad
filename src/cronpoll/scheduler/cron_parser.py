"""Cron expression parsing and validation.

Expressions carry a seconds field first, with an optional year::

    second minute hour day month day_of_week [year]

Numeric days of the week run from 1 (Sunday) to 7 (Saturday). Day names
(``mon-fri``) are accepted as well. Day of month and day of week must both
match for a date to fire.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict
import logging

from apscheduler.triggers.cron import CronTrigger

logger = logging.getLogger(__name__)

FIELD_NAMES = ("second", "minute", "hour", "day", "month", "day_of_week", "year")

# Index 0 is day 1
WEEKDAYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")


class InvalidScheduleError(ValueError):
    """Raised when a cron expression cannot be parsed."""


def _day_of_week(value: str) -> str:
    """Translate numeric day_of_week items into day names."""
    items = []
    for item in value.lower().split(","):
        expr, _, step = item.partition("/")
        if not step and not any(ch.isdigit() for ch in expr):
            items.append(item)
            continue

        try:
            if expr == "*":
                first, last = 1, 7
            elif "-" in expr:
                first, last = (int(part) for part in expr.split("-", 1))
            else:
                first = int(expr)
                last = 7 if step else first
            step = int(step) if step else 1
        except ValueError:
            raise InvalidScheduleError(f"Invalid day_of_week value '{item}'") from None

        if not 1 <= first <= last <= 7 or step < 1:
            raise InvalidScheduleError(f"day_of_week '{item}' is outside 1-7")
        items.extend(WEEKDAYS[day - 1] for day in range(first, last + 1, step))

    return ",".join(items)


def parse_cron(expression: str) -> Dict[str, str]:
    """Parse a 6 or 7 field cron expression into a dict for CronTrigger.

    Format: "second minute hour day month day_of_week [year]"
    Example: "1/50 * * * * *" -> {"second": "1/50", "minute": "*", ...}

    Raises:
        InvalidScheduleError: If the expression doesn't have 6 or 7 fields.
    """
    parts = expression.split()
    if len(parts) not in (6, 7):
        raise InvalidScheduleError(
            f"Cron expression must have 6 or 7 fields (seconds first), got {len(parts)}: '{expression}'"
        )

    fields = dict(zip(FIELD_NAMES, parts))
    for name in ("day", "day_of_week"):
        if fields[name] == "?":
            fields[name] = "*"
    fields["day_of_week"] = _day_of_week(fields["day_of_week"])
    return fields


class CronSchedule:
    """A validated cron expression bound to a fixed-offset timezone."""

    def __init__(self, expression: str, tz: tzinfo = timezone.utc):
        self.expression = expression
        self.tz = tz

        try:
            self.trigger = CronTrigger(timezone=tz, **parse_cron(expression))
        except ValueError as e:
            logger.error(f"Invalid cron expression '{expression}': {e}")
            if isinstance(e, InvalidScheduleError):
                raise
            raise InvalidScheduleError(f"Invalid cron expression '{expression}': {e}") from e

    def next_after(self, base: datetime) -> datetime:
        """Return the first fire time strictly after ``base``."""
        if base.tzinfo is None:
            base = base.replace(tzinfo=self.tz)
        else:
            base = base.astimezone(self.tz)
        start = base.replace(microsecond=0) + timedelta(seconds=1)
        return self.trigger.get_next_fire_time(None, start)

    def __repr__(self) -> str:
        return f"CronSchedule({self.expression!r}, tz={self.tz})"
