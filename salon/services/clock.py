# salon/services/clock.py
"""
Business-timezone clock.

The salon works on a fixed UTC offset (UTC-3 by default) regardless of the
host timezone. Everything that compares "today" or "now" goes through one
BusinessClock so tests can replace the time source.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Callable


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BusinessClock:

    def __init__(
        self,
        utc_offset_hours: int,
        source: Callable[[], datetime] | None = None,
    ):
        self.tz = timezone(timedelta(hours=utc_offset_hours))
        self.source = source or utc_now

    def now(self) -> datetime:
        """Current time as an aware datetime in the business timezone."""
        return self.source().astimezone(self.tz)

    def today(self) -> date:
        return self.now().date()

    def tomorrow(self) -> date:
        return self.today() + timedelta(days=1)

    def first_day_of_month(self) -> date:
        return self.today().replace(day=1)

    def timestamp(self) -> float:
        return self.now().timestamp()
