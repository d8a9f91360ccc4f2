"""Clock providers for wall-clock time and local calendar dates."""
import time
from datetime import date, datetime, timedelta
from typing import Optional

MS_PER_DAY = 24 * 60 * 60 * 1000


class Clock:
    """Source of the current time and local calendar date."""

    def now_ms(self) -> int:
        """Current time in milliseconds since epoch."""
        raise NotImplementedError

    def today(self) -> date:
        """Current local calendar date."""
        raise NotImplementedError


class SystemClock(Clock):
    """Clock backed by the system wall clock, read on every call."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Settable clock for tests and simulations."""

    def __init__(self, now: Optional[datetime] = None):
        self.current = now or datetime(2024, 1, 1, 12, 0)

    def now_ms(self) -> int:
        return int(self.current.timestamp() * 1000)

    def today(self) -> date:
        return self.current.date()

    def set(self, now: datetime) -> None:
        """Move the clock to an absolute point in time."""
        self.current = now

    def advance(self, days: int = 0, ms: int = 0) -> None:
        """Move the clock forward by whole days and/or milliseconds."""
        self.current = self.current + timedelta(days=days, milliseconds=ms)
