"""
Clocks used by the circulation desk to decide what "today" is.

Due dates and fines work on local calendar dates with no time of day, so a
clock only has to answer ``today()``.
"""

from datetime import date, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current calendar date."""

    def today(self) -> date: ...


class SystemClock:
    """Reads the local calendar date from the operating system."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """A clock that only moves when told to. Used in tests."""

    def __init__(self, current: date | None = None):
        self.current = current or date.today()

    def today(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> date:
        """Move the clock forward (or back, for negative ``days``)."""
        self.current = self.current + timedelta(days=days)
        return self.current
