"""Clock abstraction for date-dependent checks.

WallClock: real wall-clock time
SimClock: deterministic simulated time (tests)

Expiry checks never call date.today() directly; they ask a clock.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Protocol


class IClock(Protocol):
    """Clock interface used by all time-dependent code."""

    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime."""
        ...

    def today(self) -> date:
        """Current calendar date."""
        ...


class WallClock:
    """Real wall-clock time.

    ``today()`` is the local calendar date, matching how shelf dates are
    printed on goods.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return date.today()


class SimClock:
    """Simulated clock for deterministic tests.

    Time advances only when explicitly set.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._time = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._time

    def today(self) -> date:
        return self._time.date()

    def set_time(self, t: datetime) -> None:
        """Advance time. Must be monotonically increasing."""
        if t < self._time:
            raise ValueError(
                f"SimClock cannot go backwards: {t} < {self._time}"
            )
        self._time = t

    def advance_days(self, days: int) -> None:
        """Advance time by whole days."""
        self.set_time(self._time + timedelta(days=days))


_default_clock: IClock = WallClock()


def default_clock() -> IClock:
    """Return the process-wide wall clock."""
    return _default_clock
