"""
Clock -- Injectable source of "today" for the parse session.

Responsibility:
    Headers that omit a year take the session's current year, which starts
    as the calendar year of the host clock. Parsing code never calls
    ``date.today()`` directly; it receives a Clock so that tests and replays
    can pin the year.

Architecture position:
    Kernel > Domain -- pure, except SystemClock, which is the one sanctioned
    read of wall-clock time.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timezone


class Clock(ABC):
    """
    Abstract clock interface.

    Guarantees:
        - ``now()`` returns a timezone-aware ``datetime``.
        - ``today()`` returns the calendar date of ``now()``.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time."""
        ...

    def today(self) -> date:
        """Get the current calendar date."""
        return self.now().date()

    @property
    def current_year(self) -> int:
        return self.today().year


class SystemClock(Clock):
    """Production clock backed by the host's local time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).astimezone()


class DeterministicClock(Clock):
    """
    Test clock with controlled time.

    ``now()`` returns the same value on every call until ``set_time()``.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime(
            2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc
        )

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, time: datetime) -> None:
        """Set the clock to a specific time."""
        self._fixed_time = time
