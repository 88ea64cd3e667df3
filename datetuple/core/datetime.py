"""DateTimeTuple class combining a calendar date and a time of day.

This module provides the DateTimeTuple class, a DateTuple and a TimeTuple
held by value. It adds no invariants beyond those of its members.
"""

from __future__ import annotations

import re

from datetuple._internal.clock import Clock, read_clock
from datetuple._internal.constants import SECONDS_PER_DAY
from datetuple.core.date import DateTuple
from datetuple.core.time import TimeTuple
from datetuple.errors import ParseError

# Date half may be canonical or legacy; each half is validated by its own parser
_DATETIME_PATTERN = re.compile(
    r"(\d{4}-\d{2}-\d{2}|\d{8})@(\d{2}:\d{2}:\d{2})", re.ASCII
)


class DateTimeTuple:
    """A specific date and time, without timezone.

    Ordering is lexicographic on (date, time).

    Attributes:
        date: The DateTuple component.
        time: The TimeTuple component.

    Examples:
        >>> dt = DateTimeTuple.from_string("2002-01-23@08:30:30")
        >>> str(dt)
        '2002-01-23@08:30:30'
        >>> dt.to_readable_string()
        '23 Jan 2002 08:30:30'
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: DateTuple, time: TimeTuple) -> None:
        """Create a DateTimeTuple from a date and a time.

        Args:
            date: The calendar date.
            time: The time of day.

        Raises:
            TypeError: If date or time is of the wrong type.
        """
        if not isinstance(date, DateTuple):
            raise TypeError(f"date must be a DateTuple, got {type(date).__name__}")
        if not isinstance(time, TimeTuple):
            raise TypeError(f"time must be a TimeTuple, got {type(time).__name__}")
        self._date = date
        self._time = time

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTimeTuple:
        """Return the current local date and time.

        Args:
            clock: Optional time source; defaults to the system clock.

        Raises:
            ValidationError: If the clock reports an out-of-range value.
        """
        year, month, day, hour, minute, second = read_clock(clock)
        return cls(DateTuple(year, month, day), TimeTuple(hour, minute, second))

    @classmethod
    def from_string(cls, s: str) -> DateTimeTuple:
        """Parse a string produced by to_string().

        The date half may use the canonical ``yyyy-mm-dd`` form or the
        legacy ``yyyymmdd`` form (zero-based month).

        Args:
            s: A string like ``2018-11-02@08:30:00``.

        Returns:
            The parsed DateTimeTuple.

        Raises:
            ParseError: If the string is not ``<date>@hh:mm:ss``.
            ValidationError: If a component is out of range.

        Examples:
            >>> DateTimeTuple.from_string("2000-05-10@08:30:00")
            DateTimeTuple(DateTuple(2000, 5, 10), TimeTuple(8, 30, 0))
        """
        match = _DATETIME_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(
                f"invalid date-time format: {s!r}; "
                "expected yyyy-mm-dd@hh:mm:ss (e.g. 2018-11-02@08:30:00)"
            )
        date_str, time_str = match.groups()
        return cls(DateTuple.from_string(date_str), TimeTuple.from_string(time_str))

    @property
    def date(self) -> DateTuple:
        """Return the date component."""
        return self._date

    @property
    def time(self) -> TimeTuple:
        """Return the time component."""
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    def to_seconds(self) -> int:
        """Return the seconds elapsed since 0000-01-01 00:00:00.

        Examples:
            >>> DateTimeTuple.from_string("0000-01-02@00:00:01").to_seconds()
            86401
        """
        return (self._date.to_day_count() - 1) * SECONDS_PER_DAY + self._time.to_seconds()

    def to_string(self) -> str:
        """Return the canonical ``yyyy-mm-dd@hh:mm:ss`` form."""
        return f"{self._date.to_string()}@{self._time.to_string()}"

    def to_readable_string(self) -> str:
        """Return ``dd Mon yyyy hh:mm:ss``, e.g. ``13 Jan 2019 11:00:10``."""
        return f"{self._date.to_readable_string()} {self._time.to_string()}"

    def _key(self) -> tuple[DateTuple, TimeTuple]:
        return (self._date, self._time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTuple):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTuple):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTuple):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTuple):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTuple):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"DateTimeTuple({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        return True


DateTime = DateTimeTuple

__all__ = ["DateTimeTuple", "DateTime"]
