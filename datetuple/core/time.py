"""TimeTuple class representing a time of day.

This module provides the TimeTuple class for representing wall-clock
time-of-day values with second precision. Arithmetic wraps around
midnight.
"""

from __future__ import annotations

import logging
import re

from datetuple._internal.clock import Clock, read_clock
from datetuple._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datetuple._internal.validation import validate_range
from datetuple.errors import ParseError

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2}):(\d{2})", re.ASCII)


class TimeTuple:
    """A time of day with second precision.

    TimeTuple represents the time portion of a day, from midnight
    (00:00:00) to 23:59:59. It does not include any date or timezone
    information.

    The internal representation stores the total seconds since midnight
    in a single `_seconds` slot, so every value has exactly one canonical
    (hour, minute, second) form.

    All arithmetic is modulo one day: adding or subtracting past midnight
    wraps silently.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).

    Examples:
        >>> t = TimeTuple(14, 30, 45)
        >>> t.hour
        14
        >>> str(t)
        '14:30:45'

        >>> TimeTuple(22, 0, 0) + TimeTuple(3, 0, 0)
        TimeTuple(1, 0, 0)
    """

    __slots__ = ("_seconds",)

    @validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59))
    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        """Create a TimeTuple from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> TimeTuple(8, 30, 30)
            TimeTuple(8, 30, 30)

            >>> TimeTuple(24, 0, 0)
            Traceback (most recent call last):
            ...
            ValidationError: hour must be between 0 and 23, got 24
        """
        self._seconds: int = (
            hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        )

    @classmethod
    def from_total_seconds(cls, seconds: int) -> TimeTuple:
        """Create a TimeTuple from a number of seconds since midnight.

        Any integer is accepted; it is reduced modulo one day, so this is
        the wrap-around primitive for all time-of-day arithmetic.

        Args:
            seconds: Seconds since midnight (any integer).

        Returns:
            The TimeTuple for ``seconds mod 86400``.

        Examples:
            >>> TimeTuple.from_total_seconds(9030)
            TimeTuple(2, 30, 30)
            >>> TimeTuple.from_total_seconds(86400)
            TimeTuple(0, 0, 0)
            >>> TimeTuple.from_total_seconds(-1)
            TimeTuple(23, 59, 59)
        """
        instance = object.__new__(cls)
        instance._seconds = seconds % SECONDS_PER_DAY
        return instance

    @classmethod
    def midnight(cls) -> TimeTuple:
        """Return 00:00:00."""
        return cls.from_total_seconds(0)

    @classmethod
    def now(cls, clock: Clock | None = None) -> TimeTuple:
        """Return the current local time of day.

        Args:
            clock: Optional time source; defaults to the system clock.

        Returns:
            A TimeTuple for the current time.
        """
        _, _, _, hour, minute, second = read_clock(clock)
        return cls(hour, minute, second)

    @classmethod
    def from_string(cls, s: str) -> TimeTuple:
        """Parse a time from its canonical ``hh:mm:ss`` form.

        Args:
            s: The string to parse.

        Returns:
            The parsed TimeTuple.

        Raises:
            ParseError: If the string is not formatted as hh:mm:ss.
            ValidationError: If a component is out of range.

        Examples:
            >>> TimeTuple.from_string("08:30:30")
            TimeTuple(8, 30, 30)

            >>> TimeTuple.from_string("05:a:04")
            Traceback (most recent call last):
            ...
            ParseError: invalid time format: '05:a:04'; expected hh:mm:ss
        """
        match = _TIME_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(f"invalid time format: {s!r}; expected hh:mm:ss")
        hour, minute, second = (int(g) for g in match.groups())
        return cls(hour, minute, second)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._seconds % SECONDS_PER_MINUTE

    def to_seconds(self) -> int:
        """Return the total seconds since midnight.

        Examples:
            >>> TimeTuple(2, 30, 30).to_seconds()
            9030
        """
        return self._seconds

    def to_minutes(self) -> int:
        """Return the whole minutes since midnight, dropping seconds.

        Examples:
            >>> TimeTuple(2, 30, 30).to_minutes()
            150
        """
        return self._seconds // SECONDS_PER_MINUTE

    def _shift(self, seconds: int) -> TimeTuple:
        total = self._seconds + seconds
        if not 0 <= total < SECONDS_PER_DAY:
            logger.debug("time %s shifted by %ds wrapped past midnight", self, seconds)
        return TimeTuple.from_total_seconds(total)

    def add_seconds(self, seconds: int) -> TimeTuple:
        """Return a new TimeTuple ``seconds`` later, wrapping at midnight.

        Examples:
            >>> TimeTuple(10, 58, 59).add_seconds(3)
            TimeTuple(10, 59, 2)
        """
        return self._shift(seconds)

    def add_minutes(self, minutes: int) -> TimeTuple:
        """Return a new TimeTuple ``minutes`` later, wrapping at midnight."""
        return self._shift(minutes * SECONDS_PER_MINUTE)

    def add_hours(self, hours: int) -> TimeTuple:
        """Return a new TimeTuple ``hours`` later, wrapping at midnight."""
        return self._shift(hours * SECONDS_PER_HOUR)

    def subtract_seconds(self, seconds: int) -> TimeTuple:
        """Return a new TimeTuple ``seconds`` earlier, wrapping at midnight.

        Examples:
            >>> TimeTuple(0, 0, 1).subtract_seconds(2)
            TimeTuple(23, 59, 59)
        """
        return self._shift(-seconds)

    def subtract_minutes(self, minutes: int) -> TimeTuple:
        """Return a new TimeTuple ``minutes`` earlier, wrapping at midnight."""
        return self._shift(-minutes * SECONDS_PER_MINUTE)

    def subtract_hours(self, hours: int) -> TimeTuple:
        """Return a new TimeTuple ``hours`` earlier, wrapping at midnight."""
        return self._shift(-hours * SECONDS_PER_HOUR)

    def add_time(self, other: TimeTuple) -> TimeTuple:
        """Return the sum of two times of day, modulo one day."""
        return self._shift(other._seconds)

    def subtract_time(self, other: TimeTuple) -> TimeTuple:
        """Return the difference of two times of day, modulo one day."""
        return self._shift(-other._seconds)

    def to_string(self) -> str:
        """Return the canonical ``hh:mm:ss`` form.

        Examples:
            >>> TimeTuple(3, 0, 39).to_string()
            '03:00:39'
        """
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def to_hhmm_string(self) -> str:
        """Return the ``hh:mm`` form, dropping seconds.

        This form is for display only; from_string does not accept it.

        Examples:
            >>> TimeTuple(3, 0, 39).to_hhmm_string()
            '03:00'
        """
        return f"{self.hour:02d}:{self.minute:02d}"

    def __add__(self, other: object) -> TimeTuple:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self.add_time(other)

    def __sub__(self, other: object) -> TimeTuple:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self.subtract_time(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self._seconds == other._seconds

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeTuple):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"TimeTuple({self.hour}, {self.minute}, {self.second})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True


Time = TimeTuple

__all__ = ["TimeTuple", "Time"]
