"""Duration class representing an elapsed span of time.

This module provides the Duration class. Unlike TimeTuple, a Duration is
not a wall-clock value: its hours are unbounded and it never wraps.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from datetuple._internal.constants import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datetuple._internal.decorators import deprecated
from datetuple._internal.validation import validate_range
from datetuple.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from datetuple.core.datetime import DateTimeTuple
    from datetuple.core.time import TimeTuple

logger = logging.getLogger(__name__)

_DURATION_PATTERN = re.compile(r"(\d{2,}):(\d{2}):(\d{2})", re.ASCII)


class Duration:
    """A non-negative span of time with second precision.

    Duration stores a total number of seconds, always >= 0. The hours
    component is unbounded, while minutes and seconds stay in 0-59.

    Arithmetic never fails: subtracting past zero saturates at a zero
    duration.

    Attributes:
        hours: The hours component (>= 0, no upper bound).
        minutes: The minutes component (0-59).
        seconds: The seconds component (0-59).

    Examples:
        >>> d = Duration(26, 30, 30)
        >>> d.to_minutes()
        1590
        >>> str(Duration(200, 0, 0))
        '200:00:00'
    """

    __slots__ = ("_seconds",)

    @validate_range(hours=(0, None), minutes=(0, 59), seconds=(0, 59))
    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        """Create a Duration from component parts.

        Args:
            hours: Number of hours (>= 0, unbounded).
            minutes: Number of minutes (0-59).
            seconds: Number of seconds (0-59).

        Raises:
            ValidationError: If a component is out of range.
        """
        self._seconds: int = (
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def zero(cls) -> Duration:
        """Return a zero-length duration."""
        return cls()

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration from a total number of seconds.

        Args:
            seconds: Total seconds (>= 0).

        Returns:
            The Duration, with hours possibly above 23.

        Raises:
            ValidationError: If seconds is negative.

        Examples:
            >>> Duration.from_seconds(90061)
            Duration(25, 1, 1)
        """
        if seconds < 0:
            raise ValidationError(f"seconds must be at least 0, got {seconds}")
        instance = object.__new__(cls)
        instance._seconds = seconds
        return instance

    @classmethod
    def from_time(cls, time: TimeTuple) -> Duration:
        """Return the time elapsed between midnight and ``time``."""
        return cls.from_seconds(time.to_seconds())

    @classmethod
    def between(cls, a: DateTimeTuple, b: DateTimeTuple) -> Duration:
        """Return the elapsed time between two date-times.

        The result is the absolute difference, so argument order does not
        matter: ``between(a, b) == between(b, a)``.

        Args:
            a: One endpoint.
            b: The other endpoint.

        Returns:
            A non-negative Duration.

        Examples:
            >>> from datetuple import DateTimeTuple
            >>> a = DateTimeTuple.from_string("0000-01-01@00:00:00")
            >>> b = DateTimeTuple.from_string("0000-01-02@01:00:00")
            >>> Duration.between(a, b)
            Duration(25, 0, 0)
        """
        return cls.from_seconds(abs(b.to_seconds() - a.to_seconds()))

    @classmethod
    def from_string(cls, s: str) -> Duration:
        """Parse a duration from ``hh:mm:ss``; hours may have more digits.

        Raises:
            ParseError: If the string is not formatted as hh:mm:ss.
            ValidationError: If minutes or seconds are out of range.

        Examples:
            >>> Duration.from_string("35:30:04")
            Duration(35, 30, 4)
        """
        match = _DURATION_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(f"invalid duration format: {s!r}; expected hh:mm:ss")
        hours, minutes, seconds = (int(g) for g in match.groups())
        return cls(hours, minutes, seconds)

    @property
    def hours(self) -> int:
        """Return the hours component (unbounded)."""
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        """Return the minutes component (0-59)."""
        return (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def seconds(self) -> int:
        """Return the seconds component (0-59)."""
        return self._seconds % SECONDS_PER_MINUTE

    def to_seconds(self) -> int:
        """Return the total number of seconds."""
        return self._seconds

    def to_minutes(self) -> int:
        """Return the total number of whole minutes.

        Leftover seconds are truncated, never rounded up.

        Examples:
            >>> Duration(26, 30, 59).to_minutes()
            1590
        """
        return self._seconds // SECONDS_PER_MINUTE

    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._seconds == 0

    def _shift(self, seconds: int) -> Duration:
        total = self._seconds + seconds
        if total < 0:
            logger.debug("duration %s%+ds saturated at zero", self, seconds)
            total = 0
        return Duration.from_seconds(total)

    def add_seconds(self, seconds: int) -> Duration:
        """Return a new Duration ``seconds`` longer."""
        return self._shift(seconds)

    def add_minutes(self, minutes: int) -> Duration:
        """Return a new Duration ``minutes`` longer."""
        return self._shift(minutes * SECONDS_PER_MINUTE)

    def add_hours(self, hours: int) -> Duration:
        """Return a new Duration ``hours`` longer."""
        return self._shift(hours * SECONDS_PER_HOUR)

    def subtract_seconds(self, seconds: int) -> Duration:
        """Return a new Duration ``seconds`` shorter, never below zero."""
        return self._shift(-seconds)

    def subtract_minutes(self, minutes: int) -> Duration:
        """Return a new Duration ``minutes`` shorter, never below zero."""
        return self._shift(-minutes * SECONDS_PER_MINUTE)

    def subtract_hours(self, hours: int) -> Duration:
        """Return a new Duration ``hours`` shorter, never below zero."""
        return self._shift(-hours * SECONDS_PER_HOUR)

    def to_string(self) -> str:
        """Return ``hh:mm:ss`` with at least two hour digits."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def to_hhmm_string(self) -> str:
        """Return ``hh:mm``, dropping seconds.

        Examples:
            >>> Duration(30, 0, 39).to_hhmm_string()
            '30:00'
        """
        return f"{self.hours:02d}:{self.minutes:02d}"

    @deprecated("Use to_hhmm_string() instead")
    def to_hours_and_minutes_string(self) -> str:
        """Return ``hh:mm``; kept for older callers."""
        return self.to_hhmm_string()

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._shift(other._seconds)

    def __sub__(self, other: object) -> Duration:
        """Subtract another Duration, saturating at zero."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self._shift(-other._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"Duration({self.hours}, {self.minutes}, {self.seconds})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        """Return False for a zero-length duration."""
        return self._seconds != 0


__all__ = ["Duration"]
