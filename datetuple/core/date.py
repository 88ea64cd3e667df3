"""DateTuple class representing a calendar date.

This module provides the DateTuple class for representing calendar dates
in the proleptic Gregorian calendar between 0000-01-01 and 9999-12-31.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from datetuple._internal.calendar import (
    MAX_DAY_COUNT,
    MIN_DAY_COUNT,
    _days_before_month,
    clamp,
    day_count_to_ymd,
    days_in_month,
    is_leap_year,
    ymd_to_day_count,
)
from datetuple._internal.clock import Clock, read_clock
from datetuple._internal.constants import MONTH_ABBREVIATIONS
from datetuple._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)
from datetuple.core.month import MonthTuple
from datetuple.errors import ParseError, ValidationError

logger = logging.getLogger(__name__)

# Tried in order, first match wins
_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_LEGACY_DATE_PATTERN = re.compile(r"(\d{4})(\d{2})(\d{2})", re.ASCII)


class DateTuple:
    """A calendar date in the proleptic Gregorian calendar.

    DateTuple represents a specific calendar day with year, month, and day
    components. The Gregorian leap-year rule is applied uniformly across
    the whole range, year 0 included (year 0 is a leap year).

    Internally the date is stored as its day count: the number of days
    from 0000-01-01 to the date, inclusive. Ordering by (year, month, day)
    is therefore the same as ordering by day count.

    Construction is strict and raises ValidationError for invalid input.
    Arithmetic never raises: results saturate at min_value()/max_value()
    and days past the end of a month are clamped to its last day.

    Attributes:
        year: The year (0-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = DateTuple(2002, 1, 23)
        >>> str(d)
        '2002-01-23'
        >>> d.to_readable_string()
        '23 Jan 2002'

        >>> DateTuple(2020, 2, 29).add_years(1)
        DateTuple(2021, 2, 28)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a DateTuple from year, month, and day.

        Args:
            year: The year (0-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> DateTuple(2000, 2, 29)
            DateTuple(2000, 2, 29)

            >>> DateTuple(2021, 2, 29)  # 2021 is not a leap year
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 28 for 2021-02, got 29
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days: int = ymd_to_day_count(year, month, day)

    @classmethod
    def _from_day_count(cls, days: int) -> DateTuple:
        """Create a DateTuple from a day count known to be in range."""
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def min_value(cls) -> DateTuple:
        """Return the earliest supported date, 0000-01-01."""
        return cls._from_day_count(MIN_DAY_COUNT)

    @classmethod
    def max_value(cls) -> DateTuple:
        """Return the latest supported date, 9999-12-31."""
        return cls._from_day_count(MAX_DAY_COUNT)

    @classmethod
    def today(cls, clock: Clock | None = None) -> DateTuple:
        """Return today's date according to ``clock``.

        Args:
            clock: Optional time source; defaults to the system clock.
        """
        year, month, day, *_ = read_clock(clock)
        return cls(year, month, day)

    @classmethod
    def from_day_count(cls, days: int) -> DateTuple:
        """Create a DateTuple from its day count.

        This is the exact inverse of to_day_count(). Unlike the saturating
        arithmetic methods it rejects out-of-range input, since callers
        supply the count directly.

        Args:
            days: Day count, 1 = 0000-01-01.

        Returns:
            The corresponding DateTuple.

        Raises:
            ValidationError: If days is outside [1, 3652425].

        Examples:
            >>> DateTuple.from_day_count(730545)
            DateTuple(2000, 2, 29)
        """
        if days < MIN_DAY_COUNT or days > MAX_DAY_COUNT:
            raise ValidationError(
                f"day count must be between {MIN_DAY_COUNT} and {MAX_DAY_COUNT}, "
                f"got {days}"
            )
        return cls._from_day_count(days)

    @classmethod
    def from_string(cls, s: str) -> DateTuple:
        """Parse a date string.

        Accepted grammars, tried in order:
            - ``yyyy-mm-dd`` with a one-based month (canonical)
            - ``yyyymmdd`` with a zero-based month (legacy, 00 = January)

        Args:
            s: The string to parse.

        Returns:
            The parsed DateTuple.

        Raises:
            ParseError: If the string matches neither grammar.
            ValidationError: If a component is out of range.

        Examples:
            >>> DateTuple.from_string("2000-06-10")
            DateTuple(2000, 6, 10)
            >>> DateTuple.from_string("20000510")
            DateTuple(2000, 6, 10)
        """
        match = _DATE_PATTERN.fullmatch(s)
        if match:
            year, month, day = (int(g) for g in match.groups())
            return cls(year, month, day)

        match = _LEGACY_DATE_PATTERN.fullmatch(s)
        if match:
            year, month, day = (int(g) for g in match.groups())
            return cls(year, month + 1, day)

        raise ParseError(
            f"invalid date format: {s!r}; expected yyyy-mm-dd (e.g. 2018-11-02)"
        )

    @property
    def year(self) -> int:
        """Return the year component (0-9999)."""
        year, _, _ = day_count_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = day_count_to_ymd(self._days)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        _, _, day = day_count_to_ymd(self._days)
        return day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return is_leap_year(self.year)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> DateTuple(2000, 12, 31).day_of_year
            366
        """
        year, month, day = day_count_to_ymd(self._days)
        return _days_before_month(year, month) + day

    def to_day_count(self) -> int:
        """Return the number of days from 0000-01-01 to this date, inclusive.

        Examples:
            >>> DateTuple(0, 1, 1).to_day_count()
            1
            >>> DateTuple(2000, 2, 29).to_day_count()
            730545
        """
        return self._days

    def month_tuple(self) -> MonthTuple:
        """Return the MonthTuple containing this date."""
        year, month, _ = day_count_to_ymd(self._days)
        return MonthTuple(year, month)

    def add_days(self, days: int) -> DateTuple:
        """Return a new DateTuple ``days`` later, saturating at 9999-12-31.

        Examples:
            >>> DateTuple(2000, 12, 31).add_days(2)
            DateTuple(2001, 1, 2)
            >>> DateTuple(9999, 12, 30).add_days(10)
            DateTuple(9999, 12, 31)
        """
        target = self._days + days
        clamped = clamp(target, MIN_DAY_COUNT, MAX_DAY_COUNT)
        if clamped != target:
            logger.debug("date %s%+d days saturated at range boundary", self, days)
        return DateTuple._from_day_count(clamped)

    def subtract_days(self, days: int) -> DateTuple:
        """Return a new DateTuple ``days`` earlier, saturating at 0000-01-01."""
        return self.add_days(-days)

    def next_date(self) -> DateTuple:
        """Return the following day; 9999-12-31 is returned unchanged."""
        return self.add_days(1)

    def previous_date(self) -> DateTuple:
        """Return the preceding day; 0000-01-01 is returned unchanged."""
        return self.subtract_days(1)

    def _with_month(self, step: Callable[[MonthTuple], MonthTuple]) -> DateTuple:
        year, month, day = day_count_to_ymd(self._days)
        target = step(MonthTuple(year, month))
        # Day past the end of the new month falls back to its last day
        day = min(day, days_in_month(target.year, target.month))
        return DateTuple(target.year, target.month, day)

    def add_months(self, months: int) -> DateTuple:
        """Return a new DateTuple ``months`` later.

        The year/month carry saturates like MonthTuple.add_months. If the
        day does not exist in the resulting month, the month's last day is
        used instead.

        Examples:
            >>> DateTuple(2000, 7, 31).add_months(2)
            DateTuple(2000, 9, 30)
            >>> DateTuple(2001, 1, 31).add_months(1)
            DateTuple(2001, 2, 28)
        """
        return self._with_month(lambda m: m.add_months(months))

    def subtract_months(self, months: int) -> DateTuple:
        """Return a new DateTuple ``months`` earlier, clamping the day."""
        return self._with_month(lambda m: m.subtract_months(months))

    def add_years(self, years: int) -> DateTuple:
        """Return a new DateTuple ``years`` later.

        The year saturates at 9999. February 29 becomes February 28 when
        the resulting year is not a leap year.

        Examples:
            >>> DateTuple(2000, 2, 29).add_years(4)
            DateTuple(2004, 2, 29)
            >>> DateTuple(2000, 2, 29).add_years(1)
            DateTuple(2001, 2, 28)
        """
        return self._with_month(lambda m: m.add_years(years))

    def subtract_years(self, years: int) -> DateTuple:
        """Return a new DateTuple ``years`` earlier, saturating at year 0."""
        return self._with_month(lambda m: m.subtract_years(years))

    def to_string(self) -> str:
        """Return the canonical ``yyyy-mm-dd`` form."""
        year, month, day = day_count_to_ymd(self._days)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def to_readable_string(self) -> str:
        """Return the date as ``dd Mon yyyy``, e.g. ``02 Oct 2018``."""
        year, month, day = day_count_to_ymd(self._days)
        return f"{day:02d} {MONTH_ABBREVIATIONS[month]} {year:04d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTuple):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTuple):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTuple):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTuple):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTuple):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = day_count_to_ymd(self._days)
        return f"DateTuple({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        return True


Date = DateTuple

__all__ = ["DateTuple", "Date"]
