"""MonthTuple class representing a month of a specific year.

This module provides the MonthTuple class, the unit of month and year
arithmetic shared with DateTuple. Arithmetic saturates at the range
boundaries (January 0000 and December 9999) instead of wrapping.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from datetuple._internal.calendar import clamp
from datetuple._internal.clock import Clock, read_clock
from datetuple._internal.constants import (
    MAX_MONTH_INDEX,
    MAX_YEAR,
    MIN_MONTH_INDEX,
    MIN_YEAR,
    MONTH_ABBREVIATIONS,
    MONTHS_PER_YEAR,
)
from datetuple._internal.validation import validate_month, validate_year
from datetuple.errors import ParseError

if TYPE_CHECKING:
    from datetuple.core.date import DateTuple

logger = logging.getLogger(__name__)

# Tried in order, first match wins
_MONTH_PATTERN = re.compile(r"(\d{4})-(\d{2})", re.ASCII)
_LEGACY_MONTH_PATTERN = re.compile(r"(\d{4})(\d{2})", re.ASCII)


class MonthTuple:
    """A month of a specific year, from Jan 0000 to Dec 9999.

    The month component is one-based (1 represents January).

    Internally the value is stored as a flat month index,
    ``year * 12 + (month - 1)``, in the range [0, 119999].

    Attributes:
        year: The year (0-9999).
        month: The month (1-12).

    Examples:
        >>> m = MonthTuple(2000, 5)
        >>> str(m)
        '2000-05'
        >>> m.to_readable_string()
        'May 2000'

        >>> MonthTuple(9999, 12).next_month()
        MonthTuple(9999, 12)
    """

    __slots__ = ("_index",)

    def __init__(self, year: int, month: int) -> None:
        """Create a MonthTuple from year and month.

        Args:
            year: The year (0-9999).
            month: The month (1-12).

        Raises:
            ValidationError: If either component is out of range.
        """
        validate_year(year)
        validate_month(month)
        self._index: int = year * MONTHS_PER_YEAR + (month - 1)

    @classmethod
    def from_index(cls, index: int) -> MonthTuple:
        """Create a MonthTuple from a flat month index.

        The index is clamped to [0, 119999], so out-of-range input
        saturates at Jan 0000 or Dec 9999.

        Examples:
            >>> MonthTuple.from_index(24004)
            MonthTuple(2000, 5)
            >>> MonthTuple.from_index(-5)
            MonthTuple(0, 1)
        """
        clamped = clamp(index, MIN_MONTH_INDEX, MAX_MONTH_INDEX)
        if clamped != index:
            logger.debug("month index %d saturated to %d", index, clamped)
        instance = object.__new__(cls)
        instance._index = clamped
        return instance

    @classmethod
    def from_date(cls, date: DateTuple) -> MonthTuple:
        """Return the month containing ``date``, discarding the day."""
        return date.month_tuple()

    @classmethod
    def this_month(cls, clock: Clock | None = None) -> MonthTuple:
        """Return the current month according to ``clock``."""
        year, month, *_ = read_clock(clock)
        return cls(year, month)

    @classmethod
    def from_string(cls, s: str) -> MonthTuple:
        """Parse a month string.

        Accepted grammars, tried in order:
            - ``yyyy-mm`` with a one-based month (canonical)
            - ``yyyymm`` with a zero-based month (legacy, 00 = January)

        Args:
            s: The string to parse.

        Returns:
            The parsed MonthTuple.

        Raises:
            ParseError: If the string matches neither grammar.
            ValidationError: If a component is out of range.

        Examples:
            >>> MonthTuple.from_string("2000-05")
            MonthTuple(2000, 5)
            >>> MonthTuple.from_string("200004")
            MonthTuple(2000, 5)
        """
        match = _MONTH_PATTERN.fullmatch(s)
        if match:
            return cls(int(match.group(1)), int(match.group(2)))

        match = _LEGACY_MONTH_PATTERN.fullmatch(s)
        if match:
            return cls(int(match.group(1)), int(match.group(2)) + 1)

        raise ParseError(
            f"invalid month format: {s!r}; expected yyyy-mm (e.g. 2018-11)"
        )

    @property
    def year(self) -> int:
        """Return the year component (0-9999)."""
        return self._index // MONTHS_PER_YEAR

    @property
    def month(self) -> int:
        """Return the one-based month component (1-12)."""
        return self._index % MONTHS_PER_YEAR + 1

    def to_index(self) -> int:
        """Return the flat month index ``year * 12 + month - 1``."""
        return self._index

    def next_month(self) -> MonthTuple:
        """Return the following month; Dec 9999 is returned unchanged."""
        return self.add_months(1)

    def previous_month(self) -> MonthTuple:
        """Return the preceding month; Jan 0000 is returned unchanged."""
        return self.subtract_months(1)

    def add_months(self, months: int) -> MonthTuple:
        """Return a new MonthTuple ``months`` later, saturating at Dec 9999.

        Examples:
            >>> MonthTuple(2000, 12).add_months(2)
            MonthTuple(2001, 2)
            >>> MonthTuple(9999, 11).add_months(5)
            MonthTuple(9999, 12)
        """
        return MonthTuple.from_index(self._index + months)

    def subtract_months(self, months: int) -> MonthTuple:
        """Return a new MonthTuple ``months`` earlier, saturating at Jan 0000."""
        return MonthTuple.from_index(self._index - months)

    def add_years(self, years: int) -> MonthTuple:
        """Return a new MonthTuple ``years`` later.

        The year saturates at 9999 (or 0 for negative input); the month is
        unchanged.

        Examples:
            >>> MonthTuple(9998, 6).add_years(2)
            MonthTuple(9999, 6)
        """
        new_year = clamp(self.year + years, MIN_YEAR, MAX_YEAR)
        if new_year != self.year + years:
            logger.debug("year %d%+d saturated to %d", self.year, years, new_year)
        return MonthTuple(new_year, self.month)

    def subtract_years(self, years: int) -> MonthTuple:
        """Return a new MonthTuple ``years`` earlier, saturating at year 0."""
        return self.add_years(-years)

    def to_string(self) -> str:
        """Return the canonical ``yyyy-mm`` form."""
        return f"{self.year:04d}-{self.month:02d}"

    def to_readable_string(self) -> str:
        """Return the month as ``Mon yyyy``, e.g. ``Jan 2018``."""
        return f"{MONTH_ABBREVIATIONS[self.month]} {self.year:04d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthTuple):
            return NotImplemented
        return self._index == other._index

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthTuple):
            return NotImplemented
        return self._index < other._index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MonthTuple):
            return NotImplemented
        return self._index <= other._index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MonthTuple):
            return NotImplemented
        return self._index > other._index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MonthTuple):
            return NotImplemented
        return self._index >= other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def __repr__(self) -> str:
        return f"MonthTuple({self.year}, {self.month})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        return True


Month = MonthTuple

__all__ = ["MonthTuple", "Month"]
