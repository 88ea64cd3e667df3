"""Calendar utilities for datetuple.

This module provides the leap-year rule, the days-in-month table and the
day-count conversion that every date normalization path is built on.

The day count is 1-based and inclusive: 0000-01-01 is day 1 and
9999-12-31 is day MAX_DAY_COUNT.

This module is not part of the public API.
"""

from __future__ import annotations

from datetuple._internal.constants import DAYS_IN_MONTH, MAX_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2004)
        True
        >>> is_leap_year(2001)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _days_before_year(year: int) -> int:
    """Return the number of days from 0000-01-01 up to 1 January of ``year``.

    Year 0 is a leap year, so every range starting at 0 counts it.
    """
    leap_years = (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400
    return year * 365 + leap_years


def ymd_to_day_count(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a 1-based day count.

    Args:
        year: The year (0-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The number of days from 0000-01-01 to the date, inclusive.

    Examples:
        >>> ymd_to_day_count(0, 1, 1)
        1
        >>> ymd_to_day_count(2000, 2, 29)
        730545
    """
    return _days_before_year(year) + _days_before_month(year, month) + day


MIN_DAY_COUNT: int = 1
MAX_DAY_COUNT: int = ymd_to_day_count(MAX_YEAR, 12, 31)  # 3_652_425

# Length of year 0; day counts above it belong to year 1 and later
_YEAR_ZERO_DAYS = days_in_year(0)


def day_count_to_ymd(count: int) -> tuple[int, int, int]:
    """Convert a 1-based day count back to year, month, day.

    Args:
        count: The day count (1 = 0000-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If count is outside [MIN_DAY_COUNT, MAX_DAY_COUNT].

    Examples:
        >>> day_count_to_ymd(1)
        (0, 1, 1)
        >>> day_count_to_ymd(730545)
        (2000, 2, 29)
    """
    if count < MIN_DAY_COUNT or count > MAX_DAY_COUNT:
        raise ValueError(
            f"day count must be between {MIN_DAY_COUNT} and {MAX_DAY_COUNT}, "
            f"got {count}"
        )

    if count <= _YEAR_ZERO_DAYS:
        month, day = _doy_to_md(0, count)
        return (0, month, day)

    # n is 0-indexed days since 0001-01-01
    n = count - _YEAR_ZERO_DAYS - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a cycle ending in a leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def clamp(value: int, low: int, high: int) -> int:
    """Saturate ``value`` into the inclusive range [low, high]."""
    return max(low, min(value, high))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_day_count",
    "day_count_to_ymd",
    "clamp",
    "MIN_DAY_COUNT",
    "MAX_DAY_COUNT",
]
