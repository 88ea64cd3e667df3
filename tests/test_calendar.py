"""Tests for the calendar utilities.

This module covers the leap-year rule, the days-in-month table and the
day-count conversion, including agreement with the standard library's
proleptic ordinals for years 1-9999.
"""

from __future__ import annotations

import datetime

import pytest

from datetuple._internal.calendar import (
    MAX_DAY_COUNT,
    MIN_DAY_COUNT,
    clamp,
    day_count_to_ymd,
    days_in_month,
    days_in_year,
    is_leap_year,
    ymd_to_day_count,
)


class TestLeapYear:
    """Tests for is_leap_year."""

    def test_divisible_by_400(self) -> None:
        """Years divisible by 400 are leap years."""
        assert is_leap_year(2000)
        assert is_leap_year(0)
        assert is_leap_year(1600)

    def test_century_not_divisible_by_400(self) -> None:
        """Other century years are common years."""
        assert not is_leap_year(1900)
        assert not is_leap_year(2100)
        assert not is_leap_year(100)

    def test_divisible_by_4(self) -> None:
        """Years divisible by 4 are leap years."""
        assert is_leap_year(2004)
        assert is_leap_year(2012)
        assert is_leap_year(2016)

    def test_not_divisible_by_4(self) -> None:
        """Years not divisible by 4 are common years."""
        assert not is_leap_year(2001)
        assert not is_leap_year(2013)
        assert not is_leap_year(2018)

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert days_in_year(2000) == 366
        assert days_in_year(1900) == 365


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_thirty_one_day_months(self) -> None:
        """Long months have 31 days."""
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2001, month) == 31

    def test_thirty_day_months(self) -> None:
        """Short months have 30 days."""
        for month in (4, 6, 9, 11):
            assert days_in_month(2001, month) == 30

    def test_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2000, 2) == 29
        assert days_in_month(2004, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2001, 2) == 28

    def test_invalid_month(self) -> None:
        """Months outside 1-12 raise ValueError."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2000, 13)
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2000, 0)


class TestDayCount:
    """Tests for ymd_to_day_count and day_count_to_ymd."""

    def test_minimum(self) -> None:
        """0000-01-01 is day 1."""
        assert ymd_to_day_count(0, 1, 1) == MIN_DAY_COUNT == 1
        assert day_count_to_ymd(1) == (0, 1, 1)

    def test_maximum(self) -> None:
        """9999-12-31 is the last day count."""
        assert ymd_to_day_count(9999, 12, 31) == MAX_DAY_COUNT == 3_652_425
        assert day_count_to_ymd(MAX_DAY_COUNT) == (9999, 12, 31)

    def test_leap_day_2000(self) -> None:
        """2000-02-29 converts both ways."""
        assert ymd_to_day_count(2000, 2, 29) == 730545
        assert day_count_to_ymd(730545) == (2000, 2, 29)

    def test_year_zero_is_leap(self) -> None:
        """Year 0 has 366 days."""
        assert ymd_to_day_count(0, 2, 29) == 60
        assert ymd_to_day_count(0, 12, 31) == 366
        assert day_count_to_ymd(366) == (0, 12, 31)
        assert day_count_to_ymd(367) == (1, 1, 1)

    def test_cycle_boundaries(self) -> None:
        """Year ends at 4, 100 and 400-year cycle boundaries."""
        for year in (4, 100, 400, 1600, 1900, 2000, 9996):
            count = ymd_to_day_count(year, 12, 31)
            assert day_count_to_ymd(count) == (year, 12, 31)
            assert day_count_to_ymd(count + 1) == (year + 1, 1, 1)

    def test_matches_stdlib_ordinals(self) -> None:
        """Day count is the stdlib ordinal shifted by the 366 days of year 0."""
        start = datetime.date(1, 1, 1).toordinal()
        end = datetime.date(9999, 12, 31).toordinal()
        for ordinal in range(start, end + 1, 997):
            d = datetime.date.fromordinal(ordinal)
            count = ymd_to_day_count(d.year, d.month, d.day)
            assert count == ordinal + 366
            assert day_count_to_ymd(count) == (d.year, d.month, d.day)

    def test_round_trip_every_day_of_leap_and_common_year(self) -> None:
        """Every day of sample years converts both ways."""
        for year in (0, 1900, 2000, 2001):
            first = ymd_to_day_count(year, 1, 1)
            for offset in range(days_in_year(year)):
                y, m, d = day_count_to_ymd(first + offset)
                assert y == year
                assert ymd_to_day_count(y, m, d) == first + offset

    def test_out_of_range(self) -> None:
        """Counts outside the range raise ValueError."""
        with pytest.raises(ValueError, match="day count must be between"):
            day_count_to_ymd(0)
        with pytest.raises(ValueError, match="day count must be between"):
            day_count_to_ymd(MAX_DAY_COUNT + 1)


class TestClamp:
    """Tests for the saturation helper."""

    def test_clamp(self) -> None:
        """clamp saturates into the inclusive range."""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10
