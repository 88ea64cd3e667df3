"""Tests for the TimeTuple class.

This module covers:
- Construction and validation
- Wrap-around arithmetic (seconds, minutes, hours, whole times)
- Comparisons and hashing
- Canonical and short formatting, parsing
"""

import pytest

from datetuple.core.time import Time, TimeTuple
from datetuple.errors import ParseError, ValidationError


class TestTimeConstruction:
    """Tests for TimeTuple construction."""

    def test_default_values(self) -> None:
        """TimeTuple with no args creates midnight."""
        t = TimeTuple()
        assert (t.hour, t.minute, t.second) == (0, 0, 0)
        assert t == TimeTuple.midnight()

    def test_basic_construction(self) -> None:
        """Create TimeTuple with hour, minute, second."""
        t = TimeTuple(3, 0, 39)
        assert t.hour == 3
        assert t.minute == 0
        assert t.second == 39

    def test_keyword_construction(self) -> None:
        """Components can be passed by keyword."""
        assert TimeTuple(hour=23, minute=59, second=59).to_seconds() == 86399

    def test_alias(self) -> None:
        """Time is an alias of TimeTuple."""
        assert Time is TimeTuple


class TestTimeValidation:
    """Tests for TimeTuple validation."""

    def test_invalid_hour(self) -> None:
        """Hour outside 0-23 raises ValidationError."""
        with pytest.raises(ValidationError, match="hour must be between 0 and 23"):
            TimeTuple(24, 0, 0)
        with pytest.raises(ValidationError, match="hour must be between 0 and 23"):
            TimeTuple(-1, 0, 0)

    def test_invalid_minute(self) -> None:
        """Minute 60 raises ValidationError."""
        with pytest.raises(ValidationError, match="minute must be between 0 and 59"):
            TimeTuple(12, 60, 0)

    def test_invalid_second(self) -> None:
        """Second outside 0-59 raises ValidationError."""
        with pytest.raises(ValidationError, match="second must be between 0 and 59"):
            TimeTuple(12, 30, 60)
        with pytest.raises(ValidationError, match="second must be between 0 and 59"):
            TimeTuple(12, 30, second=-1)


class TestTimeFromTotalSeconds:
    """Tests for TimeTuple.from_total_seconds."""

    def test_reconstructs_components(self) -> None:
        """Total seconds decompose back into the components."""
        for h, m, s in [(0, 0, 0), (2, 30, 30), (12, 0, 1), (23, 59, 59)]:
            t = TimeTuple.from_total_seconds(h * 3600 + m * 60 + s)
            assert (t.hour, t.minute, t.second) == (h, m, s)

    def test_full_day_wraps_to_midnight(self) -> None:
        """86400 seconds is midnight again."""
        assert TimeTuple.from_total_seconds(86400) == TimeTuple(0, 0, 0)

    def test_large_and_negative_values_wrap(self) -> None:
        """Any integer is reduced modulo one day."""
        assert TimeTuple.from_total_seconds(86400 * 3 + 61) == TimeTuple(0, 1, 1)
        assert TimeTuple.from_total_seconds(-1) == TimeTuple(23, 59, 59)


class TestTimeConversions:
    """Tests for to_seconds and to_minutes."""

    def test_to_seconds(self) -> None:
        """to_seconds returns seconds since midnight."""
        assert TimeTuple(2, 30, 30).to_seconds() == 9030

    def test_to_minutes_truncates(self) -> None:
        """to_minutes drops leftover seconds."""
        assert TimeTuple(2, 30, 30).to_minutes() == 150
        assert TimeTuple(2, 30, 59).to_minutes() == 150


class TestTimeArithmetic:
    """Tests for wrap-around arithmetic."""

    def test_manipulate_seconds(self) -> None:
        """Add and subtract seconds."""
        t = TimeTuple(10, 58, 59).add_seconds(3)
        assert t == TimeTuple(10, 59, 2)
        assert t.subtract_seconds(1).subtract_seconds(2) == TimeTuple(10, 58, 59)

    def test_manipulate_minutes(self) -> None:
        """Add and subtract minutes."""
        t = TimeTuple(10, 58, 59).add_minutes(3)
        assert t == TimeTuple(11, 1, 59)
        assert t.subtract_minutes(1).subtract_minutes(2) == TimeTuple(10, 58, 59)

    def test_manipulate_hours(self) -> None:
        """Add and subtract hours."""
        t = TimeTuple(10, 58, 59).add_hours(3)
        assert t == TimeTuple(13, 58, 59)
        assert t.subtract_hours(1).subtract_hours(2) == TimeTuple(10, 58, 59)

    def test_add_wraps_forward(self) -> None:
        """Adding past 23:59:59 wraps to the next day."""
        assert TimeTuple(23, 59, 59).add_seconds(1) == TimeTuple(0, 0, 0)
        assert TimeTuple(22, 0, 0).add_hours(50) == TimeTuple(0, 0, 0)

    def test_subtract_wraps_backward(self) -> None:
        """Subtracting past midnight wraps to the previous day."""
        assert TimeTuple(0, 0, 0).subtract_seconds(1) == TimeTuple(23, 59, 59)
        assert TimeTuple(1, 0, 0).subtract_hours(2) == TimeTuple(23, 0, 0)
        assert TimeTuple(0, 30, 0).subtract_minutes(24 * 60 * 2) == TimeTuple(0, 30, 0)

    def test_negative_amount_is_opposite_operation(self) -> None:
        """A negative amount performs the opposite operation."""
        assert TimeTuple(5, 0, 0).add_minutes(-30) == TimeTuple(4, 30, 0)

    def test_original_unchanged(self) -> None:
        """Arithmetic returns a new value."""
        t = TimeTuple(10, 0, 0)
        t.add_hours(1)
        assert t == TimeTuple(10, 0, 0)

    def test_operators(self) -> None:
        """+ and - match add_time and subtract_time."""
        zeroes = TimeTuple(0, 0, 0)
        ones = TimeTuple(1, 1, 1)
        twos = TimeTuple(2, 2, 2)
        assert ones + ones == twos
        assert ones - ones == zeroes
        assert ones.add_time(ones) == twos
        assert twos.subtract_time(ones) == ones

    def test_operator_midnight_wrap(self) -> None:
        """Operators wrap around midnight."""
        assert TimeTuple(22, 0, 0) + TimeTuple(1, 0, 0) == TimeTuple(23, 0, 0)
        assert TimeTuple(22, 0, 0) + TimeTuple(3, 0, 0) == TimeTuple(1, 0, 0)
        assert TimeTuple(1, 0, 0) - TimeTuple(3, 0, 0) == TimeTuple(22, 0, 0)

    def test_operator_with_other_type(self) -> None:
        """Adding a non-TimeTuple raises TypeError."""
        with pytest.raises(TypeError):
            TimeTuple(1, 0, 0) + 5  # type: ignore[operator]


class TestTimeComparison:
    """Tests for ordering and hashing."""

    def test_ordering(self) -> None:
        """Times order by total seconds."""
        zeroes = TimeTuple(0, 0, 0)
        ones = TimeTuple(1, 1, 1)
        twos = TimeTuple(2, 2, 2)
        assert zeroes < ones < twos
        assert twos > ones
        assert zeroes <= ones
        assert ones <= ones
        assert ones >= ones
        assert ones != twos

    def test_hash(self) -> None:
        """Equal times hash equally."""
        assert hash(TimeTuple(8, 30, 0)) == hash(TimeTuple(8, 30, 0))
        assert len({TimeTuple(8, 30, 0), TimeTuple(8, 30, 0)}) == 1

    def test_not_equal_to_other_types(self) -> None:
        """TimeTuple never equals a plain int."""
        assert TimeTuple(0, 0, 0) != 0

    def test_midnight_is_truthy(self) -> None:
        """Midnight is truthy."""
        assert TimeTuple.midnight()


class TestTimeFormatting:
    """Tests for formatting and parsing."""

    def test_to_string(self) -> None:
        """to_string and str give hh:mm:ss."""
        assert TimeTuple(3, 0, 39).to_string() == "03:00:39"
        assert str(TimeTuple(3, 0, 39)) == "03:00:39"

    def test_to_hhmm_string(self) -> None:
        """to_hhmm_string drops seconds."""
        assert TimeTuple(3, 0, 39).to_hhmm_string() == "03:00"

    def test_repr(self) -> None:
        """repr shows the components."""
        assert repr(TimeTuple(8, 30, 0)) == "TimeTuple(8, 30, 0)"

    def test_from_string(self) -> None:
        """Parse hh:mm:ss."""
        t = TimeTuple.from_string("08:30:30")
        assert t == TimeTuple(8, 30, 30)
        assert t.to_string() == "08:30:30"
        assert t.to_hhmm_string() == "08:30"

    def test_from_string_bad_format(self) -> None:
        """Malformed strings raise ParseError."""
        for bad in ["05:a:04", "08:30", "8:30:30", "08-30-30", "", "08:30:30 "]:
            with pytest.raises(ParseError):
                TimeTuple.from_string(bad)

    def test_from_string_out_of_range(self) -> None:
        """Well-formed but out-of-range fields raise ValidationError."""
        with pytest.raises(ValidationError):
            TimeTuple.from_string("24:00:00")
        with pytest.raises(ValidationError):
            TimeTuple.from_string("12:60:00")

    @pytest.mark.parametrize("s", ["08:30:30\n", "٠٨:30:30", "０８:30:30"])
    def test_from_string_rejects_newline_and_non_ascii(self, s: str) -> None:
        """Only ASCII digits are accepted and nothing may follow the seconds."""
        with pytest.raises(ParseError):
            TimeTuple.from_string(s)


class TestTimeNow:
    """Tests for TimeTuple.now."""

    def test_now_with_clock(self, fixed_clock) -> None:
        """now() reads the given clock."""
        assert TimeTuple.now(fixed_clock) == TimeTuple(8, 30, 5)

    def test_now_system_clock(self) -> None:
        """now() defaults to the system clock."""
        assert isinstance(TimeTuple.now(), TimeTuple)
