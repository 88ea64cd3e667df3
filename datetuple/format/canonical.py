"""Canonical string formatting and parsing.

This module converts any datetuple value to and from its canonical
string form, detecting the value type from the shape of the string.

Canonical forms:
    - DateTimeTuple: yyyy-mm-dd@hh:mm:ss
    - DateTuple: yyyy-mm-dd (legacy yyyymmdd, zero-based month)
    - MonthTuple: yyyy-mm (legacy yyyymm, zero-based month)
    - TimeTuple: hh:mm:ss
    - Duration: hh:mm:ss with two or more hour digits

Examples:
    >>> from datetuple.format import parse_tuple, format_canonical

    >>> parse_tuple("2002-01-23")
    DateTuple(2002, 1, 23)

    >>> format_canonical(parse_tuple("2002-01-23@08:30:30"))
    '2002-01-23@08:30:30'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Union

from datetuple.errors import ParseError

if TYPE_CHECKING:
    from datetuple.core.date import DateTuple
    from datetuple.core.datetime import DateTimeTuple
    from datetuple.core.duration import Duration
    from datetuple.core.month import MonthTuple
    from datetuple.core.time import TimeTuple

# Type alias for datetuple values
TupleType = Union["DateTimeTuple", "DateTuple", "MonthTuple", "TimeTuple", "Duration"]


def _detectors() -> list[tuple[re.Pattern[str], Callable[[str], TupleType]]]:
    # Import here to avoid circular imports
    from datetuple.core.date import DateTuple
    from datetuple.core.datetime import DateTimeTuple
    from datetuple.core.duration import Duration
    from datetuple.core.month import MonthTuple
    from datetuple.core.time import TimeTuple

    # Tried in order, first match wins. A two-digit hh:mm:ss is a time of
    # day; longer hour fields can only be a Duration.
    return [
        (re.compile(r"[\d-]+@", re.ASCII), DateTimeTuple.from_string),
        (re.compile(r"(\d{4}-\d{2}-\d{2}|\d{8})\Z", re.ASCII), DateTuple.from_string),
        (re.compile(r"(\d{4}-\d{2}|\d{6})\Z", re.ASCII), MonthTuple.from_string),
        (re.compile(r"\d{2}:\d{2}:\d{2}\Z", re.ASCII), TimeTuple.from_string),
        (re.compile(r"\d{3,}:\d{2}:\d{2}\Z", re.ASCII), Duration.from_string),
    ]


def parse_tuple(s: str) -> TupleType:
    """Parse a canonical (or legacy) string into the matching value type.

    Args:
        s: The string to parse.

    Returns:
        A DateTimeTuple, DateTuple, MonthTuple, TimeTuple or Duration.

    Raises:
        ParseError: If the string has none of the known shapes, or its
            detected type rejects it.
        ValidationError: If the parsed components are out of range.

    Examples:
        >>> parse_tuple("2000-05")
        MonthTuple(2000, 5)
        >>> parse_tuple("08:30:30")
        TimeTuple(8, 30, 30)
        >>> parse_tuple("200:00:00")
        Duration(200, 0, 0)
    """
    s = s.strip()
    if not s:
        raise ParseError("empty string")

    for pattern, parser in _detectors():
        if pattern.match(s):
            return parser(s)

    raise ParseError(
        f"cannot determine value type for: {s!r}. Expected a date-time "
        "(yyyy-mm-dd@hh:mm:ss), date (yyyy-mm-dd), month (yyyy-mm) or time (hh:mm:ss)"
    )


def format_canonical(value: TupleType) -> str:
    """Format a value in its canonical, parseable form.

    Raises:
        TypeError: If value is not a datetuple value type.
    """
    # Import here to avoid circular imports
    from datetuple.core.date import DateTuple
    from datetuple.core.datetime import DateTimeTuple
    from datetuple.core.duration import Duration
    from datetuple.core.month import MonthTuple
    from datetuple.core.time import TimeTuple

    if isinstance(value, (DateTimeTuple, DateTuple, MonthTuple, TimeTuple, Duration)):
        return value.to_string()
    raise TypeError(
        "expected DateTimeTuple, DateTuple, MonthTuple, TimeTuple or Duration, "
        f"got {type(value).__name__}"
    )


__all__ = ["parse_tuple", "format_canonical", "TupleType"]
