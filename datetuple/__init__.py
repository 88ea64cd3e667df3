"""datetuple: simple, exactly-comparable date and time values.

datetuple covers the proleptic Gregorian calendar from 0000-01-01 00:00:00
to 9999-12-31 23:59:59 with second precision and no timezones.

Core Types:
    MonthTuple (Month): A month of a specific year
    DateTuple (Date): Calendar date (year, month, day)
    TimeTuple (Time): Time of day (hour, minute, second), wraps at midnight
    DateTimeTuple (DateTime): A date and a time of day
    Duration: Non-negative elapsed time, hours unbounded

Format Functions:
    parse_tuple: Parse a canonical string, detecting its type
    format_canonical: Format a value in its canonical form
    format_readable: Format a value for display

Exceptions:
    DateTupleError: Base exception
    ValidationError: Component out of range
    ParseError: String matches no accepted format

Example:
    >>> from datetuple import DateTimeTuple, Duration
    >>> a = DateTimeTuple.from_string("2002-01-23@08:30:30")
    >>> b = DateTimeTuple.from_string("2002-01-24@09:30:30")
    >>> Duration.between(a, b)
    Duration(25, 0, 0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from datetuple.core.date import Date, DateTuple
from datetuple.core.datetime import DateTime, DateTimeTuple
from datetuple.core.duration import Duration
from datetuple.core.month import Month, MonthTuple
from datetuple.core.time import Time, TimeTuple

# Calendar helpers
from datetuple._internal.calendar import days_in_month, is_leap_year

# Exceptions
from datetuple.errors import (
    DateTupleError,
    ParseError,
    ValidationError,
)

# Format functions
from datetuple.format import format_canonical, format_readable, parse_tuple

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTuple",
    "DateTime",
    "DateTimeTuple",
    "Duration",
    "Month",
    "MonthTuple",
    "Time",
    "TimeTuple",
    # Calendar helpers
    "is_leap_year",
    "days_in_month",
    # Exceptions
    "DateTupleError",
    "ValidationError",
    "ParseError",
    # Format functions
    "parse_tuple",
    "format_canonical",
    "format_readable",
]
