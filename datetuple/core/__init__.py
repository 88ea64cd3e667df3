"""Core value types.

This module provides the fundamental value types:
    - MonthTuple: A month of a specific year
    - DateTuple: Calendar date in the proleptic Gregorian calendar
    - TimeTuple: Time of day with second precision, wrapping at midnight
    - DateTimeTuple: A date and a time of day
    - Duration: Non-negative elapsed time with unbounded hours
"""

from __future__ import annotations

from datetuple.core.date import Date, DateTuple
from datetuple.core.datetime import DateTime, DateTimeTuple
from datetuple.core.duration import Duration
from datetuple.core.month import Month, MonthTuple
from datetuple.core.time import Time, TimeTuple

__all__: list[str] = [
    "Date",
    "DateTuple",
    "DateTime",
    "DateTimeTuple",
    "Duration",
    "Month",
    "MonthTuple",
    "Time",
    "TimeTuple",
]
