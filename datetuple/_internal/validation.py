"""Validation utilities for datetuple.

This module provides the range checks shared by every validated
constructor. A failed check always raises ValidationError (the range
error); format problems are ParseError and are raised by the parsers.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from datetuple._internal.constants import MIN_YEAR, MAX_YEAR
from datetuple.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int | None],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Named parameters are checked against (min, max) bounds, both inclusive.
    A max of None leaves the parameter unbounded above.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(minute=(0, 59), hours=(0, None))
        ... def make(hours: int, minute: int) -> None:
        ...     pass

        >>> make(1, 60)
        Traceback (most recent call last):
        ...
        ValidationError: minute must be between 0 and 59, got 60
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is None:
                    continue
                if max_val is None:
                    if value < min_val:
                        raise ValidationError(
                            f"{param_name} must be at least {min_val}, got {value}"
                        )
                elif value < min_val or value > max_val:
                    raise ValidationError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    February 29 is only accepted in leap years.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from datetuple._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]
