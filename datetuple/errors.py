"""datetuple exception hierarchy.

All datetuple-specific exceptions inherit from DateTupleError.
"""

from __future__ import annotations


class DateTupleError(Exception):
    """Base exception for all datetuple errors."""

    pass


class ValidationError(DateTupleError):
    """A component is outside its valid range.

    Raised by constructors and parsers when a value is out of range.

    Examples:
        - Month value outside 1-12
        - Day 29 in February of a non-leap year
        - Hour value outside 0-23
        - Day count outside the supported range
    """

    pass


class ParseError(DateTupleError):
    """Failed to parse string representation.

    Raised when a string matches none of the accepted grammars for a type.

    Examples:
        - Wrong delimiter ("2000/01/01")
        - Wrong field count ("08:30")
        - Non-numeric field ("05:a:04")
    """

    pass


__all__ = [
    "DateTupleError",
    "ValidationError",
    "ParseError",
]
