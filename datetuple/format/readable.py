"""Human-readable formatting.

Readable forms use a fixed English month abbreviation table and are for
display only; they are not parsed back.

    - DateTimeTuple: dd Mon yyyy hh:mm:ss
    - DateTuple: dd Mon yyyy
    - MonthTuple: Mon yyyy
    - TimeTuple: hh:mm
    - Duration: hh:mm
"""

from __future__ import annotations

from datetuple.format.canonical import TupleType


def format_readable(value: TupleType) -> str:
    """Format a value for display.

    Raises:
        TypeError: If value is not a datetuple value type.

    Examples:
        >>> from datetuple import DateTuple, MonthTuple
        >>> format_readable(DateTuple(2002, 1, 23))
        '23 Jan 2002'
        >>> format_readable(MonthTuple(2000, 5))
        'May 2000'
    """
    # Import here to avoid circular imports
    from datetuple.core.date import DateTuple
    from datetuple.core.datetime import DateTimeTuple
    from datetuple.core.duration import Duration
    from datetuple.core.month import MonthTuple
    from datetuple.core.time import TimeTuple

    if isinstance(value, (DateTimeTuple, DateTuple, MonthTuple)):
        return value.to_readable_string()
    elif isinstance(value, (TimeTuple, Duration)):
        return value.to_hhmm_string()
    raise TypeError(
        "expected DateTimeTuple, DateTuple, MonthTuple, TimeTuple or Duration, "
        f"got {type(value).__name__}"
    )


__all__ = ["format_readable"]
