"""JSON serialization and deserialization for datetuple values.

This module provides functions for converting values to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

The JSON format uses the canonical string form with a type tag for
polymorphic deserialization:

    {"_type": "DateTimeTuple", "value": "2018-10-02@08:30:00"}
    {"_type": "DateTuple", "value": "2018-10-02"}
    {"_type": "MonthTuple", "value": "2018-10"}
    {"_type": "TimeTuple", "value": "08:30:00"}
    {"_type": "Duration", "value": "200:00:00"}

Examples:
    >>> from datetuple import DateTuple
    >>> from datetuple.convert import to_json, from_json

    >>> data = to_json(DateTuple(2018, 10, 2))
    >>> data
    {'_type': 'DateTuple', 'value': '2018-10-02'}
    >>> from_json(data) == DateTuple(2018, 10, 2)
    True
"""

from __future__ import annotations

from typing import Any

from datetuple.errors import ParseError
from datetuple.format.canonical import TupleType


def _types() -> dict[str, type]:
    # Import here to avoid circular imports
    from datetuple.core.date import DateTuple
    from datetuple.core.datetime import DateTimeTuple
    from datetuple.core.duration import Duration
    from datetuple.core.month import MonthTuple
    from datetuple.core.time import TimeTuple

    return {
        cls.__name__: cls
        for cls in (DateTimeTuple, DateTuple, MonthTuple, TimeTuple, Duration)
    }


def to_json(value: TupleType) -> dict[str, Any]:
    """Convert a value to a JSON-serializable dictionary.

    Args:
        value: A DateTimeTuple, DateTuple, MonthTuple, TimeTuple or Duration.

    Returns:
        A dictionary with `_type` and `value` fields.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from datetuple import TimeTuple
        >>> to_json(TimeTuple(8, 30, 0))
        {'_type': 'TimeTuple', 'value': '08:30:00'}
    """
    type_name = type(value).__name__
    if _types().get(type_name) is not type(value):
        raise TypeError(
            "expected DateTimeTuple, DateTuple, MonthTuple, TimeTuple or Duration, "
            f"got {type_name}"
        )
    return {"_type": type_name, "value": value.to_string()}


def from_json(data: dict[str, Any]) -> TupleType:
    """Create a value from a JSON dictionary.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        The value named by `_type`, parsed from `value`.

    Raises:
        ParseError: If the data is missing required fields or has invalid format.
        ValidationError: If the parsed components are out of range.
        TypeError: If `_type` is not a recognized type.

    Examples:
        >>> from_json({'_type': 'MonthTuple', 'value': '2018-10'})
        MonthTuple(2018, 10)
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")

    cls = _types().get(type_name)
    if cls is None:
        raise TypeError(f"unknown value type: {type_name!r}")

    value = data.get("value")
    if not isinstance(value, str) or not value:
        raise ParseError(f"missing 'value' field for {type_name}")

    return cls.from_string(value)


__all__ = ["to_json", "from_json"]
