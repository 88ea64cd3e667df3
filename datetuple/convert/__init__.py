"""Value conversion utilities.

This module provides functions for converting values to and from
JSON-serializable dictionaries.

Examples:
    >>> from datetuple import DateTimeTuple
    >>> from datetuple.convert import to_json, from_json

    >>> dt = DateTimeTuple.from_string("2018-10-02@08:30:00")
    >>> from_json(to_json(dt)) == dt
    True
"""

from __future__ import annotations

from datetuple.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
