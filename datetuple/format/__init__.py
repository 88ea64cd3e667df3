"""String formatting and parsing.

Functions:
    parse_tuple: Parse a canonical or legacy string, detecting its type.
    format_canonical: Format a value in its canonical form.
    format_readable: Format a value for display.

Examples:
    >>> from datetuple.format import parse_tuple, format_readable

    >>> format_readable(parse_tuple("2000-05-10@08:30:00"))
    '10 May 2000 08:30:00'
"""

from __future__ import annotations

from datetuple.format.canonical import format_canonical, parse_tuple
from datetuple.format.readable import format_readable

__all__: list[str] = [
    "parse_tuple",
    "format_canonical",
    "format_readable",
]
