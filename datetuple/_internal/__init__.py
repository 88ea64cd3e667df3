"""Internal utilities for datetuple.

This module contains private implementation details:
    - Calendar arithmetic (leap years, day counts)
    - Validation helpers
    - Constants
    - The current time source
    - Custom decorators (@deprecated)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datetuple._internal.decorators import deprecated
from datetuple._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "deprecated",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
