"""Internal utilities for Isocalc.

This module contains private implementation details:
    - Calendar conversions between day counts and ISO 8601 coordinates
    - Constants and magic numbers
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isocalc._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_week,
    validate_weekday,
)

__all__: list[str] = [
    "validate_day",
    "validate_day_of_year",
    "validate_month",
    "validate_week",
    "validate_weekday",
]
