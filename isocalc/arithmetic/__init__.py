"""Calendar arithmetic for Isocalc dates.

Functions:
    add_duration_to_date: Apply a Duration (years and months, then weeks and days).
    subtract_duration_from_date: Apply the negated Duration.
    shift_years: Step a (year, month, day) triple by whole years.
    shift_months: Step a (year, month, day) triple by whole months.
"""

from __future__ import annotations

from isocalc.arithmetic.duration_ops import (
    add_duration_to_date,
    shift_months,
    shift_years,
    subtract_duration_from_date,
)

__all__: list[str] = [
    "add_duration_to_date",
    "subtract_duration_from_date",
    "shift_years",
    "shift_months",
]
