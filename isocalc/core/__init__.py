"""Core value types for Isocalc.

Classes:
    Date: Calendar date backed by a single day count.
    Duration: Signed calendar offset with a repeat factor.
"""

from __future__ import annotations

from isocalc.core.date import Date
from isocalc.core.duration import Duration

__all__: list[str] = [
    "Date",
    "Duration",
]
