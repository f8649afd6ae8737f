"""Core Coptic calendar types.

This module provides:
    - CopticDate: A date in the proleptic Coptic calendar
    - CopticChronology: The calendar-wide rules shared by all dates
"""

from __future__ import annotations

from coptic.core.chronology import CopticChronology
from coptic.core.date import CopticDate

__all__: list[str] = [
    "CopticChronology",
    "CopticDate",
]
