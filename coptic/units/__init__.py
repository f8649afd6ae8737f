"""Calendar units and enumerations.

This module provides:
    - CopticEra: BEFORE_AM/AM era designation enum
    - DateField: Generic calendar fields (DAY_OF_MONTH, ERA, etc.)
    - ValueRange: Inclusive range of valid field values
    - TimeUnit: Standard time units (DAY, MONTH, YEAR, etc.)
"""

from __future__ import annotations

from coptic.units.era import CopticEra
from coptic.units.field import DateField, ValueRange
from coptic.units.timeunit import TimeUnit

__all__: list[str] = [
    "CopticEra",
    "DateField",
    "ValueRange",
    "TimeUnit",
]
