"""Internal utilities for the Coptic calendar.

This module contains private implementation details:
    - Calendar arithmetic (leap years, epoch-day conversion)
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from coptic._internal.validation import (
    validate_day,
    validate_epoch_day,
    validate_month,
    validate_year,
    validate_year_arithmetic,
)

__all__: list[str] = [
    "validate_day",
    "validate_epoch_day",
    "validate_month",
    "validate_year",
    "validate_year_arithmetic",
]
