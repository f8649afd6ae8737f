"""Internal constants for the Coptic calendar.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Distance in days between the Coptic epoch (1 Thout 1 AM, proleptic
# Coptic day 0) and the host epoch day 0 (1970-01-01 ISO).
EPOCH_DAY_DIFFERENCE: int = 574971 + 40587  # 615558

# Ordinal of 1970-01-01 in Python's datetime.date.toordinal() numbering
ISO_ORDINAL_OF_EPOCH_DAY_ZERO: int = 719163

# Calendar shape
MONTHS_PER_YEAR: int = 13
DAYS_IN_STANDARD_MONTH: int = 30
DAYS_IN_EPAGOMENAL_MONTH: int = 5  # month 13, non-leap
DAYS_IN_EPAGOMENAL_MONTH_LEAP: int = 6  # month 13, leap
DAYS_PER_YEAR: int = 365
DAYS_PER_LEAP_YEAR: int = 366
DAYS_PER_CYCLE: int = 1461  # 4 * 365 + 1
DAYS_PER_WEEK: int = 7

# Year limits, matching the year range of the host date framework
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Era values
ERA_BEFORE_AM: int = 0
ERA_AM: int = 1


__all__ = [
    "EPOCH_DAY_DIFFERENCE",
    "ISO_ORDINAL_OF_EPOCH_DAY_ZERO",
    "MONTHS_PER_YEAR",
    "DAYS_IN_STANDARD_MONTH",
    "DAYS_IN_EPAGOMENAL_MONTH",
    "DAYS_IN_EPAGOMENAL_MONTH_LEAP",
    "DAYS_PER_YEAR",
    "DAYS_PER_LEAP_YEAR",
    "DAYS_PER_CYCLE",
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "ERA_BEFORE_AM",
    "ERA_AM",
]
