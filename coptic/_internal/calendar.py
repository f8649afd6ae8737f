"""Calendar utilities for the Coptic calendar.

This module provides internal functions for calendar calculations,
including epoch-day conversions and leap year logic.

Epoch day 0 = 1970-01-01 (ISO) = 23 Koiak 1686 AM.
Coptic day 0 = 1 Thout 1 AM, which is epoch day -615558.

All divisions below use Python's floor division and floored modulo,
so the formulas hold unchanged for years before 1 AM.

This module is not part of the public API.
"""

from __future__ import annotations

from coptic._internal.constants import (
    DAYS_IN_EPAGOMENAL_MONTH,
    DAYS_IN_EPAGOMENAL_MONTH_LEAP,
    DAYS_IN_STANDARD_MONTH,
    DAYS_PER_LEAP_YEAR,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    EPOCH_DAY_DIFFERENCE,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a proleptic year is a leap year in the Coptic calendar.

    Every fourth year is a leap year, with no century exceptions. The
    leap year is the one whose number leaves a remainder of 3 when
    divided by 4, so that it precedes a Julian leap year.

    Args:
        year: The proleptic year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(3)
        True
        >>> is_leap_year(1739)
        True
        >>> is_leap_year(1740)
        False
        >>> is_leap_year(-1)
        True
    """
    return year % 4 == 3


def length_of_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The proleptic year (needed for month 13 in leap years).
        month: The month (1-13).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-13.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-13, got {month}")

    if month == MONTHS_PER_YEAR:
        if is_leap_year(year):
            return DAYS_IN_EPAGOMENAL_MONTH_LEAP
        return DAYS_IN_EPAGOMENAL_MONTH
    return DAYS_IN_STANDARD_MONTH


def length_of_year(year: int) -> int:
    """Return the number of days in a year.

    Args:
        year: The proleptic year to check.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return DAYS_PER_LEAP_YEAR if is_leap_year(year) else DAYS_PER_YEAR


def day_of_year(month: int, day: int) -> int:
    """Return the 1-based day of the year for a month and day."""
    return (month - 1) * DAYS_IN_STANDARD_MONTH + day


def start_of_year(year: int) -> int:
    """Return the Coptic day number of the first day of a year.

    Day numbers count from 1 Thout 1 AM (day 0). Each year before
    contributes 365 days plus one for every leap year before it.

    Args:
        year: The proleptic year.

    Returns:
        Days from 1 Thout 1 AM to 1 Thout of the given year.
    """
    return (year - 1) * DAYS_PER_YEAR + year // 4


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an epoch day.

    Args:
        year: The proleptic year.
        month: The month (1-13).
        day: The day (1-30).

    Returns:
        Days since 1970-01-01 (ISO).
    """
    coptic_day = start_of_year(year) + day_of_year(month, day) - 1
    return coptic_day - EPOCH_DAY_DIFFERENCE


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to year, month, day.

    A four year cycle holds exactly 1461 days, so the year is found
    directly from the day count; the 1463 offset places day 0 at the
    start of year 1. The zero-based day of year then splits into
    30-day months, leaving the 5 or 6 remaining days in month 13.

    Args:
        epoch_day: Days since 1970-01-01 (ISO).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1686, 4, 23)
    """
    coptic_day = epoch_day + EPOCH_DAY_DIFFERENCE
    year = (coptic_day * 4 + 1463) // 1461
    doy0 = coptic_day - start_of_year(year)
    month = doy0 // DAYS_IN_STANDARD_MONTH + 1
    day = doy0 % DAYS_IN_STANDARD_MONTH + 1
    return (year, month, day)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Convert an epoch day to day of week (Monday=1, Sunday=7).

    Args:
        epoch_day: Days since 1970-01-01 (ISO).

    Returns:
        Day of week (1=Monday, 7=Sunday).
    """
    # Epoch day 0 (1970-01-01) was a Thursday
    return (epoch_day + 3) % DAYS_PER_WEEK + 1


def resolve_previous_valid(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Clamp a day that overflows month 13 down to the last day of that month.

    Months 1-12 always have 30 days, so only month 13 can need this.
    Values outside the field ranges are returned unchanged and left for
    the date constructor to reject.

    Args:
        year: The proleptic year.
        month: The month.
        day: The day.

    Returns:
        Tuple of (year, month, day) with the day clamped.

    Examples:
        >>> resolve_previous_valid(1740, 13, 6)
        (1740, 13, 5)
        >>> resolve_previous_valid(1739, 13, 6)
        (1739, 13, 6)
    """
    if month == MONTHS_PER_YEAR and day > DAYS_IN_EPAGOMENAL_MONTH:
        day = min(day, length_of_month(year, month))
    return (year, month, day)


MIN_EPOCH_DAY: int = ymd_to_epoch_day(MIN_YEAR, 1, 1)
MAX_EPOCH_DAY: int = ymd_to_epoch_day(
    MAX_YEAR, MONTHS_PER_YEAR, length_of_month(MAX_YEAR, MONTHS_PER_YEAR)
)


__all__ = [
    "is_leap_year",
    "length_of_month",
    "length_of_year",
    "day_of_year",
    "start_of_year",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "resolve_previous_valid",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
]
