"""Validation utilities for the Coptic calendar.

This module provides validation helpers for ensuring date
components and day counts are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

from coptic._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from coptic.errors import OverflowError, ValidationError


def validate_year(year: int) -> None:
    """Validate that a proleptic year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-13.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-13.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValidationError(f"month must be between 1 and 13, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The proleptic year.
        month: The month (1-13).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from coptic._internal.calendar import length_of_month

    max_day = length_of_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_epoch_day(epoch_day: int) -> None:
    """Validate that an epoch day maps to a supported year.

    Args:
        epoch_day: Days since 1970-01-01 (ISO).

    Raises:
        OverflowError: If the epoch day falls outside the supported years.
    """
    from coptic._internal.calendar import MAX_EPOCH_DAY, MIN_EPOCH_DAY

    if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
        raise OverflowError(
            f"epoch day must be between {MIN_EPOCH_DAY} and {MAX_EPOCH_DAY}, "
            f"got {epoch_day}"
        )


def validate_year_arithmetic(year: int) -> None:
    """Validate that a year produced by arithmetic is representable.

    Args:
        year: The computed proleptic year.

    Raises:
        OverflowError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"result year {year} is outside the supported range "
            f"{MIN_YEAR} to {MAX_YEAR}"
        )


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_epoch_day",
    "validate_year_arithmetic",
]
