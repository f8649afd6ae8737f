"""Date field enumeration and value ranges.

This module provides the DateField enum naming the generic calendar
fields, and ValueRange describing the valid values of a field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from coptic.errors import ValidationError


class DateField(Enum):
    """Generic calendar fields.

    The enumeration is shared across calendar systems; a Coptic date
    supports the date fields except PROLEPTIC_MONTH and rejects the
    time-of-day fields.

    Examples:
        >>> DateField.MONTH_OF_YEAR.is_date_based
        True
        >>> DateField.HOUR_OF_DAY.is_date_based
        False
    """

    NANO_OF_SECOND = "nano_of_second"
    SECOND_OF_MINUTE = "second_of_minute"
    MINUTE_OF_HOUR = "minute_of_hour"
    HOUR_OF_DAY = "hour_of_day"
    DAY_OF_WEEK = "day_of_week"
    ALIGNED_DAY_OF_WEEK_IN_MONTH = "aligned_day_of_week_in_month"
    ALIGNED_DAY_OF_WEEK_IN_YEAR = "aligned_day_of_week_in_year"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    EPOCH_DAY = "epoch_day"
    ALIGNED_WEEK_OF_MONTH = "aligned_week_of_month"
    ALIGNED_WEEK_OF_YEAR = "aligned_week_of_year"
    MONTH_OF_YEAR = "month_of_year"
    PROLEPTIC_MONTH = "proleptic_month"
    YEAR_OF_ERA = "year_of_era"
    YEAR = "year"
    ERA = "era"

    @property
    def is_date_based(self) -> bool:
        """Return True if the field describes part of a date."""
        return self not in _TIME_FIELDS


_TIME_FIELDS = frozenset(
    {
        DateField.NANO_OF_SECOND,
        DateField.SECOND_OF_MINUTE,
        DateField.MINUTE_OF_HOUR,
        DateField.HOUR_OF_DAY,
    }
)


def field_name(field: object) -> str:
    """Return a display name for a field, for use in error messages."""
    return field.name if isinstance(field, DateField) else repr(field)


@dataclass(frozen=True)
class ValueRange:
    """Inclusive range of valid values for a field.

    Attributes:
        minimum: The smallest valid value.
        maximum: The largest valid value.

    Examples:
        >>> r = ValueRange(1, 13)
        >>> r.is_valid_value(13)
        True
        >>> r.is_valid_value(14)
        False
    """

    minimum: int
    maximum: int

    def is_valid_value(self, value: int) -> bool:
        """Return True if value lies within the range."""
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, field: DateField) -> int:
        """Return value if it lies within the range.

        Args:
            value: The value to check.
            field: The field the value is for, used in the error message.

        Returns:
            The value, unchanged.

        Raises:
            ValidationError: If value is outside the range.
        """
        if not self.is_valid_value(value):
            raise ValidationError(
                f"{field.name} must be between {self.minimum} and "
                f"{self.maximum}, got {value}"
            )
        return value

    def __str__(self) -> str:
        return f"{self.minimum} - {self.maximum}"


__all__ = ["DateField", "ValueRange", "field_name"]
