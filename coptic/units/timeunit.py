"""TimeUnit enumeration for standard time units.

This module provides the TimeUnit enum representing the generic
time measurement units, from nanoseconds to millennia. A date only
supports the date-based units.
"""

from __future__ import annotations

from enum import Enum


class TimeUnit(Enum):
    """Standard time units for temporal operations.

    The time-of-day units exist so that callers working with a mixed
    set of units get a clear error from date arithmetic instead of a
    silent truncation.

    Examples:
        >>> TimeUnit.MONTH.is_date_based
        True

        >>> TimeUnit.HOUR.is_date_based
        False
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"

    @property
    def is_date_based(self) -> bool:
        """Return True for units of a day or longer."""
        return self in _DATE_BASED_UNITS

    @property
    def years(self) -> int | None:
        """Return the number of years in one unit, or None below a year.

        Examples:
            >>> TimeUnit.CENTURY.years
            100
            >>> TimeUnit.MONTH.years is None
            True
        """
        return _YEARS_PER_UNIT.get(self)


_DATE_BASED_UNITS = frozenset(
    {
        TimeUnit.DAY,
        TimeUnit.WEEK,
        TimeUnit.MONTH,
        TimeUnit.YEAR,
        TimeUnit.DECADE,
        TimeUnit.CENTURY,
        TimeUnit.MILLENNIUM,
    }
)

_YEARS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.YEAR: 1,
    TimeUnit.DECADE: 10,
    TimeUnit.CENTURY: 100,
    TimeUnit.MILLENNIUM: 1000,
}


__all__ = ["TimeUnit"]
