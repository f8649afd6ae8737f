"""Epoch-day conversion utilities for Coptic dates.

This module provides functions for converting between CopticDate and
the epoch-day count shared across calendar systems, and between
CopticDate and Python's datetime.date.

Functions:
    to_epoch_day: Convert a CopticDate to an epoch day.
    from_epoch_day: Create a CopticDate from an epoch day.
    to_iso_date: Convert a CopticDate to a datetime.date.
    from_iso_date: Create a CopticDate from a datetime.date.

Epoch day 0 is 1970-01-01 (ISO), which is 23 Koiak 1686 AM.

Examples:
    >>> from coptic.convert import from_epoch_day, to_epoch_day

    >>> from_epoch_day(0)
    CopticDate(1686, 4, 23)

    >>> to_epoch_day(from_epoch_day(-615558))
    -615558
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import datetime

    from coptic.core.date import CopticDate


def to_epoch_day(date: "CopticDate") -> int:
    """Convert a CopticDate to an epoch day.

    Args:
        date: The CopticDate to convert.

    Returns:
        Days since 1970-01-01 (ISO).

    Examples:
        >>> from coptic import CopticDate
        >>> to_epoch_day(CopticDate(1, 1, 1))
        -615558
    """
    return date.to_epoch_day()


def from_epoch_day(epoch_day: int) -> "CopticDate":
    """Create a CopticDate from an epoch day.

    Args:
        epoch_day: Days since 1970-01-01 (ISO).

    Returns:
        The CopticDate for that day.

    Raises:
        OverflowError: If the epoch day is outside the supported range.

    Examples:
        >>> from_epoch_day(-615558)
        CopticDate(1, 1, 1)
    """
    from coptic.core.date import CopticDate

    return CopticDate.from_epoch_day(epoch_day)


def to_iso_date(date: "CopticDate") -> "datetime.date":
    """Convert a CopticDate to the datetime.date for the same day.

    Examples:
        >>> from coptic import CopticDate
        >>> to_iso_date(CopticDate(1741, 1, 1))
        datetime.date(2024, 9, 11)
    """
    return date.to_iso_date()


def from_iso_date(date: "datetime.date") -> "CopticDate":
    """Create a CopticDate for the same day as a datetime.date.

    Examples:
        >>> import datetime
        >>> from_iso_date(datetime.date(2024, 9, 11))
        CopticDate(1741, 1, 1)
    """
    from coptic.core.date import CopticDate

    return CopticDate.from_iso_date(date)


__all__ = [
    "to_epoch_day",
    "from_epoch_day",
    "to_iso_date",
    "from_iso_date",
]
