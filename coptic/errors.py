"""Coptic exception hierarchy.

All Coptic-specific exceptions inherit from CopticError.
"""

from __future__ import annotations


class CopticError(Exception):
    """Base exception for all Coptic errors."""

    pass


class ValidationError(CopticError):
    """Invalid date component.

    Raised when a date component is out of range or invalid.

    Examples:
        - Month value outside 1-13
        - Day value outside valid range for the month
        - Year outside the supported range
    """

    pass


class UnsupportedFieldError(CopticError):
    """Field not supported by the Coptic calendar.

    Raised when reading, ranging or adjusting a field that is not
    one of the supported date fields.

    Examples:
        - HOUR_OF_DAY on a date
        - PROLEPTIC_MONTH
    """

    pass


class UnsupportedUnitError(CopticError):
    """Unit not supported for date arithmetic.

    Raised when adding or measuring an amount in a unit that a date
    cannot represent.

    Examples:
        - Adding hours to a date
        - Measuring the distance between two dates in seconds
    """

    pass


class CalendarMismatchError(CopticError):
    """Operation combines dates from different calendar systems.

    Examples:
        - Distance between a CopticDate and a datetime.date
    """

    pass


class OverflowError(CopticError):
    """Arithmetic operation exceeded representable range.

    Raised when a date calculation produces a result that
    cannot be represented.

    Examples:
        - Adding days past year 999,999,999
        - Converting an epoch day outside the supported range
    """

    pass


class ParseError(CopticError):
    """Failed to read a stored date.

    Raised when persisted data cannot be turned back into a date.

    Examples:
        - Missing year, month or day
        - Wrong type tag
        - Non-integer component
    """

    pass


__all__ = [
    "CopticError",
    "ValidationError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "CalendarMismatchError",
    "OverflowError",
    "ParseError",
]
