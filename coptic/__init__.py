"""Coptic: Coptic calendar dates for Python.

Coptic provides dates in the Coptic calendar, a solar calendar of twelve
30-day months followed by a 5-day intercalary month (6 days in a leap
year), and converts them exactly to and from the epoch-day count shared
by other calendar systems.

Core Types:
    CopticDate: Date in the proleptic Coptic calendar (year, month, day)
    CopticChronology: The calendar system (leap years, eras, field ranges)

Units:
    CopticEra: BEFORE_AM/AM era designation
    DateField: Calendar fields (DAY_OF_MONTH, MONTH_OF_YEAR, ERA, etc.)
    ValueRange: Range of valid values for a field
    TimeUnit: Standard time units (DAY, WEEK, MONTH, YEAR, etc.)

Exceptions:
    CopticError: Base exception
    ValidationError: Invalid date component
    UnsupportedFieldError: Field not supported by a date
    UnsupportedUnitError: Unit not supported by date arithmetic
    CalendarMismatchError: Dates from different calendar systems
    OverflowError: Arithmetic overflow
    ParseError: Malformed stored date

Example:
    >>> from coptic import CopticDate, DateField
    >>> d = CopticDate.from_epoch_day(0)
    >>> d
    CopticDate(1686, 4, 23)
    >>> d.with_field(DateField.MONTH_OF_YEAR, 13)
    CopticDate(1686, 13, 5)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from coptic.core.chronology import CopticChronology
from coptic.core.date import CopticDate

# Units
from coptic.units.era import CopticEra
from coptic.units.field import DateField, ValueRange
from coptic.units.timeunit import TimeUnit

# Exceptions
from coptic.errors import (
    CalendarMismatchError,
    CopticError,
    OverflowError,
    ParseError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CopticDate",
    "CopticChronology",
    # Units
    "CopticEra",
    "DateField",
    "ValueRange",
    "TimeUnit",
    # Exceptions
    "CopticError",
    "ValidationError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "CalendarMismatchError",
    "OverflowError",
    "ParseError",
]
