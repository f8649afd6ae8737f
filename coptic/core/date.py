"""CopticDate class representing a date in the Coptic calendar.

This module provides the CopticDate class for representing calendar
dates in the proleptic Coptic calendar, with support for dates before
the Era of the Martyrs.
"""

from __future__ import annotations

import datetime
import logging
from typing import overload

from coptic._internal.calendar import (
    day_of_year,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    length_of_month,
    length_of_year,
    resolve_previous_valid,
    ymd_to_epoch_day,
)
from coptic._internal.constants import (
    DAYS_IN_STANDARD_MONTH,
    DAYS_PER_WEEK,
    ISO_ORDINAL_OF_EPOCH_DAY_ZERO,
    MAX_YEAR,
    MONTHS_PER_YEAR,
)
from coptic._internal.validation import (
    validate_day,
    validate_epoch_day,
    validate_month,
    validate_year,
    validate_year_arithmetic,
)
from coptic.core.chronology import CopticChronology
from coptic.errors import (
    CalendarMismatchError,
    OverflowError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)
from coptic.units.era import CopticEra
from coptic.units.field import DateField, ValueRange, field_name
from coptic.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)


class CopticDate:
    """A date in the proleptic Coptic calendar.

    The Coptic calendar has twelve months of 30 days followed by a
    thirteenth month of 5 days, or 6 days in a leap year. Years are
    counted from 1 Thout 1 AM (29 August 284 Julian). The proleptic
    year continues through zero into negative numbers for earlier
    dates; those fall in the era BEFORE_AM.

    A CopticDate stores only the proleptic year, month and day. Every
    other value (day-of-year, day-of-week, era) is derived on demand,
    and every adjustment returns a new instance.

    Attributes:
        year: The proleptic year (zero or negative before 1 AM).
        month: The month (1-13).
        day: The day of the month (1-30, or 1-6 in month 13).

    Examples:
        >>> d = CopticDate(1686, 4, 23)
        >>> d.to_epoch_day()
        0
        >>> d.day_of_week  # Thursday
        4

        >>> CopticDate(1739, 13, 6)  # Valid leap year date
        CopticDate(1739, 13, 6)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, proleptic_year: int, month: int, day: int) -> None:
        """Create a CopticDate from proleptic year, month and day.

        Args:
            proleptic_year: The proleptic year (0 = 1 BEFORE_AM).
            month: The month (1-13).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> CopticDate(1740, 13, 6)  # 1740 is not a leap year
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 5 for 1740-13, got 6
        """
        validate_year(proleptic_year)
        validate_month(month)
        validate_day(proleptic_year, month, day)

        self._year = proleptic_year
        self._month = month
        self._day = day

    @classmethod
    def of(cls, era: CopticEra, year_of_era: int, month: int, day: int) -> CopticDate:
        """Create a CopticDate from era, year-of-era, month and day.

        Examples:
            >>> CopticDate.of(CopticEra.BEFORE_AM, 1, 1, 1)
            CopticDate(0, 1, 1)
        """
        return CopticChronology.INSTANCE.date(era, year_of_era, month, day)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> CopticDate:
        """Create a CopticDate from an epoch day.

        Args:
            epoch_day: Days since 1970-01-01 (ISO).

        Returns:
            The corresponding CopticDate.

        Raises:
            OverflowError: If the epoch day is outside the supported range.

        Examples:
            >>> CopticDate.from_epoch_day(0)
            CopticDate(1686, 4, 23)
        """
        validate_epoch_day(epoch_day)
        year, month, day = epoch_day_to_ymd(epoch_day)
        return cls(year, month, day)

    @classmethod
    def from_year_day(cls, proleptic_year: int, day_of_year: int) -> CopticDate:
        """Create a CopticDate from a proleptic year and day-of-year.

        Args:
            proleptic_year: The proleptic year.
            day_of_year: The day of the year (1-365, or 1-366 in a leap year).

        Raises:
            ValidationError: If day_of_year is out of range for the year.

        Examples:
            >>> CopticDate.from_year_day(1739, 366)
            CopticDate(1739, 13, 6)
        """
        validate_year(proleptic_year)
        max_day = length_of_year(proleptic_year)
        if day_of_year < 1 or day_of_year > max_day:
            raise ValidationError(
                f"day of year must be between 1 and {max_day} for "
                f"{proleptic_year}, got {day_of_year}"
            )
        doy0 = day_of_year - 1
        return cls(
            proleptic_year,
            doy0 // DAYS_IN_STANDARD_MONTH + 1,
            doy0 % DAYS_IN_STANDARD_MONTH + 1,
        )

    @classmethod
    def from_iso_date(cls, date: datetime.date) -> CopticDate:
        """Create a CopticDate for the same day as a datetime.date.

        Examples:
            >>> import datetime
            >>> CopticDate.from_iso_date(datetime.date(1970, 1, 1))
            CopticDate(1686, 4, 23)
        """
        return cls.from_epoch_day(date.toordinal() - ISO_ORDINAL_OF_EPOCH_DAY_ZERO)

    @classmethod
    def today(cls) -> CopticDate:
        """Return today's date in the local timezone."""
        return cls.from_iso_date(datetime.date.today())

    @classmethod
    def _resolve_previous_valid(cls, year: int, month: int, day: int) -> CopticDate:
        return cls(*resolve_previous_valid(year, month, day))

    @property
    def chronology(self) -> CopticChronology:
        """Return the calendar system of this date."""
        return CopticChronology.INSTANCE

    @property
    def year(self) -> int:
        """Return the proleptic year.

        Returns:
            The year (zero or negative before 1 AM).
        """
        return self._year

    @property
    def month(self) -> int:
        """Return the month (1-13)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month (1-30)."""
        return self._day

    @property
    def year_of_era(self) -> int:
        """Return the year within the era.

        Proleptic year 0 is year 1 BEFORE_AM, year -1 is year 2
        BEFORE_AM, and so on.

        Examples:
            >>> CopticDate(0, 1, 1).year_of_era
            1
            >>> CopticDate(1686, 1, 1).year_of_era
            1686
        """
        return self._year if self._year >= 1 else 1 - self._year

    @property
    def era(self) -> CopticEra:
        """Return the era (BEFORE_AM or AM) for this date.

        Examples:
            >>> CopticDate(1686, 4, 23).era
            <CopticEra.AM: 1>
            >>> CopticDate(0, 1, 1).era
            <CopticEra.BEFORE_AM: 0>
        """
        return CopticEra.AM if self._year >= 1 else CopticEra.BEFORE_AM

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> CopticDate(1739, 13, 6).day_of_year
            366
        """
        return day_of_year(self._month, self._day)

    @property
    def day_of_week(self) -> int:
        """Return the day of the week.

        Returns:
            Day of week (1=Monday, 7=Sunday).
        """
        return epoch_day_to_day_of_week(self.to_epoch_day())

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> CopticDate(1739, 1, 1).is_leap_year
            True
            >>> CopticDate(1740, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self._year)

    def length_of_month(self) -> int:
        """Return the number of days in this date's month (5, 6 or 30)."""
        return length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        """Return the number of days in this date's year (365 or 366)."""
        return length_of_year(self._year)

    # Field protocol

    def is_supported(self, field: DateField) -> bool:
        """Return True if the field can be read from and set on this date."""
        return CopticChronology.INSTANCE.is_supported(field)

    def range(self, field: DateField) -> ValueRange:
        """Return the range of valid values for a field on this date.

        The range is refined by this date where the calendar makes it
        vary: month 13 is shorter, a leap year is longer, and the
        BEFORE_AM era reaches one year further back than AM reaches
        forward.

        Args:
            field: The field to query.

        Returns:
            The range of valid values.

        Raises:
            UnsupportedFieldError: If the field is not supported.

        Examples:
            >>> CopticDate(1740, 13, 1).range(DateField.DAY_OF_MONTH)
            ValueRange(minimum=1, maximum=5)
        """
        chrono_range = CopticChronology.INSTANCE.range(field)
        if field is DateField.DAY_OF_MONTH:
            return ValueRange(1, self.length_of_month())
        if field is DateField.DAY_OF_YEAR:
            return ValueRange(1, self.length_of_year())
        if field is DateField.ALIGNED_WEEK_OF_MONTH:
            return ValueRange(1, 1 if self._month == MONTHS_PER_YEAR else 5)
        if field is DateField.YEAR_OF_ERA:
            return ValueRange(1, MAX_YEAR + 1 if self._year <= 0 else MAX_YEAR)
        return chrono_range

    def get(self, field: DateField) -> int:
        """Return the value of a field.

        Args:
            field: The field to read.

        Returns:
            The field value.

        Raises:
            UnsupportedFieldError: If the field is not supported.

        Examples:
            >>> d = CopticDate(1686, 4, 23)
            >>> d.get(DateField.DAY_OF_YEAR)
            113
            >>> d.get(DateField.ALIGNED_WEEK_OF_MONTH)
            4
        """
        if field is DateField.DAY_OF_WEEK:
            return self.day_of_week
        if field is DateField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % DAYS_PER_WEEK + 1
        if field is DateField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % DAYS_PER_WEEK + 1
        if field is DateField.DAY_OF_MONTH:
            return self._day
        if field is DateField.DAY_OF_YEAR:
            return self.day_of_year
        if field is DateField.EPOCH_DAY:
            return self.to_epoch_day()
        if field is DateField.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // DAYS_PER_WEEK + 1
        if field is DateField.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // DAYS_PER_WEEK + 1
        if field is DateField.MONTH_OF_YEAR:
            return self._month
        if field is DateField.YEAR_OF_ERA:
            return self.year_of_era
        if field is DateField.YEAR:
            return self._year
        if field is DateField.ERA:
            return self.era.value
        raise UnsupportedFieldError(f"Unsupported field: {field_name(field)}")

    def with_field(self, field: DateField, value: int) -> CopticDate:
        """Return a new CopticDate with one field set to a new value.

        Fields that name a position within a week move the date by
        whole days; fields that name the year or month keep the other
        components and clamp a day past the end of month 13 back to
        its last day.

        Args:
            field: The field to set.
            value: The new value.

        Returns:
            A new CopticDate.

        Raises:
            UnsupportedFieldError: If the field is not supported.
            ValidationError: If the value is outside the field's range.

        Examples:
            >>> CopticDate(1739, 13, 6).with_field(DateField.YEAR, 1740)
            CopticDate(1740, 13, 5)
            >>> CopticDate(1686, 4, 23).with_field(DateField.DAY_OF_WEEK, 1)
            CopticDate(1686, 4, 20)
        """
        CopticChronology.INSTANCE.range(field).check_valid_value(value, field)

        if field is DateField.DAY_OF_WEEK:
            return self.plus_days(value - self.day_of_week)
        if field is DateField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return self.plus_days(value - self.get(field))
        if field is DateField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return self.plus_days(value - self.get(field))
        if field is DateField.DAY_OF_MONTH:
            return self._resolve_previous_valid(self._year, self._month, value)
        if field is DateField.DAY_OF_YEAR:
            return self._resolve_previous_valid(
                self._year,
                (value - 1) // DAYS_IN_STANDARD_MONTH + 1,
                (value - 1) % DAYS_IN_STANDARD_MONTH + 1,
            )
        if field is DateField.EPOCH_DAY:
            return CopticDate.from_epoch_day(value)
        if field is DateField.ALIGNED_WEEK_OF_MONTH:
            return self.plus_days((value - self.get(field)) * DAYS_PER_WEEK)
        if field is DateField.ALIGNED_WEEK_OF_YEAR:
            return self.plus_days((value - self.get(field)) * DAYS_PER_WEEK)
        if field is DateField.MONTH_OF_YEAR:
            return self._resolve_previous_valid(self._year, value, self._day)
        if field is DateField.YEAR_OF_ERA:
            year = value if self._year >= 1 else 1 - value
            return self._resolve_previous_valid(year, self._month, self._day)
        if field is DateField.YEAR:
            return self._resolve_previous_valid(value, self._month, self._day)
        if field is DateField.ERA:
            if value == self.era.value:
                return self
            year = 1 - self._year
            validate_year_arithmetic(year)
            return self._resolve_previous_valid(year, self._month, self._day)
        raise UnsupportedFieldError(f"Unsupported field: {field_name(field)}")

    def with_era(self, era: CopticEra) -> CopticDate:
        """Return a new CopticDate in the given era, keeping the year-of-era.

        Examples:
            >>> CopticDate(1, 1, 1).with_era(CopticEra.BEFORE_AM)
            CopticDate(0, 1, 1)
        """
        return self.with_field(DateField.ERA, era.value)

    def with_year(self, year_of_era: int) -> CopticDate:
        """Return a new CopticDate with the year-of-era replaced."""
        return self.with_field(DateField.YEAR_OF_ERA, year_of_era)

    def with_month(self, month: int) -> CopticDate:
        """Return a new CopticDate with the month replaced."""
        return self.with_field(DateField.MONTH_OF_YEAR, month)

    def with_day_of_month(self, day: int) -> CopticDate:
        """Return a new CopticDate with the day of the month replaced."""
        return self.with_field(DateField.DAY_OF_MONTH, day)

    def with_day_of_year(self, day_of_year: int) -> CopticDate:
        """Return a new CopticDate with the day of the year replaced."""
        return self.with_field(DateField.DAY_OF_YEAR, day_of_year)

    # Arithmetic

    def plus_days(self, days: int) -> CopticDate:
        """Return a new CopticDate offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new CopticDate, or this date if days is zero.

        Raises:
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> CopticDate(1740, 1, 2).plus_days(-2)
            CopticDate(1739, 13, 6)
        """
        if days == 0:
            return self
        return CopticDate.from_epoch_day(self.to_epoch_day() + days)

    def plus_weeks(self, weeks: int) -> CopticDate:
        """Return a new CopticDate offset by the given number of weeks."""
        return self.plus_days(weeks * DAYS_PER_WEEK)

    def plus_months(self, months: int) -> CopticDate:
        """Return a new CopticDate offset by the given number of months.

        Month 13 counts as a month. If the day does not exist in the
        resulting month it is clamped to the month's last day.

        Args:
            months: Number of months to add (can be negative).

        Raises:
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> CopticDate(1739, 12, 30).plus_months(1)
            CopticDate(1739, 13, 6)
            >>> CopticDate(1740, 12, 30).plus_months(1)
            CopticDate(1740, 13, 5)
            >>> CopticDate(1740, 13, 5).plus_months(1)
            CopticDate(1741, 1, 5)
        """
        if months == 0:
            return self
        total_months = self._proleptic_month() + months
        new_year, month0 = divmod(total_months, MONTHS_PER_YEAR)
        validate_year_arithmetic(new_year)
        return self._resolve_previous_valid(new_year, month0 + 1, self._day)

    def plus_years(self, years: int) -> CopticDate:
        """Return a new CopticDate offset by the given number of years.

        The 6th day of month 13 becomes the 5th when the resulting
        year is not a leap year.

        Raises:
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> CopticDate(1739, 13, 6).plus_years(1)
            CopticDate(1740, 13, 5)
        """
        if years == 0:
            return self
        new_year = self._year + years
        validate_year_arithmetic(new_year)
        return self._resolve_previous_valid(new_year, self._month, self._day)

    def plus(self, amount: int, unit: TimeUnit) -> CopticDate:
        """Return a new CopticDate offset by an amount of a unit.

        Args:
            amount: The amount to add (can be negative).
            unit: A date-based TimeUnit.

        Raises:
            UnsupportedUnitError: If unit is not date-based.
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> CopticDate(1686, 4, 23).plus(2, TimeUnit.DECADE)
            CopticDate(1706, 4, 23)
        """
        _check_date_unit(unit)
        if unit is TimeUnit.DAY:
            return self.plus_days(amount)
        if unit is TimeUnit.WEEK:
            return self.plus_weeks(amount)
        if unit is TimeUnit.MONTH:
            return self.plus_months(amount)
        return self.plus_years(amount * unit.years)

    def minus_days(self, days: int) -> CopticDate:
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> CopticDate:
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> CopticDate:
        return self.plus_months(-months)

    def minus_years(self, years: int) -> CopticDate:
        return self.plus_years(-years)

    def minus(self, amount: int, unit: TimeUnit) -> CopticDate:
        """Return a new CopticDate offset backwards by an amount of a unit."""
        return self.plus(-amount, unit)

    def until(self, end: CopticDate, unit: TimeUnit) -> int:
        """Return the amount of time until another date in whole units.

        The result is negative if end is before this date. Months and
        longer units are counted on the Coptic calendar itself: a month
        is complete once the same day of the month is reached, with
        month 13 counted as a month.

        Args:
            end: The end date, exclusive.
            unit: A date-based TimeUnit.

        Returns:
            The number of complete units between the two dates.

        Raises:
            CalendarMismatchError: If end is not a CopticDate.
            UnsupportedUnitError: If unit is not date-based.

        Examples:
            >>> start = CopticDate(1739, 1, 1)
            >>> start.until(CopticDate(1740, 1, 1), TimeUnit.DAY)
            366
            >>> start.until(CopticDate(1740, 1, 1), TimeUnit.MONTH)
            13
        """
        if not isinstance(end, CopticDate):
            raise CalendarMismatchError(
                "Unable to calculate distance between CopticDate and "
                f"{type(end).__name__}: dates must share a calendar system"
            )
        _check_date_unit(unit)

        days = end.to_epoch_day() - self.to_epoch_day()
        if unit is TimeUnit.DAY:
            return days
        if unit is TimeUnit.WEEK:
            return _div_toward_zero(days, DAYS_PER_WEEK)

        months = self._months_until(end)
        if unit is TimeUnit.MONTH:
            return months
        return _div_toward_zero(months, MONTHS_PER_YEAR * unit.years)

    def _proleptic_month(self) -> int:
        return self._year * MONTHS_PER_YEAR + (self._month - 1)

    def _months_until(self, end: CopticDate) -> int:
        # Pack month and day so one subtraction compares both; 32 > max day
        start_packed = self._proleptic_month() * 32 + self._day
        end_packed = end._proleptic_month() * 32 + end._day
        return _div_toward_zero(end_packed - start_packed, 32)

    # Conversion

    def to_epoch_day(self) -> int:
        """Return the epoch day (days since 1970-01-01 ISO).

        Examples:
            >>> CopticDate(1686, 4, 23).to_epoch_day()
            0
        """
        return ymd_to_epoch_day(self._year, self._month, self._day)

    def to_iso_date(self) -> datetime.date:
        """Return the datetime.date for the same day.

        Raises:
            OverflowError: If the day is outside datetime.date's range.

        Examples:
            >>> CopticDate(1686, 4, 23).to_iso_date()
            datetime.date(1970, 1, 1)
        """
        ordinal = self.to_epoch_day() + ISO_ORDINAL_OF_EPOCH_DAY_ZERO
        if ordinal < 1 or ordinal > datetime.date.max.toordinal():
            raise OverflowError(f"{self!r} is outside the range of datetime.date")
        return datetime.date.fromordinal(ordinal)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the stored (proleptic year, month, day) triple."""
        return (self._year, self._month, self._day)

    def to_json(self) -> dict:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> CopticDate(1686, 4, 23).to_json()
            {'_type': 'CopticDate', 'year': 1686, 'month': 4, 'day': 23}
        """
        from coptic.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: dict) -> CopticDate:
        """Create a CopticDate from a JSON dictionary."""
        from coptic.convert.json import from_json

        return from_json(data)

    @classmethod
    def from_stored(cls, proleptic_year: int, month: int, day: int) -> CopticDate:
        """Re-create a CopticDate from a stored (year, month, day) triple.

        Stored data may predate validation of month 13, so a day past
        the end of month 13 is repaired to the last day of the month.
        Any other invalid component is rejected.

        Raises:
            ValidationError: If the triple is invalid beyond repair.

        Examples:
            >>> CopticDate.from_stored(1740, 13, 6)
            CopticDate(1740, 13, 5)
        """
        year, month_, day_ = resolve_previous_valid(proleptic_year, month, day)
        if day_ != day:
            logger.warning(
                "Repaired stored CopticDate %d-%02d-%02d to day %d",
                proleptic_year,
                month,
                day,
                day_,
            )
        return cls(year, month_, day_)

    # Operators

    @overload
    def __add__(self, other: int) -> CopticDate: ...

    @overload
    def __add__(self, other: object) -> CopticDate: ...

    def __add__(self, other: object) -> CopticDate:
        """Add a number of days to this date.

        Examples:
            >>> CopticDate(1740, 13, 5) + 1
            CopticDate(1741, 1, 1)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented  # type: ignore[return-value]
        return self.plus_days(other)

    def __radd__(self, other: object) -> CopticDate:
        return self.__add__(other)

    @overload
    def __sub__(self, other: int) -> CopticDate: ...

    @overload
    def __sub__(self, other: CopticDate) -> int: ...

    @overload
    def __sub__(self, other: object) -> CopticDate | int: ...

    def __sub__(self, other: object) -> CopticDate | int:
        """Subtract a number of days or another CopticDate.

        Subtracting a date returns the difference in days.

        Examples:
            >>> CopticDate(1741, 1, 1) - 1
            CopticDate(1740, 13, 5)
            >>> CopticDate(1741, 1, 1) - CopticDate(1740, 1, 1)
            365
        """
        if isinstance(other, CopticDate):
            return self.to_epoch_day() - other.to_epoch_day()
        if isinstance(other, int) and not isinstance(other, bool):
            return self.plus_days(-other)
        return NotImplemented  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CopticDate):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, CopticDate):
            return NotImplemented
        return self.to_tuple() < other.to_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CopticDate):
            return NotImplemented
        return self.to_tuple() <= other.to_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CopticDate):
            return NotImplemented
        return self.to_tuple() > other.to_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CopticDate):
            return NotImplemented
        return self.to_tuple() >= other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __reduce__(self) -> tuple:
        # Pickle as the three stored integers; loading repairs and validates
        return (_restore, self.to_tuple())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'CopticDate(1686, 4, 23)'.
        """
        return f"CopticDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the calendar, era and year-of-era form.

        Examples:
            >>> str(CopticDate(1686, 4, 23))
            'Coptic AM 1686-04-23'
            >>> str(CopticDate(0, 13, 5))
            'Coptic BEFORE_AM 0001-13-05'
        """
        return (
            f"{CopticChronology.ID} {self.era.name} "
            f"{self.year_of_era:04d}-{self._month:02d}-{self._day:02d}"
        )

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


def _restore(proleptic_year: int, month: int, day: int) -> CopticDate:
    return CopticDate.from_stored(proleptic_year, month, day)


def _check_date_unit(unit: object) -> None:
    if not isinstance(unit, TimeUnit) or not unit.is_date_based:
        name = unit.name if isinstance(unit, TimeUnit) else repr(unit)
        raise UnsupportedUnitError(f"Unsupported unit: {name}")


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


__all__ = ["CopticDate"]
