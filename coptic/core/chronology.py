"""The Coptic calendar system.

This module provides CopticChronology, the calendar-wide rules shared
by every CopticDate: the leap year rule, the eras, and the outer
ranges of each supported field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from coptic._internal.calendar import MAX_EPOCH_DAY, MIN_EPOCH_DAY, is_leap_year
from coptic._internal.constants import MAX_YEAR, MIN_YEAR
from coptic.errors import UnsupportedFieldError
from coptic.units.era import CopticEra
from coptic.units.field import DateField, ValueRange, field_name

if TYPE_CHECKING:
    from coptic.core.date import CopticDate


class CopticChronology:
    """The Coptic calendar system.

    There is a single instance, available as CopticChronology.INSTANCE
    or through CopticChronology.instance().

    Examples:
        >>> chrono = CopticChronology.instance()
        >>> chrono.is_leap_year(1739)
        True
        >>> chrono.range(DateField.MONTH_OF_YEAR)
        ValueRange(minimum=1, maximum=13)
    """

    __slots__ = ()

    INSTANCE: ClassVar[CopticChronology]

    ID: ClassVar[str] = "Coptic"
    CALENDAR_TYPE: ClassVar[str] = "coptic"

    _RANGES: ClassVar[dict[DateField, ValueRange]] = {
        DateField.DAY_OF_WEEK: ValueRange(1, 7),
        DateField.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange(1, 7),
        DateField.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange(1, 7),
        DateField.DAY_OF_MONTH: ValueRange(1, 30),
        DateField.DAY_OF_YEAR: ValueRange(1, 366),
        DateField.EPOCH_DAY: ValueRange(MIN_EPOCH_DAY, MAX_EPOCH_DAY),
        DateField.ALIGNED_WEEK_OF_MONTH: ValueRange(1, 5),
        DateField.ALIGNED_WEEK_OF_YEAR: ValueRange(1, 53),
        DateField.MONTH_OF_YEAR: ValueRange(1, 13),
        DateField.YEAR_OF_ERA: ValueRange(1, MAX_YEAR + 1),
        DateField.YEAR: ValueRange(MIN_YEAR, MAX_YEAR),
        DateField.ERA: ValueRange(0, 1),
    }

    @classmethod
    def instance(cls) -> CopticChronology:
        """Return the singleton chronology."""
        return cls.INSTANCE

    @property
    def id(self) -> str:
        return self.ID

    @property
    def calendar_type(self) -> str:
        return self.CALENDAR_TYPE

    def is_leap_year(self, proleptic_year: int) -> bool:
        """Return True if the proleptic year has a 6-day month 13."""
        return is_leap_year(proleptic_year)

    def eras(self) -> list[CopticEra]:
        """Return the eras of the calendar, earliest first."""
        return list(CopticEra)

    def era_of(self, value: int) -> CopticEra:
        """Return the era for its numeric value (0 or 1)."""
        return CopticEra.of(value)

    def proleptic_year(self, era: CopticEra, year_of_era: int) -> int:
        """Convert an era and year-of-era to a proleptic year.

        Args:
            era: The era.
            year_of_era: The year within the era, from 1.

        Returns:
            The proleptic year.

        Raises:
            TypeError: If era is not a CopticEra.

        Examples:
            >>> CopticChronology.INSTANCE.proleptic_year(CopticEra.BEFORE_AM, 1)
            0
        """
        if not isinstance(era, CopticEra):
            raise TypeError(f"era must be CopticEra, got {type(era).__name__}")
        return era.to_proleptic_year(year_of_era)

    def is_supported(self, field: DateField) -> bool:
        """Return True if dates of this calendar support the field."""
        return field in self._RANGES

    def range(self, field: DateField) -> ValueRange:
        """Return the outer range of a field across all Coptic dates.

        Raises:
            UnsupportedFieldError: If the field is not supported.
        """
        try:
            return self._RANGES[field]
        except KeyError:
            raise UnsupportedFieldError(
                f"Unsupported field: {field_name(field)}"
            ) from None

    def date(
        self, era: CopticEra, year_of_era: int, month: int, day: int
    ) -> CopticDate:
        """Create a date from an era, year-of-era, month and day."""
        from coptic.core.date import CopticDate

        return CopticDate(self.proleptic_year(era, year_of_era), month, day)

    def date_epoch_day(self, epoch_day: int) -> CopticDate:
        """Create a date from an epoch day."""
        from coptic.core.date import CopticDate

        return CopticDate.from_epoch_day(epoch_day)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> CopticDate:
        """Create a date from a proleptic year and day-of-year."""
        from coptic.core.date import CopticDate

        return CopticDate.from_year_day(proleptic_year, day_of_year)

    def __repr__(self) -> str:
        return "CopticChronology.INSTANCE"

    def __str__(self) -> str:
        return self.ID


CopticChronology.INSTANCE = CopticChronology()


__all__ = ["CopticChronology"]
