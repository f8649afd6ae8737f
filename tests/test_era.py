"""Tests for CopticEra, TimeUnit, DateField and CopticChronology.

These tests verify the enum implementations, their values and
properties, and the calendar-wide rules of the chronology.
"""

from __future__ import annotations

import pytest


class TestCopticEra:
    """Tests for the CopticEra enum."""

    def test_era_values(self) -> None:
        from coptic.units import CopticEra

        assert CopticEra.BEFORE_AM.value == 0
        assert CopticEra.AM.value == 1

    def test_era_of(self) -> None:
        from coptic.units import CopticEra

        assert CopticEra.of(0) is CopticEra.BEFORE_AM
        assert CopticEra.of(1) is CopticEra.AM

    def test_era_of_invalid(self) -> None:
        from coptic.errors import ValidationError
        from coptic.units import CopticEra

        with pytest.raises(ValidationError, match="era must be 0 or 1, got 2"):
            CopticEra.of(2)

    def test_era_is_before_am(self) -> None:
        from coptic.units import CopticEra

        assert CopticEra.BEFORE_AM.is_before_am is True
        assert CopticEra.AM.is_before_am is False

    def test_to_proleptic_year(self) -> None:
        from coptic.units import CopticEra

        assert CopticEra.AM.to_proleptic_year(1) == 1
        assert CopticEra.AM.to_proleptic_year(1740) == 1740
        assert CopticEra.BEFORE_AM.to_proleptic_year(1) == 0
        assert CopticEra.BEFORE_AM.to_proleptic_year(2) == -1


class TestTimeUnit:
    """Tests for the TimeUnit enum."""

    def test_timeunit_has_all_expected_values(self) -> None:
        from coptic.units import TimeUnit

        expected = [
            "NANOSECOND",
            "MICROSECOND",
            "MILLISECOND",
            "SECOND",
            "MINUTE",
            "HOUR",
            "DAY",
            "WEEK",
            "MONTH",
            "YEAR",
            "DECADE",
            "CENTURY",
            "MILLENNIUM",
        ]
        assert [unit.name for unit in TimeUnit] == expected

    def test_date_based_units(self) -> None:
        from coptic.units import TimeUnit

        date_based = [unit for unit in TimeUnit if unit.is_date_based]
        assert date_based == [
            TimeUnit.DAY,
            TimeUnit.WEEK,
            TimeUnit.MONTH,
            TimeUnit.YEAR,
            TimeUnit.DECADE,
            TimeUnit.CENTURY,
            TimeUnit.MILLENNIUM,
        ]

    def test_years_per_unit(self) -> None:
        from coptic.units import TimeUnit

        assert TimeUnit.YEAR.years == 1
        assert TimeUnit.DECADE.years == 10
        assert TimeUnit.CENTURY.years == 100
        assert TimeUnit.MILLENNIUM.years == 1000
        assert TimeUnit.MONTH.years is None
        assert TimeUnit.DAY.years is None

    def test_timeunit_values_are_strings(self) -> None:
        from coptic.units import TimeUnit

        for unit in TimeUnit:
            assert unit.value == unit.name.lower()


class TestDateField:
    """Tests for the DateField enum and ValueRange."""

    def test_time_fields_are_not_date_based(self) -> None:
        from coptic.units import DateField

        assert DateField.HOUR_OF_DAY.is_date_based is False
        assert DateField.NANO_OF_SECOND.is_date_based is False
        assert DateField.DAY_OF_MONTH.is_date_based is True
        assert DateField.PROLEPTIC_MONTH.is_date_based is True

    def test_value_range_is_valid_value(self) -> None:
        from coptic.units import ValueRange

        r = ValueRange(1, 13)
        assert r.is_valid_value(1)
        assert r.is_valid_value(13)
        assert not r.is_valid_value(0)
        assert not r.is_valid_value(14)

    def test_value_range_check_valid_value(self) -> None:
        from coptic.errors import ValidationError
        from coptic.units import DateField, ValueRange

        r = ValueRange(1, 13)
        assert r.check_valid_value(5, DateField.MONTH_OF_YEAR) == 5
        with pytest.raises(
            ValidationError, match="MONTH_OF_YEAR must be between 1 and 13, got 0"
        ):
            r.check_valid_value(0, DateField.MONTH_OF_YEAR)

    def test_value_range_str(self) -> None:
        from coptic.units import ValueRange

        assert str(ValueRange(1, 30)) == "1 - 30"

    def test_value_range_is_hashable(self) -> None:
        from coptic.units import ValueRange

        assert {ValueRange(1, 5), ValueRange(1, 5)} == {ValueRange(1, 5)}


class TestCopticChronology:
    """Tests for CopticChronology."""

    def test_singleton(self) -> None:
        from coptic import CopticChronology

        assert CopticChronology.instance() is CopticChronology.INSTANCE

    def test_identity(self) -> None:
        from coptic import CopticChronology

        chrono = CopticChronology.INSTANCE
        assert chrono.id == "Coptic"
        assert chrono.calendar_type == "coptic"
        assert str(chrono) == "Coptic"

    def test_is_leap_year(self) -> None:
        from coptic import CopticChronology

        assert CopticChronology.INSTANCE.is_leap_year(1739) is True
        assert CopticChronology.INSTANCE.is_leap_year(1740) is False

    def test_eras(self) -> None:
        from coptic import CopticChronology, CopticEra

        chrono = CopticChronology.INSTANCE
        assert chrono.eras() == [CopticEra.BEFORE_AM, CopticEra.AM]
        assert chrono.era_of(1) is CopticEra.AM

    def test_proleptic_year(self) -> None:
        from coptic import CopticChronology, CopticEra

        chrono = CopticChronology.INSTANCE
        assert chrono.proleptic_year(CopticEra.AM, 1686) == 1686
        assert chrono.proleptic_year(CopticEra.BEFORE_AM, 1) == 0
        with pytest.raises(TypeError):
            chrono.proleptic_year(0, 1)  # type: ignore[arg-type]

    def test_date_factories(self) -> None:
        from coptic import CopticChronology, CopticDate, CopticEra

        chrono = CopticChronology.INSTANCE
        assert chrono.date(CopticEra.AM, 1686, 4, 23) == CopticDate(1686, 4, 23)
        assert chrono.date_epoch_day(0) == CopticDate(1686, 4, 23)
        assert chrono.date_year_day(1739, 366) == CopticDate(1739, 13, 6)

    def test_range_unsupported(self) -> None:
        from coptic import CopticChronology, DateField
        from coptic.errors import UnsupportedFieldError

        with pytest.raises(UnsupportedFieldError, match="PROLEPTIC_MONTH"):
            CopticChronology.INSTANCE.range(DateField.PROLEPTIC_MONTH)
