"""Tests for the internal calendar arithmetic."""

from __future__ import annotations

import pytest

from coptic._internal.calendar import (
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    day_of_year,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    length_of_month,
    length_of_year,
    resolve_previous_valid,
    start_of_year,
    ymd_to_epoch_day,
)
from coptic._internal.constants import EPOCH_DAY_DIFFERENCE, MAX_YEAR, MIN_YEAR


class TestLeapYear:
    """Tests for is_leap_year()."""

    @pytest.mark.parametrize("year", [3, 7, 1735, 1739, 1743, 2023])
    def test_year_remainder_three_is_leap(self, year: int) -> None:
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [0, 1, 2, 4, 1736, 1740, 1741, 1742])
    def test_other_years_are_not_leap(self, year: int) -> None:
        assert is_leap_year(year) is False

    def test_negative_years_use_floored_remainder(self) -> None:
        """Year -1 precedes year 0 and is leap; -2 and -3 are not."""
        assert is_leap_year(-1) is True
        assert is_leap_year(-5) is True
        assert is_leap_year(-2) is False
        assert is_leap_year(-3) is False
        assert is_leap_year(-4) is False

    def test_no_century_exception(self) -> None:
        """Unlike the Gregorian rule, centuries are not skipped."""
        assert is_leap_year(1899) is True
        assert is_leap_year(1999) is True
        assert is_leap_year(2099) is True


class TestMonthAndYearLength:
    """Tests for length_of_month() and length_of_year()."""

    @pytest.mark.parametrize("month", range(1, 13))
    def test_regular_months_have_30_days(self, month: int) -> None:
        assert length_of_month(1739, month) == 30
        assert length_of_month(1740, month) == 30

    def test_month_13_leap_year(self) -> None:
        assert length_of_month(1739, 13) == 6

    def test_month_13_non_leap_year(self) -> None:
        assert length_of_month(1740, 13) == 5

    @pytest.mark.parametrize("year", range(-8, 9))
    def test_month_13_length_tracks_leap_year(self, year: int) -> None:
        expected = 6 if is_leap_year(year) else 5
        assert length_of_month(year, 13) == expected

    @pytest.mark.parametrize("month", [0, 14, -1])
    def test_invalid_month_raises(self, month: int) -> None:
        with pytest.raises(ValueError, match="month must be 1-13"):
            length_of_month(1740, month)

    def test_length_of_year(self) -> None:
        assert length_of_year(1739) == 366
        assert length_of_year(1740) == 365

    def test_day_of_year(self) -> None:
        assert day_of_year(1, 1) == 1
        assert day_of_year(4, 23) == 113
        assert day_of_year(13, 5) == 365
        assert day_of_year(13, 6) == 366


class TestEpochDayConversion:
    """Tests for ymd_to_epoch_day() and epoch_day_to_ymd()."""

    def test_epoch_day_difference_constant(self) -> None:
        assert EPOCH_DAY_DIFFERENCE == 615558

    def test_epoch_day_zero(self) -> None:
        """1970-01-01 (ISO) is 23 Koiak 1686."""
        assert epoch_day_to_ymd(0) == (1686, 4, 23)
        assert ymd_to_epoch_day(1686, 4, 23) == 0

    def test_coptic_epoch(self) -> None:
        assert epoch_day_to_ymd(-EPOCH_DAY_DIFFERENCE) == (1, 1, 1)
        assert ymd_to_epoch_day(1, 1, 1) == -EPOCH_DAY_DIFFERENCE

    def test_day_before_coptic_epoch(self) -> None:
        """Year 0 is not a leap year, so it ends on 13/5."""
        assert epoch_day_to_ymd(-EPOCH_DAY_DIFFERENCE - 1) == (0, 13, 5)

    def test_end_of_leap_year(self) -> None:
        epoch_day = ymd_to_epoch_day(1739, 13, 6)
        assert epoch_day == 19611  # 2023-09-11
        assert epoch_day_to_ymd(epoch_day) == (1739, 13, 6)
        assert epoch_day_to_ymd(epoch_day + 1) == (1740, 1, 1)

    def test_end_of_non_leap_year(self) -> None:
        epoch_day = ymd_to_epoch_day(1740, 13, 5)
        assert epoch_day == 19976  # 2024-09-10
        assert epoch_day_to_ymd(epoch_day + 1) == (1741, 1, 1)

    def test_day_366_of_non_leap_year_is_next_year(self) -> None:
        start = start_of_year(1740)
        assert epoch_day_to_ymd(start + 365 - EPOCH_DAY_DIFFERENCE) == (1741, 1, 1)

    def test_negative_leap_year(self) -> None:
        """Year -1 is leap: its last day is 13/6, directly before year 0."""
        epoch_day = ymd_to_epoch_day(0, 1, 1) - 1
        assert epoch_day_to_ymd(epoch_day) == (-1, 13, 6)

    def test_start_of_year(self) -> None:
        assert start_of_year(1) == 0
        assert start_of_year(2) == 365
        assert start_of_year(4) == 3 * 365 + 1
        assert start_of_year(0) == -365
        assert start_of_year(-1) == -731

    def test_round_trip_across_cycles(self) -> None:
        for epoch_day in range(-2000, 2000):
            assert ymd_to_epoch_day(*epoch_day_to_ymd(epoch_day)) == epoch_day

    def test_consecutive_days_are_consecutive_dates(self) -> None:
        previous = epoch_day_to_ymd(-1500)
        for epoch_day in range(-1499, 1500):
            current = epoch_day_to_ymd(epoch_day)
            y, m, d = previous
            if d < length_of_month(y, m):
                assert current == (y, m, d + 1)
            elif m < 13:
                assert current == (y, m + 1, 1)
            else:
                assert current == (y + 1, 1, 1)
            previous = current

    def test_supported_range_limits(self) -> None:
        assert epoch_day_to_ymd(MIN_EPOCH_DAY) == (MIN_YEAR, 1, 1)
        assert epoch_day_to_ymd(MAX_EPOCH_DAY)[0] == MAX_YEAR
        assert epoch_day_to_ymd(MAX_EPOCH_DAY)[1] == 13
        assert epoch_day_to_ymd(MAX_EPOCH_DAY + 1) == (MAX_YEAR + 1, 1, 1)


class TestDayOfWeek:
    """Tests for epoch_day_to_day_of_week()."""

    def test_epoch_day_zero_is_thursday(self) -> None:
        assert epoch_day_to_day_of_week(0) == 4

    def test_coptic_epoch_is_friday(self) -> None:
        assert epoch_day_to_day_of_week(-EPOCH_DAY_DIFFERENCE) == 5

    def test_cycle(self) -> None:
        assert [epoch_day_to_day_of_week(n) for n in range(-3, 4)] == [
            1, 2, 3, 4, 5, 6, 7,
        ]


class TestResolvePreviousValid:
    """Tests for resolve_previous_valid()."""

    def test_clamps_day_6_in_non_leap_year(self) -> None:
        assert resolve_previous_valid(1740, 13, 6) == (1740, 13, 5)

    def test_keeps_day_6_in_leap_year(self) -> None:
        assert resolve_previous_valid(1739, 13, 6) == (1739, 13, 6)

    def test_clamps_large_day_in_month_13(self) -> None:
        assert resolve_previous_valid(1739, 13, 30) == (1739, 13, 6)
        assert resolve_previous_valid(1740, 13, 30) == (1740, 13, 5)

    def test_leaves_regular_months_alone(self) -> None:
        assert resolve_previous_valid(1740, 12, 30) == (1740, 12, 30)

    def test_leaves_invalid_values_for_validation(self) -> None:
        assert resolve_previous_valid(1740, 14, 40) == (1740, 14, 40)
        assert resolve_previous_valid(1740, 13, 0) == (1740, 13, 0)
