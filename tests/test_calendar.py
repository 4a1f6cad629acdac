"""Tests for the internal calendar math."""

from __future__ import annotations

import pytest

from timepoint._internal.calendar import (
    CivilTime,
    add_days,
    add_months,
    civil_from_days,
    civil_from_epoch,
    days_from_civil,
    days_in_month,
    epoch_from_civil,
    is_leap_year,
    weekday_from_days,
)
from timepoint._internal.validation import validate_date, validate_epoch, validate_time
from timepoint.errors import ParseError


class TestLeapYears:
    """Tests for Gregorian leap year rules."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2020, True), (2019, False), (2000, True), (1900, False), (2100, False), (2400, True)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    def test_days_in_february(self) -> None:
        assert days_in_month(2020, 2) == 29
        assert days_in_month(2019, 2) == 28

    def test_days_in_thirty_day_month(self) -> None:
        assert days_in_month(2020, 4) == 30

    def test_days_in_invalid_month(self) -> None:
        with pytest.raises(ValueError):
            days_in_month(2020, 13)


class TestDayCounts:
    """Tests for days since the Unix epoch."""

    def test_epoch_day(self) -> None:
        assert days_from_civil(1970, 1, 1) == 0
        assert civil_from_days(0) == (1970, 1, 1)

    def test_known_date(self) -> None:
        assert days_from_civil(2020, 2, 25) == 18317
        assert civil_from_days(18317) == (2020, 2, 25)

    def test_before_epoch(self) -> None:
        assert days_from_civil(1969, 12, 31) == -1
        assert civil_from_days(-1) == (1969, 12, 31)

    def test_leap_day_and_year_end(self) -> None:
        for year, month, day in [(2020, 2, 29), (2020, 12, 31), (2000, 12, 31), (1600, 3, 1)]:
            assert civil_from_days(days_from_civil(year, month, day)) == (year, month, day)

    def test_weekday(self) -> None:
        """1970-01-01 was a Thursday, 2020-02-25 a Tuesday."""
        assert weekday_from_days(0) == 3
        assert weekday_from_days(18317) == 1


class TestEpochConversion:
    """Tests for civil fields <-> epoch seconds at fixed offsets."""

    def test_civil_from_epoch(self) -> None:
        assert civil_from_epoch(1582635600) == CivilTime(2020, 2, 25, 13, 0, 0)

    def test_civil_from_epoch_with_offset(self) -> None:
        assert civil_from_epoch(1582635600, 3600) == CivilTime(2020, 2, 25, 14, 0, 0)

    def test_civil_from_negative_epoch(self) -> None:
        assert civil_from_epoch(-1) == CivilTime(1969, 12, 31, 23, 59, 59)

    def test_epoch_from_civil(self) -> None:
        assert epoch_from_civil(CivilTime(2020, 2, 25, 13)) == 1582635600
        assert epoch_from_civil(CivilTime(2020, 2, 25, 13), 3600) == 1582632000

    def test_civil_time_properties(self) -> None:
        civil = CivilTime(2020, 3, 1, 1, 2, 3)
        assert civil.day_of_year == 61
        assert civil.weekday == 6
        assert civil.seconds_of_day == 3723


class TestCalendarShifts:
    """Tests for month and day shifting."""

    def test_add_months_clamps_day(self) -> None:
        assert add_months(2020, 1, 31, 1) == (2020, 2, 29)
        assert add_months(2019, 1, 31, 1) == (2019, 2, 28)
        assert add_months(2020, 12, 31, 2) == (2021, 2, 28)

    def test_add_months_backwards(self) -> None:
        assert add_months(2020, 3, 15, -3) == (2019, 12, 15)
        assert add_months(2020, 3, 31, -1) == (2020, 2, 29)

    def test_add_days(self) -> None:
        assert add_days(2020, 2, 28, 1) == (2020, 2, 29)
        assert add_days(2020, 12, 31, 1) == (2021, 1, 1)
        assert add_days(2020, 3, 1, -1) == (2020, 2, 29)


class TestValidation:
    """Tests for the field validators."""

    def test_invalid_date(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            validate_date(2019, 2, 29, "2019-02-29")
        assert exc_info.value.input == "2019-02-29"

    def test_invalid_month(self) -> None:
        with pytest.raises(ParseError):
            validate_date(2020, 13, 1)

    def test_invalid_time(self) -> None:
        with pytest.raises(ParseError):
            validate_time(24, 0, 0)
        with pytest.raises(ParseError):
            validate_time(12, 60, 0)

    def test_epoch_range(self) -> None:
        assert validate_epoch(2**63 - 1) == 2**63 - 1
        assert validate_epoch(-(2**63)) == -(2**63)
        with pytest.raises(ParseError):
            validate_epoch(2**63)
