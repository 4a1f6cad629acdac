"""Tests for calendar boundaries and range membership."""

from __future__ import annotations

import pytest

from timepoint import InvalidArgument, TimePoint, TimeUnit
from timepoint.arithmetic.range_ops import (
    between,
    first_of,
    first_of_month,
    last_of,
    last_of_month,
    within,
)
from timepoint.units.timezone import Timezone

REFERENCE = 1582635600  # 2020-02-25 13:00:00 UTC


@pytest.fixture
def point() -> TimePoint:
    return TimePoint(REFERENCE)


class TestBoundaries:
    """Tests for first_of/last_of and their shortcuts."""

    def test_day(self, point: TimePoint) -> None:
        assert str(point.first_of_day()) == "2020-02-25 00:00:00"
        assert str(point.last_of_day()) == "2020-02-25 23:59:59"

    def test_month(self) -> None:
        point = TimePoint("2020-02-15")
        assert point.first_of_month().format("%Y-%m-%d") == "2020-02-01"
        assert point.last_of_month().format("%Y-%m-%d") == "2020-02-29"
        assert str(point.last_of_month()) == "2020-02-29 23:59:59"

    def test_year(self, point: TimePoint) -> None:
        assert str(point.first_of_year()) == "2020-01-01 00:00:00"
        assert str(point.last_of_year()) == "2020-12-31 23:59:59"

    def test_december(self) -> None:
        point = TimePoint("2020-12-10")
        assert str(last_of_month(point)) == "2020-12-31 23:59:59"

    def test_unit_names(self, point: TimePoint) -> None:
        assert first_of(point, "month") == first_of(point, TimeUnit.MONTH)
        assert last_of(point, "YEAR") == point.last_of_year()

    def test_with_move(self, point: TimePoint) -> None:
        assert str(point.first_of_day("+1 day")) == "2020-02-26 00:00:00"
        assert str(point.last_of_month("-1 day")) == "2020-02-28 23:59:59"
        assert str(point.first_of(TimeUnit.YEAR, 60)) == "2020-01-01 00:01:00"

    @pytest.mark.parametrize("unit", [TimeUnit.WEEK, TimeUnit.HOUR, "hour", "fortnight", 5])
    def test_unsupported_unit(self, point: TimePoint, unit: object) -> None:
        with pytest.raises(InvalidArgument):
            first_of(point, unit)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgument):
            last_of(point, unit)  # type: ignore[arg-type]

    def test_inherits_options_and_timezone(self, plus_one: Timezone) -> None:
        point = TimePoint(REFERENCE, {"date": "%Y"}, timezone=plus_one)
        boundary = point.first_of_day()
        assert boundary.options.date == "%Y"
        assert boundary.timezone == plus_one

    def test_uses_point_timezone(self, plus_one: Timezone) -> None:
        point = TimePoint(REFERENCE, timezone=plus_one)
        assert point.first_of_day().epoch_seconds == 1582585200  # 2020-02-25 00:00 +01:00

    @pytest.mark.parametrize("year", [2019, 2020])
    @pytest.mark.parametrize("month", range(1, 13))
    def test_last_of_month_precedes_next_first(self, year: int, month: int) -> None:
        point = TimePoint(f"{year}-{month:02d}-15 10:30")
        following = first_of_month(point.move("+1 month"))
        assert last_of_month(point).epoch_seconds == following.epoch_seconds - 1

    def test_month_end_move_clamps(self) -> None:
        point = TimePoint("2020-01-31")
        assert first_of_month(point.move("+1 month")).format("%Y-%m-%d") == "2020-02-01"


class TestRanges:
    """Tests for between() and within()."""

    def test_day_bounds(self, point: TimePoint) -> None:
        start, end = point.first_of_day(), point.last_of_day()
        assert start.within(start, end)
        assert end.within(start, end)
        assert not start.between(start, end)
        assert not end.between(start, end)
        assert point.between(start, end)

    def test_year_strings(self) -> None:
        point = TimePoint("2020-06-15")
        assert point.within("2020-01-01", "2020-12-31")
        assert point.between("2020-01-01", "2020-12-31")

    def test_start_boundary_excluded(self) -> None:
        point = TimePoint("2020-01-01")
        assert not point.between("2020-01-01", "2020-12-31")
        assert point.within("2020-01-01", "2020-12-31")

    def test_outside(self, point: TimePoint) -> None:
        assert not within(point, "2021-01-01", "2021-12-31")
        assert not between(point, 0, 1)

    def test_relative_bounds(self, point: TimePoint) -> None:
        assert point.between("-1 hour", "+1 hour")
        assert not point.between("+1 hour", "+2 hours")

    def test_none_bounds(self, point: TimePoint) -> None:
        with pytest.raises(InvalidArgument):
            point.between(None, "2020-12-31")
        with pytest.raises(InvalidArgument):
            point.within("2020-01-01", None)


class TestCalendarMembership:
    """Tests for on_day(), in_month() and in_year()."""

    def test_on_day(self, point: TimePoint) -> None:
        assert point.on_day("2020-02-25")
        assert point.on_day(TimePoint("2020-02-25 23:59:59"))
        assert not point.on_day("2020-02-26")

    def test_in_month(self, point: TimePoint) -> None:
        assert point.in_month("2020-02-01")
        assert point.in_month("2020-02")
        assert not point.in_month("2020-03-01")

    def test_in_year_string(self, point: TimePoint) -> None:
        assert point.in_year("2020")
        assert not point.in_year("2021")

    def test_in_year_int(self, point: TimePoint) -> None:
        assert point.in_year(2020)
        assert not point.in_year(2019)

    def test_in_year_date(self, point: TimePoint) -> None:
        assert point.in_year("2020-07-04")

    def test_membership_in_point_timezone(self, plus_one: Timezone) -> None:
        early = TimePoint("2020-02-26 00:30", timezone=plus_one)
        assert early.on_day("2020-02-26")
        in_utc = TimePoint(early.epoch_seconds)
        assert in_utc.on_day("2020-02-25")
        assert not in_utc.on_day("2020-02-26")

    def test_none(self, point: TimePoint) -> None:
        with pytest.raises(InvalidArgument):
            point.on_day(None)
