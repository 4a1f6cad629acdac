"""Tests for input classification and the numeric parsing rules."""

from __future__ import annotations

import logging

import pytest

from timepoint import ParseError, TimePoint
from timepoint.infer import (
    Epoch,
    Point,
    Relative,
    Text,
    classify,
    is_timestamp,
    parse_epoch,
    resolve,
)
from timepoint.units.timezone import Timezone

REFERENCE = 1582635600  # 2020-02-25 13:00:00 UTC, a Tuesday
MIDNIGHT = 1582588800  # 2020-02-25 00:00:00 UTC


class TestClassify:
    """Tests for classify()."""

    def test_int(self) -> None:
        assert classify(5) == Epoch(5)

    def test_integral_float(self) -> None:
        assert classify(1582635600.0) == Epoch(1582635600)

    def test_numeric_string(self) -> None:
        assert classify("1582635600") == Epoch(1582635600)
        assert classify(" -86400 ") == Epoch(-86400)
        assert classify("+5") == Epoch(5)
        assert classify("1582635600.0") == Epoch(1582635600)

    def test_exponent_string(self) -> None:
        assert classify("1e5") == Epoch(100000)
        assert classify("1.5E3") == Epoch(1500)
        assert classify("-2e0") == Epoch(-2)
        assert TimePoint.is_timestamp("1e5")

    def test_non_integral_exponent_string(self) -> None:
        assert not TimePoint.is_timestamp("1.5e-1")
        with pytest.raises(ParseError):
            TimePoint("1.5e-1")

    def test_exponent_out_of_range(self) -> None:
        with pytest.raises(ParseError):
            classify("1e999999")

    def test_four_character_numeric_string_is_text(self) -> None:
        assert classify("2020") == Text("2020")

    def test_date_string(self) -> None:
        assert classify("2020-02-25") == Text("2020-02-25")

    def test_date_string_with_reference(self) -> None:
        assert classify("+1 day", 100) == Relative("+1 day", 100)

    def test_timepoint(self) -> None:
        point = TimePoint(5)
        source = classify(point)
        assert isinstance(source, Point)
        assert source.point is point

    @pytest.mark.parametrize("value", [None, True, False, [1], {"a": 1}, object()])
    def test_unsupported_types(self, value: object) -> None:
        with pytest.raises(ParseError) as exc_info:
            classify(value)
        assert exc_info.value.input is value

    def test_fractional_float(self) -> None:
        with pytest.raises(ParseError):
            classify(1.5)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_float(self, value: float) -> None:
        with pytest.raises(ParseError):
            classify(value)


class TestResolve:
    """Tests for resolve() on each variant."""

    def test_epoch(self) -> None:
        assert resolve(Epoch(42), timezone=Timezone.utc(), clock=lambda: 0) == 42

    def test_point(self) -> None:
        assert resolve(Point(TimePoint(42)), timezone=Timezone.utc(), clock=lambda: 0) == 42

    def test_text_uses_clock(self) -> None:
        result = resolve(Text("+1 hour"), timezone=Timezone.utc(), clock=lambda: REFERENCE)
        assert result == REFERENCE + 3600

    def test_relative_uses_anchor(self) -> None:
        result = resolve(Relative("+1 hour", 0), timezone=Timezone.utc(), clock=lambda: REFERENCE)
        assert result == 3600


class TestParseEpoch:
    """Tests for parse_epoch()."""

    @pytest.mark.parametrize("value", [0, -1, 1, REFERENCE, 2**63 - 1, -(2**63)])
    def test_integers_round_trip(self, value: int) -> None:
        assert parse_epoch(value) == value

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ParseError):
            parse_epoch(value)

    def test_out_of_range_string(self) -> None:
        with pytest.raises(ParseError):
            parse_epoch(str(2**64))

    def test_four_digit_string_is_time_of_day(self) -> None:
        """A 4-character numeric string is HHMM on the reference day."""
        assert parse_epoch("2020") == MIDNIGHT + 20 * 3600 + 20 * 60
        assert parse_epoch("0830") == MIDNIGHT + 8 * 3600 + 30 * 60

    def test_four_digit_string_invalid_time(self) -> None:
        with pytest.raises(ParseError):
            parse_epoch("2560")

    def test_reference_may_be_any_value(self) -> None:
        assert parse_epoch("+1 day", "1970-01-01") == 86400
        assert parse_epoch("+1 day", TimePoint(0)) == 86400

    def test_explicit_timezone(self) -> None:
        assert parse_epoch("2020-02-25 14:00", timezone=Timezone(3600)) == REFERENCE

    def test_explicit_clock(self) -> None:
        assert parse_epoch("now", clock=lambda: 7) == 7

    def test_error_carries_input(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_epoch("not a date")
        assert exc_info.value.input == "not a date"

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="timepoint.infer")
        parse_epoch("2020-02-25 13:00")
        assert "Classified '2020-02-25 13:00' as Text" in caplog.text
        assert "to 1582635600" in caplog.text


class TestIsTimestamp:
    """Tests for is_timestamp()."""

    @pytest.mark.parametrize("value", [0, REFERENCE, -5, 3.0, "1582635600", " 42 ", "7.0"])
    def test_true(self, value: object) -> None:
        assert is_timestamp(value) is True

    @pytest.mark.parametrize("value", [1.5, "1.5", "2020-02-25", "", None, True, [1]])
    def test_false(self, value: object) -> None:
        assert is_timestamp(value) is False

    def test_static_method(self) -> None:
        assert TimePoint.is_timestamp("12") is True
