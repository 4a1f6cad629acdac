"""Tests for comparison operations."""

from __future__ import annotations

import itertools

import pytest

from timepoint import InvalidArgument, Ordering, ParseError, TimePoint
from timepoint.arithmetic.comparisons import after, before, compare, equal
from timepoint.units.timezone import Timezone

REFERENCE = 1582635600  # 2020-02-25 13:00:00 UTC


class TestCompare:
    """Tests for compare()."""

    def test_ordering_values(self) -> None:
        assert int(Ordering.LESS) == -1
        assert int(Ordering.EQUAL) == 0
        assert int(Ordering.GREATER) == 1

    def test_points(self) -> None:
        early, late = TimePoint(0), TimePoint(1)
        assert compare(early, late) is Ordering.LESS
        assert compare(late, early) is Ordering.GREATER
        assert compare(early, TimePoint(0)) is Ordering.EQUAL

    def test_mixed_inputs(self) -> None:
        point = TimePoint(REFERENCE)
        assert compare(point, "2020-02-25 13:00") is Ordering.EQUAL
        assert compare(point, REFERENCE + 1) is Ordering.LESS
        assert compare(point, str(REFERENCE - 1)) is Ordering.GREATER

    def test_raw_values(self) -> None:
        assert compare(1, 2) is Ordering.LESS
        assert compare("2020-01-01", "2019-12-31") is Ordering.GREATER

    def test_relative_string_anchored_at_left(self) -> None:
        point = TimePoint(0)
        assert compare(point, "+1 day") is Ordering.LESS
        assert compare(point, "-1 day") is Ordering.GREATER

    def test_string_resolved_in_left_timezone(self) -> None:
        point = TimePoint(REFERENCE, timezone=Timezone(3600))
        assert point.equal("2020-02-25 14:00")
        assert not point.equal("2020-02-25 13:00")

    def test_options_and_timezone_ignored(self) -> None:
        a = TimePoint(REFERENCE, {"date": "%Y"}, timezone=Timezone(3600))
        b = TimePoint(REFERENCE)
        assert compare(a, b) is Ordering.EQUAL

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            compare(TimePoint(0), None)
        with pytest.raises(InvalidArgument):
            compare(None, TimePoint(0))

    def test_unparseable(self) -> None:
        with pytest.raises(ParseError):
            compare(TimePoint(0), "whenever")

    def test_method(self) -> None:
        assert TimePoint(0).compare(1) is Ordering.LESS


class TestPredicates:
    """Tests for after(), before() and equal()."""

    def test_after(self) -> None:
        assert after(TimePoint(2), 1)
        assert not after(TimePoint(1), 1)
        assert TimePoint(2).after(TimePoint(1))

    def test_before(self) -> None:
        assert before(TimePoint(1), 2)
        assert not before(TimePoint(1), 1)
        assert TimePoint(1).before("2020-01-01")

    def test_equal(self) -> None:
        assert equal(TimePoint(1), 1)
        assert not equal(TimePoint(1), 2)
        assert TimePoint(REFERENCE).equal("2020-02-25 13:00")

    def test_total_order(self) -> None:
        """Exactly one of before/equal/after holds, consistent with compare."""
        points = [TimePoint(value) for value in (-(2**40), -1, 0, 0, 1, REFERENCE)]
        for a, b in itertools.product(points, repeat=2):
            results = [before(a, b), equal(a, b), after(a, b)]
            assert results.count(True) == 1
            assert compare(a, b) == -compare(b, a)
            assert before(a, b) == (compare(a, b) is Ordering.LESS)

    def test_no_ordering_operators(self) -> None:
        with pytest.raises(TypeError):
            TimePoint(0) < TimePoint(1)  # noqa: B015
