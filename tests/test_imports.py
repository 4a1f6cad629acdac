"""Smoke tests for the package surface."""

from __future__ import annotations

import importlib

import pytest

import timepoint
from timepoint import InvalidArgument, ParseError, TimepointError, TimezoneError, TimeUnit


class TestPackage:
    """Tests for the top-level package."""

    def test_version(self) -> None:
        assert timepoint.__version__ == "0.1.0"

    @pytest.mark.parametrize(
        "module",
        [
            "timepoint.config",
            "timepoint.clock",
            "timepoint.core",
            "timepoint.units",
            "timepoint.infer",
            "timepoint.format",
            "timepoint.arithmetic",
            "timepoint._internal",
        ],
    )
    def test_submodule_exports(self, module: str) -> None:
        imported = importlib.import_module(module)
        for name in getattr(imported, "__all__", []):
            assert hasattr(imported, name), f"{module}.{name}"

    def test_public_names_resolve(self) -> None:
        for name in timepoint.__all__:
            assert hasattr(timepoint, name), name


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(ParseError, TimepointError)
        assert issubclass(ParseError, ValueError)
        assert issubclass(InvalidArgument, TimepointError)
        assert issubclass(InvalidArgument, TypeError)
        assert issubclass(TimezoneError, TimepointError)

    def test_parse_error_keeps_input(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            timepoint.TimePoint("not a date")
        assert excinfo.value.input == "not a date"


class TestTimeUnit:
    """Tests for the TimeUnit enum."""

    def test_from_name(self) -> None:
        assert TimeUnit("month") is TimeUnit.MONTH

    def test_elapsed_units(self) -> None:
        assert TimeUnit.SECOND.to_seconds() == 1
        assert TimeUnit.MINUTE.to_seconds() == 60
        assert TimeUnit.HOUR.to_seconds() == 3600
        assert TimeUnit.HOUR.is_elapsed

    @pytest.mark.parametrize("unit", [TimeUnit.DAY, TimeUnit.WEEK, TimeUnit.MONTH, TimeUnit.YEAR])
    def test_calendar_units(self, unit: TimeUnit) -> None:
        assert not unit.is_elapsed
        with pytest.raises(ValueError):
            unit.to_seconds()
