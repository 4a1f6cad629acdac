"""Pytest configuration and fixtures for Timepoint tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add the parent directory to sys.path so timepoint can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from timepoint import config  # noqa: E402
from timepoint.clock import FixedClock  # noqa: E402
from timepoint.config import Settings  # noqa: E402
from timepoint.units.timezone import Timezone  # noqa: E402

# 2020-02-25 13:00:00 UTC, a Tuesday
REFERENCE = 1582635600


@pytest.fixture(autouse=True)
def pinned_settings() -> Iterator[Settings]:
    """Pin every test to UTC and a fixed clock at REFERENCE."""
    settings = config.configure(timezone=Timezone.utc(), clock=FixedClock(REFERENCE))
    yield settings
    config.reset()


@pytest.fixture
def utc() -> Timezone:
    return Timezone.utc()


@pytest.fixture
def plus_one() -> Timezone:
    """Fixed +01:00 zone."""
    return Timezone.from_hours(1)
