"""Tests for timezone resolvers."""

from __future__ import annotations

import pytest

from timepoint import TimezoneError
from timepoint._internal.calendar import CivilTime
from timepoint.units.timezone import (
    LocalTimezone,
    Timezone,
    TimezoneResolver,
    ZoneInfoTimezone,
)

REFERENCE = 1582635600  # 2020-02-25 13:00:00 UTC
SUMMER = 1593604800  # 2020-07-01 12:00:00 UTC
FAR_FUTURE = 2**62  # far beyond what time.localtime and datetime can hold


@pytest.fixture
def vienna() -> ZoneInfoTimezone:
    try:
        return ZoneInfoTimezone("Europe/Vienna")
    except TimezoneError:
        pytest.skip("tz database not available")


class TestFixedTimezone:
    """Tests for the fixed-offset Timezone."""

    def test_utc_singleton(self) -> None:
        assert Timezone.utc() is Timezone.utc()
        assert Timezone.utc().is_utc

    def test_from_hours(self) -> None:
        assert Timezone.from_hours(5, 30).offset_seconds == 19800
        assert Timezone.from_hours(-5, 30).offset_seconds == -19800

    @pytest.mark.parametrize(
        "text,offset",
        [("Z", 0), ("utc", 0), ("GMT", 0), ("+01:00", 3600), ("-0530", -19800), ("+02", 7200)],
    )
    def test_from_string(self, text: str, offset: int) -> None:
        assert Timezone.from_string(text).offset_seconds == offset

    @pytest.mark.parametrize("text", ["bogus", "+15:00", "+01:75", ""])
    def test_from_string_invalid(self, text: str) -> None:
        with pytest.raises(TimezoneError):
            Timezone.from_string(text)

    def test_offset_out_of_range(self) -> None:
        with pytest.raises(TimezoneError):
            Timezone(15 * 3600)

    def test_offset_must_be_int(self) -> None:
        with pytest.raises(TimezoneError):
            Timezone(True)  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(Timezone.utc()) == "UTC"
        assert str(Timezone(19800)) == "+05:30"
        assert str(Timezone(-3600)) == "-01:00"

    def test_equality(self) -> None:
        assert Timezone(3600) == Timezone.from_string("+01:00")
        assert hash(Timezone(3600)) == hash(Timezone.from_hours(1))
        assert Timezone(0) == Timezone.utc()

    def test_civil_round_trip(self) -> None:
        tz = Timezone(3600)
        civil = tz.to_civil(REFERENCE)
        assert civil == CivilTime(2020, 2, 25, 14, 0, 0)
        assert tz.from_civil(civil) == REFERENCE

    def test_offset_and_name(self) -> None:
        tz = Timezone(-18000)
        assert tz.utcoffset(REFERENCE) == -18000
        assert tz.tzname(REFERENCE) == "-05:00"


class TestResolverProtocol:
    """All resolvers satisfy the TimezoneResolver protocol."""

    def test_fixed(self) -> None:
        assert isinstance(Timezone.utc(), TimezoneResolver)

    def test_local(self) -> None:
        assert isinstance(LocalTimezone(), TimezoneResolver)

    def test_zoneinfo(self, vienna: ZoneInfoTimezone) -> None:
        assert isinstance(vienna, TimezoneResolver)

    def test_not_a_resolver(self) -> None:
        assert not isinstance("UTC", TimezoneResolver)


class TestLocalTimezone:
    """Tests for the platform local timezone."""

    def test_round_trip(self) -> None:
        tz = LocalTimezone()
        assert tz.from_civil(tz.to_civil(REFERENCE)) == REFERENCE

    def test_offset_matches_fields(self) -> None:
        tz = LocalTimezone()
        civil = tz.to_civil(REFERENCE)
        utc = Timezone.utc().to_civil(REFERENCE + tz.utcoffset(REFERENCE))
        assert civil == utc

    def test_equality(self) -> None:
        assert LocalTimezone() == LocalTimezone()

    @pytest.mark.parametrize("epoch", [FAR_FUTURE, -FAR_FUTURE, 2**63 - 1, -(2**63)])
    def test_beyond_platform_range(self, epoch: int) -> None:
        """Unrepresentable epochs use the nearest known offset with calendar math."""
        tz = LocalTimezone()
        offset = tz.utcoffset(epoch)
        assert abs(offset) <= 14 * 3600
        assert isinstance(tz.tzname(epoch), str)
        civil = tz.to_civil(epoch)
        assert civil == Timezone(offset).to_civil(epoch)
        assert tz.from_civil(civil) == epoch


class TestZoneInfoTimezone:
    """Tests for IANA zones."""

    def test_winter(self, vienna: ZoneInfoTimezone) -> None:
        assert vienna.to_civil(REFERENCE) == CivilTime(2020, 2, 25, 14, 0, 0)
        assert vienna.utcoffset(REFERENCE) == 3600
        assert vienna.tzname(REFERENCE) == "CET"

    def test_summer(self, vienna: ZoneInfoTimezone) -> None:
        assert vienna.to_civil(SUMMER) == CivilTime(2020, 7, 1, 14, 0, 0)
        assert vienna.utcoffset(SUMMER) == 7200
        assert vienna.tzname(SUMMER) == "CEST"

    def test_from_civil(self, vienna: ZoneInfoTimezone) -> None:
        assert vienna.from_civil(CivilTime(2020, 7, 1, 14, 0, 0)) == SUMMER

    def test_key(self, vienna: ZoneInfoTimezone) -> None:
        assert vienna.key == "Europe/Vienna"
        assert vienna == ZoneInfoTimezone("Europe/Vienna")

    def test_beyond_datetime_range(self, vienna: ZoneInfoTimezone) -> None:
        epoch = 2**40  # year 36812
        assert vienna.utcoffset(epoch) == 3600  # CET, as on 9999-12-30
        civil = vienna.to_civil(epoch)
        assert civil.year == 36812
        assert vienna.from_civil(civil) == epoch

    def test_before_datetime_range(self, vienna: ZoneInfoTimezone) -> None:
        civil = vienna.to_civil(-FAR_FUTURE)
        assert vienna.from_civil(civil) == -FAR_FUTURE

    def test_unknown_key(self) -> None:
        with pytest.raises(TimezoneError):
            ZoneInfoTimezone("Nowhere/Special")
