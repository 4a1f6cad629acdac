"""Timezone resolvers.

A resolver maps epoch seconds to local civil fields and back. Timepoint
treats it as an opaque collaborator: it never derives DST rules itself.

Resolvers:
    Timezone: Fixed UTC offset (no DST), computed with calendar math.
    LocalTimezone: The platform's local zone via the ``time`` module.
    ZoneInfoTimezone: An IANA zone via the standard ``zoneinfo`` module.
"""

from __future__ import annotations

import datetime as _datetime
import re
import time as _time
from typing import ClassVar, Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timepoint._internal.calendar import CivilTime, civil_from_epoch, epoch_from_civil
from timepoint._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from timepoint.errors import TimezoneError


@runtime_checkable
class TimezoneResolver(Protocol):
    """Calendar/timezone capability consumed by the core."""

    def to_civil(self, epoch: int) -> CivilTime:
        """Return the wall-clock fields of ``epoch`` in this zone."""
        ...

    def from_civil(self, civil: CivilTime) -> int:
        """Return the epoch of the wall-clock fields in this zone."""
        ...

    def utcoffset(self, epoch: int) -> int:
        """Return the UTC offset in seconds in effect at ``epoch``."""
        ...

    def tzname(self, epoch: int) -> str:
        """Return the abbreviation in effect at ``epoch``."""
        ...


_UTC_DESIGNATORS = frozenset({"z", "utc", "gmt"})

_OFFSET_RE = re.compile(r"(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?")


def _format_offset(offset_seconds: int, colon: bool = True) -> str:
    hours, minutes = divmod(abs(offset_seconds) // SECONDS_PER_MINUTE, 60)
    sign = "-" if offset_seconds < 0 else "+"
    return f"{sign}{hours:02d}{':' if colon else ''}{minutes:02d}"


class Timezone:
    """A fixed UTC offset with no daylight saving rules.

    Civil fields are computed with calendar math alone, so a fixed zone
    behaves the same on every platform. Positive offsets are east of UTC.

    Examples:
        >>> Timezone.utc().is_utc
        True
        >>> Timezone.from_hours(5, 30).offset_seconds
        19800
        >>> str(Timezone.from_string("-0500"))
        '-05:00'
    """

    __slots__ = ("_offset", "_name")

    _utc: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a fixed zone ``offset_seconds`` east of UTC.

        Raises:
            TimezoneError: If the offset is not an int or exceeds 14 hours.
        """
        if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"UTC offset must be an int number of seconds, got {offset_seconds!r}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(f"UTC offset {offset_seconds}s exceeds 14 hours")
        self._offset = offset_seconds
        self._name = name

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC instance."""
        if cls._utc is None:
            cls._utc = cls(0, "UTC")
        return cls._utc

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Build a zone from hours and minutes; the sign of ``hours`` applies to both."""
        if not 0 <= minutes <= 59:
            raise TimezoneError(f"offset minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(hours * SECONDS_PER_HOUR + sign * minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_string(cls, designator: str) -> Timezone:
        """Read "Z", "UTC", "GMT", "+HH", "+HHMM" or "+HH:MM".

        Raises:
            TimezoneError: If the designator is not recognized or out of range.
        """
        text = designator.strip()
        if text.lower() in _UTC_DESIGNATORS:
            return cls.utc()

        match = _OFFSET_RE.fullmatch(text)
        if match is None:
            raise TimezoneError(f"unrecognized UTC offset: {designator!r}")

        minutes = int(match.group("minutes") or 0)
        if minutes > 59:
            raise TimezoneError(f"offset minutes out of range in {designator!r}")
        magnitude = int(match.group("hours")) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
        return cls(-magnitude if match.group("sign") == "-" else magnitude)

    @property
    def offset_seconds(self) -> int:
        return self._offset

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_utc(self) -> bool:
        return self._offset == 0

    def to_civil(self, epoch: int) -> CivilTime:
        return civil_from_epoch(epoch, self._offset)

    def from_civil(self, civil: CivilTime) -> int:
        return epoch_from_civil(civil, self._offset)

    def utcoffset(self, epoch: int) -> int:
        return self._offset

    def tzname(self, epoch: int) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset == other._offset

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        if self._name:
            return f"Timezone({self._offset}, {self._name!r})"
        return f"Timezone({self._offset})"

    def __str__(self) -> str:
        if self._offset == 0:
            return self._name or "UTC"
        return _format_offset(self._offset)


# Raised by time.localtime/mktime and datetime for values the platform cannot hold
_PLATFORM_ERRORS = (OverflowError, OSError, ValueError)

# Spans every platform can resolve; the offset at the nearer end is used beyond them
_LOCAL_SPAN = (0, 2**31 - 1)
_DATETIME_SPAN = (-62135510400, 253402214399)  # 0001-01-02 .. 9999-12-30 UTC


def _clamp(epoch: int, span: tuple[int, int]) -> int:
    low, high = span
    return min(max(epoch, low), high)


class LocalTimezone:
    """The platform's local timezone, as seen by ``time.localtime``.

    DST transitions are whatever the C library reports; wall-clock times
    that fall into a gap are normalized by ``time.mktime``. Epochs the
    platform cannot represent are resolved with calendar math at the
    offset in effect at the nearest representable time.
    """

    __slots__ = ()

    def _struct(self, epoch: int) -> _time.struct_time:
        try:
            return _time.localtime(epoch)
        except _PLATFORM_ERRORS:
            return _time.localtime(_clamp(epoch, _LOCAL_SPAN))

    def to_civil(self, epoch: int) -> CivilTime:
        try:
            t = _time.localtime(epoch)
        except _PLATFORM_ERRORS:
            return civil_from_epoch(epoch, self.utcoffset(epoch))
        return CivilTime(t.tm_year, t.tm_mon, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec)

    def from_civil(self, civil: CivilTime) -> int:
        try:
            return int(_time.mktime((*civil, 0, 0, -1)))
        except _PLATFORM_ERRORS:
            return epoch_from_civil(civil, self.utcoffset(epoch_from_civil(civil)))

    def utcoffset(self, epoch: int) -> int:
        return self._struct(epoch).tm_gmtoff

    def tzname(self, epoch: int) -> str:
        return self._struct(epoch).tm_zone

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LocalTimezone)

    def __hash__(self) -> int:
        return hash(LocalTimezone)

    def __repr__(self) -> str:
        return "LocalTimezone()"


class ZoneInfoTimezone:
    """An IANA timezone resolved through ``zoneinfo``.

    Ambiguous wall-clock times (the repeated hour when clocks go back)
    resolve to the first occurrence. Outside the years 1-9999 the offset
    in effect at the nearest end of that range is used.

    Examples:
        >>> tz = ZoneInfoTimezone("Europe/Vienna")
        >>> tz.key
        'Europe/Vienna'
    """

    __slots__ = ("_zone",)

    def __init__(self, key: str) -> None:
        """Load the zone named ``key``.

        Raises:
            TimezoneError: If the key is unknown to the tz database.
        """
        try:
            self._zone = ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise TimezoneError(f"unknown timezone: {key!r}") from exc

    @property
    def key(self) -> str:
        return self._zone.key

    def _localize(self, epoch: int) -> _datetime.datetime:
        try:
            return _datetime.datetime.fromtimestamp(epoch, tz=self._zone)
        except _PLATFORM_ERRORS:
            return _datetime.datetime.fromtimestamp(_clamp(epoch, _DATETIME_SPAN), tz=self._zone)

    def to_civil(self, epoch: int) -> CivilTime:
        try:
            dt = _datetime.datetime.fromtimestamp(epoch, tz=self._zone)
        except _PLATFORM_ERRORS:
            return civil_from_epoch(epoch, self.utcoffset(epoch))
        return CivilTime(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    def from_civil(self, civil: CivilTime) -> int:
        try:
            return int(_datetime.datetime(*civil, tzinfo=self._zone).timestamp())
        except _PLATFORM_ERRORS:
            return epoch_from_civil(civil, self.utcoffset(epoch_from_civil(civil)))

    def utcoffset(self, epoch: int) -> int:
        offset = self._localize(epoch).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def tzname(self, epoch: int) -> str:
        return self._localize(epoch).tzname() or self.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneInfoTimezone):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"ZoneInfoTimezone({self.key!r})"


__all__ = [
    "TimezoneResolver",
    "Timezone",
    "LocalTimezone",
    "ZoneInfoTimezone",
]
