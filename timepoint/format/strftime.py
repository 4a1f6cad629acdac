"""strftime-style formatting and parsing.

Formatting works on the civil fields of a TimePoint in its own timezone.
Numeric directives are rendered here so they work for any year; day and month
names (%a, %A, %b, %h, %B) come from the ``calendar`` locale tables, and
the remaining directives (%c, %x, %X, %p, ...) are delegated to the
platform ``strftime``. Both follow the process locale (``LC_TIME``); the
platform ones need a year between 1 and 9999.
%z, %Z and %s come from the point's timezone resolver, so they are
correct for zones other than the platform's local one.

Parse Directives:
    %Y - 4-digit year
    %y - 2-digit year (69-99 -> 19xx, 00-68 -> 20xx)
    %m - month (1 or 2 digits)
    %d - day of month (1 or 2 digits)
    %e - day of month, space padded
    %H - hour, 24-hour clock
    %I - hour, 12-hour clock (use with %p)
    %M - 2-digit minute
    %S - 2-digit second
    %p - AM/PM
    %b - abbreviated month name (locale or English)
    %B - full month name (locale or English)
    %a, %A - weekday name (matched, not checked)
    %z - UTC offset (+0100, +01:00, Z)
    %s - epoch seconds
    %% - literal %

Functions:
    strftime: Format a TimePoint using a strftime-style format string.
    strptime: Parse a string using a strftime-style format string.

Examples:
    >>> from timepoint import TimePoint
    >>> from timepoint.units.timezone import Timezone
    >>> point = TimePoint(1582635600, timezone=Timezone.utc())
    >>> strftime(point, "%Y-%m-%d %H:%M:%S %z")
    '2020-02-25 13:00:00 +0000'

    >>> strptime("25.02.2020 13:00", "%d.%m.%Y %H:%M", timezone=Timezone.utc()).epoch_seconds
    1582635600
"""

from __future__ import annotations

import calendar as _calendar
import datetime as _datetime
import re
from typing import TYPE_CHECKING

from timepoint._internal.calendar import CivilTime
from timepoint._internal.validation import validate_date, validate_epoch, validate_time
from timepoint.errors import InvalidArgument, ParseError, TimezoneError
from timepoint.infer._natural import MONTH_NAMES, to_24_hour
from timepoint.units.timezone import Timezone, _format_offset

if TYPE_CHECKING:
    from timepoint.core.options import OptionsLike
    from timepoint.core.point import TimePoint
    from timepoint.units.timezone import TimezoneResolver

# glibc flags: %-d (no padding), %_d (space padding), %0e, %^a, %#b
_FLAGS = "-_0^#"

# Directives rendered from civil fields rather than the platform
_NUMERIC: dict[str, str] = {
    "Y": "{year:04d}",
    "m": "{month:02d}",
    "d": "{day:02d}",
    "e": "{day:2d}",
    "H": "{hour:02d}",
    "M": "{minute:02d}",
    "S": "{second:02d}",
    "F": "{year:04d}-{month:02d}-{day:02d}",
    "T": "{hour:02d}:{minute:02d}:{second:02d}",
    "R": "{hour:02d}:{minute:02d}",
}

# Name directives rendered from the locale tables in `calendar`
_NAMES: dict[str, tuple[str, str]] = {
    "a": ("day_abbr", "weekday"),
    "A": ("day_name", "weekday"),
    "b": ("month_abbr", "month"),
    "h": ("month_abbr", "month"),
    "B": ("month_name", "month"),
}


def strftime(point: "TimePoint", fmt: str) -> str:
    """Format a TimePoint using a strftime-style format string.

    Args:
        point: The TimePoint to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        InvalidArgument: If a platform-rendered directive needs a year outside
            1-9999.

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> point = TimePoint("2020-02-25 13:00", timezone=Timezone.utc())
        >>> strftime(point, "%d.%m.%Y")
        '25.02.2020'
        >>> strftime(point, "%s")
        '1582635600'
    """
    epoch = point.epoch_seconds
    timezone = point.timezone
    civil = timezone.to_civil(epoch)

    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            end = i + 2
            if fmt[i + 1] in _FLAGS and i + 2 < len(fmt):
                end = i + 3
            result.append(_format_directive(civil, epoch, timezone, fmt[i:end]))
            i = end
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(
    civil: CivilTime, epoch: int, timezone: "TimezoneResolver", directive: str
) -> str:
    """Format a single directive such as "%Y" or "%-d"."""
    code = directive[-1]
    flagged = len(directive) == 3

    if directive == "%%":
        return "%"

    if code == "z" and not flagged:
        return _format_offset(timezone.utcoffset(epoch), colon=False)

    if code == "Z" and not flagged:
        return timezone.tzname(epoch)

    if code == "s" and not flagged:
        return str(epoch)

    if code in _NUMERIC and not flagged:
        return _NUMERIC[code].format(**civil._asdict())

    if code in _NAMES and not flagged:
        table, field = _NAMES[code]
        return getattr(_calendar, table)[getattr(civil, field)]

    return _platform_strftime(civil, directive)


def _platform_strftime(civil: CivilTime, directive: str) -> str:
    try:
        naive = _datetime.datetime(*civil)
    except ValueError as exc:
        raise InvalidArgument(
            f"strftime directive {directive} needs a year between 1 and 9999, got {civil.year}"
        ) from exc
    return naive.strftime(directive)


# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>\d{4})",
    "%y": r"(?P<short_year>\d{2})",
    "%m": r"(?P<month>\d{1,2})",
    "%d": r"(?P<day>\d{1,2})",
    "%e": r"\s?(?P<day>\d{1,2})",
    "%H": r"(?P<hour>\d{1,2})",
    "%I": r"(?P<hour12>\d{1,2})",
    "%M": r"(?P<minute>\d{2})",
    "%S": r"(?P<second>\d{2})",
    "%p": r"(?P<meridiem>[ap]\.?m\.?)",
    "%b": r"(?P<month_name>[^\W\d_]+)\.?",
    "%B": r"(?P<month_name>[^\W\d_]+)",
    "%a": r"[^\W\d_]+\.?",
    "%A": r"[^\W\d_]+",
    "%z": r"(?P<tz_offset>z|[+-]\d{2}:?\d{2})",
    "%s": r"(?P<epoch>[+-]?\d+)",
    "%%": r"%",
}

_SUPPORTED = ", ".join(sorted(_PARSE_PATTERNS))

_GROUP_RE = re.compile(r"\(\?P<(\w+)>")


def _month_lookup() -> dict[str, int]:
    # English names always work; the current locale's names are added on top
    names = dict(MONTH_NAMES)
    for number in range(1, 13):
        for name in (_calendar.month_name[number], _calendar.month_abbr[number]):
            if name:
                names[name.lower().rstrip(".")] = number
    return names


def _format_to_regex(fmt: str) -> str:
    """Convert a strftime format string to a regex pattern.

    Raises:
        ParseError: If the format contains unsupported directives or
            repeats a directive.
    """
    result = []
    seen: set[str] = set()
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            if directive not in _PARSE_PATTERNS:
                raise ParseError(
                    f"unsupported strptime directive: {directive}. Supported: {_SUPPORTED}",
                    fmt,
                )
            pattern = _PARSE_PATTERNS[directive]
            for group in _GROUP_RE.findall(pattern):
                if group in seen:
                    raise ParseError(f"strptime field {group!r} given twice in {fmt!r}", fmt)
                seen.add(group)
            result.append(pattern)
            i += 2
        elif fmt[i].isspace():
            result.append(r"\s+")
            i += 1
        else:
            # Escape regex special characters
            result.append(re.escape(fmt[i]))
            i += 1

    return "^" + "".join(result) + "$"


def _parse_fields(groups: dict[str, str | None], text: str) -> CivilTime:
    year = int(groups["year"]) if groups.get("year") else None
    if year is None and groups.get("short_year"):
        short = int(groups["short_year"])  # type: ignore[arg-type]
        year = 1900 + short if short >= 69 else 2000 + short

    month = int(groups["month"]) if groups.get("month") else None
    if month is None and groups.get("month_name"):
        month = _month_lookup().get(groups["month_name"].lower())  # type: ignore[union-attr]
        if month is None:
            raise ParseError(f"unknown month name {groups['month_name']!r} in {text!r}", text)

    day = int(groups["day"]) if groups.get("day") else None

    if year is None or month is None or day is None:
        raise ParseError(
            "strptime requires year, month, and day components. "
            f"Got: year={year}, month={month}, day={day}",
            text,
        )

    meridiem = (groups.get("meridiem") or "").lower()
    if groups.get("hour12"):
        try:
            hour = to_24_hour(int(groups["hour12"]), meridiem or "am")  # type: ignore[arg-type]
        except ValueError as exc:
            raise ParseError(f"{exc} in {text!r}", text) from exc
    else:
        hour = int(groups.get("hour") or 0)
        if meridiem:
            try:
                hour = to_24_hour(hour, meridiem)
            except ValueError as exc:
                raise ParseError(f"{exc} in {text!r}", text) from exc
    minute = int(groups.get("minute") or 0)
    second = int(groups.get("second") or 0)

    validate_date(year, month, day, text)
    validate_time(hour, minute, second, text)
    return CivilTime(year, month, day, hour, minute, second)


def strptime(
    text: str,
    fmt: str,
    *,
    timezone: "TimezoneResolver | None" = None,
    options: "OptionsLike | None" = None,
) -> "TimePoint":
    """Parse a string using a strftime-style format string.

    Args:
        text: The string to parse.
        fmt: Format string with %-directives.
        timezone: Zone the fields are read in, and the zone of the
            result. Defaults to the configured timezone. A %z field
            overrides it for reading the fields only.
        options: Formatting options for the result.

    Returns:
        A TimePoint.

    Raises:
        ParseError: If the string doesn't match the format, the format has
            unsupported directives, or the fields are invalid.

    Notes:
        Missing time components default to 0.
        Missing date components cause an error unless %s is used.

    Examples:
        >>> from timepoint.units.timezone import Timezone
        >>> strptime("2020-02-25 13:00:00", "%Y-%m-%d %H:%M:%S", timezone=Timezone.utc())
        TimePoint(1582635600, '2020-02-25 13:00:00')

        >>> strptime("13:00", "%H:%M")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: strptime requires year, month, and day...
    """
    from timepoint.core.point import TimePoint

    if not isinstance(text, str):
        raise ParseError(f"strptime expects a string, got {type(text).__name__}", text)

    match = re.match(_format_to_regex(fmt), text.strip(), re.IGNORECASE)
    if not match:
        raise ParseError(f"string {text!r} does not match format {fmt!r}", text)

    groups = match.groupdict()

    if groups.get("epoch"):
        epoch = validate_epoch(int(groups["epoch"]), text)
        return TimePoint._from_epoch(epoch, options, timezone)

    civil = _parse_fields(groups, text)

    if timezone is None:
        from timepoint.config import get_settings

        timezone = get_settings().timezone

    reader: TimezoneResolver = timezone
    if groups.get("tz_offset"):
        try:
            reader = Timezone.from_string(groups["tz_offset"])  # type: ignore[arg-type]
        except TimezoneError as exc:
            raise ParseError(str(exc), text) from exc

    try:
        epoch = reader.from_civil(civil)
    except (OverflowError, OSError, ValueError) as exc:
        raise ParseError(f"cannot resolve {text!r}: {exc}", text) from exc

    return TimePoint._from_epoch(validate_epoch(epoch, text), options, timezone)


__all__ = ["strftime", "strptime"]
