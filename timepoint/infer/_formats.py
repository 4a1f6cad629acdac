"""Absolute date and time templates for the string resolver.

Each template pairs a regex with an extractor that pulls out calendar or
clock components. Templates are tried in order at the current scan
position; the first match wins.

Internal module - use parse_epoch() from timepoint.infer instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Pattern

from timepoint.infer._natural import END, MONTH_NAMES, MONTH_RE, to_24_hour


class FormatKind(Enum):
    """Classification of format type."""

    DATE = "date"
    TIME = "time"


Components = dict[str, "int | str | None"]


@dataclass(frozen=True)
class FormatTemplate:
    """A format template for matching date/time tokens.

    Attributes:
        name: Human-readable name for the format.
        kind: Whether this is a date or a time format.
        pattern: Compiled regex pattern, matched at the scan position.
        extractor: Function to extract components from a regex match.
    """

    name: str
    kind: FormatKind
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str]], Components]


# A date may be followed directly by "t" (ISO 8601 "2020-02-25T13:00")
_DATE_END = r"(?=$|[\s,t])"

# Optional zone suffix; never swallow the number of a relative offset
_ZONE = r"(?:\s*(?P<zone>z|utc|gmt|[+-]\d{2}(?::?\d{2})?(?!\s*[a-z0-9])))?"

_MERIDIEM = r"(?P<meridiem>[ap])\.?m\.?"


def _month_to_int(month_str: str) -> int | None:
    """Convert month name to integer (1-12)."""
    return MONTH_NAMES.get(month_str.lower())


def _extract_ymd(match: re.Match[str]) -> Components:
    return {
        "year": int(match.group("year")),
        "month": int(match.group("month")),
        "day": int(match.group("day")),
    }


def _extract_year_month(match: re.Match[str]) -> Components:
    return {
        "year": int(match.group("year")),
        "month": int(match.group("month")),
        "day": 1,
    }


def _extract_month_day(match: re.Match[str]) -> Components:
    return {
        "year": None,
        "month": int(match.group("month")),
        "day": int(match.group("day")),
    }


def _extract_named(match: re.Match[str]) -> Components:
    year = match.group("year")
    day = match.groupdict().get("day")
    return {
        "year": int(year) if year else None,
        "month": _month_to_int(match.group("name")),
        "day": int(day) if day else 1,
    }


def _extract_month_only(match: re.Match[str]) -> Components:
    return {"year": None, "month": _month_to_int(match.group("name")), "day": None}


def _extract_clock(match: re.Match[str]) -> Components:
    hour = int(match.group("hour"))
    minute = match.groupdict().get("minute")
    second = match.groupdict().get("second")
    meridiem = match.groupdict().get("meridiem")
    if meridiem:
        hour = to_24_hour(hour, meridiem)
    return {
        "hour": hour,
        "minute": int(minute) if minute else 0,
        "second": int(second) if second else 0,
        "zone": match.groupdict().get("zone"),
    }


DATE_TEMPLATES = [
    # 2020-02-25
    FormatTemplate(
        name="iso_date",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})" + _DATE_END
        ),
        extractor=_extract_ymd,
    ),
    # 2020/02/25
    FormatTemplate(
        name="slash_ymd",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<year>\d{4})/(?P<month>\d{1,2})/(?P<day>\d{1,2})" + _DATE_END
        ),
        extractor=_extract_ymd,
    ),
    # 02/25/2020 (American order)
    FormatTemplate(
        name="slash_mdy",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})" + _DATE_END
        ),
        extractor=_extract_ymd,
    ),
    # 02/25 (current year)
    FormatTemplate(
        name="slash_md",
        kind=FormatKind.DATE,
        pattern=re.compile(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})" + _DATE_END),
        extractor=_extract_month_day,
    ),
    # 25.02.2020
    FormatTemplate(
        name="dot_dmy",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{4})" + _DATE_END
        ),
        extractor=_extract_ymd,
    ),
    # 25-02-2020
    FormatTemplate(
        name="dash_dmy",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<day>\d{1,2})-(?P<month>\d{1,2})-(?P<year>\d{4})" + _DATE_END
        ),
        extractor=_extract_ymd,
    ),
    # 25 feb 2020, 25th February, 25-feb-2020
    FormatTemplate(
        name="named_dmy",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<day>\d{1,2})(?:st|nd|rd|th)?[\s.-]*(?P<name>" + MONTH_RE + r")\.?"
            r"(?:[\s,.-]+(?P<year>\d{4}))?" + _DATE_END
        ),
        extractor=_extract_named,
    ),
    # February 25, 2020 / feb 25
    FormatTemplate(
        name="named_mdy",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<name>" + MONTH_RE + r")\.?[\s-]*(?P<day>\d{1,2})(?:st|nd|rd|th)?"
            r"(?:[\s,.-]+(?P<year>\d{4}))?" + _DATE_END
        ),
        extractor=_extract_named,
    ),
    # feb 2020 (first of the month)
    FormatTemplate(
        name="named_my",
        kind=FormatKind.DATE,
        pattern=re.compile(
            r"(?P<name>" + MONTH_RE + r")\.?[\s,.-]+(?P<year>\d{4})" + _DATE_END
        ),
        extractor=_extract_named,
    ),
    # march (day kept from the reference unless "first/last day of" applies)
    FormatTemplate(
        name="named_month",
        kind=FormatKind.DATE,
        pattern=re.compile(r"(?P<name>" + MONTH_RE + r")\.?" + _DATE_END),
        extractor=_extract_month_only,
    ),
    # 2020-02 (first of the month)
    FormatTemplate(
        name="year_month",
        kind=FormatKind.DATE,
        pattern=re.compile(r"(?P<year>\d{4})-(?P<month>\d{1,2})" + _DATE_END),
        extractor=_extract_year_month,
    ),
]

TIME_TEMPLATES = [
    # 13:00, 13:00:05, t13:00, 1:30 pm, 13:00+01:00
    FormatTemplate(
        name="clock_time",
        kind=FormatKind.TIME,
        pattern=re.compile(
            r"t?(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?(?:[.,]\d+)?"
            r"(?:\s*" + _MERIDIEM + r")?" + _ZONE + END
        ),
        extractor=_extract_clock,
    ),
    # 3pm, 11 a.m.
    FormatTemplate(
        name="meridiem_hour",
        kind=FormatKind.TIME,
        pattern=re.compile(r"(?P<hour>\d{1,2})\s*" + _MERIDIEM + END),
        extractor=_extract_clock,
    ),
    # 2020 -> 20:20 (a bare four-digit token is HHMM, never a year)
    FormatTemplate(
        name="compact_time",
        kind=FormatKind.TIME,
        pattern=re.compile(r"t?(?P<hour>\d{2})(?P<minute>\d{2})" + _ZONE + END),
        extractor=_extract_clock,
    ),
]

# Zone designator on its own: "2020-02-25 utc", "2020-02-25 +0100"
ZONE_PATTERN = re.compile(
    r"(?:utc|gmt)?(?P<zone>z|utc|gmt|[+-]\d{2}(?::?\d{2})?(?!\s*[a-z0-9]))" + END
)


__all__ = [
    "FormatKind",
    "FormatTemplate",
    "DATE_TEMPLATES",
    "TIME_TEMPLATES",
    "ZONE_PATTERN",
]
