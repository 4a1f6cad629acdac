"""Natural language keywords and patterns for relative date parsing.

This module provides keyword mappings and regex fragments for parsing
expressions like "tomorrow", "next monday", "+3 days" or "2 weeks ago".

Internal module - use parse_epoch() from timepoint.infer instead.
"""

from __future__ import annotations

import re
from enum import Enum

from timepoint.units.timeunit import TimeUnit


class RelativeDirection(Enum):
    """Direction for weekday and "next/last unit" phrases."""

    NEXT = "next"
    LAST = "last"
    THIS = "this"


# Keywords that pin the time of day and optionally shift the date
# (day offset, (hour, minute, second))
DAY_KEYWORDS: dict[str, tuple[int, tuple[int, int, int]]] = {
    "today": (0, (0, 0, 0)),
    "midnight": (0, (0, 0, 0)),
    "noon": (0, (12, 0, 0)),
    "tomorrow": (1, (0, 0, 0)),
    "yesterday": (-1, (0, 0, 0)),
}

DIRECTION_WORDS: dict[str, RelativeDirection] = {
    "next": RelativeDirection.NEXT,
    "last": RelativeDirection.LAST,
    "previous": RelativeDirection.LAST,
    "this": RelativeDirection.THIS,
}

DIRECTION_AMOUNTS: dict[RelativeDirection, int] = {
    RelativeDirection.NEXT: 1,
    RelativeDirection.LAST: -1,
    RelativeDirection.THIS: 0,
}

# Weekday names to day-of-week number (Monday=0, Sunday=6)
WEEKDAY_NAMES: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
    # Abbreviations
    "mon": 0,
    "tue": 1,
    "tues": 1,
    "wed": 2,
    "weds": 2,
    "thu": 3,
    "thur": 3,
    "thurs": 3,
    "fri": 4,
    "sat": 5,
    "sun": 6,
}

MONTH_NAMES: dict[str, int] = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Unit words to (unit, multiplier)
TIME_UNITS: dict[str, tuple[TimeUnit, int]] = {
    "sec": (TimeUnit.SECOND, 1),
    "secs": (TimeUnit.SECOND, 1),
    "second": (TimeUnit.SECOND, 1),
    "seconds": (TimeUnit.SECOND, 1),
    "min": (TimeUnit.MINUTE, 1),
    "mins": (TimeUnit.MINUTE, 1),
    "minute": (TimeUnit.MINUTE, 1),
    "minutes": (TimeUnit.MINUTE, 1),
    "hour": (TimeUnit.HOUR, 1),
    "hours": (TimeUnit.HOUR, 1),
    "day": (TimeUnit.DAY, 1),
    "days": (TimeUnit.DAY, 1),
    "week": (TimeUnit.WEEK, 1),
    "weeks": (TimeUnit.WEEK, 1),
    "fortnight": (TimeUnit.WEEK, 2),
    "fortnights": (TimeUnit.WEEK, 2),
    "month": (TimeUnit.MONTH, 1),
    "months": (TimeUnit.MONTH, 1),
    "year": (TimeUnit.YEAR, 1),
    "years": (TimeUnit.YEAR, 1),
}


def _alternation(words: dict[str, object]) -> str:
    # Longest first so "sept" wins over "sep" and "seconds" over "sec"
    return "|".join(sorted(words, key=len, reverse=True))


UNIT_RE = _alternation(TIME_UNITS)
WEEKDAY_RE = _alternation(WEEKDAY_NAMES)
MONTH_RE = _alternation(MONTH_NAMES)
DIRECTION_RE = _alternation(DIRECTION_WORDS)

# A token ends at whitespace, a comma or the end of the text
END = r"(?=$|[\s,])"

# Match "@1582635600"
EPOCH_PATTERN = re.compile(r"@(?P<seconds>[+-]?\d+)" + END)

# Match "first day of" / "last day of"
DAY_OF_PATTERN = re.compile(r"(?P<which>first|last)\s+day\s+of" + END)

# Match "now", "today", "tomorrow", ...
KEYWORD_PATTERN = re.compile(r"(?P<word>now|" + _alternation(DAY_KEYWORDS) + r")" + END)

# Match "next month", "last year", "this week"
RELATIVE_WORD_PATTERN = re.compile(
    r"(?P<direction>" + DIRECTION_RE + r")\s+(?P<unit>" + UNIT_RE + r")" + END
)

# Match weekday with optional direction: "monday", "next fri", "last sunday"
WEEKDAY_PATTERN = re.compile(
    r"(?:(?P<direction>" + DIRECTION_RE + r")\s+)?(?P<weekday>" + WEEKDAY_RE + r")" + END
)

# Match "+1 day", "-2 weeks", "3 months", "+1day"
RELATIVE_NUMBER_PATTERN = re.compile(
    r"(?P<sign>[+-]?)\s*(?P<amount>\d+)\s*(?P<unit>" + UNIT_RE + r")" + END
)

# Match "ago", which negates every offset parsed before it
AGO_PATTERN = re.compile(r"ago" + END)


def direction_of(word: str | None) -> RelativeDirection:
    """Map a direction word to RelativeDirection; no word means THIS."""
    if not word:
        return RelativeDirection.THIS
    return DIRECTION_WORDS[word.lower()]


def weekday_offset(current: int, target: int, direction: RelativeDirection) -> int:
    """Days to move from weekday ``current`` to weekday ``target``.

    THIS: next occurrence including today (0-6 days ahead).
    NEXT: next occurrence strictly after today (1-7 days ahead).
    LAST: most recent occurrence strictly before today (1-7 days back).

    Examples:
        >>> weekday_offset(0, 4, RelativeDirection.THIS)  # Monday -> Friday
        4
        >>> weekday_offset(0, 0, RelativeDirection.NEXT)  # Monday -> next Monday
        7
        >>> weekday_offset(0, 4, RelativeDirection.LAST)  # Monday -> last Friday
        -3
    """
    if direction == RelativeDirection.LAST:
        return -((current - target) % 7 or 7)
    ahead = (target - current) % 7
    if direction == RelativeDirection.NEXT and ahead == 0:
        return 7
    return ahead


def to_24_hour(hour: int, meridiem: str) -> int:
    """Convert a 12-hour clock hour to 24-hour form.

    Raises:
        ValueError: If hour is outside 1-12.
    """
    if hour < 1 or hour > 12:
        raise ValueError(f"12-hour clock hour must be 1-12, got {hour}")
    if meridiem.startswith("a"):
        return 0 if hour == 12 else hour
    return hour if hour == 12 else hour + 12


__all__ = [
    "RelativeDirection",
    "DAY_KEYWORDS",
    "DIRECTION_WORDS",
    "DIRECTION_AMOUNTS",
    "WEEKDAY_NAMES",
    "MONTH_NAMES",
    "TIME_UNITS",
    "UNIT_RE",
    "WEEKDAY_RE",
    "MONTH_RE",
    "END",
    "EPOCH_PATTERN",
    "DAY_OF_PATTERN",
    "KEYWORD_PATTERN",
    "RELATIVE_WORD_PATTERN",
    "WEEKDAY_PATTERN",
    "RELATIVE_NUMBER_PATTERN",
    "AGO_PATTERN",
    "direction_of",
    "weekday_offset",
    "to_24_hour",
]
