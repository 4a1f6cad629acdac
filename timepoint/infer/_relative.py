"""Absolute and relative date string resolution.

This module turns strings such as "2020-02-25 13:00", "+1 day",
"first day of next month" or "tomorrow noon" into epoch seconds,
anchored at a reference epoch in a given timezone.

The text is scanned left to right. Every token either fixes part of the
civil date/time or adds a relative offset; the result is then computed
in a fixed order:

    1. civil fields of the reference, replaced by any explicit date/time
    2. year and month offsets (day clamped to the target month)
    3. "first/last day of"
    4. day and week offsets
    5. weekday moves
    6. civil -> epoch through the timezone, then hour/minute/second
       offsets as elapsed seconds

Internal module - use parse_epoch() from timepoint.infer instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from timepoint._internal.calendar import (
    CivilTime,
    add_days,
    add_months,
    days_in_month,
    weekday_from_days,
    days_from_civil,
)
from timepoint._internal.constants import DAYS_PER_WEEK
from timepoint._internal.validation import validate_date, validate_epoch, validate_time
from timepoint.errors import ParseError, TimezoneError
from timepoint.infer._formats import DATE_TEMPLATES, TIME_TEMPLATES, ZONE_PATTERN
from timepoint.infer._natural import (
    AGO_PATTERN,
    DAY_KEYWORDS,
    DAY_OF_PATTERN,
    DIRECTION_AMOUNTS,
    EPOCH_PATTERN,
    KEYWORD_PATTERN,
    RELATIVE_NUMBER_PATTERN,
    RELATIVE_WORD_PATTERN,
    TIME_UNITS,
    WEEKDAY_NAMES,
    WEEKDAY_PATTERN,
    RelativeDirection,
    direction_of,
    weekday_offset,
)
from timepoint.units.timeunit import TimeUnit
from timepoint.units.timezone import Timezone

if TYPE_CHECKING:
    from timepoint.units.timezone import TimezoneResolver

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[\s,]*")


@dataclass
class _Expression:
    """Everything a date string asked for, before resolution."""

    text: str
    date: tuple[int | None, int, int | None] | None = None
    time: tuple[int, int, int] | None = None
    keyword_time: tuple[int, int, int] | None = None
    zone: Timezone | None = None
    epoch: int | None = None
    years: int = 0
    months: int = 0
    days: int = 0
    seconds: int = 0
    weekday: tuple[int, RelativeDirection] | None = None
    day_of: str | None = None

    def set_date(self, year: int | None, month: int, day: int | None) -> None:
        if self.date is not None:
            raise ParseError(f"double date specification in {self.text!r}", self.text)
        self.date = (year, month, day)

    def set_time(self, hour: int, minute: int, second: int) -> None:
        if self.time is not None:
            raise ParseError(f"double time specification in {self.text!r}", self.text)
        validate_time(hour, minute, second, self.text)
        self.time = (hour, minute, second)

    def set_zone(self, designator: str) -> None:
        if self.zone is not None:
            raise ParseError(f"double timezone specification in {self.text!r}", self.text)
        try:
            self.zone = Timezone.from_string(designator)
        except TimezoneError as exc:
            raise ParseError(str(exc), self.text) from exc

    def add(self, unit: TimeUnit, amount: int) -> None:
        if unit.is_elapsed:
            self.seconds += amount * unit.to_seconds()
        elif unit == TimeUnit.YEAR:
            self.years += amount
        elif unit == TimeUnit.MONTH:
            self.months += amount
        elif unit == TimeUnit.WEEK:
            self.days += amount * DAYS_PER_WEEK
        else:
            self.days += amount

    def negate(self) -> None:
        self.years = -self.years
        self.months = -self.months
        self.days = -self.days
        self.seconds = -self.seconds


# Rule handlers: (expression, match) -> None


def _on_epoch(expr: _Expression, match: re.Match[str]) -> None:
    if expr.epoch is not None:
        raise ParseError(f"double timestamp specification in {expr.text!r}", expr.text)
    expr.epoch = validate_epoch(int(match.group("seconds")), expr.text)


def _on_day_of(expr: _Expression, match: re.Match[str]) -> None:
    expr.day_of = match.group("which")


def _on_keyword(expr: _Expression, match: re.Match[str]) -> None:
    word = match.group("word")
    if word == "now":
        return
    offset, clock = DAY_KEYWORDS[word]
    expr.days += offset
    expr.keyword_time = clock


def _on_relative_word(expr: _Expression, match: re.Match[str]) -> None:
    unit, multiplier = TIME_UNITS[match.group("unit")]
    amount = DIRECTION_AMOUNTS[direction_of(match.group("direction"))]
    expr.add(unit, amount * multiplier)


def _on_weekday(expr: _Expression, match: re.Match[str]) -> None:
    if expr.weekday is not None:
        raise ParseError(f"double weekday specification in {expr.text!r}", expr.text)
    expr.weekday = (
        WEEKDAY_NAMES[match.group("weekday")],
        direction_of(match.group("direction")),
    )


def _on_relative_number(expr: _Expression, match: re.Match[str]) -> None:
    unit, multiplier = TIME_UNITS[match.group("unit")]
    amount = int(match.group("amount")) * multiplier
    if match.group("sign") == "-":
        amount = -amount
    expr.add(unit, amount)


def _on_ago(expr: _Expression, match: re.Match[str]) -> None:
    expr.negate()


def _on_zone(expr: _Expression, match: re.Match[str]) -> None:
    expr.set_zone(match.group("zone"))


_Handler = Callable[[_Expression, "re.Match[str]"], None]

_RULES: list[tuple[re.Pattern[str], _Handler]] = [
    (EPOCH_PATTERN, _on_epoch),
    (DAY_OF_PATTERN, _on_day_of),
    (KEYWORD_PATTERN, _on_keyword),
    (RELATIVE_WORD_PATTERN, _on_relative_word),
    (WEEKDAY_PATTERN, _on_weekday),
    (RELATIVE_NUMBER_PATTERN, _on_relative_number),
    (AGO_PATTERN, _on_ago),
]


def _apply_template(expr: _Expression, text: str, pos: int) -> int | None:
    """Try the date and time templates at ``pos``; return the new position."""
    for template in DATE_TEMPLATES:
        match = template.pattern.match(text, pos)
        if match:
            components = template.extractor(match)
            if components.get("month") is None:
                continue
            expr.set_date(components["year"], components["month"], components["day"])  # type: ignore[arg-type]
            return match.end()

    for template in TIME_TEMPLATES:
        match = template.pattern.match(text, pos)
        if match:
            try:
                components = template.extractor(match)
            except ValueError as exc:
                raise ParseError(f"{exc} in {expr.text!r}", expr.text) from exc
            expr.set_time(components["hour"], components["minute"], components["second"])  # type: ignore[arg-type]
            if components.get("zone"):
                expr.set_zone(components["zone"])  # type: ignore[arg-type]
            return match.end()

    match = ZONE_PATTERN.match(text, pos)
    if match:
        _on_zone(expr, match)
        return match.end()

    return None


def scan(text: str) -> _Expression:
    """Tokenize a date string into an unresolved expression.

    Raises:
        ParseError: If the text is empty, contains an unrecognized token,
            or specifies the date, time, zone or weekday twice.

    Examples:
        >>> expr = scan("+1 day")
        >>> expr.days
        1
        >>> scan("2020-02-25 13:00").date
        (2020, 2, 25)
    """
    lowered = text.strip().lower()
    if not lowered:
        raise ParseError("empty date string", text)

    expr = _Expression(text=text)
    pos = 0
    while True:
        pos = _SEPARATOR.match(lowered, pos).end()  # type: ignore[union-attr]
        if pos >= len(lowered):
            break

        for pattern, handler in _RULES:
            match = pattern.match(lowered, pos)
            if match:
                handler(expr, match)
                pos = match.end()
                break
        else:
            end = _apply_template(expr, lowered, pos)
            if end is None:
                raise ParseError(
                    f"cannot parse date string {text!r}: unexpected {lowered[pos:]!r}",
                    text,
                )
            pos = end

    return expr


def _resolve(expr: _Expression, reference: int, timezone: "TimezoneResolver") -> int:
    if expr.epoch is not None:
        reference = expr.epoch
        if expr.zone is None:
            expr.zone = Timezone.utc()

    zone: TimezoneResolver = expr.zone if expr.zone is not None else timezone
    base = zone.to_civil(reference)

    year, month, day = base.year, base.month, base.day
    clock = (base.hour, base.minute, base.second)

    if expr.date is not None:
        date_year, month, date_day = expr.date
        if date_year is not None:
            year = date_year
        if date_day is not None:
            day = date_day
        elif expr.day_of is not None:
            day = 1
        else:
            day = min(day, days_in_month(year, month))
        validate_date(year, month, day, expr.text)
        clock = (0, 0, 0)
    if expr.keyword_time is not None:
        clock = expr.keyword_time
    if expr.time is not None:
        clock = expr.time

    if expr.years or expr.months:
        year, month, day = add_months(year, month, day, expr.years * 12 + expr.months)

    if expr.day_of == "first":
        day = 1
    elif expr.day_of == "last":
        day = days_in_month(year, month)

    if expr.days:
        year, month, day = add_days(year, month, day, expr.days)

    if expr.weekday is not None:
        target, direction = expr.weekday
        current = weekday_from_days(days_from_civil(year, month, day))
        year, month, day = add_days(year, month, day, weekday_offset(current, target, direction))
        if expr.time is None:
            clock = (0, 0, 0)

    validate_date(year, month, day, expr.text)
    civil = CivilTime(year, month, day, *clock)
    return zone.from_civil(civil) + expr.seconds


def resolve_text(text: str, reference: int, timezone: "TimezoneResolver") -> int:
    """Resolve an absolute or relative date string to epoch seconds.

    Args:
        text: The date string, e.g. "2020-02-25 13:00" or "-1 month".
        reference: Epoch seconds that relative parts are anchored at and
            that supplies any fields the text leaves out.
        timezone: Resolver for local calendar semantics.

    Returns:
        The resolved epoch seconds.

    Raises:
        ParseError: If the text cannot be parsed or describes an
            invalid or unrepresentable date.

    Examples:
        >>> from timepoint.units.timezone import Timezone
        >>> utc = Timezone.utc()
        >>> resolve_text("2020-02-25 13:00", 0, utc)
        1582635600
        >>> resolve_text("+1 day", 1582635600, utc)
        1582722000
        >>> resolve_text("2020", 1582635600, utc)  # HHMM on the reference day
        1582662000
    """
    expr = scan(text)
    try:
        epoch = _resolve(expr, reference, timezone)
    except ParseError:
        raise
    except (OverflowError, OSError, ValueError) as exc:
        raise ParseError(f"cannot resolve date string {text!r}: {exc}", text) from exc

    logger.debug("Resolved %r at reference %d to %d", text, reference, epoch)
    return validate_epoch(epoch, text)


__all__ = [
    "scan",
    "resolve_text",
]
