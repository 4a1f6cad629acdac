"""Input classification and resolution to epoch seconds.

Every value a TimePoint can be built from is first classified into one
of four tagged variants and then resolved once:

    Epoch(seconds)          integers, integral floats, numeric strings
    Text(text)              date strings resolved against "now"
    Relative(text, anchor)  date strings resolved against an anchor epoch
    Point(point)            another TimePoint, used directly

Public API:
    parse_epoch: Classify and resolve a value in one step.
    classify: Classify a value without resolving it.
    resolve: Resolve a classified value.
    is_timestamp: Whether a value is numeric and integral.
    resolve_text: Resolve a date string against an explicit reference.

Examples:
    >>> from timepoint.infer import parse_epoch
    >>> from timepoint.units.timezone import Timezone
    >>> parse_epoch("2020-02-25 13:00", timezone=Timezone.utc())
    1582635600

    >>> parse_epoch("+1 day", 1582635600, timezone=Timezone.utc())
    1582722000

    >>> parse_epoch("1582635600")
    1582635600
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Union

from timepoint._internal.validation import validate_epoch
from timepoint.errors import ParseError
from timepoint.infer._relative import resolve_text

if TYPE_CHECKING:
    from timepoint.clock import Clock
    from timepoint.core.point import TimePoint
    from timepoint.units.timezone import TimezoneResolver

logger = logging.getLogger(__name__)

# "1582635600", "-86400", "+5", "1582635600.0", "1e5", "1.5e3"
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?$", re.IGNORECASE)

# Decimal exponent beyond which a value cannot fit in 64 bits
_MAX_DIGITS = 19

# Four-character strings always go to the string resolver ("2020" is 20:20)
_TEXT_ONLY_LENGTH = 4


@dataclass(frozen=True)
class Epoch:
    """An absolute timestamp in epoch seconds."""

    seconds: int


@dataclass(frozen=True)
class Text:
    """A date string resolved against the current time."""

    text: str


@dataclass(frozen=True)
class Relative:
    """A date string resolved against an explicit anchor epoch."""

    text: str
    anchor: int


@dataclass(frozen=True)
class Point:
    """An existing TimePoint."""

    point: "TimePoint"


Source = Union[Epoch, Text, Relative, Point]


def _numeric_string(value: str) -> Decimal | None:
    text = value.strip()
    if _NUMERIC_RE.match(text) is None:
        return None
    number = Decimal(text)
    if number != number.to_integral_value():
        return None
    return number


def is_timestamp(value: Any) -> bool:
    """Return True if value is numeric and equal to its integer cast.

    Examples:
        >>> is_timestamp(1582635600)
        True
        >>> is_timestamp("1582635600")
        True
        >>> is_timestamp(1.5)
        False
        >>> is_timestamp("2020-02-25")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, str):
        return _numeric_string(value) is not None
    return False


def classify(value: Any, reference: int | None = None) -> Source:
    """Classify a raw input value.

    Args:
        value: An int, float, str or TimePoint.
        reference: Anchor epoch for date strings; None means "now".

    Returns:
        The tagged variant for the value.

    Raises:
        ParseError: If the value has an unsupported type, is a
            non-integral float, or does not fit in 64 bits.
    """
    from timepoint.core.point import TimePoint

    if isinstance(value, TimePoint):
        return Point(value)

    if isinstance(value, bool):
        raise ParseError(f"cannot parse a bool as a timestamp: {value!r}", value)

    if isinstance(value, int):
        return Epoch(validate_epoch(value, value))

    if isinstance(value, float):
        if not value.is_integer():
            raise ParseError(f"timestamp must be integral, got {value!r}", value)
        return Epoch(validate_epoch(int(value), value))

    if isinstance(value, str):
        numeric = _numeric_string(value)
        if numeric is not None and len(value.strip()) != _TEXT_ONLY_LENGTH:
            if numeric and numeric.adjusted() > _MAX_DIGITS:
                raise ParseError(f"timestamp {value!r} is outside the 64-bit range", value)
            return Epoch(validate_epoch(int(numeric), value))
        if reference is None:
            return Text(value)
        return Relative(value, reference)

    raise ParseError(f"cannot parse {type(value).__name__} as a timestamp", value)


def resolve(source: Source, *, timezone: "TimezoneResolver", clock: "Clock") -> int:
    """Resolve a classified value to epoch seconds.

    Raises:
        ParseError: If a date string cannot be resolved.
    """
    if isinstance(source, Epoch):
        return source.seconds
    if isinstance(source, Point):
        return source.point.epoch_seconds
    if isinstance(source, Relative):
        return resolve_text(source.text, source.anchor, timezone)
    return resolve_text(source.text, clock(), timezone)


def parse_epoch(
    value: Any,
    reference: Any = None,
    *,
    timezone: "TimezoneResolver | None" = None,
    clock: "Clock | None" = None,
) -> int:
    """Parse any supported value to epoch seconds.

    Args:
        value: The value to parse.
        reference: Anchor for relative date strings. May itself be any
            parseable value; None means "now" from the clock.
        timezone: Resolver for date strings. Defaults to the configured one.
        clock: Source of "now". Defaults to the configured one.

    Returns:
        Epoch seconds.

    Raises:
        ParseError: If the value cannot be parsed.
    """
    if timezone is None or clock is None:
        from timepoint.config import get_settings

        settings = get_settings()
        timezone = timezone if timezone is not None else settings.timezone
        clock = clock if clock is not None else settings.clock

    anchor = None
    if reference is not None:
        anchor = parse_epoch(reference, timezone=timezone, clock=clock)

    source = classify(value, anchor)
    logger.debug("Classified %r as %s", value, type(source).__name__)
    return resolve(source, timezone=timezone, clock=clock)


__all__ = [
    "Epoch",
    "Text",
    "Relative",
    "Point",
    "Source",
    "classify",
    "resolve",
    "parse_epoch",
    "is_timestamp",
    "resolve_text",
]
