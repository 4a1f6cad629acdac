"""Process-wide settings.

The host application supplies its configuration once, at startup, through
``configure()``. The result is an immutable ``Settings`` object; new
TimePoint instances capture its options and timezone at construction.

Examples:
    >>> from timepoint import config
    >>> from timepoint.units.timezone import Timezone
    >>> settings = config.configure({"date": "%Y-%m-%d"}, timezone=Timezone.utc())
    >>> settings.options.date
    '%Y-%m-%d'
    >>> config.reset()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from timepoint.clock import Clock, system_clock
from timepoint.core.options import FormatOptions, merge_options
from timepoint.errors import InvalidArgument
from timepoint.units.timezone import LocalTimezone, TimezoneResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Resolved process-wide settings.

    Attributes:
        options: Built-in formatting defaults merged with host configuration.
        timezone: Resolver for local calendar semantics.
        clock: Source of the current time in epoch seconds.
    """

    options: FormatOptions = field(default_factory=FormatOptions)
    timezone: TimezoneResolver = field(default_factory=LocalTimezone)
    clock: Clock = system_clock


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, building the defaults on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(
    options: Mapping[str, Any] | FormatOptions | None = None,
    *,
    timezone: TimezoneResolver | None = None,
    clock: Clock | None = None,
) -> Settings:
    """Install process-wide settings.

    ``options`` is merged over the built-in defaults (not over a previous
    configuration). Omitted ``timezone``/``clock`` keep their current values.

    Raises:
        InvalidArgument: If options is malformed, the timezone does not
            implement the resolver protocol, or the clock is not callable.
    """
    global _settings

    if timezone is not None and not isinstance(timezone, TimezoneResolver):
        raise InvalidArgument(
            f"timezone must implement TimezoneResolver, got {type(timezone).__name__}"
        )
    if clock is not None and not callable(clock):
        raise InvalidArgument(f"clock must be callable, got {type(clock).__name__}")

    current = get_settings()
    updated = replace(
        current,
        options=merge_options(FormatOptions(), options),
        timezone=timezone if timezone is not None else current.timezone,
        clock=clock if clock is not None else current.clock,
    )
    _settings = updated
    logger.info(
        "Configured timepoint: options=%s timezone=%r", updated.options.to_dict(), updated.timezone
    )
    return updated


def reset() -> None:
    """Drop any configuration; the next get_settings() rebuilds the defaults."""
    global _settings
    _settings = None
    logger.info("Reset timepoint settings to built-in defaults")


__all__ = [
    "Settings",
    "configure",
    "get_settings",
    "reset",
]
