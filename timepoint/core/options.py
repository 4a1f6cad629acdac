"""Formatting options and their resolution.

Options are resolved in layers, later layers overriding earlier ones
key by key:

    built-in defaults -> process-wide configuration -> instance -> call

The first two layers are merged once by ``timepoint.config``; instances
capture the result at construction, and per-call overrides only ever
produce a read-only view.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Union

from timepoint.errors import InvalidArgument

DATE_TOKEN = "{date}"
TIME_TOKEN = "{time}"


@dataclass(frozen=True)
class FormatOptions:
    """Named templates used when formatting without an explicit pattern.

    Attributes:
        date: strftime pattern for the date part.
        time: strftime pattern for the time part.
        datetime: Template combining the two through ``{date}`` and ``{time}``.

    Examples:
        >>> FormatOptions().template()
        '%d.%m.%Y %H:%M'

        >>> FormatOptions(datetime="{time} on {date}").template()
        '%H:%M on %d.%m.%Y'
    """

    date: str = "%d.%m.%Y"
    time: str = "%H:%M"
    datetime: str = "{date} {time}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """Create FormatOptions from a configuration mapping.

        Missing keys take the built-in defaults.

        Raises:
            InvalidArgument: If ``data`` is not a mapping or has bad keys/values.
        """
        return merge_options(cls(), data)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def template(self) -> str:
        """Expand ``{date}`` and ``{time}`` inside the datetime template."""
        return self.datetime.replace(DATE_TOKEN, self.date).replace(TIME_TOKEN, self.time)


OptionsLike = Union[FormatOptions, Mapping[str, Any]]

_OPTION_KEYS = frozenset(f.name for f in fields(FormatOptions))


def _overrides_to_dict(overrides: OptionsLike) -> dict[str, str]:
    if isinstance(overrides, FormatOptions):
        return overrides.to_dict()

    if not isinstance(overrides, Mapping):
        raise InvalidArgument(
            f"options must be a mapping, got {type(overrides).__name__}"
        )

    unknown = set(overrides) - _OPTION_KEYS
    if unknown:
        raise InvalidArgument(
            f"unknown option keys: {', '.join(sorted(map(str, unknown)))}; "
            f"expected any of {', '.join(sorted(_OPTION_KEYS))}"
        )

    for key, value in overrides.items():
        if not isinstance(value, str):
            raise InvalidArgument(
                f"option {key!r} must be a string, got {type(value).__name__}"
            )

    return dict(overrides)


def merge_options(base: FormatOptions, overrides: OptionsLike | None = None) -> FormatOptions:
    """Return ``base`` with the keys in ``overrides`` replaced.

    Raises:
        InvalidArgument: If overrides is not a mapping or FormatOptions,
            has unknown keys, or has non-string values.

    Examples:
        >>> merge_options(FormatOptions(), {"date": "%Y-%m-%d"}).date
        '%Y-%m-%d'
    """
    if overrides is None:
        return base
    return replace(base, **_overrides_to_dict(overrides))


def resolve_options(
    instance_options: FormatOptions | None,
    overrides: OptionsLike | None = None,
) -> FormatOptions:
    """Return the options in effect for one formatting call.

    When ``instance_options`` is None the process-wide defaults (built-in
    merged with configuration) are used as the base. The result is a
    view; nothing is persisted.
    """
    if instance_options is None:
        from timepoint.config import get_settings

        instance_options = get_settings().options
    return merge_options(instance_options, overrides)


__all__ = [
    "FormatOptions",
    "OptionsLike",
    "merge_options",
    "resolve_options",
]
