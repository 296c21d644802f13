"""htoprc serializer.

``serialize`` writes an ``HtopConfig`` back to htoprc text. Scalar options
are emitted in catalog order (see ``htoprc.config.options``), followed by
header meter blocks, screen blocks and finally the preserved unknown
options.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias, Union

from pydantic import ValidationError

from htoprc.config.coercers import format_bool, format_sort_direction
from htoprc.config.meters import meter_values
from htoprc.config.options import SCALAR_OPTIONS, OptionGroup, OptionSpec
from htoprc.config.schema import (
    HtopConfig,
    Meter,
    ScreenDefinition,
    SerializeOptions,
    field_default,
)
from htoprc.logging import get_logger

logger = get_logger(__name__)

SerializeOptionsLike: TypeAlias = Union[SerializeOptions, Mapping[str, Any], None]


def resolve_options(options: SerializeOptionsLike = None) -> SerializeOptions:
    """Normalize ``serialize`` options.

    Accepts a ``SerializeOptions``, a mapping using snake_case or camelCase
    keys (``only_non_defaults`` or ``onlyNonDefaults``), or None. A mapping
    that does not validate is logged and replaced by the defaults.
    """
    if options is None:
        return SerializeOptions()
    if isinstance(options, SerializeOptions):
        return options
    try:
        return SerializeOptions.model_validate(dict(options))
    except (ValidationError, TypeError, ValueError) as e:
        logger.warning("Invalid serialize options, using defaults: %s", e)
        return SerializeOptions()


def serialize(config: HtopConfig, options: SerializeOptionsLike = None) -> str:
    """Serialize a configuration to htoprc text.

    Parameters
    ----------
    config
        Configuration to write.
    options
        ``include_version`` (default True), ``only_non_defaults`` (default
        False) and ``include_unknown`` (default True); see
        ``resolve_options`` for accepted forms.

    Returns
    -------
    str
        Lines joined with ``\\n``, without a trailing newline.

    Examples
    --------
    >>> from htoprc.config.schema import HtopConfig
    >>> serialize(HtopConfig(color_scheme=5), {"onlyNonDefaults": True})
    'color_scheme=5'
    """
    opts = resolve_options(options)
    lines: list[str] = []

    for spec in SCALAR_OPTIONS.values():
        line = _scalar_line(config, spec, opts)
        if line is not None:
            lines.append(line)

    lines.extend(_meter_lines(0, config.left_meters))
    lines.extend(_meter_lines(1, config.right_meters))
    lines.extend(f"{key}={value}" for key, value in config.extra_meter_columns.items())

    for screen in config.screens:
        lines.extend(serialize_screen(screen))

    if opts.include_unknown:
        lines.extend(f"{key}={value}" for key, value in config.unknown_options.items())

    return "\n".join(lines)


def _scalar_line(
    config: HtopConfig, spec: OptionSpec, opts: SerializeOptions
) -> str | None:
    value = getattr(config, spec.field)

    if spec.group is OptionGroup.VERSION:
        if not opts.include_version or value is None:
            return None
    elif spec.group is OptionGroup.PROCESS_LIST:
        if not value:
            return None
    elif opts.only_non_defaults and value == field_default(spec.field):
        return None

    return f"{spec.key}={spec.format(value)}"


def _meter_lines(column: int, meters: list[Meter]) -> list[str]:
    if not meters:
        return []
    names, modes = meter_values(meters)
    return [f"column_meters_{column}={names}", f"column_meter_modes_{column}={modes}"]


def serialize_screen(screen: ScreenDefinition) -> list[str]:
    """Lines for one screen block; unset screen options are omitted."""
    lines = [f"screen:{screen.name}={' '.join(screen.columns)}"]
    if screen.sort_key is not None:
        lines.append(f".sort_key={screen.sort_key}")
    if screen.sort_direction is not None:
        lines.append(f".sort_direction={format_sort_direction(screen.sort_direction)}")
    if screen.tree_view is not None:
        lines.append(f".tree_view={format_bool(screen.tree_view)}")
    return lines
