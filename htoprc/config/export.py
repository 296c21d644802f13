"""Structured dumps of parsed configurations (JSON and YAML).

Dumps use the camelCase field aliases, which is the shape web front ends
and APIs consume.
"""

from __future__ import annotations

import json
from typing import Any

import yaml  # type: ignore[import-untyped]

from htoprc.config.schema import HtopConfig, ParseResult
from htoprc.core.exceptions import ConfigurationError

OUTPUT_FORMATS = ("json", "yaml")


def config_to_dict(config: HtopConfig | ParseResult) -> dict[str, Any]:
    """Plain-data representation with camelCase keys and enum values."""
    data: dict[str, Any] = config.model_dump(mode="json", by_alias=True)
    return data


def config_to_json(config: HtopConfig | ParseResult, indent: int | None = 2) -> str:
    """Dump a configuration or parse result as JSON."""
    return json.dumps(config_to_dict(config), indent=indent)


def config_to_yaml(config: HtopConfig | ParseResult) -> str:
    """Dump a configuration or parse result as YAML, keeping field order."""
    result: str = yaml.safe_dump(
        config_to_dict(config), default_flow_style=False, sort_keys=False
    )
    return result


def dump(config: HtopConfig | ParseResult, output_format: str = "json") -> str:
    """Dump in the named format.

    Raises
    ------
    ConfigurationError
        If ``output_format`` is not one of ``OUTPUT_FORMATS``.
    """
    fmt = output_format.lower()
    if fmt == "json":
        return config_to_json(config)
    if fmt == "yaml":
        return config_to_yaml(config)
    raise ConfigurationError(
        f"Unknown output format '{output_format}'. Valid formats: {', '.join(OUTPUT_FORMATS)}",
        setting="output_format",
        value=output_format,
    )
