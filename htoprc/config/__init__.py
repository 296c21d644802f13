"""htoprc format engine.

This module provides the pydantic configuration model, the htoprc parser
and serializer, the customization scorer and the file/dump helpers.
"""

from htoprc.config.export import config_to_dict, config_to_json, config_to_yaml, dump
from htoprc.config.files import load_htoprc, read_htoprc, write_htoprc
from htoprc.config.options import (
    METER_TYPES,
    SCALAR_OPTIONS,
    OptionKind,
    OptionMatch,
    OptionSpec,
    classify,
    is_known_option,
)
from htoprc.config.parser import parse
from htoprc.config.schema import (
    HtopConfig,
    Meter,
    ParseError,
    ParseResult,
    ParseWarning,
    ScreenDefinition,
    SerializeOptions,
    default_config,
)
from htoprc.config.scoring import SCORING_RULES, explain_score, score_config
from htoprc.config.serializer import serialize
from htoprc.config.version import check_deprecated_options, detect_version

__all__ = [
    # Schema classes
    "HtopConfig",
    "Meter",
    "ScreenDefinition",
    "ParseWarning",
    "ParseError",
    "ParseResult",
    "SerializeOptions",
    "default_config",
    # Parse / serialize
    "parse",
    "serialize",
    # Classifier and catalog
    "classify",
    "is_known_option",
    "OptionKind",
    "OptionMatch",
    "OptionSpec",
    "SCALAR_OPTIONS",
    "METER_TYPES",
    # Version
    "detect_version",
    "check_deprecated_options",
    # Scoring
    "score_config",
    "explain_score",
    "SCORING_RULES",
    # Files and dumps
    "read_htoprc",
    "load_htoprc",
    "write_htoprc",
    "config_to_dict",
    "config_to_json",
    "config_to_yaml",
    "dump",
]
