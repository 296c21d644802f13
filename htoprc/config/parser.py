"""htoprc parser.

``parse`` turns htoprc text into a ``ParseResult``. It never raises:
malformed lines are dropped or normalized, and keys it does not recognize
are kept verbatim in ``HtopConfig.unknown_options`` with a warning, so
files written by newer htop releases survive a parse/serialize round trip.
"""

from __future__ import annotations

from htoprc.config.meters import MeterColumns
from htoprc.config.options import OptionKind, OptionSpec, classify
from htoprc.config.scanner import ScannedLine, scan_lines
from htoprc.config.schema import HtopConfig, ParseResult, ParseWarning, default_config
from htoprc.config.screens import NO_SCREEN, ScreenContext, apply_screen_option, open_screen
from htoprc.config.scoring import score_config
from htoprc.config.version import detect_version
from htoprc.core.types import WarningKind
from htoprc.logging import get_logger

logger = get_logger(__name__)

_METER_NAME_KINDS = (OptionKind.METER_NAMES, OptionKind.LEGACY_METER_NAMES)
_METER_MODE_KINDS = (OptionKind.METER_MODES, OptionKind.LEGACY_METER_MODES)


def parse(text: str) -> ParseResult:
    """Parse htoprc text.

    Parameters
    ----------
    text
        Raw file content. ``\\n`` and ``\\r\\n`` line endings are accepted.

    Returns
    -------
    ParseResult
        A freshly built configuration with its warnings, detected format
        version and customization score. ``errors`` is always empty.

    Examples
    --------
    >>> result = parse("color_scheme=5\\ntree_view=1")
    >>> result.config.color_scheme, result.config.tree_view, result.score
    (5, True, 15)
    """
    parser = _HtoprcParser()
    for line in scan_lines(text):
        parser.feed(line)
    config, warnings = parser.finish()

    version = detect_version(config.config_reader_min_version)
    score = score_config(config)
    logger.debug(
        "Parsed htoprc",
        extra={
            "options": parser.line_count,
            "unknown": len(config.unknown_options),
            "screens": len(config.screens),
            "version": version.value,
            "score": score,
        },
    )
    return ParseResult(
        config=config,
        warnings=warnings,
        errors=[],
        version=version,
        score=score,
    )


class _HtoprcParser:
    """State of a single scan: the configuration being filled, the screen
    context and the meter buffers."""

    def __init__(self) -> None:
        self.config: HtopConfig = default_config()
        self.warnings: list[ParseWarning] = []
        self.screen: ScreenContext = NO_SCREEN
        self.meter_columns = MeterColumns()
        self.line_count = 0

    def feed(self, line: ScannedLine) -> None:
        """Apply one scanned line."""
        self.line_count += 1
        match = classify(line.key)
        kind = match.kind

        if kind is OptionKind.SCALAR and match.spec is not None:
            self._set_scalar(match.spec, line)
        elif kind is OptionKind.SCREEN:
            self.screen = open_screen(self.config.screens, match.name or "", line.value)
        elif kind is OptionKind.SCREEN_OPTION:
            apply_screen_option(
                self.screen, self.config.screens, match.name or "", line.value, line.lineno
            )
        elif kind in _METER_NAME_KINDS and match.column is not None:
            self.meter_columns.set_names(match.column, line.value)
        elif kind in _METER_MODE_KINDS and match.column is not None:
            self.meter_columns.set_modes(match.column, line.value)
        else:
            self._keep_unknown(line)

    def finish(self) -> tuple[HtopConfig, list[ParseWarning]]:
        """Assemble meters and hand over the finished configuration."""
        left, right = self.meter_columns.assemble()
        self.config.left_meters = left
        self.config.right_meters = right
        self.config.extra_meter_columns = self.meter_columns.extra_columns()
        return self.config, self.warnings

    def _set_scalar(self, spec: OptionSpec, line: ScannedLine) -> None:
        value = spec.coerce(line.value)
        if value is None and not spec.nullable:
            logger.debug(
                "Ignoring non-numeric value",
                extra={"line": line.lineno, "option": spec.key, "value": line.value},
            )
            return
        setattr(self.config, spec.field, value)

    def _keep_unknown(self, line: ScannedLine) -> None:
        unknown = self.config.unknown_options
        if line.key not in unknown:
            self.warnings.append(
                ParseWarning(
                    line=line.lineno,
                    message=f"Unknown option: {line.key}",
                    kind=WarningKind.UNKNOWN_OPTION,
                )
            )
        unknown[line.key] = line.value
