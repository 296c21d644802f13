"""htoprc format version detection and deprecation checks.

Only ``config_reader_min_version`` decides the format generation; the
free-form ``htop_version`` string is informational.
"""

from __future__ import annotations

from htoprc.config.options import OptionKind, classify
from htoprc.config.scanner import scan_lines
from htoprc.config.schema import ParseWarning
from htoprc.core.types import FormatVersion, WarningKind

# Reader versions at which each format generation starts
V2_READER_VERSION = 2
V3_READER_VERSION = 3


def detect_version(config_reader_min_version: int | None) -> FormatVersion:
    """Classify the file format from ``config_reader_min_version``.

    Examples
    --------
    >>> detect_version(3)
    <FormatVersion.V3: 'v3'>
    >>> detect_version(2)
    <FormatVersion.V2: 'v2'>
    >>> detect_version(None)
    <FormatVersion.UNKNOWN: 'unknown'>
    """
    if config_reader_min_version is None:
        return FormatVersion.UNKNOWN
    if config_reader_min_version >= V3_READER_VERSION:
        return FormatVersion.V3
    if config_reader_min_version == V2_READER_VERSION:
        return FormatVersion.V2
    return FormatVersion.UNKNOWN


def check_deprecated_options(text: str) -> list[ParseWarning]:
    """Report htop 2.x options that have a 3.x replacement.

    This is a lint separate from ``parse``: ``parse`` accepts the legacy
    ``left_meters``/``right_meters`` keys silently.

    Parameters
    ----------
    text
        Raw htoprc text.

    Returns
    -------
    list[ParseWarning]
        One ``deprecated`` warning per legacy line.
    """
    found: list[ParseWarning] = []
    for line in scan_lines(text):
        match = classify(line.key)
        if match.kind not in (
            OptionKind.LEGACY_METER_NAMES,
            OptionKind.LEGACY_METER_MODES,
        ):
            continue
        if match.kind is OptionKind.LEGACY_METER_MODES:
            replacement = f"column_meter_modes_{match.column}"
        else:
            replacement = f"column_meters_{match.column}"
        found.append(
            ParseWarning(
                line=line.lineno,
                message=f"{line.key} is an htop 2.x option. Use {replacement} instead.",
                kind=WarningKind.DEPRECATED,
            )
        )
    return found
