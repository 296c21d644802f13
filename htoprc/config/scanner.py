"""Line scanner for htoprc text.

Splits raw text into ``(line number, key, value)`` entries. Blank lines,
``#`` comments and lines without ``=`` produce nothing.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from htoprc.core.types import OptionKey, RawValue

COMMENT_PREFIX = "#"


class ScannedLine(NamedTuple):
    """A ``key=value`` line.

    ``lineno`` is 1-based and counts every physical line of the input,
    including the skipped ones.
    """

    lineno: int
    key: OptionKey
    value: RawValue


def split_line(line: str) -> tuple[str, str] | None:
    """Split a stripped line at its first ``=``.

    Returns None when the line has no ``=``. The value keeps any further
    ``=`` characters verbatim.

    >>> split_line("fields=0 48 17")
    ('fields', '0 48 17')
    >>> split_line("x=a=b")
    ('x', 'a=b')
    >>> split_line("no equals sign") is None
    True
    """
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def scan_lines(text: str) -> Iterator[ScannedLine]:
    """Yield the ``key=value`` lines of ``text``.

    Lines are split on ``\\n`` and stripped, which also removes the ``\\r``
    of CRLF input.
    """
    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        parts = split_line(line)
        if parts is None:
            continue
        yield ScannedLine(lineno, *parts)
