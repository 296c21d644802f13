"""Reading and writing htoprc files.

The engine itself works on strings; these helpers are the thin file layer
used by the CLI and by applications that keep htoprc files on disk.
"""

from __future__ import annotations

from pathlib import Path

from htoprc.config.parser import parse
from htoprc.config.schema import ParseResult
from htoprc.core.exceptions import (
    HtoprcDecodeError,
    HtoprcFileError,
    HtoprcFileNotFoundError,
)
from htoprc.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "utf-8"


def read_htoprc(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the text of an htoprc file.

    Parameters
    ----------
    path
        File to read.
    encoding
        Text encoding.

    Returns
    -------
    str
        File content, line endings untouched.

    Raises
    ------
    HtoprcFileNotFoundError
        If the file does not exist.
    HtoprcDecodeError
        If the content is not valid text in ``encoding``.
    HtoprcFileError
        For any other OS-level read failure.
    """
    p = Path(path)
    try:
        # newline="" keeps \r\n so the parser sees the file exactly
        with open(p, encoding=encoding, newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise HtoprcFileNotFoundError(f"htoprc file not found: {p}", path=p) from e
    except UnicodeDecodeError as e:
        raise HtoprcDecodeError(
            f"htoprc file is not valid {encoding} text", path=p, encoding=encoding
        ) from e
    except OSError as e:
        raise HtoprcFileError(f"Cannot read htoprc file: {e}", path=p) from e

    logger.debug("Read htoprc file", extra={"path": str(p), "chars": len(text)})
    return text


def load_htoprc(path: str | Path, encoding: str = DEFAULT_ENCODING) -> ParseResult:
    """Read and parse an htoprc file.

    Raises the same exceptions as ``read_htoprc``; parsing itself never
    fails.
    """
    return parse(read_htoprc(path, encoding=encoding))


def write_htoprc(
    text: str,
    path: str | Path,
    encoding: str = DEFAULT_ENCODING,
    trailing_newline: bool = True,
) -> Path:
    """Write htoprc text to a file.

    Parameters
    ----------
    text
        Serialized configuration.
    path
        Destination file. Parent directories must exist.
    encoding
        Text encoding.
    trailing_newline
        Append a final newline if ``text`` does not end with one.

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    HtoprcFileError
        If the file cannot be written.
    """
    p = Path(path)
    if trailing_newline and text and not text.endswith("\n"):
        text += "\n"
    try:
        with open(p, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except OSError as e:
        raise HtoprcFileError(f"Cannot write htoprc file: {e}", path=p) from e

    logger.debug("Wrote htoprc file", extra={"path": str(p), "chars": len(text)})
    return p
