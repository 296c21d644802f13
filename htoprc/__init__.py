"""htoprc-engine: parser, serializer and scorer for htop configuration files.

Parses the line-oriented ``key=value`` htoprc format into a typed model,
writes it back out with controllable fidelity, and computes a deterministic
customization score.
"""

from __future__ import annotations

__version__ = "0.1.0"

from htoprc.config.parser import parse
from htoprc.config.serializer import serialize

__all__ = ["__version__", "parse", "serialize"]
