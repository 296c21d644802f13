"""Shared pytest fixtures for htoprc tests.

Fixture files under ``fixtures/`` are real htoprc files as written by htop
2.x and 3.x.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from htoprc.logging.config import LOGGER_PREFIX

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# Fixture Files
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample htoprc files."""
    return FIXTURES_DIR


@pytest.fixture
def colorful_htoprc() -> Path:
    """htop 3.x file with a custom color scheme and two screens."""
    return FIXTURES_DIR / "htop-v3-colorful.htoprc"


@pytest.fixture
def tree_view_htoprc() -> Path:
    """htop 3.x file with tree view enabled."""
    return FIXTURES_DIR / "htop-v3-tree-view.htoprc"


@pytest.fixture
def minimal_htoprc() -> Path:
    """htop 3.x file close to the defaults."""
    return FIXTURES_DIR / "htop-v3-minimal.htoprc"


@pytest.fixture
def all_meters_htoprc() -> Path:
    """htop 3.x file with many meters and a custom header layout."""
    return FIXTURES_DIR / "htop-v3-all-meters.htoprc"


@pytest.fixture
def v2_htoprc() -> Path:
    """htop 2.x file using left_meters/right_meters."""
    return FIXTURES_DIR / "htop-v2-basic.htoprc"


# =============================================================================
# Inline Content
# =============================================================================


@pytest.fixture
def sample_text() -> str:
    """Small htop 3.x configuration covering every line category."""
    return "\n".join(
        [
            "# Beware! This file is rewritten by htop",
            "htop_version=3.2.2",
            "config_reader_min_version=3",
            "fields=0 48 17 18 38 39 40 2 46 47 49 1",
            "color_scheme=5",
            "tree_view=1",
            "header_layout=three_33_34_33",
            "column_meters_0=AllCPUs Memory Swap",
            "column_meter_modes_0=1 1 1",
            "column_meters_1=Tasks LoadAverage Uptime",
            "column_meter_modes_1=2 2 2",
            "screen:Main=PID USER PERCENT_CPU Command",
            ".sort_key=PERCENT_CPU",
            ".sort_direction=-1",
            "future_option=enabled",
        ]
    )


@pytest.fixture
def htoprc_file(tmp_path: Path, sample_text: str) -> Path:
    """``sample_text`` written to a temporary file."""
    path = tmp_path / "htoprc"
    path.write_text(sample_text + "\n", encoding="utf-8")
    return path


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def reset_htoprc_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger(LOGGER_PREFIX)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
