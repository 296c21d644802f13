"""Screen tracking while scanning htop 3.x screen blocks.

A ``screen:<name>=<columns>`` line opens a screen; the dot-prefixed lines
that follow (``.sort_key``, ``.sort_direction``, ``.tree_view``) belong to
the most recently opened screen. Screens are flat: a new ``screen:`` line
simply becomes the current one.

The scan loop threads an immutable ``ScreenContext`` through each line:

    NO_SCREEN --screen:--> IN_SCREEN(0) --screen:--> IN_SCREEN(1) ...

Scoped lines seen in ``NO_SCREEN`` are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from htoprc.config.coercers import coerce_bool, coerce_sort_direction, split_tokens
from htoprc.config.schema import ScreenDefinition
from htoprc.logging import get_logger

logger = get_logger(__name__)


class ScreenState(Enum):
    NO_SCREEN = "no_screen"
    IN_SCREEN = "in_screen"


@dataclass(frozen=True)
class ScreenContext:
    """Current position of the scan relative to screen blocks.

    Parameters
    ----------
    state
        Whether a screen has been opened.
    index
        Index into ``HtopConfig.screens`` of the open screen.
    """

    state: ScreenState = ScreenState.NO_SCREEN
    index: int | None = None

    @classmethod
    def in_screen(cls, index: int) -> "ScreenContext":
        return cls(ScreenState.IN_SCREEN, index)

    @property
    def is_open(self) -> bool:
        return self.state is ScreenState.IN_SCREEN


NO_SCREEN = ScreenContext()


def open_screen(
    screens: list[ScreenDefinition], name: str, value: str
) -> ScreenContext:
    """Append a new screen and return the context pointing at it."""
    screens.append(ScreenDefinition(name=name, columns=split_tokens(value)))
    return ScreenContext.in_screen(len(screens) - 1)


def apply_screen_option(
    context: ScreenContext,
    screens: list[ScreenDefinition],
    option: str,
    value: str,
    lineno: int = 0,
) -> bool:
    """Apply a scoped ``.<option>=<value>`` line to the open screen.

    Parameters
    ----------
    context
        Current screen context.
    screens
        The configuration's screen list.
    option
        Option name without the leading dot.
    value
        Raw value.
    lineno
        Source line, for logging only.

    Returns
    -------
    bool
        True if a screen was modified. Orphan lines (no open screen) and
        unrecognized options return False.
    """
    if not context.is_open or context.index is None:
        logger.debug(
            "Dropping scoped option outside a screen",
            extra={"line": lineno, "option": option},
        )
        return False

    screen = screens[context.index]
    if option == "sort_key":
        screen.sort_key = value
    elif option == "sort_direction":
        screen.sort_direction = coerce_sort_direction(value)
    elif option == "tree_view":
        screen.tree_view = coerce_bool(value)
    else:
        logger.debug(
            "Ignoring unrecognized screen option",
            extra={"line": lineno, "option": option, "screen": screen.name},
        )
        return False
    return True
