"""Customization score for parsed configurations.

The score is a sum of independent rules, each awarding fixed points when a
configuration departs from the defaults in a visible way. Hosting
applications use it only as an opaque ranking key.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from htoprc.config.schema import HtopConfig, field_default

# More process-list columns than this counts as customized
COLUMN_COUNT_THRESHOLD = 8


@dataclass(frozen=True)
class ScoringRule:
    """A single additive scoring rule.

    Attributes
    ----------
    name : str
        Short rule identifier.
    description : str
        What the rule rewards.
    points : int
        Points awarded when the rule applies.
    applies : Callable[[HtopConfig], bool]
        Predicate over the finished configuration.
    """

    name: str
    description: str
    points: int
    applies: Callable[[HtopConfig], bool]


@dataclass(frozen=True)
class ScoreComponent:
    """A rule that fired, with the points it awarded."""

    name: str
    description: str
    points: int


SCORING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(
        "color_scheme",
        "Non-default color scheme",
        10,
        lambda c: c.color_scheme != field_default("color_scheme"),
    ),
    ScoringRule(
        "tree_view",
        "Tree view enabled",
        5,
        lambda c: c.tree_view,
    ),
    ScoringRule(
        "left_meters",
        "Left header meters configured",
        5,
        lambda c: len(c.left_meters) > 0,
    ),
    ScoringRule(
        "right_meters",
        "Right header meters configured",
        5,
        lambda c: len(c.right_meters) > 0,
    ),
    ScoringRule(
        "columns",
        f"More than {COLUMN_COUNT_THRESHOLD} process columns",
        3,
        lambda c: len(c.columns) > COLUMN_COUNT_THRESHOLD,
    ),
    ScoringRule(
        "header_layout",
        "Non-default header layout",
        3,
        lambda c: c.header_layout != field_default("header_layout"),
    ),
)


def explain_score(config: HtopConfig) -> list[ScoreComponent]:
    """Return the rules that apply to ``config``, in rule order."""
    return [
        ScoreComponent(rule.name, rule.description, rule.points)
        for rule in SCORING_RULES
        if rule.applies(config)
    ]


def score_config(config: HtopConfig) -> int:
    """Compute the customization score of a configuration.

    Examples
    --------
    >>> from htoprc.config.schema import default_config
    >>> score_config(default_config())
    0
    """
    return sum(component.points for component in explain_score(config))
