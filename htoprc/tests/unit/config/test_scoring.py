"""Tests for the customization score."""

from __future__ import annotations

from htoprc.config.schema import HtopConfig, Meter, default_config
from htoprc.config.scoring import (
    COLUMN_COUNT_THRESHOLD,
    SCORING_RULES,
    explain_score,
    score_config,
)


class TestScoreConfig:
    """Tests for score_config."""

    def test_defaults_score_zero(self) -> None:
        """Test that the default configuration scores nothing."""
        assert score_config(default_config()) == 0

    def test_color_scheme(self) -> None:
        """Test the color scheme rule."""
        assert score_config(HtopConfig(color_scheme=5)) == 10

    def test_tree_view(self) -> None:
        """Test the tree view rule."""
        assert score_config(HtopConfig(tree_view=True)) == 5

    def test_meters(self) -> None:
        """Test the left and right meter rules."""
        config = HtopConfig(left_meters=[Meter(type="CPU")], right_meters=[Meter(type="Clock")])
        assert score_config(config) == 10

    def test_column_threshold_is_exclusive(self) -> None:
        """Test that exactly the threshold number of columns scores nothing."""
        at_threshold = HtopConfig(columns=list(range(COLUMN_COUNT_THRESHOLD)))
        above = HtopConfig(columns=list(range(COLUMN_COUNT_THRESHOLD + 1)))
        assert score_config(at_threshold) == 0
        assert score_config(above) == 3

    def test_header_layout(self) -> None:
        """Test the header layout rule."""
        assert score_config(HtopConfig(header_layout="two_67_33")) == 3

    def test_everything(self) -> None:
        """Test the maximum score."""
        config = HtopConfig(
            color_scheme=5,
            tree_view=True,
            left_meters=[Meter(type="CPU")],
            right_meters=[Meter(type="Clock")],
            columns=list(range(12)),
            header_layout="three_33_34_33",
        )
        assert score_config(config) == 31
        assert score_config(config) == sum(rule.points for rule in SCORING_RULES)


class TestExplainScore:
    """Tests for explain_score."""

    def test_components_in_rule_order(self) -> None:
        """Test that the breakdown lists the rules that fired."""
        components = explain_score(HtopConfig(header_layout="two_33_67", color_scheme=1))
        assert [c.name for c in components] == ["color_scheme", "header_layout"]
        assert [c.points for c in components] == [10, 3]

    def test_empty_for_defaults(self) -> None:
        """Test that defaults have no components."""
        assert explain_score(default_config()) == []
