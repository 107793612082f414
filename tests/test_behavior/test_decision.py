"""Tests for the two-option decision scorer."""

from __future__ import annotations

import pytest

from driftfield.behavior import DecisionOption, Gut, evaluate_decision, score_option


class TestScoreOption:
    def test_everything_open(self) -> None:
        option = DecisionOption(is_novel=True, meets_new=True, reversible=True, opens=True, gut=Gut.EXCITED)
        result = score_option(option)
        assert result.score == 25 + 20 + 15 + 20 + 15
        assert result.notes == (
            "Novel: expands possibility space",
            "New people = new weak ties",
            "Reversible: low risk",
            "Opens future paths",
            "Intuition says yes",
        )

    def test_defaults(self) -> None:
        result = score_option(DecisionOption())
        assert result.score == 5 + 15
        assert result.notes[-1] == "No intuition signal"

    def test_closing_with_dread(self) -> None:
        option = DecisionOption(reversible=False, closes=True, gut="dread")
        result = score_option(option)
        assert result.score == 5 + 5 - 10 - 5
        assert "Closes paths" in result.notes
        assert "Dread signal" in result.notes

    @pytest.mark.parametrize(
        ("gut", "points"),
        [(Gut.EXCITED, 15), (Gut.ANXIOUS, 10), (Gut.NEUTRAL, 0), (Gut.DREAD, -5)],
    )
    def test_gut_points(self, gut: Gut, points: int) -> None:
        assert score_option(DecisionOption(gut=gut)).score == 20 + points

    def test_crowd(self) -> None:
        assert score_option(DecisionOption(crowd=True)).score == 20 + 10

    def test_unknown_gut_rejected(self) -> None:
        with pytest.raises(ValueError):
            DecisionOption(gut="thrilled")  # type: ignore[arg-type]


class TestEvaluateDecision:
    def test_open_option_beats_closed(self) -> None:
        a = DecisionOption(is_novel=True, meets_new=True, opens=True, gut=Gut.EXCITED)
        b = DecisionOption(reversible=False)
        result = evaluate_decision(a, b)
        assert result.a.score == 95
        assert result.b.score == 10
        assert result.diff == 85
        assert result.verdict == "Option A: +85 serendipity potential."

    def test_near_equal(self) -> None:
        result = evaluate_decision(DecisionOption(crowd=True), DecisionOption(gut=Gut.EXCITED))
        assert result.diff == -5
        assert result.verdict == "Near-equal. Flip a coin: both expand surface area."

    def test_margin_of_ten_is_decisive(self) -> None:
        result = evaluate_decision(DecisionOption(crowd=True), DecisionOption())
        assert result.diff == 10
        assert result.verdict.startswith("Option A")

    def test_b_wins_with_label(self) -> None:
        result = evaluate_decision(
            DecisionOption(label="stay home"),
            DecisionOption(label=" night market ", is_novel=True, meets_new=True),
        )
        assert result.diff == -40
        assert result.verdict == "Option B (night market): +40 serendipity potential."

    def test_malformed_options_neutral(self) -> None:
        result = evaluate_decision(None, DecisionOption())  # type: ignore[arg-type]
        assert result.a.score == 0
        assert result.b.score == 0
        assert result.diff == 0
        assert result.verdict == "Unable to evaluate options."
