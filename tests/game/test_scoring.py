"""Tests for attempt points, time bonus and round totals."""

import pytest

from skema_core.game.evaluator import EvaluationResult
from skema_core.game.scoring import (
    POINTS_VICTORY,
    attempt_points,
    score_round,
    time_bonus,
    victory_points,
)


def _fb(exact: int, present: int) -> EvaluationResult:
    return EvaluationResult(exact=exact, present=present)


class TestAttemptPoints:
    def test_exact_and_present(self):
        assert attempt_points(_fb(2, 1)) == 2 * 60 + 25

    def test_zero(self):
        assert attempt_points(_fb(0, 0)) == 0


class TestTimeBonus:
    @pytest.mark.parametrize(
        "seconds, bonus",
        [
            (180, 700),
            (120.5, 700),
            (120, 500),
            (60, 500),
            (59.9, 300),
            (30, 300),
            (29.99, 100),
            (0, 100),
        ],
    )
    def test_bands(self, seconds: float, bonus: int):
        assert time_bonus(seconds) == bonus

    def test_victory_points(self):
        assert victory_points(100) == POINTS_VICTORY + 500


class TestScoreRound:
    def test_loss_has_no_victory_award(self):
        history = [_fb(1, 1), _fb(2, 0)]
        assert score_round(history, 50) == 85 + 120

    def test_win_adds_award_and_bonus(self):
        history = [_fb(1, 2), _fb(4, 0)]
        assert score_round(history, 130) == (60 + 50) + 240 + 1000 + 700

    def test_empty(self):
        assert score_round([], 180) == 0
