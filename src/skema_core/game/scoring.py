"""Round scoring: per-attempt feedback points and the victory bonus."""

from __future__ import annotations

from skema_core.game.evaluator import EvaluationResult

POINTS_EXACT = 60
POINTS_PRESENT = 25
POINTS_VICTORY = 1000

# (minimum seconds remaining, bonus), checked in order
_TIME_BONUS_BANDS: tuple[tuple[float, int], ...] = (
    (120.0, 700),
    (60.0, 500),
    (30.0, 300),
)
_TIME_BONUS_FLOOR = 100


def attempt_points(feedback: EvaluationResult) -> int:
    """Points earned by a single evaluated guess."""
    return feedback.exact * POINTS_EXACT + feedback.present * POINTS_PRESENT


def time_bonus(seconds_remaining: float) -> int:
    """Bonus for finishing with *seconds_remaining* on the clock.

    More than 120s earns 700; the 60s and 30s thresholds are inclusive.
    """
    if seconds_remaining > _TIME_BONUS_BANDS[0][0]:
        return _TIME_BONUS_BANDS[0][1]
    for threshold, bonus in _TIME_BONUS_BANDS[1:]:
        if seconds_remaining >= threshold:
            return bonus
    return _TIME_BONUS_FLOOR


def victory_points(seconds_remaining: float) -> int:
    """Flat victory award plus the time bonus."""
    return POINTS_VICTORY + time_bonus(seconds_remaining)


def score_round(
    feedback_history: list[EvaluationResult],
    seconds_remaining: float,
) -> int:
    """Total score of a round from its feedback history.

    The victory award is added only if the last feedback is a victory.
    """
    score = sum(attempt_points(fb) for fb in feedback_history)
    if feedback_history and feedback_history[-1].is_victory:
        score += victory_points(seconds_remaining)
    return score
