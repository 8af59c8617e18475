"""Gameplay: secret generation, guess evaluation, scoring and bots."""

from skema_core.game.bot import (
    BotGameState,
    bot_think_time,
    generate_bot_guess,
    simulate_bot_game,
)
from skema_core.game.evaluator import EvaluationResult, evaluate_guess
from skema_core.game.scoring import (
    attempt_points,
    score_round,
    time_bonus,
    victory_points,
)
from skema_core.game.secret import generate_secret

__all__ = [
    "BotGameState",
    "EvaluationResult",
    "attempt_points",
    "bot_think_time",
    "evaluate_guess",
    "generate_bot_guess",
    "generate_secret",
    "score_round",
    "simulate_bot_game",
    "time_bonus",
    "victory_points",
]
