"""IQ80 bot opponent for arena fields.

The bot is deliberately mediocre: it starts with a random guess, ignores
feedback 30% of the time, and otherwise keeps a prefix of its previous
guess sized by the number of matches it got.  Every random draw goes
through the caller's RNG, so a :class:`SeededRng` reproduces a whole
bot game exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from skema_core.core.rng import seeded_shuffle
from skema_core.core.symbols import CODE_LENGTH, MAX_ATTEMPTS, SYMBOL_IDS
from skema_core.game.evaluator import EvaluationResult, evaluate_guess
from skema_core.game.scoring import attempt_points, victory_points

logger = logging.getLogger(__name__)

BOT_IQ = 80
GAME_DURATION_SECONDS = 180.0
IGNORE_FEEDBACK_CHANCE = 0.3

_BASE_THINK_MS = 3000
_THINK_VARIANCE_MS = 5000
_IQ_PENALTY_MS = 2000


class FloatSource(Protocol):
    def random_float(self) -> float: ...


@dataclass
class BotGameState:
    """Mutable record of one simulated bot game.

    Attributes
    ----------
    attempts:
        Guesses submitted so far.
    guess_history:
        Every guess, in order.
    feedback_history:
        Evaluation of each guess, aligned with *guess_history*.
    status:
        ``"playing"``, ``"won"`` or ``"lost"``.
    score:
        Accumulated score.
    finish_time:
        Seconds left on the clock when the game ended (None while playing).
    """

    attempts: int = 0
    guess_history: list[list[str]] = field(default_factory=list)
    feedback_history: list[EvaluationResult] = field(default_factory=list)
    status: str = "playing"
    score: int = 0
    finish_time: float | None = None


def bot_think_time(iq: int, rng: FloatSource) -> float:
    """Milliseconds the bot spends on one guess (3-8s plus an IQ penalty)."""
    iq_factor = (100 - iq) / 100
    return _BASE_THINK_MS + rng.random_float() * _THINK_VARIANCE_MS + iq_factor * _IQ_PENALTY_MS


def _random_guess(symbols: Sequence[str], rng: FloatSource) -> list[str]:
    return seeded_shuffle(symbols, rng.random_float)[:CODE_LENGTH]


def generate_bot_guess(
    state: BotGameState,
    rng: FloatSource,
    symbols: Sequence[str] = SYMBOL_IDS,
) -> list[str]:
    """Produce the bot's next guess from its own history."""
    symbol_ids = list(symbols)
    if not state.guess_history:
        return _random_guess(symbol_ids, rng)

    if rng.random_float() < IGNORE_FEEDBACK_CHANCE:
        return _random_guess(symbol_ids, rng)

    last_guess = state.guess_history[-1]
    total_matches = state.feedback_history[-1].total

    if total_matches == 0:
        unused = [s for s in symbol_ids if s not in last_guess]
        if len(unused) >= CODE_LENGTH:
            return seeded_shuffle(unused, rng.random_float)[:CODE_LENGTH]

    kept = last_guess[:min(total_matches, CODE_LENGTH - 1)]
    others = [s for s in symbol_ids if s not in kept]
    fresh = seeded_shuffle(others, rng.random_float)[:CODE_LENGTH - len(kept)]
    return seeded_shuffle(kept + fresh, rng.random_float)[:CODE_LENGTH]


def simulate_bot_game(
    secret: Sequence[str],
    rng: FloatSource,
    max_attempts: int = MAX_ATTEMPTS,
    game_duration: float = GAME_DURATION_SECONDS,
    symbols: Sequence[str] = SYMBOL_IDS,
    iq: int = BOT_IQ,
) -> BotGameState:
    """Play a full round against *secret* and return the final state."""
    state = BotGameState()
    time_spent = 0.0

    while state.status == "playing" and state.attempts < max_attempts:
        time_spent += bot_think_time(iq, rng) / 1000
        if time_spent >= game_duration:
            state.status = "lost"
            state.finish_time = 0.0
            break

        guess = generate_bot_guess(state, rng, symbols)
        feedback = evaluate_guess(secret, guess)
        state.guess_history.append(guess)
        state.feedback_history.append(feedback)
        state.attempts += 1
        state.score += attempt_points(feedback)

        if feedback.is_victory:
            state.status = "won"
            state.finish_time = max(0.0, game_duration - time_spent)
            state.score += victory_points(state.finish_time)
            break

    if state.status == "playing":
        state.status = "lost"
        state.finish_time = max(0.0, game_duration - time_spent)

    logger.debug(
        "Bot game finished: %s in %d attempts, score=%d",
        state.status, state.attempts, state.score,
    )
    return state
