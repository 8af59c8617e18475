"""Guess evaluation with the Mastermind multiset rule.

A secret symbol instance earns at most one credit: either an exact hit
(same symbol, same position) or a partial hit (same symbol elsewhere),
never both and never twice.  Guessing ``[X, X, X, X]`` against a secret
holding one unmatched ``X`` yields ``present == 1``.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from skema_core.core.symbols import CODE_LENGTH, validate_code


class EvaluationResult(BaseModel):
    """Feedback for one guess: exact (white) and present (gray) counts."""

    model_config = ConfigDict(frozen=True)

    exact: int
    present: int

    @property
    def total(self) -> int:
        return self.exact + self.present

    @property
    def is_victory(self) -> bool:
        """True when every position matched."""
        return self.exact == CODE_LENGTH


def evaluate_guess(secret: Sequence[str], guess: Sequence[str]) -> EvaluationResult:
    """Score *guess* against *secret*.

    Both must be ``CODE_LENGTH`` known symbol ids (repeats allowed); any
    other shape raises :class:`~skema_core.core.errors.InvalidInput`.
    Neither argument is modified.
    """
    secret_t = validate_code(secret, name="secret")
    guess_t = validate_code(guess, name="guess")

    exact = 0
    secret_left: Counter[str] = Counter()
    guess_left: Counter[str] = Counter()
    for s, g in zip(secret_t, guess_t):
        if s == g:
            exact += 1
        else:
            secret_left[s] += 1
            guess_left[g] += 1

    present = sum(min(n, secret_left[sym]) for sym, n in guess_left.items())
    return EvaluationResult(exact=exact, present=present)
