"""Secret code generation.

Two modes:

- **random** – fresh OS entropy per call, for live rounds.  Not
  reproducible and not meant to be.
- **seeded** – a Fisher-Yates shuffle of the alphabet indices driven by a
  :class:`~skema_core.core.rng.SeededRng`, so any client given the same
  seed derives the same secret.
"""

from __future__ import annotations

import secrets
from typing import Sequence

from skema_core.core.errors import InvalidInput
from skema_core.core.rng import SeededRng, seeded_shuffle
from skema_core.core.symbols import CODE_LENGTH, SYMBOL_IDS

_system_random = secrets.SystemRandom()


def generate_secret(
    seed: int | None = None,
    *,
    rng: SeededRng | None = None,
    symbols: Sequence[str] = SYMBOL_IDS,
) -> list[str]:
    """Return ``CODE_LENGTH`` distinct symbol ids drawn from *symbols*.

    Parameters
    ----------
    seed:
        If given, a fresh :class:`SeededRng` is built from it.
    rng:
        An existing seeded stream to draw from (advanced in place).
        Mutually exclusive with *seed*.
    symbols:
        The alphabet to draw from; defaults to the full symbol set.
    """
    if seed is not None and rng is not None:
        raise InvalidInput("pass either seed or rng, not both")
    alphabet = list(dict.fromkeys(symbols))
    if len(alphabet) < CODE_LENGTH:
        raise InvalidInput(
            f"alphabet needs at least {CODE_LENGTH} distinct symbols, got {len(alphabet)}"
        )

    if seed is not None:
        rng = SeededRng(seed)
    if rng is None:
        return _system_random.sample(alphabet, CODE_LENGTH)

    order = seeded_shuffle(range(len(alphabet)), rng)
    return [alphabet[i] for i in order[:CODE_LENGTH]]
