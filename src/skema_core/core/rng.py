"""Seeded random number generator for deterministic round environments.

Implements Mulberry32 over a single 32-bit state word so that any client,
in any language, can reproduce the exact same stream from the same seed.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply, returned as an unsigned word."""
    return (a * b) & _MASK32


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - _TWO_POW_32 if value & 0x80000000 else value


def string_to_seed(text: str) -> int:
    """Fold *text* into a non-negative 32-bit seed.

    Rolling ``hash = hash * 31 + code_unit`` over the UTF-16 code units of
    *text*, wrapped to a signed 32-bit integer after every step, then the
    absolute value.  Identical identifiers always map to identical seeds.
    Unpaired surrogates are folded as single code units.
    """
    h = 0
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return abs(h)


class SeededRng:
    """Mulberry32 stream of floats in ``[0, 1)``.

    Parameters
    ----------
    seed:
        Any integer; only its low 32 bits are significant.

    Instances are callable, so ``rng()`` is the same as
    ``rng.random_float()``.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._state = seed & _MASK32

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_float(self) -> float:
        """Advance the state and return the next float in ``[0.0, 1.0)``."""
        self._state = (self._state + _INCREMENT) & _MASK32
        s = self._state
        t = _imul(s ^ (s >> 15), 1 | s)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def random_int(self, low: int, high: int) -> int:
        """Return an integer *N* such that ``low <= N <= high``."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return low + int(self.random_float() * (high - low + 1))

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[int(self.random_float() * len(seq))]

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy of *seq*."""
        return seeded_shuffle(seq, self)

    def __call__(self) -> float:
        return self.random_float()

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"SeededRng(seed={self._seed})"


def seeded_shuffle(seq: Sequence[T], rng) -> list[T]:
    """Return a shuffled copy of *seq*; the input is left untouched.

    *rng* is any zero-argument callable returning floats in ``[0, 1)``.
    For ``i`` from the last index down to 1 a single draw picks
    ``j = floor(rng() * (i + 1))`` and swaps ``i`` and ``j``; the draw
    count is therefore always ``len(seq) - 1``.
    """
    result = list(seq)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
