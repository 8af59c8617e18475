"""Seeded, purely cosmetic round environment.

Every player in a room sees the same environment because it is derived
only from the round id.  Nothing here feeds back into evaluation,
scoring or results: the generator takes a round id and a symbol count,
and no gameplay function accepts an :class:`EnvironmentalConfig`.

Draw order is part of the contract (the stream is sequential):

1. Fisher-Yates shuffle of ``range(symbol_count)`` (picker order)
2. grid rotation, ``(r - 0.5) * 6`` degrees
3. spacing multiplier, ``0.95 + r * 0.1``
4. background pattern, ``floor(r * 6)``
5. ``symbol_count`` pairs of pixel offsets, ``(r - 0.5) * 4`` each
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from pydantic import BaseModel, ConfigDict

from skema_core.core.errors import InvalidInput
from skema_core.core.rng import SeededRng, seeded_shuffle, string_to_seed

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL_COUNT = 6

BACKGROUND_PATTERNS: tuple[str, ...] = (
    "radial-gradient(circle at 20% 30%, hsl(var(--primary) / 0.05) 0%, transparent 50%)",
    "radial-gradient(circle at 80% 70%, hsl(var(--accent) / 0.05) 0%, transparent 50%)",
    "linear-gradient(135deg, hsl(var(--primary) / 0.03) 0%, transparent 100%)",
    "linear-gradient(45deg, hsl(var(--accent) / 0.03) 0%, transparent 100%)",
    "radial-gradient(circle at 50% 50%, hsl(var(--muted) / 0.05) 0%, transparent 70%)",
    "conic-gradient(from 0deg at 50% 50%, hsl(var(--primary) / 0.02) 0%, transparent 25%, "
    "hsl(var(--accent) / 0.02) 50%, transparent 75%, hsl(var(--primary) / 0.02) 100%)",
)


class VisualOffset(BaseModel):
    """Pixel nudge applied to one rendered symbol."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class EnvironmentalConfig(BaseModel):
    """Frozen presentation parameters for one round.

    Equality ignores :attr:`generated_at`: two generations for the same
    round describe the same environment even if built at different times.
    """

    model_config = ConfigDict(frozen=True)

    symbol_picker_order: tuple[int, ...]
    """Visual order of the picker; symbol ids and values are unaffected."""

    grid_rotation: float
    """Degrees, within [-3, 3]."""

    spacing_multiplier: float
    """Within [0.95, 1.05]."""

    background_pattern: int
    """Index into :data:`BACKGROUND_PATTERNS`, 0-5."""

    visual_offsets: tuple[VisualOffset, ...]
    """One offset per symbol, each coordinate within [-2, 2] px."""

    seed: int
    """Seed derived from the round id, kept for verification."""

    generated_at: datetime
    """When this config was built."""

    def _identity(self) -> tuple:
        return (
            self.symbol_picker_order,
            self.grid_rotation,
            self.spacing_multiplier,
            self.background_pattern,
            self.visual_offsets,
            self.seed,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvironmentalConfig):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_environmental_config(
    round_id: str,
    symbol_count: int = DEFAULT_SYMBOL_COUNT,
    *,
    clock: Callable[[], datetime] = _utcnow,
) -> EnvironmentalConfig:
    """Derive the environment for *round_id*.

    Same *round_id* and *symbol_count* always yield an equal config.
    """
    if symbol_count < 0:
        raise InvalidInput(f"symbol_count must be >= 0, got {symbol_count}")

    seed = string_to_seed(round_id)
    rng = SeededRng(seed)

    picker_order = seeded_shuffle(range(symbol_count), rng)
    grid_rotation = (rng() - 0.5) * 6
    spacing_multiplier = 0.95 + rng() * 0.1
    background_pattern = int(rng() * 6)
    visual_offsets = tuple(
        VisualOffset(x=(rng() - 0.5) * 4, y=(rng() - 0.5) * 4)
        for _ in range(symbol_count)
    )

    config = EnvironmentalConfig(
        symbol_picker_order=tuple(picker_order),
        grid_rotation=grid_rotation,
        spacing_multiplier=spacing_multiplier,
        background_pattern=background_pattern,
        visual_offsets=visual_offsets,
        seed=seed,
        generated_at=clock(),
    )
    logger.debug(
        "Environment for round %r: seed=%d pattern=%d order=%s rotation=%.2f spacing=%.3f",
        round_id, seed, background_pattern, list(picker_order),
        grid_rotation, spacing_multiplier,
    )
    return config


def background_css(index: int) -> str:
    """CSS background for a pattern index; out-of-range falls back to 0."""
    if 0 <= index < len(BACKGROUND_PATTERNS):
        return BACKGROUND_PATTERNS[index]
    logger.warning("Unknown background pattern %d, using pattern 0", index)
    return BACKGROUND_PATTERNS[0]
