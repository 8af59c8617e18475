"""Pydantic v2 models for arena payouts and settlement.

All models are frozen: a settlement is computed once from a finished
field and only read afterwards.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict


class PayoutTable(BaseModel):
    """Per-mille share of the pool for each paid rank.

    ``shares[0]`` belongs to rank 1.  Shares always sum to exactly 1000.
    """

    model_config = ConfigDict(frozen=True)

    total_players: int
    itm_count: int
    """Nominal in-the-money cutoff: a quarter of the field, minimum 1.

    Capped at 25 paid ranks; see :attr:`paid_positions`.
    """
    shares: tuple[int, ...]

    @property
    def paid_positions(self) -> int:
        """Ranks that actually receive a share: ``min(itm_count, 25)``."""
        return len(self.shares)

    def permil(self, rank: int) -> int:
        """Share for *rank*; zero for ranks outside the table."""
        if 1 <= rank <= len(self.shares):
            return self.shares[rank - 1]
        return 0

    def as_mapping(self) -> dict[int, int]:
        return {rank: share for rank, share in enumerate(self.shares, start=1)}


class PayoutBand(BaseModel):
    """A run of consecutive ranks paying the same share (display helper)."""

    model_config = ConfigDict(frozen=True)

    first_rank: int
    last_rank: int
    permil_each: int
    prize_each: Decimal | None = None
    label: str = ""

    @property
    def positions(self) -> str:
        if self.first_rank == self.last_rank:
            return f"{self.first_rank}º"
        return f"{self.first_rank}º-{self.last_rank}º"


class ArenaEntry(BaseModel):
    """One finisher's round outcome, as reported by the game layer."""

    model_config = ConfigDict(frozen=True)

    player_id: str
    status: Literal["won", "lost"]
    attempts: int
    score: int
    finish_time: float = 0.0
    """Seconds left on the clock when the player finished."""
    is_bot: bool = False


class Standing(BaseModel):
    """An entry with its final rank."""

    model_config = ConfigDict(frozen=True)

    rank: int
    entry: ArenaEntry


class Payout(BaseModel):
    """Prize credited to one ranked player."""

    model_config = ConfigDict(frozen=True)

    rank: int
    player_id: str
    permil: int
    prize: Decimal


class Settlement(BaseModel):
    """Full result of settling a finished arena field.

    ``rounding_residual`` is the part of the pool left over by per-rank
    rounding to cents.  The house keeps it; it is never redistributed.
    """

    model_config = ConfigDict(frozen=True)

    total_players: int
    buy_in: Decimal
    rake_fee: Decimal
    pool: Decimal
    total_rake: Decimal
    table: PayoutTable
    standings: tuple[Standing, ...]
    payouts: tuple[Payout, ...]
    total_paid: Decimal
    rounding_residual: Decimal
