"""Rank-based prize distribution for arena fields of any size.

The canonical table pays 25 ranks (a 100-player field) in per-mille of
the pool.  Smaller fields pay the top quarter of the field: the top
``itm_count`` canonical shares are scaled up proportionally to cover the
unused remainder, flooring each bump, and whatever flooring leaves over
goes to rank 1 so the table closes at exactly 1000.

Fields larger than 100 players still pay the 25 canonical ranks: the
canonical table has no shares beyond rank 25.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
from typing import Sequence

from skema_core.arena.models import PayoutBand, PayoutTable
from skema_core.core.errors import InvalidInput, PayoutIntegrityError
from skema_core.economy.currency import CENT, Amount, to_decimal

logger = logging.getLogger(__name__)

PERMIL_TOTAL = 1000
ITM_POSITIONS = 25

CANONICAL_PERMIL: tuple[int, ...] = (
    270, 160, 100, 70, 55, 40, 35, 30, 25, 20,
    15, 15, 15, 15, 15,  # 11-15
    13, 13, 13, 13, 13,  # 16-20
    11, 11, 11, 11, 11,  # 21-25 min-cash
)

_RANK_LABELS = {1: "Campeão", 2: "Vice", 3: "Bronze"}
_MIN_CASH_LABEL = "Min-cash"


def _check_closure(shares: Sequence[int], what: str) -> None:
    total = sum(shares)
    if total != PERMIL_TOTAL:
        raise PayoutIntegrityError(
            f"{what} sums to {total} per-mille, expected {PERMIL_TOTAL}"
        )
    if any(s < 0 for s in shares):
        raise PayoutIntegrityError(f"{what} has a negative share: {list(shares)}")


_check_closure(CANONICAL_PERMIL, "canonical payout table")
if len(CANONICAL_PERMIL) != ITM_POSITIONS:
    raise PayoutIntegrityError(
        f"canonical payout table has {len(CANONICAL_PERMIL)} ranks, expected {ITM_POSITIONS}"
    )


def _require_field(total_players: int) -> None:
    if isinstance(total_players, bool) or not isinstance(total_players, int):
        raise InvalidInput(f"total_players must be an int, got {total_players!r}")
    if total_players < 1:
        raise InvalidInput(f"total_players must be >= 1, got {total_players}")


def itm_count(total_players: int) -> int:
    """In-the-money cutoff: ``max(1, floor(total_players * 0.25))``.

    This is the nominal cutoff.  Only the first ``ITM_POSITIONS`` ranks of
    it are paid, so above 100 players it exceeds the paid positions; use
    :func:`is_itm` or ``PayoutTable.paid_positions`` to ask who is paid.
    """
    _require_field(total_players)
    return max(1, total_players // 4)


def scale_shares(base: Sequence[int], count: int) -> list[int]:
    """Top *count* shares of *base*, renormalized to sum to 1000."""
    shares = list(base[:count])
    used = sum(shares)
    if used <= 0:
        raise PayoutIntegrityError(f"cannot scale an empty share prefix of {count} ranks")

    remainder = PERMIL_TOTAL - used
    if remainder > 0:
        shares = [s + remainder * s // used for s in shares]
        shares[0] += PERMIL_TOTAL - sum(shares)
    return shares


@lru_cache(maxsize=256)
def build_payout_table(total_players: int) -> PayoutTable:
    """Construct and verify the payout table for a field of *total_players*."""
    itm = itm_count(total_players)
    paid = min(itm, ITM_POSITIONS)
    shares = scale_shares(CANONICAL_PERMIL, paid)
    _check_closure(shares, f"payout table for {total_players} players")

    logger.debug("Payout table for %d players (%d ITM): %s", total_players, itm, shares)
    return PayoutTable(total_players=total_players, itm_count=itm, shares=tuple(shares))


def is_itm(rank: int, total_players: int) -> bool:
    """True if *rank* receives a prize in a field of *total_players*.

    Checks the paid positions, not the nominal cutoff: in a 200-player
    field ``itm_count`` is 50 but only ranks 1-25 are paid.
    """
    return build_payout_table(total_players).permil(rank) > 0


def _require_pool(pool: Amount) -> Decimal:
    value = to_decimal(pool)
    if value <= 0:
        raise InvalidInput(f"prize pool must be positive, got {value}")
    return value


def prize_for_permil(pool: Amount, permil: int) -> Decimal:
    """``round(pool * permil / 1000, 2)``, rounding half-up."""
    value = to_decimal(pool) * permil / PERMIL_TOTAL
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def scaled_arena_prize(rank: int, pool: Amount, total_players: int) -> Decimal:
    """Prize for *rank* out of *pool* in a field of *total_players*.

    Ranks outside the paid positions, including ranks below 1, win
    nothing.  The pool is still validated for every rank.
    """
    pool_value = _require_pool(pool)
    return prize_for_permil(pool_value, build_payout_table(total_players).permil(rank))


def arena_pool_for_field(buy_in: Amount, rake_fee: Amount, total_players: int) -> Decimal:
    """``total_players * (buy_in - rake_fee)``."""
    _require_field(total_players)
    buy, rake = _require_fees(buy_in, rake_fee)
    return (total_players * (buy - rake)).quantize(CENT)


def _require_fees(buy_in: Amount, rake_fee: Amount) -> tuple[Decimal, Decimal]:
    buy = to_decimal(buy_in)
    rake = to_decimal(rake_fee)
    if buy <= 0:
        raise InvalidInput(f"buy-in must be positive, got {buy}")
    if rake < 0:
        raise InvalidInput(f"rake fee must be >= 0, got {rake}")
    if rake >= buy:
        raise InvalidInput(f"rake fee {rake} leaves nothing of buy-in {buy} for the pool")
    return buy, rake


def calculate_arena_pool(buy_in: Amount, rake_fee: Amount, bot_count: int) -> Decimal:
    """Pool of an arena with one human and *bot_count* bots."""
    if bot_count < 1:
        raise InvalidInput(f"an arena needs at least one bot, got {bot_count}")
    return arena_pool_for_field(buy_in, rake_fee, bot_count + 1)


def calculate_total_rake(rake_fee: Amount, total_players: int) -> Decimal:
    """Rake collected by the house: ``total_players * rake_fee``."""
    _require_field(total_players)
    rake = to_decimal(rake_fee)
    if rake < 0:
        raise InvalidInput(f"rake fee must be >= 0, got {rake}")
    return (total_players * rake).quantize(CENT)


def payout_summary(total_players: int, pool: Amount | None = None) -> list[PayoutBand]:
    """Group the payout table into display bands of equal consecutive shares."""
    table = build_payout_table(total_players)
    pool_value = _require_pool(pool) if pool is not None else None

    bands: list[PayoutBand] = []
    start = 1
    for rank in range(1, table.paid_positions + 1):
        share = table.permil(rank)
        # named podium ranks always stand alone
        closes_band = (
            rank == table.paid_positions
            or table.permil(rank + 1) != share
            or rank in _RANK_LABELS
            or rank + 1 in _RANK_LABELS
        )
        if not closes_band:
            continue
        bands.append(PayoutBand(
            first_rank=start,
            last_rank=rank,
            permil_each=share,
            prize_each=prize_for_permil(pool_value, share) if pool_value is not None else None,
            label=_RANK_LABELS.get(start, "") if start == rank else "",
        ))
        start = rank + 1

    if len(bands) > len(_RANK_LABELS) and not bands[-1].label:
        bands[-1] = bands[-1].model_copy(update={"label": _MIN_CASH_LABEL})
    return bands
