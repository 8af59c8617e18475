"""Settle a finished arena field into per-player prizes.

Prizes come from :func:`scaled_arena_prize`, one rank at a time, so
each is rounded to cents on its own.  If half-up rounding ever makes the
ranks add up to more than the pool, the excess cents are taken back one
cent at a time from the lowest paid rank upwards (this keeps prizes
non-increasing by rank).  Whatever is left below the pool is reported
as ``rounding_residual`` and kept by the house.
"""

from __future__ import annotations

import logging
from typing import Iterable

from skema_core.arena.models import ArenaEntry, Payout, Settlement
from skema_core.arena.payouts import (
    arena_pool_for_field,
    build_payout_table,
    calculate_total_rake,
    scaled_arena_prize,
)
from skema_core.arena.standings import rank_field
from skema_core.core.errors import PayoutIntegrityError
from skema_core.economy.currency import Amount, from_cents, to_cents, to_decimal

logger = logging.getLogger(__name__)


def _cap_to_pool(prize_cents: list[int], pool_cents: int) -> list[int]:
    excess = sum(prize_cents) - pool_cents
    capped = list(prize_cents)
    idx = len(capped) - 1
    while excess > 0:
        if capped[idx] > 0:
            capped[idx] -= 1
            excess -= 1
        idx = idx - 1 if idx > 0 else len(capped) - 1
    return capped


def settle_arena(
    entries: Iterable[ArenaEntry],
    buy_in: Amount,
    rake_fee: Amount,
) -> Settlement:
    """Rank *entries* and compute pool, rake and every prize."""
    standings = rank_field(entries)
    total_players = len(standings)
    pool = arena_pool_for_field(buy_in, rake_fee, total_players)
    total_rake = calculate_total_rake(rake_fee, total_players)
    table = build_payout_table(total_players)

    paid = standings[:table.paid_positions]
    prize_cents = [to_cents(scaled_arena_prize(s.rank, pool, total_players)) for s in paid]
    pool_cents = to_cents(pool)
    if sum(prize_cents) > pool_cents:
        logger.debug(
            "Rounding overshoot of %d cents on a %s pool, trimming from the bottom",
            sum(prize_cents) - pool_cents, pool,
        )
        prize_cents = _cap_to_pool(prize_cents, pool_cents)

    payouts = tuple(
        Payout(
            rank=s.rank,
            player_id=s.entry.player_id,
            permil=table.permil(s.rank),
            prize=from_cents(cents),
        )
        for s, cents in zip(paid, prize_cents)
    )
    total_paid_cents = sum(prize_cents)
    residual_cents = pool_cents - total_paid_cents
    if residual_cents < 0:
        raise PayoutIntegrityError(f"paid {total_paid_cents} cents out of a {pool_cents} cent pool")

    logger.debug(
        "Settled %d players: pool=%s paid=%s residual=%s rake=%s",
        total_players, pool, from_cents(total_paid_cents), from_cents(residual_cents), total_rake,
    )
    return Settlement(
        total_players=total_players,
        buy_in=to_decimal(buy_in),
        rake_fee=to_decimal(rake_fee),
        pool=pool,
        total_rake=total_rake,
        table=table,
        standings=tuple(standings),
        payouts=payouts,
        total_paid=from_cents(total_paid_cents),
        rounding_residual=from_cents(residual_cents),
    )
