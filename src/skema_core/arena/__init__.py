"""Arena tournaments: payout tables, field ranking and settlement."""

from skema_core.arena.models import (
    ArenaEntry,
    Payout,
    PayoutBand,
    PayoutTable,
    Settlement,
    Standing,
)
from skema_core.arena.payouts import (
    CANONICAL_PERMIL,
    ITM_POSITIONS,
    arena_pool_for_field,
    build_payout_table,
    calculate_arena_pool,
    calculate_total_rake,
    is_itm,
    itm_count,
    payout_summary,
    scaled_arena_prize,
)
from skema_core.arena.report import render_settlement_report
from skema_core.arena.settlement import settle_arena
from skema_core.arena.standings import rank_field

__all__ = [
    # models
    "ArenaEntry",
    "Payout",
    "PayoutBand",
    "PayoutTable",
    "Settlement",
    "Standing",
    # payouts
    "CANONICAL_PERMIL",
    "ITM_POSITIONS",
    "arena_pool_for_field",
    "build_payout_table",
    "calculate_arena_pool",
    "calculate_total_rake",
    "is_itm",
    "itm_count",
    "payout_summary",
    "scaled_arena_prize",
    # settlement
    "rank_field",
    "render_settlement_report",
    "settle_arena",
]
