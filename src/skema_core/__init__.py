"""Deterministic game-and-economy kernel for the SKEMA lobby.

Everything in this package is a pure function of its inputs: the
code-breaking evaluator, seeded secret/environment generation, the
tiered balance-locking arithmetic and the arena prize distribution.
Persistence, transport and UI are left to the callers.

The names re-exported here are the surface the rest of the product
consumes; sub-packages hold the supporting helpers.
"""

from skema_core.arena import (
    build_payout_table,
    calculate_arena_pool,
    itm_count,
    scaled_arena_prize,
    settle_arena,
)
from skema_core.core import (
    CODE_LENGTH,
    MAX_ATTEMPTS,
    SYMBOLS,
    InvalidInput,
    PayoutIntegrityError,
    SeededRng,
    SkemaError,
    string_to_seed,
)
from skema_core.economy import calculate_balance_breakdown
from skema_core.environment import generate_environmental_config
from skema_core.game import evaluate_guess, generate_secret

__version__ = "0.1.0"

__all__ = [
    "CODE_LENGTH",
    "MAX_ATTEMPTS",
    "SYMBOLS",
    "InvalidInput",
    "PayoutIntegrityError",
    "SeededRng",
    "SkemaError",
    "build_payout_table",
    "calculate_arena_pool",
    "calculate_balance_breakdown",
    "evaluate_guess",
    "generate_environmental_config",
    "generate_secret",
    "itm_count",
    "scaled_arena_prize",
    "settle_arena",
    "string_to_seed",
]
