"""Economy: exact currency math, tier locking, transfers, house balance."""

from skema_core.economy.currency import (
    add_currency,
    format_energy,
    from_cents,
    round_currency,
    subtract_currency,
    to_cents,
)
from skema_core.economy.skema_box import SkemaBox
from skema_core.economy.tiers import (
    DEFAULT_TIER,
    TIER_ECONOMY,
    BalanceBreakdown,
    TierEconomyConfig,
    calculate_balance_breakdown,
    get_tier_economy,
)
from skema_core.economy.transfers import (
    TRANSFER_TAX_RATE,
    TransferQuote,
    authorize_transfer,
    quote_transfer,
)

__all__ = [
    # currency
    "add_currency",
    "format_energy",
    "from_cents",
    "round_currency",
    "subtract_currency",
    "to_cents",
    # tiers
    "DEFAULT_TIER",
    "TIER_ECONOMY",
    "BalanceBreakdown",
    "TierEconomyConfig",
    "calculate_balance_breakdown",
    "get_tier_economy",
    # transfers
    "TRANSFER_TAX_RATE",
    "TransferQuote",
    "authorize_transfer",
    "quote_transfer",
    # house
    "SkemaBox",
]
