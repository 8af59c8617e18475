"""Transfer quotes and authorization.

Only the arithmetic and the eligibility rules live here; debiting and
crediting accounts is the caller's job.  The sender pays the amount
plus a tax, and the sum must fit within the sender's *available*
balance as computed by :func:`calculate_balance_breakdown`.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict

from skema_core.core.errors import InvalidInput, TransferDenied
from skema_core.economy.currency import Amount, format_energy, from_cents, to_cents, to_decimal
from skema_core.economy.tiers import DEFAULT_TIER, calculate_balance_breakdown

logger = logging.getLogger(__name__)

TRANSFER_TAX_RATE = Decimal("0.0643")

TRANSFER_TIERS: frozenset[str] = frozenset({"master_admin", "CD HX", "Criador", "Grão Mestre"})
"""Tiers allowed to send transfers (Grão Mestre and above)."""


class TransferQuote(BaseModel):
    """Cost of a transfer and whether the sender can afford it."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    """Credited to the recipient."""
    tax: Decimal
    """Credited to the house."""
    total_cost: Decimal
    """Debited from the sender: ``amount + tax``."""
    available: Decimal
    tier_allowed: bool
    sufficient_balance: bool

    @property
    def allowed(self) -> bool:
        return self.tier_allowed and self.sufficient_balance


def transfer_tax_cents(amount_cents: int, rate: Decimal = TRANSFER_TAX_RATE) -> int:
    """Tax on *amount_cents*, rounded half-up to whole cents."""
    return int((Decimal(amount_cents) * rate).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def quote_transfer(
    amount: Amount,
    tier: str | None,
    energy: Amount,
    invites_sent: int,
    tax_rate: Decimal = TRANSFER_TAX_RATE,
    default_tier: str = DEFAULT_TIER,
) -> TransferQuote:
    """Price a transfer of *amount* from a sender with the given balance.

    *default_tier* resolves a missing or unknown sender tier when computing
    the available balance; eligibility always uses *tier* as given.
    """
    amount_cents = to_cents(amount)
    if amount_cents < 1:
        raise InvalidInput(f"minimum transfer is k$ 0,01, got {to_decimal(amount)}")

    breakdown = calculate_balance_breakdown(energy, tier, invites_sent, default_tier)
    tax_cents = transfer_tax_cents(amount_cents, tax_rate)
    total_cents = amount_cents + tax_cents

    return TransferQuote(
        amount=from_cents(amount_cents),
        tax=from_cents(tax_cents),
        total_cost=from_cents(total_cents),
        available=breakdown.available,
        tier_allowed=tier in TRANSFER_TIERS,
        sufficient_balance=breakdown.available_cents >= total_cents,
    )


def authorize_transfer(
    amount: Amount,
    tier: str | None,
    energy: Amount,
    invites_sent: int,
    tax_rate: Decimal = TRANSFER_TAX_RATE,
    default_tier: str = DEFAULT_TIER,
) -> TransferQuote:
    """Return the quote, or raise :class:`TransferDenied` if it is not allowed."""
    quote = quote_transfer(amount, tier, energy, invites_sent, tax_rate, default_tier)
    if not quote.tier_allowed:
        raise TransferDenied(f"tier {tier!r} cannot send transfers")
    if not quote.sufficient_balance:
        raise TransferDenied(
            f"insufficient available balance: need {format_energy(quote.total_cost)} "
            f"(amount + tax), have {format_energy(quote.available)}"
        )
    logger.debug(
        "Transfer authorized: %s + tax %s = %s (available %s)",
        quote.amount, quote.tax, quote.total_cost, quote.available,
    )
    return quote
