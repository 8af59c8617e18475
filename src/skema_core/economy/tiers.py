"""Tiered balance locking.

Each inviter tier may issue a limited number of invites; every unused
invite slot keeps its cost locked in the player's balance, on top of a
per-tier base reserve.  The locked part can never exceed what the
player actually holds, and the available part never drops below zero.

An unknown tier is not an error: it falls back to the default tier so
a balance query can never be blocked by a stale or misspelled tier
name.  The fallback is logged.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from skema_core.core.errors import InvalidInput
from skema_core.economy.currency import Amount, from_cents, to_cents, to_decimal

logger = logging.getLogger(__name__)

DEFAULT_TIER = "jogador"


class TierEconomyConfig(BaseModel):
    """Invite economics of one tier (amounts in whole k$)."""

    model_config = ConfigDict(frozen=True)

    max_invites: int
    cost_per_invite: Decimal
    """Charged per invite slot; locked while the slot is unused."""
    invited_tier_label: str
    """Tier assigned to players invited by this tier ('' if none)."""
    base_locked: Decimal
    """Reserve locked regardless of invites."""


def _tier(max_invites: int, cost: int, invited: str, base: int) -> TierEconomyConfig:
    return TierEconomyConfig(
        max_invites=max_invites,
        cost_per_invite=Decimal(cost),
        invited_tier_label=invited,
        base_locked=Decimal(base),
    )


TIER_ECONOMY: dict[str, TierEconomyConfig] = {
    "master_admin": _tier(7, 200_000, "Criador", 0),
    "CD HX": _tier(7, 200_000, "Criador", 0),
    "Criador": _tier(10, 15_000, "Grão Mestre", 0),
    "Grão Mestre": _tier(10, 1_300, "Mestre", 0),
    "Mestre": _tier(10, 130, "Boom", 0),
    "Boom": _tier(10, 10, "Ploft", 0),
    "Ploft": _tier(0, 0, "", 2),
    "jogador": _tier(0, 0, "", 2),
}


class BalanceBreakdown(BaseModel):
    """Locked vs. available split of a player's balance.

    ``available`` is the hard ceiling for any debit the caller authorizes.
    """

    model_config = ConfigDict(frozen=True)

    total: Decimal
    locked: Decimal
    """Effective lock: ``min(total_locked, total)``."""
    available: Decimal
    tier: str
    """Tier whose config was applied (after any fallback)."""
    invites_sent: int
    max_invites: int
    slots_remaining: int
    cost_per_invite: Decimal
    invited_tier_label: str
    base_locked: Decimal
    invite_locked: Decimal
    """``slots_remaining * cost_per_invite``."""
    total_locked: Decimal
    """Uncapped lock requirement: ``invite_locked + base_locked``."""

    @property
    def total_cents(self) -> int:
        return to_cents(self.total)

    @property
    def locked_cents(self) -> int:
        return to_cents(self.locked)

    @property
    def available_cents(self) -> int:
        return to_cents(self.available)

    @property
    def fully_covered(self) -> bool:
        """True when the balance covers the whole lock requirement."""
        return self.total_locked <= self.total


def resolve_tier(tier: str | None, default: str = DEFAULT_TIER) -> tuple[str, TierEconomyConfig]:
    """Return ``(tier_name, config)``, falling back to *default* if unknown."""
    if default not in TIER_ECONOMY:
        raise InvalidInput(f"default tier {default!r} is not configured")
    if tier and tier in TIER_ECONOMY:
        return tier, TIER_ECONOMY[tier]
    if tier:
        logger.warning("Unknown tier %r, falling back to %r", tier, default)
    return default, TIER_ECONOMY[default]


def get_tier_economy(tier: str | None) -> TierEconomyConfig:
    """Config for *tier*, or the default tier's config."""
    return resolve_tier(tier)[1]


def calculate_balance_breakdown(
    energy: Amount,
    tier: str | None,
    invites_sent: int,
    default_tier: str = DEFAULT_TIER,
) -> BalanceBreakdown:
    """Split *energy* into locked and available parts for *tier*.

    *default_tier* is the fallback for a missing or unknown *tier*.
    """
    energy_cents = to_cents(energy)
    if energy_cents < 0:
        raise InvalidInput(f"energy must be >= 0, got {to_decimal(energy)}")
    if invites_sent < 0:
        raise InvalidInput(f"invites_sent must be >= 0, got {invites_sent}")

    tier_name, config = resolve_tier(tier, default_tier)
    slots_remaining = max(0, config.max_invites - invites_sent)
    invite_locked = slots_remaining * to_cents(config.cost_per_invite)
    total_locked = invite_locked + to_cents(config.base_locked)
    effective_locked = min(total_locked, energy_cents)
    available = max(0, energy_cents - effective_locked)

    return BalanceBreakdown(
        total=from_cents(energy_cents),
        locked=from_cents(effective_locked),
        available=from_cents(available),
        tier=tier_name,
        invites_sent=invites_sent,
        max_invites=config.max_invites,
        slots_remaining=slots_remaining,
        cost_per_invite=config.cost_per_invite,
        invited_tier_label=config.invited_tier_label,
        base_locked=config.base_locked,
        invite_locked=from_cents(invite_locked),
        total_locked=from_cents(total_locked),
    )
