"""Tests for tier economy and balance breakdown."""

from decimal import Decimal

import pytest

from skema_core.core.errors import InvalidInput
from skema_core.economy.tiers import (
    DEFAULT_TIER,
    TIER_ECONOMY,
    calculate_balance_breakdown,
    get_tier_economy,
    resolve_tier,
)


# ---------------------------------------------------------------------------
# Tier table
# ---------------------------------------------------------------------------

class TestTierTable:
    def test_grao_mestre(self):
        cfg = TIER_ECONOMY["Grão Mestre"]
        assert cfg.max_invites == 10
        assert cfg.cost_per_invite == Decimal(1300)
        assert cfg.invited_tier_label == "Mestre"
        assert cfg.base_locked == 0

    def test_leaf_tiers_have_base_reserve(self):
        for tier in ("Ploft", "jogador"):
            assert TIER_ECONOMY[tier].max_invites == 0
            assert TIER_ECONOMY[tier].base_locked == Decimal(2)

    def test_invite_chain(self):
        assert TIER_ECONOMY["master_admin"].invited_tier_label == "Criador"
        assert TIER_ECONOMY["Criador"].invited_tier_label == "Grão Mestre"
        assert TIER_ECONOMY["Mestre"].invited_tier_label == "Boom"
        assert TIER_ECONOMY["Boom"].invited_tier_label == "Ploft"


class TestTierFallback:
    def test_unknown_tier_falls_back(self, caplog):
        with caplog.at_level("WARNING"):
            name, cfg = resolve_tier("Imperador")
        assert name == DEFAULT_TIER
        assert cfg == TIER_ECONOMY[DEFAULT_TIER]
        assert "Imperador" in caplog.text

    def test_missing_tier_is_default_silently(self, caplog):
        with caplog.at_level("WARNING"):
            assert get_tier_economy(None) == TIER_ECONOMY["jogador"]
            assert get_tier_economy("") == TIER_ECONOMY["jogador"]
        assert caplog.text == ""

    def test_unknown_tier_breakdown_uses_default(self):
        bd = calculate_balance_breakdown(10, "Imperador", 0)
        assert bd.tier == "jogador"
        assert bd.locked == Decimal("2.00")
        assert bd.available == Decimal("8.00")

    def test_custom_default(self):
        bd = calculate_balance_breakdown(1000, "nope", 0, default_tier="Mestre")
        assert bd.tier == "Mestre"
        assert bd.locked == Decimal("1000.00")

    def test_unconfigured_default_rejected(self):
        with pytest.raises(InvalidInput):
            resolve_tier("Mestre", default="nope")


# ---------------------------------------------------------------------------
# Breakdown arithmetic
# ---------------------------------------------------------------------------

class TestBalanceBreakdown:
    def test_partial_invites(self):
        bd = calculate_balance_breakdown(2000, "Mestre", 3)
        assert bd.slots_remaining == 7
        assert bd.invite_locked == Decimal("910.00")
        assert bd.total_locked == Decimal("910.00")
        assert bd.locked == Decimal("910.00")
        assert bd.available == Decimal("1090.00")
        assert bd.fully_covered

    def test_lock_capped_at_balance(self):
        bd = calculate_balance_breakdown(100_000, "master_admin", 0)
        assert bd.total_locked == Decimal("1400000.00")
        assert bd.locked == Decimal("100000.00")
        assert bd.available == Decimal("0.00")
        assert not bd.fully_covered

    def test_all_invites_used(self):
        bd = calculate_balance_breakdown(20_000, "Grão Mestre", 10)
        assert bd.slots_remaining == 0
        assert bd.locked == 0
        assert bd.available == Decimal("20000.00")

    def test_more_invites_than_max(self):
        bd = calculate_balance_breakdown(50, "Boom", 14)
        assert bd.slots_remaining == 0
        assert bd.available == Decimal("50.00")

    def test_base_reserve_under_balance(self):
        bd = calculate_balance_breakdown("1.50", "jogador", 0)
        assert bd.locked == Decimal("1.50")
        assert bd.available == Decimal("0.00")

    def test_cents_exact(self):
        bd = calculate_balance_breakdown(0.1 + 0.2, "jogador", 0)
        assert bd.total == Decimal("0.30")
        assert bd.total_cents == 30
        assert bd.locked_cents == 30
        assert bd.available_cents == 0

    def test_reference_fields(self):
        bd = calculate_balance_breakdown(500, "Boom", 2)
        assert bd.invites_sent == 2
        assert bd.max_invites == 10
        assert bd.cost_per_invite == Decimal(10)
        assert bd.invited_tier_label == "Ploft"

    def test_repeated_calls_identical(self):
        first = calculate_balance_breakdown("12345.67", "Criador", 4)
        for _ in range(20):
            assert calculate_balance_breakdown("12345.67", "Criador", 4) == first

    def test_negative_energy_rejected(self):
        with pytest.raises(InvalidInput):
            calculate_balance_breakdown(-1, "Mestre", 0)

    def test_negative_invites_rejected(self):
        with pytest.raises(InvalidInput):
            calculate_balance_breakdown(10, "Mestre", -1)

    def test_garbage_energy_rejected(self):
        with pytest.raises(InvalidInput):
            calculate_balance_breakdown("lots", "Mestre", 0)


class TestBalanceBound:
    @pytest.mark.parametrize("tier", [*TIER_ECONOMY, "unknown-tier", None])
    def test_bound_holds(self, tier):
        for energy in ["0", "0.01", "1", "2", "5.55", "1300", "13000", "250000", "1500000.99"]:
            for invites in range(0, 13):
                bd = calculate_balance_breakdown(energy, tier, invites)
                total = Decimal(energy)
                assert 0 <= bd.available <= total
                if bd.total_locked <= total:
                    assert bd.locked + bd.available == total
                    assert bd.locked == bd.total_locked
                else:
                    assert bd.locked == total
                    assert bd.available == 0
