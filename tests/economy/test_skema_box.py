"""Tests for the house balance."""

from decimal import Decimal

import pytest

from skema_core.core.errors import InvalidInput
from skema_core.economy.skema_box import SKEMA_BOX_KEY, SkemaBox
from skema_core.settings import InMemoryStore


class TestSkemaBox:
    def test_empty_store_is_zero(self):
        assert SkemaBox(InMemoryStore()).balance() == Decimal("0.00")

    def test_credit_and_debit(self):
        box = SkemaBox(InMemoryStore())
        assert box.credit(5) == Decimal("5.00")
        assert box.credit("0.05") == Decimal("5.05")
        assert box.debit(1) == Decimal("4.05")
        assert box.balance() == Decimal("4.05")

    def test_debit_floors_at_zero(self):
        box = SkemaBox(InMemoryStore())
        box.credit(3)
        assert box.debit(10) == Decimal("0.00")

    def test_stored_as_two_decimal_string(self):
        store = InMemoryStore()
        SkemaBox(store).credit(0.1 + 0.2)
        assert store.get(SKEMA_BOX_KEY) == "0.30"

    def test_unreadable_value_is_zero(self, caplog):
        store = InMemoryStore({SKEMA_BOX_KEY: "not-a-number"})
        with caplog.at_level("WARNING"):
            assert SkemaBox(store).balance() == Decimal("0.00")
        assert "Unreadable" in caplog.text

    def test_negative_amounts_rejected(self):
        box = SkemaBox(InMemoryStore())
        with pytest.raises(InvalidInput):
            box.credit(-1)
        with pytest.raises(InvalidInput):
            box.debit(-1)

    def test_custom_key(self):
        store = InMemoryStore()
        SkemaBox(store, key="house").credit(1)
        assert store.get("house") == "1.00"
        assert SKEMA_BOX_KEY not in store
