"""The house balance ("Skema Box").

Arena rake and transfer tax accumulate here.  The balance lives in a
caller-supplied :class:`~skema_core.settings.KeyValueStore` as a
two-decimal string.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from skema_core.core.errors import InvalidInput
from skema_core.economy.currency import Amount, from_cents, round_currency, to_cents
from skema_core.settings import KeyValueStore

logger = logging.getLogger(__name__)

SKEMA_BOX_KEY = "skema_box_balance"


class SkemaBox:
    """Read/adjust the house balance held in *store*."""

    def __init__(self, store: KeyValueStore, key: str = SKEMA_BOX_KEY) -> None:
        self._store = store
        self._key = key

    def balance(self) -> Decimal:
        """Current balance; a missing or unreadable value counts as zero."""
        raw = self._store.get(self._key)
        if not raw:
            return from_cents(0)
        try:
            value = Decimal(raw)
        except InvalidOperation:
            logger.warning("Unreadable skema box balance %r, treating as 0", raw)
            return from_cents(0)
        if not value.is_finite():
            logger.warning("Non-finite skema box balance %r, treating as 0", raw)
            return from_cents(0)
        return round_currency(value)

    def _write(self, cents: int) -> Decimal:
        value = from_cents(cents)
        self._store.set(self._key, f"{value:.2f}")
        return value

    def credit(self, amount: Amount) -> Decimal:
        """Add *amount* and return the new balance."""
        cents = to_cents(amount)
        if cents < 0:
            raise InvalidInput(f"credit amount must be >= 0, got {amount!r}")
        return self._write(to_cents(self.balance()) + cents)

    def debit(self, amount: Amount) -> Decimal:
        """Subtract *amount* (never below zero) and return the new balance."""
        cents = to_cents(amount)
        if cents < 0:
            raise InvalidInput(f"debit amount must be >= 0, got {amount!r}")
        return self._write(max(0, to_cents(self.balance()) - cents))
