"""Exact k$ currency arithmetic.

Amounts are carried as integer cents internally and exposed as
``Decimal`` values quantized to two places.  Binary floats are accepted
at the boundary but converted through ``str`` first, so ``0.1`` means
exactly ten cents.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from skema_core.core.errors import InvalidInput

Amount = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


def to_decimal(value: Amount) -> Decimal:
    """Convert *value* to a finite Decimal, rejecting garbage."""
    if isinstance(value, bool):
        raise InvalidInput(f"not a currency amount: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidInput(f"not a currency amount: {value!r}") from None
    if not result.is_finite():
        raise InvalidInput(f"currency amount must be finite, got {value!r}")
    return result


def round_currency(value: Amount) -> Decimal:
    """Round *value* half-up to whole cents."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(value: Amount) -> int:
    """Convert *value* to integer cents, rounding half-up."""
    return int(round_currency(value) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer *cents* back to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENT)


def add_currency(a: Amount, b: Amount) -> Decimal:
    return from_cents(to_cents(a) + to_cents(b))


def subtract_currency(a: Amount, b: Amount) -> Decimal:
    return from_cents(to_cents(a) - to_cents(b))


def format_energy(value: Amount) -> str:
    """Format in the Brazilian style used across the lobby: ``k$ 200.000,00``."""
    amount = round_currency(value)
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    # swap US separators for pt-BR ones
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"k$ {sign}{localized}"
