"""The fixed symbol alphabet and code-shape constants.

Consumers must use :data:`SYMBOLS` and :data:`CODE_LENGTH` from here
rather than inventing their own alphabet.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from skema_core.core.errors import InvalidInput

CODE_LENGTH = 4
"""Number of symbols in every secret and guess."""

MAX_ATTEMPTS = 8
"""Guesses allowed per round before the round is lost."""


class Symbol(BaseModel):
    """One entry of the closed symbol alphabet."""

    model_config = ConfigDict(frozen=True)

    id: str
    """Stable identifier used in codes (e.g. ``"circle"``)."""

    label: str
    """Glyph shown in text-only contexts."""

    color: str
    """Display colour as a ``#RRGGBB`` hex string."""


SYMBOLS: tuple[Symbol, ...] = (
    Symbol(id="circle", label="●", color="#E53935"),
    Symbol(id="square", label="■", color="#1E88E5"),
    Symbol(id="triangle", label="▲", color="#43A047"),
    Symbol(id="diamond", label="◆", color="#FDD835"),
    Symbol(id="star", label="★", color="#8E24AA"),
    Symbol(id="hexagon", label="⬡", color="#00BCD4"),
)

SYMBOL_IDS: tuple[str, ...] = tuple(s.id for s in SYMBOLS)

_BY_ID: dict[str, Symbol] = {s.id: s for s in SYMBOLS}


def get_symbol_by_id(symbol_id: str) -> Symbol | None:
    """Return the symbol with *symbol_id*, or ``None`` if it is unknown."""
    return _BY_ID.get(symbol_id)


def require_symbol(symbol_id: str) -> Symbol:
    """Return the symbol with *symbol_id* or raise :class:`InvalidInput`."""
    symbol = _BY_ID.get(symbol_id)
    if symbol is None:
        raise InvalidInput(f"unknown symbol id {symbol_id!r}")
    return symbol


def validate_code(code: Sequence[str], *, distinct: bool = False, name: str = "code") -> tuple[str, ...]:
    """Check shape and alphabet of *code* and return it as a tuple.

    Raises :class:`InvalidInput` if the length is not ``CODE_LENGTH``, if
    any entry is not a known symbol id, or (when *distinct*) if a symbol
    repeats.
    """
    if isinstance(code, str):
        raise InvalidInput(f"{name} must be a sequence of symbol ids, not a string")
    items = tuple(code)
    if len(items) != CODE_LENGTH:
        raise InvalidInput(
            f"{name} must have exactly {CODE_LENGTH} symbols, got {len(items)}"
        )
    for symbol_id in items:
        require_symbol(symbol_id)
    if distinct and len(set(items)) != len(items):
        raise InvalidInput(f"{name} repeats a symbol: {list(items)}")
    return items


def is_valid_code(code: Sequence[str], distinct: bool = True) -> bool:
    """Return True if *code* could be submitted as a guess."""
    try:
        validate_code(code, distinct=distinct)
    except InvalidInput:
        return False
    return True
