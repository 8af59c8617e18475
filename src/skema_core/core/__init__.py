"""Core primitives: error taxonomy, seeded RNG and the symbol alphabet."""

from skema_core.core.errors import (
    InvalidInput,
    PayoutIntegrityError,
    SkemaError,
    TransferDenied,
)
from skema_core.core.rng import SeededRng, seeded_shuffle, string_to_seed
from skema_core.core.symbols import (
    CODE_LENGTH,
    MAX_ATTEMPTS,
    SYMBOL_IDS,
    SYMBOLS,
    Symbol,
    get_symbol_by_id,
    is_valid_code,
    require_symbol,
    validate_code,
)

__all__ = [
    # errors
    "SkemaError",
    "InvalidInput",
    "PayoutIntegrityError",
    "TransferDenied",
    # rng
    "SeededRng",
    "seeded_shuffle",
    "string_to_seed",
    # symbols
    "CODE_LENGTH",
    "MAX_ATTEMPTS",
    "SYMBOLS",
    "SYMBOL_IDS",
    "Symbol",
    "get_symbol_by_id",
    "is_valid_code",
    "require_symbol",
    "validate_code",
]
