"""Runtime configuration and caller-supplied state.

:class:`CoreSettings` gathers the tunables that would otherwise be
scattered module constants.  :class:`KeyValueStore` replaces any ambient
global storage: components that must remember something between calls
(the per-round environment lock, the house balance) take a store from
the caller instead of reaching for process-wide state.
"""

from __future__ import annotations

import os
from decimal import Decimal
from typing import Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "SKEMA_"


class CoreSettings(BaseModel):
    """Tunable constants for a deployment of the kernel."""

    model_config = ConfigDict(frozen=True)

    symbol_count: int = 6
    """Symbols shown in the picker; drives environment generation."""

    max_attempts: int = 8
    """Guesses allowed per round."""

    game_duration_seconds: float = 180.0
    """Length of a timed round."""

    default_tier: str = "jogador"
    """Tier used when a player's tier is missing or unknown."""

    transfer_tax_rate: Decimal = Decimal("0.0643")
    """Fraction of a transfer charged as tax and credited to the house."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CoreSettings:
        """Build settings from ``SKEMA_<FIELD>`` variables.

        Unset variables keep their defaults; values are validated by
        Pydantic, so ``SKEMA_MAX_ATTEMPTS=ten`` raises a ValidationError.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in env:
                overrides[name] = env[key]
        return cls.model_validate(overrides)


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal string key-value store supplied by the caller."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed :class:`KeyValueStore` for tests and single processes."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
