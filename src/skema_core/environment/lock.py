"""Per-round environment lock.

The first config generated for a round is persisted in the caller's
store and returned unchanged for the rest of that round, including its
original ``generated_at`` timestamp.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from skema_core.environment.config import (
    DEFAULT_SYMBOL_COUNT,
    EnvironmentalConfig,
    generate_environmental_config,
)
from skema_core.settings import CoreSettings, KeyValueStore

_KEY_PREFIX = "env:"


class EnvironmentLock:
    """Hands out one locked :class:`EnvironmentalConfig` per round id."""

    def __init__(
        self,
        store: KeyValueStore,
        symbol_count: int = DEFAULT_SYMBOL_COUNT,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._symbol_count = symbol_count
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        store: KeyValueStore,
        settings: CoreSettings,
        clock: Callable[[], datetime] | None = None,
    ) -> EnvironmentLock:
        """Lock sized by ``settings.symbol_count``."""
        return cls(store, symbol_count=settings.symbol_count, clock=clock)

    def _key(self, round_id: str) -> str:
        return f"{_KEY_PREFIX}{self._symbol_count}:{round_id}"

    def is_locked(self, round_id: str) -> bool:
        """True once a config has been issued for *round_id*."""
        return self._store.get(self._key(round_id)) is not None

    def config_for(self, round_id: str) -> EnvironmentalConfig:
        """Return the locked config for *round_id*, generating it on first use."""
        raw = self._store.get(self._key(round_id))
        if raw is not None:
            return EnvironmentalConfig.model_validate_json(raw)

        if self._clock is None:
            config = generate_environmental_config(round_id, self._symbol_count)
        else:
            config = generate_environmental_config(
                round_id, self._symbol_count, clock=self._clock,
            )
        self._store.set(self._key(round_id), config.model_dump_json())
        return config
