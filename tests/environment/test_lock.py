"""Tests for the per-round environment lock."""

from datetime import datetime, timedelta, timezone

from skema_core.environment.config import generate_environmental_config
from skema_core.environment.lock import EnvironmentLock
from skema_core.settings import CoreSettings, InMemoryStore


class _TickingClock:
    def __init__(self) -> None:
        self.now = datetime(2026, 3, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class TestEnvironmentLock:
    def test_first_call_locks(self):
        lock = EnvironmentLock(InMemoryStore())
        assert not lock.is_locked("round-1")
        lock.config_for("round-1")
        assert lock.is_locked("round-1")

    def test_locked_config_keeps_original_timestamp(self):
        clock = _TickingClock()
        lock = EnvironmentLock(InMemoryStore(), clock=clock)
        first = lock.config_for("round-1")
        second = lock.config_for("round-1")
        assert second == first
        assert second.generated_at == first.generated_at

    def test_matches_direct_generation(self):
        lock = EnvironmentLock(InMemoryStore())
        assert lock.config_for("round-9") == generate_environmental_config("round-9", 6)

    def test_rounds_are_independent(self):
        lock = EnvironmentLock(InMemoryStore())
        assert lock.config_for("round-1") != lock.config_for("round-2")

    def test_shared_store_across_instances(self):
        store = InMemoryStore()
        clock = _TickingClock()
        first = EnvironmentLock(store, clock=clock).config_for("round-1")
        again = EnvironmentLock(store, clock=clock).config_for("round-1")
        assert again.generated_at == first.generated_at

    def test_symbol_count_is_part_of_the_key(self):
        store = InMemoryStore()
        six = EnvironmentLock(store, symbol_count=6).config_for("round-1")
        four = EnvironmentLock(store, symbol_count=4).config_for("round-1")
        assert len(six.visual_offsets) == 6
        assert len(four.visual_offsets) == 4

    def test_key_carries_symbol_count_and_round_id(self):
        store = InMemoryStore()
        EnvironmentLock(store, symbol_count=5).config_for("round-3")
        assert "env:5:round-3" in store
        assert "env:round-3" not in store

    def test_from_settings_uses_symbol_count(self):
        store = InMemoryStore()
        settings = CoreSettings.from_env({"SKEMA_SYMBOL_COUNT": "4"})
        config = EnvironmentLock.from_settings(store, settings).config_for("round-1")
        assert len(config.visual_offsets) == 4
        assert len(config.symbol_picker_order) == 4
        assert "env:4:round-1" in store
