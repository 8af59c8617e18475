"""Shared fixtures for arena tests."""

from __future__ import annotations

import pytest

from skema_core.arena.models import ArenaEntry, Settlement
from skema_core.arena.settlement import settle_arena


@pytest.fixture(scope="module")
def full_field() -> list[ArenaEntry]:
    """100 entries: one winning human followed by 99 losing bots in score order."""
    human = ArenaEntry(player_id="human", status="won", attempts=4, score=1700, finish_time=61.5)
    bots = [
        ArenaEntry(player_id=f"bot-{i}", status="lost", attempts=8, score=900 - i, is_bot=True)
        for i in range(99)
    ]
    return [human, *bots]


@pytest.fixture(scope="module")
def full_settlement(full_field: list[ArenaEntry]) -> Settlement:
    """The reference 100-player arena at k$ 0,55 buy-in with k$ 0,05 rake."""
    return settle_arena(full_field, "0.55", "0.05")
