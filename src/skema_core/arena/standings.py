"""Final ranking of a finished arena field.

Order: winners before losers; among winners, fewer attempts first; then
higher score; then more time left on the clock.  Entries that tie on all
of these keep the order they were submitted in.
"""

from __future__ import annotations

from typing import Iterable

from skema_core.arena.models import ArenaEntry, Standing
from skema_core.core.errors import InvalidInput


def _sort_key(entry: ArenaEntry) -> tuple:
    won = entry.status == "won"
    return (
        0 if won else 1,
        entry.attempts if won else 0,
        -entry.score,
        -entry.finish_time,
    )


def rank_field(entries: Iterable[ArenaEntry]) -> list[Standing]:
    """Rank *entries* 1..N."""
    field = list(entries)
    if not field:
        raise InvalidInput("cannot rank an empty field")
    ids = [e.player_id for e in field]
    if len(set(ids)) != len(ids):
        raise InvalidInput("player ids in a field must be unique")

    ordered = sorted(field, key=_sort_key)
    return [Standing(rank=i, entry=e) for i, e in enumerate(ordered, start=1)]
