#!/usr/bin/env python3
"""Simulate a bot-only arena field and print its settlement.

Every bot gets its own seeded secret and plays with a seeded stream, so
the same --seed always prints the same report.

Usage:
    uv run python scripts/simulate_arena.py --players 40 --seed 7
    uv run python scripts/simulate_arena.py --players 100 --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from skema_core.arena import ArenaEntry, render_settlement_report, settle_arena
from skema_core.core.rng import SeededRng
from skema_core.economy import SkemaBox, format_energy
from skema_core.game import generate_secret, simulate_bot_game
from skema_core.settings import CoreSettings, InMemoryStore


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate and settle an arena of IQ80 bots.")
    parser.add_argument("--players", type=int, default=100, help="Field size")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--buy-in", type=Decimal, default=Decimal("0.55"), help="Entry paid per player")
    parser.add_argument("--rake", type=Decimal, default=Decimal("0.05"), help="House rake per player")
    parser.add_argument("--json", action="store_true", help="Dump the settlement as JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    settings = CoreSettings.from_env()

    entries: list[ArenaEntry] = []
    for i in range(args.players):
        rng = SeededRng(args.seed + i)
        secret = generate_secret(rng=rng)
        game = simulate_bot_game(
            secret, rng,
            max_attempts=settings.max_attempts,
            game_duration=settings.game_duration_seconds,
        )
        entries.append(ArenaEntry(
            player_id=f"bot-{i}",
            status=game.status,
            attempts=game.attempts,
            score=game.score,
            finish_time=game.finish_time or 0.0,
            is_bot=True,
        ))

    settlement = settle_arena(entries, args.buy_in, args.rake)
    if args.json:
        print(settlement.model_dump_json(indent=2))
        return

    print(render_settlement_report(settlement))
    house = SkemaBox(InMemoryStore())
    house.credit(settlement.total_rake + settlement.rounding_residual)
    print(f"Skema Box after settlement: {format_energy(house.balance())}")


if __name__ == "__main__":
    main()
