#!/usr/bin/env python3
"""Print the arena payout table for a field size.

Usage:
    uv run python scripts/payout_table.py 100
    uv run python scripts/payout_table.py 37 --buy-in 0.55 --rake 0.05
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from skema_core.arena.payouts import (
    arena_pool_for_field,
    build_payout_table,
    calculate_total_rake,
    payout_summary,
)
from skema_core.economy.currency import format_energy


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the scaled arena payout table.")
    parser.add_argument("players", type=int, help="Field size (humans + bots)")
    parser.add_argument("--buy-in", type=Decimal, default=Decimal("0.55"), help="Entry paid per player")
    parser.add_argument("--rake", type=Decimal, default=Decimal("0.05"), help="House rake per player")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    table = build_payout_table(args.players)
    pool = arena_pool_for_field(args.buy_in, args.rake, args.players)
    rake = calculate_total_rake(args.rake, args.players)

    print(f"Field: {args.players} players | ITM: {table.paid_positions} paid")
    print(f"Pool: {format_energy(pool)} | Rake: {format_energy(rake)}")
    print()
    for band in payout_summary(args.players, pool):
        print(f"  {band.positions:>9s}  {band.permil_each:4d}‰  {format_energy(band.prize_each):>14s}  {band.label}")
    print()
    print(f"Per-mille total: {sum(table.shares)}")


if __name__ == "__main__":
    main()
