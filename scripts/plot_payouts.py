"""Chart how the arena payout table reshapes as the field grows.

Usage:
    uv run python scripts/plot_payouts.py [--fields 8 25 37 64 100] [--pool 50]
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from skema_core.arena import build_payout_table, scaled_arena_prize


def generate_charts(fields: list[int], pool: Decimal, out_path: str) -> None:
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    fig.suptitle(f"Arena payouts by field size (pool k$ {pool})", fontsize=16, fontweight="bold")

    # --- Chart 1: per-mille share by rank ---
    ax = axes[0]
    for players in fields:
        shares = np.array(build_payout_table(players).shares)
        ranks = np.arange(1, len(shares) + 1)
        ax.step(ranks, shares, where="mid", label=f"{players} players ({len(shares)} paid)")
    ax.set_xlabel("Rank")
    ax.set_ylabel("Share (‰)")
    ax.set_title("Share of pool per rank")
    ax.set_yscale("log")
    ax.legend()

    # --- Chart 2: cumulative prize ---
    ax = axes[1]
    for players in fields:
        table = build_payout_table(players)
        prizes = [float(scaled_arena_prize(r, pool, players)) for r in range(1, table.paid_positions + 1)]
        ax.plot(np.arange(1, len(prizes) + 1), np.cumsum(prizes), marker="o", markersize=3,
                label=f"{players} players")
    ax.axhline(float(pool), color="black", linestyle="--", linewidth=0.8, label="pool")
    ax.set_xlabel("Rank")
    ax.set_ylabel("Cumulative prize (k$)")
    ax.set_title("Pool paid out through rank N")
    ax.legend()

    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"Chart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--fields", type=int, nargs="+", default=[8, 25, 37, 64, 100],
                        help="Field sizes to chart")
    parser.add_argument("--pool", type=Decimal, default=Decimal("50"), help="Prize pool for chart 2")
    parser.add_argument("--out", default="arena_payouts.png", help="Output PNG path")
    args = parser.parse_args()
    generate_charts(args.fields, args.pool, args.out)
