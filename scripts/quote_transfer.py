#!/usr/bin/env python3
"""Quote a k$ transfer for a sender and show the balance split behind it.

The fallback tier and the tax rate come from ``SKEMA_DEFAULT_TIER`` and
``SKEMA_TRANSFER_TAX_RATE`` when set.

Usage:
    uv run python scripts/quote_transfer.py 100 --tier "Grão Mestre" --energy 20000 --invites 10
    SKEMA_TRANSFER_TAX_RATE=0.05 uv run python scripts/quote_transfer.py 250 --tier Criador --energy 200000
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from skema_core.core.errors import TransferDenied
from skema_core.economy import authorize_transfer, calculate_balance_breakdown, format_energy, quote_transfer
from skema_core.settings import CoreSettings


def main() -> None:
    parser = argparse.ArgumentParser(description="Price a transfer and check whether it is allowed.")
    parser.add_argument("amount", type=Decimal, help="Amount credited to the recipient")
    parser.add_argument("--tier", default=None, help="Sender tier (falls back to the default tier)")
    parser.add_argument("--energy", type=Decimal, required=True, help="Sender's total balance")
    parser.add_argument("--invites", type=int, default=0, help="Invites the sender has already sent")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = CoreSettings.from_env()

    breakdown = calculate_balance_breakdown(
        args.energy, args.tier, args.invites, default_tier=settings.default_tier,
    )
    quote = quote_transfer(
        args.amount, args.tier, args.energy, args.invites,
        tax_rate=settings.transfer_tax_rate,
        default_tier=settings.default_tier,
    )

    print(f"Tier: {breakdown.tier} ({breakdown.slots_remaining} invite slots unused)")
    print(f"Balance: {format_energy(breakdown.total)} | locked {format_energy(breakdown.locked)}"
          f" | available {format_energy(breakdown.available)}")
    print(f"Transfer: {format_energy(quote.amount)} + tax {format_energy(quote.tax)}"
          f" ({settings.transfer_tax_rate * 100}%) = {format_energy(quote.total_cost)}")
    try:
        authorize_transfer(
            args.amount, args.tier, args.energy, args.invites,
            tax_rate=settings.transfer_tax_rate,
            default_tier=settings.default_tier,
        )
    except TransferDenied as exc:
        print(f"Denied: {exc}")
        sys.exit(1)
    print("Allowed")


if __name__ == "__main__":
    main()
