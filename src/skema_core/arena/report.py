"""Human-readable settlement report for audit logs and terminals."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from skema_core.arena.models import Payout, Settlement, Standing
from skema_core.economy.currency import format_energy

_TEMPLATE_DIR = Path(__file__).parent / "templates"

_jinja = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_jinja.filters["energy"] = format_energy


def _standing_row(standing: Standing, payout: Payout | None) -> str:
    entry = standing.entry
    prize = format_energy(payout.prize) if payout else "-"
    permil = f"{payout.permil:4d}‰" if payout else "     "
    bot = " (bot)" if entry.is_bot else ""
    return (
        f"{standing.rank:3d}. {entry.player_id + bot:24s} {entry.status:4s} "
        f"att={entry.attempts} score={entry.score:5d}  {permil}  {prize}"
    )


def render_settlement_report(settlement: Settlement) -> str:
    """Render *settlement* as plain text."""
    paid_by_rank = {p.rank: p for p in settlement.payouts}
    rows = [_standing_row(s, paid_by_rank.get(s.rank)) for s in settlement.standings]

    template = _jinja.get_template("settlement_report.txt.j2")
    return template.render(s=settlement, rows=rows, rule="=" * 60)
