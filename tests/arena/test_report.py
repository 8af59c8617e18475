"""Tests for the plain-text settlement report."""

from skema_core.arena.models import ArenaEntry
from skema_core.arena.report import render_settlement_report
from skema_core.arena.settlement import settle_arena


def _make_settlement():
    entries = [
        ArenaEntry(player_id="human", status="won", attempts=3, score=1800, finish_time=90.0),
    ] + [
        ArenaEntry(player_id=f"bot-{i}", status="lost", attempts=8, score=300 - i, is_bot=True)
        for i in range(9)
    ]
    return settle_arena(entries, "0.55", "0.05")


class TestRenderSettlementReport:
    def test_header_and_sections(self):
        text = render_settlement_report(_make_settlement())
        assert "Arena Settlement: 10 players" in text
        assert "## Economy" in text
        assert "## Standings" in text

    def test_economy_lines(self):
        text = render_settlement_report(_make_settlement())
        assert "k$ 5,00" in text
        assert "(house)" in text
        assert "2 paid (cutoff 2)" in text

    def test_one_line_per_player(self):
        text = render_settlement_report(_make_settlement())
        rows = [line for line in text.splitlines() if "att=" in line]
        assert len(rows) == 10
        assert "human" in rows[0]
        assert "k$ 3,14" in rows[0]
        assert rows[1].count("(bot)") == 1
        assert rows[-1].rstrip().endswith("-")

    def test_full_field_lists_min_cash(self, full_settlement):
        text = render_settlement_report(full_settlement)
        assert "Arena Settlement: 100 players" in text
        assert "25 paid (cutoff 25)" in text
        assert "k$ 13,50" in text
        assert "k$ 0,00 (house)" in text
