"""Tests for report.py — stats lines, position diagrams and JSON form."""

from fischer_pawns.report import (
    PositionSummary,
    _count_phrase,
    format_position,
    format_stats,
    report_as_dict,
    serialize_report,
    summarize_position,
)

CLASSICAL = ("RNBQKBNR", (0, 0, 0, 0, 0, 0, 0, 0))
THREE = ("NNRKBQRB", (1, 1, 0, 0, 0, 0, 0, 1))


def _results() -> dict:
    return dict([THREE, CLASSICAL])


class TestHelpers:
    def test_count_phrase_singular(self):
        assert _count_phrase(1) == "one unprotected pawn"

    def test_count_phrase_plural(self):
        assert _count_phrase(3) == "three unprotected pawns"
        assert _count_phrase(0) == "zero unprotected pawns"


class TestFormatStats:
    def test_default_counts(self):
        text = format_stats(_results())
        assert text.splitlines() == [
            "Starting Positions generated: 2",
            "Positions with one unprotected pawn: 0",
            "Positions with two unprotected pawns: 0",
            "Positions with three unprotected pawns: 1",
            "Positions with four unprotected pawns: 0",
        ]

    def test_custom_counts(self):
        text = format_stats(_results(), counts=[0])
        assert text.splitlines()[-1] == "Positions with zero unprotected pawns: 1"


class TestFormatPosition:
    def test_unicode_classical(self):
        pawns, pieces = format_position(*CLASSICAL).splitlines()
        assert pawns == "♙  ♙  ♙  ♙  ♙  ♙  ♙  ♙"
        assert pieces == "♖  ♘  ♗  ♕  ♔  ♗  ♘  ♖"

    def test_unicode_unprotected_pawns_are_black(self):
        pawns, _ = format_position(*THREE).splitlines()
        assert pawns == "♟  ♟  ♙  ♙  ♙  ♙  ♙  ♟"

    def test_ascii(self):
        assert format_position(*THREE, glyphs="ascii") == (
            "p  p  P  P  P  P  P  p\n"
            "N  N  R  K  B  Q  R  B"
        )

    def test_rows_aligned(self):
        pawns, pieces = format_position(*THREE).splitlines()
        assert len(pawns) == len(pieces)


class TestSerializeReport:
    def test_sections(self):
        text = serialize_report(_results())
        assert text.startswith("Starting Positions generated: 2\n")
        assert "1 positions with three unprotected pawns:" in text
        assert "(unprotected pawns highlighted)" in text
        assert "♘  ♘  ♖  ♔  ♗  ♕  ♖  ♗" in text
        assert "NNRKBQRB (Chess960 #" in text
        # Fully protected layout is not drawn
        assert "RNBQKBNR (Chess960" not in text

    def test_highlight_zero(self):
        text = serialize_report(_results(), highlight=0, glyphs="ascii")
        assert "1 positions with zero unprotected pawns:" in text
        assert "R  N  B  Q  K  B  N  R" in text
        assert "RNBQKBNR (Chess960 #518)" in text


class TestJson:
    def test_summarize_position(self):
        summary = summarize_position(*CLASSICAL)
        assert isinstance(summary, PositionSummary)
        assert summary.scharnagl == 518
        assert summary.unprotected_files == []
        assert summary.pawns == [0] * 8
        assert summary.fen.startswith("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w")

    def test_report_as_dict(self):
        data = report_as_dict(_results(), highlight=3)
        assert data["total"] == 2
        assert data["counts"]["3"] == 1
        assert data["counts"]["0"] == 1
        assert data["highlight"] == 3
        assert [p["position"] for p in data["positions"]] == ["NNRKBQRB"]
        assert data["positions"][0]["unprotected_files"] == ["a", "b", "h"]
