"""Console report for the back-rank pawn protection study.

Takes the result set (position -> protection vector) and produces either the
text report (stats lines plus a two-row diagram per highlighted position) or
a JSON-ready dict. No analysis logic here beyond summing vectors.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import chess

from fischer_pawns.analysis import (
    PROTECTED,
    count_unprotected,
    position_fen,
    positions_with_unprotected,
    scharnagl_number,
    unprotected_distribution,
    unprotected_files,
)


# ---------------------------------------------------------------------------
# Glyphs
# ---------------------------------------------------------------------------

_COUNT_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight")
_CELL_SEPARATOR = "  "


def _piece_glyph(symbol: str, glyphs: str) -> str:
    """'K' -> '♔' in unicode mode, 'K' unchanged in ascii mode."""
    if glyphs == "ascii":
        return symbol
    return chess.Piece.from_symbol(symbol).unicode_symbol()


def _pawn_glyph(status: int, glyphs: str) -> str:
    """Protected pawns are drawn white (♙ / P), unprotected ones black (♟ / p)."""
    color = chess.WHITE if status == PROTECTED else chess.BLACK
    pawn = chess.Piece(chess.PAWN, color)
    return pawn.symbol() if glyphs == "ascii" else pawn.unicode_symbol()


def _count_phrase(n: int) -> str:
    """1 -> 'one unprotected pawn', 3 -> 'three unprotected pawns'."""
    word = _COUNT_WORDS[n] if 0 <= n < len(_COUNT_WORDS) else str(n)
    noun = "pawn" if n == 1 else "pawns"
    return f"{word} unprotected {noun}"


# ---------------------------------------------------------------------------
# Text report
# ---------------------------------------------------------------------------

def format_stats(
    results: dict[str, tuple[int, ...]],
    counts: tuple[int, ...] | list[int] = (1, 2, 3, 4),
) -> str:
    lines = [f"Starting Positions generated: {len(results)}"]
    for n in counts:
        lines.append(f"Positions with {_count_phrase(n)}: {count_unprotected(results, n)}")
    return "\n".join(lines)


def format_position(position: str, pawns: tuple[int, ...], glyphs: str = "unicode") -> str:
    """Two aligned rows: pawn protection status above, pieces below."""
    pawn_row = _CELL_SEPARATOR.join(_pawn_glyph(status, glyphs) for status in pawns)
    piece_row = _CELL_SEPARATOR.join(_piece_glyph(piece, glyphs) for piece in position)
    return f"{pawn_row}\n{piece_row}"


def serialize_report(
    results: dict[str, tuple[int, ...]],
    highlight: int = 3,
    glyphs: str = "unicode",
    counts: tuple[int, ...] | list[int] = (1, 2, 3, 4),
) -> str:
    """Full text report: stats, then every position with `highlight` unprotected pawns."""
    lines: list[str] = [format_stats(results, counts), ""]

    selected = positions_with_unprotected(results, highlight)
    lines.append(f"{len(selected)} positions with {_count_phrase(highlight)}:")
    lines.append("(unprotected pawns highlighted)")
    lines.append("")

    for position in selected:
        lines.append(format_position(position, results[position], glyphs))
        lines.append(f"{position} (Chess960 #{scharnagl_number(position)})")
        lines.append("")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# JSON report
# ---------------------------------------------------------------------------

@dataclass
class PositionSummary:
    position: str
    pawns: list[int]
    unprotected_files: list[str]
    scharnagl: int
    fen: str


def summarize_position(position: str, pawns: tuple[int, ...]) -> PositionSummary:
    return PositionSummary(
        position=position,
        pawns=list(pawns),
        unprotected_files=unprotected_files(pawns),
        scharnagl=scharnagl_number(position),
        fen=position_fen(position),
    )


def report_as_dict(results: dict[str, tuple[int, ...]], highlight: int = 3) -> dict:
    stats = unprotected_distribution(results)
    return {
        "total": stats.total,
        # JSON object keys are strings
        "counts": {str(n): c for n, c in stats.counts.items()},
        "highlight": highlight,
        "positions": [
            asdict(summarize_position(position, results[position]))
            for position in positions_with_unprotected(results, highlight)
        ],
    }
