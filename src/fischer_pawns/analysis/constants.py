"""Constants shared across the back-rank analysis submodules."""

import chess

__all__ = [
    "INITIAL_PIECES",
    "BOARD_WIDTH",
    "CHESS960_POSITION_COUNT",
    "PROTECTION_OFFSETS",
    "PROTECTED",
    "UNPROTECTED",
    "in_bounds",
]

# Classical back rank; its letters are the multiset every position permutes.
INITIAL_PIECES = "RNBKQBNR"

BOARD_WIDTH = len(chess.FILE_NAMES)

CHESS960_POSITION_COUNT = 960

PROTECTED = 0
UNPROTECTED = 1

# File offsets (relative to the piece's own file) of the pawns each piece
# guards on the rank in front of it. Knight reach is a simplified i±2 proxy.
PROTECTION_OFFSETS: dict[str, tuple[int, ...]] = {
    "R": (0,),
    "B": (-1, 1),
    "N": (-2, 2),
    "Q": (-1, 0, 1),
    "K": (-1, 0, 1),
}


def in_bounds(index: int) -> bool:
    """True if index names a file on the board (a=0 .. h=7)."""
    return 0 <= index < BOARD_WIDTH
