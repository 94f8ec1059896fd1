"""Chess960 back-rank generation: Heap permutations filtered by the setup rules."""

import logging
from collections import Counter
from collections.abc import Iterator, Sequence

import chess

from fischer_pawns.analysis.constants import (
    BOARD_WIDTH,
    CHESS960_POSITION_COUNT,
    INITIAL_PIECES,
)

__all__ = [
    "heap_permutations",
    "is_valid_position",
    "generate_positions",
    "parse_position",
    "scharnagl_number",
    "position_from_scharnagl",
    "position_fen",
]

logger = logging.getLogger(__name__)

_PIECE_MULTISET = Counter(INITIAL_PIECES)


def heap_permutations(pieces: Sequence[str]) -> Iterator[str]:
    """Yield every permutation of pieces (n! of them, repeats included).

    Heap's algorithm, iterative form: each step swaps a single pair in a
    working copy, so consecutive outputs differ by one transposition.
    """
    work = list(pieces)
    n = len(work)
    counters = [0] * n
    yield "".join(work)
    i = 1
    while i < n:
        if counters[i] < i:
            # Even i swaps with the first slot, odd i with the counter slot
            j = 0 if i % 2 == 0 else counters[i]
            work[j], work[i] = work[i], work[j]
            yield "".join(work)
            counters[i] += 1
            i = 1
        else:
            counters[i] = 0
            i += 1


def _king_between_rooks(position: str) -> bool:
    rooks = [i for i, p in enumerate(position) if p == "R"]
    king = position.find("K")
    return len(rooks) == 2 and rooks[0] < king < rooks[1]


def _bishops_on_opposite_colors(position: str) -> bool:
    bishops = [i for i, p in enumerate(position) if p == "B"]
    return len(bishops) == 2 and (bishops[1] - bishops[0]) % 2 == 1


def is_valid_position(position: str) -> bool:
    """Check both Chess960 setup rules.

    King strictly between the rooks (castling both ways stays possible) and
    bishops an odd number of files apart (opposite-colored squares).
    """
    return _king_between_rooks(position) and _bishops_on_opposite_colors(position)


def generate_positions(pieces: str = INITIAL_PIECES) -> frozenset[str]:
    examined = 0
    positions: set[str] = set()
    for candidate in heap_permutations(pieces):
        examined += 1
        if is_valid_position(candidate):
            positions.add(candidate)

    logger.debug(
        "Examined %d permutations, %d valid positions", examined, len(positions)
    )
    if Counter(pieces) == _PIECE_MULTISET and len(positions) != CHESS960_POSITION_COUNT:
        logger.warning(
            "Expected %d Chess960 positions, generated %d",
            CHESS960_POSITION_COUNT, len(positions),
        )
    return frozenset(positions)


def parse_position(text: str) -> str:
    """Normalize and validate a back rank typed by a user, e.g. 'rnbqkbnr'."""
    position = text.strip().upper()
    if len(position) != BOARD_WIDTH:
        raise ValueError(
            f"Invalid back rank: {text!r} (expected {BOARD_WIDTH} pieces, got {len(position)})"
        )
    if Counter(position) != _PIECE_MULTISET:
        raise ValueError(f"Invalid back rank: {text!r} (pieces must be {INITIAL_PIECES} in any order)")
    if not _king_between_rooks(position):
        raise ValueError(f"Invalid back rank: {text!r} (king must stand between the rooks)")
    if not _bishops_on_opposite_colors(position):
        raise ValueError(f"Invalid back rank: {text!r} (bishops must be on opposite colors)")
    return position


def _board_fen(position: str) -> str:
    return f"{position.lower()}/pppppppp/8/8/8/8/PPPPPPPP/{position}"


def _back_rank(board: chess.BaseBoard) -> str:
    return "".join(
        board.piece_at(chess.square(f, 0)).symbol() for f in range(BOARD_WIDTH)
    )


def scharnagl_number(position: str) -> int:
    """Standard Chess960 start-position number (0-959); RNBQKBNR is 518."""
    number = chess.BaseBoard(_board_fen(position)).chess960_pos()
    if number is None:
        raise ValueError(f"Not a Chess960 starting position: {position!r}")
    return number


def position_from_scharnagl(number: int) -> str:
    if not 0 <= number < CHESS960_POSITION_COUNT:
        raise ValueError(
            f"Chess960 position number out of range: {number} "
            f"(expected 0-{CHESS960_POSITION_COUNT - 1})"
        )
    return _back_rank(chess.BaseBoard.from_chess960_pos(number))


def position_fen(position: str) -> str:
    """Full X-FEN of the starting position, black mirroring white."""
    return chess.Board.from_chess960_pos(scharnagl_number(position)).fen()
