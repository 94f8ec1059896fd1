"""Pawn protection scan: which pawns in front of a back rank no piece guards."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import chess

from fischer_pawns.analysis.constants import (
    BOARD_WIDTH,
    PROTECTED,
    PROTECTION_OFFSETS,
    UNPROTECTED,
    in_bounds,
)

__all__ = [
    "ProtectionStats",
    "guarded_files",
    "protection_vector",
    "analyze_positions",
    "count_unprotected",
    "positions_with_unprotected",
    "unprotected_distribution",
    "unprotected_files",
]

logger = logging.getLogger(__name__)


@dataclass
class ProtectionStats:
    total: int = 0
    counts: dict[int, int] = field(default_factory=dict)  # unprotected pawns -> positions


def guarded_files(piece: str, index: int) -> list[int]:
    """Files whose pawn the piece on `index` guards. Off-board targets are dropped."""
    return [index + offset for offset in PROTECTION_OFFSETS[piece] if in_bounds(index + offset)]


def protection_vector(position: str) -> tuple[int, ...]:
    """Protection status of the pawn on each file: 0 = protected, 1 = unprotected.

    Every pawn starts unprotected; each piece clears the files it guards.
    """
    pawns = [UNPROTECTED] * BOARD_WIDTH
    for i, piece in enumerate(position):
        for target in guarded_files(piece, i):
            pawns[target] = PROTECTED
    return tuple(pawns)


def analyze_positions(positions: Iterable[str]) -> dict[str, tuple[int, ...]]:
    results = {position: protection_vector(position) for position in positions}
    logger.debug("Computed protection vectors for %d positions", len(results))
    return results


def count_unprotected(results: dict[str, tuple[int, ...]], n: int) -> int:
    return sum(1 for pawns in results.values() if sum(pawns) == n)


def positions_with_unprotected(results: dict[str, tuple[int, ...]], n: int = 3) -> list[str]:
    """Positions leaving exactly n pawns unprotected, in result-set order."""
    return [position for position, pawns in results.items() if sum(pawns) == n]


def unprotected_distribution(results: dict[str, tuple[int, ...]]) -> ProtectionStats:
    counts = dict.fromkeys(range(BOARD_WIDTH + 1), 0)
    for pawns in results.values():
        counts[sum(pawns)] += 1
    return ProtectionStats(total=len(results), counts=counts)


def unprotected_files(pawns: tuple[int, ...]) -> list[str]:
    """File letters of the unprotected pawns: (1, 1, 0, ..., 1) -> ['a', 'b', 'h']."""
    return [chess.FILE_NAMES[f] for f, status in enumerate(pawns) if status == UNPROTECTED]
