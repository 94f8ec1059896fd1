"""CLI for the Chess960 unprotected-pawn study.

Usage:
    python -m fischer_pawns.cli [--highlight N] [--ascii] [--json]
        [--position RANK] [-v]

With no arguments, enumerates all 960 starting positions and prints the
stats plus every position leaving three pawns unprotected.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from fischer_pawns.analysis import (
    BOARD_WIDTH,
    analyze_positions,
    generate_positions,
    parse_position,
    protection_vector,
    scharnagl_number,
)
from fischer_pawns.config import Settings
from fischer_pawns.report import (
    format_position,
    report_as_dict,
    serialize_report,
    summarize_position,
)

logger = logging.getLogger(__name__)


def _run_single(text: str, glyphs: str, as_json: bool) -> None:
    try:
        position = parse_position(text)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    pawns = protection_vector(position)
    if as_json:
        json.dump(asdict(summarize_position(position, pawns)), sys.stdout, indent=2)
        print()
        return
    print(format_position(position, pawns, glyphs))
    print(f"{position} (Chess960 #{scharnagl_number(position)}): {sum(pawns)} unprotected")


def _run_all(settings: Settings, highlight: int, glyphs: str, as_json: bool) -> None:
    # Sorted so the report order is stable across runs
    results = analyze_positions(sorted(generate_positions()))
    logger.info("Analyzed %d starting positions", len(results))
    if as_json:
        json.dump(report_as_dict(results, highlight), sys.stdout, indent=2, ensure_ascii=False)
        print()
        return
    print(serialize_report(results, highlight, glyphs, settings.stats_counts))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Count unprotected pawns in every Chess960 starting position",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--highlight", type=int, metavar="N", choices=range(BOARD_WIDTH + 1),
        help="List positions with exactly N unprotected pawns (default: 3)",
    )
    parser.add_argument(
        "--ascii", action="store_true",
        help="Draw pieces with letters instead of Unicode chess glyphs",
    )
    parser.add_argument(
        "--json", action="store_true", dest="as_json",
        help="Emit the report as JSON",
    )
    parser.add_argument(
        "--position", metavar="RANK",
        help="Analyze a single back rank, e.g. RNBQKBNR",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    highlight = args.highlight if args.highlight is not None else settings.highlight
    glyphs = "ascii" if args.ascii else settings.glyphs

    if args.position:
        _run_single(args.position, glyphs, args.as_json)
    else:
        _run_all(settings, highlight, glyphs, args.as_json)


if __name__ == "__main__":
    main()
