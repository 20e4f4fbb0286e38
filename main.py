"""CLI entrypoint for the vocabulary crossword generator."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from crucigrama.core.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MIN_LENGTH,
    DEFAULT_TARGET_WORDS,
)
from crucigrama.core.exceptions import CrosswordError
from crucigrama.data.units import DEFAULT_SELECTION, UnitCatalog
from crucigrama.data.word_filter import FilterConfig
from crucigrama.engine.builder import BuilderConfig
from crucigrama.engine.validator import PuzzleAuditor
from crucigrama.io.export import build_payload, dump_payload
from crucigrama.play.session import PuzzleSession
from crucigrama.utils.logger import configure_logging, get_logger, level_from_name
from crucigrama.utils.pretty import pretty_print_puzzle


LOGGER = get_logger("crucigrama.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a vocabulary crossword from a JSON word list",
    )
    parser.add_argument(
        "--vocabulary",
        type=str,
        default="palabras.json",
        help="Path or http(s) URL of the vocabulary JSON list",
    )
    parser.add_argument(
        "--units",
        nargs="+",
        metavar="UNIT",
        default=list(DEFAULT_SELECTION),
        help="Lexical unit ids to draw words from (use 'all' for every unit)",
    )
    parser.add_argument("--list-units", action="store_true", help="Print known units and exit")
    parser.add_argument(
        "--words",
        type=int,
        default=DEFAULT_TARGET_WORDS,
        help="Number of words to place",
    )
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE, help="Grid side in cells")
    parser.add_argument(
        "--max-retries",
        type=int,
        default=DEFAULT_MAX_RETRIES,
        help="Consecutive failed placements before giving up",
    )
    parser.add_argument("--min-length", type=int, default=DEFAULT_MIN_LENGTH, help="Shortest playable word")
    parser.add_argument("--max-length", type=int, default=DEFAULT_MAX_LENGTH, help="Longest playable word")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--solution", action="store_true", help="Show letters instead of blanks")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def list_units(catalog: UnitCatalog) -> str:
    lines: List[str] = []
    for unit in catalog.units:
        lines.append(f"{unit.id:<5} {unit.name} ({unit.book})")
    return "\n".join(lines)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    if args.min_length > args.max_length:
        parser.error("--min-length cannot exceed --max-length")
    if args.words < 1:
        parser.error("--words must be at least 1")

    catalog = UnitCatalog()
    if args.list_units:
        print(list_units(catalog))
        return 0

    session = PuzzleSession(
        builder_config=BuilderConfig(
            grid_size=args.grid_size,
            max_retries=args.max_retries,
            target_words=args.words,
            seed=args.seed,
        ),
        filter_config=FilterConfig(
            min_length=args.min_length,
            max_length=args.max_length,
            catalog=catalog,
        ),
        selected_units=(),
    )
    try:
        if [unit.lower() for unit in args.units] == ["all"]:
            session.select_all_units()
        else:
            session.select_units(args.units)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        session.load_vocabulary(args.vocabulary)
        result = session.generate()
    except CrosswordError as exc:
        LOGGER.error("%s", exc)
        return 1

    audit = PuzzleAuditor().audit(result)
    if not audit.ok:
        LOGGER.error("Generated crossword failed its audit: %s", "; ".join(audit.messages))
        return 1

    LOGGER.info("%s", session.selection_label)
    pretty_print_puzzle(result, solution=args.solution)
    if args.output:
        dump_payload(build_payload(result), args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
