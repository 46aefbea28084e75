"""CLI entrypoint for the sudoku hint engine."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from sudoku_hints.core.exceptions import SudokuError
from sudoku_hints.engine.board import Board
from sudoku_hints.engine.deduction import fill_until_stable
from sudoku_hints.io.puzzle import DEFAULT_PUZZLE, load_puzzle, parse_puzzle
from sudoku_hints.utils.logger import configure_logging
from sudoku_hints.utils.pretty import pretty_print_board, print_fill_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Derive candidate eliminations for a 9x9 sudoku board",
    )
    parser.add_argument(
        "--puzzle",
        type=Path,
        metavar="FILE",
        help="Puzzle file: 9 lines of 9 symbols, '.' or '0' for blanks (default: built-in sample)",
    )
    parser.add_argument(
        "--no-diagonals",
        action="store_true",
        help="Treat the board as classic sudoku without diagonal zones",
    )
    parser.add_argument(
        "--passes",
        type=int,
        default=1,
        help="Number of fill passes; stops early once a pass adds nothing",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.passes < 1:
        parser.error("--passes must be at least 1")

    try:
        grid = load_puzzle(args.puzzle) if args.puzzle else parse_puzzle(DEFAULT_PUZZLE)
    except (OSError, SudokuError) as exc:
        parser.error(f"cannot read puzzle: {exc}")

    board = Board.from_grid(grid, diagonals=not args.no_diagonals)
    eliminations, done = fill_until_stable(board, max_passes=args.passes)

    payload: Dict[str, Any] = {
        "diagonals": board.is_diagonals,
        "passes": done,
        "board": board.to_jsonable(),
        "eliminations": [e.to_jsonable() for e in eliminations],
    }

    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        pretty_print_board(board, label="Board", candidates=True)
        print_fill_stats(board, eliminations, passes=done)
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
