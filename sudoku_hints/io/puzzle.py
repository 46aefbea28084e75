"""Puzzle layout parsing and the built-in sample board."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from ..core.constants import BOARD_SIZE
from ..core.exceptions import PuzzleFormatError
from ..engine.board import Board


GIVEN_SYMBOLS = set("123456789")
BLANK_SYMBOLS = {"0", ".", "_"}
SEPARATOR_SYMBOLS = {"|", "+", "-", "=", " ", "\t"}

DEFAULT_PUZZLE = """\
.7...945.
4..6..2.1
.........
..6......
52...1...
..7......
3....48.7
.......15
.8.5.....
"""


def parse_puzzle(text: str) -> List[List[int]]:
    """Parse 9 lines of 9 symbols into a row-major grid (0 = blank).

    Digits 1-9 are givens, ``0``, ``.`` and ``_`` are blanks. Box separators
    and whitespace are ignored, as are blank lines and ``#`` comments.
    """

    grid: List[List[int]] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        symbols = [ch for ch in line if ch not in SEPARATOR_SYMBOLS]
        if not symbols:
            continue
        if len(symbols) != BOARD_SIZE:
            raise PuzzleFormatError(
                f"Line {number} has {len(symbols)} cells, expected {BOARD_SIZE}"
            )
        row: List[int] = []
        for symbol in symbols:
            if symbol in BLANK_SYMBOLS:
                row.append(0)
            elif symbol in GIVEN_SYMBOLS:
                row.append(int(symbol))
            else:
                raise PuzzleFormatError(f"Unknown symbol {symbol!r} on line {number}")
        grid.append(row)

    if len(grid) != BOARD_SIZE:
        raise PuzzleFormatError(f"Puzzle has {len(grid)} rows, expected {BOARD_SIZE}")
    return grid


def format_puzzle(grid: Sequence[Sequence[Optional[int]]]) -> str:
    return "\n".join("".join(str(v) if v else "." for v in row) for row in grid) + "\n"


def load_puzzle(path: Path | str) -> List[List[int]]:
    return parse_puzzle(Path(path).read_text(encoding="utf-8"))


def board_from_text(text: str, diagonals: bool = True) -> Board:
    return Board.from_grid(parse_puzzle(text), diagonals=diagonals)
