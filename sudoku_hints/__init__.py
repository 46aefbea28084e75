"""Candidate elimination hints for 9x9 sudoku boards with optional diagonals.

This package exposes the public API surface via:

- ``sudoku_hints.engine.board.Board``: cells, zones and the mutation API.
- ``sudoku_hints.engine.deduction.HintFiller``: one deduction pass.
- ``sudoku_hints.io.puzzle`` helpers: puzzle text parsing and the sample board.
"""

from .core.models import Cell, Elimination, Zone
from .engine.board import Board, BoardConfig
from .engine.deduction import HintFiller, fill, fill_until_stable
from .io.puzzle import DEFAULT_PUZZLE, board_from_text, parse_puzzle

__all__ = [
    "Board",
    "BoardConfig",
    "Cell",
    "DEFAULT_PUZZLE",
    "Elimination",
    "HintFiller",
    "Zone",
    "board_from_text",
    "fill",
    "fill_until_stable",
    "parse_puzzle",
]

__version__ = "0.1.0"
