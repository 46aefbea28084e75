"""Pretty-print helpers for sudoku boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Optional

from ..core.constants import BOARD_SIZE, BOX_SIZE

if TYPE_CHECKING:
    from ..core.models import Cell, Elimination
    from ..engine.board import Board


def cell_symbol(cell: Cell) -> str:
    if cell.value:
        return str(cell.value)
    return "."


def candidate_symbol(cell: Cell) -> str:
    """Remaining candidates of an empty cell, or its value in brackets."""

    if cell.value:
        return f"[{cell.value}]"
    return "".join(str(d) for d in sorted(cell.available))


def _render(board: Board, symbol, width: int) -> str:
    header_cells = [f"{x:>{width}}" for x in range(1, BOARD_SIZE + 1)]
    lines = ["    " + " ".join(header_cells)]
    rule = "    " + "-" * ((width + 1) * BOARD_SIZE - 1)
    lines.append(rule)
    for y in range(1, BOARD_SIZE + 1):
        row_cells = [f"{symbol(board.cell(x, y)):>{width}}" for x in range(1, BOARD_SIZE + 1)]
        lines.append(f"{y:>2} | {' '.join(row_cells)}")
        if y % BOX_SIZE == 0 and y != BOARD_SIZE:
            lines.append(rule)
    return "\n".join(lines)


def format_board(board: Board) -> str:
    return _render(board, cell_symbol, 2)


def format_candidates(board: Board) -> str:
    return _render(board, candidate_symbol, BOARD_SIZE)


def pretty_print_board(
    board: Board,
    *,
    label: str | None = None,
    candidates: bool = False,
    stream=None,
) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)
    if candidates:
        print(file=stream)
        print(format_candidates(board), file=stream)


def print_fill_stats(
    board: Board,
    eliminations: Iterable[Elimination],
    *,
    passes: Optional[int] = None,
    stream=None,
) -> None:
    """Print hint counts per rule and the candidate picture after filling."""

    stream = stream or sys.stdout
    by_rule = Counter(e.rule.value for e in eliminations)
    empty = [c for c in board.cells if c.is_empty]
    singles = [c for c in empty if len(c.available) == 1]

    print(file=stream)
    print("--- Hints ---", file=stream)
    if passes is not None:
        print(f"  Passes:        {passes}", file=stream)
    print(f"  Added:         {sum(by_rule.values())}", file=stream)
    for rule, count in sorted(by_rule.items()):
        print(f"  {rule:<24} {count}", file=stream)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Diagonals:     {'on' if board.is_diagonals else 'off'}", file=stream)
    print(f"  Empty cells:   {len(empty)}", file=stream)
    print(f"  Single left:   {len(singles)}", file=stream)
    for cell in singles:
        (value,) = cell.available
        print(f"    ({cell.x},{cell.y}) -> {value}", file=stream)
