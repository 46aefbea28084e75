"""Shared constants and enumerations for the sudoku hint engine."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


BOARD_SIZE = 9
BOX_SIZE = 3
DIGITS: Tuple[int, ...] = tuple(range(1, BOARD_SIZE + 1))
# bits 1..9 set
FULL_MASK = (1 << (BOARD_SIZE + 1)) - 2
CENTER: Tuple[int, int] = (5, 5)


class ZoneKind(str, Enum):
    """All supported zone shapes on the board."""

    ROW = "ROW"
    COLUMN = "COLUMN"
    BOX = "BOX"
    DIAGONAL = "DIAGONAL"
    ANTI_DIAGONAL = "ANTI_DIAGONAL"

    @property
    def is_diagonal(self) -> bool:
        return self in (ZoneKind.DIAGONAL, ZoneKind.ANTI_DIAGONAL)


class Rule(str, Enum):
    """Deduction rules able to add a hint to a cell."""

    PLACED_VALUE = "PLACED_VALUE"
    DIAGONAL_PAIR_CENTER = "DIAGONAL_PAIR_CENTER"
    DIAGONAL_PAIR_ALIGNED = "DIAGONAL_PAIR_ALIGNED"
    DIAGONAL_PROJECTION = "DIAGONAL_PROJECTION"
    ZONE_INTERSECTION = "ZONE_INTERSECTION"


def on_board(x: int, y: int) -> bool:
    return 1 <= x <= BOARD_SIZE and 1 <= y <= BOARD_SIZE


def is_digit(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= BOARD_SIZE
