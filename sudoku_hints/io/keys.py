"""Digit-entry handling for a cell chosen by the caller."""

from __future__ import annotations

from typing import Optional

from ..core.models import Cell
from ..engine.board import Board
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

CLEAR_KEY = "0"
DIGIT_KEYS = frozenset("123456789")


def apply_key(board: Board, cell: Optional[Cell], key: str) -> bool:
    """Apply a key press to ``cell``: 1-9 place a digit, 0 clears it.

    Other keys, missing cells and prefilled cells are ignored. Returns True
    when the cell changed.
    """

    if cell is None:
        return False
    if key == CLEAR_KEY:
        return board.set_value(cell, 0)
    if key in DIGIT_KEYS:
        return board.set_value(cell, int(key))
    LOGGER.debug("Ignoring key %r", key)
    return False
