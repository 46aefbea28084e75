"""Custom exception hierarchy for the sudoku hint engine."""


class SudokuError(Exception):
    """Base exception for board construction failures."""


class PuzzleFormatError(SudokuError):
    """Raised when a puzzle layout cannot be parsed into a 9x9 grid."""


class BoardLayoutError(SudokuError):
    """Raised when a cell list does not hold exactly one cell per coordinate."""
