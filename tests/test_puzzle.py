import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import main
from sudoku_hints.core.exceptions import PuzzleFormatError
from sudoku_hints.engine.board import Board
from sudoku_hints.io.keys import apply_key
from sudoku_hints.io.puzzle import (
    DEFAULT_PUZZLE,
    board_from_text,
    format_puzzle,
    load_puzzle,
    parse_puzzle,
)
from sudoku_hints.utils.pretty import format_board, format_candidates, print_fill_stats


BOXED_PUZZLE = """\
# sample with separators
4 . . | 6 . . | 2 . 1
. . . | . . . | . . .
. . 6 | . . . | . . .
------+-------+------
5 2 . | . . 1 | . . .
. . 7 | . . . | . . .
3 . . | . . 4 | 8 . 7
------+-------+------
. . . | . . . | . 1 5
. 8 . | 5 . . | . . .
0 0 0 | 0 0 0 | 0 0 0
"""


class PuzzleParsingTests(unittest.TestCase):
    def test_default_puzzle_layout(self) -> None:
        grid = parse_puzzle(DEFAULT_PUZZLE)
        self.assertEqual(len(grid), 9)
        self.assertEqual(grid[0][1], 7)
        self.assertEqual(grid[0][5], 9)
        self.assertEqual(grid[8][3], 5)
        self.assertEqual(sum(1 for row in grid for v in row if v), 21)

    def test_separators_and_comments_are_ignored(self) -> None:
        grid = parse_puzzle(BOXED_PUZZLE)
        self.assertEqual(grid[0], [4, 0, 0, 6, 0, 0, 2, 0, 1])
        self.assertEqual(grid[3], [5, 2, 0, 0, 0, 1, 0, 0, 0])
        self.assertEqual(grid[8], [0] * 9)

    def test_wrong_shapes_raise(self) -> None:
        lines = DEFAULT_PUZZLE.splitlines()
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("\n".join(lines[:8]))
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("\n".join(lines + [lines[0]]))
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("\n".join([lines[0] + "1"] + lines[1:]))

    def test_unknown_symbol_raises(self) -> None:
        lines = DEFAULT_PUZZLE.splitlines()
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("\n".join(["x" + lines[0][1:]] + lines[1:]))

    def test_format_puzzle(self) -> None:
        self.assertEqual(format_puzzle(parse_puzzle(DEFAULT_PUZZLE)), DEFAULT_PUZZLE)

    def test_load_puzzle_and_board_from_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "puzzle.txt"
            path.write_text(BOXED_PUZZLE, encoding="utf-8")
            self.assertEqual(load_puzzle(path), parse_puzzle(BOXED_PUZZLE))

        board = board_from_text(DEFAULT_PUZZLE, diagonals=False)
        self.assertEqual(len(board.zones), 27)
        self.assertTrue(board.cell(2, 1).is_prefilled)


class KeyInputTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.from_grid(parse_puzzle(DEFAULT_PUZZLE))

    def test_digit_and_clear_keys(self) -> None:
        cell = self.board.cell(1, 1)
        self.assertTrue(apply_key(self.board, cell, "3"))
        self.assertEqual(cell.value, 3)
        self.assertTrue(apply_key(self.board, cell, "0"))
        self.assertEqual(cell.value, 0)

    def test_ignored_input(self) -> None:
        cell = self.board.cell(1, 1)
        for key in ("a", "Enter", "10", ""):
            self.assertFalse(apply_key(self.board, cell, key))
        self.assertFalse(apply_key(self.board, None, "4"))
        given = self.board.cell(2, 1)
        self.assertFalse(apply_key(self.board, given, "4"))
        self.assertEqual(given.value, 7)


class PrettyPrintTests(unittest.TestCase):
    def test_format_board_and_candidates(self) -> None:
        board = Board.from_grid(parse_puzzle(DEFAULT_PUZZLE))
        board.add_hint(board.cell(1, 1), 3)

        rendered = format_board(board)
        self.assertIn(" 1 |  .  7", rendered)
        candidates = format_candidates(board)
        self.assertIn("12456789", candidates)
        self.assertIn("[7]", candidates)

    def test_print_fill_stats(self) -> None:
        board = Board.from_grid(parse_puzzle(DEFAULT_PUZZLE))
        eliminations = board.fill()
        stream = io.StringIO()
        print_fill_stats(board, eliminations, passes=1, stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Hints ---", output)
        self.assertIn(f"Added:         {len(eliminations)}", output)
        self.assertIn("PLACED_VALUE", output)
        self.assertIn("Empty cells:   60", output)


class CliTests(unittest.TestCase):
    def test_prints_json_without_output_file(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main.main(["--log-level", "WARNING"])
        payload = json.loads(stdout.getvalue())
        self.assertTrue(payload["diagonals"])
        self.assertEqual(payload["passes"], 1)
        self.assertEqual(len(payload["board"]), 9)
        self.assertTrue(payload["eliminations"])

    def test_writes_output_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            puzzle = Path(tmpdir) / "puzzle.txt"
            puzzle.write_text(BOXED_PUZZLE, encoding="utf-8")
            output = Path(tmpdir) / "out.json"
            stdout = io.StringIO()
            with redirect_stdout(stdout):
                main.main([
                    "--puzzle", str(puzzle),
                    "--no-diagonals",
                    "--passes", "3",
                    "--output", str(output),
                    "--log-level", "WARNING",
                ])
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertFalse(payload["diagonals"])
        self.assertLessEqual(payload["passes"], 3)
        self.assertEqual(payload["board"][0][0]["value"], 4)
        self.assertIn("--- Hints ---", stdout.getvalue())

    def test_rejects_bad_input(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            puzzle = Path(tmpdir) / "bad.txt"
            puzzle.write_text("123\n", encoding="utf-8")
            with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
                main.main(["--puzzle", str(puzzle)])
        with self.assertRaises(SystemExit):
            main.main(["--passes", "0"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
