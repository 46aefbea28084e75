"""Candidate elimination pass over a board.

One call to :meth:`HintFiller.fill` walks the board once:

  1. Placed values: a valued cell rules its digit out for the rest of every
     zone it belongs to.
  2. For each zone and digit, the cells still able to take the digit are
     collected. With two or more of them the advanced rules below may apply.
  3. Diagonal pair (diagonal boards only): two candidates that both sit on a
     diagonal away from the center put the digit on a diagonal, so the center,
     shared by both diagonals, cannot take it.
  4. Aligned diagonal pair: two diagonal candidates sharing a row or column
     also rule the digit out for the other diagonal cells in their rows and
     columns.
  5. Diagonal projection: a diagonal candidate paired with an off-diagonal
     one in the same row (column) excludes the diagonal cell found in the
     other candidate's column (row).
  6. Zone intersection: when every candidate of a zone lies inside another
     zone, the rest of that other zone cannot take the digit.

The pass is not iterated to a fixed point; callers re-run it to propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..core.constants import BOARD_SIZE, DIGITS, Rule, ZoneKind, on_board
from ..core.models import Cell, Elimination, Zone
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .board import Board


LOGGER = get_logger(__name__)


def project_onto_diagonal(a: Cell, b: Cell, kind: ZoneKind) -> Optional[Tuple[int, int]]:
    """Return the cell of diagonal ``kind`` lined up with ``b`` across from ``a``.

    ``a`` lies on the diagonal. When ``a`` and ``b`` share a row the result is
    the diagonal cell in ``b``'s column; when they share a column it is the
    diagonal cell in ``b``'s row. Any other layout has no projection.
    """

    sign = 1 if kind == ZoneKind.DIAGONAL else -1
    if a.y == b.y:
        x, y = b.x, a.y + sign * (b.x - a.x)
    elif a.x == b.x:
        x, y = a.x + sign * (b.y - a.y), b.y
    else:
        return None
    if not on_board(x, y):
        return None
    return x, y


class HintFiller:
    """Runs a single deduction pass, writing through the board's mutation API."""

    def __init__(self, board: "Board") -> None:
        self.board = board
        self.eliminations: List[Elimination] = []

    def fill(self) -> List[Elimination]:
        self.eliminations = []
        for zone in self.board.zones:
            self._apply_placed_values(zone)

        for zone in self.board.zones:
            for value in DIGITS:
                cells = zone.available(value)
                if len(cells) < 2:
                    continue
                if self.board.is_diagonals and len(cells) == 2:
                    self._diagonal_pair_center(zone, value, cells)
                    self._diagonal_pair_aligned(zone, value, cells)
                    self._diagonal_projection(zone, value, cells)
                self._zone_intersection(zone, value, cells)

        LOGGER.info(
            "Fill pass added %s hints across %s zones",
            len(self.eliminations),
            len(self.board.zones),
        )
        return self.eliminations

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _eliminate(self, cell: Optional[Cell], value: int, rule: Rule, zone: Zone) -> None:
        if cell is None or not cell.is_empty:
            return
        if not self.board.add_hint(cell, value):
            return
        LOGGER.debug(
            "%s: %s ruled out at (%s,%s) via %s", rule.value, value, cell.x, cell.y, zone.name
        )
        self.eliminations.append(
            Elimination(x=cell.x, y=cell.y, value=value, rule=rule, zone=zone.name)
        )

    @staticmethod
    def _is_candidate(cell: Cell, cells: Sequence[Cell]) -> bool:
        return any(cell.is_(candidate) for candidate in cells)

    def _diagonal_pair(self, zone: Zone, cells: Sequence[Cell]) -> bool:
        return not zone.is_diagonal and all(self.board.is_on_diagonal(c) for c in cells)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------
    def _apply_placed_values(self, zone: Zone) -> None:
        for value in zone.placed_values():
            for other in zone:
                if other.is_empty:
                    self._eliminate(other, value, Rule.PLACED_VALUE, zone)

    def _diagonal_pair_center(self, zone: Zone, value: int, cells: Sequence[Cell]) -> None:
        center = self.board.center
        if not self._diagonal_pair(zone, cells) or self._is_candidate(center, cells):
            return
        self._eliminate(center, value, Rule.DIAGONAL_PAIR_CENTER, zone)

    def _diagonal_pair_aligned(self, zone: Zone, value: int, cells: Sequence[Cell]) -> None:
        if not self._diagonal_pair(zone, cells):
            return
        a, b = cells
        if a.x != b.x and a.y != b.y:
            return

        if not self._is_candidate(self.board.center, cells):
            self._eliminate(self.board.center, value, Rule.DIAGONAL_PAIR_ALIGNED, zone)
        xs = {a.x, b.x}
        ys = {a.y, b.y}
        for diagonal in self.board.diagonals:
            for cell in diagonal:
                if self._is_candidate(cell, cells):
                    continue
                if cell.x in xs or cell.y in ys:
                    self._eliminate(cell, value, Rule.DIAGONAL_PAIR_ALIGNED, zone)

    def _diagonal_projection(self, zone: Zone, value: int, cells: Sequence[Cell]) -> None:
        on_diagonal = [self.board.is_on_diagonal(c) for c in cells]
        if sum(on_diagonal) != 1:
            return
        a, b = cells if on_diagonal[0] else reversed(cells)

        for diagonal in self.board.diagonals_of(a):
            target = project_onto_diagonal(a, b, diagonal.kind)
            if target is None:
                continue
            cell = self.board.cell(*target)
            if cell is None or self._is_candidate(cell, cells) or cell.is_prefilled:
                continue
            self._eliminate(cell, value, Rule.DIAGONAL_PROJECTION, zone)

    def _zone_intersection(self, zone: Zone, value: int, cells: Sequence[Cell]) -> None:
        for other in self.board.intersections(cells):
            if other == zone:
                continue
            for cell in other:
                if not self._is_candidate(cell, cells):
                    self._eliminate(cell, value, Rule.ZONE_INTERSECTION, zone)


def fill(board: "Board") -> List[Elimination]:
    """Run one deduction pass over ``board``."""

    return HintFiller(board).fill()


def fill_until_stable(
    board: "Board", max_passes: int = BOARD_SIZE * BOARD_SIZE
) -> Tuple[List[Elimination], int]:
    """Re-run the pass until it adds nothing or ``max_passes`` is reached.

    Returns every hint added and the number of passes run.
    """

    added: List[Elimination] = []
    passes = 0
    while passes < max_passes:
        step = fill(board)
        passes += 1
        added.extend(step)
        if not step:
            LOGGER.info("Board stable after %s passes", passes)
            break
    return added, passes
