"""Board representation: cell table, zone topology and the mutation API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..core.constants import BOARD_SIZE, BOX_SIZE, CENTER, ZoneKind, is_digit, on_board
from ..core.exceptions import BoardLayoutError
from ..core.models import Cell, Elimination, Zone
from ..utils.logger import get_logger
from .deduction import HintFiller


LOGGER = get_logger(__name__)

Grid = Sequence[Sequence[Optional[int]]]


@dataclass
class BoardConfig:
    """Configuration values driving the zone layout."""

    diagonals: bool = True


class Board:
    """Owns the 81 cells and the fixed set of zones built over them.

    All hint and value changes go through :meth:`set_value`, :meth:`add_hint`
    and :meth:`remove_hint`; invalid requests are ignored rather than raised.
    """

    def __init__(self, cells: Iterable[Cell], config: Optional[BoardConfig] = None) -> None:
        self.config = config or BoardConfig()
        self.cells: List[Optional[Cell]] = [None] * (BOARD_SIZE * BOARD_SIZE)
        for cell in cells:
            if not on_board(cell.x, cell.y):
                raise BoardLayoutError(f"Cell outside the board: {cell.coords}")
            index = self._index(cell.x, cell.y)
            if self.cells[index] is not None:
                raise BoardLayoutError(f"Duplicate cell at {cell.coords}")
            self.cells[index] = cell
        missing = [i for i, cell in enumerate(self.cells) if cell is None]
        if missing:
            raise BoardLayoutError(f"Board is missing {len(missing)} cells")

        self.zones: List[Zone] = self._build_zones()
        self.diagonals: List[Zone] = [zone for zone in self.zones if zone.is_diagonal]
        self.center: Cell = self.cell(*CENTER)
        LOGGER.debug(
            "Built board with %s zones (diagonals=%s)", len(self.zones), self.is_diagonals
        )

    @classmethod
    def from_grid(cls, grid: Grid, diagonals: bool = True) -> "Board":
        """Build a board from 9 rows of 9 optional digits (``grid[y-1][x-1]``)."""

        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise BoardLayoutError("Grid must be 9 rows of 9 values")
        cells = [
            Cell(x, y, grid[y - 1][x - 1] or 0)
            for y in range(1, BOARD_SIZE + 1)
            for x in range(1, BOARD_SIZE + 1)
        ]
        return cls(cells, BoardConfig(diagonals=diagonals))

    @property
    def is_diagonals(self) -> bool:
        return self.config.diagonals

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------
    @staticmethod
    def _index(x: int, y: int) -> int:
        return (y - 1) * BOARD_SIZE + (x - 1)

    def _zone(self, kind: ZoneKind, index: int, coords: Iterable[tuple]) -> Zone:
        return Zone(kind=kind, index=index, cells=tuple(self.cell(x, y) for x, y in coords))

    def _build_zones(self) -> List[Zone]:
        span = range(1, BOARD_SIZE + 1)
        zones = [self._zone(ZoneKind.ROW, r, ((x, r) for x in span)) for r in span]
        zones.extend(self._zone(ZoneKind.COLUMN, c, ((c, y) for y in span)) for c in span)

        boxes_per_side = BOARD_SIZE // BOX_SIZE
        for by in range(boxes_per_side):
            for bx in range(boxes_per_side):
                coords = [
                    (bx * BOX_SIZE + dx + 1, by * BOX_SIZE + dy + 1)
                    for dy in range(BOX_SIZE)
                    for dx in range(BOX_SIZE)
                ]
                zones.append(self._zone(ZoneKind.BOX, by * boxes_per_side + bx + 1, coords))

        if self.is_diagonals:
            zones.append(self._zone(ZoneKind.DIAGONAL, 1, ((i, i) for i in span)))
            zones.append(
                self._zone(ZoneKind.ANTI_DIAGONAL, 2, ((BOARD_SIZE + 1 - i, i) for i in span))
            )
        return zones

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Optional[Cell]:
        if not on_board(x, y):
            return None
        return self.cells[self._index(x, y)]

    def resolve(self, cell: Optional[Cell]) -> Optional[Cell]:
        """Return this board's cell at the position of ``cell``."""

        if cell is None:
            return None
        return self.cell(cell.x, cell.y)

    def intersections(self, cells: Sequence[Cell]) -> List[Zone]:
        """Every zone holding all of ``cells``, in zone order."""

        if not cells:
            return []
        return [zone for zone in self.zones if all(zone.contains(cell) for cell in cells)]

    def zones_of(self, cell: Cell) -> List[Zone]:
        return self.intersections([cell])

    def is_on_diagonal(self, cell: Cell) -> bool:
        return any(zone.contains(cell) for zone in self.diagonals)

    def diagonals_of(self, cell: Cell) -> List[Zone]:
        return [zone for zone in self.diagonals if zone.contains(cell)]

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def set_value(self, cell: Cell, value: Optional[int]) -> bool:
        """Place ``value`` in ``cell`` (0 or None clears). Candidates are untouched."""

        target = self.resolve(cell)
        if target is None or target.is_prefilled:
            LOGGER.debug("Ignoring value %s for fixed or unknown cell %s", value, cell)
            return False
        value = value or 0
        if value and not is_digit(value):
            LOGGER.debug("Ignoring invalid value %r for %s", value, target.coords)
            return False
        if target.value == value:
            return False
        target.value = value
        return True

    def add_hint(self, cell: Cell, value: int) -> bool:
        target = self.resolve(cell)
        return target is not None and target.add_hint(value)

    def remove_hint(self, cell: Cell, value: int) -> bool:
        target = self.resolve(cell)
        return target is not None and target.remove_hint(value)

    def toggle_hint(self, cell: Cell, value: int) -> bool:
        """Flip a hint the way a click on its marker does. Returns True when changed."""

        target = self.resolve(cell)
        if target is None:
            return False
        if target.has_hint(value):
            return target.remove_hint(value)
        return target.add_hint(value)

    def fill(self) -> List[Elimination]:
        """Run one deduction pass and return the hints it added."""

        return HintFiller(self).fill()

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def values_grid(self) -> List[List[int]]:
        return [
            [self.cell(x, y).value for x in range(1, BOARD_SIZE + 1)]
            for y in range(1, BOARD_SIZE + 1)
        ]

    def to_jsonable(self) -> List[List[dict]]:
        serialized: List[List[dict]] = []
        for y in range(1, BOARD_SIZE + 1):
            serialized_row: List[dict] = []
            for x in range(1, BOARD_SIZE + 1):
                cell = self.cell(x, y)
                serialized_row.append(
                    {
                        "x": cell.x,
                        "y": cell.y,
                        "value": cell.value,
                        "prefilled": cell.is_prefilled,
                        "hints": sorted(cell.hints),
                    }
                )
            serialized.append(serialized_row)
        return serialized

