"""Data models supporting the hint engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from .constants import DIGITS, FULL_MASK, Rule, ZoneKind, is_digit


@dataclass(eq=False)
class Cell:
    """A board position with its value and candidate bookkeeping.

    Hints are eliminations: a digit in ``hints`` is known to be impossible for
    the cell. ``hints`` and ``available`` are two views over one bit mask, so
    they always partition 1..9.
    """

    x: int
    y: int
    value: int = 0
    _prefilled: bool = field(default=False, init=False, repr=False)
    _mask: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.value = self.value or 0
        self._prefilled = bool(self.value)

    @property
    def is_prefilled(self) -> bool:
        return self._prefilled

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def coords(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def hints(self) -> FrozenSet[int]:
        return frozenset(d for d in DIGITS if self._mask & (1 << d))

    @property
    def available(self) -> FrozenSet[int]:
        free = FULL_MASK & ~self._mask
        return frozenset(d for d in DIGITS if free & (1 << d))

    def has_hint(self, value: int) -> bool:
        return is_digit(value) and bool(self._mask & (1 << value))

    def add_hint(self, value: int) -> bool:
        """Rule ``value`` out for this cell. Returns True when state changed."""

        if self._prefilled or not is_digit(value) or self.has_hint(value):
            return False
        self._mask |= 1 << value
        return True

    def remove_hint(self, value: int) -> bool:
        """Put ``value`` back among the candidates. Returns True when state changed."""

        if self._prefilled or not self.has_hint(value):
            return False
        self._mask &= ~(1 << value)
        return True

    def is_(self, other: Optional["Cell"]) -> bool:
        """Positional equality; two references may describe the same square."""

        return other is not None and self.x == other.x and self.y == other.y

    same_position = is_


@dataclass(frozen=True)
class Zone:
    """Nine cells that must hold each digit exactly once.

    Identity is the set of member coordinates, so two zones built through
    different paths over the same squares compare equal.
    """

    kind: ZoneKind = field(compare=False)
    index: int = field(compare=False)
    cells: Tuple[Cell, ...] = field(compare=False, repr=False)
    key: FrozenSet[Tuple[int, int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", frozenset(cell.coords for cell in self.cells))

    @property
    def is_diagonal(self) -> bool:
        return self.kind.is_diagonal

    @property
    def name(self) -> str:
        return f"{self.kind.value.lower()} {self.index}"

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def contains(self, cell: Cell) -> bool:
        return cell.coords in self.key

    def available(self, value: int) -> List[Cell]:
        """Empty cells of this zone where ``value`` is still a candidate."""

        return [
            cell
            for cell in self.cells
            if cell.is_empty and not cell.is_prefilled and not cell.has_hint(value)
        ]

    def placed_values(self) -> Dict[int, Cell]:
        placed: Dict[int, Cell] = {}
        for cell in self.cells:
            if cell.value:
                placed.setdefault(cell.value, cell)
        return placed


@dataclass(frozen=True)
class Elimination:
    """One hint added to a cell, with the rule and zone that produced it."""

    x: int
    y: int
    value: int
    rule: Rule
    zone: Optional[str] = None

    def to_jsonable(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "value": self.value,
            "rule": self.rule.value,
            "zone": self.zone,
        }
