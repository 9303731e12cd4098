"""Shared constants and enumerations for the Tango puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


GRID_SIZE = 6


class Symbol(str, Enum):
    """Cell contents. ``X`` sorts before ``Y`` in canonical keys."""

    EMPTY = " "
    X = "X"
    Y = "Y"

    def swapped(self) -> "Symbol":
        if self is Symbol.X:
            return Symbol.Y
        if self is Symbol.Y:
            return Symbol.X
        return self


FILLED_SYMBOLS: Tuple[Symbol, ...] = (Symbol.X, Symbol.Y)


class ConstraintType(str, Enum):
    """Adjacency clue placed between two neighbouring cells."""

    SAME = "SAME"
    DIFFERENT = "DIFFERENT"


# Up, down, left, right: the order neighbours are tried when swapping a given for a clue.
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


GRID_BOUNDS = Bounds(rows=GRID_SIZE, cols=GRID_SIZE)
