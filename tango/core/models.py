"""Data models supporting the Tango puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .constants import ConstraintType, Symbol


Position = Tuple[int, int]


def pair_key(first: Position, second: Position) -> Tuple[Position, Position]:
    return (first, second) if first <= second else (second, first)


@dataclass(frozen=True)
class Constraint:
    """A Same/Different clue between two orthogonally adjacent cells."""

    row1: int
    col1: int
    row2: int
    col2: int
    type: ConstraintType

    @property
    def first(self) -> Position:
        return (self.row1, self.col1)

    @property
    def second(self) -> Position:
        return (self.row2, self.col2)

    @property
    def key(self) -> Tuple[Position, Position]:
        """Unordered pair identity: ``(a, b)`` and ``(b, a)`` share a key."""
        return pair_key(self.first, self.second)

    def holds(self, value1: Symbol, value2: Symbol) -> bool:
        if value1 == Symbol.EMPTY or value2 == Symbol.EMPTY:
            return True
        if self.type == ConstraintType.SAME:
            return value1 == value2
        return value1 != value2
