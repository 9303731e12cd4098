"""Grid representation and legality checks."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.constants import FILLED_SYMBOLS, GRID_BOUNDS, GRID_SIZE, ConstraintType, Symbol
from ..core.exceptions import (InvalidGridShapeError, InvalidSymbolError,
                               NotAdjacentError, OutOfRangeError)
from ..core.models import Constraint, Position, pair_key
from ..utils.pretty import format_puzzle


SymbolLike = Union[Symbol, str]


def to_symbol(value: SymbolLike) -> Symbol:
    """Coerce ``value`` to a filled symbol, rejecting anything but X/Y."""

    try:
        symbol = Symbol(value)
    except ValueError:
        raise InvalidSymbolError(f"Invalid symbol {value!r} - must be X or Y") from None
    if symbol not in FILLED_SYMBOLS:
        raise InvalidSymbolError(f"Invalid symbol {value!r} - must be X or Y")
    return symbol


class TangoPuzzle:
    """A 6x6 Tango grid: cell values, given flags and adjacency clues.

    Cells that are not fixed may be empty or hold a value placed by the
    solver. The solver mutates cells in place while it owns the puzzle, so any
    caller that wants to explore alternatives must work on :meth:`copy`.
    """

    def __init__(self) -> None:
        self.bounds = GRID_BOUNDS
        self.cells: List[List[Symbol]] = [
            [Symbol.EMPTY for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)
        ]
        self.fixed: List[List[bool]] = [
            [False for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)
        ]
        self._constraints: Dict[Tuple[Position, Position], Constraint] = {}
        self._constraints_by_cell: Dict[Position, List[Constraint]] = {}

    @classmethod
    def from_grid(
        cls,
        rows: Sequence[Sequence[SymbolLike]],
        constraints: Iterable[Constraint] = (),
    ) -> "TangoPuzzle":
        """Build a puzzle whose filled cells are all givens; ``" "`` cells stay free."""

        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise InvalidGridShapeError(
                f"Invalid grid size - expected {GRID_SIZE}x{GRID_SIZE}"
            )
        puzzle = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value == Symbol.EMPTY:
                    continue
                puzzle.set_cell(r, c, value)
        for constraint in constraints:
            puzzle.add_constraint(
                constraint.row1, constraint.col1, constraint.row2, constraint.col2, constraint.type
            )
        return puzzle

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _validate_position(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise OutOfRangeError(f"Invalid position {(row, col)}")

    def get_cell(self, row: int, col: int) -> Symbol:
        self._validate_position(row, col)
        return self.cells[row][col]

    def is_cell_fixed(self, row: int, col: int) -> bool:
        self._validate_position(row, col)
        return self.fixed[row][col]

    def set_cell(self, row: int, col: int, value: SymbolLike) -> None:
        self._validate_position(row, col)
        self.cells[row][col] = to_symbol(value)
        self.fixed[row][col] = True

    def unfix_cell(self, row: int, col: int) -> None:
        self._validate_position(row, col)
        self.fixed[row][col] = False
        self.cells[row][col] = Symbol.EMPTY

    # ------------------------------------------------------------------
    # Constraints
    # ------------------------------------------------------------------
    def add_constraint(
        self, row1: int, col1: int, row2: int, col2: int, type: ConstraintType
    ) -> Constraint:
        self._validate_position(row1, col1)
        self._validate_position(row2, col2)
        if abs(row1 - row2) + abs(col1 - col2) != 1:
            raise NotAdjacentError(
                f"Invalid constraint - cells {(row1, col1)} and {(row2, col2)} must be adjacent"
            )

        constraint = Constraint(row1, col1, row2, col2, ConstraintType(type))
        previous = self._constraints.get(constraint.key)
        if previous is not None:
            for cell in (previous.first, previous.second):
                self._constraints_by_cell[cell].remove(previous)
        self._constraints[constraint.key] = constraint
        for cell in (constraint.first, constraint.second):
            self._constraints_by_cell.setdefault(cell, []).append(constraint)
        return constraint

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints.values())

    def constraint_between(self, first: Position, second: Position) -> Optional[Constraint]:
        return self._constraints.get(pair_key(first, second))

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------
    @property
    def cells_set(self) -> int:
        return sum(flag for row in self.fixed for flag in row)

    @property
    def constraints_set(self) -> int:
        return len(self._constraints)

    @property
    def score(self) -> int:
        """Givens plus clues; lower means a harder puzzle."""
        return self.cells_set + self.constraints_set

    def is_complete(self) -> bool:
        return all(value != Symbol.EMPTY for row in self.cells for value in row)

    def rows(self) -> List[List[Symbol]]:
        return [list(row) for row in self.cells]

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def is_legal(self) -> bool:
        return (
            not self._has_three_consecutive()
            and self._has_valid_distribution()
            and self._satisfies_constraints()
        )

    def _lines(self) -> Iterable[List[Symbol]]:
        for i in range(GRID_SIZE):
            yield self.cells[i]
            yield [self.cells[j][i] for j in range(GRID_SIZE)]

    def _has_three_consecutive(self) -> bool:
        return any(_line_has_three_consecutive(line) for line in self._lines())

    def _has_valid_distribution(self) -> bool:
        return all(_line_is_balanced(line) for line in self._lines())

    def _satisfies_constraints(self) -> bool:
        cells = self.cells
        return all(
            c.holds(cells[c.row1][c.col1], cells[c.row2][c.col2])
            for c in self._constraints.values()
        )

    def is_placement_legal(self, row: int, col: int) -> bool:
        """Check only the rules that a value at ``(row, col)`` can break.

        On a grid that was legal before the placement this agrees with
        :meth:`is_legal`, at a fraction of the cost.
        """

        cells = self.cells
        row_line = cells[row]
        col_line = [cells[r][col] for r in range(GRID_SIZE)]
        if _window_has_three(row_line, col) or _window_has_three(col_line, row):
            return False
        if not _line_is_balanced(row_line) or not _line_is_balanced(col_line):
            return False
        for c in self._constraints_by_cell.get((row, col), ()):
            if not c.holds(cells[c.row1][c.col1], cells[c.row2][c.col2]):
                return False
        return True

    # ------------------------------------------------------------------
    # Copying and display
    # ------------------------------------------------------------------
    def copy(self) -> "TangoPuzzle":
        clone = TangoPuzzle()
        clone.cells = [list(row) for row in self.cells]
        clone.fixed = [list(row) for row in self.fixed]
        clone._constraints = dict(self._constraints)
        clone._constraints_by_cell = {
            cell: list(items) for cell, items in self._constraints_by_cell.items()
        }
        return clone

    def __str__(self) -> str:
        return format_puzzle(self)

    def __repr__(self) -> str:
        return (
            f"TangoPuzzle(cells_set={self.cells_set}, "
            f"constraints_set={self.constraints_set})"
        )


def _line_has_three_consecutive(line: Sequence[Symbol]) -> bool:
    for j in range(GRID_SIZE - 2):
        if line[j] != Symbol.EMPTY and line[j] == line[j + 1] == line[j + 2]:
            return True
    return False


def _window_has_three(line: Sequence[Symbol], index: int) -> bool:
    for start in range(max(0, index - 2), min(index, GRID_SIZE - 3) + 1):
        if line[start] != Symbol.EMPTY and line[start] == line[start + 1] == line[start + 2]:
            return True
    return False


def _line_is_balanced(line: Sequence[Symbol]) -> bool:
    # Partial lines cannot be judged yet.
    if Symbol.EMPTY in line:
        return True
    return line.count(Symbol.X) == line.count(Symbol.Y)
