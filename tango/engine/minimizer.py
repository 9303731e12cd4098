"""Greedy reduction of a given Tango puzzle to a local minimum.

Starting from a fully (or partially) given puzzle, the minimizer repeatedly
looks for the first given cell, in row-major order, that can either be
removed outright or traded for a Same/Different clue with a given neighbour
while the puzzle keeps exactly one solution. Every accepted change restarts
the scan; a scan without changes ends the search.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from ..core.constants import GRID_SIZE, ORTHOGONAL_STEPS, ConstraintType
from ..utils.logger import get_logger
from .grid import TangoPuzzle
from .cpsat import has_unique_solution_cpsat
from .solver import has_unique_solution


LOGGER = get_logger(__name__)

ORACLES = ("backtracking", "cpsat")
CONSTRAINT_TYPES: Tuple[ConstraintType, ...] = (ConstraintType.SAME, ConstraintType.DIFFERENT)


@dataclass
class MinimizerConfig:
    include_constraints: bool = True
    oracle: str = "backtracking"
    cpsat_timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.oracle not in ORACLES:
            raise ValueError(f"Unknown uniqueness oracle {self.oracle!r}; expected one of {ORACLES}")


class PuzzleMinimizer:
    """Removes givens, or swaps them for clues, while the solution stays unique."""

    def __init__(self, config: Optional[MinimizerConfig] = None) -> None:
        self.config = config or MinimizerConfig()
        self.steps = 0
        self._is_unique = self._select_oracle()

    def _select_oracle(self) -> Callable[[TangoPuzzle], bool]:
        if self.config.oracle == "cpsat":
            timeout = self.config.cpsat_timeout
            return lambda puzzle: has_unique_solution_cpsat(puzzle, timeout=timeout)
        return has_unique_solution

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def minimize(self, puzzle: TangoPuzzle) -> TangoPuzzle:
        """Return a reduced copy of ``puzzle``; the argument is left untouched."""

        working = puzzle.copy()
        self.steps = 0
        start_score = self._score(working)
        while self._try_simplify(working):
            self.steps += 1
        LOGGER.debug(
            "Minimised puzzle in %d steps (score %d -> %d)",
            self.steps,
            start_score,
            self._score(working),
        )
        return working

    def _score(self, puzzle: TangoPuzzle) -> int:
        if self.config.include_constraints:
            return puzzle.score
        return puzzle.cells_set

    # ------------------------------------------------------------------
    # Simplification steps
    # ------------------------------------------------------------------
    def _try_simplify(self, puzzle: TangoPuzzle) -> bool:
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                if not puzzle.is_cell_fixed(row, col):
                    continue

                if self._can_remove_cell(puzzle, row, col):
                    puzzle.unfix_cell(row, col)
                    LOGGER.debug("Removed given at (%d,%d)", row, col)
                    return True

                if self.config.include_constraints and self._try_replace_with_constraint(
                    puzzle, row, col
                ):
                    return True
        return False

    def _can_remove_cell(self, puzzle: TangoPuzzle, row: int, col: int) -> bool:
        candidate = puzzle.copy()
        candidate.unfix_cell(row, col)
        return self._is_unique(candidate)

    def _try_replace_with_constraint(self, puzzle: TangoPuzzle, row: int, col: int) -> bool:
        for r2, c2 in adjacent_fixed_cells(puzzle, row, col):
            for constraint_type in clue_types_for(puzzle, (row, col), (r2, c2)):
                candidate = puzzle.copy()
                candidate.unfix_cell(row, col)
                candidate.add_constraint(row, col, r2, c2, constraint_type)
                if not self._is_unique(candidate):
                    continue

                puzzle.unfix_cell(row, col)
                puzzle.add_constraint(row, col, r2, c2, constraint_type)
                LOGGER.debug(
                    "Replaced given at (%d,%d) with %s clue to (%d,%d)",
                    row, col, constraint_type.value, r2, c2,
                )
                return True
        return False


def adjacent_fixed_cells(puzzle: TangoPuzzle, row: int, col: int) -> Iterator[Tuple[int, int]]:
    """Given neighbours of ``(row, col)`` in up, down, left, right order."""

    for dr, dc in ORTHOGONAL_STEPS:
        nr, nc = row + dr, col + dc
        if puzzle.bounds.contains(nr, nc) and puzzle.is_cell_fixed(nr, nc):
            yield nr, nc


def clue_types_for(
    puzzle: TangoPuzzle, first: Tuple[int, int], second: Tuple[int, int]
) -> Iterator[ConstraintType]:
    """Clue types, Same before Different, that hold for the two current values.

    A clue that contradicts the givens could pin down a different grid.
    """

    same = puzzle.get_cell(*first) == puzzle.get_cell(*second)
    for constraint_type in CONSTRAINT_TYPES:
        if (constraint_type == ConstraintType.SAME) == same:
            yield constraint_type


def minimize(puzzle: TangoPuzzle, include_constraints: bool) -> TangoPuzzle:
    return PuzzleMinimizer(MinimizerConfig(include_constraints=include_constraints)).minimize(puzzle)
