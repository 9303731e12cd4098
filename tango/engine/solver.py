"""Backtracking enumeration of Tango grid completions.

The search walks cells in row-major order, tries ``X`` before ``Y`` on every
free cell and only descends while the partial grid stays legal. It mutates
the puzzle it is given and undoes every placement on the way back, so the
caller must own that puzzle for as long as the generator is alive.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional

from ..core.constants import FILLED_SYMBOLS, GRID_SIZE, Symbol
from .grid import TangoPuzzle

CELL_COUNT = GRID_SIZE * GRID_SIZE


def enumerate_solutions(puzzle: TangoPuzzle) -> Iterator[TangoPuzzle]:
    """Yield every legal completion of ``puzzle`` as a new fully fixed puzzle.

    An illegal starting puzzle yields nothing; a fully fixed legal one yields
    exactly itself. Each call starts a fresh traversal.
    """

    if not puzzle.is_legal():
        return
    yield from _search(puzzle, 0)


def _search(puzzle: TangoPuzzle, index: int) -> Iterator[TangoPuzzle]:
    if index == CELL_COUNT:
        yield TangoPuzzle.from_grid(puzzle.cells, puzzle.constraints)
        return

    row, col = divmod(index, GRID_SIZE)
    if puzzle.fixed[row][col]:
        yield from _search(puzzle, index + 1)
        return

    cells = puzzle.cells
    try:
        for symbol in FILLED_SYMBOLS:
            cells[row][col] = symbol
            if puzzle.is_placement_legal(row, col):
                yield from _search(puzzle, index + 1)
    finally:
        # Runs on exhaustion and when a caller closes the generator early.
        cells[row][col] = Symbol.EMPTY


def count_solutions(puzzle: TangoPuzzle, limit: Optional[int] = None) -> int:
    """Count completions of a copy of ``puzzle``, stopping after ``limit``."""

    solutions = enumerate_solutions(puzzle.copy())
    if limit is not None:
        solutions = islice(solutions, limit)
    return sum(1 for _ in solutions)


def has_unique_solution(puzzle: TangoPuzzle) -> bool:
    # Two solutions are enough to prove ambiguity.
    return count_solutions(puzzle, limit=2) == 1
