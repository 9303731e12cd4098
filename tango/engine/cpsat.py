"""CP-SAT solution counting for Tango puzzles using OR-Tools.

Independent of the backtracking enumerator, so it doubles as a cross-check
and as an alternative uniqueness oracle for the minimizer.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ortools.sat.python import cp_model

from ..core.constants import GRID_SIZE, ConstraintType, Symbol
from ..utils.logger import get_logger
from .grid import TangoPuzzle

LOGGER = get_logger(__name__)


class _SolutionCounter(cp_model.CpSolverSolutionCallback):
    """Counts solutions and stops the search once ``limit`` is reached."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.count = 0

    def on_solution_callback(self) -> None:
        self.count += 1
        if self.count >= self.limit:
            self.stop_search()


def build_model(puzzle: TangoPuzzle) -> Tuple[cp_model.CpModel, Dict[Tuple[int, int], cp_model.IntVar]]:
    """Model the puzzle with one Boolean per cell (1 means ``Y``)."""

    model = cp_model.CpModel()
    cell_vars: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            cell_vars[(r, c)] = model.new_bool_var(f"Y_{r}_{c}")

    lines: List[List[cp_model.IntVar]] = []
    for i in range(GRID_SIZE):
        lines.append([cell_vars[(i, j)] for j in range(GRID_SIZE)])
        lines.append([cell_vars[(j, i)] for j in range(GRID_SIZE)])

    for line in lines:
        model.add(sum(line) == GRID_SIZE // 2)
        for j in range(GRID_SIZE - 2):
            window = line[j:j + 3]
            model.add_linear_constraint(sum(window), 1, 2)

    for (r, c), var in cell_vars.items():
        if puzzle.fixed[r][c]:
            model.add(var == (1 if puzzle.cells[r][c] == Symbol.Y else 0))

    for constraint in puzzle.constraints:
        first = cell_vars[constraint.first]
        second = cell_vars[constraint.second]
        if constraint.type == ConstraintType.SAME:
            model.add(first == second)
        else:
            model.add(first != second)

    return model, cell_vars


def is_conclusive(status: int, count: int, limit: int) -> bool:
    """Whether ``count`` is final: search finished, or the limit was reached."""

    return status in (cp_model.OPTIMAL, cp_model.INFEASIBLE) or count >= limit


def _solve_and_count(puzzle: TangoPuzzle, limit: int, timeout: float) -> Tuple[int, int]:
    model, _ = build_model(puzzle)
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1

    counter = _SolutionCounter(limit)
    status = solver.solve(model, counter)
    if not is_conclusive(status, counter.count, limit):
        LOGGER.warning(
            "CP-SAT: inconclusive search (time limit %0.1fs, %d solution(s), %s)",
            timeout,
            counter.count,
            solver.status_name(status),
        )
    return status, counter.count


def count_solutions_cpsat(puzzle: TangoPuzzle, limit: int = 2, timeout: float = 10.0) -> int:
    """Count completions of ``puzzle`` with CP-SAT, stopping after ``limit``.

    After a timeout the count is only a lower bound.
    """

    _, count = _solve_and_count(puzzle, limit, timeout)
    return count


def has_unique_solution_cpsat(puzzle: TangoPuzzle, timeout: float = 10.0) -> bool:
    # A timed-out search may have missed a second completion.
    status, count = _solve_and_count(puzzle, 2, timeout)
    return count == 1 and is_conclusive(status, count, 2)
