"""Deterministic validation of minimised puzzles against their solution."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import List

from ..core.constants import GRID_SIZE
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .grid import TangoPuzzle
from .solver import enumerate_solutions


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Checks that a puzzle is legal and pins down exactly the expected solution."""

    def validate(self, puzzle: TangoPuzzle, solution: TangoPuzzle) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_solution_complete(solution)
            self._check_legal(puzzle)
            self._check_givens_match(puzzle, solution)
            self._check_unique_completion(puzzle, solution)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_solution_complete(self, solution: TangoPuzzle) -> None:
        if not solution.is_complete() or not solution.is_legal():
            raise ValidationError("Reference solution is not a complete legal grid")

    def _check_legal(self, puzzle: TangoPuzzle) -> None:
        if not puzzle.is_legal():
            raise ValidationError("Puzzle breaks the line or clue rules")

    def _check_givens_match(self, puzzle: TangoPuzzle, solution: TangoPuzzle) -> None:
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if not puzzle.is_cell_fixed(r, c):
                    continue
                if puzzle.get_cell(r, c) != solution.get_cell(r, c):
                    raise ValidationError(
                        f"Given at ({r},{c}) disagrees with the solution"
                    )

    def _check_unique_completion(self, puzzle: TangoPuzzle, solution: TangoPuzzle) -> None:
        completions = list(islice(enumerate_solutions(puzzle.copy()), 2))
        if not completions:
            raise ValidationError("Puzzle has no solution")
        if len(completions) > 1:
            raise ValidationError("Puzzle has more than one solution")
        if completions[0].rows() != solution.rows():
            raise ValidationError("Puzzle's only solution differs from the expected grid")
