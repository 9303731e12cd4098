"""Pretty-print helpers for Tango puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import GRID_SIZE, ConstraintType, Symbol

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult
    from ..engine.grid import TangoPuzzle


EMPTY_PLACEHOLDER = "."
CONSTRAINT_MARKERS = {
    ConstraintType.SAME: "=",
    ConstraintType.DIFFERENT: "x",
}


def cell_symbol(value: Symbol) -> str:
    return EMPTY_PLACEHOLDER if value == Symbol.EMPTY else value.value


def constraint_marker(puzzle: TangoPuzzle, first, second) -> str:
    constraint = puzzle.constraint_between(first, second)
    if constraint is None:
        return " "
    return CONSTRAINT_MARKERS[constraint.type]


def format_puzzle(puzzle: TangoPuzzle) -> str:
    """Render cells with horizontal clues inline and vertical clues in between rows."""

    lines: List[str] = []
    for r in range(GRID_SIZE):
        parts: List[str] = []
        for c in range(GRID_SIZE):
            parts.append(cell_symbol(puzzle.get_cell(r, c)))
            if c < GRID_SIZE - 1:
                parts.append(constraint_marker(puzzle, (r, c), (r, c + 1)))
        lines.append("".join(parts))

        if r < GRID_SIZE - 1:
            lines.append(
                "".join(constraint_marker(puzzle, (r, c), (r + 1, c)) + " " for c in range(GRID_SIZE))
            )
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: TangoPuzzle, *, label: str | None = None, stream=None) -> None:
    """Print the puzzle in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_puzzle(puzzle), file=stream)


def print_generation_stats(result: GenerationResult, *, stream=None) -> None:
    """Print the hardest puzzle found plus a short summary of the run."""

    stream = stream or sys.stdout
    print(
        f"Canonical Number of possible solutions with zero constraints: {result.canonical_count}",
        file=stream,
    )
    print("Hardest grid with fewest constraints and symbols:", file=stream)
    print(format_puzzle(result.puzzle), file=stream)

    print(file=stream)
    print("--- Puzzle ---", file=stream)
    print(f"  Candidates minimised: {result.candidates_minimised}", file=stream)
    print(f"  Givens:               {result.puzzle.cells_set}", file=stream)
    print(f"  Clues:                {result.puzzle.constraints_set}", file=stream)
    print(f"  Score:                {result.score}", file=stream)

    print(file=stream)
    print("--- Solution ---", file=stream)
    print(format_puzzle(result.solution), file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)
