"""Canonical solution enumeration and hardest-puzzle search.

Two-phase approach:
  1. Enumerate: walk every solution of the empty grid and keep one
     representative per rotation/colour-swap class.
  2. Minimise: reduce each representative to a local-minimum puzzle and keep
     the one needing the fewest givens plus clues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, List, Optional, Set

from ..core.exceptions import GenerationError, ValidationError
from ..utils.logger import get_logger
from .canonical import canonicalize, grid_key
from .grid import TangoPuzzle
from .minimizer import MinimizerConfig, PuzzleMinimizer
from .solver import enumerate_solutions
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


def all_minimal_solutions(puzzle: Optional[TangoPuzzle] = None) -> Iterator[TangoPuzzle]:
    """Yield one fully given, clue-free puzzle per canonical solution class.

    Solutions come from the enumerator's row-major, X-first traversal of
    ``puzzle`` (an empty grid by default); each is emitted as its canonical
    representative the first time its class is seen.
    """

    source = puzzle.copy() if puzzle is not None else TangoPuzzle()
    seen: Set[str] = set()
    for solution in enumerate_solutions(source):
        canonical_grid = canonicalize(solution)
        key = grid_key(canonical_grid)
        if key in seen:
            continue
        seen.add(key)
        yield TangoPuzzle.from_grid(canonical_grid)


@dataclass
class HardestPuzzle:
    solution: TangoPuzzle
    puzzle: TangoPuzzle
    score: int


def find_hardest_puzzle(
    solutions: Iterable[TangoPuzzle], minimizer: PuzzleMinimizer
) -> Optional[HardestPuzzle]:
    """Minimise every solution and keep the lowest-scoring result (first wins ties)."""

    best: Optional[HardestPuzzle] = None
    for index, solution in enumerate(solutions, start=1):
        reduced = minimizer.minimize(solution)
        score = reduced.score
        if best is None or score < best.score:
            LOGGER.info("Candidate %d sets new best score %d", index, score)
            best = HardestPuzzle(solution=solution, puzzle=reduced, score=score)
    return best


@dataclass
class GeneratorConfig:
    include_constraints: bool = True
    max_candidates: Optional[int] = None
    oracle: str = "backtracking"
    cpsat_timeout: float = 10.0

    def to_minimizer_config(self) -> MinimizerConfig:
        return MinimizerConfig(
            include_constraints=self.include_constraints,
            oracle=self.oracle,
            cpsat_timeout=self.cpsat_timeout,
        )


@dataclass
class GenerationResult:
    canonical_count: int
    candidates_minimised: int
    solution: TangoPuzzle
    puzzle: TangoPuzzle
    score: int
    validation_messages: List[str] = field(default_factory=list)


class TangoGenerator:
    """High-level orchestrator: canonical enumeration then greedy minimisation."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        if self.config.max_candidates is not None and self.config.max_candidates < 1:
            raise ValueError("max_candidates must be positive")
        self.minimizer = PuzzleMinimizer(self.config.to_minimizer_config())
        self.validator = PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> GenerationResult:
        solutions = list(all_minimal_solutions())
        LOGGER.info("Found %d canonical solutions with zero constraints", len(solutions))

        candidates = solutions
        if self.config.max_candidates is not None:
            candidates = list(islice(solutions, self.config.max_candidates))
        LOGGER.info(
            "Minimising %d candidates (include_constraints=%s, oracle=%s)",
            len(candidates),
            self.config.include_constraints,
            self.config.oracle,
        )

        hardest = find_hardest_puzzle(candidates, self.minimizer)
        if hardest is None:
            raise GenerationError("No canonical solutions to minimise")

        validation = self.validator.validate(hardest.puzzle, hardest.solution)
        if not validation.ok:
            raise ValidationError(f"Puzzle validation failed: {validation.messages}")

        LOGGER.info(
            "Hardest puzzle: %d givens, %d clues",
            hardest.puzzle.cells_set,
            hardest.puzzle.constraints_set,
        )
        return GenerationResult(
            canonical_count=len(solutions),
            candidates_minimised=len(candidates),
            solution=hardest.solution,
            puzzle=hardest.puzzle,
            score=hardest.score,
            validation_messages=validation.messages,
        )
