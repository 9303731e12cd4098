"""Tango (6x6 binary puzzle) generator and minimiser.

This package exposes the public API surface via:

- ``tango.engine.grid.TangoPuzzle``: the grid, its givens and adjacency clues.
- ``tango.engine.solver.enumerate_solutions``: lazy backtracking enumeration.
- ``tango.engine.generator.TangoGenerator``: canonical enumeration followed by
  greedy minimisation, returning the hardest puzzle found.
"""

from .engine.generator import GeneratorConfig, TangoGenerator, all_minimal_solutions
from .engine.grid import TangoPuzzle
from .engine.minimizer import MinimizerConfig, PuzzleMinimizer, minimize
from .engine.solver import enumerate_solutions, has_unique_solution

__all__ = [
    "GeneratorConfig",
    "MinimizerConfig",
    "PuzzleMinimizer",
    "TangoGenerator",
    "TangoPuzzle",
    "all_minimal_solutions",
    "enumerate_solutions",
    "has_unique_solution",
    "minimize",
]

__version__ = "0.1.0"
