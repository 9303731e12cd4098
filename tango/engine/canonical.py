"""Symmetry canonicalisation of solved Tango grids.

Two solutions are treated as the same puzzle when one can be turned into the
other by a quarter-turn rotation, optionally followed by swapping X and Y.
Each rotation is colour-normalised so its top-left cell is ``X``; the
representative is the variant with the smallest row-major key. Mirror images
are not folded together.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from ..core.constants import Symbol
from .grid import TangoPuzzle

Grid = List[List[Symbol]]
GridLike = Union[TangoPuzzle, Sequence[Sequence[Symbol]]]


def _as_grid(source: GridLike) -> Grid:
    if isinstance(source, TangoPuzzle):
        return source.rows()
    return [[Symbol(value) for value in row] for row in source]


def rotate90(grid: Sequence[Sequence[Symbol]]) -> Grid:
    """Rotate a square grid a quarter turn clockwise."""

    n = len(grid)
    rotated: Grid = [[Symbol.EMPTY] * n for _ in range(n)]
    for r in range(n):
        for c in range(n):
            rotated[c][n - 1 - r] = grid[r][c]
    return rotated


def swap_symbols(grid: Sequence[Sequence[Symbol]]) -> Grid:
    return [[value.swapped() for value in row] for row in grid]


def grid_key(grid: Sequence[Sequence[Symbol]]) -> str:
    return "".join("".join(value.value for value in row) + "\n" for row in grid)


def symmetry_variants(source: GridLike) -> List[Grid]:
    """The four rotations, each colour-swapped when its top-left cell is Y."""

    variants: List[Grid] = []
    current = _as_grid(source)
    for _ in range(4):
        if current[0][0] == Symbol.Y:
            variants.append(swap_symbols(current))
        else:
            variants.append([list(row) for row in current])
        current = rotate90(current)
    return variants


def canonicalize(source: GridLike) -> Grid:
    return min(symmetry_variants(source), key=grid_key)


def canonical_form(source: GridLike) -> str:
    return grid_key(canonicalize(source))
