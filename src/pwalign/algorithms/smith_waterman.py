"""
Smith-Waterman local alignment with affine gaps.
"""

from ..core.step import Step
from .base import Grid, GridAligner


class SmithWaterman(GridAligner):
    """
    Local alignment of the best-scoring region of both sequences.

    No cell goes below zero. A backpointer is recorded only when the best
    candidate is strictly positive, so every traceback ends on a zero cell.
    """
    name = 'local'

    def _boundary(self, grid: Grid, i: int, j: int) -> Step:
        return Step(i, j, 0.0)

    def _interior(self, grid: Grid, i: int, j: int) -> Step:
        _, value, source = self._best(self._candidates(grid, i, j))
        if value > 0:
            return Step(i, j, value, source)
        return Step(i, j, 0.0)

    def _terminal(self, grid: Grid) -> Step:
        # Row-major scan with strict comparison keeps the lowest row, then column, on ties
        best = grid[0][0]
        for row in grid:
            for step in row:
                if step > best:
                    best = step
        return best
