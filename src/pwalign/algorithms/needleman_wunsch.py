"""
Needleman-Wunsch global alignment with affine gaps.
"""

from ..core.step import Move, Step
from .base import Grid, GridAligner


class NeedlemanWunsch(GridAligner):
    """
    Global alignment spanning both sequences end to end.

    Boundary cells accumulate the affine cost of a leading gap and point
    back along the edge, so the traceback always reaches the origin.
    """
    name = 'global'

    def _boundary(self, grid: Grid, i: int, j: int) -> Step:
        if i == 0 and j == 0:
            return Step(0, 0, 0.0)
        if i == 0:
            prev = grid[0][j - 1]
            return Step(0, j, prev.value - self._gap_penalty(prev, Move.LEFT), (0, j - 1))
        prev = grid[i - 1][0]
        return Step(i, 0, prev.value - self._gap_penalty(prev, Move.UP), (i - 1, 0))

    def _interior(self, grid: Grid, i: int, j: int) -> Step:
        _, value, source = self._best(self._candidates(grid, i, j))
        return Step(i, j, value, source)

    def _terminal(self, grid: Grid) -> Step:
        return grid[-1][-1]
