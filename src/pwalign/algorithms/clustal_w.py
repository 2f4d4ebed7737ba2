"""
Pairwise step of ClustalW-style progressive alignment.

Exact affine-gap global alignment (Gotoh) with three state tables:
MATCH ends in an aligned residue pair, UP ends with a residue of ``b``
against a gap, LEFT ends with a residue of ``a`` against a gap.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.step import Step
from .base import Grid, GridAligner

# State order doubles as the tie-break precedence
MATCH, UP, LEFT = 0, 1, 2


def _pick(options: Sequence[float]) -> Tuple[int, float]:
    """Index and value of the first maximum."""
    best = 0
    for k in range(1, len(options)):
        if options[k] > options[best]:
            best = k
    return best, float(options[best])


class StateGrid(list):
    """Rows of Steps plus the state tables of one ``align()`` call."""

    def __init__(self, rows: int, cols: int):
        super().__init__()
        self.scores = np.full((3, rows, cols), -np.inf)
        self.origins = np.zeros((3, rows, cols), dtype=np.int8)


class ClustalWPairwise(GridAligner):
    """
    Global alignment scoring every gap run exactly as
    ``gap_opening + (L - 1) * gap_extension``.

    Each grid cell stores the best of its three states and points to the
    predecessor of that state. The traceback walks the state tables, which
    belong to the grid of each call, so one instance may align repeatedly.
    """
    name = 'clustalw'

    def _fill(self, grid: Optional[Grid] = None) -> Grid:
        return super()._fill(StateGrid(len(self.b) + 1, len(self.a) + 1))

    def _boundary(self, grid: StateGrid, i: int, j: int) -> Step:
        scores = grid.scores
        origins = grid.origins
        if i == 0 and j == 0:
            scores[MATCH, 0, 0] = 0.0
            return Step(0, 0, 0.0)
        if i == 0:
            value = 0.0 - self.scoring.gap_cost(j)
            scores[LEFT, 0, j] = value
            origins[LEFT, 0, j] = LEFT if j > 1 else MATCH
            return Step(0, j, value, (0, j - 1))
        value = 0.0 - self.scoring.gap_cost(i)
        scores[UP, i, 0] = value
        origins[UP, i, 0] = UP if i > 1 else MATCH
        return Step(i, 0, value, (i - 1, 0))

    def _interior(self, grid: StateGrid, i: int, j: int) -> Step:
        scores = grid.scores
        origins = grid.origins
        go = self.scoring.gap_opening
        ge = self.scoring.gap_extension

        origin, best = _pick(scores[:, i - 1, j - 1])
        scores[MATCH, i, j] = best + self._substitution(i, j)
        origins[MATCH, i, j] = origin

        origin, best = _pick((
            scores[MATCH, i - 1, j] - go,
            scores[UP, i - 1, j] - ge,
            scores[LEFT, i - 1, j] - go,
        ))
        scores[UP, i, j] = best
        origins[UP, i, j] = origin

        origin, best = _pick((
            scores[MATCH, i, j - 1] - go,
            scores[UP, i, j - 1] - go,
            scores[LEFT, i, j - 1] - ge,
        ))
        scores[LEFT, i, j] = best
        origins[LEFT, i, j] = origin

        state, value = _pick(scores[:, i, j])
        source = {
            MATCH: (i - 1, j - 1),
            UP: (i - 1, j),
            LEFT: (i, j - 1),
        }[state]
        return Step(i, j, value, source)

    def _terminal(self, grid: StateGrid) -> Step:
        return grid[-1][-1]

    def _trace(self, grid: StateGrid, terminal: Step) -> List[Tuple[int, int]]:
        i, j = terminal.i, terminal.j
        state, _ = _pick(grid.scores[:, i, j])
        path = [(i, j)]
        while i > 0 or j > 0:
            origin = int(grid.origins[state, i, j])
            if state == MATCH:
                i, j = i - 1, j - 1
            elif state == UP:
                i -= 1
            else:
                j -= 1
            state = origin
            path.append((i, j))
        return path
