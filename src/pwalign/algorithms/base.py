"""
Alignment engine contract and the grid plumbing shared by its variants.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..core.alignment import GAP, PWAlignment
from ..core.errors import EmptyInputError
from ..core.scoring import Scoring
from ..core.step import Move, Step

logger = logging.getLogger('pwalign')

Grid = List[List[Step]]
Candidate = Tuple[Move, float, Tuple[int, int]]


class PWAlign(ABC):
    """
    A pairwise alignment algorithm bound to two sequences and a Scoring.

    ``align()`` returns one complete PWAlignment or raises; it never
    returns a partial result.
    """
    name = None

    def __init__(self, a: str, b: str, scoring: Scoring):
        self.a = a
        self.b = b
        self.scoring = scoring

    @abstractmethod
    def align(self) -> PWAlignment:
        """Align ``a`` (top) against ``b`` (bottom)."""


class GridAligner(PWAlign):
    """
    Dynamic-programming aligner over a ``(len(b)+1) x (len(a)+1)`` grid.

    Subclasses supply boundary initialisation, the interior recurrence and
    the terminal cell. Cells are filled row by row, so the diagonal, upper
    and left neighbours are always available.
    """

    def align(self) -> PWAlignment:
        self._validate()

        grid = self._fill()
        terminal = self._terminal(grid)
        path = self._trace(grid, terminal)
        a_aligned, b_aligned = self._emit(path)

        alignment = PWAlignment(
            a=a_aligned,
            b=b_aligned,
            a_orig=self.a,
            b_orig=self.b,
            grid=grid,
            score=terminal.value,
        )
        logger.debug(
            f"{self.name} alignment of {len(self.a)} x {len(self.b)} residues: "
            f"score {terminal.value:g}, {len(a_aligned)} columns"
        )
        return alignment

    def _validate(self):
        if not self.a or not self.b:
            raise EmptyInputError(
                f"Cannot align empty sequence (lengths {len(self.a)} and {len(self.b)})"
            )
        self.scoring.replacement.check(self.a)
        self.scoring.replacement.check(self.b)

    def _fill(self, grid: Optional[Grid] = None) -> Grid:
        """Fill rows into ``grid``, a fresh list unless the variant supplies one."""
        grid = [] if grid is None else grid
        for i in range(len(self.b) + 1):
            row = []
            grid.append(row)
            for j in range(len(self.a) + 1):
                if i == 0 or j == 0:
                    row.append(self._boundary(grid, i, j))
                else:
                    row.append(self._interior(grid, i, j))
        return grid

    @abstractmethod
    def _boundary(self, grid: Grid, i: int, j: int) -> Step:
        """Cell in row 0 or column 0."""

    @abstractmethod
    def _interior(self, grid: Grid, i: int, j: int) -> Step:
        """Cell with ``i > 0`` and ``j > 0``."""

    @abstractmethod
    def _terminal(self, grid: Grid) -> Step:
        """Cell the traceback starts from."""

    def _substitution(self, i: int, j: int) -> float:
        return self.scoring.replacement.score(self.a[j - 1], self.b[i - 1])

    def _gap_penalty(self, predecessor: Step, move: Move) -> float:
        """Extension if the predecessor was reached by the same gap move, else opening."""
        if predecessor.move is move:
            return self.scoring.gap_extension
        return self.scoring.gap_opening

    def _candidates(self, grid: Grid, i: int, j: int) -> List[Candidate]:
        diag = grid[i - 1][j - 1]
        up = grid[i - 1][j]
        left = grid[i][j - 1]
        return [
            (Move.DIAGONAL, diag.value + self._substitution(i, j), (i - 1, j - 1)),
            (Move.UP, up.value - self._gap_penalty(up, Move.UP), (i - 1, j)),
            (Move.LEFT, left.value - self._gap_penalty(left, Move.LEFT), (i, j - 1)),
        ]

    @staticmethod
    def _best(candidates: List[Candidate]) -> Candidate:
        # candidates arrive in MOVE_PRECEDENCE order; only a strictly better value displaces
        best = candidates[0]
        for candidate in candidates[1:]:
            if candidate[1] > best[1]:
                best = candidate
        return best

    def _trace(self, grid: Grid, terminal: Step) -> List[Tuple[int, int]]:
        """Coordinates from the terminal cell back to the first cell without backpointer."""
        path = [(terminal.i, terminal.j)]
        step = terminal
        while step.backpointer is not None:
            pi, pj = step.backpointer
            step = grid[pi][pj]
            path.append((pi, pj))
        return path

    def _emit(self, path: List[Tuple[int, int]]) -> Tuple[str, str]:
        """Turn a terminal-first path into the two aligned strings."""
        a_cols = []
        b_cols = []
        for (i, j), (pi, pj) in zip(path, path[1:]):
            if pi == i - 1 and pj == j - 1:
                a_cols.append(self.a[j - 1])
                b_cols.append(self.b[i - 1])
            elif pi == i - 1:
                a_cols.append(GAP)
                b_cols.append(self.b[i - 1])
            else:
                a_cols.append(self.a[j - 1])
                b_cols.append(GAP)

        a_cols.reverse()
        b_cols.reverse()
        return ''.join(a_cols), ''.join(b_cols)
