"""
Pairwise alignment result and the distance derived from it.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .errors import EmptyComparisonError, InconsistentAlignmentError
from .step import Step

GAP = '-'


def _format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


@dataclass(frozen=True)
class PWAlignment:
    """
    Output of one alignment run.

    Attributes:
        a: Top sequence of the alignment, gap padded
        b: Bottom sequence of the alignment, gap padded
        a_orig: Original top input sequence
        b_orig: Original bottom input sequence
        grid: Full DP grid, rows indexed by ``b_orig``, columns by ``a_orig``
        score: Value of the terminal cell the traceback started from
    """
    a: str
    b: str
    a_orig: str = ""
    b_orig: str = ""
    grid: Sequence[Sequence[Step]] = ()
    score: float = 0.0

    def __post_init__(self):
        if len(self.a) != len(self.b):
            raise InconsistentAlignmentError(len(self.a), len(self.b))
        object.__setattr__(self, 'grid', tuple(tuple(row) for row in self.grid))
        object.__setattr__(self, 'score', float(self.score))

    def _compared(self) -> Tuple[int, int]:
        residues = identities = 0
        for c1, c2 in zip(self.a, self.b):
            if c1 == GAP or c2 == GAP:
                continue
            residues += 2
            if c1 == c2:
                identities += 2
        return residues, identities

    def distance(self) -> float:
        """
        Differences per compared site.

        Described in https://www.ncbi.nlm.nih.gov/pmc/articles/PMC308517/pdf/nar00046-0131.pdf

        Identities in the alignment divided by the number of residues compared
        give a percent identity; gap positions are excluded. The distance is
        ``1 - identity / 100``.

        Raises:
            EmptyComparisonError: if no position is compared
        """
        residues, identities = self._compared()
        if residues == 0:
            raise EmptyComparisonError(
                f"No compared positions between {self.a!r} and {self.b!r}"
            )
        return (residues - identities) / residues

    def identity(self) -> float:
        """Percent identity over compared positions."""
        residues, identities = self._compared()
        if residues == 0:
            raise EmptyComparisonError(
                f"No compared positions between {self.a!r} and {self.b!r}"
            )
        return 100.0 * identities / residues

    def values(self) -> np.ndarray:
        """Grid values as a ``(len(b_orig)+1, len(a_orig)+1)`` array."""
        return np.array([[step.value for step in row] for row in self.grid], dtype=float)

    def format_grid(self) -> str:
        """
        Aligned pair followed by the annotated DP grid.

        The header row lists ``a_orig``, the first column lists ``b_orig``.
        Cells show the values as computed, independent of the traceback.
        """
        lines = [self.a, self.b]
        if not self.grid:
            return '\n'.join(lines) + '\n'

        cells = [[_format_value(step.value) for step in row] for row in self.grid]
        width = max([3] + [len(text) for row in cells for text in row])

        header = "   |" + " " * (width + 1) + "|"
        header += ''.join(f" {c:<{width}}|" for c in self.a_orig)
        lines.append(header)

        for i, row in enumerate(cells):
            label = "   |" if i == 0 else f"{self.b_orig[i - 1]:<3}|"
            lines.append(label + ''.join(f" {text:<{width}}|" for text in row))

        return '\n'.join(lines) + '\n'

    def __str__(self):
        return f"{self.a}\n{self.b}"
