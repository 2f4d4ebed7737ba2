"""
Dynamic-programming grid cells.

A grid is a list of rows of ``Step``. Row ``i`` indexes the bottom sequence ``b``
and column ``j`` the top sequence ``a``; row 0 and column 0 are the boundary.
Backpointers are grid coordinates, never references to other cells.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Move(Enum):
    """Move from a predecessor cell into the current cell."""
    DIAGONAL = 'D'  # a[j-1] aligned to b[i-1]
    UP = 'U'        # b[i-1] against a gap
    LEFT = 'L'      # a[j-1] against a gap


# Tie-break order when several moves reach the same best value
MOVE_PRECEDENCE = (Move.DIAGONAL, Move.UP, Move.LEFT)


@dataclass(frozen=True, eq=False)
class Step:
    """
    One cell of the alignment grid.

    Steps compare equal when coordinates and value match, but are ordered by
    value only, so ``max()`` over candidate cells picks the best score.
    Non-finite values are rejected so the ordering is total.
    """
    i: int
    j: int
    value: float
    backpointer: Optional[Tuple[int, int]] = None

    def __post_init__(self):
        value = float(self.value)
        if not math.isfinite(value):
            raise ValueError(f"Cell ({self.i}, {self.j}) has non-finite value {self.value!r}")
        object.__setattr__(self, 'value', value)
        if self.backpointer is not None:
            object.__setattr__(self, 'backpointer', tuple(self.backpointer))

    @property
    def move(self) -> Optional[Move]:
        """Move that produced this cell, or None for the origin and zeroed cells."""
        if self.backpointer is None:
            return None
        pi, pj = self.backpointer
        if pi == self.i - 1 and pj == self.j - 1:
            return Move.DIAGONAL
        if pi == self.i - 1 and pj == self.j:
            return Move.UP
        if pi == self.i and pj == self.j - 1:
            return Move.LEFT
        raise ValueError(f"Cell ({self.i}, {self.j}) points to non-neighbour {self.backpointer}")

    def __eq__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.i == other.i and self.j == other.j and self.value == other.value

    def __hash__(self):
        return hash((self.i, self.j, self.value))

    def __lt__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.value >= other.value

    def __repr__(self):
        return f"({self.i}, {self.j}): {self.value:g}"
