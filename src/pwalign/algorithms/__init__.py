"""
Pairwise alignment algorithms sharing the grid, scoring and result types.
"""

from typing import Dict, Type

from ..core.alignment import PWAlignment
from ..core.scoring import Scoring
from .base import PWAlign, GridAligner
from .needleman_wunsch import NeedlemanWunsch
from .smith_waterman import SmithWaterman
from .clustal_w import ClustalWPairwise

ALGORITHMS: Dict[str, Type[PWAlign]] = {
    NeedlemanWunsch.name: NeedlemanWunsch,
    SmithWaterman.name: SmithWaterman,
    ClustalWPairwise.name: ClustalWPairwise,
}


def get_aligner(method: str) -> Type[PWAlign]:
    """Algorithm class registered under ``method`` (global, local or clustalw)."""
    try:
        return ALGORITHMS[method]
    except KeyError:
        raise ValueError(
            f"Unknown alignment method {method!r}; expected one of {sorted(ALGORITHMS)}"
        ) from None


def align(a: str, b: str, scoring: Scoring, method: str = 'global') -> PWAlignment:
    """Align ``a`` against ``b`` with the named algorithm."""
    return get_aligner(method)(a, b, scoring).align()


__all__ = [
    'PWAlign',
    'GridAligner',
    'NeedlemanWunsch',
    'SmithWaterman',
    'ClustalWPairwise',
    'ALGORITHMS',
    'get_aligner',
    'align',
]
