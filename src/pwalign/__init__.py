"""
pwalign - pairwise sequence alignment core.

Dynamic-programming grid, affine-gap scoring, alignment results with
evolutionary distance, and the global, local and ClustalW pairwise
algorithms built on them.
"""

__version__ = "1.0.0"
__description__ = "Pairwise sequence alignment core with evolutionary distances"

from .core import (
    PWAlignError,
    UnknownSymbolError,
    EmptyInputError,
    EmptyComparisonError,
    InconsistentAlignmentError,
    SequenceTooLongError,
    Move,
    Step,
    SubstitutionMatrix,
    Scoring,
    PWAlignment,
)
from .algorithms import (
    PWAlign,
    NeedlemanWunsch,
    SmithWaterman,
    ClustalWPairwise,
    get_aligner,
    align,
)
from .pipeline import DistanceMatrix, compute_distance_matrix

__all__ = [
    '__version__',
    'PWAlignError',
    'UnknownSymbolError',
    'EmptyInputError',
    'EmptyComparisonError',
    'InconsistentAlignmentError',
    'SequenceTooLongError',
    'Move',
    'Step',
    'SubstitutionMatrix',
    'Scoring',
    'PWAlignment',
    'PWAlign',
    'NeedlemanWunsch',
    'SmithWaterman',
    'ClustalWPairwise',
    'get_aligner',
    'align',
    'DistanceMatrix',
    'compute_distance_matrix',
]
