"""
Core types for pairwise alignment: grid cells, scoring and results.
"""

from .errors import (
    PWAlignError,
    UnknownSymbolError,
    EmptyInputError,
    EmptyComparisonError,
    InconsistentAlignmentError,
    SequenceTooLongError,
)
from .step import Move, MOVE_PRECEDENCE, Step
from .scoring import SubstitutionMatrix, Scoring
from .alignment import GAP, PWAlignment
from .utilities import compute_alignment_stats, build_cigar

__all__ = [
    # Errors
    'PWAlignError',
    'UnknownSymbolError',
    'EmptyInputError',
    'EmptyComparisonError',
    'InconsistentAlignmentError',
    'SequenceTooLongError',

    # Grid
    'Move',
    'MOVE_PRECEDENCE',
    'Step',

    # Scoring
    'SubstitutionMatrix',
    'Scoring',

    # Results
    'GAP',
    'PWAlignment',
    'compute_alignment_stats',
    'build_cigar',
]
