"""
Pre-flight checks run before sequences reach the alignment engine.
"""

from typing import List, Mapping, Optional, Tuple

from ..core.errors import SequenceTooLongError
from ..core.scoring import Scoring


def grid_cells(a: str, b: str) -> int:
    """Number of cells the DP grid for ``a`` and ``b`` allocates."""
    return (len(a) + 1) * (len(b) + 1)


def check_pair_size(a: str, b: str, max_cells: Optional[int] = None):
    """
    Reject a pair whose grid would exceed ``max_cells``.

    Raises:
        SequenceTooLongError: if the grid is over the limit
    """
    if max_cells is None:
        return
    cells = grid_cells(a, b)
    if cells > max_cells:
        raise SequenceTooLongError(cells, max_cells)


def validate_sequences(
    sequences: Mapping[str, str],
    scoring: Scoring
) -> Tuple[bool, List[str]]:
    """
    Check a named set of sequences against a scoring alphabet.

    Args:
        sequences: Mapping of name to sequence
        scoring: Scoring whose replacement matrix defines the alphabet

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for name, seq in sequences.items():
        if not seq:
            errors.append(f"Sequence {name}: empty")
            continue

        unknown = sorted({c for c in seq if c not in scoring.replacement})
        if unknown:
            errors.append(
                f"Sequence {name}: symbols not in substitution matrix: {''.join(unknown)}"
            )

    return len(errors) == 0, errors
