"""
Utility functions over aligned sequence pairs.
"""

from typing import Dict

from .alignment import GAP
from .errors import InconsistentAlignmentError


def compute_alignment_stats(a1: str, a2: str) -> Dict:
    """
    Column counts for an aligned pair.

    Returns:
        Dictionary with matches, mismatches, insertions (gap in a1),
        deletions (gap in a2), gap_openings, total_gaps and columns.
    """
    if len(a1) != len(a2):
        raise InconsistentAlignmentError(len(a1), len(a2))

    matches = mismatches = insertions = deletions = 0
    gap_openings = 0
    gap_type = None

    for x, y in zip(a1, a2):
        if x != GAP and y != GAP:
            if x == y:
                matches += 1
            else:
                mismatches += 1
            gap_type = None
        elif x == GAP and y != GAP:
            insertions += 1
            if gap_type != 'I':
                gap_openings += 1
                gap_type = 'I'
        elif x != GAP and y == GAP:
            deletions += 1
            if gap_type != 'D':
                gap_openings += 1
                gap_type = 'D'
        else:
            # Column with a gap on both sides carries nothing
            gap_type = None

    return {
        "matches": matches,
        "mismatches": mismatches,
        "insertions": insertions,
        "deletions": deletions,
        "gap_openings": gap_openings,
        "total_gaps": insertions + deletions,
        "columns": len(a1),
    }


def build_cigar(a1: str, a2: str) -> str:
    """
    Build an extended CIGAR string from an aligned pair.

    Operations: ``=`` match, ``X`` mismatch, ``I`` gap in a1,
    ``D`` gap in a2. Columns gapped on both sides are skipped.
    """
    cigar = []
    last_op = None
    count = 0

    for x, y in zip(a1, a2):
        if x != GAP and y != GAP:
            op = '=' if x == y else 'X'
        elif x == GAP and y != GAP:
            op = 'I'
        elif x != GAP and y == GAP:
            op = 'D'
        else:
            continue

        if op == last_op:
            count += 1
        else:
            if last_op is not None:
                cigar.append(f"{count}{last_op}")
            last_op = op
            count = 1

    if last_op:
        cigar.append(f"{count}{last_op}")

    return ''.join(cigar)
