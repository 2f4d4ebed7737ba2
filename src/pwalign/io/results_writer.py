"""
Results writing utilities for pwalign.
"""

from pathlib import Path
from typing import Union

from ..core.alignment import PWAlignment
from ..core.errors import EmptyComparisonError
from ..core.utilities import build_cigar, compute_alignment_stats
from ..pipeline.distance_matrix import DistanceMatrix

PathLike = Union[str, Path]


def format_summary(alignment: PWAlignment) -> str:
    """Human readable summary of one alignment."""
    stats = compute_alignment_stats(alignment.a, alignment.b)

    try:
        distance = f"{alignment.distance():.6f}"
        identity = f"{alignment.identity():.2f}%"
    except EmptyComparisonError:
        distance = identity = "undefined"

    lines = [
        f"Score: {alignment.score:g}",
        f"Length: {stats['columns']}",
        f"Identity: {identity}",
        f"Distance: {distance}",
        f"Matches: {stats['matches']}",
        f"Mismatches: {stats['mismatches']}",
        f"Gaps: {stats['total_gaps']} in {stats['gap_openings']} run(s)",
        f"CIGAR: {build_cigar(alignment.a, alignment.b) or '*'}",
    ]
    return '\n'.join(lines)


def write_alignment(alignment: PWAlignment, path: PathLike, grid: bool = False) -> Path:
    """
    Write an alignment and its summary.

    Args:
        alignment: Alignment to write
        path: Output file
        grid: Write the annotated DP grid instead of the compact pair

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    body = alignment.format_grid() if grid else f"{alignment}\n"
    with open(path, 'w') as f:
        f.write(body)
        f.write('\n')
        f.write(format_summary(alignment))
        f.write('\n')
    return path


def format_phylip(matrix: DistanceMatrix) -> str:
    """Square PHYLIP distance matrix, names padded to ten characters."""
    lines = [f"{len(matrix):>5}"]
    for name, row in zip(matrix.names, matrix.values):
        cells = ' '.join(f"{value:.6f}" for value in row)
        lines.append(f"{name[:10]:<10}{cells}")
    return '\n'.join(lines) + '\n'


def write_phylip(matrix: DistanceMatrix, path: PathLike) -> Path:
    """Write a distance matrix in PHYLIP format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        f.write(format_phylip(matrix))
    return path
