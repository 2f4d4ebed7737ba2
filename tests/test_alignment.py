import numpy as np
import pytest

from pwalign.core.alignment import PWAlignment
from pwalign.core.errors import EmptyComparisonError, InconsistentAlignmentError
from pwalign.core.step import Step


def _small_grid():
    return [
        [Step(0, 0, 0), Step(0, 1, -1), Step(0, 2, -2), Step(0, 3, -3)],
        [Step(1, 0, -1), Step(1, 1, 0), Step(1, 2, 0), Step(1, 3, 1)],
        [Step(2, 0, -2), Step(2, 1, 0), Step(2, 2, 1), Step(2, 3, 1)],
    ]


def test_format_grid():
    """Diagnostic form shows the pair, then the grid annotated by the inputs."""
    alignment = PWAlignment(
        a="AGC",
        b="-CG",
        a_orig="AGC",
        b_orig="CG",
        grid=_small_grid(),
        score=1,
    )

    assert alignment.format_grid() == (
        "AGC\n"
        "-CG\n"
        "   |    | A  | G  | C  |\n"
        "   | 0  | -1 | -2 | -3 |\n"
        "C  | -1 | 0  | 0  | 1  |\n"
        "G  | -2 | 0  | 1  | 1  |\n"
    )


def test_format_grid_headers_match_inputs():
    """Header row lists a_orig and the first column lists b_orig, in order."""
    alignment = PWAlignment(a="AGC", b="-CG", a_orig="AGC", b_orig="CG", grid=_small_grid())
    lines = alignment.format_grid().splitlines()

    header = [cell.strip() for cell in lines[2].split('|')[2:-1]]
    assert header == list("AGC")

    labels = [line.split('|')[0].strip() for line in lines[4:]]
    assert labels == list("CG")


def test_format_grid_widens_columns():
    """Long values widen every column so rows stay aligned."""
    grid = [
        [Step(0, 0, 0), Step(0, 1, -10.5)],
        [Step(1, 0, -10.5), Step(1, 1, 1)],
    ]
    alignment = PWAlignment(a="A", b="A", a_orig="A", b_orig="A", grid=grid)
    lines = alignment.format_grid().splitlines()[2:]
    assert lines[0] == "   |" + " " * 6 + "|" + " A    |"
    assert lines[1] == "   |" + " 0    |" + " -10.5|"
    assert lines[2] == "A  |" + " -10.5|" + " 1    |"
    assert len({len(line) for line in lines}) == 1


def test_compact_form():
    alignment = PWAlignment(a="AC-T", b="ACGT")
    assert str(alignment) == "AC-T\nACGT"


def test_alignment_distance():
    """Gap positions are excluded from the compared residues."""
    alignment = PWAlignment(a="ACCGT", b="AG-CT")
    assert alignment.distance() == 0.5


def test_alignment_distance2():
    alignment = PWAlignment(a="ACTGT", b="ACAGT")
    assert alignment.distance() == 0.2
    assert alignment.identity() == 80.0


def test_distance_ignores_doubly_gapped_columns():
    with_gaps = PWAlignment(a="AC--GT", b="AT--GT")
    without = PWAlignment(a="ACGT", b="ATGT")
    assert with_gaps.distance() == without.distance() == 0.25


def test_distance_identical_is_zero():
    assert PWAlignment(a="ACGT", b="ACGT").distance() == 0.0


def test_empty_comparison_raises():
    """No compared positions is an explicit error, never NaN."""
    for a, b in (("", ""), ("---", "---"), ("AC--", "--GT")):
        alignment = PWAlignment(a=a, b=b)
        with pytest.raises(EmptyComparisonError):
            alignment.distance()
        with pytest.raises(EmptyComparisonError):
            alignment.identity()
        # still renderable
        assert str(alignment) == f"{a}\n{b}"


def test_unequal_lengths_rejected():
    with pytest.raises(InconsistentAlignmentError):
        PWAlignment(a="AGC", b="CG")


def test_values_and_immutability():
    alignment = PWAlignment(a="AGC", b="-CG", a_orig="AGC", b_orig="CG", grid=_small_grid())
    values = alignment.values()
    assert values.shape == (3, 4)
    assert np.array_equal(values[2], [-2, 0, 1, 1])
    assert isinstance(alignment.grid, tuple)
    assert isinstance(alignment.grid[0], tuple)
