import math

import pytest

from pwalign.core.step import Move, MOVE_PRECEDENCE, Step


def test_step_equality_uses_coordinates_and_value():
    """Cells are equal only when position and value both match."""
    assert Step(1, 2, 3.0) == Step(1, 2, 3.0)
    assert Step(1, 2, 3.0) != Step(2, 1, 3.0)
    assert Step(1, 2, 3.0) != Step(1, 2, 4.0)
    assert hash(Step(1, 2, 3.0)) == hash(Step(1, 2, 3.0))


def test_step_ordering_uses_value_only():
    """Ordering ignores coordinates."""
    low = Step(5, 5, -1.0)
    high = Step(0, 0, 2.0)
    assert low < high
    assert high > low
    assert Step(0, 0, 2.0) <= Step(3, 3, 2.0)
    assert Step(0, 0, 2.0) >= Step(3, 3, 2.0)


def test_max_picks_first_of_equal_values():
    """max() is deterministic on ties: the first best cell wins."""
    cells = [Step(0, 0, 1.0), Step(1, 1, 3.0), Step(2, 2, 3.0)]
    assert max(cells) is cells[1]


def test_non_finite_values_rejected():
    """NaN and infinities would break the total order."""
    for value in (math.nan, math.inf, -math.inf):
        with pytest.raises(ValueError):
            Step(0, 0, value)


def test_move_derived_from_backpointer():
    assert Step(0, 0, 0.0).move is None
    assert Step(2, 2, 1.0, (1, 1)).move is Move.DIAGONAL
    assert Step(2, 2, 1.0, (1, 2)).move is Move.UP
    assert Step(2, 2, 1.0, (2, 1)).move is Move.LEFT


def test_move_rejects_non_neighbour():
    with pytest.raises(ValueError):
        Step(3, 3, 1.0, (0, 0)).move


def test_precedence_order():
    assert MOVE_PRECEDENCE == (Move.DIAGONAL, Move.UP, Move.LEFT)


def test_step_repr():
    assert repr(Step(1, 2, 3.0)) == "(1, 2): 3"
    assert repr(Step(0, 1, -0.5)) == "(0, 1): -0.5"
