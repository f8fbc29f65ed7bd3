import pytest

from sudokulogic.board import SudokuBoard
from sudokulogic.subsets_rule import SubSetEnforcer, get_values_set


def test_values_set_is_sorted_union():
    assert get_values_set([[3, 1], [1, 2]], 9) == [1, 2, 3]


def test_values_set_of_nothing_is_empty():
    assert get_values_set([], 9) == []
    assert get_values_set([[], []], 9) == []


def test_values_set_out_of_range_raises():
    with pytest.raises(ValueError):
        get_values_set([[10]], 9)


def test_fresh_board_unchanged():
    board = SudokuBoard()
    enforcer = SubSetEnforcer()
    assert enforcer.enforce_rule(board) is False
    assert board.improved == []
    assert list(board.possible_values(0, 0)) == list(range(1, 10))


def _board_with_pair():
    board = SudokuBoard()
    for col in range(2, 9):
        board.set(0, col, col + 1)
    board.improved.clear()
    return board


def test_known_subsets_are_not_applied_twice():
    board = _board_with_pair()
    enforcer = SubSetEnforcer()
    enforcer.enforce_rule(board)
    known = set(enforcer.known_sub_sets)
    assert any(s.positions == ((0, 0), (0, 1)) for s in known)
    board.improved.clear()
    assert enforcer.enforce_rule(board) is False
    assert board.improved == []
    assert enforcer.known_sub_sets == known