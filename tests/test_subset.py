from sudokulogic.subset import Subset


def test_size_counts_values():
    subset = Subset([2, 5], [(0, 0), (0, 1)])
    assert subset.size() == 2


def test_lists_are_stored_as_tuples():
    subset = Subset([2, 5], [[0, 0], [0, 1]])
    assert subset.values == (2, 5)
    assert subset.positions == ((0, 0), (0, 1))


def test_equal_subsets_hash_together():
    a = Subset([1, 3], [(1, 1), (2, 2)])
    b = Subset((1, 3), ((1, 1), (2, 2)))
    assert a == b
    assert len({a, b}) == 1


def test_different_positions_differ():
    a = Subset([1, 3], [(1, 1), (2, 2)])
    b = Subset([1, 3], [(1, 1), (2, 3)])
    assert len({a, b}) == 2