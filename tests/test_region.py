import pytest

from sudokulogic.region import RegionType, get_all_boxes, get_all_regions


@pytest.mark.parametrize("size", [9, 16])
def test_boxes_partition_the_board(size):
    boxes = get_all_boxes(size)
    assert len(boxes) == size
    assert all(len(box) == size for box in boxes)
    cells = {cell for box in boxes for cell in box}
    assert cells == {(r, c) for r in range(size) for c in range(size)}


def test_first_box_order():
    assert get_all_boxes(9)[0][:4] == ((0, 0), (0, 1), (0, 2), (1, 0))


def test_second_box_starts_at_block_column():
    assert get_all_boxes(9)[1][0] == (0, 3)


def test_regions_count_and_order():
    regions = get_all_regions(9)
    assert len(regions) == 27
    assert regions[0] == (RegionType.ROW, tuple((0, j) for j in range(9)))
    assert regions[1] == (RegionType.COL, tuple((j, 0) for j in range(9)))
    assert [t for t, _ in regions[18:]] == [RegionType.BOX] * 9
    assert regions[18][1] == get_all_boxes(9)[0]


def test_every_cell_in_three_regions():
    regions = get_all_regions(9)
    for cell in [(0, 0), (4, 7), (8, 8)]:
        assert sum(cell in positions for _, positions in regions) == 3