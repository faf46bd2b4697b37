"""
Tests for board coordinates and center/outer zones.
"""

from logic.coords import (
    center_indices,
    is_center_zone,
    is_on_board,
    is_on_board_rc,
    is_outer_zone,
    outer_indices,
    to_index,
    to_row_col,
)


def test_index_row_col_round_trip():
    for index in range(25):
        row, col = to_row_col(index)
        assert 0 <= row < 5 and 0 <= col < 5
        assert to_index(row, col) == index


def test_row_major_layout():
    assert to_row_col(0) == (0, 0)
    assert to_row_col(4) == (0, 4)
    assert to_row_col(5) == (1, 0)
    assert to_row_col(13) == (2, 3)
    assert to_index(4, 4) == 24


def test_center_zone_is_middle_3x3():
    assert center_indices() == [6, 7, 8, 11, 12, 13, 16, 17, 18]
    for index in center_indices():
        row, col = to_row_col(index)
        assert 1 <= row <= 3 and 1 <= col <= 3


def test_outer_zone():
    outer = outer_indices()
    assert len(outer) == 16
    for corner in (0, 4, 20, 24):
        assert corner in outer
        assert is_outer_zone(corner)
        assert not is_center_zone(corner)


def test_zones_partition_the_board():
    for index in range(25):
        assert is_center_zone(index) != is_outer_zone(index)


def test_on_board_checks():
    assert is_on_board(0)
    assert is_on_board(24)
    assert not is_on_board(25)
    assert not is_on_board(-1)
    assert is_on_board_rc(4, 0)
    assert not is_on_board_rc(5, 0)
    assert not is_on_board_rc(0, -1)
