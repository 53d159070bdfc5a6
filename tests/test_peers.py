import pytest

from sudoku_wfc.grid.peers import (
    all_units,
    box_cells,
    box_origin,
    check_coord,
    iter_peers,
    peers_of,
)


@pytest.mark.parametrize("x,y", [(0, 0), (4, 4), (8, 8), (2, 7), (6, 1)])
def test_every_cell_has_twenty_distinct_peers(x, y):
    peers = peers_of(x, y)
    assert len(peers) == 20
    assert len(set(peers)) == 20
    assert (x, y) not in peers


def test_peers_cover_row_column_and_box():
    peers = set(iter_peers(4, 1))
    assert {(i, 1) for i in range(9) if i != 4} <= peers
    assert {(4, i) for i in range(9) if i != 1} <= peers
    assert {(3, 0), (5, 2), (3, 2), (5, 0)} <= peers
    assert (0, 0) not in peers


def test_peers_are_row_then_column_then_box():
    peers = peers_of(0, 0)
    assert peers[:8] == [(i, 0) for i in range(1, 9)]
    assert peers[8:16] == [(0, i) for i in range(1, 9)]
    assert peers[16:] == [(1, 1), (2, 1), (1, 2), (2, 2)]


def test_box_origin():
    assert box_origin(0, 0) == (0, 0)
    assert box_origin(5, 7) == (3, 6)
    assert box_origin(8, 2) == (6, 0)
    assert len(box_cells(5, 7)) == 9


def test_all_units():
    units = all_units()
    assert len(units) == 27
    assert all(len(unit) == 9 for unit in units)
    assert all(len(set(unit)) == 9 for unit in units)


def test_check_coord_rejects_negative_and_large():
    assert check_coord(8, 0) == (8, 0)
    with pytest.raises(ValueError):
        check_coord(-1, 0)
    with pytest.raises(ValueError):
        check_coord(0, 9)
