import logging

import numpy as np

from sudoku_wfc import config
from sudoku_wfc.config import FULL_DOMAIN
from sudoku_wfc.csp.domains import value_to_bit
from sudoku_wfc.csp.propagation import (
    constrain,
    find_conflicts,
    has_empty_cell,
    propagate,
)
from sudoku_wfc.logging_utils import TRACE_LOGGER_NAME
from sudoku_wfc.types import Conflict


def _full():
    return np.full((9, 9), FULL_DOMAIN, dtype=np.uint16)


def test_propagate_skips_collapsed_peers():
    tiles = _full()
    tiles[0, 5] = value_to_bit(2)
    propagate(tiles, 0, 0, 2)
    # (5, 0) still holds the value it was fixed to
    assert tiles[0, 5] == value_to_bit(2)
    assert not tiles[0, 1] & value_to_bit(2)
    assert not tiles[8, 0] & value_to_bit(2)
    assert tiles[4, 4] == FULL_DOMAIN


def test_constrain_absent_value_is_noop():
    tiles = _full()
    tiles[3, 3] = value_to_bit(0) | value_to_bit(1)
    constrain(tiles, 3, 3, 5)
    assert tiles[3, 3] == value_to_bit(0) | value_to_bit(1)
    # the rest of the board is untouched
    assert (tiles == FULL_DOMAIN).sum() == 80


def test_constrain_transition_triggers_propagation():
    tiles = _full()
    tiles[3, 3] = value_to_bit(0) | value_to_bit(1)
    constrain(tiles, 3, 3, 0)
    assert tiles[3, 3] == value_to_bit(1)
    assert not tiles[3, 8] & value_to_bit(1)
    assert not tiles[0, 3] & value_to_bit(1)
    assert not tiles[5, 5] & value_to_bit(1)


def test_find_conflicts_reports_each_pair_once():
    tiles = _full()
    tiles[0, 0] = value_to_bit(4)
    tiles[1, 1] = value_to_bit(4)  # same box
    tiles[0, 2] = value_to_bit(4)  # same row and box as (0, 0)
    conflicts = find_conflicts(tiles)
    assert conflicts == [
        Conflict(first=(0, 0), second=(2, 0), digit=5),
        Conflict(first=(0, 0), second=(1, 1), digit=5),
        Conflict(first=(2, 0), second=(1, 1), digit=5),
    ]


def test_has_empty_cell():
    tiles = _full()
    assert not has_empty_cell(tiles)
    tiles[7, 7] = 0
    assert has_empty_cell(tiles)


def test_propagate_eliminates_from_every_peer_before_cascading():
    tiles = _full()
    # (1, 0) and (0, 1) can only be 1 or 2
    tiles[0, 1] = value_to_bit(0) | value_to_bit(1)
    tiles[1, 0] = value_to_bit(0) | value_to_bit(1)
    propagate(tiles, 0, 0, 0)
    assert tiles[0, 1] == value_to_bit(1)
    assert tiles[1, 0] == value_to_bit(1)
    # no peer of (0, 0) was collapsed to the propagated value
    assert not tiles[0, 8] & value_to_bit(0)
    assert not tiles[2, 2] & value_to_bit(0)


def test_trace_logger_records_propagated_collapses(board, monkeypatch, tmp_path):
    monkeypatch.setattr(config, "TRACE_ENABLED", True)
    trace = logging.getLogger(TRACE_LOGGER_NAME)
    for handler in list(trace.handlers):
        trace.removeHandler(handler)
        handler.close()

    try:
        for x in range(8):
            board.collapse(x, 0, x)
        for handler in trace.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / config.TRACE_LOG_FILE
        text = log_file.read_text(encoding="utf-8")
        assert "propagated collapse (8, 0) -> 9" in text
    finally:
        for handler in list(trace.handlers):
            trace.removeHandler(handler)
            handler.close()
