import pandas as pd

import sudoku_wfc
from sudoku_wfc.grid.parser import parse_line

from .conftest import EASY_LINE, EASY_SOLUTION


def _easy_df():
    df = pd.DataFrame(parse_line(EASY_LINE).astype(str))
    return df.replace("0", "")


def test_solve_keeps_givens_and_fills_board():
    givens = parse_line(EASY_LINE)
    result = sudoku_wfc.solve(_easy_df(), seed=11)

    assert result["shape"] == (9, 9)
    assert result["entropy"] == 81
    board = result["solved_board"]
    for y in range(9):
        for x in range(9):
            assert 1 <= board[y][x] <= 9
            if givens[y, x]:
                assert board[y][x] == givens[y, x]


def test_solved_result_matches_unique_solution():
    expected = [[int(ch) for ch in EASY_SOLUTION[i:i + 9]] for i in range(0, 81, 9)]
    for seed in range(20):
        result = sudoku_wfc.solve(_easy_df(), seed=seed)
        if result["solved"]:
            assert result["solved_board"] == expected
        else:
            assert result["conflicts"]


def test_contradictory_givens_are_reported():
    df = _easy_df()
    df.iat[0, 2] = "5"  # duplicates the 5 at (0, 0)
    result = sudoku_wfc.solve(df, seed=0)
    assert not result["solved"]
    assert {"first": [0, 0], "second": [2, 0], "digit": 5} in result["conflicts"]
