import numpy as np
import pandas as pd
import pytest

from sudoku_wfc.grid.parser import (
    grid_to_dataframe,
    load_givens_csv,
    normalize_cell,
    normalize_grid,
    parse_line,
)

from .conftest import EASY_LINE


@pytest.mark.parametrize(
    "raw,expected",
    [(None, 0), ("", 0), (".", 0), ("0", 0), (" 7 ", 7), (5, 5), (3.0, 3), (float("nan"), 0)],
)
def test_normalize_cell(raw, expected):
    assert normalize_cell(raw) == expected


@pytest.mark.parametrize("raw", ["x", "10", 2.5, "#3"])
def test_normalize_cell_rejects_garbage(raw):
    with pytest.raises(ValueError):
        normalize_cell(raw)


def test_parse_line_shape_and_values():
    grid = parse_line(EASY_LINE)
    assert grid.shape == (9, 9)
    assert grid[0, 0] == 5
    assert grid[0, 2] == 0
    assert grid[8, 8] == 9


def test_parse_line_ignores_whitespace_and_dots():
    line = "\n".join(EASY_LINE[i:i + 9].replace("0", ".") for i in range(0, 81, 9))
    assert np.array_equal(parse_line(line), parse_line(EASY_LINE))


def test_parse_line_rejects_wrong_length():
    with pytest.raises(ValueError):
        parse_line("123")


def test_normalize_grid_from_dataframe():
    df = pd.DataFrame(parse_line(EASY_LINE).astype(str))
    df.iat[0, 0] = ""
    grid = normalize_grid(df)
    assert grid[0, 0] == 0
    assert grid[0, 1] == 3


def test_normalize_grid_rejects_wrong_shape():
    with pytest.raises(ValueError):
        normalize_grid(pd.DataFrame([[1, 2], [3, 4]]))


def test_load_givens_csv(tmp_path):
    path = tmp_path / "puzzle.csv"
    rows = [",".join(EASY_LINE[i:i + 9]) for i in range(0, 81, 9)]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    assert np.array_equal(load_givens_csv(path), parse_line(EASY_LINE))


def test_load_givens_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_givens_csv(tmp_path / "nope.csv")


def test_grid_to_dataframe_labels():
    df = grid_to_dataframe(parse_line(EASY_LINE))
    assert df.shape == (9, 9)
    assert df.index.name == "y"
    assert df.columns.name == "x"
    assert df.loc[0, 1] == 3
