# -*- coding: utf-8 -*-
"""
問題の初期配置（ヒント数字）を内部表現に正規化するモジュールです。

主な役割:
- pandas.DataFrame や 81 文字の文字列を numpy 配列に変換
- 各セルの値を「空マス(0)」「数字(1〜9)」に正規化
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from ..config import BOARD_SIZE, BOARD_WIDTH, EMPTY_CELL_MARKERS


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を、0〜9 の整数に変換します。

    変換ルール（例）
    ----------------
    - None / NaN / "" / "." / "0" など: 0（空マス）
    - "5" / 5 / 5.0: 5
    - それ以外: ValueError
    """
    if x is None:
        return 0

    # pandas で読み込んだ空セルは NaN になる
    if isinstance(x, float):
        if np.isnan(x):
            return 0
        if not x.is_integer():
            raise ValueError(f"Invalid cell value: {x!r}")
        x = int(x)

    s = str(x).strip()
    if s in EMPTY_CELL_MARKERS:
        return 0

    if not s.isdigit():
        raise ValueError(f"Invalid cell value: {x!r}")

    digit = int(s)
    if not 0 <= digit <= BOARD_WIDTH:
        raise ValueError(f"Digit out of range (expected 1-9): {x!r}")
    return digit


def normalize_grid(df: pd.DataFrame) -> np.ndarray:
    """
    DataFrame から 2次元 numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Parameters
    ----------
    df : pandas.DataFrame
        9x9 の盤面データ。行が y、列が x に対応します。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9) の整数配列。0 は空マス。
    """
    rows, cols = df.shape
    if (rows, cols) != (BOARD_WIDTH, BOARD_WIDTH):
        raise ValueError(f"Board must be 9x9, got {rows}x{cols}")

    grid = np.zeros((rows, cols), dtype=np.int64)

    for i in range(rows):
        for j in range(cols):
            grid[i, j] = normalize_cell(df.iat[i, j])

    return grid


def parse_line(line: str) -> np.ndarray:
    """
    "53..7...." のような 81 文字の 1 行表現を 9x9 配列に変換します。

    空白や改行は無視します。
    """
    chars = [ch for ch in str(line) if not ch.isspace()]
    if len(chars) != BOARD_SIZE:
        raise ValueError(f"Board line must have 81 cells, got {len(chars)}")

    values = [normalize_cell(ch) for ch in chars]
    return np.array(values, dtype=np.int64).reshape(BOARD_WIDTH, BOARD_WIDTH)


def load_givens_csv(path: str | Path) -> np.ndarray:
    """
    9x9 の CSV（ヘッダーなし）を読み込み、正規化した配列を返します。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Givens CSV not found: {p}")

    df = pd.read_csv(p, header=None, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    return normalize_grid(df)


def grid_to_dataframe(grid: np.ndarray) -> pd.DataFrame:
    """numpy の 9x9 配列を、行番号・列番号つきの DataFrame に変換します。"""
    return pd.DataFrame(
        np.asarray(grid),
        index=pd.RangeIndex(BOARD_WIDTH, name="y"),
        columns=pd.RangeIndex(BOARD_WIDTH, name="x"),
    )
