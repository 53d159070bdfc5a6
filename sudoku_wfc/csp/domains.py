# -*- coding: utf-8 -*-
"""
マスごとの候補集合（ドメイン）をビットで表現するためのモジュールです。

1 マスの候補集合は 9 ビットの整数で表します。

- ビット 0 が数字 1、ビット 8 が数字 9 に対応します。
- ビットが立っていれば「その数字になり得る」という意味です。
- 0x1FF（全ビット 1）は「1〜9 のどれでもよい」状態です。

ここで扱う「value」は 0 始まりのインデックス（0〜8）で、
表示上の数字（digit, 1〜9）とは 1 ずれている点に注意してください。
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import BOARD_WIDTH, FULL_DOMAIN

# 0〜511 の各マスクについて、立っているビット数を前計算したテーブル。
# 盤面全体（numpy 配列）のエントロピーを一括で求めるのに使います。
POPCOUNT_TABLE: np.ndarray = np.array(
    [bin(mask).count("1") for mask in range(FULL_DOMAIN + 1)],
    dtype=np.int64,
)


def value_to_bit(value: int) -> int:
    """0 始まりの値 value に対応するビットマスクを返します。"""
    return 1 << value


def digit_to_value(digit: int) -> int:
    """表示用の数字（1〜9）を 0 始まりの値に変換します。"""
    return digit - 1


def value_to_digit(value: int) -> int:
    """0 始まりの値を表示用の数字（1〜9）に変換します。"""
    return value + 1


def check_value(value: int) -> int:
    """
    value が 0〜8 の範囲にあるかを確認し、そのまま返します。

    範囲外なら ValueError を送出します。
    """
    if not 0 <= int(value) < BOARD_WIDTH:
        raise ValueError(f"Value index out of range (expected 0-8): {value}")
    return int(value)


def popcount(mask: int) -> int:
    """マスクに含まれる候補数（エントロピー）を返します。"""
    return int(POPCOUNT_TABLE[int(mask) & FULL_DOMAIN])


def is_collapsed_mask(mask: int) -> bool:
    """候補がちょうど 1 つだけなら True（確定済み）。"""
    return popcount(mask) == 1


def collapsed_value_of(mask: int) -> int:
    """
    確定済みマスクの値（0 始まり）を返します。

    候補がちょうど 1 つでない場合は ValueError を送出します。
    """
    mask = int(mask)
    if not is_collapsed_mask(mask):
        raise ValueError(f"Mask is not collapsed: {mask:#05x}")
    return mask.bit_length() - 1


def values_of(mask: int) -> List[int]:
    """マスクに含まれる値（0 始まり）を昇順のリストで返します。"""
    mask = int(mask)
    return [v for v in range(BOARD_WIDTH) if mask & (1 << v)]


def entropy_grid(tiles: np.ndarray) -> np.ndarray:
    """
    マスクの 2 次元配列から、同じ形のエントロピー配列を作ります。

    Parameters
    ----------
    tiles : numpy.ndarray
        shape = (9, 9) の候補マスク配列。

    Returns
    -------
    numpy.ndarray
        各マスの候補数。
    """
    return POPCOUNT_TABLE[tiles & FULL_DOMAIN]
