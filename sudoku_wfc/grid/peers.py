# -*- coding: utf-8 -*-
"""
マスの「ピア」（同じ行・列・3x3 ボックスにある他のマス）を求めるモジュールです。

ピアの関係は盤面の座標だけから計算でき、どこにも保存しません。
"""

from __future__ import annotations

from typing import Iterator, List

from ..config import BOARD_WIDTH, BOX_WIDTH
from ..types import CellCoord


def check_coord(x: int, y: int) -> CellCoord:
    """
    座標が盤面内（0〜8）にあるかを確認し、そのまま返します。

    numpy の負のインデックスで別のマスを指してしまわないよう、
    範囲外は ValueError にします。
    """
    if not (0 <= int(x) < BOARD_WIDTH and 0 <= int(y) < BOARD_WIDTH):
        raise ValueError(f"Cell coordinate out of range: ({x}, {y})")
    return int(x), int(y)


def box_origin(x: int, y: int) -> CellCoord:
    """
    (x, y) が属する 3x3 ボックスの左上の座標を返します。

    3 で割ってから 3 を掛けることで、3 の倍数に切り捨てています。
    """
    return x // BOX_WIDTH * BOX_WIDTH, y // BOX_WIDTH * BOX_WIDTH


def row_cells(y: int) -> List[CellCoord]:
    return [(i, y) for i in range(BOARD_WIDTH)]


def column_cells(x: int) -> List[CellCoord]:
    return [(x, i) for i in range(BOARD_WIDTH)]


def box_cells(x: int, y: int) -> List[CellCoord]:
    bx, by = box_origin(x, y)
    return [
        (bx + j, by + i)
        for i in range(BOX_WIDTH)
        for j in range(BOX_WIDTH)
    ]


def iter_peers(x: int, y: int) -> Iterator[CellCoord]:
    """
    (x, y) のピアを、行 → 列 → ボックスの順に 1 回ずつ返します。

    行や列と重なるボックス内のマスは、ボックスの段階では飛ばします。
    """
    for i in range(BOARD_WIDTH):
        if i != x:
            yield i, y

    for i in range(BOARD_WIDTH):
        if i != y:
            yield x, i

    bx, by = box_origin(x, y)
    for j in range(by, by + BOX_WIDTH):
        for i in range(bx, bx + BOX_WIDTH):
            # 行・列で処理済みのマス（と自分自身）は除く
            if i == x or j == y:
                continue
            yield i, j


def peers_of(x: int, y: int) -> List[CellCoord]:
    """(x, y) のピア 20 マスをリストで返します。"""
    return list(iter_peers(x, y))


def all_units() -> List[List[CellCoord]]:
    """9 行・9 列・9 ボックスの計 27 ユニットを返します。"""
    units: List[List[CellCoord]] = []
    units.extend(row_cells(y) for y in range(BOARD_WIDTH))
    units.extend(column_cells(x) for x in range(BOARD_WIDTH))
    units.extend(
        box_cells(bx, by)
        for by in range(0, BOARD_WIDTH, BOX_WIDTH)
        for bx in range(0, BOARD_WIDTH, BOX_WIDTH)
    )
    return units
