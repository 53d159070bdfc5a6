# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

あるマスを 1 つの数字に確定（collapse）させると、
同じ行・列・3x3 ボックスにあるマス（ピア）の候補から
その数字を取り除きます。

伝播は 2 段階で行います。
1. 未確定のピアすべてから数字を取り除く
2. 1. で候補がちょうど 1 つになった（新しく確定した）ピアから、
   そのピアの数字で同じ伝播を続ける

先に全ピアから数字を取り除くため、連鎖の途中で
ピアが元のマスと同じ数字に確定することはありません。

各伝播でどこかのマスの候補数が必ず 1 以上減るため、
81 マスの盤面では必ず停止します。

なお、この伝播は矛盾を修復しません。
確定済みのマスには一切手を触れないため、
矛盾する collapse を行った場合や、
連鎖で同じユニットの 2 マスが同時に同じ数字へ絞られた場合には、
同じ数字で確定したピアが残ることがあります（find_conflicts() で検出できます）。
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from .. import config
from ..grid.peers import all_units, iter_peers
from ..logging_utils import get_trace_logger
from ..types import CellCoord, Conflict
from .domains import (
    collapsed_value_of,
    entropy_grid,
    is_collapsed_mask,
    value_to_bit,
    value_to_digit,
)


def trace_logger() -> Optional[logging.Logger]:
    if not config.TRACE_ENABLED:
        return None
    return get_trace_logger()


def _remove(
    tiles: np.ndarray,
    x: int,
    y: int,
    value: int,
    trace: Optional[logging.Logger],
) -> Optional[int]:
    """
    マス (x, y) の候補から value を取り除き、
    「未確定 → 確定」に変わった場合だけ新しい値を返します（それ以外は None）。
    """
    before = int(tiles[y, x])
    after = before & ~value_to_bit(value)
    tiles[y, x] = after

    if is_collapsed_mask(before) or not is_collapsed_mask(after):
        return None

    new_value = collapsed_value_of(after)
    if trace is not None:
        trace.debug(
            "propagated collapse (%d, %d) -> %d (removed %d)",
            x, y, value_to_digit(new_value), value_to_digit(value),
        )
    return new_value


def constrain(
    tiles: np.ndarray,
    x: int,
    y: int,
    value: int,
    trace: Optional[logging.Logger] = None,
) -> None:
    """
    マス (x, y) の候補から value を取り除きます（無ければ何もしない）。

    この操作でマスが「未確定 → 確定」に変わった場合だけ、
    そのマスの新しい値でピアへの伝播を行います。
    もともと確定済みだったマスや、まだ候補が 2 つ以上残るマスからは
    伝播しません。
    """
    new_value = _remove(tiles, x, y, value, trace)
    if new_value is not None:
        propagate(tiles, x, y, new_value, trace=trace)


def propagate(
    tiles: np.ndarray,
    x: int,
    y: int,
    value: int,
    trace: Optional[logging.Logger] = None,
) -> None:
    """
    (x, y) のピアのうち、未確定のマスすべてから value を取り除きます。

    ピアは行・列・ボックスを通して 1 回ずつだけ処理します。
    確定済みのピアは、たとえ value を含んでいても変更しません。
    すべてのピアから value を取り除いた後で、
    新しく確定したピアから順に伝播を続けます。
    """
    newly_collapsed: List[Tuple[int, int, int]] = []
    for px, py in iter_peers(x, y):
        # 確定済みのマスには触れない
        if is_collapsed_mask(tiles[py, px]):
            continue
        new_value = _remove(tiles, px, py, value, trace)
        if new_value is not None:
            newly_collapsed.append((px, py, new_value))

    for px, py, new_value in newly_collapsed:
        propagate(tiles, px, py, new_value, trace=trace)


def propagate_from(tiles: np.ndarray, x: int, y: int, value: int) -> None:
    """設定に応じてトレースロガーを付けて :func:`propagate` を呼びます。"""
    propagate(tiles, x, y, value, trace=trace_logger())


def find_conflicts(tiles: np.ndarray) -> List[Conflict]:
    """
    同じユニット（行・列・ボックス）内で同じ数字に確定している
    マスの組を列挙します。

    行とボックスの両方で重複している組は 1 回だけ数えます。

    Returns
    -------
    list of Conflict
        座標順に並べた矛盾の一覧。矛盾がなければ空リスト。
    """
    entropy = entropy_grid(tiles)
    seen: Set[Tuple[CellCoord, CellCoord, int]] = set()

    for unit in all_units():
        by_value: Dict[int, List[CellCoord]] = defaultdict(list)
        for x, y in unit:
            if entropy[y, x] == 1:
                by_value[collapsed_value_of(tiles[y, x])].append((x, y))

        for value, cells in by_value.items():
            if len(cells) < 2:
                continue
            for i in range(len(cells)):
                for j in range(i + 1, len(cells)):
                    first, second = sorted((cells[i], cells[j]), key=lambda c: (c[1], c[0]))
                    seen.add((first, second, value_to_digit(value)))

    ordered = sorted(seen, key=lambda t: (t[0][1], t[0][0], t[1][1], t[1][0]))
    return [Conflict(first=f, second=s, digit=d) for f, s, d in ordered]


def has_empty_cell(tiles: np.ndarray) -> bool:
    """候補が 1 つもないマスがあれば True。"""
    return bool((entropy_grid(tiles) == 0).any())
