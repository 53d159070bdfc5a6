# -*- coding: utf-8 -*-
"""
9x9 の盤面（Board）を表すモジュールです。

各マスは「まだなり得る数字の集合（候補集合）」を持ちます。
マスを 1 つの数字に確定（collapse）させると、
同じ行・列・ボックスのマスからその数字が取り除かれ、
候補が 1 つになったマスは連鎖的に確定していきます。

Board は次の 2 つを保持します。
- 現在の盤面（候補マスクの 9x9 配列）
- 直前の collapse の前の盤面（1 段階だけの undo 用）

座標は (x, y) で、x が列、y が行です。
値 value は 0 始まり（0〜8）で、表示上の数字 1〜9 に対応します。
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from . import config
from .config import BOARD_WIDTH, FULL_DOMAIN
from .csp import propagation
from .csp.domains import (
    check_value,
    collapsed_value_of,
    digit_to_value,
    entropy_grid,
    is_collapsed_mask,
    popcount,
    value_to_bit,
)
from .grid.peers import check_coord
from .logging_utils import get_logger
from .types import CandidateSet, Conflict

logger = get_logger()


def _full_tiles() -> np.ndarray:
    return np.full((BOARD_WIDTH, BOARD_WIDTH), FULL_DOMAIN, dtype=np.uint16)


class Board:
    """
    候補集合の 9x9 グリッドと、undo 用のスナップショットを持つクラスです。

    生成直後はすべてのマスが 1〜9 の候補を持ちます（エントロピー 9）。
    """

    def __init__(self) -> None:
        self._tiles: np.ndarray = _full_tiles()
        # collapse 前の状態を 1 段階だけ保存しておく場所
        self._last_tiles: np.ndarray = _full_tiles()

    # ------------------------------------------------------------------
    # 変更系の操作
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """すべてのマスを 1〜9 の重ね合わせに戻します（undo 用の保存は触らない）。"""
        self._tiles[:, :] = FULL_DOMAIN

    def collapse(self, x: int, y: int, value: int, strict: Optional[bool] = None) -> None:
        """
        マス (x, y) を値 value に確定させ、ピアへ制約を伝播します。

        1. 現在の盤面を undo 用に丸ごと保存（既に確定済みのマスでも必ず行う）
        2. マスを {value} で上書き（候補に value が無くても上書きする）
        3. (x, y) から value を伝播

        Parameters
        ----------
        x, y : int
            マスの座標（0〜8）。
        value : int
            0 始まりの値（0〜8）。数字 1〜9 に対応します。
        strict : bool, optional
            True なら、value が現在の候補に含まれない場合に ValueError。
            None のときは config.STRICT_COLLAPSE に従います。
        """
        x, y = check_coord(x, y)
        value = check_value(value)

        if strict is None:
            strict = config.STRICT_COLLAPSE
        if strict and not self.is_set(x, y, value):
            raise ValueError(
                f"Value {value + 1} is not a candidate of cell ({x}, {y})"
            )

        np.copyto(self._last_tiles, self._tiles)

        self._tiles[y, x] = value_to_bit(value)
        logger.debug("collapse (%d, %d) -> %d", x, y, value + 1)

        propagation.propagate_from(self._tiles, x, y, value)

    def collapse_digit(self, x: int, y: int, digit: int, strict: Optional[bool] = None) -> None:
        """表示用の数字（1〜9）で :meth:`collapse` を呼びます。"""
        self.collapse(x, y, digit_to_value(digit), strict=strict)

    def constrain(self, x: int, y: int, value: int) -> None:
        """マス (x, y) の候補から value を取り除きます。詳細は propagation.constrain。"""
        x, y = check_coord(x, y)
        propagation.constrain(
            self._tiles, x, y, check_value(value), trace=propagation.trace_logger()
        )

    def propagate(self, x: int, y: int, value: int) -> None:
        """(x, y) のピアの未確定マスから value を取り除きます。"""
        x, y = check_coord(x, y)
        propagation.propagate_from(self._tiles, x, y, check_value(value))

    def undo(self) -> None:
        """直前の collapse の前の状態に戻します。"""
        np.copyto(self._tiles, self._last_tiles)

    def load_givens(self, grid: np.ndarray) -> int:
        """
        ヒント数字の 9x9 配列（0 は空マス）を盤面に反映します。

        盤面をリセットしてから、0 以外のマスを左上から順に collapse します。
        すでに伝播で同じ数字に確定しているマスも collapse し直します。

        Returns
        -------
        int
            反映したヒントの数。
        """
        grid = np.asarray(grid)
        if grid.shape != (BOARD_WIDTH, BOARD_WIDTH):
            raise ValueError(f"Givens must be 9x9, got {grid.shape}")

        self.reset()
        count = 0
        for y in range(BOARD_WIDTH):
            for x in range(BOARD_WIDTH):
                digit = int(grid[y, x])
                if digit == 0:
                    continue
                self.collapse_digit(x, y, digit)
                count += 1

        logger.info("Loaded %d givens.", count)
        return count

    # ------------------------------------------------------------------
    # 参照系の操作（描画側から使う）
    # ------------------------------------------------------------------

    def is_collapsed(self, x: int, y: int) -> bool:
        x, y = check_coord(x, y)
        return is_collapsed_mask(self._tiles[y, x])

    def collapsed_value(self, x: int, y: int) -> int:
        """確定済みマスの値（0 始まり）。確定していなければ ValueError。"""
        x, y = check_coord(x, y)
        return collapsed_value_of(self._tiles[y, x])

    def collapsed_digit(self, x: int, y: int) -> int:
        """確定済みマスの数字（1〜9）。"""
        return self.collapsed_value(x, y) + 1

    def is_set(self, x: int, y: int, bit: int) -> bool:
        """マス (x, y) の候補に値 bit（0 始まり）が含まれていれば True。"""
        x, y = check_coord(x, y)
        return bool(int(self._tiles[y, x]) & value_to_bit(check_value(bit)))

    def entropy(self, x: int, y: int) -> int:
        x, y = check_coord(x, y)
        return popcount(self._tiles[y, x])

    def candidates(self, x: int, y: int) -> CandidateSet:
        x, y = check_coord(x, y)
        return CandidateSet(int(self._tiles[y, x]))

    def entropy_grid(self) -> np.ndarray:
        """各マスの候補数を 9x9 配列で返します。"""
        return entropy_grid(self._tiles)

    def conflicts(self) -> List[Conflict]:
        return propagation.find_conflicts(self._tiles)

    def is_solved(self) -> bool:
        """すべてのマスが確定し、かつ矛盾がなければ True。"""
        return bool((self.entropy_grid() == 1).all()) and not self.conflicts()

    def digit_grid(self) -> np.ndarray:
        """
        確定済みマスは数字（1〜9）、未確定マスは 0 とした 9x9 配列を返します。
        """
        out = np.zeros((BOARD_WIDTH, BOARD_WIDTH), dtype=np.int64)
        for y in range(BOARD_WIDTH):
            for x in range(BOARD_WIDTH):
                mask = self._tiles[y, x]
                if is_collapsed_mask(mask):
                    out[y, x] = collapsed_value_of(mask) + 1
        return out

    @property
    def tiles(self) -> np.ndarray:
        """現在の候補マスク配列のコピー（shape = (9, 9)）。"""
        return self._tiles.copy()

    @property
    def last_tiles(self) -> np.ndarray:
        """undo 用に保存している候補マスク配列のコピー。"""
        return self._last_tiles.copy()

    def copy(self) -> "Board":
        """盤面と undo 用の保存を含めた複製を返します。"""
        other = Board()
        np.copyto(other._tiles, self._tiles)
        np.copyto(other._last_tiles, self._last_tiles)
        return other

    def same_state(self, other: "Board") -> bool:
        """現在の盤面が other と同じなら True（undo 用の保存は比較しない）。"""
        return bool(np.array_equal(self._tiles, other._tiles))

    def __repr__(self) -> str:
        return (
            f"Board(entropy={int(self.entropy_grid().sum())}, "
            f"collapsed={int((self.entropy_grid() == 1).sum())})"
        )
