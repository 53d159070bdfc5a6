# -*- coding: utf-8 -*-
"""
sudoku_wfc で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .config import FULL_DOMAIN
from .csp.domains import (
    check_value,
    collapsed_value_of,
    popcount,
    value_to_bit,
    value_to_digit,
    values_of,
)

# 盤面上の座標を表す型 (x, y)。x が列、y が行です。
CellCoord = Tuple[int, int]


@dataclass(frozen=True)
class CandidateSet:
    """
    1 マスの候補数字の集合（重ね合わせ）を表すクラスです。

    内部では 9 ビットのマスクを保持しますが、
    外から見ると「1〜9 の数字の集合」として振る舞います。
    変更系のメソッドは新しい CandidateSet を返します。

    Attributes
    ----------
    mask : int
        ビット 0 が数字 1、ビット 8 が数字 9 に対応するマスク。
    """

    mask: int = FULL_DOMAIN

    @classmethod
    def full(cls) -> "CandidateSet":
        """1〜9 すべてを候補に持つ集合を返します。"""
        return cls(FULL_DOMAIN)

    @classmethod
    def single(cls, value: int) -> "CandidateSet":
        """値 value（0 始まり）だけを持つ集合を返します。"""
        return cls(value_to_bit(check_value(value)))

    def contains(self, value: int) -> bool:
        return bool(self.mask & value_to_bit(check_value(value)))

    def add(self, value: int) -> "CandidateSet":
        return CandidateSet(self.mask | value_to_bit(check_value(value)))

    def remove(self, value: int) -> "CandidateSet":
        return CandidateSet(self.mask & ~value_to_bit(check_value(value)) & FULL_DOMAIN)

    @property
    def is_collapsed(self) -> bool:
        """候補がちょうど 1 つなら True。"""
        return len(self) == 1

    @property
    def collapsed_value(self) -> int:
        """確定済みの値（0 始まり）。確定していなければ ValueError。"""
        return collapsed_value_of(self.mask)

    def values(self) -> List[int]:
        """候補の値（0 始まり）を昇順で返します。"""
        return values_of(self.mask)

    def digits(self) -> List[int]:
        """候補の数字（1〜9）を昇順で返します。"""
        return [value_to_digit(v) for v in self.values()]

    def __len__(self) -> int:
        return popcount(self.mask)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values())

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and 0 <= value < 9 and self.contains(value)


@dataclass(frozen=True)
class CollapseStep:
    """
    solve() が 1 ラウンドで行った collapse を表すクラスです。

    Attributes
    ----------
    x, y : int
        collapse したマスの座標。
    digit : int
        確定させた数字（1〜9）。
    entropy : int
        collapse 直前のそのマスの候補数。
    """

    x: int
    y: int
    digit: int
    entropy: int


@dataclass(frozen=True)
class Conflict:
    """
    同じ行・列・ボックスにある 2 マスが同じ数字で確定している状態（矛盾）。
    """

    first: CellCoord
    second: CellCoord
    digit: int


@dataclass
class SolveResult:
    """
    solve() の実行結果をまとめたクラスです。

    Attributes
    ----------
    rounds : int
        collapse を行ったラウンド数（伝播で確定したマスは含まない）。
    steps : list of CollapseStep
        各ラウンドで選んだマスと数字。
    solved : bool
        盤面エントロピーが 81 に達し、かつ矛盾がなければ True。
    conflicts : list of Conflict
        終了時点で見つかった矛盾の一覧。
    """

    rounds: int = 0
    steps: List[CollapseStep] = field(default_factory=list)
    solved: bool = False
    conflicts: List[Conflict] = field(default_factory=list)
