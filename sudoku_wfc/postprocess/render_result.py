# -*- coding: utf-8 -*-
"""
盤面の状態をもとに表示用の情報を構築するモジュールです。

- build_result()      : API やログ向けの辞書
- board_to_dataframe(): 確定数字の DataFrame（未確定は 0）
- candidates_frame()  : 各マスの候補数字を "129" のような文字列にした DataFrame
- render_text()       : 端末表示用のテキスト
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from ..board import Board
from ..config import BOARD_WIDTH, BOX_WIDTH
from ..csp.search import board_entropy
from ..grid.parser import grid_to_dataframe
from ..types import Conflict, SolveResult


def board_to_dataframe(board: Board) -> pd.DataFrame:
    """
    確定済みマスは数字（1〜9）、未確定マスは 0 とした DataFrame を返します。

    行ラベルが y、列ラベルが x です。
    """
    return grid_to_dataframe(board.digit_grid())


def candidates_frame(board: Board) -> pd.DataFrame:
    """
    各マスの候補数字を連結した文字列（例: "1359"）の DataFrame を返します。
    """
    rows: List[List[str]] = []
    for y in range(BOARD_WIDTH):
        rows.append([
            "".join(str(d) for d in board.candidates(x, y).digits())
            for x in range(BOARD_WIDTH)
        ])
    return grid_to_dataframe(rows)


def build_conflict_list(conflicts: List[Conflict]) -> List[Dict[str, Any]]:
    """
    矛盾の一覧を JSON にしやすい形にします。
    """
    return [
        {
            "first": list(c.first),
            "second": list(c.second),
            "digit": c.digit,
        }
        for c in conflicts
    ]


def build_result(
    board: Board,
    solve_result: Optional[SolveResult] = None,
) -> Dict[str, Any]:

    conflicts = solve_result.conflicts if solve_result is not None else board.conflicts()

    return {
        "solved_board": board_to_dataframe(board).values.tolist(),  # ★ DataFrameを返さない
        "candidates": candidates_frame(board).values.tolist(),
        "entropy": board_entropy(board),
        "solved": board.is_solved(),
        "rounds": solve_result.rounds if solve_result is not None else 0,
        "conflicts": build_conflict_list(conflicts),
        "shape": (BOARD_WIDTH, BOARD_WIDTH),
    }


def render_text(board: Board, show_candidates: bool = False) -> str:
    """
    盤面をテキストで描画します。

    確定済みマスは数字、未確定マスは "."（show_candidates=True なら候補数）を表示し、
    3x3 ボックスの境界に罫線を入れます。
    """
    separator = "+".join(["-" * (BOX_WIDTH * 2 + 1)] * BOX_WIDTH)
    lines: List[str] = []

    for y in range(BOARD_WIDTH):
        if y and y % BOX_WIDTH == 0:
            lines.append(separator)

        chunks: List[str] = []
        for bx in range(0, BOARD_WIDTH, BOX_WIDTH):
            cells: List[str] = []
            for x in range(bx, bx + BOX_WIDTH):
                if board.is_collapsed(x, y):
                    cells.append(str(board.collapsed_digit(x, y)))
                elif show_candidates:
                    cells.append(str(board.entropy(x, y)))
                else:
                    cells.append(".")
            chunks.append(" " + " ".join(cells) + " ")
        lines.append("|".join(chunks))

    return "\n".join(lines)
