# -*- coding: utf-8 -*-
"""
sudoku_wfc パッケージの入口となるモジュールです。

    from sudoku_wfc import Board, solve_board

で盤面とソルバーを直接使うか、

    from sudoku_wfc import solve

で、ヒント数字の盤面（pandas.DataFrame）を受け取り、
1. 盤面の前処理（空マス・数字の正規化）
2. ヒント数字の collapse（制約伝播つき）
3. 最小エントロピー順の solve()
4. 表示用の結果構築
を順番に呼び出せます。
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import pandas as pd

from .board import Board
from .config import DEFAULT_SEED
from .csp.search import board_entropy, solve as solve_board
from .grid.parser import normalize_grid, parse_line
from .logging_utils import get_logger
from .postprocess.render_result import build_result
from .types import CandidateSet, CollapseStep, Conflict, SolveResult

__all__ = [
    "Board",
    "CandidateSet",
    "CollapseStep",
    "Conflict",
    "SolveResult",
    "board_entropy",
    "parse_line",
    "solve",
    "solve_board",
]

logger = get_logger()


def solve(
    df: pd.DataFrame,
    seed: Optional[int] = DEFAULT_SEED,
) -> Dict[str, Any]:
    """
    ヒント数字の盤面を解くメイン関数。

    Parameters
    ----------
    df : pandas.DataFrame
        9x9 の盤面。空マスは 0 / "" / "." / NaN など。
    seed : int, optional
        候補選択に使う乱数シード。None なら毎回異なる結果になり得ます。

    Returns
    -------
    dict
        postprocess.render_result.build_result() の結果。
    """
    logger.info("=== solve() START ===")
    logger.info("Grid shape: %s", df.shape)

    # 1) 盤面パース
    givens = normalize_grid(df)

    # 2) ヒント数字を反映
    board = Board()
    board.load_givens(givens)
    logger.info("Entropy after givens: %d", board_entropy(board))

    # ヒント同士の重複チェック（この時点の矛盾は solve() では直せない）
    for c in board.conflicts():
        logger.warning(
            "[WARNING] Duplicate given detected! %d at %s and %s",
            c.digit, c.first, c.second,
        )

    # 3) 残りを WFC で確定
    solve_result = solve_board(board, rng=random.Random(seed))

    # 4) 表示用の結果を構築
    result = build_result(board, solve_result)

    logger.info("=== solve() END ===")
    return result
