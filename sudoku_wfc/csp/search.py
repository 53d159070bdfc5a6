# -*- coding: utf-8 -*-
"""
盤面全体を確定させる solve() を行うモジュールです。

波動関数の崩壊（WFC）と同じ考え方で、
「いちばん候補の少ない（エントロピーが低い）マス」から順に確定させます。

ざっくり流れ
------------
1. 盤面エントロピー（全マスの候補数の合計）が 81 なら終了
2. 全マスをエントロピーの小さい順に並べ、未確定の最初のマスを選ぶ
3. 0〜8 の乱数を起点に、候補に含まれる値を（9 で割った余りで）順に探す
4. 見つかった値で Board.collapse() を呼ぶ（伝播で他のマスも確定し得る）
5. 1 に戻る

collapse のたびに制約伝播が走るため、
ラウンド数は通常 81 よりずっと少なくなります。

注意
----
バックトラックは行いません。
ユーザーが矛盾する collapse をしていた場合だけでなく、
空の盤面から始めても、乱数で選んだ値と伝播の連鎖の結果として
同じユニットの 2 マスが同じ数字に確定することがあります。
そのときも solve() は止まりますが、完成した盤面は数独として正しくありません。
その場合は警告ログを出し、SolveResult.conflicts に矛盾を記録します。
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .. import config
from ..board import Board
from ..config import BOARD_WIDTH, SOLVED_ENTROPY
from ..logging_utils import get_logger
from ..types import CellCoord, CollapseStep, SolveResult
from .propagation import has_empty_cell

logger = get_logger()


@dataclass
class SolveContext:
    """
    solve() 全体で共有する情報をまとめたクラスです。
    """

    board: Board
    rng: random.Random
    rounds: int = 0
    steps: List[CollapseStep] = field(default_factory=list)


def board_entropy(board: Board) -> int:
    """
    全 81 マスの候補数の合計を返します。

    確定済みのマスは 1、未確定のマスは 2 以上を寄与するので、
    81 になるのは「すべてのマスが確定している」ときだけです。
    """
    return int(board.entropy_grid().sum())


def choose_next_cell(board: Board) -> CellCoord | None:
    """
    次に確定させるマスを選びます。

    全マスをエントロピーの小さい順に（同じなら左上から）並べ、
    未確定の最初のマスを返します。すべて確定済みなら None。
    """
    entropy = board.entropy_grid().ravel()
    order = np.argsort(entropy, kind="stable")

    for index in order:
        # 確定済み（エントロピー 1）は飛ばす
        if entropy[index] == 1:
            continue
        y, x = divmod(int(index), BOARD_WIDTH)
        return x, y

    return None


def pick_candidate(board: Board, x: int, y: int, rng: random.Random) -> int | None:
    """
    マス (x, y) の候補から値（0 始まり）を 1 つ選びます。

    0〜8 の乱数を起点として、候補に含まれる値が見つかるまで
    1 ずつ（9 で割った余りで巡回しながら）進めます。
    候補が 1 つもない場合は None を返します。
    """
    start = rng.randrange(BOARD_WIDTH)
    for offset in range(BOARD_WIDTH):
        value = (start + offset) % BOARD_WIDTH
        if board.is_set(x, y, value):
            return value
    return None


def solve_step(ctx: SolveContext) -> bool:
    """
    1 ラウンド分の collapse を行います。

    Returns
    -------
    bool
        collapse を行えば True。盤面が確定済み、または
        候補が空のマスに当たって先に進めない場合は False。
    """
    board = ctx.board

    if board_entropy(board) == SOLVED_ENTROPY:
        return False

    if has_empty_cell(board.tiles):
        logger.warning("[solve] a cell has no candidates left; stopping.")
        return False

    cell = choose_next_cell(board)
    if cell is None:
        return False

    x, y = cell
    entropy = board.entropy(x, y)
    value = pick_candidate(board, x, y, ctx.rng)
    if value is None:
        return False

    board.collapse(x, y, value)
    ctx.rounds += 1
    ctx.steps.append(CollapseStep(x=x, y=y, digit=value + 1, entropy=entropy))

    if ctx.rounds % config.SOLVE_LOG_INTERVAL == 0:
        logger.info(
            "[solve] rounds = %d, board_entropy = %d",
            ctx.rounds,
            board_entropy(board),
        )
    return True


def solve(board: Board, rng: Optional[random.Random] = None) -> SolveResult:
    """
    盤面のすべてのマスが確定するまで collapse を繰り返します。

    Parameters
    ----------
    board : Board
        対象の盤面。その場で書き換えます。
    rng : random.Random, optional
        候補の選択に使う乱数生成器。省略時は config.DEFAULT_SEED で作ります。

    Returns
    -------
    SolveResult
        ラウンド数、各ラウンドの collapse、完成したかどうか、矛盾の一覧。
    """
    if rng is None:
        rng = random.Random(config.DEFAULT_SEED)

    ctx = SolveContext(board=board, rng=rng)
    logger.info("[solve] start: board_entropy = %d", board_entropy(board))

    while solve_step(ctx):
        pass

    conflicts = board.conflicts()
    solved = board_entropy(board) == SOLVED_ENTROPY and not conflicts

    if conflicts:
        logger.warning(
            "[solve] finished with %d conflict(s); they come from an inconsistent "
            "collapse or from the propagation cascade itself "
            "(no backtracking is done).",
            len(conflicts),
        )
        for c in conflicts:
            logger.warning("  %s and %s are both %d", c.first, c.second, c.digit)

    logger.info("[solve] end: rounds = %d, solved = %s", ctx.rounds, solved)

    return SolveResult(
        rounds=ctx.rounds,
        steps=ctx.steps,
        solved=solved,
        conflicts=conflicts,
    )
