# -*- coding: utf-8 -*-
"""
端末から盤面を操作するための入力レイヤーです。

    python -m sudoku_wfc.app [--givens LINE_OR_CSV] [--seed N] [--solve] [--image PATH]

コマンド（1 行に 1 つ）
----------------------
- c x y d : マス (x, y) を数字 d (1〜9) に確定
- z       : 直前の collapse を取り消す（1 段階のみ）
- r       : 盤面をリセット
- s       : 残りのマスをすべて確定（solve）
- p       : 盤面を表示（候補数つき）
- i PATH  : 盤面を画像で保存
- q       : 終了
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from .board import Board
from .config import DEFAULT_SEED
from .csp.search import board_entropy, solve
from .grid.parser import load_givens_csv, parse_line
from .logging_utils import get_logger
from .postprocess.render_image import save_board_image
from .postprocess.render_result import render_text

logger = get_logger()

PROMPT = "> "

HELP_TEXT = (
    "commands: c x y d (collapse) | z (undo) | r (reset) | s (solve) | "
    "p (print) | i PATH (save image) | q (quit)"
)


def load_givens(source: str):
    """
    --givens の値を読み込みます。既存のファイルなら CSV、そうでなければ 81 文字の 1 行とみなします。
    """
    if Path(source).is_file():
        return load_givens_csv(source)
    return parse_line(source)


def status_line(board: Board) -> str:
    return f"entropy={board_entropy(board)} conflicts={len(board.conflicts())}"


def handle_command(board: Board, line: str, rng: random.Random) -> Tuple[bool, str]:
    """
    1 行分のコマンドを実行します。

    Returns
    -------
    (keep_running, message)
        keep_running が False なら終了します。message は表示する文字列。
    """
    parts = line.split()
    if not parts:
        return True, ""

    cmd, args = parts[0].lower(), parts[1:]

    if cmd == "q":
        return False, ""

    if cmd == "c":
        if len(args) != 3:
            return True, "usage: c x y d"
        try:
            x, y, digit = (int(a) for a in args)
            board.collapse_digit(x, y, digit)
        except ValueError as e:
            return True, f"error: {e}"
        return True, render_text(board, show_candidates=True) + "\n" + status_line(board)

    if cmd == "z":
        board.undo()
        return True, render_text(board, show_candidates=True) + "\n" + status_line(board)

    if cmd == "r":
        board.reset()
        return True, render_text(board, show_candidates=True) + "\n" + status_line(board)

    if cmd == "s":
        result = solve(board, rng=rng)
        return True, (
            render_text(board)
            + "\n"
            + f"rounds={result.rounds} solved={result.solved} "
            + status_line(board)
        )

    if cmd == "p":
        return True, render_text(board, show_candidates=True) + "\n" + status_line(board)

    if cmd == "i":
        if len(args) != 1:
            return True, "usage: i PATH"
        try:
            path = save_board_image(board, args[0])
        except (OSError, ValueError) as e:
            return True, f"error: {e}"
        return True, f"saved {path}"

    return True, HELP_TEXT


def run_repl(board: Board, rng: random.Random, stdin: TextIO, stdout: TextIO) -> None:
    """stdin から 1 行ずつコマンドを読み、q か EOF まで実行します。"""
    stdout.write(HELP_TEXT + "\n")
    stdout.write(render_text(board, show_candidates=True) + "\n")

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        keep_running, message = handle_command(board, line, rng)
        if message:
            stdout.write(message + "\n")
        if not keep_running:
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sudoku solver/assistant based on wave function collapse"
    )
    parser.add_argument(
        "--givens",
        help="81 文字の盤面（空マスは . か 0）または 9x9 の CSV ファイル",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="solve で使う乱数シード（省略時は毎回異なる）",
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="対話モードに入らず、すぐに solve して結果を表示する",
    )
    parser.add_argument(
        "--image",
        help="終了時に盤面画像を保存するパス",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    board = Board()
    rng = random.Random(args.seed)

    if args.givens:
        try:
            board.load_givens(load_givens(args.givens))
        except (ValueError, FileNotFoundError) as e:
            logger.error("Failed to load givens: %s", e)
            return 2

    if args.solve:
        result = solve(board, rng=rng)
        sys.stdout.write(render_text(board) + "\n")
        sys.stdout.write(f"rounds={result.rounds} solved={result.solved}\n")
    else:
        run_repl(board, rng, sys.stdin, sys.stdout)

    if args.image:
        path = save_board_image(board, args.image)
        logger.info("Saved board image to %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
