# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

- get_logger()       : パッケージ共通のロガー（標準出力に INFO）
- get_trace_logger() : 制約伝播の経過をファイルに記録するロガー（DEBUG）
"""

from __future__ import annotations

import logging
import os

from . import config

# sudoku_wfc パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_wfc"

# 伝播トレース用のロガー名
TRACE_LOGGER_NAME = "sudoku_wfc.trace"


def get_logger() -> logging.Logger:
    """
    sudoku_wfc 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def get_trace_logger() -> logging.Logger:
    """
    伝播の連鎖で新しく確定したマスを記録する logger を返します。

    config.TRACE_LOG_DIR / config.TRACE_LOG_FILE に DEBUG で書き出し、
    パッケージ共通のロガーには流しません。
    propagation.trace_logger() から、config.TRACE_ENABLED のときだけ使われます。
    """
    logger = logging.getLogger(TRACE_LOGGER_NAME)

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    # ログファイル保存場所
    os.makedirs(config.TRACE_LOG_DIR, exist_ok=True)
    log_file = os.path.join(config.TRACE_LOG_DIR, config.TRACE_LOG_FILE)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # パッケージロガーへの伝播禁止（stdout に出さない）
    logger.propagate = False

    return logger
