# -*- coding: utf-8 -*-
"""
sudoku_wfc 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- collapse 時に候補外の数字を拒否するかどうか
- solve() の乱数シード
- 伝播トレースログの出力先
- 盤面画像のサイズや色
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

# ==== 盤面の形 =============================================================

# 盤面の一辺のマス数
BOARD_WIDTH: int = 9

# 3x3 ボックスの一辺のマス数
BOX_WIDTH: int = 3

# 盤面全体のマス数
BOARD_SIZE: int = BOARD_WIDTH * BOARD_WIDTH

# 0x1FF は下位 9 ビットがすべて 1。
# 「1〜9 のどれでもよい」状態（重ね合わせ）を表します。
FULL_DOMAIN: int = (1 << BOARD_WIDTH) - 1

# すべてのマスが確定したときの盤面エントロピー（81）
SOLVED_ENTROPY: int = BOARD_SIZE

# リセット直後の盤面エントロピー（81 * 9 = 729）
FULL_ENTROPY: int = BOARD_SIZE * BOARD_WIDTH

# ==== collapse 関連 ========================================================

# True にすると、候補集合に含まれない数字への collapse を ValueError にします。
# False（既定）の場合は候補外の数字でもそのまま上書きします。
STRICT_COLLAPSE: bool = False

# ==== 探索関連 =============================================================

# solve() で使う乱数シード。None なら毎回異なる盤面になります。
DEFAULT_SEED: int | None = None

# solve() の進捗ログを何ラウンドごとに出すか
SOLVE_LOG_INTERVAL: int = 10

# ==== 盤面の読み込み =======================================================

# 空マスとして扱う文字列
EMPTY_CELL_MARKERS: FrozenSet[str] = frozenset({"", ".", "0", "_", "-"})

# ==== 伝播トレースログ =====================================================

# True にすると、伝播で新しく確定したマスを 1 件ずつファイルに記録します。
TRACE_ENABLED: bool = False

TRACE_LOG_DIR: str = "logs"
TRACE_LOG_FILE: str = "propagation_trace.log"

# ==== 描画関連 =============================================================

# 1 マスのピクセル数
TILE_SIZE: int = 128

# 候補数字 1 個分のサブマス（3x3 に分割）
SUBTILE_SIZE: int = TILE_SIZE // 3

# 盤面の外周余白
BOARD_PADDING: int = 16

# 3x3 ボックスを区切る太線の幅
BOX_LINE_WIDTH: int = 6

# 描画に使う TrueType フォント。None なら Pillow 内蔵フォントを使います。
FONT_PATH: str | None = None

# 確定数字・候補数字のフォントサイズ
COLLAPSED_FONT_SIZE: int = 48
CANDIDATE_FONT_SIZE: int = 32

# 描画色 (R, G, B)
BACKGROUND_COLOR: Tuple[int, int, int] = (245, 245, 245)
LINE_COLOR: Tuple[int, int, int] = (0, 0, 0)
COLLAPSED_COLOR: Tuple[int, int, int] = (0, 0, 0)
CANDIDATE_COLOR: Tuple[int, int, int] = (130, 130, 130)
CONFLICT_COLOR: Tuple[int, int, int] = (230, 41, 55)

# 盤面画像の一辺（9 * 128 + 16 * 2 = 1184）
BOARD_IMAGE_WIDTH: int = BOARD_WIDTH * TILE_SIZE + BOARD_PADDING * 2
