# -*- coding: utf-8 -*-
"""
盤面を画像として描画するモジュールです。

レイアウト
----------
- 1 マス 128px、外周の余白 16px（盤面画像は 1184px 四方）
- 確定済みのマスは中央に大きく数字を描く
- 未確定のマスは 3x3 のサブマスに残っている候補数字を小さく描く
- 3x3 ボックスの境界は太線
- 矛盾しているマス（同じユニットに同じ数字）は数字を赤で描く
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional, Set

from PIL import Image, ImageDraw, ImageFont

from .. import config
from ..board import Board
from ..config import BOARD_WIDTH, BOX_WIDTH
from ..types import CellCoord


@lru_cache(maxsize=None)
def _load_font(path: Optional[str], size: int) -> ImageFont.FreeTypeFont:
    if path:
        return ImageFont.truetype(path, size)
    return ImageFont.load_default(size=size)


def load_font(size: int) -> ImageFont.FreeTypeFont:
    """
    描画用フォントの読み込み（同じパス・サイズは使い回す）
    """
    return _load_font(config.FONT_PATH, size)


def tile_origin(x: int, y: int) -> CellCoord:
    """マス (x, y) の左上のピクセル座標を返します。"""
    return (
        x * config.TILE_SIZE + config.BOARD_PADDING,
        y * config.TILE_SIZE + config.BOARD_PADDING,
    )


def _conflict_cells(board: Board) -> Set[CellCoord]:
    cells: Set[CellCoord] = set()
    for c in board.conflicts():
        cells.add(c.first)
        cells.add(c.second)
    return cells


def draw_tile(
    draw: ImageDraw.ImageDraw,
    board: Board,
    x: int,
    y: int,
    conflict_cells: Set[CellCoord],
) -> None:
    tile_x, tile_y = tile_origin(x, y)
    size = config.TILE_SIZE

    # マスの枠
    draw.rectangle(
        (tile_x, tile_y, tile_x + size, tile_y + size),
        outline=config.LINE_COLOR,
        width=1,
    )

    # 確定済みなら中央に数字を描いて終わり
    if board.is_collapsed(x, y):
        color = config.CONFLICT_COLOR if (x, y) in conflict_cells else config.COLLAPSED_COLOR
        draw.text(
            (tile_x + size // 2, tile_y + size // 2),
            str(board.collapsed_digit(x, y)),
            fill=color,
            font=load_font(config.COLLAPSED_FONT_SIZE),
            anchor="mm",
        )
        return

    # 未確定なら残っている候補を 3x3 に並べる
    font = load_font(config.CANDIDATE_FONT_SIZE)
    sub = config.SUBTILE_SIZE
    for bit in range(BOARD_WIDTH):
        if not board.is_set(x, y, bit):
            continue
        sub_x = tile_x + bit % BOX_WIDTH * sub
        sub_y = tile_y + bit // BOX_WIDTH * sub
        draw.text(
            (sub_x + sub // 2, sub_y + sub // 2),
            str(bit + 1),
            fill=config.CANDIDATE_COLOR,
            font=font,
            anchor="mm",
        )


def render_board(board: Board) -> Image.Image:
    """
    盤面全体を描画した RGB 画像を返します。
    """
    width = config.BOARD_IMAGE_WIDTH
    image = Image.new("RGB", (width, width), config.BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    conflict_cells = _conflict_cells(board)
    for y in range(BOARD_WIDTH):
        for x in range(BOARD_WIDTH):
            draw_tile(draw, board, x, y, conflict_cells)

    # 3x3 ボックスを区切る太線
    pad = config.BOARD_PADDING
    span = BOARD_WIDTH * config.TILE_SIZE
    for i in range(0, BOARD_WIDTH + 1, BOX_WIDTH):
        offset = pad + i * config.TILE_SIZE
        draw.line((pad, offset, pad + span, offset), fill=config.LINE_COLOR, width=config.BOX_LINE_WIDTH)
        draw.line((offset, pad, offset, pad + span), fill=config.LINE_COLOR, width=config.BOX_LINE_WIDTH)

    return image


def save_board_image(board: Board, path: str | Path) -> Path:
    """
    盤面画像を PNG などで保存し、保存先のパスを返します。

    保存先のディレクトリが無ければ作成します。
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    render_board(board).save(p)
    return p
