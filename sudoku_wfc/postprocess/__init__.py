# -*- coding: utf-8 -*-
"""
sudoku_wfc.postprocess パッケージ

盤面の状態を表示用の形（辞書・DataFrame・テキスト・画像）に変換します。
- render_result.py : 辞書 / DataFrame / テキスト
- render_image.py  : Pillow による盤面画像
"""
