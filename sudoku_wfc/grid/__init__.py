# -*- coding: utf-8 -*-
"""
sudoku_wfc.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : DataFrame や 81 文字の文字列から内部表現への変換
- peers.py  : 同じ行・列・ボックスにあるマス（ピア）の計算
"""
