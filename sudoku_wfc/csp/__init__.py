# -*- coding: utf-8 -*-
"""
sudoku_wfc.csp パッケージ

波動関数の崩壊（WFC）風の制約伝播と、それを使った求解処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- domains.py     : 候補集合のビット表現とエントロピー計算
- propagation.py : collapse に伴う制約伝播と矛盾の検出
- search.py      : 最小エントロピーのマスから確定させていく solve()
"""
