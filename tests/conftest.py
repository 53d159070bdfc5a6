# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_wfc" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_wfc import config  # noqa: E402
from sudoku_wfc.board import Board  # noqa: E402

# A well-known puzzle with a unique solution
EASY_LINE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _default_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "STRICT_COLLAPSE", False)
    monkeypatch.setattr(config, "TRACE_ENABLED", False)
    monkeypatch.setattr(config, "TRACE_LOG_DIR", str(tmp_path / "logs"))
