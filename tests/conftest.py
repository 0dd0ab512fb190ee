# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the flat modules import without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from model import Puzzle  # noqa: E402

CLASSIC_ROWS = [
    "53--7----",
    "6--195---",
    "-98----6-",
    "8---6---3",
    "4--8-3--1",
    "7---2---6",
    "-6----28-",
    "---419--5",
    "----8--79",
]

SOLUTION_ROWS = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]


@pytest.fixture
def classic():
    return Puzzle.parse(CLASSIC_ROWS)


@pytest.fixture
def custom():
    return Puzzle.create_custom()


@pytest.fixture
def classic_rows():
    return list(CLASSIC_ROWS)


@pytest.fixture
def solution_rows():
    return list(SOLUTION_ROWS)
