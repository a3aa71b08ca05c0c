# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def rng():
    return random.Random(1234)


# A known-valid solved grid (shifted-row pattern)
SOLVED = [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


@pytest.fixture
def solved():
    return [row[:] for row in SOLVED]
