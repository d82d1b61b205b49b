# tests/conftest.py
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Add src/ to sys.path so "sudoku_engine" imports without an install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import numpy as np
import pytest

from sudoku_engine.constants import EXAMPLE_PUZZLES
from sudoku_engine.constraints import copy_grid


@pytest.fixture
def classic():
    ex = EXAMPLE_PUZZLES[0]
    return copy_grid(ex["puzzle"]), copy_grid(ex["solution"])


@pytest.fixture
def minimal_17():
    ex = EXAMPLE_PUZZLES[1]
    return copy_grid(ex["puzzle"]), copy_grid(ex["solution"])


@pytest.fixture
def rng():
    return np.random.RandomState(1234)


def assert_valid_solution(grid):
    digits = list(range(1, 10))
    for r in range(9):
        assert sorted(grid[r]) == digits
    for c in range(9):
        assert sorted(grid[r][c] for r in range(9)) == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = [grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
            assert sorted(box) == digits
