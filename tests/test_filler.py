import numpy as np
import pytest

from conftest import assert_valid_solution
from sudoku_engine.config import GeneratorConfig
from sudoku_engine.filler import SolutionFiller


def test_fill_produces_valid_grid(rng):
    grid = SolutionFiller(rng=rng).fill()
    assert_valid_solution(grid)
    assert all(isinstance(v, int) for row in grid for v in row)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_fill_valid_across_seeds(seed):
    assert_valid_solution(SolutionFiller(GeneratorConfig(seed=seed)).fill())


def test_same_seed_same_grid():
    a = SolutionFiller(rng=np.random.RandomState(99)).fill()
    b = SolutionFiller(rng=np.random.RandomState(99)).fill()
    assert a == b


def test_successive_fills_differ(rng):
    filler = SolutionFiller(rng=rng)
    assert filler.fill() != filler.fill()


def test_solve_completes_classic_puzzle(classic):
    puzzle, solution = classic
    assert SolutionFiller(rng=np.random.RandomState(0)).solve(puzzle) == solution


def test_solve_returns_none_for_dead_end():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    assert SolutionFiller(rng=np.random.RandomState(0)).solve(grid) is None


class _BadFirstSeedFiller(SolutionFiller):
    """First seed is unsatisfiable: row 0 holds 1..8 and 9 sits in the
    block of the row's last empty cell."""

    def _seed(self, grid):
        if self.attempts == 1:
            grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
            grid[1][8] = 9
        else:
            super()._seed(grid)


def test_unsatisfiable_seed_is_retried(rng):
    filler = _BadFirstSeedFiller(rng=rng)
    grid = filler.fill()
    assert filler.attempts == 2
    assert_valid_solution(grid)


def test_exhausted_retries_raise(rng):
    config = GeneratorConfig(max_fill_retries=3, max_fill_steps=0)
    filler = SolutionFiller(config, rng)
    with pytest.raises(RuntimeError):
        filler.fill()
    assert filler.attempts == 3
