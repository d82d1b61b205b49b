"""
Solved-grid filler.

Builds one fully solved, randomized grid from empty with recursive
backtracking. Each step branches on the empty cell with the fewest candidates;
candidate order is shuffled with the injected RNG so runs are reproducible
under a fixed seed.
"""

from typing import Optional, Tuple

import numpy as np

from .config import GeneratorConfig
from .constants import GRID_SIZE, NUM_CELLS
from .constraints import Grid, Cell, candidates, copy_grid, empty_grid


class FillBudgetExceeded(Exception):
    """Raised inside one attempt when it uses up max_fill_steps."""


class SolutionFiller:
    """
    Randomized most-constrained-cell backtracking filler.

    - Seeds 9 random cells with 1..9, then fills the rest.
    - A failed attempt (unsatisfiable seed or step budget spent) is retried
      with a fresh seed, up to config.max_fill_retries times.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.RandomState] = None,
    ):
        self.config = config or GeneratorConfig()
        self.rng = rng or np.random.RandomState(self.config.seed)
        self.attempts = 0
        self._steps = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fill(self) -> Grid:
        """Return one fully solved grid."""
        for attempt in range(1, self.config.max_fill_retries + 1):
            self.attempts += 1
            grid = empty_grid()
            self._seed(grid)
            self._steps = 0
            try:
                if self._solve(grid):
                    return grid
                reason = "unsatisfiable seed"
            except FillBudgetExceeded:
                reason = f"step budget of {self.config.max_fill_steps} spent"

            if self.config.verbose:
                print(f"⚠️  Fill attempt {attempt} failed ({reason}), re-seeding")

        raise RuntimeError(
            f"Failed to fill a grid after {self.config.max_fill_retries} attempts"
        )

    def solve(self, grid: Grid) -> Optional[Grid]:
        """Complete a partially filled grid with the same search, or None."""
        work = copy_grid(grid)
        self._steps = 0
        try:
            return work if self._solve(work) else None
        except FillBudgetExceeded:
            return None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _seed(self, grid: Grid) -> None:
        """Place 1..9 on nine distinct random cells."""
        positions = self.rng.choice(NUM_CELLS, size=GRID_SIZE, replace=False)
        for idx, pos in enumerate(positions):
            row, col = divmod(int(pos), GRID_SIZE)
            value = idx % GRID_SIZE + 1
            # Seed values are pairwise distinct, so they never clash with each
            # other. They can still leave a cell with no candidates, which the
            # search reports as a failed attempt.
            grid[row][col] = value

    def _most_constrained(self, grid: Grid) -> Tuple[Optional[Cell], list]:
        best_cell = None
        best_cands: list = []
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if grid[r][c] != 0:
                    continue
                cands = candidates(grid, r, c)
                if best_cell is None or len(cands) < len(best_cands):
                    best_cell, best_cands = (r, c), sorted(cands)
                    if not cands:
                        return best_cell, best_cands
        return best_cell, best_cands

    def _solve(self, grid: Grid) -> bool:
        cell, cands = self._most_constrained(grid)
        if cell is None:
            return True
        if not cands:
            return False

        row, col = cell
        for value in self.rng.permutation(cands):
            self._steps += 1
            if self._steps > self.config.max_fill_steps:
                raise FillBudgetExceeded()
            grid[row][col] = int(value)
            if self._solve(grid):
                return True
            grid[row][col] = 0
        return False
