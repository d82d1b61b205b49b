"""
Sudoku puzzle generator.

Public entry points used by the game/session layer: one call for a solved
grid, one for a {puzzle, solution} pair at a difficulty.
"""

import time
from typing import Optional, Tuple

import numpy as np

from .carver import Puzzle, PuzzleCarver
from .config import GeneratorConfig
from .constants import clue_fraction
from .constraints import Grid
from .filler import SolutionFiller
from .strong_verifier import StrongVerifier


class SudokuGenerator:
    """
    Generates solved grids and uniquely solvable puzzles.

    - One RNG per generator, shared by filler and carver; pass a seeded
      np.random.RandomState (or config.seed) for reproducible output.
    - Not thread-safe; use one generator per thread or process.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.RandomState] = None,
    ):
        self.config = config or GeneratorConfig()
        self.rng = rng or np.random.RandomState(self.config.seed)
        self.filler = SolutionFiller(self.config, self.rng)
        self.carver = PuzzleCarver(self.config, self.rng)
        self.solutions_generated = 0
        self.puzzles_generated = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate_solution(self) -> Grid:
        """Return one fully solved 9x9 grid."""
        solution = self.filler.fill()
        ok, message = StrongVerifier.verify_complete_solution(solution, solution)
        if not ok:
            raise RuntimeError(f"Filler produced an invalid grid: {message}")
        self.solutions_generated += 1
        return solution

    def generate_puzzle(self, difficulty: str = "easy") -> Tuple[Puzzle, Grid]:
        """
        Generate a puzzle and its solution.

        Args:
            difficulty: One of constants.DIFFICULTIES.

        Returns:
            (puzzle, solution). puzzle.grid has 0 for empty cells.
        """
        clue_fraction(difficulty)  # reject unknown names before any work

        start_time = time.time()
        solution = self.generate_solution()
        puzzle = self.carver.carve(solution, difficulty)
        puzzle.metadata["generation_time_seconds"] = time.time() - start_time
        self.puzzles_generated += 1
        return puzzle, solution


def generate_solution(seed: Optional[int] = None) -> Grid:
    """Generate one solved grid with a fresh generator."""
    return SudokuGenerator(GeneratorConfig(seed=seed)).generate_solution()


def generate_puzzle(difficulty: str = "easy", seed: Optional[int] = None) -> Tuple[Puzzle, Grid]:
    """Generate one (puzzle, solution) pair with a fresh generator."""
    return SudokuGenerator(GeneratorConfig(seed=seed)).generate_puzzle(difficulty)
