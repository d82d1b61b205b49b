"""
Puzzle carving.

Starting from a solved grid, removes clues one at a time and keeps a removal
only while the puzzle still has exactly one completion. Works toward the
difficulty's target clue count within bounded passes, then accepts whatever
it reached.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .config import GeneratorConfig
from .constants import GRID_SIZE, NUM_CELLS, target_clue_count
from .constraints import Grid, copy_grid, count_clues, validate_grid
from .uniqueness import count_solutions


# ============================================================================
# Data classes
# ============================================================================

@dataclass
class PuzzleCell:
    value: int
    is_fixed: bool
    is_conflict: bool = False

    def to_dict(self) -> Dict:
        return {
            "value": self.value,
            "is_fixed": self.is_fixed,
            "is_conflict": self.is_conflict,
        }


@dataclass
class Puzzle:
    cells: List[List[PuzzleCell]]
    solution: Grid
    difficulty: str
    target_clues: int
    removal_attempts: int = 0
    adjust_iterations: int = 0
    metadata: Dict = field(default_factory=dict)

    @classmethod
    def from_grid(
        cls, grid: Grid, solution: Grid, difficulty: str, target_clues: int, **kwargs
    ) -> "Puzzle":
        cells = [
            [PuzzleCell(value=v, is_fixed=v != 0) for v in row] for row in grid
        ]
        return cls(
            cells=cells, solution=copy_grid(solution), difficulty=difficulty,
            target_clues=target_clues, **kwargs,
        )

    @property
    def grid(self) -> Grid:
        """Plain int grid, 0 = empty."""
        return [[cell.value for cell in row] for row in self.cells]

    @property
    def clue_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.is_fixed)

    def to_dict(self) -> Dict:
        return {
            "difficulty": self.difficulty,
            "target_clues": self.target_clues,
            "clue_count": self.clue_count,
            "puzzle": self.grid,
            "solution": self.solution,
            "removal_attempts": self.removal_attempts,
            "adjust_iterations": self.adjust_iterations,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Puzzle":
        return cls.from_grid(
            data["puzzle"], data["solution"], data["difficulty"],
            data["target_clues"],
            removal_attempts=data.get("removal_attempts", 0),
            adjust_iterations=data.get("adjust_iterations", 0),
            metadata=data.get("metadata", {}),
        )


# ============================================================================
# Carver
# ============================================================================

class PuzzleCarver:
    """Removes clues from a solved grid while keeping the solution unique."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.RandomState] = None,
    ):
        self.config = config or GeneratorConfig()
        self.rng = rng or np.random.RandomState(self.config.seed)
        self.uniqueness_checks = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def carve(self, solution: Grid, difficulty: str = "easy") -> Puzzle:
        """
        Carve a uniquely solvable puzzle out of a solved grid.

        Args:
            solution: Fully solved 9x9 grid. Not modified.
            difficulty: Difficulty name (see constants.DIFFICULTIES).

        Returns:
            Puzzle with target_clues <= clue_count. The target is soft: when
            the removal and adjustment budgets run out the current state is
            kept, at most constants.MAX_CLUE_OVERSHOOT clues above target
            (easy and medium normally land on it exactly; expert, master and
            extreme stall a few clues above).
        """
        validate_grid(solution)
        if count_clues(solution) != NUM_CELLS:
            raise ValueError("Carving needs a fully solved grid")

        target = target_clue_count(difficulty, self.config.min_clues)
        puzzle = copy_grid(solution)

        attempts = self._primary_pass(puzzle, target)
        iterations = self._adjust(puzzle, solution, target)

        clues = count_clues(puzzle)
        if self.config.verbose:
            print(
                f"✓ Carved {difficulty} puzzle: {clues} clues "
                f"(target {target}, {attempts} removal attempts, "
                f"{iterations} adjustments, {self.uniqueness_checks} checks)"
            )

        return Puzzle.from_grid(
            puzzle, solution, difficulty, target,
            removal_attempts=attempts, adjust_iterations=iterations,
        )

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _primary_pass(self, puzzle: Grid, target: int) -> int:
        """Try cells in shuffled order until the target or a cap is hit."""
        positions = [int(p) for p in self.rng.permutation(NUM_CELLS)]
        clues = count_clues(puzzle)
        removed = 0
        attempts = 0

        while clues > target and removed < self.config.max_removals and positions:
            row, col = divmod(positions.pop(), GRID_SIZE)
            if puzzle[row][col] == 0:
                continue
            attempts += 1
            if self._try_set(puzzle, row, col, 0):
                removed += 1
                clues -= 1
        return attempts

    def _adjust(self, puzzle: Grid, solution: Grid, target: int) -> int:
        """Random single-cell changes toward the target, bounded."""
        clues = count_clues(puzzle)
        iterations = 0

        while (
            (clues > target or clues < self.config.min_clues)
            and iterations < self.config.max_adjust_iterations
        ):
            iterations += 1
            row, col = divmod(int(self.rng.randint(NUM_CELLS)), GRID_SIZE)
            current = puzzle[row][col]

            if clues > target and current != 0:
                if self._try_set(puzzle, row, col, 0):
                    clues -= 1
            elif clues < self.config.min_clues and current == 0:
                if self.config.verify_restorations:
                    if self._try_set(puzzle, row, col, solution[row][col]):
                        clues += 1
                else:
                    # A correct clue added to a unique puzzle keeps it unique.
                    puzzle[row][col] = solution[row][col]
                    clues += 1

        if clues > target and self.config.verbose:
            print(
                f"⚠️  Max iterations reached, using current puzzle state "
                f"({clues} clues, target {target})"
            )
        return iterations

    def _try_set(self, puzzle: Grid, row: int, col: int, value: int) -> bool:
        """Set a cell; roll back and return False if uniqueness is lost."""
        original = puzzle[row][col]
        puzzle[row][col] = value
        self.uniqueness_checks += 1
        found = count_solutions(puzzle, limit=2)
        if found == 0:
            raise RuntimeError(
                f"Puzzle has no solution after setting ({row},{col}) to {value}; "
                "carving should only ever remove or restore solution values"
            )
        if found > 1:
            puzzle[row][col] = original
            return False
        return True
