"""
Sudoku constants, difficulty table, and display utilities.
"""

import math
from typing import List


# ============================================================================
# Grid geometry
# ============================================================================

GRID_SIZE = 9
BOX_SIZE = 3
NUM_CELLS = GRID_SIZE * GRID_SIZE
DIGITS = tuple(range(1, GRID_SIZE + 1))

# Fewest clues any uniquely solvable 9x9 puzzle can have.
MIN_CLUES = 17

# Clues a carved puzzle may keep above its target once the bounded passes
# give up. Random removal stalls around 22-27 clues.
MAX_CLUE_OVERSHOOT = 12


# ============================================================================
# Difficulty tiers
# ============================================================================

# Higher fraction => more cells removed => fewer clues.
DIFFICULTY_CLUE_FRACTIONS = {
    "easy": 0.4,
    "medium": 0.5,
    "hard": 0.6,
    "expert": 0.7,
    "master": 0.8,
    "extreme": 0.9,
}

DIFFICULTIES = tuple(DIFFICULTY_CLUE_FRACTIONS.keys())


def clue_fraction(difficulty: str) -> float:
    """Return the configured fraction for a difficulty name."""
    try:
        return DIFFICULTY_CLUE_FRACTIONS[difficulty]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}"
        ) from None


def target_clue_count(difficulty: str, min_clues: int = MIN_CLUES) -> int:
    """Number of clues the carver aims to leave for a difficulty."""
    return max(min_clues, math.floor(NUM_CELLS * (1 - clue_fraction(difficulty))))


# ============================================================================
# Golden examples
# ============================================================================

EXAMPLE_PUZZLES = [
    {
        "name": "classic",
        "puzzle": [
            [5, 3, 0, 0, 7, 0, 0, 0, 0],
            [6, 0, 0, 1, 9, 5, 0, 0, 0],
            [0, 9, 8, 0, 0, 0, 0, 6, 0],
            [8, 0, 0, 0, 6, 0, 0, 0, 3],
            [4, 0, 0, 8, 0, 3, 0, 0, 1],
            [7, 0, 0, 0, 2, 0, 0, 0, 6],
            [0, 6, 0, 0, 0, 0, 2, 8, 0],
            [0, 0, 0, 4, 1, 9, 0, 0, 5],
            [0, 0, 0, 0, 8, 0, 0, 7, 9],
        ],
        "solution": [
            [5, 3, 4, 6, 7, 8, 9, 1, 2],
            [6, 7, 2, 1, 9, 5, 3, 4, 8],
            [1, 9, 8, 3, 4, 2, 5, 6, 7],
            [8, 5, 9, 7, 6, 1, 4, 2, 3],
            [4, 2, 6, 8, 5, 3, 7, 9, 1],
            [7, 1, 3, 9, 2, 4, 8, 5, 6],
            [9, 6, 1, 5, 3, 7, 2, 8, 4],
            [2, 8, 7, 4, 1, 9, 6, 3, 5],
            [3, 4, 5, 2, 8, 6, 1, 7, 9],
        ],
    },
    {
        "name": "minimal_17",
        "puzzle": [
            [0, 0, 0, 0, 0, 0, 0, 1, 0],
            [4, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 2, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 5, 0, 4, 0, 7],
            [0, 0, 8, 0, 0, 0, 3, 0, 0],
            [0, 0, 1, 0, 9, 0, 0, 0, 0],
            [3, 0, 0, 4, 0, 0, 2, 0, 0],
            [0, 5, 0, 1, 0, 0, 0, 0, 0],
            [0, 0, 0, 8, 0, 6, 0, 0, 0],
        ],
        "solution": [
            [6, 9, 3, 7, 8, 4, 5, 1, 2],
            [4, 8, 7, 5, 1, 2, 9, 3, 6],
            [1, 2, 5, 9, 6, 3, 8, 7, 4],
            [9, 3, 2, 6, 5, 1, 4, 8, 7],
            [5, 6, 8, 2, 4, 7, 3, 9, 1],
            [7, 4, 1, 3, 9, 8, 6, 2, 5],
            [3, 1, 9, 4, 7, 5, 2, 6, 8],
            [8, 5, 6, 1, 2, 9, 7, 4, 3],
            [2, 7, 4, 8, 3, 6, 1, 5, 9],
        ],
    },
]


# ============================================================================
# Display Utility
# ============================================================================


def format_grid(grid: List[List[int]], show_zeros: bool = True) -> str:
    """
    Format a 9x9 grid for display.

    Args:
        grid: 9x9 list of ints (0 = empty)
        show_zeros: If True, show 0s as '.'; if False, show raw numbers.

    Returns:
        Formatted multi-line string with block separators.
    """
    lines = []
    for i, row in enumerate(grid):
        cells = [
            str(cell) if (cell != 0 or not show_zeros) else "." for cell in row
        ]
        chunks = [
            " ".join(cells[j : j + BOX_SIZE]) for j in range(0, GRID_SIZE, BOX_SIZE)
        ]
        lines.append(" | ".join(chunks))
        if i % BOX_SIZE == BOX_SIZE - 1 and i != GRID_SIZE - 1:
            lines.append("------+-------+------")
    return "\n".join(lines)
