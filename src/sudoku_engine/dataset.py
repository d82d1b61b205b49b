"""
Puzzle string codec and bundled sample puzzles.

Strings are 81 characters in row-major order, '0' or '.' for an empty cell.
"""

from typing import Dict, List

from .constants import EXAMPLE_PUZZLES, GRID_SIZE, NUM_CELLS
from .constraints import Grid, copy_grid


def parse_grid(text: str) -> Grid:
    """Parse an 81-character puzzle string (whitespace ignored)."""
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != NUM_CELLS:
        raise ValueError(f"Expected {NUM_CELLS} cells, got {len(chars)}")

    values = []
    for i, ch in enumerate(chars):
        if ch == ".":
            values.append(0)
        elif ch.isdigit():
            values.append(int(ch))
        else:
            raise ValueError(f"Invalid character {ch!r} at position {i}")
    return [values[r * GRID_SIZE : (r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]


def grid_to_string(grid: Grid, empty: str = "0") -> str:
    """Flatten a grid into an 81-character string."""
    return "".join(
        str(cell) if cell != 0 else empty for row in grid for cell in row
    )


def get_sample_puzzles(num: int = None) -> List[Dict]:
    """Return the bundled puzzles with their known unique solutions."""
    samples = EXAMPLE_PUZZLES if num is None else EXAMPLE_PUZZLES[:num]
    return [
        {
            "id": f"sample_{i}",
            "name": s["name"],
            "puzzle": copy_grid(s["puzzle"]),
            "solution": copy_grid(s["solution"]),
            "puzzle_str": grid_to_string(s["puzzle"]),
            "solution_str": grid_to_string(s["solution"]),
        }
        for i, s in enumerate(samples)
    ]
