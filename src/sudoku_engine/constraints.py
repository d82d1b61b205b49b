"""Row, column and block constraint helpers shared by the filler, the
uniqueness check and the carver. Grid is a 9x9 list of lists of ints, 0 = empty."""

from typing import List, Optional, Set, Tuple

from .constants import BOX_SIZE, DIGITS, GRID_SIZE

Grid = List[List[int]]
Cell = Tuple[int, int]  # (row, col), 0-based


def empty_grid() -> Grid:
    return [[0] * GRID_SIZE for _ in range(GRID_SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(row: int, col: int) -> Cell:
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def validate_grid(grid: Grid) -> None:
    """Raise ValueError unless grid is 9x9 with ints in 0..9."""
    if not isinstance(grid, (list, tuple)) or len(grid) != GRID_SIZE:
        raise ValueError(f"Grid must have {GRID_SIZE} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != GRID_SIZE:
            raise ValueError(f"Row {r} must have {GRID_SIZE} cells")
        for c, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Cell ({r},{c}) is not an int: {value!r}")
            if not 0 <= value <= GRID_SIZE:
                raise ValueError(f"Cell ({r},{c}) out of range: {value}")


def candidates(grid: Grid, row: int, col: int) -> Set[int]:
    """Values 1..9 absent from the cell's row, column and block."""
    used = set(grid[row])
    used.update(grid[r][col] for r in range(GRID_SIZE))
    r0, c0 = box_origin(row, col)
    for r in range(r0, r0 + BOX_SIZE):
        used.update(grid[r][c0 : c0 + BOX_SIZE])
    return {d for d in DIGITS if d not in used}


def is_safe(grid: Grid, row: int, col: int, value: int) -> bool:
    """True if placing value at (row, col) breaks no uniqueness constraint.

    The target cell itself is not compared, so a filled cell can be re-checked
    against its peers.
    """
    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == value:
            return False
    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == value:
            return False
    r0, c0 = box_origin(row, col)
    for r in range(r0, r0 + BOX_SIZE):
        for c in range(c0, c0 + BOX_SIZE):
            if (r, c) != (row, col) and grid[r][c] == value:
                return False
    return True


def find_empty(grid: Grid) -> Optional[Cell]:
    """First empty cell in row-major order, or None when the grid is full."""
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r][c] == 0:
                return r, c
    return None


def count_clues(grid: Grid) -> int:
    return sum(1 for row in grid for value in row if value != 0)
