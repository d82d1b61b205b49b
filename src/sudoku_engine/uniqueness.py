"""
Uniqueness check.

Depth-first enumeration of a partial grid's completions over an explicit
stack of states, stopping as soon as `limit` distinct completions are found.
Each state keeps per-row, per-column and per-block bitmasks of used digits
(bit d set = digit d used) and branches on the empty cell with the fewest
legal digits. This prunes the search without changing which completions
exist, so the count up to `limit` is the same as plain first-empty-cell
enumeration.
"""

from typing import List, Optional, Tuple

from .constants import BOX_SIZE, DIGITS, GRID_SIZE, NUM_CELLS
from .constraints import Grid, validate_grid


_ALL_DIGITS = sum(1 << d for d in DIGITS)
_POPCOUNT = [bin(mask).count("1") for mask in range(1 << (GRID_SIZE + 1))]

_ROW_OF = [i // GRID_SIZE for i in range(NUM_CELLS)]
_COL_OF = [i % GRID_SIZE for i in range(NUM_CELLS)]
_BOX_OF = [
    (i // GRID_SIZE // BOX_SIZE) * BOX_SIZE + (i % GRID_SIZE) // BOX_SIZE
    for i in range(NUM_CELLS)
]

State = Tuple[List[int], List[int], List[int], List[int]]


def _initial_state(grid: Grid) -> Optional[State]:
    """Flatten grid and build the masks; None if the clues already clash."""
    cells = [value for row in grid for value in row]
    rows = [0] * GRID_SIZE
    cols = [0] * GRID_SIZE
    boxes = [0] * GRID_SIZE
    for i, value in enumerate(cells):
        if not value:
            continue
        r, c, b = _ROW_OF[i], _COL_OF[i], _BOX_OF[i]
        bit = 1 << value
        if (rows[r] | cols[c] | boxes[b]) & bit:
            return None
        rows[r] |= bit
        cols[c] |= bit
        boxes[b] |= bit
    return cells, rows, cols, boxes


def _to_grid(cells: List[int]) -> Grid:
    return [cells[r * GRID_SIZE : (r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]


def enumerate_solutions(grid: Grid, limit: int = 2) -> List[Grid]:
    """
    Return up to `limit` distinct completions of grid.

    Args:
        grid: 9x9 partial grid (0 = empty). Not modified.
        limit: Stop once this many completions are found.

    Returns:
        List of solved grids; empty if the grid has no completion.
    """
    validate_grid(grid)
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    start = _initial_state(grid)
    if start is None:
        return []

    found: List[List[int]] = []
    stack: List[State] = [start]

    while stack:
        cells, rows, cols, boxes = stack.pop()

        best = -1
        best_mask = 0
        best_count = GRID_SIZE + 1
        for i in range(NUM_CELLS):
            if cells[i]:
                continue
            mask = _ALL_DIGITS & ~(rows[_ROW_OF[i]] | cols[_COL_OF[i]] | boxes[_BOX_OF[i]])
            count = _POPCOUNT[mask]
            if count < best_count:
                best, best_mask, best_count = i, mask, count
                if count == 0:
                    break

        if best == -1:
            # Complete grid
            if not any(cells == other for other in found):
                found.append(cells)
                if len(found) >= limit:
                    break
            continue
        if best_count == 0:
            continue

        r, c, b = _ROW_OF[best], _COL_OF[best], _BOX_OF[best]
        for value in DIGITS:
            bit = 1 << value
            if not best_mask & bit:
                continue
            next_cells = cells[:]
            next_cells[best] = value
            next_rows, next_cols, next_boxes = rows[:], cols[:], boxes[:]
            next_rows[r] |= bit
            next_cols[c] |= bit
            next_boxes[b] |= bit
            stack.append((next_cells, next_rows, next_cols, next_boxes))

    return [_to_grid(cells) for cells in found]


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Number of completions, counted up to limit."""
    return len(enumerate_solutions(grid, limit=limit))


def has_unique_solution(grid: Grid) -> bool:
    """True iff grid has exactly one completion."""
    return count_solutions(grid, limit=2) == 1


def solve_unique(grid: Grid) -> Optional[Grid]:
    """The single completion of grid, or None if it has zero or several."""
    solutions = enumerate_solutions(grid, limit=2)
    return solutions[0] if len(solutions) == 1 else None
