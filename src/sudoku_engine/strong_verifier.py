"""
Strong verifier for 9x9 Sudoku.

Deterministic checker: validates Sudoku rules AND matches ground truth.
"""

from typing import List, Tuple

from .constants import BOX_SIZE, DIGITS, GRID_SIZE

_FULL = list(DIGITS)


def _has_shape(grid: List[List[int]]) -> bool:
    return len(grid) == GRID_SIZE and all(len(row) == GRID_SIZE for row in grid)


def _boxes(grid: List[List[int]]):
    """Yield (box_r, box_c, values) for every 3x3 block."""
    for box_r in range(GRID_SIZE // BOX_SIZE):
        for box_c in range(GRID_SIZE // BOX_SIZE):
            values = [
                grid[r][c]
                for r in range(box_r * BOX_SIZE, box_r * BOX_SIZE + BOX_SIZE)
                for c in range(box_c * BOX_SIZE, box_c * BOX_SIZE + BOX_SIZE)
            ]
            yield box_r, box_c, values


class StrongVerifier:
    """Deterministic Sudoku verifier — checks validity AND correctness."""

    @staticmethod
    def verify_cell_correctness(
        true_solution: List[List[int]], row: int, col: int, value: int
    ) -> Tuple[bool, str]:
        """Check if a proposed value matches the ground truth."""
        true_value = true_solution[row][col]
        if value == true_value:
            return True, f"Correct! {value} matches ground truth"
        return False, f"Incorrect: placed {value} but should be {true_value}"

    @staticmethod
    def verify_complete_solution(
        puzzle: List[List[int]], solution: List[List[int]]
    ) -> Tuple[bool, str]:
        """Verify if a complete solution is correct."""
        if not _has_shape(solution):
            return False, "Grid is not 9x9"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if solution[r][c] not in DIGITS:
                    return False, f"Invalid value at ({r},{c}): {solution[r][c]}"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if puzzle[r][c] != 0 and puzzle[r][c] != solution[r][c]:
                    return (
                        False,
                        f"Doesn't match clue at ({r},{c}): "
                        f"expected {puzzle[r][c]}, got {solution[r][c]}",
                    )

        for r in range(GRID_SIZE):
            if sorted(solution[r]) != _FULL:
                return False, f"Row {r} invalid: {solution[r]}"

        for c in range(GRID_SIZE):
            col_vals = [solution[r][c] for r in range(GRID_SIZE)]
            if sorted(col_vals) != _FULL:
                return False, f"Column {c} invalid: {col_vals}"

        for box_r, box_c, box in _boxes(solution):
            if sorted(box) != _FULL:
                return False, f"Box ({box_r},{box_c}) invalid: {box}"

        return True, "Solution is correct!"

    @staticmethod
    def verify_partial_solution(
        puzzle: List[List[int]], current_grid: List[List[int]]
    ) -> Tuple[bool, str]:
        """Verify a partial solution has no conflicts."""
        if not _has_shape(current_grid):
            return False, "Grid is not 9x9"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if current_grid[r][c] not in range(GRID_SIZE + 1):
                    return False, f"Invalid value at ({r},{c}): {current_grid[r][c]}"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if puzzle[r][c] != 0 and current_grid[r][c] != 0:
                    if puzzle[r][c] != current_grid[r][c]:
                        return False, f"Conflicts with clue at ({r},{c})"

        for r in range(GRID_SIZE):
            filled = [val for val in current_grid[r] if val != 0]
            if len(filled) != len(set(filled)):
                return False, f"Duplicate in row {r}"

        for c in range(GRID_SIZE):
            filled = [current_grid[r][c] for r in range(GRID_SIZE) if current_grid[r][c] != 0]
            if len(filled) != len(set(filled)):
                return False, f"Duplicate in column {c}"

        for box_r, box_c, box in _boxes(current_grid):
            filled = [val for val in box if val != 0]
            if len(filled) != len(set(filled)):
                return False, f"Duplicate in box ({box_r},{box_c})"

        return True, "Partial solution is valid"
