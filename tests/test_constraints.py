import pytest

from sudoku_engine.constraints import (
    candidates, copy_grid, count_clues, empty_grid, find_empty, is_safe, validate_grid,
)


def test_candidates_excludes_row_col_and_box(classic):
    puzzle, _ = classic
    assert candidates(puzzle, 0, 2) == {1, 2, 4}


def test_candidates_is_idempotent(classic):
    puzzle, _ = classic
    before = copy_grid(puzzle)
    first = candidates(puzzle, 4, 4)
    assert candidates(puzzle, 4, 4) == first
    assert puzzle == before


def test_candidates_on_empty_grid_is_full_range():
    assert candidates(empty_grid(), 3, 7) == set(range(1, 10))


def test_is_safe_matches_candidates(classic):
    puzzle, _ = classic
    for value in range(1, 10):
        assert is_safe(puzzle, 0, 2, value) == (value in candidates(puzzle, 0, 2))


def test_is_safe_ignores_the_cell_itself(classic):
    _, solution = classic
    assert all(
        is_safe(solution, r, c, solution[r][c]) for r in range(9) for c in range(9)
    )


def test_is_safe_detects_box_conflict(classic):
    puzzle, _ = classic
    # 3 sits at (0,1): same block as (2,0), different row and column
    assert not is_safe(puzzle, 2, 0, 3)


def test_find_empty_and_count_clues(classic):
    puzzle, solution = classic
    assert find_empty(puzzle) == (0, 2)
    assert find_empty(solution) is None
    assert count_clues(puzzle) == 30
    assert count_clues(solution) == 81
    assert count_clues(empty_grid()) == 0


def test_copy_grid_is_deep(classic):
    puzzle, _ = classic
    clone = copy_grid(puzzle)
    clone[0][0] = 0
    assert puzzle[0][0] == 5


@pytest.mark.parametrize(
    "grid",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 8 for _ in range(9)],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [10]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + ["1"]],
    ],
)
def test_validate_grid_rejects_malformed(grid):
    with pytest.raises(ValueError):
        validate_grid(grid)
