import numpy as np
import pytest

from sudoku_engine.carver import Puzzle, PuzzleCarver
from sudoku_engine.config import GeneratorConfig
from sudoku_engine.constants import MAX_CLUE_OVERSHOOT, MIN_CLUES, target_clue_count
from sudoku_engine.constraints import copy_grid
from sudoku_engine.uniqueness import solve_unique


def _assert_carved(puzzle, solution):
    grid = puzzle.grid
    for r in range(9):
        for c in range(9):
            cell = puzzle.cells[r][c]
            assert cell.is_fixed == (cell.value != 0)
            assert not cell.is_conflict
            if cell.value:
                assert cell.value == solution[r][c]
    assert solve_unique(grid) == solution
    assert MIN_CLUES <= puzzle.clue_count <= 81
    assert puzzle.target_clues <= puzzle.clue_count <= puzzle.target_clues + MAX_CLUE_OVERSHOOT


def test_easy_carve_hits_target(classic, rng):
    _, solution = classic
    puzzle = PuzzleCarver(rng=rng).carve(solution, "easy")
    _assert_carved(puzzle, solution)
    assert puzzle.target_clues == 48
    assert puzzle.clue_count == 48


@pytest.mark.parametrize("difficulty", ["medium", "hard", "expert"])
def test_carve_keeps_unique_solution(classic, difficulty):
    _, solution = classic
    puzzle = PuzzleCarver(rng=np.random.RandomState(5)).carve(solution, difficulty)
    _assert_carved(puzzle, solution)
    assert puzzle.target_clues == target_clue_count(difficulty)


def test_carve_does_not_modify_solution(classic, rng):
    _, solution = classic
    before = copy_grid(solution)
    PuzzleCarver(rng=rng).carve(solution, "hard")
    assert solution == before


def test_carve_with_verified_restorations(classic, rng):
    _, solution = classic
    config = GeneratorConfig(verify_restorations=True)
    puzzle = PuzzleCarver(config, rng).carve(solution, "master")
    _assert_carved(puzzle, solution)


def test_adjustment_pass_is_bounded(classic, rng):
    _, solution = classic
    config = GeneratorConfig(max_removals=5, max_adjust_iterations=10)
    puzzle = PuzzleCarver(config, rng).carve(solution, "extreme")
    _assert_carved(puzzle, solution)
    assert puzzle.adjust_iterations <= 10
    assert puzzle.clue_count >= 81 - 5 - 10


def test_unknown_difficulty_rejected(classic, rng):
    _, solution = classic
    with pytest.raises(ValueError):
        PuzzleCarver(rng=rng).carve(solution, "impossible")


def test_partial_grid_rejected(classic, rng):
    puzzle, _ = classic
    with pytest.raises(ValueError):
        PuzzleCarver(rng=rng).carve(puzzle, "easy")


def test_inconsistent_solution_is_a_logic_error(rng):
    broken = [list(range(1, 10)) for _ in range(9)]
    with pytest.raises(RuntimeError):
        PuzzleCarver(rng=rng).carve(broken, "easy")


def test_puzzle_dict_round_trip(classic, rng):
    _, solution = classic
    puzzle = PuzzleCarver(rng=rng).carve(solution, "medium")
    data = puzzle.to_dict()
    assert data["clue_count"] == puzzle.clue_count
    restored = Puzzle.from_dict(data)
    assert restored.grid == puzzle.grid
    assert restored.solution == solution
    assert restored.difficulty == "medium"


def test_adjustment_restores_clues_below_floor(minimal_17, rng):
    puzzle, solution = minimal_17
    puzzle[0][7] = 0  # 16 clues
    carver = PuzzleCarver(rng=rng)
    iterations = carver._adjust(puzzle, solution, target=MIN_CLUES)
    assert iterations <= 100
    assert sum(1 for row in puzzle for v in row if v) == MIN_CLUES
    assert all(
        puzzle[r][c] in (0, solution[r][c]) for r in range(9) for c in range(9)
    )
