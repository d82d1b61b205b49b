import pytest

from sudoku_engine.constants import format_grid
from sudoku_engine.dataset import get_sample_puzzles, grid_to_string, parse_grid
from sudoku_engine.uniqueness import solve_unique

CLASSIC = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"


def test_parse_grid_dots_and_zeros(classic):
    puzzle, _ = classic
    assert parse_grid(CLASSIC) == puzzle
    assert parse_grid(CLASSIC.replace(".", "0")) == puzzle


def test_parse_grid_ignores_whitespace(classic):
    puzzle, _ = classic
    spaced = "\n".join(CLASSIC[i : i + 9] for i in range(0, 81, 9))
    assert parse_grid(spaced) == puzzle


@pytest.mark.parametrize("text", ["123", CLASSIC[:-1] + "x", CLASSIC + "1"])
def test_parse_grid_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_grid(text)


def test_grid_to_string(classic):
    puzzle, _ = classic
    assert grid_to_string(puzzle, empty=".") == CLASSIC


def test_sample_puzzles_are_solvable():
    samples = get_sample_puzzles()
    assert [s["name"] for s in samples] == ["classic", "minimal_17"]
    for s in samples:
        assert parse_grid(s["puzzle_str"]) == s["puzzle"]
        assert solve_unique(s["puzzle"]) == s["solution"]
    assert len(get_sample_puzzles(1)) == 1


def test_format_grid(classic):
    puzzle, _ = classic
    lines = format_grid(puzzle).splitlines()
    assert len(lines) == 11
    assert lines[0] == "5 3 . | . 7 . | . . ."
    assert lines[3] == "------+-------+------"
    assert "0" in format_grid(puzzle, show_zeros=False)


def test_json_conversion_handles_numpy_and_puzzles(tmp_path, classic):
    import numpy as np

    from sudoku_engine.carver import Puzzle
    from sudoku_engine.utils import load_results_json, save_results_json

    puzzle_grid, solution = classic
    puzzle = Puzzle.from_grid(puzzle_grid, solution, "easy", 48)
    path = str(tmp_path / "out.json")
    save_results_json(
        {("easy", 0): puzzle, "clues": np.int64(30), "grid": np.zeros(3, dtype=int)},
        path, verbose=False,
    )
    data = load_results_json(path)
    assert data["('easy', 0)"]["puzzle"] == puzzle_grid
    assert data["('easy', 0)"]["clue_count"] == 30
    assert data["clues"] == 30
    assert data["grid"] == [0, 0, 0]
