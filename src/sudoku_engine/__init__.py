from .config import GeneratorConfig, load_config, make_generator_config
from .constants import (
    DIFFICULTIES, DIFFICULTY_CLUE_FRACTIONS, EXAMPLE_PUZZLES, MIN_CLUES,
    clue_fraction, format_grid, target_clue_count,
)
from .constraints import candidates, count_clues, find_empty, is_safe
from .filler import SolutionFiller
from .uniqueness import (
    count_solutions, enumerate_solutions, has_unique_solution, solve_unique,
)
from .carver import Puzzle, PuzzleCarver, PuzzleCell
from .generator import SudokuGenerator, generate_puzzle, generate_solution
from .strong_verifier import StrongVerifier
from .dataset import get_sample_puzzles, grid_to_string, parse_grid
