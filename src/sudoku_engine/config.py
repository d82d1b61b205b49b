"""
Generator configuration.

Search budgets and the random seed live here. The seed and verbosity are read
from environment variables when not given explicitly.
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .constants import MIN_CLUES


@dataclass
class GeneratorConfig:
    """Configuration for solution filling and puzzle carving."""

    # Reproducibility (None = fresh entropy per generator)
    seed: Optional[int] = None

    # Filler budgets
    max_fill_retries: int = 10
    max_fill_steps: int = 20000

    # Carver budgets
    max_removals: int = 64
    max_adjust_iterations: int = 100
    min_clues: int = MIN_CLUES
    verify_restorations: bool = False

    # Logging (None = read SUDOKU_VERBOSE)
    verbose: Optional[bool] = None

    def __post_init__(self):
        if self.seed is None:
            env_seed = os.getenv("SUDOKU_SEED", "")
            if env_seed.strip():
                self.seed = int(env_seed)
        if self.verbose is None:
            self.verbose = os.getenv("SUDOKU_VERBOSE", "").lower() in ("1", "true", "yes")

        if self.min_clues < MIN_CLUES:
            raise ValueError(
                f"min_clues must be at least {MIN_CLUES}, got {self.min_clues}"
            )
        if self.max_fill_retries < 1:
            raise ValueError("max_fill_retries must be positive")


def load_config(yaml_path: str) -> dict:
    """Load generator settings from a YAML file."""
    with open(yaml_path, "r") as f:
        return yaml.safe_load(f) or {}


def make_generator_config(yaml_path: str = None, **overrides) -> GeneratorConfig:
    """Create GeneratorConfig from an optional YAML file plus keyword overrides.

    Unknown keys are ignored.
    """
    known = {f.name for f in fields(GeneratorConfig)}
    settings = load_config(yaml_path) if yaml_path else {}
    settings.update(overrides)
    return GeneratorConfig(**{k: v for k, v in settings.items() if k in known})
