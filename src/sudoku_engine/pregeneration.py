"""
Batch puzzle generation.

Generates many puzzles across difficulties, one independent generator per
task so tasks can run in parallel worker processes (or threads). Supports
checkpointing, resume, and saving the final dataset as JSON.
"""

import json
import os
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import asdict, replace
from typing import Dict, List, Optional, Sequence, Set, Tuple

from tqdm.auto import tqdm

from .config import GeneratorConfig
from .constants import DIFFICULTIES, clue_fraction
from .generator import SudokuGenerator
from .utils import convert_results_for_json, load_results_json, save_results_json


# ============================================================================
# Single-puzzle generation (worker)
# ============================================================================

def _task_seed(seed: Optional[int], difficulty: str, index: int) -> Optional[int]:
    if seed is None:
        return None
    level = DIFFICULTIES.index(difficulty)
    return seed * 100_000 + level * 10_000 + index


def generate_single_record(task: Dict, config: GeneratorConfig) -> Dict:
    """Generate one puzzle record (called inside the worker pool)."""
    task_config = replace(config, seed=task["seed"], verbose=False)
    generator = SudokuGenerator(task_config)
    puzzle, solution = generator.generate_puzzle(task["difficulty"])
    return {
        "id": task["id"],
        "difficulty": task["difficulty"],
        "seed": task["seed"],
        "puzzle": puzzle.grid,
        "solution": solution,
        "clue_count": puzzle.clue_count,
        "target_clues": puzzle.target_clues,
        "uniqueness_checks": generator.carver.uniqueness_checks,
        "generation_time_seconds": puzzle.metadata["generation_time_seconds"],
    }


# ============================================================================
# Checkpointing helpers
# ============================================================================

def _get_checkpoint_path(save_path: str) -> str:
    base, ext = os.path.splitext(save_path)
    return f"{base}_checkpoint{ext}"


def _save_checkpoint(records, metadata, checkpoint_path, verbose=True):
    data = {
        "metadata": metadata,
        "completed_ids": [r["id"] for r in records],
        "records": records,
        "checkpoint_time": time.strftime("%Y-%m-%d %H:%M:%S"),
    }
    temp_path = checkpoint_path + ".tmp"
    with open(temp_path, "w") as f:
        json.dump(convert_results_for_json(data), f)
    os.replace(temp_path, checkpoint_path)
    if verbose:
        print(f"💾 Checkpoint: {len(records)} puzzles saved")


def _load_records(path: str) -> Tuple[List[Dict], Dict]:
    if not os.path.exists(path):
        return [], {}
    with open(path, "r") as f:
        data = json.load(f)
    return data.get("records", []), data.get("metadata", {})


# ============================================================================
# Main generation function
# ============================================================================

def generate_puzzle_dataset(
    difficulties: Sequence[str] = DIFFICULTIES,
    num_per_difficulty: int = 10,
    seed: Optional[int] = 42,
    max_workers: int = 4,
    use_processes: bool = True,
    save_path: Optional[str] = None,
    checkpoint_every: int = 10,
    resume_from_checkpoint: bool = True,
    config: Optional[GeneratorConfig] = None,
    verbose: bool = True,
) -> List[Dict]:
    """
    Generate puzzles in parallel, with checkpointing and resume.

    Args:
        difficulties: Difficulty names to generate.
        num_per_difficulty: Puzzles per difficulty.
        seed: Base seed; each task derives its own. None = unseeded.
        max_workers: Pool size.
        use_processes: Process pool if True, thread pool otherwise.
        save_path: Path to save JSON results (also enables checkpoints).
        checkpoint_every: Checkpoint after this many new puzzles.
        resume_from_checkpoint: Reuse puzzles from an existing file/checkpoint.
        config: Base GeneratorConfig for every task.
        verbose: Print progress and a summary.

    Returns:
        List of puzzle record dicts.
    """
    if num_per_difficulty < 1:
        raise ValueError("num_per_difficulty must be positive")
    if checkpoint_every < 1:
        raise ValueError("checkpoint_every must be positive")
    for difficulty in difficulties:
        clue_fraction(difficulty)
    config = config or GeneratorConfig()
    if seed is None:
        seed = config.seed

    tasks = [
        {"id": f"{d}_{i}", "difficulty": d, "seed": _task_seed(seed, d, i)}
        for d in difficulties
        for i in range(num_per_difficulty)
    ]
    task_seeds = {t["id"]: t["seed"] for t in tasks}

    existing: List[Dict] = []
    completed_ids: Set[str] = set()
    checkpoint_path = _get_checkpoint_path(save_path) if save_path else None

    if save_path and resume_from_checkpoint:
        skipped = 0
        for path in (save_path, checkpoint_path):
            records, _ = _load_records(path)
            for record in records:
                if record["id"] in completed_ids:
                    continue
                # Only reuse what this request would itself have generated
                if task_seeds.get(record["id"], -1) != record.get("seed"):
                    skipped += 1
                    continue
                existing.append(record)
                completed_ids.add(record["id"])
        if verbose and (existing or skipped):
            print(
                f"📂 Resuming with {len(existing)} existing puzzles "
                f"({skipped} not matching this request dropped)"
            )

    remaining = [t for t in tasks if t["id"] not in completed_ids]

    metadata = {
        "difficulties": list(difficulties),
        "num_per_difficulty": num_per_difficulty,
        "seed": seed,
        "config": asdict(config),
    }

    if verbose:
        print(f"\n{'=' * 70}")
        print("PUZZLE GENERATION")
        print(f"{'=' * 70}")
        print(f"  Existing: {len(existing)} puzzles")
        print(f"  Target: {len(tasks)} puzzles")
        print(f"  To generate: {len(remaining)} puzzles")
        print(f"  Workers: {max_workers} ({'processes' if use_processes else 'threads'})")
        print(f"{'=' * 70}\n")

    results = list(existing)
    start_time = time.time()

    if remaining:
        executor_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
        new_count = 0
        with executor_cls(max_workers=max_workers) as executor:
            futures = {
                executor.submit(generate_single_record, t, config): t
                for t in remaining
            }
            for future in tqdm(
                as_completed(futures), total=len(futures),
                desc="Generating", disable=not verbose,
            ):
                task = futures[future]
                try:
                    results.append(future.result())
                    new_count += 1
                except Exception as e:
                    print(f"  ❌ Puzzle {task['id']} failed: {e}")
                    continue

                if checkpoint_path and new_count % checkpoint_every == 0:
                    _save_checkpoint(results, metadata, checkpoint_path, verbose)

    order = {t["id"]: i for i, t in enumerate(tasks)}
    results.sort(key=lambda r: order.get(r["id"], len(order)))
    total_time = time.time() - start_time

    if verbose:
        print(f"\n✅ Generated {len(results) - len(existing)} new puzzles "
              f"({len(results)} total) in {total_time:.1f}s")

    if save_path:
        metadata["total_time_seconds"] = total_time
        save_results_json({"metadata": metadata, "records": results}, save_path, verbose)
        if os.path.exists(checkpoint_path):
            os.remove(checkpoint_path)

    return results


def load_puzzle_dataset(path: str) -> Tuple[List[Dict], Dict]:
    """Load a saved dataset. Returns (records, metadata)."""
    data = load_results_json(path)
    return data["records"], data["metadata"]
