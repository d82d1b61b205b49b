"""Utility functions for saving, loading, and converting generated data."""

import json
from typing import Any

import numpy as np


def convert_results_for_json(results: dict) -> dict:
    """
    Convert generation results to JSON-serializable format.
    Handles numpy types, tuple keys, etc.
    """
    return _make_serializable(results)


def _make_serializable(obj: Any) -> Any:
    """Recursively convert an object to be JSON-serializable."""
    if isinstance(obj, dict):
        new_dict = {}
        for k, v in obj.items():
            # Convert tuple keys to strings
            if isinstance(k, tuple):
                k = str(k)
            new_dict[str(k)] = _make_serializable(v)
        return new_dict
    elif isinstance(obj, (list, tuple)):
        return [_make_serializable(item) for item in obj]
    elif isinstance(obj, (np.integer,)):
        return int(obj)
    elif isinstance(obj, (np.floating,)):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (np.bool_,)):
        return bool(obj)
    elif hasattr(obj, "to_dict"):
        return _make_serializable(obj.to_dict())
    else:
        return obj


def save_results_json(results: dict, path: str, verbose: bool = True):
    """Save results to JSON."""
    serializable = convert_results_for_json(results)
    with open(path, "w") as f:
        json.dump(serializable, f, indent=2, default=str)
    if verbose:
        print(f"✓ Saved results to {path}")


def load_results_json(path: str) -> dict:
    """Load results saved by save_results_json."""
    with open(path, "r") as f:
        return json.load(f)
