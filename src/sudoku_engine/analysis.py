"""Generated-dataset analysis: clue-count summaries per difficulty and plots."""

from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .constants import DIFFICULTIES, MIN_CLUES


# ============================================================================
# Constants
# ============================================================================

DIFF_COLORS = {
    "easy": "green", "medium": "blue", "hard": "orange",
    "expert": "red", "master": "purple", "extreme": "black",
}


# ============================================================================
# Summary table
# ============================================================================


def records_to_frame(records: List[Dict]) -> pd.DataFrame:
    """One row per generated puzzle."""
    columns = [
        "id", "difficulty", "clue_count", "target_clues",
        "uniqueness_checks", "generation_time_seconds",
    ]
    return pd.DataFrame(
        [{k: r.get(k) for k in columns} for r in records], columns=columns,
    )


def summarize_dataset(records: List[Dict]) -> pd.DataFrame:
    """
    Per-difficulty clue statistics.

    Returns:
        DataFrame indexed by difficulty (in difficulty order) with columns
        count, mean_clues, min_clues, max_clues, target_clues, hit_rate,
        mean_gap, mean_time_seconds.
    """
    df = records_to_frame(records)
    if df.empty:
        return pd.DataFrame(
            columns=[
                "count", "mean_clues", "min_clues", "max_clues", "target_clues",
                "hit_rate", "mean_gap", "mean_time_seconds",
            ]
        )

    df["hit"] = df["clue_count"] <= df["target_clues"]
    df["gap"] = df["clue_count"] - df["target_clues"]
    summary = df.groupby("difficulty").agg(
        count=("id", "size"),
        mean_clues=("clue_count", "mean"),
        min_clues=("clue_count", "min"),
        max_clues=("clue_count", "max"),
        target_clues=("target_clues", "first"),
        hit_rate=("hit", "mean"),
        mean_gap=("gap", "mean"),
        mean_time_seconds=("generation_time_seconds", "mean"),
    )
    order = [d for d in DIFFICULTIES if d in summary.index]
    return summary.loc[order]


def print_dataset_summary(records: List[Dict]) -> pd.DataFrame:
    """Print summary statistics for a generated dataset."""
    summary = summarize_dataset(records)

    print(f"\n{'=' * 70}")
    print("ANALYSIS")
    print(f"{'=' * 70}")
    print(f"Puzzles: {len(records)}")
    for difficulty, row in summary.iterrows():
        print(
            f"  {difficulty:>8}: n={int(row['count'])}, "
            f"clues={row['mean_clues']:.1f} "
            f"[{int(row['min_clues'])}-{int(row['max_clues'])}], "
            f"target={int(row['target_clues'])}, "
            f"hit={row['hit_rate']:.0%}, "
            f"time={row['mean_time_seconds']:.2f}s"
        )
    return summary


# ============================================================================
# Clue distribution plot
# ============================================================================


def plot_clue_distribution(
    records: List[Dict],
    save_dir: str = None,
    filename: str = "clue_distribution.png",
    show: bool = True,
):
    """
    Box plot of clue counts per difficulty, with each target marked.
    """
    df = records_to_frame(records)
    difficulties = [d for d in DIFFICULTIES if d in set(df["difficulty"])]

    fig, ax = plt.subplots(figsize=(10, 5))
    data = [df.loc[df["difficulty"] == d, "clue_count"].to_numpy() for d in difficulties]
    positions = np.arange(1, len(difficulties) + 1)

    if difficulties:
        ax.boxplot(data, positions=positions, widths=0.5)
        for pos, d, values in zip(positions, difficulties, data):
            jitter = np.linspace(-0.12, 0.12, len(values)) if len(values) > 1 else [0.0]
            ax.scatter(
                pos + np.asarray(jitter), values, s=18, alpha=0.6,
                color=DIFF_COLORS.get(d, "gray"), zorder=3,
            )
            target = df.loc[df["difficulty"] == d, "target_clues"].iloc[0]
            ax.hlines(target, pos - 0.3, pos + 0.3, colors="red", linestyles="--", linewidth=2)

    ax.axhline(MIN_CLUES, color="gray", linestyle=":", linewidth=1.5, label=f"Minimum ({MIN_CLUES})")
    ax.set_xticks(positions)
    ax.set_xticklabels(difficulties)
    ax.set_xlabel("Difficulty", fontsize=11)
    ax.set_ylabel("Clues", fontsize=11)
    ax.set_title("Clue Count by Difficulty (red = target)", fontsize=13, fontweight="bold")
    ax.legend(loc="upper right", fontsize=9)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_dir:
        path = f"{save_dir}/{filename}"
        fig.savefig(path, dpi=150, bbox_inches="tight")
        print(f"✓ Saved: {path}")

    if show:
        plt.show()
    return fig
