"""
Visualization utilities for the string GA.

Plots how the best and mean fitness of a run evolve over generations.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .data_models import GenerationSnapshot


def plot_convergence(
    snapshots: List[GenerationSnapshot],
    save_path: Optional[Union[str, Path]] = None,
    figsize: Tuple[int, int] = (10, 6),
    title: str = "String GA convergence"
):
    """
    Plot best and mean diff per recorded generation.

    Diffs span several orders of magnitude (the length penalty dominates
    early on), so the y axis is logarithmic. Zero diffs are drawn at 1.

    Args:
        snapshots: Recorded snapshots in generation order
        save_path: Optional path to save the figure (PNG)
        figsize: Figure size (width, height)
        title: Figure title

    Returns:
        matplotlib Figure
    """
    if not snapshots:
        raise ValueError("No snapshots to plot")

    generations = [s.generation for s in snapshots]
    best = [max(s.best_diff, 1.0) for s in snapshots]
    mean = [max(s.mean_diff, 1.0) for s in snapshots]

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(generations, mean, color="cyan", linewidth=1, label="mean diff")
    ax.plot(generations, best, color="red", linewidth=2, label="best diff")
    ax.set_yscale("log")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Diff (lower is better)")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()

    final = snapshots[-1]
    ax.text(
        0.02, 0.02,
        f"final best: {final.best_diff:g} at generation {final.generation}",
        transform=ax.transAxes,
        fontsize=9,
        bbox=dict(boxstyle="round", facecolor="white", alpha=0.8)
    )

    fig.tight_layout()

    if save_path:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Convergence plot saved to: {save_path}")

    return fig
