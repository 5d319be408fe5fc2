"""Figures for benchmark results."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from ..result_tree import TestResult
from .summary import results_frame


def plot_search_times(
    result: TestResult,
    output_path: Optional[Path] = None,
    *,
    metric: str = "mean_search_time",
    figsize: tuple[int, int] = (9, 6),
) -> None:
    """Plot a size-level metric against graph size.

    One line per variant combination and structural-parameter value.

    Args:
        result: Populated result tree.
        output_path: If provided, save the figure there instead of showing it.
        metric: Column of `results_frame` to plot.
        figsize: Figure size (width, height).
    """
    df = results_frame(result)
    param_col = result.parameter_axis
    pre_col = result.preprocessing_axis
    if metric not in df.columns:
        raise ValueError(f"Unknown metric: {metric}")

    fig, ax = plt.subplots(figsize=figsize)
    for (pre, search, param), group in df.groupby([pre_col, "search", param_col], sort=True):
        group = group.dropna(subset=[metric])
        if group.empty:
            continue
        ax.plot(group["size"], group[metric], marker="o", label=f"{pre}/{search} {param_col}={param:g}")

    ax.set_xlabel("size (nodes)")
    ax.set_ylabel(metric.replace("_", " "))
    ax.set_title(metric.replace("_", " ").capitalize() + " by graph size")
    if ax.lines:
        ax.legend(fontsize=7)
    ax.grid(alpha=0.3)
    plt.tight_layout()

    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=200, bbox_inches="tight")
    else:
        plt.show()

    plt.close(fig)
