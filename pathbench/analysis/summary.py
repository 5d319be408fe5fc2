"""Tabular views of a benchmark result."""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from ..result_tree import TestResult

COLUMNS = [
    "preprocessing",
    "search",
    "structural_parameter",
    "size",
    "repeats",
    "trials",
    "failed",
    "mean_search_time",
    "median_search_time",
    "mean_explored_nodes",
    "median_explored_nodes",
    "mean_explored_ratio",
    "median_explored_ratio",
    "mean_preprocessing_time",
    "median_preprocessing_time",
]


def results_frame(result: TestResult) -> pd.DataFrame:
    """Flatten the size-level aggregates into one row per size node.

    The `preprocessing` and `structural_parameter` columns are renamed to the
    result's axis names.

    Args:
        result: Populated result tree.

    Returns:
        DataFrame sorted by variant, structural parameter and size.
    """
    rows: List[Dict[str, Any]] = []
    for variant, param, size in result.iter_size_nodes():
        averages = size.average_search_result
        preprocessing = size.average_preprocessing_time
        trials = list(size.iter_trials())
        rows.append({
            "preprocessing": variant.preprocessing,
            "search": variant.search,
            "structural_parameter": param.value,
            "size": size.size,
            "repeats": len(size.repeats),
            "trials": len(trials),
            "failed": sum(1 for t in trials if not t.found),
            "mean_search_time": averages.mean.search_time if averages else None,
            "median_search_time": averages.median.search_time if averages else None,
            "mean_explored_nodes": averages.mean.explored_nodes if averages else None,
            "median_explored_nodes": averages.median.explored_nodes if averages else None,
            "mean_explored_ratio": averages.mean.explored_ratio if averages else None,
            "median_explored_ratio": averages.median.explored_ratio if averages else None,
            "mean_preprocessing_time": preprocessing.mean if preprocessing else None,
            "median_preprocessing_time": preprocessing.median if preprocessing else None,
        })

    df = pd.DataFrame(rows, columns=COLUMNS)
    if not df.empty:
        df = df.sort_values(
            ["preprocessing", "search", "structural_parameter", "size"], kind="stable"
        ).reset_index(drop=True)
    return df.rename(columns={
        "preprocessing": result.preprocessing_axis,
        "structural_parameter": result.parameter_axis,
    })


def summary_text(result: TestResult, float_format: str = "{:.6g}") -> str:
    """Render `results_frame` as a plain-text table."""
    df = results_frame(result)
    if df.empty:
        return "No results."
    return df.to_string(index=False, float_format=float_format.format, na_rep="-")
