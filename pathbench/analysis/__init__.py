"""Analysis module for benchmark results."""

from .summary import results_frame, summary_text
from .plots import plot_search_times

__all__ = [
    "results_frame",
    "summary_text",
    "plot_search_times",
]
