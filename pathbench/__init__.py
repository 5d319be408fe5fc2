"""Pathfinding benchmark package.

Exposes the components used to benchmark preprocessing and search variants
over a corpus of stored graphs.
"""

__all__ = [
    "graph",
    "corpus",
    "trial",
    "result_tree",
    "aggregator",
    "orchestrator",
    "algorithms",
    "analysis",
]
