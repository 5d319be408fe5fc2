"""Shared types.

Provides `GraphCoordinate`, `RawTrial`, `PreprocessingTiming`, aggregate
records and the `AggregationPolicy` enum.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Search time recorded when no path was found.
NO_PATH = -1.0


class AggregationPolicy(Enum):
    INCLUDE_FAILURES = "include_failures"
    EXCLUDE_FAILURES = "exclude_failures"


@dataclass(frozen=True)
class GraphCoordinate:
    """Position of one graph instance in the corpus grid.

    Attributes:
        structural_parameter: Density/openness value of the generated graph.
        size: Node count the graph was generated with.
        repeat: Index of the independently generated instance.
    """

    structural_parameter: float
    size: int
    repeat: int


@dataclass(frozen=True)
class VariantKey:
    preprocessing: str
    search: str

    def __str__(self) -> str:
        return f"{self.preprocessing}/{self.search}"


@dataclass(frozen=True)
class RawTrial:
    """Result of one timed search.

    Attributes:
        search_time: Seconds spent searching, or `NO_PATH` if nothing was found.
        explored_nodes: Nodes expanded by the search.
        explored_ratio: `explored_nodes` divided by the graph's node count.
    """

    search_time: float
    explored_nodes: int
    explored_ratio: float

    @property
    def found(self) -> bool:
        return self.search_time != NO_PATH


@dataclass(frozen=True)
class PreprocessingTiming:
    duration: float


@dataclass(frozen=True)
class SearchMetrics:
    """Mean or median of every trial field.

    `search_time` is None when no trial contributed to it (possible only
    when failures are excluded from aggregation).
    """

    search_time: Optional[float]
    explored_nodes: float
    explored_ratio: float


@dataclass(frozen=True)
class AverageSearchResult:
    mean: SearchMetrics
    median: SearchMetrics


@dataclass(frozen=True)
class AveragePreprocessingTime:
    mean: float
    median: float
