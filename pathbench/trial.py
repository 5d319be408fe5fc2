"""Timed execution of one preprocessing + search combination on one graph."""

from __future__ import annotations

import time
from typing import Hashable, List, Optional, Tuple

from .algorithms.base import PreprocessingAlgorithm, Registry, SearchAlgorithm, SearchOutcome
from .algorithms.preprocessing import NONE, PREPROCESSING
from .algorithms.search import SEARCH
from .data_types import NO_PATH, PreprocessingTiming, RawTrial
from .graph import Graph
from .utils.logger import BenchLogger

logger = BenchLogger.get_logger(__name__)


class TrialRunner:
    """Runs preprocessing once and a search `repeat_count` times.

    Args:
        trial_timeout: Optional per-search limit in seconds. A search that
            exceeds it gives up and is recorded as not found.
        preprocessing: Registry of preprocessing variants.
        search: Registry of search variants.
    """

    def __init__(
        self,
        *,
        trial_timeout: Optional[float] = None,
        preprocessing: Registry[PreprocessingAlgorithm] = PREPROCESSING,
        search: Registry[SearchAlgorithm] = SEARCH,
    ) -> None:
        if trial_timeout is not None and trial_timeout <= 0:
            raise ValueError("trial_timeout must be > 0")
        self._trial_timeout = trial_timeout
        self._preprocessing = preprocessing
        self._search = search

    @property
    def trial_timeout(self) -> Optional[float]:
        return self._trial_timeout

    def validate(self, preprocessing_variants: List[str], search_variants: List[str]) -> None:
        """Fail fast on identifiers that are not registered.

        Raises:
            UnknownVariantError: For the first unknown identifier.
        """
        for name in preprocessing_variants:
            if name != NONE:
                self._preprocessing.get(name)
        for name in search_variants:
            self._search.get(name)

    def preprocess(
        self,
        graph: Graph,
        endpoints: Tuple[Hashable, Hashable],
        preprocessing: str,
    ) -> Tuple[Graph, PreprocessingTiming]:
        """Apply one preprocessing variant and time it.

        Returns:
            The graph to search (the input graph, or a rewritten one if the
            variant returned a new graph) and the measured timing.
        """
        if preprocessing == NONE:
            return graph, PreprocessingTiming(duration=0.0)

        apply = self._preprocessing.get(preprocessing)
        start = time.perf_counter()
        rewritten = apply(graph, list(endpoints))
        duration = time.perf_counter() - start
        return (rewritten if rewritten is not None else graph), PreprocessingTiming(duration=duration)

    def search_once(
        self,
        graph: Graph,
        source: Hashable,
        destination: Hashable,
        search: SearchAlgorithm,
    ) -> Tuple[RawTrial, SearchOutcome]:
        """Time a single search call."""
        deadline = None
        if self._trial_timeout is not None:
            deadline = time.perf_counter() + self._trial_timeout

        start = time.perf_counter()
        outcome = search(graph, source, destination, deadline)
        elapsed = time.perf_counter() - start

        total_nodes = graph.number_of_nodes()
        trial = RawTrial(
            search_time=elapsed if outcome.found else NO_PATH,
            explored_nodes=outcome.explored_nodes,
            explored_ratio=outcome.explored_nodes / total_nodes if total_nodes else 0.0,
        )
        return trial, outcome

    def run_trial(
        self,
        graph: Graph,
        source: Hashable,
        destination: Hashable,
        preprocessing: str,
        search: str,
        repeat_count: int,
    ) -> Tuple[List[RawTrial], PreprocessingTiming]:
        """Preprocess `graph` once, then search it `repeat_count` times.

        Args:
            graph: Graph to benchmark. Preprocessing may modify it in place.
            source: Search source node.
            destination: Search destination node.
            preprocessing: Preprocessing variant identifier.
            search: Search variant identifier.
            repeat_count: Number of timed searches.

        Returns:
            One RawTrial per search, in execution order, and the
            preprocessing timing.

        Raises:
            UnknownVariantError: If either identifier is not registered.
            ValueError: If `repeat_count` is not positive.
        """
        if repeat_count <= 0:
            raise ValueError("repeat_count must be > 0")

        search_fn = self._search.get(search)
        searched_graph, timing = self.preprocess(graph, (source, destination), preprocessing)

        trials: List[RawTrial] = []
        for i in range(repeat_count):
            trial, outcome = self.search_once(searched_graph, source, destination, search_fn)
            if outcome.timed_out:
                logger.warning(
                    "%s/%s search %d/%d exceeded %.3fs and was recorded as not found",
                    preprocessing, search, i + 1, repeat_count, self._trial_timeout,
                )
            trials.append(trial)

        logger.debug(
            "%s/%s: %d searches on %d nodes, %d found",
            preprocessing, search, repeat_count, searched_graph.number_of_nodes(),
            sum(1 for t in trials if t.found),
        )
        return trials, timing
