"""Aggregation of raw trials into size-level statistics.

`Aggregator` routes raw trials and preprocessing timings into the result
tree and recomputes the mean/median aggregates of the touched `SizeNode`.
"""

from __future__ import annotations

from typing import Iterable

from .data_types import (
    AggregationPolicy,
    AveragePreprocessingTime,
    AverageSearchResult,
    PreprocessingTiming,
    RawTrial,
    SearchMetrics,
)
from .result_tree import RepeatNode, SizeNode
from .stats import mean


class Aggregator:
    """Maintains sorted series and size aggregates.

    Args:
        policy: Whether failed searches (sentinel search time) take part in
            the search-time mean and median. Explored-node statistics always
            include every trial.
    """

    def __init__(self, policy: AggregationPolicy = AggregationPolicy.INCLUDE_FAILURES) -> None:
        self.policy = policy

    def _counts_search_time(self, trial: RawTrial) -> bool:
        return trial.found or self.policy is AggregationPolicy.INCLUDE_FAILURES

    def record_trial(self, repeat_node: RepeatNode, trial: RawTrial) -> None:
        """Append a trial to its repeat and insert its fields into the size series."""
        size_node = repeat_node.size_node
        repeat_node.trials.append(trial)
        if self._counts_search_time(trial):
            size_node.search_times.add(trial.search_time)
        size_node.explored_nodes.add(trial.explored_nodes)
        size_node.explored_ratios.add(trial.explored_ratio)

    def record_trials(self, repeat_node: RepeatNode, trials: Iterable[RawTrial]) -> None:
        for trial in trials:
            self.record_trial(repeat_node, trial)

    def replace_trials(self, repeat_node: RepeatNode, trials: Iterable[RawTrial]) -> None:
        """Drop the repeat's earlier trials from the size series, then record `trials`."""
        size_node = repeat_node.size_node
        for old in repeat_node.trials:
            if self._counts_search_time(old):
                size_node.search_times.remove(old.search_time)
            size_node.explored_nodes.remove(old.explored_nodes)
            size_node.explored_ratios.remove(old.explored_ratio)
        repeat_node.trials = []
        self.record_trials(repeat_node, trials)

    def set_preprocessing_time(self, repeat_node: RepeatNode, timing: PreprocessingTiming) -> None:
        """Store the preprocessing timing of a repeat, replacing an earlier one."""
        series = repeat_node.size_node.preprocessing_times
        if repeat_node.preprocessing is not None:
            series.remove(repeat_node.preprocessing.duration)
        repeat_node.preprocessing = timing
        series.add(timing.duration)

    def recompute_size_aggregate(self, size_node: SizeNode) -> None:
        """Recompute both cached aggregates of a size node from its repeats.

        Means are summed from the raw trials; medians are read from the
        sorted series.
        """
        trials = list(size_node.iter_trials())
        if trials:
            mean_result = SearchMetrics(
                search_time=mean(t.search_time for t in trials if self._counts_search_time(t)),
                explored_nodes=mean(t.explored_nodes for t in trials),
                explored_ratio=mean(t.explored_ratio for t in trials),
            )
            median_result = SearchMetrics(
                search_time=size_node.search_times.median,
                explored_nodes=size_node.explored_nodes.median,
                explored_ratio=size_node.explored_ratios.median,
            )
            size_node.average_search_result = AverageSearchResult(mean=mean_result, median=median_result)
        else:
            size_node.average_search_result = None

        timings = [
            r.preprocessing.duration for r in size_node.repeats.values() if r.preprocessing is not None
        ]
        if timings:
            size_node.average_preprocessing_time = AveragePreprocessingTime(
                mean=mean(timings),
                median=size_node.preprocessing_times.median,
            )
        else:
            size_node.average_preprocessing_time = None
