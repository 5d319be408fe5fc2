"""Orchestrator for a full benchmark run.

Walks the corpus with `CorpusScanner`, runs every requested (preprocessing,
search) combination on every graph instance with `TrialRunner`, and routes
the measurements into a `TestResult` through the `Aggregator`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .aggregator import Aggregator
from .benchmark_config import BenchmarkConfig
from .corpus import CorpusEntry, CorpusScanner
from .domain.grid.loader import GraphLoadError
from .graph import Graph
from .progress import NullProgress, ProgressReporter
from .result_tree import TestResult, VariantNode
from .trial import TrialRunner
from .utils.logger import BenchLogger

logger = BenchLogger.get_logger(__name__)


class Orchestrator:
    """Drives a benchmark over a whole corpus.

    Args:
        scanner: Corpus scanner yielding graph instances.
        trial_runner: Runner for single (graph, variant) trials.
        aggregator: Aggregator maintaining size-level statistics.
        progress: Receives the completed fraction after each graph instance.
        parameter_axis: Display name of the structural-parameter axis.
        preprocessing_axis: Display name of the preprocessing axis.
    """

    def __init__(
        self,
        *,
        scanner: CorpusScanner,
        trial_runner: Optional[TrialRunner] = None,
        aggregator: Optional[Aggregator] = None,
        progress: Optional[ProgressReporter] = None,
        parameter_axis: str = "structural_parameter",
        preprocessing_axis: str = "preprocessing",
    ) -> None:
        if scanner is None:
            raise ValueError("scanner cannot be None")

        self._scanner = scanner
        self._trial_runner = trial_runner or TrialRunner()
        self._aggregator = aggregator or Aggregator()
        self._progress = progress or NullProgress()
        self._parameter_axis = parameter_axis
        self._preprocessing_axis = preprocessing_axis

        self._processed: int = 0
        self._total: int = 0

    @property
    def processed(self) -> int:
        return self._processed

    @property
    def total(self) -> int:
        return self._total

    @classmethod
    def from_config(
        cls,
        config: BenchmarkConfig,
        *,
        progress: Optional[ProgressReporter] = None,
    ) -> Orchestrator:
        """Factory method building scanner, runner and aggregator from a config.

        Example:
            config, _ = load_benchmark_config(Path("benchmark_config.yaml"))
            orch = Orchestrator.from_config(config)
            result = orch.run(
                config.preprocessing_variants,
                config.search_variants,
                config.search_repeat,
            )
        """
        return cls(
            scanner=CorpusScanner(config.corpus_root),
            trial_runner=TrialRunner(trial_timeout=config.trial_timeout),
            aggregator=Aggregator(config.aggregation_policy),
            progress=progress,
            parameter_axis=config.parameter_axis,
            preprocessing_axis=config.preprocessing_axis,
        )

    def run(
        self,
        preprocessing_variants: Iterable[str],
        search_variants: Iterable[str],
        repeat_count: int,
    ) -> TestResult:
        """Benchmark every variant combination on every corpus graph.

        Args:
            preprocessing_variants: Preprocessing identifiers to test.
            search_variants: Search identifiers to test.
            repeat_count: Timed searches per graph and combination.

        Returns:
            The populated result tree.

        Raises:
            UnknownVariantError: If any identifier is not registered. Raised
                before the corpus is touched.
            ValueError: If `repeat_count` is not positive.
        """
        preprocessing_variants = list(preprocessing_variants)
        search_variants = list(search_variants)
        if repeat_count <= 0:
            raise ValueError("repeat_count must be > 0")
        self._trial_runner.validate(preprocessing_variants, search_variants)

        result = TestResult.create(
            preprocessing_variants,
            search_variants,
            parameter_axis=self._parameter_axis,
            preprocessing_axis=self._preprocessing_axis,
        )

        self._total = self._scanner.count()
        self._processed = 0
        logger.info(
            "Benchmarking %d graphs x %d variant combinations x %d searches",
            self._total, len(result.variants), repeat_count,
        )

        for entry in self._scanner.scan():
            self._run_entry(entry, result, repeat_count)
            self._processed += 1
            self._progress.update(self._processed / self._total if self._total else 1.0)

        logger.info("Benchmark complete: %d graphs, %d trials", self._processed, result.trial_count)
        return result

    def _run_entry(self, entry: CorpusEntry, result: TestResult, repeat_count: int) -> None:
        """Run all variant combinations on one graph instance."""
        coordinate = entry.coordinate
        try:
            base_graph = entry.load()
        except (GraphLoadError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable graph %s: %s", entry.path, e)
            return
        if base_graph.number_of_nodes() == 0:
            logger.warning("Skipping empty graph %s", entry.path)
            return

        logger.debug(
            "Graph %s: %s=%s size=%d repeat=%d (%d nodes)",
            entry.path, self._parameter_axis, coordinate.structural_parameter,
            coordinate.size, coordinate.repeat, base_graph.number_of_nodes(),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s", base_graph.to_text())

        for variant in result.variants.values():
            self._run_variant(variant, entry, base_graph.copy(), result, repeat_count)

    def _run_variant(
        self,
        variant: VariantNode,
        entry: CorpusEntry,
        graph: Graph,
        result: TestResult,
        repeat_count: int,
    ) -> None:
        coordinate = entry.coordinate
        trials, timing = self._trial_runner.run_trial(
            graph,
            graph.source,
            graph.destination,
            variant.preprocessing,
            variant.search,
            repeat_count,
        )

        repeat_node = result.get_or_create(
            variant.key,
            coordinate.structural_parameter,
            coordinate.size,
            coordinate.repeat,
        )
        if repeat_node.trials:
            logger.warning(
                "%s: repeat %d of %s=%s size=%d already has results from another file, replacing them (%s)",
                variant.key, coordinate.repeat, self._parameter_axis,
                coordinate.structural_parameter, coordinate.size, entry.path,
            )

        self._aggregator.replace_trials(repeat_node, trials)
        self._aggregator.set_preprocessing_time(repeat_node, timing)
        self._aggregator.recompute_size_aggregate(repeat_node.size_node)
