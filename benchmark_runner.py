#!/usr/bin/env python3
"""Run a pathfinding benchmark over a graph corpus using YAML configuration."""

import argparse
from dataclasses import replace
from pathlib import Path
import yaml
from dotenv import load_dotenv

from pathbench.utils.config_loader import load_benchmark_config
from pathbench.utils.logger import BenchLogger
from pathbench.orchestrator import Orchestrator
from pathbench.progress import TqdmProgress
from pathbench.analysis import summary_text, plot_search_times


def main() -> None:
    """Run the full benchmark."""
    parser = argparse.ArgumentParser(description="Run pathfinding benchmarks")
    parser.add_argument("--config", type=Path, default="benchmark_config.yaml")
    parser.add_argument("--corpus", type=Path, default=None, help="Override corpus.root")
    parser.add_argument("--repeat", type=int, default=None, help="Override benchmark.search_repeat")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    load_dotenv()

    try:
        benchmark_config, config = load_benchmark_config(args.config)
        if args.corpus is not None:
            benchmark_config = replace(benchmark_config, corpus_root=args.corpus)
        if args.repeat is not None:
            benchmark_config = replace(benchmark_config, search_repeat=args.repeat)
        BenchLogger.configure_from_section(config.get("logging"), debug=args.debug)
    except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
        print(f"❌ Error loading configuration: {e}")
        return

    if not benchmark_config.corpus_root.is_dir():
        print(f"❌ Corpus directory not found: {benchmark_config.corpus_root}")
        return

    logger = BenchLogger.get_logger("benchmark_runner")

    logger.info("Experiment: %s", benchmark_config.experiment_name or "default")
    logger.info("Corpus: %s", benchmark_config.corpus_root)
    if benchmark_config.tags:
        logger.info("Tags: %s", benchmark_config.tags)
    logger.info(
        "Variants: %s x %s | %d searches per graph | aggregation: %s",
        benchmark_config.preprocessing_variants,
        benchmark_config.search_variants,
        benchmark_config.search_repeat,
        benchmark_config.aggregation_policy.value,
    )

    with TqdmProgress(desc=benchmark_config.experiment_name or "Benchmarking") as progress:
        orch = Orchestrator.from_config(benchmark_config, progress=progress)
        result = orch.run(
            benchmark_config.preprocessing_variants,
            benchmark_config.search_variants,
            benchmark_config.search_repeat,
        )

    if benchmark_config.show_summary:
        print(summary_text(result))

    if benchmark_config.plot_path:
        plot_search_times(result, benchmark_config.plot_path)
        logger.info("Plot saved to: %s", benchmark_config.plot_path)

    print(f"\n✅ Benchmark Complete! {result.trial_count} trials over {orch.processed} graphs")


if __name__ == "__main__":
    main()
