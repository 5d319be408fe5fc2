"""Simple configuration loader for benchmark runs."""

import os
from pathlib import Path
from typing import Dict, Any

import yaml

from ..data_types import AggregationPolicy
from ..benchmark_config import BenchmarkConfig

CORPUS_ENV = "PATHBENCH_CORPUS"
LOG_LEVEL_ENV = "PATHBENCH_LOG_LEVEL"


def parse_policy(value: str) -> AggregationPolicy:
    """Parse an aggregation policy name (case-insensitive)."""
    normalized = str(value).strip().lower()
    for policy in AggregationPolicy:
        if policy.value == normalized or policy.name.lower() == normalized:
            return policy
    raise ValueError(f"Unknown aggregation policy: {value}")


def load_benchmark_config(config_path: Path) -> tuple[BenchmarkConfig, Dict[str, Any]]:
    """Load benchmark configuration from YAML file.

    `PATHBENCH_CORPUS` and `PATHBENCH_LOG_LEVEL` in the environment override
    `corpus.root` and `logging.level`.

    Args:
        config_path: Path to YAML configuration file.

    Returns:
        Tuple of (BenchmarkConfig, full_config_dict).
    """
    config_path = Path(config_path)
    with config_path.open("r") as f:
        config = yaml.safe_load(f) or {}

    experiment = config.get("experiment", {})
    corpus = config.get("corpus", {})
    benchmark = config.get("benchmark", {})
    algorithms = config.get("algorithms", {})
    output = config.get("output", {})
    logging_section = config.setdefault("logging", {})

    corpus_root = os.getenv(CORPUS_ENV) or corpus.get("root")
    if not corpus_root:
        raise ValueError("corpus.root is required")

    if os.getenv(LOG_LEVEL_ENV):
        logging_section["level"] = os.getenv(LOG_LEVEL_ENV)

    plot_path = output.get("plot_path")

    benchmark_config = BenchmarkConfig(
        corpus_root=Path(corpus_root),
        preprocessing_variants=list(algorithms.get("preprocessing", ["none"])),
        search_variants=list(algorithms.get("search", [])),
        search_repeat=int(benchmark.get("search_repeat", 1)),
        trial_timeout=benchmark.get("trial_timeout"),
        aggregation_policy=parse_policy(benchmark.get("aggregation_policy", "include_failures")),
        experiment_name=experiment.get("name"),
        parameter_axis=experiment.get("parameter_axis", "structural_parameter"),
        preprocessing_axis=experiment.get("preprocessing_axis", "preprocessing"),
        tags=experiment.get("tags", {}),
        show_summary=output.get("show_summary", True),
        plot_path=Path(plot_path) if plot_path else None,
    )

    return benchmark_config, config
