from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List

from pathbench.data_types import AggregationPolicy


@dataclass
class BenchmarkConfig:
    """Configuration for one benchmark run over a corpus.

    This groups the corpus location, the variants under test and the
    measurement options.
    """

    corpus_root: Path
    preprocessing_variants: List[str]
    search_variants: List[str]

    search_repeat: int = 1
    trial_timeout: Optional[float] = None
    aggregation_policy: AggregationPolicy = AggregationPolicy.INCLUDE_FAILURES

    # Axis names used in reports
    experiment_name: Optional[str] = None
    parameter_axis: str = "structural_parameter"
    preprocessing_axis: str = "preprocessing"
    tags: Dict[str, Any] = field(default_factory=dict)

    # Reporting options
    show_summary: bool = True
    plot_path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.search_repeat <= 0:
            raise ValueError("search_repeat must be > 0")
        if self.trial_timeout is not None and self.trial_timeout <= 0:
            raise ValueError("trial_timeout must be > 0")
        if not self.preprocessing_variants:
            raise ValueError("at least one preprocessing variant is required")
        if not self.search_variants:
            raise ValueError("at least one search variant is required")
