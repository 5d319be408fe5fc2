"""Hierarchical benchmark result tree.

`TestResult` → `VariantNode` → `StructuralParamNode` → `SizeNode` →
`RepeatNode`. Nodes below the variant level are created on first reference;
every level goes through `_get_or_create`, so a key path never maps to more
than one node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .data_types import (
    AveragePreprocessingTime,
    AverageSearchResult,
    PreprocessingTiming,
    RawTrial,
    VariantKey,
)
from .stats import SortedSeries

K = TypeVar("K")
N = TypeVar("N")


def _get_or_create(children: Dict[K, N], key: K, factory: Callable[[K], N]) -> N:
    """Return `children[key]`, creating it with `factory(key)` on a miss."""
    node = children.get(key)
    if node is None:
        node = factory(key)
        children[key] = node
    return node


class RepeatNode:
    """Trials for one graph instance (one repeat index).

    Attributes:
        repeat: Repeat index of the graph instance.
        size_node: Enclosing size node, which owns the sorted series.
        trials: Raw trials in arrival order.
        preprocessing: Preprocessing timing for this instance, once recorded.
    """

    def __init__(self, repeat: int, size_node: SizeNode) -> None:
        self.repeat = repeat
        self.size_node = size_node
        self.trials: List[RawTrial] = []
        self.preprocessing: Optional[PreprocessingTiming] = None

    def __repr__(self) -> str:
        return f"RepeatNode(repeat={self.repeat}, trials={len(self.trials)})"


class SizeNode:
    """All repeats of one graph size plus their cached aggregates."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.repeats: Dict[int, RepeatNode] = {}

        self.search_times = SortedSeries()
        self.explored_nodes = SortedSeries()
        self.explored_ratios = SortedSeries()
        self.preprocessing_times = SortedSeries()

        self.average_search_result: Optional[AverageSearchResult] = None
        self.average_preprocessing_time: Optional[AveragePreprocessingTime] = None

    def get_or_create_repeat(self, repeat: int) -> RepeatNode:
        return _get_or_create(self.repeats, repeat, lambda key: RepeatNode(key, self))

    def iter_trials(self) -> Iterator[RawTrial]:
        for repeat_node in self.repeats.values():
            yield from repeat_node.trials

    @property
    def trial_count(self) -> int:
        return sum(len(r.trials) for r in self.repeats.values())

    def __repr__(self) -> str:
        return f"SizeNode(size={self.size}, repeats={len(self.repeats)})"


class StructuralParamNode:
    def __init__(self, value: float) -> None:
        self.value = value
        self.sizes: Dict[int, SizeNode] = {}

    def get_or_create_size(self, size: int) -> SizeNode:
        return _get_or_create(self.sizes, size, SizeNode)

    def __repr__(self) -> str:
        return f"StructuralParamNode(value={self.value}, sizes={len(self.sizes)})"


class VariantNode:
    """Results of one (preprocessing, search) combination."""

    def __init__(self, key: VariantKey) -> None:
        self.key = key
        self.params: Dict[float, StructuralParamNode] = {}

    @property
    def preprocessing(self) -> str:
        return self.key.preprocessing

    @property
    def search(self) -> str:
        return self.key.search

    def get_or_create_param(self, value: float) -> StructuralParamNode:
        return _get_or_create(self.params, value, StructuralParamNode)

    def __repr__(self) -> str:
        return f"VariantNode({self.key}, params={len(self.params)})"


@dataclass
class TestResult:
    """Root of the result tree.

    Attributes:
        variants: One node per requested variant combination, in request order.
        parameter_axis: Display name of the structural-parameter axis.
        preprocessing_axis: Display name of the preprocessing axis.
    """

    __test__ = False  # not a pytest test class

    variants: Dict[VariantKey, VariantNode] = field(default_factory=dict)
    parameter_axis: str = "structural_parameter"
    preprocessing_axis: str = "preprocessing"

    @classmethod
    def create(
        cls,
        preprocessing_variants: Iterable[str],
        search_variants: Iterable[str],
        *,
        parameter_axis: str = "structural_parameter",
        preprocessing_axis: str = "preprocessing",
    ) -> TestResult:
        """Build a result with an empty VariantNode for every combination."""
        result = cls(parameter_axis=parameter_axis, preprocessing_axis=preprocessing_axis)
        search_variants = list(search_variants)
        for preprocessing in preprocessing_variants:
            for search in search_variants:
                result.get_or_create_variant(VariantKey(preprocessing, search))
        return result

    def get_or_create_variant(self, key: VariantKey) -> VariantNode:
        return _get_or_create(self.variants, key, VariantNode)

    def get_or_create(
        self,
        variant_key: VariantKey,
        param_key: float,
        size_key: int,
        repeat_key: int,
    ) -> RepeatNode:
        """Return the repeat node at a key path, creating missing nodes on the way."""
        variant = self.get_or_create_variant(variant_key)
        param = variant.get_or_create_param(param_key)
        size = param.get_or_create_size(size_key)
        return size.get_or_create_repeat(repeat_key)

    def iter_size_nodes(self) -> Iterator[Tuple[VariantNode, StructuralParamNode, SizeNode]]:
        for variant in self.variants.values():
            for param in variant.params.values():
                for size in param.sizes.values():
                    yield variant, param, size

    @property
    def trial_count(self) -> int:
        return sum(size.trial_count for _, _, size in self.iter_size_nodes())
