"""Tests for the hierarchical result tree."""

from pathbench.data_types import VariantKey
from pathbench.result_tree import TestResult

KEY = VariantKey("none", "bfs")


class TestCreate:
    def test_one_variant_per_combination_in_request_order(self):
        result = TestResult.create(["none", "corner_jumps"], ["bfs", "astar"])
        assert list(result.variants) == [
            VariantKey("none", "bfs"),
            VariantKey("none", "astar"),
            VariantKey("corner_jumps", "bfs"),
            VariantKey("corner_jumps", "astar"),
        ]
        assert all(not v.params for v in result.variants.values())

    def test_axis_names(self):
        result = TestResult.create(["none"], ["bfs"], parameter_axis="openness", preprocessing_axis="pruning")
        assert result.parameter_axis == "openness"
        assert result.preprocessing_axis == "pruning"

    def test_variant_exposes_its_key_parts(self):
        variant = TestResult.create(["none"], ["bfs"]).variants[KEY]
        assert variant.preprocessing == "none"
        assert variant.search == "bfs"
        assert str(variant.key) == "none/bfs"


class TestGetOrCreate:
    def test_same_path_returns_same_node(self):
        result = TestResult.create(["none"], ["bfs"])
        first = result.get_or_create(KEY, 0.5, 10, 0)
        second = result.get_or_create(KEY, 0.5, 10, 0)
        assert first is second
        assert len(result.variants[KEY].params) == 1
        assert len(result.variants[KEY].params[0.5].sizes) == 1
        assert len(result.variants[KEY].params[0.5].sizes[10].repeats) == 1

    def test_repeat_points_back_to_its_size(self):
        result = TestResult.create(["none"], ["bfs"])
        repeat = result.get_or_create(KEY, 0.5, 10, 2)
        assert repeat.size_node is result.variants[KEY].params[0.5].sizes[10]
        assert repeat.repeat == 2

    def test_distinct_paths_create_distinct_nodes(self):
        result = TestResult.create(["none"], ["bfs"])
        a = result.get_or_create(KEY, 0.5, 10, 0)
        b = result.get_or_create(KEY, 0.5, 10, 1)
        c = result.get_or_create(KEY, 0.5, 20, 0)
        assert a is not b
        assert a.size_node is b.size_node
        assert a.size_node is not c.size_node

    def test_unknown_variant_is_created_lazily(self):
        result = TestResult.create(["none"], ["bfs"])
        other = VariantKey("none", "dfs")
        result.get_or_create(other, 0.1, 5, 0)
        assert other in result.variants

    def test_iter_size_nodes_and_trial_count(self):
        result = TestResult.create(["none"], ["bfs"])
        result.get_or_create(KEY, 0.5, 10, 0)
        result.get_or_create(KEY, 0.7, 10, 0)
        assert len(list(result.iter_size_nodes())) == 2
        assert result.trial_count == 0
