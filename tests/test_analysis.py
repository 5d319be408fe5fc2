"""Tests for tabular summaries and plots."""

import pytest

from pathbench.analysis import plot_search_times, results_frame, summary_text
from pathbench.orchestrator import Orchestrator
from pathbench.corpus import CorpusScanner
from pathbench.result_tree import TestResult


@pytest.fixture
def populated(make_corpus, open_grid, split_grid):
    root = make_corpus({
        "0.5": {"10": {"0.json": open_grid}, "2": {"0.json": split_grid}},
        "0.25": {"10": {"0.json": open_grid}},
    })
    orch = Orchestrator(scanner=CorpusScanner(root), parameter_axis="openness", preprocessing_axis="pruning")
    return orch.run(["none", "corner_jumps"], ["bfs"], 2)


class TestResultsFrame:
    def test_one_row_per_size_node(self, populated):
        df = results_frame(populated)
        assert len(df) == 6
        assert {"pruning", "openness", "search", "size"} <= set(df.columns)
        assert "preprocessing" not in df.columns

    def test_sorted_by_variant_parameter_size(self, populated):
        df = results_frame(populated)
        first = df.iloc[:3]
        assert list(first["pruning"]) == ["corner_jumps"] * 3
        assert list(zip(first["openness"], first["size"])) == [(0.25, 10), (0.5, 2), (0.5, 10)]

    def test_failed_counts(self, populated):
        df = results_frame(populated)
        row = df[(df["pruning"] == "none") & (df["size"] == 2)].iloc[0]
        assert row["trials"] == 2
        assert row["failed"] == 2
        assert row["mean_search_time"] == -1.0

    def test_empty_result(self):
        df = results_frame(TestResult.create(["none"], ["bfs"]))
        assert df.empty


class TestSummaryText:
    def test_contains_axes(self, populated):
        text = summary_text(populated)
        assert "openness" in text
        assert "corner_jumps" in text

    def test_empty(self):
        assert summary_text(TestResult()) == "No results."


class TestPlotSearchTimes:
    def test_saves_figure(self, populated, tmp_path):
        out = tmp_path / "figs" / "search.png"
        plot_search_times(populated, out)
        assert out.exists()

    def test_other_metric(self, populated, tmp_path):
        out = tmp_path / "explored.png"
        plot_search_times(populated, out, metric="median_explored_ratio")
        assert out.exists()

    def test_unknown_metric(self, populated, tmp_path):
        with pytest.raises(ValueError):
            plot_search_times(populated, tmp_path / "x.png", metric="speed")
