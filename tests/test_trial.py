"""Tests for timed trial execution."""

import time

import pytest

from pathbench.algorithms.base import SearchOutcome, UnknownVariantError
from pathbench.data_types import NO_PATH, PreprocessingTiming
from pathbench.trial import TrialRunner


def _runner(fake_registries, **kwargs):
    return TrialRunner(
        preprocessing=fake_registries["preprocessing"],
        search=fake_registries["search"],
        **kwargs,
    )


class TestRunTrial:
    def test_search_repeated_preprocessing_once(self, fake_registries, open_grid):
        runner = _runner(fake_registries)
        trials, timing = runner.run_trial(open_grid, 0, 8, "counting", "found", 4)

        assert len(trials) == 4
        assert fake_registries["found"].calls == 4
        assert fake_registries["counting"].calls == 1
        assert fake_registries["counting"].endpoints == [[0, 8]]
        assert timing.duration >= 0.0

    def test_found_trial_fields(self, fake_registries, open_grid):
        trials, _ = _runner(fake_registries).run_trial(open_grid, 0, 8, "none", "found", 1)
        (trial,) = trials
        assert trial.found
        assert trial.search_time >= 0.0
        assert trial.explored_nodes == 4
        assert trial.explored_ratio == pytest.approx(4 / 9)

    def test_not_found_records_sentinel(self, fake_registries, open_grid):
        trials, _ = _runner(fake_registries).run_trial(open_grid, 0, 8, "none", "missing", 3)
        assert [t.search_time for t in trials] == [NO_PATH] * 3
        assert all(t.explored_nodes == 3 for t in trials)
        assert all(t.explored_ratio == pytest.approx(3 / 9) for t in trials)

    def test_none_preprocessing_takes_no_time(self, fake_registries, open_grid):
        _, timing = _runner(fake_registries).run_trial(open_grid, 0, 8, "none", "found", 1)
        assert timing == PreprocessingTiming(duration=0.0)
        assert fake_registries["counting"].calls == 0

    def test_ratio_uses_node_count_after_preprocessing(self, l_corridor):
        runner = TrialRunner()
        trials, _ = runner.run_trial(l_corridor, 0, 8, "intersection_jumps", "bfs", 1)
        (trial,) = trials
        assert l_corridor.number_of_nodes() == 2
        assert trial.explored_nodes == 2
        assert trial.explored_ratio == 1.0

    def test_unknown_search_raises(self, fake_registries, open_grid):
        with pytest.raises(UnknownVariantError):
            _runner(fake_registries).run_trial(open_grid, 0, 8, "none", "teleport", 1)
        assert fake_registries["counting"].calls == 0

    def test_unknown_preprocessing_raises(self, fake_registries, open_grid):
        with pytest.raises(UnknownVariantError):
            _runner(fake_registries).run_trial(open_grid, 0, 8, "shrink", "found", 1)

    def test_repeat_count_must_be_positive(self, fake_registries, open_grid):
        with pytest.raises(ValueError):
            _runner(fake_registries).run_trial(open_grid, 0, 8, "none", "found", 0)


class TestDeadline:
    def test_no_deadline_without_timeout(self, fake_registries, open_grid):
        _runner(fake_registries).run_trial(open_grid, 0, 8, "none", "found", 2)
        assert fake_registries["found"].deadlines == [None, None]

    def test_fresh_deadline_per_search(self, fake_registries, open_grid):
        _runner(fake_registries, trial_timeout=5.0).run_trial(open_grid, 0, 8, "none", "found", 2)
        first, second = fake_registries["found"].deadlines
        assert first is not None and second is not None
        assert second >= first

    def test_timed_out_search_is_not_found(self, fake_registries, open_grid, caplog):
        def slow(graph, source, destination, deadline=None):
            while time.perf_counter() <= deadline:
                pass
            return SearchOutcome(False, None, 1, timed_out=True)

        fake_registries["search"].register("slow")(slow)
        runner = _runner(fake_registries, trial_timeout=0.001)
        trials, _ = runner.run_trial(open_grid, 0, 8, "none", "slow", 2)

        assert [t.search_time for t in trials] == [NO_PATH, NO_PATH]
        assert "exceeded" in caplog.text

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            TrialRunner(trial_timeout=0)


class TestValidate:
    def test_none_is_always_valid(self, fake_registries):
        _runner(fake_registries).validate(["none", "counting"], ["found"])

    def test_unknown_is_reported(self, fake_registries):
        with pytest.raises(UnknownVariantError, match="teleport"):
            _runner(fake_registries).validate(["none"], ["found", "teleport"])
