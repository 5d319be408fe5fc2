"""Tests for progress reporting."""

from pathbench.progress import NullProgress, TqdmProgress


class TestTqdmProgress:
    def test_monotonic_and_clamped(self):
        with TqdmProgress(disable=True) as progress:
            progress.update(0.5)
            progress.update(0.25)
            assert progress.fraction == 0.5
            progress.update(1.5)
            assert progress.fraction == 1.0
            progress.update(-1.0)
            assert progress.fraction == 1.0

    def test_starts_at_zero(self):
        progress = TqdmProgress(disable=True)
        assert progress.fraction == 0.0
        progress.close()


def test_null_progress_accepts_updates():
    NullProgress().update(0.5)
