"""Progress reporting for benchmark runs."""

from __future__ import annotations

from typing import Optional, Protocol

from tqdm import tqdm


class ProgressReporter(Protocol):
    def update(self, fraction: float) -> None: ...


class NullProgress:
    """Reporter that ignores every update."""

    def update(self, fraction: float) -> None:
        return None


class TqdmProgress:
    """tqdm bar driven by completion fractions.

    Fractions are clamped to [0, 1] and the bar never moves backwards.

    Args:
        desc: Bar description.
        disable: Hide the bar entirely (e.g. when output is not a terminal).
    """

    def __init__(self, desc: str = "Benchmarking", disable: Optional[bool] = False) -> None:
        self._bar = tqdm(total=100.0, desc=desc, unit="%", disable=disable,
                         bar_format="{l_bar}{bar}| {n:.1f}/{total:.0f}% [{elapsed}<{remaining}]")
        self._fraction = 0.0

    @property
    def fraction(self) -> float:
        return self._fraction

    def update(self, fraction: float) -> None:
        fraction = min(max(fraction, 0.0), 1.0)
        if fraction <= self._fraction:
            return
        self._bar.update((fraction - self._fraction) * 100.0)
        self._fraction = fraction

    def close(self) -> None:
        self._bar.close()

    def __enter__(self) -> TqdmProgress:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
