"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the pathbench test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "corpus"        # Run only corpus tests
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import matplotlib
matplotlib.use("Agg")

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from pathbench.algorithms.base import Registry, SearchOutcome
from pathbench.domain.grid.loader import create_grid_graph, write_graph
from pathbench.graph import Graph


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def open_grid() -> Graph:
    """3x3 grid without obstacles; source 0 top-left, destination 8 bottom-right."""
    return create_grid_graph(3, 3)


@pytest.fixture
def split_grid() -> Graph:
    """3x3 grid whose middle column is blocked, so no path exists."""
    return create_grid_graph(3, 3, blocked=[(1, 0), (1, 1), (1, 2)])


@pytest.fixture
def l_corridor() -> Graph:
    """Single L-shaped corridor 0-1-2-5-8 with one corner at node 2."""
    return create_grid_graph(3, 3, blocked=[(0, 1), (1, 1), (0, 2), (1, 2)])


# =============================================================================
# Corpus Fixtures
# =============================================================================

@pytest.fixture
def make_corpus(tmp_path) -> Callable[..., Path]:
    """Build a corpus directory tree.

    Usage:
        root = make_corpus({"0.5": {"10": {"0.json": graph, "1.json": graph}}})
    """

    def _make(layout: Dict[str, Dict[str, Dict[str, Graph]]], root_name: str = "corpus") -> Path:
        root = tmp_path / root_name
        root.mkdir()
        for param, sizes in layout.items():
            for size, files in sizes.items():
                size_dir = root / param / size
                size_dir.mkdir(parents=True)
                for file_name, graph in files.items():
                    with (size_dir / file_name).open("w", encoding="utf-8") as fh:
                        write_graph(graph, fh)
        return root

    return _make


# =============================================================================
# Collaborator Fakes
# =============================================================================

class RecordingProgress:
    """Progress reporter that keeps every reported fraction."""

    def __init__(self) -> None:
        self.fractions: List[float] = []

    def update(self, fraction: float) -> None:
        self.fractions.append(fraction)


@pytest.fixture
def recording_progress() -> RecordingProgress:
    return RecordingProgress()


class ScriptedSearch:
    """Search variant returning preset outcomes and counting calls."""

    def __init__(self, outcomes: Iterable[SearchOutcome]) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0
        self.deadlines: List[Optional[float]] = []

    def __call__(self, graph, source, destination, deadline=None) -> SearchOutcome:
        self.deadlines.append(deadline)
        outcome = self.outcomes[self.calls % len(self.outcomes)]
        self.calls += 1
        return outcome


class CountingPreprocessing:
    """Preprocessing variant that removes nothing and counts calls."""

    def __init__(self) -> None:
        self.calls = 0
        self.endpoints = []

    def __call__(self, graph, endpoints):
        self.calls += 1
        self.endpoints.append(list(endpoints))
        return None


@pytest.fixture
def fake_registries():
    """Fresh search/preprocessing registries with scripted variants."""
    search = Registry("search")
    preprocessing = Registry("preprocessing")

    found = ScriptedSearch([SearchOutcome(True, [0, 1], 4)])
    missing = ScriptedSearch([SearchOutcome(False, None, 3)])
    counting = CountingPreprocessing()

    search.register("found")(found)
    search.register("missing")(missing)
    preprocessing.register("counting")(counting)

    return {
        "search": search,
        "preprocessing": preprocessing,
        "found": found,
        "missing": missing,
        "counting": counting,
    }


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by `BenchLogger.configure`."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
