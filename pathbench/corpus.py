"""Corpus discovery.

The corpus is a three-level directory tree::

    <root>/<structural parameter>/<size>/<repeat>[.ext]

`CorpusScanner` walks it lazily and yields one `CorpusEntry` per graph file,
with size directories visited in numeric order. Names that do not parse fall
back to zero instead of stopping the scan.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Callable, Iterator, List

from .data_types import GraphCoordinate
from .domain.grid.loader import load_graph
from .graph import Graph
from .utils.logger import BenchLogger

logger = BenchLogger.get_logger(__name__)

GraphLoader = Callable[[IO[str]], Graph]


def parse_float(text: str) -> float:
    """Parse a finite float, returning 0.0 on failure."""
    try:
        value = float(text)
    except ValueError:
        logger.warning("Could not parse '%s' as a number, using 0", text)
        return 0.0
    if not math.isfinite(value):
        logger.warning("Non-finite value '%s', using 0", text)
        return 0.0
    return value


def parse_int(text: str, warn: bool = True) -> int:
    """Parse an integer, returning 0 on failure."""
    try:
        return int(text)
    except ValueError:
        if warn:
            logger.warning("Could not parse '%s' as an integer, using 0", text)
        return 0


@dataclass(frozen=True)
class CorpusEntry:
    """One graph instance found in the corpus.

    Attributes:
        coordinate: Structural parameter, size and repeat parsed from the path.
        path: Graph file.
        loader: Callable turning an open file handle into a Graph.
    """

    coordinate: GraphCoordinate
    path: Path
    loader: GraphLoader = field(default=load_graph, compare=False, repr=False)

    def load(self) -> Graph:
        """Load a fresh copy of the graph from disk."""
        with self.path.open("r", encoding="utf-8") as fh:
            return self.loader(fh)


class CorpusScanner:
    """Enumerate graph instances stored under a corpus root.

    Args:
        root: Corpus root directory.
        loader: Graph loader used by the yielded entries.

    Raises:
        FileNotFoundError: If `root` is not a directory.
    """

    def __init__(self, root: str | Path, loader: GraphLoader = load_graph) -> None:
        self.root = Path(root)
        self.loader = loader
        if not self.root.is_dir():
            raise FileNotFoundError(f"Corpus directory not found: {self.root}")

    @staticmethod
    def _subdirectories(directory: Path) -> List[Path]:
        return sorted(p for p in directory.iterdir() if p.is_dir())

    @staticmethod
    def _files(directory: Path) -> List[Path]:
        return sorted(p for p in directory.iterdir() if p.is_file())

    def parameter_directories(self) -> List[Path]:
        return self._subdirectories(self.root)

    def size_directories(self, parameter_directory: Path) -> List[Path]:
        """Size directories of one parameter directory, ordered by numeric size."""
        return sorted(
            self._subdirectories(parameter_directory),
            key=lambda p: parse_int(p.name, warn=False),
        )

    def count(self) -> int:
        """Number of graph files in the corpus, without loading any of them."""
        return sum(
            len(self._files(size_dir))
            for param_dir in self.parameter_directories()
            for size_dir in self._subdirectories(param_dir)
        )

    def scan(self) -> Iterator[CorpusEntry]:
        """Yield every graph instance, parameter by parameter, smallest size first."""
        for param_dir in self.parameter_directories():
            parameter = parse_float(param_dir.name)
            for size_dir in self.size_directories(param_dir):
                size = parse_int(size_dir.name)
                for graph_file in self._files(size_dir):
                    repeat = parse_int(graph_file.stem)
                    yield CorpusEntry(
                        coordinate=GraphCoordinate(
                            structural_parameter=parameter,
                            size=size,
                            repeat=repeat,
                        ),
                        path=graph_file,
                        loader=self.loader,
                    )

    def __iter__(self) -> Iterator[CorpusEntry]:
        return self.scan()
