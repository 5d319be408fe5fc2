"""Grid graph loader.

Loads a benchmark graph from an open JSON file handle and builds small grid
graphs for tests and sample corpora.

File shape::

    {"nodes": [{"id": 0, "x": 0.0, "y": 0.0}, ...],
     "edges": [{"source": 0, "target": 1, "weight": 1.0}, ...]}

Node order in the file is preserved; the first and last nodes are the
default search endpoints.
"""

from __future__ import annotations

import json
from typing import IO, Iterable, Optional, Set, Tuple, Union

from pydantic import BaseModel, ValidationError

from ...graph import Graph

NodeId = Union[int, str]


class GraphLoadError(ValueError):
    """Raised when a graph file cannot be parsed."""


class NodeRecord(BaseModel):
    id: NodeId
    x: Optional[float] = None
    y: Optional[float] = None


class EdgeRecord(BaseModel):
    source: NodeId
    target: NodeId
    weight: float = 1.0


class GraphFile(BaseModel):
    nodes: list[NodeRecord]
    edges: list[EdgeRecord] = []


def load_graph(fh: IO[str]) -> Graph:
    """Load a graph from an open text handle.

    Args:
        fh: Handle positioned at the start of a JSON graph document.

    Returns:
        Graph with nodes in file order.

    Raises:
        GraphLoadError: If the document is not valid JSON, does not match the
            expected shape, or references unknown nodes.
    """
    try:
        document = GraphFile.model_validate_json(fh.read())
    except ValidationError as e:
        raise GraphLoadError(f"Invalid graph file {getattr(fh, 'name', '<stream>')}: {e}") from e

    graph = Graph()
    for node in document.nodes:
        pos = (node.x, node.y) if node.x is not None and node.y is not None else None
        graph.add_node(node.id, pos=pos)

    for edge in document.edges:
        if not graph.has_node(edge.source) or not graph.has_node(edge.target):
            raise GraphLoadError(f"Edge {edge.source}-{edge.target} references an unknown node")
        graph.add_edge(edge.source, edge.target, weight=edge.weight)

    return graph


def write_graph(graph: Graph, fh: IO[str]) -> None:
    """Write a graph in the format read by `load_graph`."""
    nodes = []
    for node in graph.nodes:
        record = {"id": node}
        pos = graph.position(node)
        if pos is not None:
            record["x"], record["y"] = pos
        nodes.append(record)

    edges = [
        {"source": u, "target": v, "weight": data.get("weight", 1.0)}
        for u, v, data in graph.nx.edges(data=True)
    ]
    json.dump({"nodes": nodes, "edges": edges}, fh)


def create_grid_graph(
    width: int,
    height: int,
    blocked: Iterable[Tuple[int, int]] = (),
) -> Graph:
    """Create a 4-connected grid graph.

    Node ids are `y * width + x`, inserted row by row, so the top-left cell is
    the first node and the bottom-right cell the last one.

    Args:
        width: Number of columns.
        height: Number of rows.
        blocked: Cells `(x, y)` left out of the graph.

    Returns:
        Grid graph with unit edge weights and positions.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")

    blocked_cells: Set[Tuple[int, int]] = set(blocked)
    graph = Graph()

    def node_id(x: int, y: int) -> int:
        return y * width + x

    for y in range(height):
        for x in range(width):
            if (x, y) not in blocked_cells:
                graph.add_node(node_id(x, y), pos=(float(x), float(y)))

    for y in range(height):
        for x in range(width):
            if (x, y) in blocked_cells:
                continue
            if x + 1 < width and (x + 1, y) not in blocked_cells:
                graph.add_edge(node_id(x, y), node_id(x + 1, y))
            if y + 1 < height and (x, y + 1) not in blocked_cells:
                graph.add_edge(node_id(x, y), node_id(x, y + 1))

    return graph
