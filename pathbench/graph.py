"""Graph model used by the benchmark.

Implements `Graph`, a thin typed wrapper around an undirected
`networkx.Graph`. Node insertion order is preserved, so the first and last
nodes give default search endpoints.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Hashable, Iterable, List, Optional, Sequence, Tuple

import networkx as nx
import matplotlib.pyplot as plt

Node = Hashable
Position = Tuple[float, float]


class Graph:
    """Weighted undirected graph with optional node positions.

    Args:
        nx_graph: Optional networkx graph to wrap. It is used as-is, not copied.
    """

    def __init__(self, nx_graph: nx.Graph | None = None) -> None:
        self._g: nx.Graph = nx_graph if nx_graph is not None else nx.Graph()

    @classmethod
    def from_networkx(cls, g: nx.Graph) -> Graph:
        return cls(nx.Graph(g))

    @property
    def nx(self) -> nx.Graph:
        return self._g

    @property
    def nodes(self) -> List[Node]:
        """Nodes in insertion order."""
        return list(self._g.nodes)

    @property
    def source(self) -> Node:
        """Default search source: the first node."""
        return next(iter(self._g.nodes))

    @property
    def destination(self) -> Node:
        """Default search destination: the last node."""
        return self.nodes[-1]

    def number_of_nodes(self) -> int:
        return self._g.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._g.number_of_edges()

    def has_node(self, node: Node) -> bool:
        return self._g.has_node(node)

    def add_node(self, node: Node, pos: Optional[Position] = None) -> None:
        if pos is None:
            self._g.add_node(node)
        else:
            self._g.add_node(node, pos=tuple(pos))

    def add_edge(self, u: Node, v: Node, weight: float = 1.0) -> None:
        self._g.add_edge(u, v, weight=weight)

    def remove_node(self, node: Node) -> None:
        self._g.remove_node(node)

    def neighbors(self, node: Node) -> Iterable[Node]:
        return self._g.neighbors(node)

    def weight(self, u: Node, v: Node) -> float:
        return self._g.edges[u, v].get("weight", 1.0)

    def position(self, node: Node) -> Optional[Position]:
        return self._g.nodes[node].get("pos")

    def copy(self) -> Graph:
        return Graph(self._g.copy())

    def to_text(self, max_edges: int = 50) -> str:
        """Compact deterministic text snapshot, for debug logging.

        Args:
            max_edges: Maximum number of edges listed before truncating.

        Returns:
            A multi-line string with node and edge counts, then edges.
        """
        lines: list[str] = [
            f"Graph | Nodes: {self.number_of_nodes()} | Edges: {self.number_of_edges()}"
        ]
        if self.number_of_nodes():
            lines.append(f"source: {self.source!r} | destination: {self.destination!r}")

        edges = sorted(
            (sorted((repr(u), repr(v))), data.get("weight", 1.0))
            for u, v, data in self._g.edges(data=True)
        )
        for (u, v), w in edges[:max_edges]:
            lines.append(f"- {u} --{w:g}-- {v}")
        if len(edges) > max_edges:
            lines.append(f"... and {len(edges) - max_edges} more")
        return "\n".join(lines)

    def plot(
        self,
        output_path: Optional[str] = None,
        *,
        path: Optional[Sequence[Node]] = None,
        figsize: tuple[int, int] = (8, 8),
        title: str = "Graph",
    ) -> None:
        """Plot the graph, highlighting an optional path.

        Node positions are used when every node has one; otherwise a spring
        layout is computed.

        Args:
            output_path: If provided, save plot to this path instead of showing.
            path: Optional node sequence to highlight (e.g. a search result).
            figsize: Figure size (width, height).
            title: Plot title.
        """
        if not self._g.nodes:
            return

        pos: dict[Any, Position] = nx.get_node_attributes(self._g, "pos")
        if len(pos) != self._g.number_of_nodes():
            pos = nx.spring_layout(self._g, seed=0)

        fig, ax = plt.subplots(figsize=figsize)
        nx.draw_networkx_edges(self._g, pos, alpha=0.3, width=0.8, edge_color="#777777", ax=ax)
        nx.draw_networkx_nodes(self._g, pos, node_size=12, node_color="#377eb8", ax=ax)

        if path:
            path_edges = list(zip(path, path[1:]))
            nx.draw_networkx_edges(self._g, pos, edgelist=path_edges, width=2.0, edge_color="#e41a1c", ax=ax)
            nx.draw_networkx_nodes(self._g, pos, nodelist=list(path), node_size=20, node_color="#e41a1c", ax=ax)

        nx.draw_networkx_nodes(
            self._g, pos, nodelist=[self.source, self.destination],
            node_size=60, node_color="#4daf4a", ax=ax,
        )

        ax.set_title(title)
        ax.set_aspect("equal")
        ax.axis("off")
        plt.tight_layout()

        if output_path:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            plt.savefig(output_path, dpi=200, bbox_inches="tight")
        else:
            plt.show()

        plt.close(fig)

    def __len__(self) -> int:
        return self.number_of_nodes()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.number_of_nodes()}, edges={self.number_of_edges()})"
