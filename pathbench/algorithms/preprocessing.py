"""Graph preprocessing variants.

Each variant rewrites a graph in place before searching, given the search
endpoints that must survive. Jump variants contract chains of degree-2 nodes
into single weighted "jump" edges, so the search has fewer nodes to expand.
"""

from __future__ import annotations

import math
from typing import Callable, Hashable, Optional, Sequence, Set

from ..graph import Graph
from .base import PreprocessingAlgorithm, Registry

NONE = "none"

PREPROCESSING: Registry[PreprocessingAlgorithm] = Registry("preprocessing")

_COLLINEAR_EPS = 1e-9


def _contract(graph: Graph, node: Hashable) -> None:
    """Replace a degree-2 node by a jump edge between its two neighbors.

    If the neighbors are already connected, the cheaper edge is kept.
    """
    u, w = list(graph.neighbors(node))
    jump = graph.weight(u, node) + graph.weight(node, w)
    graph.remove_node(node)
    if graph.nx.has_edge(u, w):
        jump = min(jump, graph.weight(u, w))
    graph.add_edge(u, w, weight=jump)


def _has_two_neighbors(graph: Graph, node: Hashable) -> bool:
    neighbors = list(graph.neighbors(node))
    return len(neighbors) == 2 and node not in neighbors


def _contract_while(
    graph: Graph,
    endpoints: Sequence[Hashable],
    can_contract: Callable[[Graph, Hashable], bool],
) -> int:
    """Contract matching nodes until a full pass changes nothing.

    Returns:
        Number of contracted nodes.
    """
    keep: Set[Hashable] = set(endpoints)
    contracted = 0
    changed = True
    while changed:
        changed = False
        for node in graph.nodes:
            if node in keep or not graph.has_node(node):
                continue
            if _has_two_neighbors(graph, node) and can_contract(graph, node):
                _contract(graph, node)
                contracted += 1
                changed = True
    return contracted


def _is_straight(graph: Graph, node: Hashable) -> bool:
    """True if `node` lies on a straight segment between its two neighbors."""
    u, w = list(graph.neighbors(node))
    p, q, r = graph.position(u), graph.position(node), graph.position(w)
    if p is None or q is None or r is None:
        return False
    ax, ay = q[0] - p[0], q[1] - p[1]
    bx, by = r[0] - q[0], r[1] - q[1]
    cross = ax * by - ay * bx
    dot = ax * bx + ay * by
    scale = math.hypot(ax, ay) * math.hypot(bx, by)
    return scale > 0 and abs(cross) <= _COLLINEAR_EPS * scale and dot > 0


@PREPROCESSING.register(NONE)
def no_preprocessing(graph: Graph, endpoints: Sequence[Hashable]) -> Optional[Graph]:
    return None


@PREPROCESSING.register("intersection_jumps")
def intersection_jumps(graph: Graph, endpoints: Sequence[Hashable]) -> Optional[Graph]:
    """Keep only intersections, dead ends and endpoints.

    Every other node has exactly two neighbors and is folded into a jump edge.
    """
    _contract_while(graph, endpoints, lambda g, n: True)
    return None


@PREPROCESSING.register("corner_jumps")
def corner_jumps(graph: Graph, endpoints: Sequence[Hashable]) -> Optional[Graph]:
    """Fold straight corridor nodes into jump edges, keeping corners.

    Requires node positions; nodes without one are left alone.
    """
    _contract_while(graph, endpoints, _is_straight)
    return None
