"""Pathfinding variants.

Every variant reports whether a path was found, the path itself and how many
nodes it expanded. An optional `deadline` (a `time.perf_counter()` value)
makes a search give up and report not-found with `timed_out=True`.
"""

from __future__ import annotations

import heapq
import math
import time
from collections import deque
from itertools import count
from typing import Callable, Dict, Hashable, List, Optional

from ..graph import Graph
from .base import Registry, SearchAlgorithm, SearchOutcome

SEARCH: Registry[SearchAlgorithm] = Registry("search")


def _expired(deadline: Optional[float]) -> bool:
    return deadline is not None and time.perf_counter() > deadline


def _build_path(parents: Dict[Hashable, Optional[Hashable]], destination: Hashable) -> List[Hashable]:
    path = [destination]
    while parents[path[-1]] is not None:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def euclidean(graph: Graph, a: Hashable, b: Hashable) -> float:
    """Straight-line distance between two nodes, 0 if either has no position."""
    pa, pb = graph.position(a), graph.position(b)
    if pa is None or pb is None:
        return 0.0
    return math.hypot(pa[0] - pb[0], pa[1] - pb[1])


@SEARCH.register("bfs")
def breadth_first(
    graph: Graph,
    source: Hashable,
    destination: Hashable,
    deadline: Optional[float] = None,
) -> SearchOutcome:
    parents: Dict[Hashable, Optional[Hashable]] = {source: None}
    queue = deque([source])
    explored = 0
    while queue:
        if _expired(deadline):
            return SearchOutcome(False, None, explored, timed_out=True)
        node = queue.popleft()
        explored += 1
        if node == destination:
            return SearchOutcome(True, _build_path(parents, destination), explored)
        for neighbor in graph.neighbors(node):
            if neighbor not in parents:
                parents[neighbor] = node
                queue.append(neighbor)
    return SearchOutcome(False, None, explored)


@SEARCH.register("dfs")
def depth_first(
    graph: Graph,
    source: Hashable,
    destination: Hashable,
    deadline: Optional[float] = None,
) -> SearchOutcome:
    parents: Dict[Hashable, Optional[Hashable]] = {source: None}
    stack = [source]
    visited = set()
    explored = 0
    while stack:
        if _expired(deadline):
            return SearchOutcome(False, None, explored, timed_out=True)
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        explored += 1
        if node == destination:
            return SearchOutcome(True, _build_path(parents, destination), explored)
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                parents[neighbor] = node
                stack.append(neighbor)
    return SearchOutcome(False, None, explored)


def _best_first(
    graph: Graph,
    source: Hashable,
    destination: Hashable,
    deadline: Optional[float],
    priority: Callable[[float, Hashable], float],
) -> SearchOutcome:
    """Shared loop of Dijkstra, A* and greedy search.

    Args:
        priority: Maps (cost so far, node) to the queue key.
    """
    tie = count()
    costs: Dict[Hashable, float] = {source: 0.0}
    parents: Dict[Hashable, Optional[Hashable]] = {source: None}
    closed = set()
    heap = [(priority(0.0, source), next(tie), source)]
    explored = 0

    while heap:
        if _expired(deadline):
            return SearchOutcome(False, None, explored, timed_out=True)
        _, _, node = heapq.heappop(heap)
        if node in closed:
            continue
        closed.add(node)
        explored += 1
        if node == destination:
            return SearchOutcome(True, _build_path(parents, destination), explored)

        cost = costs[node]
        for neighbor in graph.neighbors(node):
            if neighbor in closed:
                continue
            new_cost = cost + graph.weight(node, neighbor)
            if new_cost < costs.get(neighbor, math.inf):
                costs[neighbor] = new_cost
                parents[neighbor] = node
                heapq.heappush(heap, (priority(new_cost, neighbor), next(tie), neighbor))

    return SearchOutcome(False, None, explored)


@SEARCH.register("dijkstra")
def dijkstra(
    graph: Graph,
    source: Hashable,
    destination: Hashable,
    deadline: Optional[float] = None,
) -> SearchOutcome:
    return _best_first(graph, source, destination, deadline, lambda g, n: g)


@SEARCH.register("astar")
def astar(
    graph: Graph,
    source: Hashable,
    destination: Hashable,
    deadline: Optional[float] = None,
) -> SearchOutcome:
    return _best_first(
        graph, source, destination, deadline,
        lambda g, n: g + euclidean(graph, n, destination),
    )


@SEARCH.register("greedy")
def greedy_best_first(
    graph: Graph,
    source: Hashable,
    destination: Hashable,
    deadline: Optional[float] = None,
) -> SearchOutcome:
    return _best_first(
        graph, source, destination, deadline,
        lambda g, n: euclidean(graph, n, destination),
    )
