"""
Shortest-path engine.

Picks BFS when every edge has weight 1 (cost = number of edges), and
Dijkstra otherwise (cost = summed weight). A query whose start and end
coincide short-circuits to a zero-cost single-node path.
"""

from __future__ import annotations

import logging
import math
from collections import deque

from graphsim.algorithms.results import PathResult
from graphsim.config import DEFAULT_EDGE_WEIGHT, STRATEGY_BFS, STRATEGY_DIJKSTRA
from graphsim.graph.adjacency import build_adjacency, build_weighted_adjacency
from graphsim.graph.errors import ErrorKind, GraphError
from graphsim.graph.store import GraphSnapshot, GraphStore

logger = logging.getLogger(__name__)


def _no_path(start: str, end: str) -> GraphError:
    return GraphError(ErrorKind.NO_PATH, f"No path exists from {start} to {end}.")


def _walk_parents(parent: dict[str, str], end: str) -> list[str]:
    """Follow parent pointers back from end and return the forward path."""
    path = [end]
    while path[-1] in parent:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def select_strategy(graph: GraphStore | GraphSnapshot) -> str:
    """Return STRATEGY_BFS if there are edges and all weigh 1, else STRATEGY_DIJKSTRA."""
    edges = graph.snapshot().edges
    if edges and all(edge.weight == DEFAULT_EDGE_WEIGHT for edge in edges):
        return STRATEGY_BFS
    return STRATEGY_DIJKSTRA


def bfs_shortest_path(graph: GraphStore | GraphSnapshot, start: str, end: str) -> list[str]:
    """
    Fewest-edges path using BFS with parent pointers.

    The search stops the first time `end` is dequeued.

    Raises:
        GraphError: NO_PATH if an endpoint is unknown or unreachable
    """
    adj = build_adjacency(graph)
    if start not in adj or end not in adj:
        raise _no_path(start, end)

    queue = deque([start])
    visited = {start}
    parent: dict[str, str] = {}

    while queue:
        node = queue.popleft()
        if node == end:
            return _walk_parents(parent, end)
        for neighbor in adj[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = node
                queue.append(neighbor)

    raise _no_path(start, end)


def dijkstra(graph: GraphStore | GraphSnapshot, start: str, end: str) -> tuple[list[str], int]:
    """
    Minimum-weight path using Dijkstra's algorithm with a linear scan.

    The unvisited node with the smallest tentative distance is selected
    each round; ties go to the node inserted first. The loop stops when
    `end` is selected or nothing reachable remains.

    Returns:
        Tuple of (path, cost)

    Raises:
        GraphError: NO_PATH if an endpoint is unknown or unreachable
    """
    snap = graph.snapshot()
    adj = build_weighted_adjacency(snap)
    if start not in adj or end not in adj:
        raise _no_path(start, end)

    dist: dict[str, float] = {node: math.inf for node in snap.nodes}
    dist[start] = 0
    parent: dict[str, str] = {}
    visited: set[str] = set()

    while True:
        current = None
        best = math.inf
        for node in snap.nodes:
            if node not in visited and dist[node] < best:
                best = dist[node]
                current = node

        if current is None or current == end:
            break

        logger.debug(f"Dijkstra selected {current} (dist={best})")
        visited.add(current)
        for neighbor in adj[current]:
            candidate = dist[current] + neighbor.weight
            if candidate < dist[neighbor.to]:
                dist[neighbor.to] = candidate
                parent[neighbor.to] = current

    if math.isinf(dist[end]):
        raise _no_path(start, end)

    return _walk_parents(parent, end), int(dist[end])


def shortest_path(graph: GraphStore | GraphSnapshot, start: str, end: str) -> PathResult:
    """
    Shortest path between two nodes, choosing the strategy automatically.

    Raises:
        GraphError: NO_PATH if an endpoint is unknown or unreachable
    """
    snap = graph.snapshot()
    if not snap.has_node(start) or not snap.has_node(end):
        raise _no_path(start, end)

    if start == end:
        return PathResult(start=start, end=end, path=[start], cost=0, strategy=None)

    strategy = select_strategy(snap)
    if strategy == STRATEGY_BFS:
        path = bfs_shortest_path(snap, start, end)
        cost = len(path) - 1
    else:
        path, cost = dijkstra(snap, start, end)

    logger.debug(f"Shortest path {start} -> {end} via {strategy}: {path} (cost={cost})")
    return PathResult(start=start, end=end, path=path, cost=cost, strategy=strategy)
