"""
Plain-text reports for algorithm results.

Each formatter returns a multi-line string: the numbered order, the
algorithm-specific detail (levels, indegree tables, cost) and a short
explanation of how the result was obtained.
"""

from __future__ import annotations

from graphsim.algorithms.results import PathResult, TopoResult, TraversalResult
from graphsim.config import STRATEGY_BFS

BFS_EXPLANATION = (
    "Breadth First Search (BFS) uses a queue and visits nodes level-by-level "
    "starting from the source node. Neighbors of a node are visited before going "
    "to the next level. Nodes at the same level are highlighted at the same time."
)

DFS_EXPLANATION = (
    "Depth First Search (DFS) explores as deep as possible along each branch "
    "before backtracking. An explicit stack is used and neighbors are pushed in "
    "reverse-sorted order so that the traversal is deterministic."
)

TOPO_EXPLANATION = (
    "We repeatedly remove nodes with indegree 0 and decrease the indegree of their "
    "neighbors. If we can remove all nodes, the graph is a DAG and the removal "
    "order is a valid topological ordering."
)

BFS_PATH_EXPLANATION = (
    "All edge weights are 1, so the shortest path in terms of number of edges is "
    "found using BFS. BFS guarantees the first time we reach the destination node "
    "is via the minimum number of edges."
)

DIJKSTRA_EXPLANATION = (
    "Since the graph is weighted, we use Dijkstra's algorithm. It maintains a "
    "distance table and repeatedly picks the unvisited node with the minimum "
    "tentative distance, relaxing edges until the shortest distances are fixed."
)


def format_sequence(nodes: list[str]) -> str:
    """Render nodes as a 1-based numbered sequence: '1. A  2. B'."""
    return "  ".join(f"{i}. {node}" for i, node in enumerate(nodes, start=1))


def format_indegree(table: dict[str, int]) -> str:
    """Render an indegree table as 'A:0  B:1', clamping negatives to 0."""
    return "  ".join(f"{node}:{max(0, degree)}" for node, degree in table.items())


def format_traversal(result: TraversalResult) -> str:
    """Report for a BFS or DFS traversal."""
    name = result.algorithm.upper()
    lines = [
        f"{name} Result",
        f"Traversal order from {result.start}:",
        format_sequence(result.order),
        "",
        "Explanation:",
        BFS_EXPLANATION if result.algorithm == "bfs" else DFS_EXPLANATION,
    ]
    if result.algorithm == "bfs":
        lines += ["", "Level-wise grouping (L0 = start node):"]
        lines += [f"L{i}: {', '.join(level)}" for i, level in enumerate(result.levels)]
    return "\n".join(lines)


def format_topo(result: TopoResult) -> str:
    """Report for a topological sort, including every removal step."""
    lines = [
        "Topological Sort Result",
        "A valid topological order of the directed acyclic graph is:",
        format_sequence(result.order),
        "",
        "Explanation (Kahn's Algorithm with indegree table):",
        TOPO_EXPLANATION,
        "",
        "Initial Indegree Table:",
        format_indegree(result.initial_indegree),
    ]
    for i, step in enumerate(result.steps, start=1):
        lines += [
            "",
            f"Step {i}: Remove node {step.removed_node}",
            "Updated indegrees:",
            format_indegree(step.indegree_snapshot),
            f"Queue now: [{', '.join(step.queue_snapshot)}]",
        ]
    return "\n".join(lines)


def format_path(result: PathResult) -> str:
    """Report for a shortest-path query."""
    if result.is_trivial:
        return "\n".join([
            "Shortest Path Result",
            f"Start and end are the same node: {result.start}",
            "Distance / weight = 0",
        ])

    explanation = BFS_PATH_EXPLANATION if result.strategy == STRATEGY_BFS else DIJKSTRA_EXPLANATION
    return "\n".join([
        "Shortest Path Result",
        f"From {result.start} to {result.end}:",
        format_sequence(result.path),
        f"Total cost / distance = {result.cost}",
        "",
        "Explanation:",
        explanation,
    ])


def format_result(payload: object) -> str:
    """Dispatch to the formatter matching the result type."""
    if isinstance(payload, TraversalResult):
        return format_traversal(payload)
    if isinstance(payload, TopoResult):
        return format_topo(payload)
    if isinstance(payload, PathResult):
        return format_path(payload)
    raise TypeError(f"No report format for {type(payload).__name__}")
