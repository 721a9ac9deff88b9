"""
Simulator engine: the command boundary between a UI and the graph engine.

Every command validates its input, mutates the store or runs an algorithm,
hands animation levels to the scheduler, and returns a CommandResult.
GraphError never escapes: it becomes a failed CommandResult the UI can
render as a status message.
"""

from __future__ import annotations

import logging

from graphsim.algorithms import bfs, dfs, shortest_path, topological_sort
from graphsim.animation import AnimationScheduler
from graphsim.config import STRATEGY_BFS
from graphsim.graph import ErrorKind, GraphError, GraphStore
from graphsim.simulator.state import STATUS_INFO, CommandResult

logger = logging.getLogger(__name__)


class GraphSimulator:
    """
    Owns one graph store and one animation scheduler.

    The store is only mutated through the commands below, all issued from
    the caller's control thread; algorithms read an atomic snapshot.

    Usage:
        with GraphSimulator() as sim:
            sim.add_node("A")
            sim.add_node("B")
            sim.add_edge("A", "B", 3)
            result = sim.run_bfs("A")
    """

    def __init__(
        self,
        store: GraphStore | None = None,
        scheduler: AnimationScheduler | None = None,
    ) -> None:
        self._store = store or GraphStore()
        self._scheduler = scheduler or AnimationScheduler()

    @property
    def store(self) -> GraphStore:
        return self._store

    @property
    def scheduler(self) -> AnimationScheduler:
        return self._scheduler

    def _failure(self, command: str, error: GraphError) -> CommandResult:
        logger.warning(f"{command} rejected: {error.kind.value} ({error.message})")
        return CommandResult.failure(command, error)

    def _require_nodes(self) -> None:
        if self._store.node_count() == 0:
            raise GraphError(ErrorKind.UNKNOWN_START_NODE, "Add nodes first.")

    # =========================================================================
    # Graph editing
    # =========================================================================

    def add_node(self, label: str | None) -> CommandResult:
        try:
            stored = self._store.add_node(label)
        except GraphError as e:
            return self._failure("add_node", e)
        return CommandResult.success("add_node", f'Node "{stored}" added.', payload=stored)

    def add_edge(self, source: str, target: str, weight: object = 1) -> CommandResult:
        try:
            edge = self._store.add_edge(source, target, weight)
        except GraphError as e:
            return self._failure("add_edge", e)

        arrow = "→" if self._store.directed else "—"
        message = f"Edge {edge.source} {arrow} {edge.target}"
        if self._store.weighted:
            message += f" (w={edge.weight})"
        return CommandResult.success("add_edge", message + " added.", payload=edge)

    def remove_edge(self, index: int) -> CommandResult:
        try:
            edge = self._store.remove_edge(index)
        except GraphError as e:
            return self._failure("remove_edge", e)
        return CommandResult.success("remove_edge", "Edge removed successfully.", payload=edge)

    def update_edge_weight(self, index: int, weight: object) -> CommandResult:
        try:
            edge = self._store.update_edge_weight(index, weight)
        except GraphError as e:
            return self._failure("update_edge_weight", e)

        if not self._store.weighted:
            return CommandResult.success(
                "update_edge_weight",
                "Graph is unweighted; weight unchanged.",
                payload=edge,
                level=STATUS_INFO,
            )
        return CommandResult.success("update_edge_weight", "Edge weight updated.", payload=edge)

    def reset(self) -> CommandResult:
        self._scheduler.clear()
        self._store.reset()
        return CommandResult.success("reset", "Graph reset.", level=STATUS_INFO)

    def set_directed(self, directed: bool) -> CommandResult:
        self._store.set_directed(directed)
        kind = "directed" if directed else "undirected"
        return CommandResult.success(
            "set_directed",
            f"Graph is now treated as {kind}.",
            level=STATUS_INFO,
        )

    def set_weighted(self, weighted: bool) -> CommandResult:
        self._store.set_weighted(weighted)
        if weighted:
            message = "Weighted mode ON: you can set custom edge weights."
        else:
            message = "Weighted mode OFF: all edges treated as unweighted."
        return CommandResult.success("set_weighted", message, level=STATUS_INFO)

    # =========================================================================
    # Algorithms
    # =========================================================================

    def run_bfs(self, start: str) -> CommandResult:
        try:
            self._require_nodes()
            result = bfs(self._store.snapshot(), start)
        except GraphError as e:
            return self._failure("run_bfs", e)

        frames = self._scheduler.start(result.levels)
        logger.info(f"BFS from {start}: {result.order}")
        return CommandResult.success(
            "run_bfs", f"BFS completed from {start}.", payload=result, frames=frames
        )

    def run_dfs(self, start: str) -> CommandResult:
        try:
            self._require_nodes()
            result = dfs(self._store.snapshot(), start)
        except GraphError as e:
            return self._failure("run_dfs", e)

        frames = self._scheduler.start(result.levels)
        logger.info(f"DFS from {start}: {result.order}")
        return CommandResult.success(
            "run_dfs", f"DFS completed from {start}.", payload=result, frames=frames
        )

    def run_topo_sort(self) -> CommandResult:
        try:
            # the directed-mode check in topological_sort takes priority over emptiness
            result = topological_sort(self._store.snapshot())
            self._require_nodes()
        except GraphError as e:
            if e.kind in (ErrorKind.REQUIRES_DIRECTED, ErrorKind.CYCLIC_GRAPH):
                self._scheduler.clear()
            return self._failure("run_topo_sort", e)

        frames = self._scheduler.start(result.levels)
        logger.info(f"Topological order: {result.order}")
        return CommandResult.success(
            "run_topo_sort", "Topological sort completed.", payload=result, frames=frames
        )

    def run_shortest_path(self, start: str, end: str) -> CommandResult:
        try:
            self._require_nodes()
            result = shortest_path(self._store.snapshot(), start, end)
        except GraphError as e:
            if e.kind is ErrorKind.NO_PATH:
                self._scheduler.clear()
            return self._failure("run_shortest_path", e)

        if result.is_trivial:
            self._scheduler.clear()
            return CommandResult.success(
                "run_shortest_path", "Trivial path (same node).", payload=result
            )

        frames = self._scheduler.start(result.levels)
        algo = "BFS" if result.strategy == STRATEGY_BFS else "Dijkstra"
        logger.info(f"Shortest path {start} -> {end} ({algo}): {result.path}, cost {result.cost}")
        return CommandResult.success(
            "run_shortest_path", "Shortest path found.", payload=result, frames=frames
        )

    def clear_highlights(self) -> CommandResult:
        self._scheduler.clear()
        return CommandResult.success("clear_highlights", "Highlights cleared.", level=STATUS_INFO)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Cancel any pending animation."""
        self._scheduler.clear()

    def __enter__(self) -> GraphSimulator:
        return self

    def __exit__(self, *args) -> None:
        self.close()
