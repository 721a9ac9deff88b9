"""
Graph Store: the single source of truth for nodes, edges and mode flags.

Nodes are kept in an insertion-ordered mapping and edges in an
insertion-ordered list. Iteration order over both is a documented
property of the store: algorithms rely on it for reproducible tie-breaks.

Usage:
    store = GraphStore()
    store.add_node("A")
    store.add_node("B")
    store.add_edge("A", "B", 4)
    snapshot = store.snapshot()
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field, replace

from graphsim.config import DEFAULT_DIRECTED, DEFAULT_EDGE_WEIGHT, DEFAULT_WEIGHTED
from graphsim.graph.errors import ErrorKind, GraphError

logger = logging.getLogger(__name__)


def normalize_weight(value: object) -> int:
    """
    Coerce user-supplied weight input to a positive integer.

    Mirrors integer parsing of form input: numeric strings are parsed,
    fractional values are truncated, and anything non-numeric or
    non-positive silently becomes the default weight.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_EDGE_WEIGHT

    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return DEFAULT_EDGE_WEIGHT

    if isinstance(value, float):
        if not math.isfinite(value):
            return DEFAULT_EDGE_WEIGHT
        value = int(value)

    if not isinstance(value, int) or value <= 0:
        return DEFAULT_EDGE_WEIGHT
    return value


@dataclass(frozen=True)
class Edge:
    """
    A stored edge.

    Attributes:
        source: Label of the tail node
        target: Label of the head node
        weight: Positive integer weight (always 1 in unweighted mode)
    """

    source: str
    target: str
    weight: int = DEFAULT_EDGE_WEIGHT

    def key(self) -> tuple[str, str, int]:
        """Identity triple used for duplicate suppression."""
        return (self.source, self.target, self.weight)


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Immutable, read-consistent view of the store at one point in time.

    Attributes:
        nodes: Node labels in insertion order
        edges: Edges in insertion order
        directed: Whether edges are one-way
        weighted: Whether edge weights are meaningful
    """

    nodes: tuple[str, ...] = ()
    edges: tuple[Edge, ...] = ()
    directed: bool = DEFAULT_DIRECTED
    weighted: bool = DEFAULT_WEIGHTED
    _node_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_node_set", frozenset(self.nodes))

    def has_node(self, label: str) -> bool:
        return label in self._node_set

    def snapshot(self) -> GraphSnapshot:
        return self


class GraphStore:
    """
    Owns the node set, the edge list and the directed/weighted flags.

    All mutation goes through the public methods below. Each one validates
    its input completely before changing anything, so a failed command
    leaves the store untouched. A single lock serializes writers and
    snapshot readers, so an algorithm never observes a half-applied edit.
    """

    def __init__(
        self,
        directed: bool = DEFAULT_DIRECTED,
        weighted: bool = DEFAULT_WEIGHTED,
    ) -> None:
        # dict keys act as an insertion-ordered set of labels
        self._nodes: dict[str, None] = {}
        self._edges: list[Edge] = []
        self._directed = directed
        self._weighted = weighted
        self._lock = threading.RLock()

    # =========================================================================
    # Read accessors
    # =========================================================================

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def nodes(self) -> tuple[str, ...]:
        """Node labels in insertion order."""
        with self._lock:
            return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edges in insertion order."""
        with self._lock:
            return tuple(self._edges)

    def has_node(self, label: str) -> bool:
        with self._lock:
            return label in self._nodes

    def node_count(self) -> int:
        with self._lock:
            return len(self._nodes)

    def edge_count(self) -> int:
        with self._lock:
            return len(self._edges)

    def snapshot(self) -> GraphSnapshot:
        """Capture nodes, edges and flags atomically."""
        with self._lock:
            return GraphSnapshot(
                nodes=tuple(self._nodes),
                edges=tuple(self._edges),
                directed=self._directed,
                weighted=self._weighted,
            )

    def describe_edge(self, index: int) -> str:
        """Render an edge for listing, e.g. 'A → B (w=4)' or 'A — B'."""
        edge = self._edge_at(index)
        arrow = "→" if self._directed else "—"
        text = f"{edge.source} {arrow} {edge.target}"
        if self._weighted:
            text += f" (w={edge.weight})"
        return text

    def stats(self) -> dict:
        """Get summary statistics about the graph."""
        with self._lock:
            return {
                "nodes": len(self._nodes),
                "edges": len(self._edges),
                "directed": self._directed,
                "weighted": self._weighted,
            }

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_node(self, label: str | None) -> str:
        """
        Add a node.

        Args:
            label: Node label; surrounding whitespace is stripped

        Returns:
            The stored (stripped) label

        Raises:
            GraphError: EMPTY_LABEL or DUPLICATE_NODE
        """
        label = (label or "").strip()
        if not label:
            raise GraphError(ErrorKind.EMPTY_LABEL, "Enter a node label.")

        with self._lock:
            if label in self._nodes:
                raise GraphError(ErrorKind.DUPLICATE_NODE, "Node already exists.")
            self._nodes[label] = None

        logger.info(f"Node '{label}' added")
        return label

    def add_edge(self, source: str, target: str, weight: object = DEFAULT_EDGE_WEIGHT) -> Edge:
        """
        Add an edge between two existing nodes.

        The weight is forced to 1 in unweighted mode and normalized
        otherwise (see normalize_weight).

        Raises:
            GraphError: INSUFFICIENT_NODES, INVALID_ENDPOINT, SELF_LOOP
                or DUPLICATE_EDGE
        """
        with self._lock:
            if len(self._nodes) < 2:
                raise GraphError(
                    ErrorKind.INSUFFICIENT_NODES,
                    "Need at least 2 nodes to add an edge.",
                )
            if source not in self._nodes or target not in self._nodes:
                raise GraphError(
                    ErrorKind.INVALID_ENDPOINT,
                    "Select valid nodes for the edge.",
                )
            if source == target:
                raise GraphError(ErrorKind.SELF_LOOP, "Self-loops are ignored here.")

            weight = normalize_weight(weight) if self._weighted else DEFAULT_EDGE_WEIGHT
            edge = Edge(source, target, weight)
            if any(existing.key() == edge.key() for existing in self._edges):
                raise GraphError(
                    ErrorKind.DUPLICATE_EDGE,
                    "Same edge with same weight already exists.",
                )
            self._edges.append(edge)

        logger.info(f"Edge {edge.source} -> {edge.target} (w={edge.weight}) added")
        return edge

    def remove_edge(self, index: int) -> Edge:
        """
        Remove the edge at a position in the edge list.

        Raises:
            GraphError: INVALID_ENDPOINT if the index is out of range
        """
        with self._lock:
            edge = self._edge_at(index)
            del self._edges[index]

        logger.info(f"Edge {edge.source} -> {edge.target} removed")
        return edge

    def update_edge_weight(self, index: int, weight: object) -> Edge:
        """
        Change the weight of an existing edge.

        No-op in unweighted mode. Invalid weights normalize to 1.

        Returns:
            The edge as stored after the update

        Raises:
            GraphError: INVALID_ENDPOINT for a bad index, DUPLICATE_EDGE if
                another edge already has the resulting triple
        """
        with self._lock:
            edge = self._edge_at(index)
            if not self._weighted:
                logger.debug("Weight update ignored: graph is unweighted")
                return edge
            edge = replace(edge, weight=normalize_weight(weight))
            for i, other in enumerate(self._edges):
                if i != index and other.key() == edge.key():
                    raise GraphError(
                        ErrorKind.DUPLICATE_EDGE,
                        "Same edge with same weight already exists.",
                    )
            self._edges[index] = edge

        logger.info(f"Edge {edge.source} -> {edge.target} weight set to {edge.weight}")
        return edge

    def set_directed(self, directed: bool) -> None:
        """Switch interpretation of stored edges; edges themselves are untouched."""
        with self._lock:
            self._directed = bool(directed)
        logger.info(f"Graph is now {'directed' if directed else 'undirected'}")

    def set_weighted(self, weighted: bool) -> None:
        """
        Switch weighted mode.

        Turning weighted mode off clamps every stored weight to 1. The
        previous weights are discarded: turning it back on does not
        restore them. Parallel edges that collapse onto the same
        (source, target, 1) triple are merged, keeping the first one.
        """
        dropped = 0
        with self._lock:
            self._weighted = bool(weighted)
            if not self._weighted:
                clamped: dict[tuple[str, str, int], Edge] = {}
                for edge in self._edges:
                    edge = replace(edge, weight=DEFAULT_EDGE_WEIGHT)
                    clamped.setdefault(edge.key(), edge)
                dropped = len(self._edges) - len(clamped)
                self._edges = list(clamped.values())
        logger.info(f"Weighted mode {'ON' if weighted else 'OFF'}")
        if dropped:
            logger.info(f"Merged {dropped} duplicate edge(s) after clamping weights")

    def reset(self) -> None:
        """Remove all nodes and edges. Mode flags are kept."""
        with self._lock:
            self._nodes.clear()
            self._edges.clear()
        logger.info("Graph reset")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _edge_at(self, index: int) -> Edge:
        with self._lock:
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._edges):
                raise GraphError(
                    ErrorKind.INVALID_ENDPOINT,
                    f"No edge at position {index}.",
                )
            return self._edges[index]

    def __repr__(self) -> str:
        return (
            f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"directed={self._directed}, weighted={self._weighted})"
        )
