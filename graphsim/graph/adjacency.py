"""
Adjacency derivations over a graph snapshot.

Both views are pure functions of the store's current content and are
rebuilt on every algorithm run; neither is cached or mutated in place.
In undirected mode each edge is mirrored in both directions.
"""

from __future__ import annotations

from typing import NamedTuple

from graphsim.graph.store import GraphSnapshot, GraphStore


class WeightedNeighbor(NamedTuple):
    """Outgoing weighted edge as seen from its tail node."""

    to: str
    weight: int


def build_adjacency(graph: GraphStore | GraphSnapshot) -> dict[str, dict[str, None]]:
    """
    Build the unweighted adjacency map.

    Every known node gets an entry, even if isolated. Each neighbor
    collection is an insertion-ordered set (dict keys): a neighbor appears
    in the position of the first edge that introduced it.
    """
    snap = graph.snapshot()
    adj: dict[str, dict[str, None]] = {node: {} for node in snap.nodes}
    for edge in snap.edges:
        adj[edge.source][edge.target] = None
        if not snap.directed:
            adj[edge.target][edge.source] = None
    return adj


def build_weighted_adjacency(graph: GraphStore | GraphSnapshot) -> dict[str, list[WeightedNeighbor]]:
    """Build the weighted adjacency map, preserving edge-list order per node."""
    snap = graph.snapshot()
    adj: dict[str, list[WeightedNeighbor]] = {node: [] for node in snap.nodes}
    for edge in snap.edges:
        adj[edge.source].append(WeightedNeighbor(edge.target, edge.weight))
        if not snap.directed:
            adj[edge.target].append(WeightedNeighbor(edge.source, edge.weight))
    return adj
