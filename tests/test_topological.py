"""
Unit tests for Kahn's topological sort.
"""

import pytest

from graphsim.algorithms import topological_sort
from graphsim.graph import ErrorKind, GraphError, GraphStore


def make_graph(nodes, edges, directed=True) -> GraphStore:
    graph = GraphStore(directed=directed)
    for label in nodes:
        graph.add_node(label)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


def assert_valid_order(order, edges):
    position = {node: i for i, node in enumerate(order)}
    for source, target, *_ in edges:
        assert position[source] < position[target], f"{source} must precede {target}"


class TestTopologicalSort:
    """Test ordering, snapshots and failure modes."""

    def test_diamond_order(self, diamond_store):
        """A should precede B and C, which both precede D."""
        result = topological_sort(diamond_store)
        assert result.order == ["A", "B", "C", "D"]
        assert_valid_order(result.order, [e.key() for e in diamond_store.edges])

    def test_initial_indegree(self, diamond_store):
        result = topological_sort(diamond_store)
        assert result.initial_indegree == {"A": 0, "B": 1, "C": 1, "D": 2}

    def test_step_snapshots(self, diamond_store):
        """Each removal should record the indegree table and the queue after it."""
        steps = topological_sort(diamond_store).steps
        assert [s.removed_node for s in steps] == ["A", "B", "C", "D"]
        assert steps[0].indegree_snapshot == {"A": 0, "B": 0, "C": 0, "D": 2}
        assert steps[0].queue_snapshot == ["B", "C"]
        assert steps[1].indegree_snapshot["D"] == 1
        assert steps[1].queue_snapshot == ["C"]
        assert steps[2].queue_snapshot == ["D"]
        assert steps[3].queue_snapshot == []

    def test_snapshots_are_independent(self, diamond_store):
        """Later steps must not alter earlier snapshots."""
        steps = topological_sort(diamond_store).steps
        assert steps[0].indegree_snapshot["D"] == 2
        assert steps[2].indegree_snapshot["D"] == 0

    def test_seed_queue_in_insertion_order(self):
        """Zero-indegree nodes should be queued in node-insertion order."""
        graph = make_graph("ZYX", [("Z", "X")])
        assert topological_sort(graph).order == ["Z", "Y", "X"]

    def test_three_cycle(self):
        graph = make_graph("ABC", [("A", "B"), ("B", "C"), ("C", "A")])
        with pytest.raises(GraphError) as excinfo:
            topological_sort(graph)
        assert excinfo.value.kind is ErrorKind.CYCLIC_GRAPH

    def test_cycle_downstream_of_dag(self):
        """A cycle anywhere should fail, not return a partial order."""
        graph = make_graph("ABCD", [("A", "B"), ("B", "C"), ("C", "D"), ("D", "C")])
        with pytest.raises(GraphError) as excinfo:
            topological_sort(graph)
        assert excinfo.value.kind is ErrorKind.CYCLIC_GRAPH

    def test_requires_directed(self, diamond_store):
        diamond_store.set_directed(False)
        with pytest.raises(GraphError) as excinfo:
            topological_sort(diamond_store)
        assert excinfo.value.kind is ErrorKind.REQUIRES_DIRECTED

    def test_parallel_edges_count_twice(self):
        """Edges differing only by weight each contribute to indegree."""
        graph = make_graph("AB", [("A", "B", 1), ("A", "B", 2)])
        result = topological_sort(graph)
        assert result.initial_indegree["B"] == 2
        assert result.order == ["A", "B"]

    def test_levels_are_singletons(self, diamond_store):
        assert topological_sort(diamond_store).levels == [["A"], ["B"], ["C"], ["D"]]
