"""
Unit tests for GraphStore mutations, validation and weight normalization.
"""

import pytest

from graphsim.algorithms import topological_sort
from graphsim.graph import Edge, ErrorKind, GraphError, GraphStore, normalize_weight


def _kind(excinfo) -> ErrorKind:
    return excinfo.value.kind


class TestAddNode:
    """Test node creation."""

    def test_add_node_stores_label(self, store):
        """Should store a new node."""
        assert store.add_node("A") == "A"
        assert store.nodes == ("A",)

    def test_label_is_stripped(self, store):
        """Surrounding whitespace should be removed."""
        assert store.add_node("  A  ") == "A"
        assert store.has_node("A")

    @pytest.mark.parametrize("label", ["", "   ", "\t\n", None])
    def test_blank_label_rejected(self, store, label):
        """Blank or whitespace-only labels should fail with EMPTY_LABEL."""
        with pytest.raises(GraphError) as excinfo:
            store.add_node(label)
        assert _kind(excinfo) is ErrorKind.EMPTY_LABEL
        assert store.node_count() == 0

    def test_duplicate_rejected(self, store):
        """Adding an existing label should fail with DUPLICATE_NODE."""
        store.add_node("A")
        with pytest.raises(GraphError) as excinfo:
            store.add_node("A")
        assert _kind(excinfo) is ErrorKind.DUPLICATE_NODE
        assert store.nodes == ("A",)

    def test_insertion_order_preserved(self, store):
        """Nodes should iterate in insertion order, not sorted order."""
        for label in ["C", "A", "B"]:
            store.add_node(label)
        assert store.nodes == ("C", "A", "B")


class TestAddEdge:
    """Test edge creation and its validation order."""

    def test_requires_two_nodes(self, store):
        """Should fail with INSUFFICIENT_NODES when fewer than 2 nodes exist."""
        store.add_node("A")
        with pytest.raises(GraphError) as excinfo:
            store.add_edge("A", "A")
        assert _kind(excinfo) is ErrorKind.INSUFFICIENT_NODES

    def test_unknown_endpoint(self, store):
        """Should fail with INVALID_ENDPOINT for an unknown node."""
        store.add_node("A")
        store.add_node("B")
        with pytest.raises(GraphError) as excinfo:
            store.add_edge("A", "Z")
        assert _kind(excinfo) is ErrorKind.INVALID_ENDPOINT

    def test_self_loop_rejected(self, store):
        """Should fail with SELF_LOOP when both endpoints are the same."""
        store.add_node("A")
        store.add_node("B")
        with pytest.raises(GraphError) as excinfo:
            store.add_edge("A", "A", 2)
        assert _kind(excinfo) is ErrorKind.SELF_LOOP
        assert store.edge_count() == 0

    def test_exact_duplicate_rejected(self, store):
        """Same (from, to, weight) twice should fail with DUPLICATE_EDGE."""
        store.add_node("A")
        store.add_node("B")
        store.add_edge("A", "B", 3)
        with pytest.raises(GraphError) as excinfo:
            store.add_edge("A", "B", 3)
        assert _kind(excinfo) is ErrorKind.DUPLICATE_EDGE
        assert store.edge_count() == 1

    def test_different_weight_accepted(self, store):
        """Same endpoints with a different weight should be accepted."""
        store.add_node("A")
        store.add_node("B")
        store.add_edge("A", "B", 3)
        store.add_edge("A", "B", 5)
        assert store.edges == (Edge("A", "B", 3), Edge("A", "B", 5))

    def test_reverse_direction_accepted(self, store):
        """B->A is a different edge from A->B."""
        store.add_node("A")
        store.add_node("B")
        store.add_edge("A", "B")
        store.add_edge("B", "A")
        assert store.edge_count() == 2

    @pytest.mark.parametrize("weight", [0, -4, "abc", None, "", float("nan")])
    def test_invalid_weight_normalized(self, store, weight):
        """Non-positive or non-numeric weights should silently become 1."""
        store.add_node("A")
        store.add_node("B")
        edge = store.add_edge("A", "B", weight)
        assert edge.weight == 1

    def test_unweighted_forces_weight_one(self):
        """Weight should be forced to 1 in unweighted mode."""
        store = GraphStore(weighted=False)
        store.add_node("A")
        store.add_node("B")
        edge = store.add_edge("A", "B", 9)
        assert edge.weight == 1

    def test_unweighted_duplicate_after_forcing(self):
        """Two edges that only differed by weight collide once forced to 1."""
        store = GraphStore(weighted=False)
        store.add_node("A")
        store.add_node("B")
        store.add_edge("A", "B", 9)
        with pytest.raises(GraphError) as excinfo:
            store.add_edge("A", "B", 4)
        assert _kind(excinfo) is ErrorKind.DUPLICATE_EDGE


class TestNormalizeWeight:
    """Test weight coercion rules."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (4, 4),
            ("7", 7),
            (" 12 ", 12),
            (2.9, 2),
            ("3.5", 3),
            (0, 1),
            (-2, 1),
            (0.4, 1),
            ("x", 1),
            (True, 1),
            (float("inf"), 1),
            ([3], 1),
        ],
    )
    def test_normalize(self, value, expected):
        assert normalize_weight(value) == expected


class TestEdgeEditing:
    """Test removal and weight updates by index."""

    def test_remove_edge(self, diamond_store):
        """Should remove the edge at the index and keep order of the rest."""
        removed = diamond_store.remove_edge(1)
        assert removed == Edge("A", "C", 1)
        assert [e.key() for e in diamond_store.edges] == [
            ("A", "B", 1),
            ("B", "D", 1),
            ("C", "D", 1),
        ]

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_remove_out_of_range(self, diamond_store, index):
        """Out-of-range indexes should fail without mutating."""
        with pytest.raises(GraphError) as excinfo:
            diamond_store.remove_edge(index)
        assert _kind(excinfo) is ErrorKind.INVALID_ENDPOINT
        assert diamond_store.edge_count() == 4

    def test_update_weight(self, diamond_store):
        """Should replace the weight in place, keeping position."""
        diamond_store.update_edge_weight(2, 6)
        assert diamond_store.edges[2] == Edge("B", "D", 6)

    def test_update_weight_normalizes(self, diamond_store):
        """Non-positive weights should become 1."""
        diamond_store.update_edge_weight(0, 5)
        diamond_store.update_edge_weight(0, -3)
        assert diamond_store.edges[0].weight == 1

    def test_update_weight_rejects_duplicate_triple(self, store):
        """Updating onto a weight a parallel edge already has should fail."""
        store.add_node("A")
        store.add_node("B")
        store.add_edge("A", "B", 3)
        store.add_edge("A", "B", 5)
        with pytest.raises(GraphError) as excinfo:
            store.update_edge_weight(0, 5)
        assert _kind(excinfo) is ErrorKind.DUPLICATE_EDGE
        assert store.edges == (Edge("A", "B", 3), Edge("A", "B", 5))

    def test_update_weight_same_value_allowed(self, diamond_store):
        """Re-setting an edge to its current weight is not a duplicate."""
        assert diamond_store.update_edge_weight(0, 1) == Edge("A", "B", 1)

    def test_update_weight_noop_when_unweighted(self, diamond_store):
        """Weight edits should be ignored in unweighted mode."""
        diamond_store.set_weighted(False)
        diamond_store.update_edge_weight(0, 8)
        assert diamond_store.edges[0].weight == 1


class TestModes:
    """Test directed/weighted flag handling."""

    def test_defaults(self, store):
        """A fresh store should be directed and weighted."""
        assert store.directed is True
        assert store.weighted is True

    def test_weighted_off_clamps_irreversibly(self, store):
        """Turning weighted off should clamp weights; turning it on should not restore them."""
        store.add_node("A")
        store.add_node("B")
        store.add_edge("A", "B", 7)
        store.set_weighted(False)
        assert store.edges[0].weight == 1
        store.set_weighted(True)
        assert store.edges[0].weight == 1

    def test_weighted_off_merges_collapsed_parallel_edges(self, store):
        """Parallel edges that clamp to the same triple should be merged into one."""
        for label in "ABC":
            store.add_node(label)
        store.add_edge("A", "B", 2)
        store.add_edge("B", "C", 5)
        store.add_edge("A", "B", 3)
        store.set_weighted(False)

        assert store.edges == (Edge("A", "B", 1), Edge("B", "C", 1))
        keys = [edge.key() for edge in store.edges]
        assert len(keys) == len(set(keys))
        assert topological_sort(store).initial_indegree == {"A": 0, "B": 1, "C": 1}

    def test_directed_toggle_keeps_edges(self, diamond_store):
        """Toggling direction should not alter stored edges."""
        before = diamond_store.edges
        diamond_store.set_directed(False)
        assert diamond_store.edges == before

    def test_reset_clears_everything(self, diamond_store):
        """Reset should remove all nodes and edges."""
        diamond_store.reset()
        assert diamond_store.nodes == ()
        assert diamond_store.edges == ()


class TestSnapshot:
    """Test read-consistent snapshots."""

    def test_snapshot_is_detached(self, diamond_store):
        """Later mutations should not affect an existing snapshot."""
        snap = diamond_store.snapshot()
        diamond_store.add_node("E")
        diamond_store.remove_edge(0)
        assert snap.nodes == ("A", "B", "C", "D")
        assert len(snap.edges) == 4
        assert not snap.has_node("E")

    def test_describe_edge(self, diamond_store):
        """Edge listing should reflect the current modes."""
        diamond_store.update_edge_weight(0, 4)
        assert diamond_store.describe_edge(0) == "A → B (w=4)"
        diamond_store.set_directed(False)
        diamond_store.set_weighted(False)
        assert diamond_store.describe_edge(0) == "A — B"

    def test_stats(self, diamond_store):
        assert diamond_store.stats() == {
            "nodes": 4,
            "edges": 4,
            "directed": True,
            "weighted": True,
        }
