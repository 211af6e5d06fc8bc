"""Unit tests for Dijkstra and Bellman-Ford shortest paths.

Tests cover:
- Known-answer examples for both algorithms
- Unreachable vertices and the INFINITY sentinel
- Negative weights and negative-cycle detection
- Invalid source vertices
- Agreement between the two algorithms on non-negative graphs
"""

import math

import pytest

from graph_algorithms.algorithms.shortest_paths import INFINITY, bellman_ford, dijkstra
from graph_algorithms.errors import (
    InvalidVertexIndexError,
    NegativeEdgeWeightError,
    NegativeWeightCycleError,
)
from graph_algorithms.graph.model import Graph

DIJKSTRA_EDGES = [(0, 1, 10), (0, 2, 5), (1, 3, 1), (2, 1, 3), (2, 3, 8), (2, 4, 2), (3, 4, 4)]
BELLMAN_FORD_EDGES = [
    (0, 1, -1),
    (0, 2, 4),
    (1, 2, 3),
    (1, 3, 2),
    (1, 4, 2),
    (3, 2, 5),
    (3, 1, 1),
    (4, 3, -3),
]


@pytest.fixture
def undirected_weighted_graph() -> Graph:
    """Five-vertex undirected graph with non-negative weights."""
    return Graph.from_edges(5, DIJKSTRA_EDGES, undirected=True)


@pytest.fixture
def negative_weight_graph() -> Graph:
    """Five-vertex directed graph with negative weights but no negative cycle."""
    return Graph.from_edges(5, BELLMAN_FORD_EDGES)


class TestDijkstra:
    """Test Dijkstra's algorithm."""

    def test_known_distances(self, undirected_weighted_graph):
        """Test the reference example."""
        assert dijkstra(undirected_weighted_graph, 0) == [0, 8, 5, 9, 7]

    def test_single_vertex(self):
        """Test a graph with one vertex and no edges."""
        assert dijkstra(Graph(1), 0) == [0]

    def test_disconnected(self):
        """Test that unreachable vertices keep the INFINITY sentinel."""
        graph = Graph.from_edges(5, [(0, 1, 10), (0, 2, 5), (3, 4, 4)], undirected=True)

        assert dijkstra(graph, 0) == [0, 10, 5, INFINITY, INFINITY]

    def test_infinity_is_not_finite(self):
        """Test that the sentinel is distinguishable from any real distance."""
        assert math.isinf(INFINITY)

    def test_directed_edges_respected(self):
        """Test that a directed edge is not traversed backwards."""
        graph = Graph.from_edges(3, [(0, 1, 1), (2, 1, 1)])

        assert dijkstra(graph, 1) == [INFINITY, 0, INFINITY]

    def test_stale_frontier_entries_skipped(self):
        """Test a vertex first discovered by a long edge, then improved."""
        graph = Graph.from_edges(4, [(0, 3, 100), (0, 1, 1), (1, 2, 1), (2, 3, 1)])

        assert dijkstra(graph, 0) == [0, 1, 2, 3]

    def test_parallel_edges_use_cheapest(self):
        """Test that the cheaper of two parallel edges wins."""
        graph = Graph.from_edges(2, [(0, 1, 9), (0, 1, 2)])

        assert dijkstra(graph, 0) == [0, 2]

    def test_zero_weight_edges(self):
        """Test that zero-weight edges are relaxed."""
        graph = Graph.from_edges(3, [(0, 1, 0), (1, 2, 0)])

        assert dijkstra(graph, 0) == [0, 0, 0]

    def test_source_other_than_zero(self, undirected_weighted_graph):
        """Test distances measured from a different source."""
        assert dijkstra(undirected_weighted_graph, 4) == [7, 5, 2, 4, 0]

    @pytest.mark.parametrize("source", [5, 6, -1])
    def test_invalid_source(self, undirected_weighted_graph, source):
        """Test that an out-of-range source raises InvalidVertexIndexError."""
        with pytest.raises(InvalidVertexIndexError):
            dijkstra(undirected_weighted_graph, source)

    def test_empty_graph(self):
        """Test that any source on an empty graph is invalid."""
        with pytest.raises(InvalidVertexIndexError):
            dijkstra(Graph(0), 0)

    def test_negative_weight_not_rejected_by_default(self, negative_weight_graph):
        """Test that negative weights are not rejected unless asked."""
        distances = dijkstra(negative_weight_graph, 0)

        assert len(distances) == negative_weight_graph.vertex_count

    def test_negative_weight_rejected_when_strict(self, negative_weight_graph):
        """Test that strict mode raises NegativeEdgeWeightError."""
        with pytest.raises(NegativeEdgeWeightError) as exc_info:
            dijkstra(negative_weight_graph, 0, reject_negative_weights=True)

        assert exc_info.value.edge == (0, 1, -1)

    def test_strict_mode_accepts_non_negative(self, undirected_weighted_graph):
        """Test that strict mode does not change results on valid input."""
        assert dijkstra(undirected_weighted_graph, 0, reject_negative_weights=True) == [
            0,
            8,
            5,
            9,
            7,
        ]

    def test_does_not_mutate_graph(self, undirected_weighted_graph):
        """Test that the graph's edges are unchanged after a run."""
        before = undirected_weighted_graph.edges

        dijkstra(undirected_weighted_graph, 0)

        assert undirected_weighted_graph.edges == before


class TestBellmanFord:
    """Test the Bellman-Ford algorithm."""

    def test_negative_weights(self, negative_weight_graph):
        """Test the reference example with negative weights."""
        assert bellman_ford(negative_weight_graph, 0) == [0, -1, 2, -2, 1]

    def test_non_negative_weights(self):
        """Test a directed graph with only positive weights."""
        graph = Graph.from_edges(
            5,
            [(0, 1, 5), (0, 2, 3), (1, 2, 2), (1, 3, 6), (2, 3, 7), (3, 4, 1)],
        )

        assert bellman_ford(graph, 0) == [0, 5, 3, 10, 11]

    def test_negative_cycle_detected(self):
        """Test that a reachable cycle of total weight -2 is reported."""
        graph = Graph.from_edges(3, [(0, 1, 1), (1, 2, -5), (2, 0, 2)])

        with pytest.raises(NegativeWeightCycleError, match="Negative weight cycle"):
            bellman_ford(graph, 0)

    def test_negative_cycle_reachable_from_other_source(self):
        """Test detection when the source only leads into the cycle."""
        graph = Graph.from_edges(4, [(3, 0, 7), (0, 1, 1), (1, 2, -5), (2, 0, 2)])

        with pytest.raises(NegativeWeightCycleError) as exc_info:
            bellman_ford(graph, 3)

        assert exc_info.value.edge in {(0, 1, 1), (1, 2, -5), (2, 0, 2)}

    def test_negative_self_loop_is_a_cycle(self):
        """Test that a reachable negative self-loop is a negative cycle."""
        graph = Graph.from_edges(2, [(0, 1, 1), (1, 1, -1)])

        with pytest.raises(NegativeWeightCycleError):
            bellman_ford(graph, 0)

    def test_unreachable_negative_cycle_ignored(self):
        """Test that a negative cycle the source cannot reach is not an error."""
        graph = Graph.from_edges(4, [(0, 1, 2), (2, 3, -4), (3, 2, 1)])

        assert bellman_ford(graph, 0) == [0, 2, INFINITY, INFINITY]

    def test_zero_weight_cycle_is_not_negative(self):
        """Test that a cycle of total weight zero is allowed."""
        graph = Graph.from_edges(3, [(0, 1, 3), (1, 2, -1), (2, 1, 1)])

        assert bellman_ford(graph, 0) == [0, 3, 2]

    def test_unreached_vertices(self):
        """Test that unreached vertices keep the INFINITY sentinel."""
        graph = Graph.from_edges(3, [(1, 2, -3)])

        assert bellman_ford(graph, 0) == [0, INFINITY, INFINITY]

    def test_edge_order_does_not_change_result(self):
        """Test a chain inserted back to front, which needs every pass."""
        edges = [(3, 4, -1), (2, 3, -1), (1, 2, -1), (0, 1, -1)]
        graph = Graph.from_edges(5, edges)

        assert bellman_ford(graph, 0) == [0, -1, -2, -3, -4]

    def test_single_vertex(self):
        """Test a graph with one vertex and no edges."""
        assert bellman_ford(Graph(1), 0) == [0]

    @pytest.mark.parametrize("source", [5, -1])
    def test_invalid_source(self, negative_weight_graph, source):
        """Test that an out-of-range source raises InvalidVertexIndexError."""
        with pytest.raises(InvalidVertexIndexError):
            bellman_ford(negative_weight_graph, source)

    def test_empty_graph(self):
        """Test that any source on an empty graph is invalid."""
        with pytest.raises(InvalidVertexIndexError):
            bellman_ford(Graph(0), 0)

    def test_agrees_with_dijkstra_on_non_negative_graph(self, undirected_weighted_graph):
        """Test that both algorithms give the same distances when both apply."""
        for source in range(undirected_weighted_graph.vertex_count):
            assert bellman_ford(undirected_weighted_graph, source) == dijkstra(
                undirected_weighted_graph,
                source,
            )

    def test_idempotent(self):
        """Test that identical graphs give identical results."""
        first = bellman_ford(Graph.from_edges(5, BELLMAN_FORD_EDGES), 0)
        second = bellman_ford(Graph.from_edges(5, BELLMAN_FORD_EDGES), 0)

        assert first == second
