"""Unit tests for run_algorithm and AlgorithmResult."""

import json

import pytest

from graph_algorithms.algorithms.shortest_paths import INFINITY
from graph_algorithms.graph.model import Graph
from graph_algorithms.runner import Algorithm, AlgorithmResult, Outcome, run_algorithm


@pytest.fixture
def small_graph() -> Graph:
    return Graph.from_edges(4, [(0, 1, 2), (1, 2, 3), (2, 0, 1)])


class TestAlgorithm:
    """Test the Algorithm enum."""

    def test_values(self):
        """Test that algorithm names parse from their string values."""
        assert Algorithm("bellman-ford") is Algorithm.BELLMAN_FORD
        assert Algorithm("scc") is Algorithm.SCC

    def test_requires_source(self):
        """Test that only SCC runs without a source."""
        assert not Algorithm.SCC.requires_source
        assert all(a.requires_source for a in Algorithm if a is not Algorithm.SCC)


class TestRunAlgorithm:
    """Test dispatch and outcome classification."""

    @pytest.mark.parametrize(
        ("algorithm", "expected"),
        [
            ("bfs", [0, 1, 2]),
            ("dfs", [0, 1, 2]),
            ("dijkstra", [0, 2, 5, INFINITY]),
            ("bellman-ford", [0, 2, 5, INFINITY]),
            ("scc", [[0, 1, 2], [3]]),
        ],
    )
    def test_success(self, small_graph, algorithm, expected):
        """Test every algorithm through the runner."""
        result = run_algorithm(algorithm, small_graph, 0)

        assert result.ok
        assert result.outcome is Outcome.SUCCESS
        assert result.value == expected
        assert result.error is None
        assert result.duration_seconds >= 0

    def test_accepts_enum(self, small_graph):
        """Test that an Algorithm member works as well as its name."""
        assert run_algorithm(Algorithm.BFS, small_graph, 1).value == [1, 2, 0]

    def test_scc_ignores_source(self, small_graph):
        """Test that SCC runs without a source."""
        assert run_algorithm("scc", small_graph).ok

    def test_invalid_vertex_index(self, small_graph):
        """Test that an invalid source becomes its own outcome."""
        result = run_algorithm("bfs", small_graph, 9)

        assert not result.ok
        assert result.outcome is Outcome.INVALID_VERTEX_INDEX
        assert result.value is None
        assert "out of range" in result.error

    def test_empty_graph_query(self):
        """Test that querying a graph with no vertices is an invalid index."""
        result = run_algorithm("dijkstra", Graph(0), 0)

        assert result.outcome is Outcome.INVALID_VERTEX_INDEX

    def test_negative_weight_cycle(self):
        """Test that a negative cycle becomes its own outcome."""
        graph = Graph.from_edges(3, [(0, 1, 1), (1, 2, -5), (2, 0, 2)])

        result = run_algorithm("bellman-ford", graph, 0)

        assert result.outcome is Outcome.NEGATIVE_WEIGHT_CYCLE
        assert result.value is None

    def test_negative_edge_weight_when_strict(self):
        """Test that strict Dijkstra reports negative edges as their own outcome."""
        graph = Graph.from_edges(2, [(0, 1, -1)])

        strict = run_algorithm("dijkstra", graph, 0, strict=True)
        lenient = run_algorithm("dijkstra", graph, 0)

        assert strict.outcome is Outcome.NEGATIVE_EDGE_WEIGHT
        assert lenient.ok

    def test_missing_source(self, small_graph):
        """Test that omitting a required source is a caller error."""
        with pytest.raises(ValueError, match="requires a source"):
            run_algorithm("dijkstra", small_graph)

    def test_unknown_algorithm(self, small_graph):
        """Test that an unknown algorithm name raises ValueError."""
        with pytest.raises(ValueError):
            run_algorithm("a-star", small_graph, 0)


class TestAlgorithmResult:
    """Test result serialization."""

    def test_to_dict_replaces_infinity(self):
        """Test that unreached distances serialize as None."""
        result = AlgorithmResult(
            algorithm=Algorithm.DIJKSTRA,
            outcome=Outcome.SUCCESS,
            value=[0, 3, INFINITY],
        )

        data = result.to_dict()

        assert data["value"] == [0, 3, None]
        assert data["algorithm"] == "dijkstra"
        assert data["outcome"] == "success"
        json.dumps(data)

    def test_to_dict_leaves_traversals_alone(self):
        """Test that traversal orders serialize unchanged."""
        result = AlgorithmResult(algorithm=Algorithm.BFS, outcome=Outcome.SUCCESS, value=[2, 0])

        assert result.to_dict()["value"] == [2, 0]

    def test_identical_runs_serialize_identically(self):
        """Test that the same graph built twice gives byte-identical output."""
        edges = [(0, 1, 4), (1, 2, -1), (0, 2, 5)]

        outputs = []
        for _ in range(2):
            result = run_algorithm("bellman-ford", Graph.from_edges(3, edges), 0)
            data = result.to_dict()
            data.pop("duration_seconds")
            outputs.append(json.dumps(data, sort_keys=True))

        assert outputs[0] == outputs[1]
