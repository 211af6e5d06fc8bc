"""Graph algorithms engine.

Build a Graph, then run one of the algorithms on it:

    >>> from graph_algorithms import Graph, dijkstra
    >>> graph = Graph.from_edges(3, [(0, 1, 2), (1, 2, 3)], undirected=True)
    >>> dijkstra(graph, 0)
    [0, 2, 5]
"""

from graph_algorithms.algorithms import (
    INFINITY,
    bellman_ford,
    breadth_first,
    depth_first,
    dijkstra,
    strongly_connected_components,
)
from graph_algorithms.errors import (
    GraphError,
    InvalidVertexIndexError,
    NegativeEdgeWeightError,
    NegativeWeightCycleError,
)
from graph_algorithms.graph import Edge, Graph, GraphValidator, ValidationReport
from graph_algorithms.runner import Algorithm, AlgorithmResult, Outcome, run_algorithm

__version__ = "0.1.0"

__all__ = [
    "INFINITY",
    "Algorithm",
    "AlgorithmResult",
    "Edge",
    "Graph",
    "GraphError",
    "GraphValidator",
    "InvalidVertexIndexError",
    "NegativeEdgeWeightError",
    "NegativeWeightCycleError",
    "Outcome",
    "ValidationReport",
    "bellman_ford",
    "breadth_first",
    "depth_first",
    "dijkstra",
    "run_algorithm",
    "strongly_connected_components",
]
