"""Single entry point that runs one algorithm and reports a typed outcome.

The algorithms themselves raise exceptions. This module turns those into an
AlgorithmResult whose outcome tells the caller which kind of failure happened,
so it can reject bad input and report an unsolvable query differently.
"""

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from graph_algorithms.algorithms import (
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
from graph_algorithms.graph.model import Graph

logger = structlog.get_logger(__name__)


class Algorithm(str, Enum):
    """Algorithms the engine can run."""

    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman-ford"
    SCC = "scc"

    @property
    def requires_source(self) -> bool:
        """Whether the algorithm needs a start/source vertex."""
        return self is not Algorithm.SCC


class Outcome(Enum):
    """Classification of how a run ended.

    Attributes:
        SUCCESS: The algorithm produced its result
        INVALID_VERTEX_INDEX: A vertex index was out of range
        NEGATIVE_WEIGHT_CYCLE: Bellman-Ford found a reachable negative cycle
        NEGATIVE_EDGE_WEIGHT: Strict Dijkstra refused a negative edge
    """

    SUCCESS = "success"
    INVALID_VERTEX_INDEX = "invalid_vertex_index"
    NEGATIVE_WEIGHT_CYCLE = "negative_weight_cycle"
    NEGATIVE_EDGE_WEIGHT = "negative_edge_weight"


_OUTCOMES: dict[type[GraphError], Outcome] = {
    InvalidVertexIndexError: Outcome.INVALID_VERTEX_INDEX,
    NegativeWeightCycleError: Outcome.NEGATIVE_WEIGHT_CYCLE,
    NegativeEdgeWeightError: Outcome.NEGATIVE_EDGE_WEIGHT,
}


@dataclass
class AlgorithmResult:
    """Structured result of one algorithm run.

    Attributes:
        algorithm: The algorithm that ran
        outcome: How the run ended
        value: Traversal order, distance vector or component list on success
        error: Error message on failure
        duration_seconds: Wall-clock time spent in the algorithm
    """

    algorithm: Algorithm
    outcome: Outcome
    value: list | None = None
    error: str | None = None
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        """True if the algorithm produced a result."""
        return self.outcome is Outcome.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Return the result as JSON-serializable data.

        Unreached distances (INFINITY) become None.
        """
        value = self.value
        if value is not None and self.algorithm in (Algorithm.DIJKSTRA, Algorithm.BELLMAN_FORD):
            value = [None if math.isinf(d) else d for d in value]

        return {
            "algorithm": self.algorithm.value,
            "outcome": self.outcome.value,
            "value": value,
            "error": self.error,
            "duration_seconds": self.duration_seconds,
        }


def run_algorithm(
    algorithm: Algorithm | str,
    graph: Graph,
    source: int | None = None,
    *,
    strict: bool = False,
) -> AlgorithmResult:
    """Run one algorithm on a graph and classify the outcome.

    Args:
        algorithm: Algorithm (or its name) to run
        graph: Fully built graph
        source: Start/source vertex; ignored for SCC
        strict: Make Dijkstra reject negative edge weights

    Returns:
        AlgorithmResult with the value on success or the error on failure

    Raises:
        ValueError: If the algorithm name is unknown or a required source is missing
    """
    algorithm = Algorithm(algorithm)
    if algorithm.requires_source and source is None:
        msg = f"Algorithm '{algorithm.value}' requires a source vertex"
        raise ValueError(msg)

    logger.info(
        "algorithm_started",
        algorithm=algorithm.value,
        source=source,
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
    )

    start_time = time.perf_counter()
    try:
        value = _dispatch(algorithm, graph, source, strict)
    except GraphError as e:
        duration = time.perf_counter() - start_time
        outcome = _OUTCOMES[type(e)]
        logger.error(
            "algorithm_failed",
            algorithm=algorithm.value,
            outcome=outcome.value,
            error=e.message,
        )
        return AlgorithmResult(
            algorithm=algorithm,
            outcome=outcome,
            error=e.message,
            duration_seconds=duration,
        )

    duration = time.perf_counter() - start_time
    logger.info(
        "algorithm_completed",
        algorithm=algorithm.value,
        duration_seconds=round(duration, 6),
    )
    return AlgorithmResult(
        algorithm=algorithm,
        outcome=Outcome.SUCCESS,
        value=value,
        duration_seconds=duration,
    )


def _dispatch(algorithm: Algorithm, graph: Graph, source: int | None, strict: bool) -> list:
    if algorithm is Algorithm.BFS:
        return breadth_first(graph, source)
    if algorithm is Algorithm.DFS:
        return depth_first(graph, source)
    if algorithm is Algorithm.DIJKSTRA:
        return dijkstra(graph, source, reject_negative_weights=strict)
    if algorithm is Algorithm.BELLMAN_FORD:
        return bellman_ford(graph, source)
    return strongly_connected_components(graph)


__all__ = ["Algorithm", "AlgorithmResult", "Outcome", "run_algorithm"]
