"""Single-source shortest paths: Dijkstra and Bellman-Ford.

Both functions return a distance vector indexed by vertex. Vertices with no
path from the source hold INFINITY. Relaxation never adds a weight to an
INFINITY distance.
"""

import heapq
import math

import structlog

from graph_algorithms.errors import NegativeEdgeWeightError, NegativeWeightCycleError
from graph_algorithms.graph.model import Graph

logger = structlog.get_logger(__name__)

# Distance of a vertex that cannot be reached from the source
INFINITY = math.inf


def dijkstra(
    graph: Graph,
    source: int,
    *,
    reject_negative_weights: bool = False,
) -> list[int | float]:
    """Compute shortest distances from ``source`` assuming non-negative weights.

    The frontier is a binary heap of (tentative distance, vertex) entries.
    A vertex is finalized the first time it is popped; later heap entries for
    it are stale and are skipped.

    Negative weights break the algorithm's correctness guarantee. They are
    not rejected unless ``reject_negative_weights`` is set; otherwise a
    warning is logged and the returned distances are unspecified.

    Args:
        graph: Graph to search
        source: Vertex to measure distances from
        reject_negative_weights: Raise instead of warning on negative weights

    Returns:
        Distance to every vertex, INFINITY for unreached vertices

    Raises:
        InvalidVertexIndexError: If source is not a vertex of graph
        NegativeEdgeWeightError: If reject_negative_weights is set and an
            edge has a negative weight

    Example:
        >>> graph = Graph.from_edges(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])
        >>> dijkstra(graph, 0)
        [0, 4, 5]
    """
    graph.validate_vertex(source)

    negative_edge = next((edge for edge in graph.edges if edge.weight < 0), None)
    if negative_edge is not None:
        if reject_negative_weights:
            logger.error("dijkstra_negative_weight_rejected", edge=tuple(negative_edge))
            raise NegativeEdgeWeightError(tuple(negative_edge))
        logger.warning(
            "dijkstra_negative_weight",
            edge=tuple(negative_edge),
            message="Negative weights make Dijkstra results unreliable; use bellman_ford",
        )

    distance: list[int | float] = [INFINITY] * graph.vertex_count
    distance[source] = 0
    finalized = [False] * graph.vertex_count
    frontier = [(0, source)]

    while frontier:
        _, u = heapq.heappop(frontier)
        if finalized[u]:
            continue
        finalized[u] = True

        for v, weight in graph.neighbors(u):
            candidate = distance[u] + weight
            if candidate < distance[v]:
                distance[v] = candidate
                heapq.heappush(frontier, (candidate, v))

    logger.debug(
        "dijkstra_completed",
        source=source,
        reached=sum(finalized),
        vertex_count=graph.vertex_count,
    )
    return distance


def bellman_ford(graph: Graph, source: int) -> list[int | float]:
    """Compute shortest distances from ``source``, allowing negative weights.

    Runs up to ``vertex_count - 1`` relaxation passes over the edge list in
    insertion order, stopping early once a pass changes nothing. A final scan
    then checks whether any edge can still be relaxed; if so, a negative
    cycle is reachable from the source and no distances are returned.

    Negative cycles that cannot be reached from the source do not affect the
    result and are not reported.

    Args:
        graph: Graph to search
        source: Vertex to measure distances from

    Returns:
        Distance to every vertex, INFINITY for unreached vertices

    Raises:
        InvalidVertexIndexError: If source is not a vertex of graph
        NegativeWeightCycleError: If a negative cycle is reachable from source

    Example:
        >>> graph = Graph.from_edges(3, [(0, 1, 4), (1, 2, -2), (0, 2, 3)])
        >>> bellman_ford(graph, 0)
        [0, 4, 2]
    """
    graph.validate_vertex(source)

    edges = graph.edges
    distance: list[int | float] = [INFINITY] * graph.vertex_count
    distance[source] = 0

    passes = 0
    for _ in range(graph.vertex_count - 1):
        passes += 1
        if not _relax_all(edges, distance):
            break

    for edge in edges:
        if _can_relax(edge.source, edge.target, edge.weight, distance):
            logger.error(
                "negative_weight_cycle_detected",
                source=source,
                edge=tuple(edge),
                passes=passes,
            )
            raise NegativeWeightCycleError(tuple(edge))

    logger.debug(
        "bellman_ford_completed",
        source=source,
        passes=passes,
        edge_count=len(edges),
    )
    return distance


def _can_relax(u: int, v: int, weight: int, distance: list[int | float]) -> bool:
    return distance[u] != INFINITY and distance[u] + weight < distance[v]


def _relax_all(edges, distance: list[int | float]) -> bool:
    """Relax every edge once, in order. Returns True if any distance changed."""
    changed = False
    for u, v, weight in edges:
        if _can_relax(u, v, weight, distance):
            distance[v] = distance[u] + weight
            changed = True
    return changed


__all__ = ["INFINITY", "bellman_ford", "dijkstra"]
