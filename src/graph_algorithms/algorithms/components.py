"""Strongly connected components via Kosaraju's two-pass algorithm."""

from collections import deque

import structlog

from graph_algorithms.algorithms.traversal import walk_depth_first
from graph_algorithms.graph.model import Graph

logger = structlog.get_logger(__name__)


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Split the graph into strongly connected components.

    The first pass walks the reversed graph from every unvisited vertex in
    ascending order, pushing each vertex onto the front of the finish order
    once its walk completes. The second pass takes vertices from the front of
    that order and walks the original graph from each unvisited one; every
    such walk yields one component.

    Every vertex belongs to exactly one component, so isolated vertices come
    back as singletons. Both passes use explicit stacks.

    Args:
        graph: Directed graph to decompose

    Returns:
        Components as ascending vertex lists, sorted by their smallest vertex

    Example:
        >>> graph = Graph.from_adjacency([[1], [0], [0]])
        >>> strongly_connected_components(graph)
        [[0, 1], [2]]
    """
    reverse = graph.reversed()

    visited = [False] * graph.vertex_count
    finish_order: deque[int] = deque()
    for u in range(graph.vertex_count):
        if not visited[u]:
            walk_depth_first(reverse, u, visited, finished=finish_order)

    visited = [False] * graph.vertex_count
    components: list[list[int]] = []
    while finish_order:
        u = finish_order.popleft()
        if not visited[u]:
            components.append(sorted(walk_depth_first(graph, u, visited)))

    components.sort()

    logger.debug(
        "strongly_connected_components_completed",
        vertex_count=graph.vertex_count,
        component_count=len(components),
    )
    return components


__all__ = ["strongly_connected_components"]
