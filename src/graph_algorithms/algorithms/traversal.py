"""Breadth-first and depth-first traversal.

Both traversals walk the adjacency list in insertion order, so for a fixed
sequence of add_edge calls the visitation order is fully deterministic.
"""

from collections import deque

import structlog

from graph_algorithms.graph.model import Graph

logger = structlog.get_logger(__name__)


def breadth_first(graph: Graph, start: int) -> list[int]:
    """Visit every vertex reachable from ``start`` in level order.

    Vertices are marked visited when they are enqueued, so each one enters
    the queue at most once.

    Args:
        graph: Graph to traverse
        start: Vertex to start from

    Returns:
        Vertices in the order they were dequeued

    Raises:
        InvalidVertexIndexError: If start is not a vertex of graph

    Example:
        >>> graph = Graph.from_edges(4, [(0, 1), (0, 2), (1, 3)], undirected=True)
        >>> breadth_first(graph, 0)
        [0, 1, 2, 3]
    """
    graph.validate_vertex(start)

    visited = [False] * graph.vertex_count
    visited[start] = True
    queue = deque([start])
    order: list[int] = []

    while queue:
        u = queue.popleft()
        order.append(u)
        for v, _ in graph.neighbors(u):
            if not visited[v]:
                visited[v] = True
                queue.append(v)

    logger.debug("breadth_first_completed", start=start, visited=len(order))
    return order


def depth_first(graph: Graph, start: int) -> list[int]:
    """Visit every vertex reachable from ``start`` in depth-first preorder.

    Equivalent to the recursive formulation (record the vertex, then recurse
    into each unvisited neighbor in adjacency order) but driven by an explicit
    stack, so long paths cannot exhaust the interpreter's call stack.

    Raises:
        InvalidVertexIndexError: If start is not a vertex of graph
    """
    graph.validate_vertex(start)

    visited = [False] * graph.vertex_count
    order = walk_depth_first(graph, start, visited)

    logger.debug("depth_first_completed", start=start, visited=len(order))
    return order


def walk_depth_first(
    graph: Graph,
    start: int,
    visited: list[bool],
    finished: deque[int] | None = None,
) -> list[int]:
    """Run one depth-first walk from an unvisited vertex.

    Shared by depth_first and the two passes of Kosaraju's algorithm.

    Args:
        graph: Graph to walk
        start: Unvisited vertex to start from
        visited: Visit marks, updated in place
        finished: If given, every vertex is pushed onto its front once all
            of its descendants are done

    Returns:
        Vertices in preorder
    """
    visited[start] = True
    preorder = [start]
    # Each frame is (vertex, its neighbors, index of the next neighbor to look at)
    stack = [(start, graph.neighbors(start), 0)]

    while stack:
        u, neighbors, next_index = stack[-1]

        while next_index < len(neighbors) and visited[neighbors[next_index][0]]:
            next_index += 1

        if next_index == len(neighbors):
            stack.pop()
            if finished is not None:
                finished.appendleft(u)
            continue

        v = neighbors[next_index][0]
        stack[-1] = (u, neighbors, next_index + 1)
        visited[v] = True
        preorder.append(v)
        stack.append((v, graph.neighbors(v), 0))

    return preorder


__all__ = ["breadth_first", "depth_first", "walk_depth_first"]
