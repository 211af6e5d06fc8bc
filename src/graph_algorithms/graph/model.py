"""In-memory graph model shared by every algorithm.

This module provides the Graph class, which stores a fixed number of integer
vertices together with their edges in two representations kept in step: an
edge list (used by Bellman-Ford) and an adjacency list (used by traversals,
Dijkstra and Kosaraju). Both preserve insertion order, which is what makes
traversal order deterministic.
"""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

import structlog

from graph_algorithms.errors import InvalidVertexIndexError

logger = structlog.get_logger(__name__)

DEFAULT_WEIGHT = 1


class Edge(NamedTuple):
    """A directed, weighted edge."""

    source: int
    target: int
    weight: int = DEFAULT_WEIGHT


class Graph:
    """Directed multigraph over the vertices ``0 .. vertex_count - 1``.

    Undirected graphs are expressed by inserting each edge in both directions
    (see add_undirected_edge). Parallel edges and self-loops are kept as
    inserted.

    Thread-safety:
        This class is NOT thread-safe. A graph is meant to be fully built
        before it is handed to a single algorithm call.

    Example:
        >>> graph = Graph(3)
        >>> graph.add_edge(0, 1, 4)
        >>> graph.add_undirected_edge(1, 2)
        >>> graph.neighbors(1)
        ((2, 1),)
    """

    def __init__(self, vertex_count: int):
        """Allocate empty storage for ``vertex_count`` vertices.

        Args:
            vertex_count: Number of vertices; zero is allowed

        Raises:
            ValueError: If vertex_count is negative
        """
        if vertex_count < 0:
            msg = f"vertex_count must be non-negative, got {vertex_count}"
            raise ValueError(msg)

        self._vertex_count = vertex_count
        self._edges: list[Edge] = []
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Sequence[int]],
        undirected: bool = False,
    ) -> "Graph":
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` sequences.

        Args:
            vertex_count: Number of vertices
            edges: Edge pairs or triples, inserted in the given order
            undirected: If True, insert every edge in both directions

        Returns:
            The populated graph

        Raises:
            InvalidVertexIndexError: If any endpoint is out of range
        """
        graph = cls(vertex_count)
        insert = graph.add_undirected_edge if undirected else graph.add_edge
        for edge in edges:
            insert(*edge)

        logger.debug(
            "graph_built_from_edges",
            vertex_count=vertex_count,
            edge_count=graph.edge_count,
            undirected=undirected,
        )
        return graph

    @classmethod
    def from_adjacency(cls, adjacency: Sequence[Iterable[int]]) -> "Graph":
        """Build an unweighted directed graph from per-vertex neighbor lists.

        Vertex ``i`` gets an edge to every entry of ``adjacency[i]`` in order,
        each with the default weight.

        Example:
            >>> Graph.from_adjacency([[1], [0, 2], []]).edge_count
            3
        """
        graph = cls(len(adjacency))
        for u, targets in enumerate(adjacency):
            for v in targets:
                graph.add_edge(u, v)
        return graph

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """Number of directed edges, counting parallel edges separately."""
        return len(self._edges)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """All edges in insertion order."""
        return tuple(self._edges)

    def validate_vertex(self, index: int) -> None:
        """Check that ``index`` names a vertex of this graph.

        Raises:
            InvalidVertexIndexError: If index is outside [0, vertex_count)
        """
        if not 0 <= index < self._vertex_count:
            raise InvalidVertexIndexError(index, self._vertex_count)

    def add_edge(self, u: int, v: int, weight: int = DEFAULT_WEIGHT) -> None:
        """Append the directed edge ``u -> v`` to both representations.

        Args:
            u: Source vertex
            v: Target vertex
            weight: Edge weight, may be negative

        Raises:
            InvalidVertexIndexError: If u or v is out of range
        """
        self.validate_vertex(u)
        self.validate_vertex(v)

        self._edges.append(Edge(u, v, weight))
        self._adjacency[u].append((v, weight))

    def add_undirected_edge(self, u: int, v: int, weight: int = DEFAULT_WEIGHT) -> None:
        """Insert ``u -> v`` and then ``v -> u`` with the same weight."""
        # Validate both endpoints first so a failure leaves the graph untouched
        self.validate_vertex(u)
        self.validate_vertex(v)

        self.add_edge(u, v, weight)
        self.add_edge(v, u, weight)

    def neighbors(self, u: int) -> tuple[tuple[int, int], ...]:
        """Return the ``(neighbor, weight)`` pairs of ``u`` in insertion order.

        Raises:
            InvalidVertexIndexError: If u is out of range
        """
        self.validate_vertex(u)
        return tuple(self._adjacency[u])

    def successors(self, u: int) -> list[int]:
        """Return the neighbor vertices of ``u`` without weights."""
        self.validate_vertex(u)
        return [v for v, _ in self._adjacency[u]]

    def reversed(self) -> "Graph":
        """Return a new graph with every edge flipped.

        Reversed edges are inserted by ascending original source vertex and,
        within one source, in that vertex's adjacency order.
        """
        reverse = Graph(self._vertex_count)
        for u, entries in enumerate(self._adjacency):
            for v, weight in entries:
                reverse.add_edge(v, u, weight)
        return reverse

    def copy(self) -> "Graph":
        """Create an independent copy with the same edges in the same order."""
        return Graph.from_edges(self._vertex_count, self._edges)

    def get_stats(self) -> dict[str, int]:
        """Get statistics about the graph.

        Returns:
            Dictionary with graph statistics including:
                - vertex_count: Number of vertices
                - edge_count: Number of directed edges
                - self_loops: Number of edges whose endpoints coincide
                - negative_edges: Number of edges with a negative weight
        """
        stats = {
            "vertex_count": self._vertex_count,
            "edge_count": len(self._edges),
            "self_loops": sum(1 for edge in self._edges if edge.source == edge.target),
            "negative_edges": sum(1 for edge in self._edges if edge.weight < 0),
        }

        logger.debug("graph_stats_retrieved", **stats)

        return stats

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={len(self._edges)})"
