"""Exception types raised by the graph engine.

Every failure an algorithm can report has its own exception class so callers
can react differently to bad input (an invalid vertex index) and to an
unsolvable query (a negative-weight cycle).
"""


class GraphError(Exception):
    """Base class for all graph engine errors."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message


class InvalidVertexIndexError(GraphError, IndexError):
    """Raised when a vertex index lies outside ``[0, vertex_count)``.

    Covers edge endpoints, traversal start vertices and shortest-path sources,
    including any query against a graph with no vertices.

    Attributes:
        index: The offending vertex index
        vertex_count: Number of vertices in the graph
    """

    def __init__(self, index: int, vertex_count: int):
        """Initialize the exception for a specific index.

        Args:
            index: The offending vertex index
            vertex_count: Number of vertices in the graph
        """
        if vertex_count == 0:
            message = f"Vertex {index} does not exist: graph has no vertices"
        else:
            message = f"Vertex {index} is out of range [0, {vertex_count})"
        super().__init__(message)
        self.index = index
        self.vertex_count = vertex_count


class NegativeWeightCycleError(GraphError):
    """Raised when Bellman-Ford finds a negative cycle reachable from the source.

    Attributes:
        edge: The (source, target, weight) edge that could still be relaxed
    """

    def __init__(self, edge: tuple[int, int, int]):
        """Initialize the exception with the edge that still relaxes.

        Args:
            edge: The (source, target, weight) edge that could still be relaxed
        """
        u, v, w = edge
        super().__init__(
            f"Negative weight cycle detected: edge {u} -> {v} (weight {w}) still relaxes",
        )
        self.edge = edge


class NegativeEdgeWeightError(GraphError, ValueError):
    """Raised by strict Dijkstra when the graph holds a negative edge weight."""

    def __init__(self, edge: tuple[int, int, int]):
        """Initialize the exception with the negative edge.

        Args:
            edge: The (source, target, weight) edge with a negative weight
        """
        u, v, w = edge
        super().__init__(f"Dijkstra requires non-negative weights: edge {u} -> {v} has weight {w}")
        self.edge = edge


__all__ = [
    "GraphError",
    "InvalidVertexIndexError",
    "NegativeEdgeWeightError",
    "NegativeWeightCycleError",
]
