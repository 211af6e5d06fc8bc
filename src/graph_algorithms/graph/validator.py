"""Graph inspection with structured reporting.

This module provides structural checks for a built graph (negative weights,
self-loops, parallel edges, isolated vertices), per-algorithm precondition
checks, and Mermaid / Graphviz text rendering.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from graph_algorithms.graph.model import Edge, Graph

logger = structlog.get_logger(__name__)

DIJKSTRA = "dijkstra"


@dataclass
class ValidationReport:
    """Report containing inspection results for a graph.

    Attributes:
        is_valid: Whether the graph passed all precondition checks
        errors: List of error messages (the requested algorithm cannot be trusted)
        warnings: List of warning messages (legal but noteworthy structure)
        negative_edges: Edges with a negative weight
        self_loops: Edges whose source equals their target
        parallel_edges: (source, target) pairs inserted more than once
        isolated_vertices: Vertices with no incoming or outgoing edge
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    negative_edges: list["Edge"] = field(default_factory=list)
    self_loops: list["Edge"] = field(default_factory=list)
    parallel_edges: list[tuple[int, int]] = field(default_factory=list)
    isolated_vertices: list[int] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(message)
        self.is_valid = False
        logger.error("validation_error", message=message)

    def add_warning(self, message: str) -> None:
        """Add a warning message without failing validation."""
        self.warnings.append(message)
        logger.warning("validation_warning", message=message)

    def summary(self) -> str:
        """Generate a human-readable summary of the validation report."""
        lines = [
            f"Validation Status: {'PASS' if self.is_valid else 'FAIL'}",
            f"Errors: {len(self.errors)}",
            f"Warnings: {len(self.warnings)}",
            f"Negative Edges: {len(self.negative_edges)}",
            f"Self-Loops: {len(self.self_loops)}",
            f"Parallel Edges: {len(self.parallel_edges)}",
            f"Isolated Vertices: {len(self.isolated_vertices)}",
        ]

        if self.errors:
            lines.append("\nErrors:")
            lines.extend(f"  - {error}" for error in self.errors)

        if self.warnings:
            lines.append("\nWarnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Return the report as plain JSON-serializable data."""
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "negative_edges": [list(edge) for edge in self.negative_edges],
            "self_loops": [list(edge) for edge in self.self_loops],
            "parallel_edges": [list(pair) for pair in self.parallel_edges],
            "isolated_vertices": list(self.isolated_vertices),
        }


class GraphValidator:
    """Inspector for built graphs with detailed reporting.

    Structural findings are always warnings, since self-loops, parallel edges
    and negative weights are all legal. Only an algorithm precondition that
    does not hold is reported as an error.
    """

    def validate(self, graph: "Graph", algorithm: str | None = None) -> ValidationReport:
        """Inspect a graph and generate a report.

        Args:
            graph: The Graph to inspect
            algorithm: Optional algorithm name whose preconditions to check

        Returns:
            ValidationReport containing all findings
        """
        logger.info(
            "starting_graph_validation",
            vertex_count=graph.vertex_count,
            edge_count=graph.edge_count,
            algorithm=algorithm,
        )

        report = ValidationReport()
        edges = graph.edges

        report.negative_edges = [edge for edge in edges if edge.weight < 0]
        if report.negative_edges:
            report.add_warning(f"Graph has {len(report.negative_edges)} negative-weight edge(s)")

        report.self_loops = [edge for edge in edges if edge.source == edge.target]
        if report.self_loops:
            loops = ", ".join(str(edge.source) for edge in report.self_loops)
            report.add_warning(f"Self-loops on vertices: {loops}")

        report.parallel_edges = self._find_parallel_edges(edges)
        if report.parallel_edges:
            pairs = ", ".join(f"{u}->{v}" for u, v in report.parallel_edges)
            report.add_warning(f"Parallel edges: {pairs}")

        report.isolated_vertices = self._find_isolated_vertices(graph)
        if report.isolated_vertices:
            isolated = ", ".join(str(v) for v in report.isolated_vertices)
            report.add_warning(f"Isolated vertices: {isolated}")

        if algorithm == DIJKSTRA and report.negative_edges:
            edge = report.negative_edges[0]
            report.add_error(
                f"Dijkstra requires non-negative weights; edge {edge.source} -> "
                f"{edge.target} has weight {edge.weight}",
            )

        logger.info(
            "graph_validation_complete",
            is_valid=report.is_valid,
            error_count=len(report.errors),
            warning_count=len(report.warnings),
        )

        return report

    def _find_parallel_edges(self, edges: tuple["Edge", ...]) -> list[tuple[int, int]]:
        """Return (source, target) pairs that occur more than once, in first-seen order."""
        counts = Counter((edge.source, edge.target) for edge in edges)
        return [pair for pair, count in counts.items() if count > 1]

    def _find_isolated_vertices(self, graph: "Graph") -> list[int]:
        touched = set()
        for edge in graph.edges:
            touched.add(edge.source)
            touched.add(edge.target)
        return [v for v in range(graph.vertex_count) if v not in touched]

    def generate_visualization(self, graph: "Graph", output_format: str = "mermaid") -> str:
        """Generate a visual representation of the graph.

        Args:
            graph: The Graph to visualize
            output_format: Output format ('mermaid' or 'dot')

        Returns:
            String representation of the graph in the requested format

        Raises:
            ValueError: If an unsupported format is requested
        """
        output_format = output_format.lower().strip()

        if output_format == "mermaid":
            return self._generate_mermaid(graph)
        if output_format == "dot":
            return self._generate_graphviz(graph)
        error_msg = f"Unsupported format: {output_format}. Use 'mermaid' or 'dot'."
        raise ValueError(error_msg)

    def _generate_mermaid(self, graph: "Graph") -> str:
        lines = ["graph TD"]

        if graph.vertex_count == 0:
            lines.append("    Empty[Empty Graph]")
            return "\n".join(lines)

        lines.extend(f"    v{v}(({v}))" for v in range(graph.vertex_count))
        lines.extend(f"    v{u} -->|{w}| v{v}" for u, v, w in graph.edges)

        return "\n".join(lines)

    def _generate_graphviz(self, graph: "Graph") -> str:
        lines = ["digraph Graph {", "    node [shape=circle];"]

        if graph.vertex_count == 0:
            lines.append('    Empty [label="Empty Graph", shape=box];')
        else:
            lines.extend(f"    {v};" for v in range(graph.vertex_count))
            lines.extend(f'    {u} -> {v} [label="{w}"];' for u, v, w in graph.edges)

        lines.append("}")
        return "\n".join(lines)


__all__ = ["GraphValidator", "ValidationReport"]
