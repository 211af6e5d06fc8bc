"""Graph module for the in-memory graph model and its inspection.

This module provides the Graph class used by every algorithm, together with
a validator that reports structural findings and renders diagrams.
"""

from graph_algorithms.graph.model import Edge, Graph
from graph_algorithms.graph.validator import GraphValidator, ValidationReport

__all__ = ["Edge", "Graph", "GraphValidator", "ValidationReport"]
