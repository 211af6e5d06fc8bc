"""Algorithms over the Graph model.

This module contains the traversals (breadth-first, depth-first), the
single-source shortest-path solvers (Dijkstra, Bellman-Ford) and Kosaraju's
strongly connected component decomposition.
"""

from graph_algorithms.algorithms.components import strongly_connected_components
from graph_algorithms.algorithms.shortest_paths import INFINITY, bellman_ford, dijkstra
from graph_algorithms.algorithms.traversal import breadth_first, depth_first

__all__ = [
    "INFINITY",
    "bellman_ford",
    "breadth_first",
    "depth_first",
    "dijkstra",
    "strongly_connected_components",
]
