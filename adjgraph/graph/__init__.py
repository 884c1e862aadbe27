"""Graph module with an undirected weighted graph and traversal algorithms.

This module provides the Graph container together with depth-first cycle
detection and breadth-first path existence.
"""

from adjgraph.graph.algorithms import has_cycle, has_path
from adjgraph.graph.weighted_graph import NO_EDGE, Graph, InvalidArgumentError

__all__ = ["NO_EDGE", "Graph", "InvalidArgumentError", "has_cycle", "has_path"]
