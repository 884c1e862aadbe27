"""In-memory undirected weighted graphs with cycle and path queries."""

from adjgraph.config import CycleStrategy, PathMode
from adjgraph.graph import NO_EDGE, Graph, InvalidArgumentError, has_cycle, has_path

__all__ = [
    "NO_EDGE",
    "CycleStrategy",
    "Graph",
    "InvalidArgumentError",
    "PathMode",
    "has_cycle",
    "has_path",
]
