"""Demonstration of building a graph and running traversals.

This example shows how to use the Graph container together with cycle
detection and path existence, with structured logging enabled so every edge
change and search result is visible.
"""

import sys
from pathlib import Path

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from adjgraph.config import CycleStrategy, PathMode, get_config
from adjgraph.graph import Graph, InvalidArgumentError, has_cycle, has_path
from adjgraph.log_config import (
    bind_correlation_id,
    configure_logging_from_config,
    get_logger,
    unbind_correlation_id,
)


def build_network() -> Graph:
    """Build a small network of two components."""
    graph = Graph(6)
    graph.add(0, 1, 4)
    graph.add(1, 2, 3)
    graph.add(3, 4, 1)
    graph.add(4, 5, 2)
    return graph


def main() -> None:
    """Run the demonstration."""
    config = get_config()
    configure_logging_from_config(config.logging)
    logger = get_logger(__name__)

    for warning in config.validate_config():
        logger.warning("configuration_warning", message=warning)

    bind_correlation_id("graph-demo")
    try:
        graph = build_network()
        logger.info("graph_built", graph=str(graph), **graph.get_stats())

        logger.info("cycle_check", has_cycle=has_cycle(graph, config.traversal.cycle_strategy))
        graph.add(5, 3, 6)
        logger.info(
            "cycle_check",
            has_cycle=has_cycle(graph, CycleStrategy.RECURSIVE),
            closing_edge=(5, 3),
        )

        for source, target in ((0, 2), (0, 5), (3, 3)):
            logger.info(
                "path_check",
                source=source,
                target=target,
                canonical=has_path(graph, source, target, PathMode.CANONICAL),
                legacy=has_path(graph, source, target, PathMode.LEGACY),
            )

        try:
            graph.degree(10)
        except InvalidArgumentError as e:
            logger.warning("invalid_vertex_rejected", error=e.message)
    finally:
        unbind_correlation_id()


if __name__ == "__main__":
    main()
