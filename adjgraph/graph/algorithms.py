"""Traversal algorithms over an undirected weighted Graph.

Cycle detection uses depth-first search and path existence uses breadth-first
search. Both functions are stateless: every call allocates its own visited
flags and stack or queue, and only reads the graph through its public API.
"""

from collections import deque

import structlog

from adjgraph.config import CycleStrategy, PathMode
from adjgraph.graph.weighted_graph import Graph, InvalidArgumentError

logger = structlog.get_logger(__name__)


def has_cycle(graph: Graph, strategy: CycleStrategy | str = CycleStrategy.ITERATIVE) -> bool:
    """Determine if any connected component of the graph has a cycle.

    A depth-first search is started from every unvisited vertex in id order.
    Reaching an already visited vertex other than the parent of the current
    vertex is a back edge and means a cycle. The edge back to the parent is
    never counted, so a single edge between two vertices is acyclic. A
    self-loop always counts as a cycle, including one on a search root.

    Args:
        graph: The graph to search
        strategy: Recursive or iterative DFS

    Returns:
        True if there exists at least one cycle in the graph, False otherwise

    Example:
        >>> graph = Graph(3)
        >>> graph.add(0, 1, 1)
        >>> graph.add(1, 2, 1)
        >>> has_cycle(graph)
        False
        >>> graph.add(2, 0, 1)
        >>> has_cycle(graph)
        True
    """
    strategy = CycleStrategy(strategy)

    search = _dfs_recursive if strategy == CycleStrategy.RECURSIVE else _dfs_iterative
    visited = [False] * graph.num_vertices()

    for start in range(graph.num_vertices()):
        if not visited[start] and search(graph, start, visited):
            logger.debug("cycle_detected", component_root=start, strategy=strategy.value)
            return True

    logger.debug("no_cycle_found", num_vertices=graph.num_vertices(), strategy=strategy.value)
    return False


def _dfs_recursive(
    graph: Graph,
    v: int,
    visited: list[bool],
    parent: int | None = None,
) -> bool:
    """Search the component of v for a back edge using recursion.

    Args:
        graph: The graph to search
        v: Vertex to visit
        visited: Visited flags shared across the whole has_cycle call
        parent: Vertex through which v was reached, None for a root

    Returns:
        True if the component has a cycle, False otherwise
    """
    visited[v] = True

    for w in graph.neighbors(v):
        if not visited[w]:
            if _dfs_recursive(graph, w, visited, v):
                return True
        elif w != parent:
            return True

    return False


def _dfs_iterative(graph: Graph, root: int, visited: list[bool]) -> bool:
    """Search the component of root for a back edge using an explicit stack.

    Each stack frame holds a vertex, its parent and an iterator over the
    neighbors not yet examined, so vertices are visited in the same order as
    the recursive search.

    Args:
        graph: The graph to search
        root: Vertex to start from
        visited: Visited flags shared across the whole has_cycle call

    Returns:
        True if the component has a cycle, False otherwise
    """
    visited[root] = True
    stack = [(root, None, iter(graph.neighbors(root)))]

    while stack:
        v, parent, pending = stack[-1]
        for w in pending:
            if not visited[w]:
                visited[w] = True
                stack.append((w, v, iter(graph.neighbors(w))))
                break
            if w != parent:
                return True
        else:
            stack.pop()

    return False


def has_path(
    graph: Graph,
    v: int,
    w: int,
    mode: PathMode | str = PathMode.CANONICAL,
) -> bool:
    """Determine if there is a path between two vertices using BFS.

    Args:
        graph: The graph to search
        v: Start vertex
        w: Target vertex
        mode: Canonical or legacy termination check

    Returns:
        True if there is a path between v and w, False otherwise

    Raises:
        InvalidArgumentError: If v or w is out of range

    Example:
        >>> graph = Graph(3)
        >>> graph.add(0, 1, 2)
        >>> has_path(graph, 0, 1)
        True
        >>> has_path(graph, 0, 2)
        False
    """
    if not graph.vertex_in_range(v) or not graph.vertex_in_range(w):
        error_msg = f"Vertex is out of range: ({v}, {w})"
        raise InvalidArgumentError(error_msg)

    mode = PathMode(mode)

    if mode == PathMode.LEGACY:
        found = _bfs_legacy(graph, v, w)
    else:
        found = _bfs(graph, v, w)

    logger.debug("path_search_complete", source=v, target=w, found=found, mode=mode.value)
    return found


def _bfs(graph: Graph, source: int, target: int) -> bool:
    if source == target:
        return True

    visited = [False] * graph.num_vertices()
    visited[source] = True
    queue = deque([source])

    while queue:
        current = queue.popleft()
        for nxt in graph.neighbors(current):
            if nxt == target:
                return True
            if not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)

    return False


def _bfs_legacy(graph: Graph, source: int, target: int) -> bool:
    """Breadth-first search with the historical termination check.

    The target is compared against the vertex whose neighbors are being
    scanned, and only once that vertex has at least one neighbor. A target is
    therefore reported only after it has been dequeued itself, and an
    isolated source never matches itself.
    """
    current = source
    visited = [False] * graph.num_vertices()
    visited[current] = True
    queue = deque([current])

    while queue:
        queue.popleft()

        for nxt in graph.neighbors(current):
            if current == target:
                return True
            if not visited[nxt]:
                queue.append(nxt)
                visited[nxt] = True

        if queue:
            current = queue[0]

    return False
