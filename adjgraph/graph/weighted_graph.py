"""Undirected weighted graph with a fixed vertex set.

This module provides the Graph class which stores edges in per-vertex
adjacency maps. Space complexity is Theta(n + m) where n is the number of
vertices and m the number of edges.
"""

import structlog

logger = structlog.get_logger(__name__)

# Returned by Graph.cost() when two vertices are not adjacent
NO_EDGE = -1


class InvalidArgumentError(ValueError):
    """Exception raised when a graph operation receives an invalid argument.

    Covers negative vertex counts, vertex ids outside [0, num_vertices) and
    negative edge costs. These are caller errors, never recoverable states.
    """

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the invalid argument
        """
        super().__init__(message)
        self.message = message


class Graph:
    """Undirected weighted graph implemented using adjacency maps.

    Every undirected edge (v, w) with cost c is stored twice: as w -> c in the
    map of v and as v -> c in the map of w. The vertex set is fixed at
    construction; only edges can be added or removed afterwards.

    Thread-safety:
        This class is NOT thread-safe. Mutations and traversals should happen
        from a single thread. If concurrent access is required, protect all
        method calls with external synchronization (e.g., threading.Lock).

    Example:
        >>> graph = Graph(3)
        >>> graph.add(0, 1, 4)
        >>> graph.add(1, 2, 7)
        >>> graph.cost(1, 0)
        4
        >>> graph.num_edges()
        2
    """

    def __init__(self, n: int):
        """Initialize a graph with n vertices and no edges.

        Args:
            n: Number of vertices, must be >= 0

        Raises:
            InvalidArgumentError: If n is negative
        """
        if n < 0:
            error_msg = f"n = {n}"
            logger.error("invalid_vertex_count", num_vertices=n)
            raise InvalidArgumentError(error_msg)

        self._edges: list[dict[int, int]] = [{} for _ in range(n)]
        self._num_vertices = n
        self._num_edges = 0

        logger.debug("graph_initialized", num_vertices=n)

    def num_vertices(self) -> int:
        """Return the number of vertices in this graph."""
        return self._num_vertices

    def num_edges(self) -> int:
        """Return the number of undirected edges in this graph."""
        return self._num_edges

    def vertex_in_range(self, v: int) -> bool:
        """Check whether v is a valid vertex id of this graph.

        Args:
            v: Vertex id

        Returns:
            True if 0 <= v < num_vertices, False otherwise
        """
        return 0 <= v < self._num_vertices

    def _check_vertex(self, v: int, message: str = "Vertex is out of range") -> None:
        if not self.vertex_in_range(v):
            error_msg = f"{message}: {v}"
            raise InvalidArgumentError(error_msg)

    def degree(self, v: int) -> int:
        """Return the number of neighbors of vertex v.

        Args:
            v: Vertex id

        Returns:
            Count of vertices adjacent to v

        Raises:
            InvalidArgumentError: If v is out of range
        """
        self._check_vertex(v)
        return len(self._edges[v])

    def neighbors(self, v: int) -> list[int]:
        """Return a snapshot of the vertices adjacent to v.

        The returned list is a private copy. Iterating it, removing from it or
        otherwise changing it never affects the graph, and later changes to the
        graph are not reflected in it. Order is unspecified.

        Args:
            v: Vertex id

        Returns:
            List of neighbor vertex ids

        Raises:
            InvalidArgumentError: If v is out of range

        Example:
            >>> graph = Graph(3)
            >>> graph.add(0, 1, 1)
            >>> snapshot = graph.neighbors(0)
            >>> snapshot.remove(1)
            >>> graph.has_edge(0, 1)
            True
        """
        self._check_vertex(v)
        return list(self._edges[v])

    def has_edge(self, v: int, w: int) -> bool:
        """Check whether w is present in the adjacency map of v.

        Args:
            v: Vertex id
            w: Vertex id

        Returns:
            True if there is an edge from v to w

        Raises:
            InvalidArgumentError: If v or w is out of range
        """
        self._check_vertex(v)
        self._check_vertex(w)
        return w in self._edges[v]

    def cost(self, v: int, w: int) -> int:
        """Return the cost of the edge between v and w.

        Both directions are checked, v -> w first.

        Args:
            v: Vertex id
            w: Vertex id

        Returns:
            The edge cost if v and w are adjacent, NO_EDGE (-1) otherwise

        Raises:
            InvalidArgumentError: If v or w is out of range
        """
        self._check_vertex(v, "From is out of range")
        self._check_vertex(w, "To is out of range")

        if self.has_edge(v, w):
            return self._edges[v][w]
        if self.has_edge(w, v):
            return self._edges[w][v]
        return NO_EDGE

    def add(self, v: int, w: int, c: int) -> None:
        """Insert or update the undirected edge (v, w) with cost c.

        An existing edge is only updated when c does not already appear as
        the cost of any edge incident to v. Otherwise the call is a no-op.

        Args:
            v: Vertex id
            w: Vertex id
            c: Edge cost, c >= 0

        Raises:
            InvalidArgumentError: If v or w is out of range, or c is negative
        """
        self._check_vertex(v)
        self._check_vertex(w)
        if c < 0:
            error_msg = f"Edge cost must be non-negative: {c}"
            raise InvalidArgumentError(error_msg)

        if not self.has_edge(v, w):
            self._edges[v][w] = c
            self._edges[w][v] = c
            self._num_edges += 1
            logger.debug("edge_added", v=v, w=w, cost=c, num_edges=self._num_edges)
        elif self._is_new_cost(v, c):
            previous = self._edges[v][w]
            self._edges[v][w] = c
            self._edges[w][v] = c
            logger.debug("edge_cost_updated", v=v, w=w, cost=c, previous_cost=previous)

    def remove(self, v: int, w: int) -> None:
        """Remove the undirected edge (v, w) if present.

        Args:
            v: Vertex id
            w: Vertex id

        Raises:
            InvalidArgumentError: If v or w is out of range
        """
        self._check_vertex(v)
        self._check_vertex(w)

        if self.has_edge(v, w):
            # pop with default: a self-loop has a single entry
            self._edges[v].pop(w, None)
            self._edges[w].pop(v, None)
            self._num_edges -= 1
            logger.debug("edge_removed", v=v, w=w, num_edges=self._num_edges)

    def _is_new_cost(self, v: int, c: int) -> bool:
        return c not in self._edges[v].values()

    def get_stats(self) -> dict[str, int]:
        """Get statistics about the current graph state.

        Returns:
            Dictionary with graph statistics including:
                - num_vertices: Number of vertices
                - num_edges: Number of undirected edges
                - max_degree: Largest vertex degree (0 for an empty graph)
                - isolated_vertices: Number of vertices without neighbors
        """
        degrees = [len(adjacent) for adjacent in self._edges]
        stats = {
            "num_vertices": self._num_vertices,
            "num_edges": self._num_edges,
            "max_degree": max(degrees, default=0),
            "isolated_vertices": degrees.count(0),
        }

        logger.debug("graph_stats_retrieved", **stats)

        return stats

    def copy(self) -> "Graph":
        """Create a copy of the graph with the same vertices and edges.

        Returns:
            A new, independent Graph instance
        """
        new_graph = Graph(self._num_vertices)
        new_graph._edges = [dict(adjacent) for adjacent in self._edges]
        new_graph._num_edges = self._num_edges

        logger.debug("graph_copied", num_vertices=self._num_vertices, num_edges=self._num_edges)

        return new_graph

    def __str__(self) -> str:
        """Return the edges of this graph as "{(v,w,c), ...}".

        An edge is skipped when the text of its neighbor id already occurs in
        the output built so far, so each undirected edge is normally printed
        once. Because the check is textual, an id like 1 is also hidden by an
        earlier 11 or by a cost containing the digit. Order is unspecified and
        the result is meant for display only.
        """
        s = "{"
        count = 0
        for v, adjacent in enumerate(self._edges):
            for w, c in adjacent.items():
                if str(w) in s:
                    continue
                s += f"({v},{w},{c}), "
                count += 1
        if count > 0:
            s = s[:-2]
        return s + "}"
