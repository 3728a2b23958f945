"""Graph -- ordered, in-memory directed graph.

The graph owns its vertices and each vertex owns its outgoing edges.
Vertices keep their insertion order, which is the order used by every
enumeration (traversal reset, listing, export).

Public API:
    Graph: The graph container.
    create_graph: Create an empty graph.
    add_vertex: Add a vertex to a graph.
    find_vertex: Look up a vertex by id.
    add_adjacent_many: Add a batch of directed edges from one vertex.
    release: Release a graph and everything it owns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .exceptions import (
    DuplicateVertexError,
    InvalidGraphError,
    UnknownDestinationError,
    VertexNotFoundError,
)
from .traversal import bfs, dfs
from .types import Edge, TraversalResult, Vertex

logger = logging.getLogger(__name__)


class Graph:
    """Directed graph with integer vertex ids.

    Lookups go through an id -> vertex index; ``vertices`` preserves the
    order in which vertices were added.  Not thread-safe: a graph is meant
    to be built, traversed and released by a single caller.

    Args:
        graph_id: Numeric identifier for the graph.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, graph_id: int = 0) -> None:
        self._graph_id = graph_id
        self._vertices: list[Vertex] = []
        self._index: dict[int, Vertex] = {}
        self._released = False

    @property
    def graph_id(self) -> int:
        return self._graph_id

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Drop every vertex and edge owned by the graph.

        Raises:
            InvalidGraphError: If the graph was already released.
        """
        self._ensure_live()
        for vertex in self._vertices:
            vertex.edges.clear()
        self._vertices.clear()
        self._index.clear()
        self._released = True
        logger.debug("Released graph %s", self._graph_id)

    def __enter__(self) -> Graph:
        self._ensure_live()
        return self

    def __exit__(self, *exc_info) -> None:
        if not self._released:
            self.release()

    # ── vertex operations ─────────────────────────────────────

    def add_vertex(self, vertex_id: int) -> Vertex:
        """Append a new vertex with no edges.

        Raises:
            DuplicateVertexError: If *vertex_id* is already in the graph.
        """
        self._ensure_live()
        if vertex_id in self._index:
            raise DuplicateVertexError(f"Duplicate vertex: {vertex_id}")
        vertex = Vertex(vertex_id=vertex_id)
        self._vertices.append(vertex)
        self._index[vertex_id] = vertex
        logger.debug("Graph %s: added vertex %s", self._graph_id, vertex_id)
        return vertex

    def find_vertex(self, vertex_id: int) -> Vertex | None:
        """Return the vertex with *vertex_id*, or None if absent."""
        self._ensure_live()
        return self._index.get(vertex_id)

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Like :meth:`find_vertex` but raises when the vertex is absent."""
        vertex = self.find_vertex(vertex_id)
        if vertex is None:
            raise VertexNotFoundError(f"Vertex not found: {vertex_id}")
        return vertex

    def resolve(self, vertex: Vertex | int) -> Vertex:
        """Accept a vertex of this graph or a vertex id and return the vertex.

        Raises:
            VertexNotFoundError: If the vertex does not belong to this graph.
        """
        vertex_id = vertex.vertex_id if isinstance(vertex, Vertex) else vertex
        found = self.get_vertex(vertex_id)
        if isinstance(vertex, Vertex) and found is not vertex:
            raise VertexNotFoundError(f"Vertex {vertex_id} belongs to another graph")
        return found

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        self._ensure_live()
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._index

    def __iter__(self) -> Iterator[Vertex]:
        self._ensure_live()
        return iter(list(self._vertices))

    # ── edge operations ───────────────────────────────────────

    def add_adjacent_many(
        self,
        vertex: Vertex | int,
        pairs: Iterable[tuple[int, int]],
    ) -> list[Edge]:
        """Add one directed edge per ``(destination_id, weight)`` pair.

        Every destination is resolved before any edge is created, so a
        missing destination leaves the vertex's edges untouched.

        Args:
            vertex: Source vertex (or its id).
            pairs: ``(destination_id, weight)`` pairs, in the order the
                edges should be appended.

        Returns:
            The new edges, in call order.

        Raises:
            VertexNotFoundError: If *vertex* is not in the graph.
            UnknownDestinationError: If any destination is not in the graph.
        """
        self._ensure_live()
        source = self.resolve(vertex)
        pairs = list(pairs)
        for destination_id, _weight in pairs:
            if destination_id not in self._index:
                raise UnknownDestinationError(
                    f"Destination not found for vertex {source.vertex_id}: {destination_id}"
                )

        edges = [
            Edge(source_id=source.vertex_id, adjacent_id=destination_id, weight=weight)
            for destination_id, weight in pairs
        ]
        for edge in edges:
            source.add_edge(edge)
        logger.debug(
            "Graph %s: added %d edge(s) from vertex %s",
            self._graph_id, len(edges), source.vertex_id,
        )
        return edges

    def add_edge(self, source_id: int, destination_id: int, weight: int = 0) -> Edge:
        """Add a single directed edge."""
        return self.add_adjacent_many(source_id, [(destination_id, weight)])[0]

    def add_undirected(self, a_id: int, b_id: int, weight: int = 0) -> tuple[Edge, Edge]:
        """Add the matched pair of edges a -> b and b -> a."""
        self._ensure_live()
        for vertex_id in (a_id, b_id):
            if vertex_id not in self._index:
                raise UnknownDestinationError(f"Destination not found: {vertex_id}")
        forward = self.add_edge(a_id, b_id, weight)
        backward = self.add_edge(b_id, a_id, weight)
        return forward, backward

    def edges(self) -> Iterator[Edge]:
        """Yield every edge, grouped by source in vertex insertion order."""
        self._ensure_live()
        for vertex in self._vertices:
            yield from vertex.edges

    @property
    def edge_count(self) -> int:
        return sum(len(v.edges) for v in self._vertices)

    # ── traversal ─────────────────────────────────────────────

    def reset_traversal_state(self) -> None:
        """Reset distance, parent and visited on every vertex."""
        self._ensure_live()
        for vertex in self._vertices:
            vertex.reset_traversal_state()

    def bfs(self, start: Vertex | int) -> TraversalResult:
        return bfs(self, start)

    def dfs(self, start: Vertex | int) -> TraversalResult:
        return dfs(self, start)

    # ── private helpers ───────────────────────────────────────

    def _ensure_live(self) -> None:
        if self._released:
            raise InvalidGraphError(f"Graph {self._graph_id} has been released")

    def __repr__(self) -> str:
        state = "released" if self._released else f"{len(self._vertices)} vertices"
        return f"Graph(graph_id={self._graph_id}, {state})"


# ── construction API ──────────────────────────────────────────


def require_graph(graph: object) -> Graph:
    """Return *graph* if it is a live Graph.

    Raises:
        InvalidGraphError: If *graph* is not a Graph or has been released.
    """
    if not isinstance(graph, Graph):
        raise InvalidGraphError(f"Expected a Graph, got {type(graph).__name__}")
    graph._ensure_live()
    return graph


def create_graph(graph_id: int = 0) -> Graph:
    """Create an empty graph."""
    return Graph(graph_id)


def add_vertex(graph: Graph, vertex_id: int) -> Vertex:
    return require_graph(graph).add_vertex(vertex_id)


def find_vertex(graph: Graph, vertex_id: int) -> Vertex | None:
    return require_graph(graph).find_vertex(vertex_id)


def add_adjacent_many(
    graph: Graph,
    vertex: Vertex | int,
    pairs: Iterable[tuple[int, int]],
) -> list[Edge]:
    return require_graph(graph).add_adjacent_many(vertex, pairs)


def release(graph: Graph) -> None:
    require_graph(graph).release()


__all__ = [
    "Graph",
    "create_graph",
    "add_vertex",
    "find_vertex",
    "add_adjacent_many",
    "release",
]
