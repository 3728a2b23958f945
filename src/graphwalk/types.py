"""Graph data structures: vertices, edges and traversal snapshots.

Public API:
    INFINITY: Distance of a vertex not reached by the last BFS.
    Edge: Directed, weighted edge stored by its owning vertex.
    Vertex: Graph vertex owning its outgoing edges plus traversal scratch fields.
    VertexState: Immutable per-vertex snapshot taken at the end of a traversal.
    TraversalResult: Container for the outcome of one BFS or DFS call.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from .exceptions import VertexNotFoundError

INFINITY = math.inf


@dataclass
class Edge:
    """A directed edge from ``source_id`` to ``adjacent_id``.

    Edges reference vertices by id so that ownership runs strictly
    graph -> vertex -> edge.

    Attributes:
        source_id: Id of the vertex that owns this edge.
        adjacent_id: Id of the destination vertex.
        weight: Edge weight. Carried for export, ignored by BFS.
        exported: Set by the dot exporter once the edge (or its
            counter-edge) has been written.
    """

    source_id: int
    adjacent_id: int
    weight: int = 0
    exported: bool = False


@dataclass
class Vertex:
    """A vertex and its ordered outgoing edges.

    ``distance``, ``parent_id`` and ``visited`` are transient: they hold the
    outcome of the most recent traversal and are reset by the next one.
    """

    vertex_id: int
    edges: list[Edge] = field(default_factory=list)
    distance: float = INFINITY
    parent_id: int | None = None
    visited: bool = False

    def reset_traversal_state(self) -> None:
        self.distance = INFINITY
        self.parent_id = None
        self.visited = False

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def find_edge_to(self, vertex_id: int) -> Edge | None:
        """Return the first outgoing edge pointing at *vertex_id*, or None."""
        for edge in self.edges:
            if edge.adjacent_id == vertex_id:
                return edge
        return None

    @property
    def adjacent_ids(self) -> Iterator[int]:
        return (edge.adjacent_id for edge in self.edges)

    def __str__(self) -> str:
        distance = "inf" if self.distance == INFINITY else str(self.distance)
        parent = "-" if self.parent_id is None else str(self.parent_id)
        return (
            f"vertex {self.vertex_id}: distance={distance} "
            f"parent={parent} visited={self.visited}"
        )


@dataclass(frozen=True)
class VertexState:
    """Traversal fields of one vertex, frozen at the end of a traversal.

    For BFS snapshots ``visited`` records whether the vertex was reached;
    DFS snapshots leave ``distance`` and ``parent_id`` at their defaults.
    """

    distance: float = INFINITY
    parent_id: int | None = None
    visited: bool = False


@dataclass(frozen=True)
class TraversalResult:
    """Outcome of a single BFS or DFS call.

    Unlike the scratch fields on :class:`Vertex`, a result is never touched
    by later traversals, so callers may keep several side by side.  Fields
    cannot be reassigned; treat ``states`` and ``order`` as read-only.

    Attributes:
        algorithm: ``"bfs"`` or ``"dfs"``.
        source_id: Id of the start vertex.
        states: Final state of every vertex, in graph insertion order.
        order: Vertex ids in the order they were settled (dequeued by BFS,
            marked visited by DFS).
        frontier_pushes: Total pushes onto the frontier, duplicates included.
        peak_frontier: Largest frontier size observed.
    """

    algorithm: str
    source_id: int
    states: dict[int, VertexState] = field(default_factory=dict)
    order: list[int] = field(default_factory=list)
    frontier_pushes: int = 0
    peak_frontier: int = 0

    def state(self, vertex_id: int) -> VertexState:
        try:
            return self.states[vertex_id]
        except KeyError:
            raise VertexNotFoundError(f"Vertex not in traversal result: {vertex_id}") from None

    def distance(self, vertex_id: int) -> float:
        return self.state(vertex_id).distance

    def parent(self, vertex_id: int) -> int | None:
        return self.state(vertex_id).parent_id

    def visited(self, vertex_id: int) -> bool:
        return self.state(vertex_id).visited

    def reachable(self) -> list[int]:
        """Ids reached from the source, in graph insertion order."""
        return [vid for vid, s in self.states.items() if s.visited]

    def path_to(self, vertex_id: int) -> list[int]:
        """Follow parent links back to the source.

        Returns the ids from source to *vertex_id* inclusive, or an empty
        list when the vertex was not reached. DFS results carry no parent
        links, so this is always empty for them.
        """
        if self.distance(vertex_id) == INFINITY:
            return []
        path = [vertex_id]
        current = self.parent(vertex_id)
        while current is not None:
            path.append(current)
            current = self.parent(current)
        path.reverse()
        return path


__all__ = ["INFINITY", "Edge", "Vertex", "VertexState", "TraversalResult"]
