"""Breadth-first and depth-first search over a :class:`~graphwalk.graph.Graph`.

Both searches reset every traversal field (distance, parent and visited) on
every vertex before exploring, leave their outcome on the vertices and return a :class:`TraversalResult`
snapshot that later traversals do not touch.

Public API:
    bfs: Unit-cost breadth-first search (hop distances and parents).
    dfs: Stack-based depth-first search (reachability).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .frontier import FifoFrontier, LifoFrontier
from .types import INFINITY, TraversalResult, Vertex, VertexState

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def bfs(graph: Graph, start: Vertex | int) -> TraversalResult:
    """Breadth-first search from *start*.

    Every edge counts as one hop regardless of its weight.  Afterwards each
    reachable vertex holds its minimum hop count in ``distance`` and its
    predecessor on one shortest path in ``parent_id``; unreachable vertices
    keep ``distance=INFINITY`` and ``parent_id=None``.  When a vertex has
    several shortest predecessors, the first one dequeued wins.

    Raises:
        InvalidGraphError: If *graph* is not a live Graph.
        VertexNotFoundError: If *start* is not a vertex of *graph*.
    """
    source = _resolve_start(graph, start)

    graph.reset_traversal_state()

    frontier = FifoFrontier()
    order: list[int] = []
    source.distance = 0
    frontier.push(source)

    while frontier:
        u = frontier.pop()
        order.append(u.vertex_id)
        for edge in u.edges:
            v = graph.get_vertex(edge.adjacent_id)
            if v.distance == INFINITY:
                v.distance = u.distance + 1
                v.parent_id = u.vertex_id
                frontier.push(v)

    result = TraversalResult(
        algorithm="bfs",
        source_id=source.vertex_id,
        states={
            v.vertex_id: VertexState(
                distance=v.distance,
                parent_id=v.parent_id,
                visited=v.distance != INFINITY,
            )
            for v in graph.vertices
        },
        order=order,
        frontier_pushes=frontier.pushes,
        peak_frontier=frontier.peak_size,
    )
    logger.debug(
        "bfs from %s reached %d of %d vertices",
        source.vertex_id, len(order), len(graph),
    )
    return result


def dfs(graph: Graph, start: Vertex | int) -> TraversalResult:
    """Depth-first search from *start*.

    Neighbours are pushed without checking whether they were already
    visited; the check happens when a vertex is popped.  A vertex may
    therefore sit on the stack several times, which only affects
    ``frontier_pushes`` and ``peak_frontier``.  Afterwards ``visited`` is
    True exactly for the vertices reachable from *start*.

    Raises:
        InvalidGraphError: If *graph* is not a live Graph.
        VertexNotFoundError: If *start* is not a vertex of *graph*.
    """
    source = _resolve_start(graph, start)

    graph.reset_traversal_state()

    frontier = LifoFrontier()
    order: list[int] = []
    frontier.push(source)

    while frontier:
        u = frontier.pop()
        if u.visited:
            continue
        u.visited = True
        order.append(u.vertex_id)
        for adjacent_id in u.adjacent_ids:
            frontier.push(graph.get_vertex(adjacent_id))

    result = TraversalResult(
        algorithm="dfs",
        source_id=source.vertex_id,
        states={v.vertex_id: VertexState(visited=v.visited) for v in graph.vertices},
        order=order,
        frontier_pushes=frontier.pushes,
        peak_frontier=frontier.peak_size,
    )
    logger.debug(
        "dfs from %s visited %d of %d vertices (%d pushes)",
        source.vertex_id, len(order), len(graph), frontier.pushes,
    )
    return result


def _resolve_start(graph: Graph, start: Vertex | int) -> Vertex:
    from .graph import require_graph

    return require_graph(graph).resolve(start)


__all__ = ["bfs", "dfs"]
