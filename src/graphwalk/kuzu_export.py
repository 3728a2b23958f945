"""Kuzu snapshots of a graph.

Stores vertices in a ``Vertex`` node table and edges in an ``ADJACENT``
rel table.  Both carry a ``position`` column so that loading a snapshot
restores vertex insertion order and per-vertex edge order.  Traversal
fields and export flags are not stored.

Public API:
    export_kuzu: Write a graph into a Kuzu database.
    load_kuzu: Rebuild a graph from a Kuzu database written by export_kuzu.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import kuzu

from .exceptions import GraphExportError
from .graph import Graph, require_graph

logger = logging.getLogger(__name__)

VERTEX_TABLE = "Vertex"
EDGE_TABLE = "ADJACENT"


@contextmanager
def _connect(db_path: Path) -> Iterator[kuzu.Connection]:
    db = kuzu.Database(str(db_path))
    conn = kuzu.Connection(db)
    try:
        yield conn
    finally:
        conn.close()
        db.close()


def _ensure_schema(conn: kuzu.Connection) -> None:
    conn.execute(
        f"CREATE NODE TABLE IF NOT EXISTS {VERTEX_TABLE}"
        f"(vertex_id INT64, position INT64, PRIMARY KEY(vertex_id))"
    )
    conn.execute(
        f"CREATE REL TABLE IF NOT EXISTS {EDGE_TABLE}"
        f"(FROM {VERTEX_TABLE} TO {VERTEX_TABLE}, weight INT64, position INT64)"
    )


def export_kuzu(graph: Graph, db_path: Path | str) -> None:
    """Replace the contents of the Kuzu database at *db_path* with *graph*.

    Raises:
        InvalidGraphError: If *graph* is not a live Graph.
        GraphExportError: If the database cannot be opened or written.
    """
    vertices = require_graph(graph).vertices
    db_path = Path(db_path)

    try:
        with _connect(db_path) as conn:
            _ensure_schema(conn)
            conn.execute(f"MATCH (v:{VERTEX_TABLE}) DETACH DELETE v")

            for position, vertex in enumerate(vertices):
                conn.execute(
                    f"CREATE (:{VERTEX_TABLE} {{vertex_id: $vid, position: $pos}})",
                    {"vid": vertex.vertex_id, "pos": position},
                )

            for vertex in vertices:
                for position, edge in enumerate(vertex.edges):
                    conn.execute(
                        f"MATCH (a:{VERTEX_TABLE}), (b:{VERTEX_TABLE}) "
                        f"WHERE a.vertex_id = $sid AND b.vertex_id = $tid "
                        f"CREATE (a)-[:{EDGE_TABLE} {{weight: $w, position: $pos}}]->(b)",
                        {
                            "sid": edge.source_id,
                            "tid": edge.adjacent_id,
                            "w": edge.weight,
                            "pos": position,
                        },
                    )
    except RuntimeError as e:
        raise GraphExportError(f"Cannot write Kuzu snapshot {db_path}: {e}") from e

    logger.debug(
        "Exported graph %s to Kuzu database %s (%d vertices)",
        graph.graph_id, db_path, len(vertices),
    )


def load_kuzu(db_path: Path | str, graph_id: int = 0) -> Graph:
    """Rebuild a graph from a snapshot written by :func:`export_kuzu`.

    Raises:
        FileNotFoundError: If no database exists at *db_path*.
        GraphExportError: If *db_path* cannot be opened or read as a snapshot.
    """
    db_path = Path(db_path)
    if not db_path.exists():
        raise FileNotFoundError(f"Kuzu database not found: {db_path}")

    graph = Graph(graph_id)
    try:
        with _connect(db_path) as conn:
            _ensure_schema(conn)

            result = conn.execute(
                f"MATCH (v:{VERTEX_TABLE}) RETURN v.vertex_id ORDER BY v.position"
            )
            while result.has_next():
                graph.add_vertex(result.get_next()[0])
            result.close()

            result = conn.execute(
                f"MATCH (a:{VERTEX_TABLE})-[r:{EDGE_TABLE}]->(b:{VERTEX_TABLE}) "
                f"RETURN a.vertex_id, b.vertex_id, r.weight "
                f"ORDER BY a.position, r.position"
            )
            pending: dict[int, list[tuple[int, int]]] = {}
            while result.has_next():
                source_id, adjacent_id, weight = result.get_next()
                pending.setdefault(source_id, []).append((adjacent_id, weight))
            result.close()
    except RuntimeError as e:
        raise GraphExportError(f"Cannot read Kuzu snapshot {db_path}: {e}") from e

    for source_id, pairs in pending.items():
        graph.add_adjacent_many(source_id, pairs)

    logger.debug(
        "Loaded graph %s from Kuzu database %s (%d vertices, %d edges)",
        graph_id, db_path, len(graph), graph.edge_count,
    )
    return graph


__all__ = ["export_kuzu", "load_kuzu"]
