"""Read-only views of a finished graph: Graphviz dot export and vertex listing.

Public API:
    export_dot: Write the graph as an undirected Graphviz ``graph``.
    format_vertices: One descriptive line per vertex.
    print_vertices: Print :func:`format_vertices` output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .exceptions import GraphExportError
from .graph import Graph, require_graph

logger = logging.getLogger(__name__)


def export_dot(graph: Graph, path: Path | str) -> int:
    """Write *graph* to *path* in dot format.

    Each edge is written as ``<src> -- <dst> [label = <weight>];``.  When an
    edge is written, it and its counter-edge (destination back to source)
    are flagged as exported so an undirected pair produces one line.
    Flags are cleared first, so exporting twice yields the same file.

    Returns:
        The number of edge lines written.

    Raises:
        InvalidGraphError: If *graph* is not a live Graph.
        GraphExportError: If *path* cannot be opened for writing.
    """
    graph = require_graph(graph)

    for edge in graph.edges():
        edge.exported = False

    lines: list[str] = []
    for vertex in graph.vertices:
        for edge in vertex.edges:
            if edge.exported:
                continue
            edge.exported = True
            adjacent = graph.get_vertex(edge.adjacent_id)
            counter_edge = adjacent.find_edge_to(vertex.vertex_id)
            if counter_edge is not None:
                counter_edge.exported = True
            lines.append(f"\t{vertex.vertex_id} -- {adjacent.vertex_id} [label = {edge.weight}];")

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write("graph {\n")
            for line in lines:
                f.write(line + "\n")
            f.write("}\n")
    except OSError as e:
        raise GraphExportError(f"Cannot write dot file {path}: {e}") from e

    logger.debug("Exported graph %s to %s (%d edges)", graph.graph_id, path, len(lines))
    return len(lines)


def format_vertices(graph: Graph) -> list[str]:
    """Describe every vertex, in insertion order."""
    return [str(vertex) for vertex in require_graph(graph).vertices]


def print_vertices(graph: Graph, file: TextIO | None = None) -> None:
    out = file if file is not None else sys.stdout
    for line in format_vertices(graph):
        print(line, file=out)


__all__ = ["export_dot", "format_vertices", "print_vertices"]
