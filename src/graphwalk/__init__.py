"""graphwalk-lib: In-memory directed graphs with BFS and DFS traversal."""

__version__ = "0.1.0"

from .exceptions import (
    DuplicateVertexError,
    GraphError,
    GraphExportError,
    InvalidGraphError,
    UnknownDestinationError,
    VertexNotFoundError,
)
from .export import export_dot, format_vertices, print_vertices
from .frontier import FifoFrontier, Frontier, LifoFrontier
from .graph import (
    Graph,
    add_adjacent_many,
    add_vertex,
    create_graph,
    find_vertex,
    release,
)
from .kuzu_export import export_kuzu, load_kuzu
from .traversal import bfs, dfs
from .types import INFINITY, Edge, TraversalResult, Vertex, VertexState

__all__ = [
    # Graph model
    "Graph",
    "Vertex",
    "Edge",
    "INFINITY",
    # Construction API
    "create_graph",
    "add_vertex",
    "find_vertex",
    "add_adjacent_many",
    "release",
    # Traversal
    "bfs",
    "dfs",
    "TraversalResult",
    "VertexState",
    "Frontier",
    "FifoFrontier",
    "LifoFrontier",
    # Export
    "export_dot",
    "format_vertices",
    "print_vertices",
    "export_kuzu",
    "load_kuzu",
    # Exceptions
    "GraphError",
    "InvalidGraphError",
    "DuplicateVertexError",
    "UnknownDestinationError",
    "VertexNotFoundError",
    "GraphExportError",
]
