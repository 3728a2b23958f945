"""Custom exceptions for graphwalk-lib."""


class GraphError(Exception):
    """Base exception for graph operations."""


class InvalidGraphError(GraphError):
    """Raised when an operation receives no graph or a released graph."""


class DuplicateVertexError(GraphError):
    """Raised when a vertex id is already present in the graph."""


class UnknownDestinationError(GraphError):
    """Raised when an adjacency references a vertex that is not in the graph."""


class VertexNotFoundError(GraphError):
    """Raised when a required vertex cannot be found."""


class GraphExportError(GraphError):
    """Raised when an export target cannot be opened or written."""
