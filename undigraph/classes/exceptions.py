"""
Exception types raised by the undigraph package.

All errors derive from GraphError so callers can catch every library
failure with a single clause, or pick out the specific kind.
"""

from typing import Any


class GraphError(Exception):
    """Base class for all graph errors."""


class VertexNotFoundError(GraphError, IndexError):
    """
    Raised when a vertex index is outside [0, vertex_count).

    Attributes:
        vertex: The offending vertex value as supplied by the caller
        vertex_count: Number of vertices in the graph
    """

    def __init__(self, vertex: Any, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        if vertex_count > 0:
            message = f"vertex not found: {vertex!r} (valid range is 0..{vertex_count - 1})"
        else:
            message = f"vertex not found: {vertex!r} (graph has no vertices)"
        super().__init__(message)


class PathNotFoundError(GraphError, LookupError):
    """
    Raised when a traversal completes without reaching the end vertex.

    Attributes:
        start: Starting vertex ID
        end: Ending vertex ID
    """

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"path not found: {start} -> {end}")
