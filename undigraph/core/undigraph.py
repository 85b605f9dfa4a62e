"""
Main facade class for undirected graphs.

This module provides the pyundigraph class, which exposes the whole public
API while delegating to specialized modules.
"""

from typing import Iterable, List, Tuple

from .graph import UndirectedGraph
from ..analysis.traversal import GraphTraverser
from ..analysis.pathfinding import PathFinder


class pyundigraph:
    """
    Main facade class for undirected graphs.

    Storage and introspection are handled by UndirectedGraph, traversals by
    GraphTraverser, and path queries by PathFinder.
    """

    def __init__(self, vertex_count: int):
        """
        Initialize an undirected graph with a fixed number of vertices.

        Args:
            vertex_count: Number of vertices, identified as 0..vertex_count-1
        """
        self._graph = UndirectedGraph(vertex_count)

        # Initialize analysis components
        self._traverser = GraphTraverser(self._graph)
        self._pathfinder = PathFinder(self._graph)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Tuple[int, int]]) -> "pyundigraph":
        """Build a graph by replaying edge insertions in order."""
        graph = cls(vertex_count)
        graph.add_edges(edges)
        return graph

    @property
    def graph(self) -> UndirectedGraph:
        """The underlying UndirectedGraph."""
        return self._graph

    # ========================================================================
    # CONSTRUCTION & MUTATION
    # ========================================================================

    def add_edge(self, vertex1: int, vertex2: int) -> None:
        """Add an undirected edge between two vertices."""
        self._graph.add_edge(vertex1, vertex2)

    def add_edges(self, edges: Iterable[Tuple[int, int]]) -> None:
        """Add several edges in order."""
        self._graph.add_edges(edges)

    # ========================================================================
    # INTROSPECTION
    # ========================================================================

    def has_vertex(self, vertex) -> bool:
        """Check whether vertex is a valid vertex ID."""
        return self._graph.has_vertex(vertex)

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        return self._graph.get_vertex_count()

    def get_edge_count(self) -> int:
        """Get the number of edges inserted so far."""
        return self._graph.get_edge_count()

    def get_adjacent_vertices(self, vertex: int) -> List[int]:
        """Get a copy of the adjacency list of a vertex."""
        return self._graph.get_adjacent_vertices(vertex)

    def get_vertex_degree(self, vertex: int) -> int:
        """Get the degree of a vertex."""
        return self._graph.get_vertex_degree(vertex)

    def describe(self) -> str:
        """Produce a text dump of the graph."""
        return self._graph.describe()

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def dfs_recursive(self, start_id: int) -> List[int]:
        """Depth-first search using recursion."""
        return self._traverser.dfs_recursive(start_id)

    def dfs_iterative(self, start_id: int) -> List[int]:
        """Depth-first search using an explicit stack."""
        return self._traverser.dfs_iterative(start_id)

    def bfs(self, start_id: int) -> List[int]:
        """Breadth-first search in level order."""
        return self._traverser.bfs(start_id)

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def dfs_path(self, start_id: int, end_id: int) -> List[int]:
        """Find a path from start to end using DFS."""
        return self._pathfinder.dfs_path(start_id, end_id)

    def bfs_path(self, start_id: int, end_id: int) -> List[int]:
        """Find a shortest path from start to end using BFS."""
        return self._pathfinder.bfs_path(start_id, end_id)

    def __str__(self) -> str:
        return self._graph.describe()

    def __repr__(self) -> str:
        return (f"pyundigraph(vertex_count={self._graph.vertex_count}, "
                f"edge_count={self._graph.edge_count})")
