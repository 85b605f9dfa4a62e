"""
undigraph - Undirected Graph Library

A small Python library for undirected graphs over a fixed set of integer
vertices, stored as adjacency lists in edge insertion order.

Main Classes:
    pyundigraph: Main class for graph construction and queries (facade)
    UndirectedGraph: Adjacency-list storage and introspection
    GraphTraverser: Depth-first and breadth-first traversal
    PathFinder: DFS path and BFS shortest path

Example:
    >>> from undigraph import pyundigraph
    >>> graph = pyundigraph(5)
    >>> graph.add_edges([(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)])
    >>> graph.bfs(0)
    [0, 1, 2, 3, 4]
    >>> graph.bfs_path(0, 4)
    [0, 1, 3, 4]
"""

__version__ = "0.1.0"

from undigraph.classes.exceptions import GraphError, VertexNotFoundError, PathNotFoundError
from undigraph.core.graph import UndirectedGraph
from undigraph.analysis.traversal import GraphTraverser
from undigraph.analysis.pathfinding import PathFinder
from undigraph.core.undigraph import pyundigraph

__all__ = [
    'pyundigraph',
    'UndirectedGraph',
    'GraphTraverser',
    'PathFinder',
    'GraphError',
    'VertexNotFoundError',
    'PathNotFoundError',
]
