"""
Core graph data structure for undirected graphs.

This module provides the adjacency-list storage and basic queries without
any traversal algorithms.
"""

import logging
from typing import Iterable, List, Tuple

import numpy as np

from ..classes.exceptions import VertexNotFoundError
from ..config import DESCRIBE_HEADER_FORMAT, DESCRIBE_VERTEX_FORMAT

logger = logging.getLogger(__name__)


class UndirectedGraph:
    """
    Core graph data structure for undirected graphs.

    Vertices are identified by dense integer IDs in [0, vertex_count). The
    vertex set is fixed at construction; edges can only be added. It provides:
    - Edge insertion with symmetric adjacency maintenance
    - Vertex validation
    - Degree and adjacency queries
    - A deterministic text dump
    """

    def __init__(self, vertex_count: int):
        """
        Initialize an empty graph with vertex_count vertices.

        Args:
            vertex_count: Number of vertices, must be non-negative

        Raises:
            TypeError: If vertex_count is not an integer
            ValueError: If vertex_count is negative
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, (int, np.integer)):
            raise TypeError(f"vertex_count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")

        self.vertex_count: int = int(vertex_count)
        self.edge_count: int = 0

        # Neighbours of each vertex in insertion order
        self.adjacency_list: List[List[int]] = [[] for _ in range(self.vertex_count)]

        logger.debug(f"Initialized UndirectedGraph with {self.vertex_count} vertices")

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Tuple[int, int]]) -> "UndirectedGraph":
        """
        Build a graph by replaying a sequence of edge insertions.

        Args:
            vertex_count: Number of vertices
            edges: Iterable of (v1, v2) pairs, inserted in order

        Returns:
            The populated graph
        """
        graph = cls(vertex_count)
        graph.add_edges(edges)
        return graph

    def has_vertex(self, vertex) -> bool:
        """Check whether vertex is a valid vertex ID for this graph."""
        if isinstance(vertex, bool) or not isinstance(vertex, (int, np.integer)):
            return False
        return bool(0 <= vertex < self.vertex_count)

    def validate_vertex(self, vertex) -> int:
        """
        Ensure vertex is valid.

        Args:
            vertex: Vertex ID to check

        Returns:
            The vertex as a plain int

        Raises:
            VertexNotFoundError: If vertex is outside [0, vertex_count)
        """
        if not self.has_vertex(vertex):
            logger.debug(f"Rejected vertex {vertex!r} for graph of {self.vertex_count} vertices")
            raise VertexNotFoundError(vertex, self.vertex_count)
        return int(vertex)

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        return self.vertex_count

    def get_edge_count(self) -> int:
        """Get the number of edges inserted so far."""
        return self.edge_count

    def add_edge(self, vertex1: int, vertex2: int) -> None:
        """
        Add an undirected edge between two vertices.

        Self-loops and parallel edges are accepted and recorded as-is.

        Args:
            vertex1: First endpoint
            vertex2: Second endpoint

        Raises:
            VertexNotFoundError: If either endpoint is invalid
        """
        vertex1 = self.validate_vertex(vertex1)
        vertex2 = self.validate_vertex(vertex2)

        self.adjacency_list[vertex1].append(vertex2)
        self.adjacency_list[vertex2].append(vertex1)
        self.edge_count += 1

    def add_edges(self, edges: Iterable[Tuple[int, int]]) -> None:
        """
        Add several edges in order.

        Edges preceding an invalid pair remain inserted.

        Args:
            edges: Iterable of (v1, v2) pairs
        """
        for vertex1, vertex2 in edges:
            self.add_edge(vertex1, vertex2)

    def get_adjacent_vertices(self, vertex: int) -> List[int]:
        """
        Get the vertices adjacent to a vertex, in insertion order.

        Args:
            vertex: Vertex ID

        Returns:
            A copy of the adjacency list of vertex

        Raises:
            VertexNotFoundError: If vertex is invalid
        """
        vertex = self.validate_vertex(vertex)
        return self.adjacency_list[vertex].copy()

    def get_vertex_degree(self, vertex: int) -> int:
        """
        Get the degree of a vertex.

        Parallel edges count once each and a self-loop counts twice.

        Raises:
            VertexNotFoundError: If vertex is invalid
        """
        vertex = self.validate_vertex(vertex)
        return len(self.adjacency_list[vertex])

    def describe(self) -> str:
        """
        Produce a text dump of the graph.

        Returns:
            A header line with the vertex and edge counts followed by one
            line per vertex listing its adjacent vertices
        """
        lines = [DESCRIBE_HEADER_FORMAT.format(vertex_count=self.vertex_count, edge_count=self.edge_count)]
        for vertex, adjacent in enumerate(self.adjacency_list):
            lines.append(DESCRIBE_VERTEX_FORMAT.format(vertex=vertex, adjacent=adjacent))
        return "".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"
