"""
Depth-first and breadth-first traversal of undirected graphs.

Every traversal allocates its own visited array, so calls never share
state and the graph is only read.
"""

import logging
from typing import List
from collections import deque

import numpy as np

from ..core.graph import UndirectedGraph

logger = logging.getLogger(__name__)


class GraphTraverser:
    """
    Traversal algorithms over an UndirectedGraph.

    This class provides methods for:
    - Recursive depth-first search
    - Iterative depth-first search
    - Breadth-first search

    Neighbours are always expanded in adjacency insertion order, so results
    are reproducible for a given sequence of edge insertions.
    """

    def __init__(self, graph: UndirectedGraph):
        """
        Initialize the traverser.

        Args:
            graph: UndirectedGraph instance to traverse
        """
        self.graph = graph

    def _new_visited(self) -> np.ndarray:
        return np.zeros(self.graph.vertex_count, dtype=bool)

    def dfs_recursive(self, start_id: int) -> List[int]:
        """
        Depth-first search using recursion.

        Recursion depth grows with the longest DFS path, so very deep graphs
        may exceed the interpreter recursion limit; dfs_iterative returns the
        same order without that limit.

        Args:
            start_id: Starting vertex ID

        Returns:
            Reachable vertex IDs in DFS pre-order

        Raises:
            VertexNotFoundError: If start_id is invalid
        """
        start_id = self.graph.validate_vertex(start_id)
        adjacency_list = self.graph.adjacency_list
        visited = self._new_visited()

        def dfs(vertex_id: int) -> List[int]:
            vertices = [vertex_id]
            visited[vertex_id] = True

            for neighbor_id in adjacency_list[vertex_id]:
                if not visited[neighbor_id]:
                    vertices.extend(dfs(neighbor_id))

            return vertices

        vertices = dfs(start_id)
        logger.debug(f"Recursive DFS from {start_id} visited {len(vertices)} vertices")
        return vertices

    def dfs_iterative(self, start_id: int) -> List[int]:
        """
        Depth-first search using an explicit stack.

        Neighbours are pushed in reverse adjacency order so they are popped
        in adjacency order, matching dfs_recursive. A vertex is marked on
        its first pop; later pops of the same vertex are discarded.

        Args:
            start_id: Starting vertex ID

        Returns:
            Reachable vertex IDs in DFS pre-order

        Raises:
            VertexNotFoundError: If start_id is invalid
        """
        start_id = self.graph.validate_vertex(start_id)
        adjacency_list = self.graph.adjacency_list
        visited = self._new_visited()
        stack = [start_id]
        vertices = []

        while stack:
            vertex_id = stack.pop()
            if visited[vertex_id]:
                continue

            visited[vertex_id] = True
            vertices.append(vertex_id)

            for neighbor_id in reversed(adjacency_list[vertex_id]):
                if not visited[neighbor_id]:
                    stack.append(neighbor_id)

        logger.debug(f"Iterative DFS from {start_id} visited {len(vertices)} vertices")
        return vertices

    def bfs(self, start_id: int) -> List[int]:
        """
        Breadth-first search in level order.

        Vertices are marked when enqueued, so each is enqueued at most once.

        Args:
            start_id: Starting vertex ID

        Returns:
            Reachable vertex IDs in non-decreasing distance from start_id

        Raises:
            VertexNotFoundError: If start_id is invalid
        """
        start_id = self.graph.validate_vertex(start_id)
        adjacency_list = self.graph.adjacency_list
        visited = self._new_visited()
        visited[start_id] = True
        queue = deque([start_id])
        vertices = []

        while queue:
            vertex_id = queue.popleft()
            vertices.append(vertex_id)

            for neighbor_id in adjacency_list[vertex_id]:
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    queue.append(neighbor_id)

        logger.debug(f"BFS from {start_id} visited {len(vertices)} vertices")
        return vertices
