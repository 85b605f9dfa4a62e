"""
Path finding for undirected graphs.

This module provides algorithms for finding a path between two vertices,
either any DFS path or a minimum-edge BFS path.
"""

import logging
from typing import List
from collections import deque

import numpy as np

from ..classes.exceptions import PathNotFoundError
from ..core.graph import UndirectedGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for undirected graphs.

    This class provides methods for:
    - Finding a path by depth-first search (not necessarily shortest)
    - Finding a shortest path by breadth-first search
    """

    def __init__(self, graph: UndirectedGraph):
        """
        Initialize the path finder.

        Args:
            graph: UndirectedGraph instance to search
        """
        self.graph = graph

    def dfs_path(self, start_id: int, end_id: int) -> List[int]:
        """
        Find a path from start to end using iterative DFS.

        The path follows DFS discovery order and is simple, but it is not
        guaranteed to have the fewest edges.

        Args:
            start_id: Starting vertex ID
            end_id: Ending vertex ID

        Returns:
            List of vertex IDs from start_id to end_id inclusive

        Raises:
            VertexNotFoundError: If either vertex is invalid
            PathNotFoundError: If end_id is unreachable from start_id
        """
        start_id = self.graph.validate_vertex(start_id)
        end_id = self.graph.validate_vertex(end_id)
        adjacency_list = self.graph.adjacency_list

        visited = np.zeros(self.graph.vertex_count, dtype=bool)
        path_to = np.full(self.graph.vertex_count, -1, dtype=np.int64)
        stack = [start_id]

        while stack:
            vertex_id = stack.pop()
            if visited[vertex_id]:
                continue
            visited[vertex_id] = True

            if vertex_id == end_id:
                break

            for neighbor_id in reversed(adjacency_list[vertex_id]):
                if not visited[neighbor_id]:
                    stack.append(neighbor_id)
                    # The latest push is popped first, so it owns the predecessor
                    path_to[neighbor_id] = vertex_id

        if not visited[end_id]:
            logger.debug(f"No DFS path from {start_id} to {end_id}")
            raise PathNotFoundError(start_id, end_id)

        path = [end_id]
        vertex_id = end_id
        while vertex_id != start_id:
            vertex_id = int(path_to[vertex_id])
            path.append(vertex_id)
        path.reverse()

        logger.debug(f"DFS path from {start_id} to {end_id} has {len(path) - 1} edges")
        return path

    def bfs_path(self, start_id: int, end_id: int) -> List[int]:
        """
        Find a shortest path from start to end using BFS.

        The returned path has the minimum number of edges among all paths
        between the two vertices.

        Args:
            start_id: Starting vertex ID
            end_id: Ending vertex ID

        Returns:
            List of vertex IDs from start_id to end_id inclusive

        Raises:
            VertexNotFoundError: If either vertex is invalid
            PathNotFoundError: If end_id is unreachable from start_id
        """
        start_id = self.graph.validate_vertex(start_id)
        end_id = self.graph.validate_vertex(end_id)
        adjacency_list = self.graph.adjacency_list

        visited = np.zeros(self.graph.vertex_count, dtype=bool)
        path_to = np.full(self.graph.vertex_count, -1, dtype=np.int64)
        distance_to = np.full(self.graph.vertex_count, -1, dtype=np.int64)

        visited[start_id] = True
        distance_to[start_id] = 0
        queue = deque([start_id])

        while queue:
            vertex_id = queue.popleft()

            if vertex_id == end_id:
                break

            for neighbor_id in adjacency_list[vertex_id]:
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    path_to[neighbor_id] = vertex_id
                    distance_to[neighbor_id] = distance_to[vertex_id] + 1
                    queue.append(neighbor_id)

        if not visited[end_id]:
            logger.debug(f"No BFS path from {start_id} to {end_id}")
            raise PathNotFoundError(start_id, end_id)

        # Walk back until the distance-zero vertex, which is start_id
        path = [end_id]
        vertex_id = end_id
        while distance_to[vertex_id] != 0:
            vertex_id = int(path_to[vertex_id])
            path.append(vertex_id)
        path.reverse()

        logger.debug(f"BFS path from {start_id} to {end_id} has {len(path) - 1} edges")
        return path
