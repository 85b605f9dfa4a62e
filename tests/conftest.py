"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from undigraph import UndirectedGraph, pyundigraph


@pytest.fixture
def diamond_edges() -> list[tuple[int, int]]:
    """Return edges of a 5-vertex diamond with a tail: 0-{1,2}-3-4."""
    return [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]


@pytest.fixture
def diamond_graph(diamond_edges) -> UndirectedGraph:
    """Return the diamond graph built from diamond_edges."""
    return UndirectedGraph.from_edges(5, diamond_edges)


@pytest.fixture
def disconnected_graph() -> UndirectedGraph:
    """Return a 3-vertex graph with a single edge (0, 1)."""
    return UndirectedGraph.from_edges(3, [(0, 1)])


@pytest.fixture
def sample_graphs() -> list[UndirectedGraph]:
    """Return a mix of graph shapes for property-style checks."""
    return [
        UndirectedGraph.from_edges(1, []),
        UndirectedGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)]),
        UndirectedGraph.from_edges(5, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]),
        UndirectedGraph.from_edges(6, [(0, 3), (0, 1), (3, 1), (1, 2), (2, 0), (4, 5)]),
        UndirectedGraph.from_edges(4, [(0, 0), (0, 1), (0, 1), (1, 2), (2, 2), (3, 1)]),
        UndirectedGraph.from_edges(
            8, [(0, 7), (7, 6), (6, 5), (0, 1), (1, 2), (2, 5), (5, 4), (0, 3), (3, 4)]
        ),
    ]


@pytest.fixture
def facade_graph(diamond_edges) -> pyundigraph:
    """Return the diamond graph wrapped in the pyundigraph facade."""
    return pyundigraph.from_edges(5, diamond_edges)


@pytest.fixture
def distances_from():
    """Return a reference helper computing hop distances level by level."""

    def compute(graph: UndirectedGraph, start_id: int) -> dict[int, int]:
        distances = {start_id: 0}
        frontier = [start_id]
        while frontier:
            next_frontier = []
            for vertex_id in frontier:
                for neighbor_id in graph.adjacency_list[vertex_id]:
                    if neighbor_id not in distances:
                        distances[neighbor_id] = distances[vertex_id] + 1
                        next_frontier.append(neighbor_id)
            frontier = next_frontier
        return distances

    return compute
