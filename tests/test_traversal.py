"""
Unit tests for DFS and BFS traversal.
"""

import pytest

from undigraph import GraphTraverser, UndirectedGraph, VertexNotFoundError


class TestDepthFirst:
    """Test recursive and iterative DFS."""

    def test_dfs_recursive_diamond(self, diamond_graph):
        """Recursive DFS follows adjacency order to depth first."""
        assert GraphTraverser(diamond_graph).dfs_recursive(0) == [0, 1, 3, 2, 4]

    def test_dfs_iterative_diamond(self, diamond_graph):
        """Iterative DFS matches the recursive order on the diamond."""
        assert GraphTraverser(diamond_graph).dfs_iterative(0) == [0, 1, 3, 2, 4]

    def test_dfs_forms_agree(self, sample_graphs):
        """Both DFS forms produce identical sequences from every start."""
        for graph in sample_graphs:
            traverser = GraphTraverser(graph)
            for start_id in range(graph.get_vertex_count()):
                assert traverser.dfs_recursive(start_id) == traverser.dfs_iterative(start_id)

    def test_dfs_visits_each_vertex_once(self, sample_graphs):
        """Parallel edges and self-loops never produce duplicates."""
        for graph in sample_graphs:
            traverser = GraphTraverser(graph)
            for start_id in range(graph.get_vertex_count()):
                vertices = traverser.dfs_iterative(start_id)
                assert len(vertices) == len(set(vertices))

    def test_dfs_isolated_vertex(self, disconnected_graph):
        """A vertex with no edges visits only itself."""
        traverser = GraphTraverser(disconnected_graph)
        assert traverser.dfs_recursive(2) == [2]
        assert traverser.dfs_iterative(2) == [2]

    def test_dfs_follows_insertion_order(self):
        """Changing insertion order changes DFS order."""
        graph = UndirectedGraph.from_edges(4, [(0, 3), (0, 1), (1, 2)])
        assert GraphTraverser(graph).dfs_iterative(0) == [0, 3, 1, 2]

    def test_dfs_deep_chain_iterative(self):
        """Iterative DFS handles paths longer than the recursion limit."""
        vertex_count = 5000
        graph = UndirectedGraph.from_edges(vertex_count, [(v, v + 1) for v in range(vertex_count - 1)])
        assert GraphTraverser(graph).dfs_iterative(0) == list(range(vertex_count))

    def test_dfs_results_are_plain_ints(self, diamond_graph):
        """Results contain Python ints."""
        traverser = GraphTraverser(diamond_graph)
        assert all(type(v) is int for v in traverser.dfs_recursive(0))
        assert all(type(v) is int for v in traverser.dfs_iterative(0))


class TestBreadthFirst:
    """Test BFS."""

    def test_bfs_diamond(self, diamond_graph):
        """BFS visits the diamond in level order."""
        assert GraphTraverser(diamond_graph).bfs(0) == [0, 1, 2, 3, 4]

    def test_bfs_from_tail(self, diamond_graph):
        """Ties are broken by discovery order."""
        assert GraphTraverser(diamond_graph).bfs(4) == [4, 3, 1, 2, 0]

    def test_bfs_distance_non_decreasing(self, sample_graphs, distances_from):
        """BFS output never goes back to a closer level."""
        for graph in sample_graphs:
            traverser = GraphTraverser(graph)
            for start_id in range(graph.get_vertex_count()):
                distances = distances_from(graph, start_id)
                levels = [distances[v] for v in traverser.bfs(start_id)]
                assert levels == sorted(levels)

    def test_bfs_covers_component(self, sample_graphs, distances_from):
        """BFS returns exactly the connected component of start."""
        for graph in sample_graphs:
            traverser = GraphTraverser(graph)
            for start_id in range(graph.get_vertex_count()):
                vertices = traverser.bfs(start_id)
                assert len(vertices) == len(set(vertices))
                assert set(vertices) == set(distances_from(graph, start_id))
                assert set(vertices) == set(traverser.dfs_iterative(start_id))

    def test_bfs_disconnected(self, disconnected_graph):
        """BFS stays inside the start component."""
        traverser = GraphTraverser(disconnected_graph)
        assert traverser.bfs(0) == [0, 1]
        assert traverser.bfs(2) == [2]


class TestTraversalValidation:
    """Test start-vertex validation."""

    @pytest.mark.parametrize("method", ["dfs_recursive", "dfs_iterative", "bfs"])
    @pytest.mark.parametrize("start_id", [-1, 5, 42])
    def test_invalid_start_raises(self, diamond_graph, method, start_id):
        """Every traversal rejects an out-of-range start."""
        traverser = GraphTraverser(diamond_graph)
        with pytest.raises(VertexNotFoundError):
            getattr(traverser, method)(start_id)

    def test_traversal_does_not_mutate_graph(self, diamond_graph):
        """Traversals leave adjacency and counts unchanged."""
        before = diamond_graph.describe()
        traverser = GraphTraverser(diamond_graph)
        traverser.dfs_recursive(0)
        traverser.dfs_iterative(2)
        traverser.bfs(4)
        assert diamond_graph.describe() == before

    def test_traversal_sees_later_edges(self, disconnected_graph):
        """A traverser reads the graph's current edges on each call."""
        traverser = GraphTraverser(disconnected_graph)
        assert traverser.bfs(0) == [0, 1]
        disconnected_graph.add_edge(1, 2)
        assert traverser.bfs(0) == [0, 1, 2]
