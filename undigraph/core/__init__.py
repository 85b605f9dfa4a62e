"""
Core graph data structures and the public facade.

This module contains the adjacency-list representation and the
pyundigraph class that ties storage and analysis together.
"""

from .graph import UndirectedGraph

__all__ = ['UndirectedGraph']
