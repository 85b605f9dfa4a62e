"""
Graph analysis modules for traversal and path finding.
"""

from .traversal import GraphTraverser
from .pathfinding import PathFinder

__all__ = ['GraphTraverser', 'PathFinder']
