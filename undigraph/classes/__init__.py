"""
Shared types used throughout the undigraph package.

This module contains the exception hierarchy raised by graph operations.
"""

from .exceptions import GraphError, VertexNotFoundError, PathNotFoundError

__all__ = [
    'GraphError',
    'VertexNotFoundError',
    'PathNotFoundError',
]
