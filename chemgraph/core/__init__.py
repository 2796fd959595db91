"""
Core graph data structures.

This module contains the graph protocol and its storage implementations,
without traversal or analysis.
"""

from .graph import Graph, ListGraph

__all__ = ['Graph', 'ListGraph']
