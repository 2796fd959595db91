"""
Traversal and connectivity analysis for molecular graphs.
"""

from .traversal import GraphSearch, TraversalControl, TraversalStrategy
from .connectivity import connected_component, connected_components, is_connected

__all__ = [
    'GraphSearch',
    'TraversalControl',
    'TraversalStrategy',
    'connected_component',
    'connected_components',
    'is_connected',
]
