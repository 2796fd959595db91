"""
Core data classes for molecular graph representation.

This module contains the node type and the element records used as node
payloads.
"""

from .node import Node
from .element import Element, Isotope

__all__ = [
    'Node',
    'Element',
    'Isotope',
]
