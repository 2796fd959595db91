"""
Node representation for molecular graphs.
"""

from typing import Any, Optional


class Node:
    """
    Identity-bearing graph node.

    A node carries a display name and an opaque payload (an atom descriptor,
    an element record, ...). The graph never looks inside ``data``. Equality
    and hashing are by instance, so two nodes with the same name and payload
    are still different nodes.
    """

    def __init__(self, name: Optional[str] = None, data: Any = None):
        """
        Initialize a node.

        Args:
            name: Optional display label
            data: Optional payload owned by the node
        """
        self.name = name
        self.data = data

    def __repr__(self) -> str:
        if self.name is None:
            return f"Node(at 0x{id(self):x})"
        return f"Node({self.name!r})"
