"""BSTNode, the unit of storage in BSTreeLib.

The node is intentionally kept simple - it's a data container with links.
All ordering and link-consistency logic lives in BinarySearchTree.
"""

from typing import Any, Optional


class BSTNode:
    """A node of a binary search tree.

    Holds one payload and links to its left child, right child and parent.
    A missing child is None; the root's parent is None.
    """

    def __init__(self, data: Any,
                 left: Optional['BSTNode'] = None,
                 right: Optional['BSTNode'] = None,
                 parent: Optional['BSTNode'] = None):
        self.data = data
        self.left = left
        self.right = right
        self.parent = parent

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def has_both_children(self) -> bool:
        return self.left is not None and self.right is not None

    def children(self):
        """Return the present children, left first."""
        return [child for child in (self.left, self.right) if child is not None]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"
