"""Test fixtures for BSTreeLib consumers.

These fixtures give test suites a stable way to build trees and inspect
their shape without reaching into BinarySearchTree internals.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..config import TreeConfig
from ..core.node import BSTNode
from ..core.tree import BinarySearchTree
from ..validation import validate_tree


class TreeTestHelper:
    """Public test fixture for tree shape verification.

    Example:
        helper = TreeTestHelper.from_values([50, 30, 70])
        assert helper.shape() == {50: (30, 70), 30: (None, None), 70: (None, None)}
        assert helper.is_sound()
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: The tree to inspect
        """
        self.tree = tree

    @classmethod
    def from_values(cls, values: Iterable[Any],
                    config: Optional[TreeConfig] = None) -> 'TreeTestHelper':
        """Build a tree by inserting values one at a time, in order."""
        tree = BinarySearchTree(config)
        for value in values:
            tree.insert(value)
        return cls(tree)

    def node(self, value: Any) -> BSTNode:
        """Return the node holding value.

        Raises:
            LookupError: If no node holds value
        """
        found = self.tree.find(value)
        if found is None:
            raise LookupError(f"{value!r} is not in the tree")
        return found

    def shape(self) -> Dict[Any, tuple]:
        """Map each payload to its (left payload, right payload).

        Only meaningful for trees without duplicates.
        """
        result = {}
        for node, _ in self._nodes():
            result[node.data] = (
                node.left.data if node.left is not None else None,
                node.right.data if node.right is not None else None,
            )
        return result

    def levels(self) -> List[List[Any]]:
        """Payloads grouped by depth, left to right."""
        rows: List[List[Any]] = []
        for node, depth in self._nodes():
            if depth == len(rows):
                rows.append([])
            rows[depth].append(node.data)
        return rows

    def problems(self) -> List[str]:
        return validate_tree(self.tree)

    def is_sound(self) -> bool:
        """Check all structural invariants at once."""
        return not self.problems()

    def _nodes(self):
        # Breadth-first so levels() can append rows in order
        frontier = [(self.tree.root, 0)] if self.tree.root is not None else []
        while frontier:
            next_frontier = []
            for node, depth in frontier:
                yield node, depth
                for child in node.children():
                    next_frontier.append((child, depth + 1))
            frontier = next_frontier
