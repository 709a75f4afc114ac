"""Unbalanced binary search tree.

BinarySearchTree owns the root reference and every algorithm that touches
links: insertion, search, minimum/maximum, successor/predecessor, subtree
transplant, deletion and the three depth-first walks. BSTNode stays passive.

Ties go right: a value equal to a node's payload is placed in that node's
right subtree, so duplicates are kept in insertion order by an inorder walk.
"""

import logging
from typing import Any, Iterator, List, Optional

from ..config import TreeConfig, WalkOrder
from ..exceptions import ConfigurationError, InvalidNodeError, NotInTreeError
from .collector import WalkBuffer
from .node import BSTNode
from .traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)


def _same_key(a: Any, b: Any) -> bool:
    """Equality under the ordering used for descent."""
    return not (a < b) and not (b < a)


class BinarySearchTree:
    """An unbalanced binary search tree over totally ordered values.

    Insertion order determines shape; there is no rebalancing, so the
    worst-case height is n - 1.

    Example:
        >>> tree = BinarySearchTree()
        >>> for value in [5, 3, 8, 1, 4, 7, 9]:
        ...     _ = tree.insert(value)
        >>> tree.get_sorted_data()
        [1, 3, 4, 5, 7, 8, 9]
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config or TreeConfig()
        errors = self.config.validate()
        if errors:
            raise ConfigurationError(errors)

        self.root: Optional[BSTNode] = None
        self._size = 0

        self._inorder_buffer = WalkBuffer("inorder")
        self._preorder_buffer = WalkBuffer("preorder")
        self._postorder_buffer = WalkBuffer("postorder")

    # Construction & search

    def insert(self, value: Any) -> BSTNode:
        """Insert value as a new node and return that node.

        Descends left while value < node.data and right otherwise until a
        free child slot is found.

        Time complexity: O(h)
        """
        new = BSTNode(value)
        parent = None
        x = self.root
        while x is not None:
            parent = x
            if value < x.data:
                x = x.left
            else:
                x = x.right

        new.parent = parent
        if parent is None:
            self.root = new
        elif value < parent.data:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        logger.debug("inserted %r under %r", value, parent)
        return new

    def search(self, from_node: Optional[BSTNode], value: Any) -> Optional[BSTNode]:
        """Find a node holding value in the subtree rooted at from_node.

        A node matches when neither value < node.data nor node.data < value,
        the same comparison that steers the descent. Returns None if
        from_node is None or no node matches.

        Time complexity: O(h)
        """
        x = from_node
        while x is not None and not _same_key(value, x.data):
            if value < x.data:
                x = x.left
            else:
                x = x.right
        return x

    def find(self, value: Any) -> Optional[BSTNode]:
        """Search from the root."""
        return self.search(self.root, value)

    def contains(self, value: Any) -> bool:
        return self.find(value) is not None

    def tree_minimum(self, from_node: BSTNode) -> BSTNode:
        """Return the node with the smallest payload under from_node.

        Raises:
            InvalidNodeError: If from_node is None (e.g. empty tree root)

        Time complexity: O(h)
        """
        if from_node is None:
            raise InvalidNodeError("tree_minimum")
        x = from_node
        while x.left is not None:
            x = x.left
        return x

    def tree_maximum(self, from_node: BSTNode) -> BSTNode:
        """Return the node with the largest payload under from_node.

        Raises:
            InvalidNodeError: If from_node is None (e.g. empty tree root)

        Time complexity: O(h)
        """
        if from_node is None:
            raise InvalidNodeError("tree_maximum")
        x = from_node
        while x.right is not None:
            x = x.right
        return x

    # Order-statistic navigation

    def tree_successor(self, node: BSTNode) -> Optional[BSTNode]:
        """Return the node that follows node in sorted order, or None.

        Time complexity: O(h)
        """
        self._require_member("tree_successor", node)
        if node.right is not None:
            return self.tree_minimum(node.right)
        x = node
        y = x.parent
        while y is not None and x is y.right:
            x = y
            y = y.parent
        return y

    def tree_predecessor(self, node: BSTNode) -> Optional[BSTNode]:
        """Return the node that precedes node in sorted order, or None.

        Time complexity: O(h)
        """
        self._require_member("tree_predecessor", node)
        if node.left is not None:
            return self.tree_maximum(node.left)
        x = node
        y = x.parent
        while y is not None and x is y.left:
            x = y
            y = y.parent
        return y

    # Deletion

    def transplant(self, old: BSTNode, new: Optional[BSTNode]) -> None:
        """Replace the subtree rooted at old with the subtree rooted at new.

        new may be None. old's own links are left as they were; the caller
        fixes them up.

        Time complexity: O(1)
        """
        self._require_member("transplant", old)
        self._transplant(old, new)

    def _transplant(self, old: BSTNode, new: Optional[BSTNode]) -> None:
        if old.parent is None:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent
        logger.debug("transplanted %r into position of %r", new, old)

    def delete(self, node: BSTNode) -> BSTNode:
        """Remove node from the tree and return it with its links cleared.

        With two children, node is replaced by the minimum of its right
        subtree, which keeps every other node's relative order.

        Raises:
            InvalidNodeError: If node is None
            NotInTreeError: If node is detectably not part of this tree

        Time complexity: O(h)
        """
        self._require_member("delete", node)
        if node.left is None:
            self._transplant(node, node.right)
        elif node.right is None:
            self._transplant(node, node.left)
        else:
            y = self.tree_minimum(node.right)
            if y.parent is not node:
                self._transplant(y, y.right)
                y.right = node.right
                y.right.parent = y
            self._transplant(node, y)
            y.left = node.left
            y.left.parent = y

        node.left = node.right = node.parent = None
        self._size -= 1
        logger.debug("deleted %r, %d nodes remain", node, self._size)
        return node

    def delete_value(self, value: Any) -> Optional[BSTNode]:
        """Delete the first node found holding value; None if absent."""
        node = self.find(value)
        if node is not None:
            node = self.delete(node)
        return node

    def owns(self, node: Optional[BSTNode]) -> bool:
        """Check whether node is reachable from this tree's root.

        Walks parent links upward, checking that each parent points back.

        Time complexity: O(h)
        """
        if node is None:
            return False
        x = node
        while x.parent is not None:
            if x is not x.parent.left and x is not x.parent.right:
                return False
            x = x.parent
        return x is self.root

    def _require_member(self, operation: str, node: Optional[BSTNode]) -> None:
        if node is None:
            raise InvalidNodeError(operation)
        if self.config.check_membership:
            if not self.owns(node):
                raise NotInTreeError(operation, node)
        elif node.parent is None and node is not self.root:
            # Detached node or a root of another tree
            raise NotInTreeError(operation, node)

    # Traversals

    def _traverser(self, order: WalkOrder) -> TreeTraverser:
        return create_traverser(order, self.config.walk_mode,
                                self.config.max_recursion_depth)

    def inorder_tree_walk(self, node: Optional[BSTNode], should_clear: bool = True) -> List[Any]:
        """Walk the subtree at node inorder into the inorder buffer.

        Args:
            node: Subtree root; pass tree.root for the whole tree
            should_clear: Reset the buffer first; False appends to the
                result of earlier walks

        Returns:
            Copy of the buffer after the walk
        """
        values = self._traverser(WalkOrder.INORDER).values(node)
        return self._inorder_buffer.fill(values, should_clear)

    def preorder_tree_walk(self, node: Optional[BSTNode], should_clear: bool = True) -> List[Any]:
        """Walk the subtree at node preorder into the preorder buffer."""
        values = self._traverser(WalkOrder.PREORDER).values(node)
        return self._preorder_buffer.fill(values, should_clear)

    def postorder_tree_walk(self, node: Optional[BSTNode], should_clear: bool = True) -> List[Any]:
        """Walk the subtree at node postorder into the postorder buffer."""
        values = self._traverser(WalkOrder.POSTORDER).values(node)
        return self._postorder_buffer.fill(values, should_clear)

    def get_sorted_data(self) -> List[Any]:
        """Return every payload in ascending order as a new list."""
        return self.inorder_tree_walk(self.root, True)

    def get_preorder_walk_result(self) -> List[Any]:
        return self.preorder_tree_walk(self.root, True)

    def get_postorder_walk_result(self) -> List[Any]:
        return self.postorder_tree_walk(self.root, True)

    def get_inorder_walk_result(self) -> List[Any]:
        """Return the inorder buffer as left by the last inorder walk."""
        return self._inorder_buffer.snapshot()

    # Python protocol

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[Any]:
        return self._traverser(WalkOrder.INORDER).values(self.root)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r}, size={self._size})"
