"""Tree traversal strategies for BSTreeLib.

Traversers implement the different orders for walking a binary search tree.
Each one can descend with generator recursion or with an explicit stack;
the stack form is the default because a degenerate tree (values inserted in
sorted order) is as deep as it is large.
"""

import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import WalkMode, WalkOrder, DEFAULT_MAX_RECURSION_DEPTH
from ..exceptions import TreeDepthError
from .node import BSTNode

# Frames kept free for whoever consumes a recursive walk
RECURSION_HEADROOM = 50


def _stack_depth() -> int:
    depth = 0
    frame = sys._getframe(1)
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Subclasses provide `_walk_recursive` and `_walk_iterative`; `traverse`
    picks one according to the walk mode.
    """

    def __init__(self,
                 mode: WalkMode = WalkMode.ITERATIVE,
                 max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH):
        """Initialize traverser.

        Args:
            mode: Recursive or explicit-stack descent
            max_recursion_depth: Deepest level a recursive walk may reach
        """
        self.mode = mode
        self.max_recursion_depth = max_recursion_depth
        self._ceiling = max_recursion_depth

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse the subtree rooted at root.

        Args:
            root: Starting node (None yields nothing)
            max_depth: Deepest level to visit (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if root is None:
            return iter(())
        if self.mode == WalkMode.RECURSIVE:
            self._ceiling = self.effective_recursion_depth()
            return self._walk_recursive(root, 0, max_depth)
        return self._walk_iterative(root, max_depth)

    def values(self, root: Optional[BSTNode]) -> Iterator:
        """Yield just the node payloads in traversal order."""
        for node, _ in self.traverse(root):
            yield node.data

    def _children_within(self, node: BSTNode, depth: int,
                         max_depth: Optional[int]) -> Tuple[Optional[BSTNode], Optional[BSTNode]]:
        if max_depth is not None and depth >= max_depth:
            return None, None
        return node.left, node.right

    def effective_recursion_depth(self) -> int:
        """Deepest level a recursive walk started here can reach.

        This is max_recursion_depth, lowered when the interpreter's
        recursion limit leaves less room than that below the current frame.
        """
        available = sys.getrecursionlimit() - _stack_depth() - RECURSION_HEADROOM
        return max(0, min(self.max_recursion_depth, available))

    def _check_recursion(self, depth: int) -> None:
        if depth > self._ceiling:
            raise TreeDepthError(self._ceiling)

    @abstractmethod
    def _walk_recursive(self, node: BSTNode, depth: int,
                        max_depth: Optional[int]) -> Iterator[Tuple[BSTNode, int]]:
        pass

    @abstractmethod
    def _walk_iterative(self, root: BSTNode,
                        max_depth: Optional[int]) -> Iterator[Tuple[BSTNode, int]]:
        pass


class InorderTraverser(TreeTraverser):
    """Inorder (left, node, right) traversal.

    Visits payloads in ascending order, so this is the sorted walk.
    """

    def _walk_recursive(self, node, depth, max_depth):
        self._check_recursion(depth)
        left, right = self._children_within(node, depth, max_depth)
        if left is not None:
            yield from self._walk_recursive(left, depth + 1, max_depth)
        yield (node, depth)
        if right is not None:
            yield from self._walk_recursive(right, depth + 1, max_depth)

    def _walk_iterative(self, root, max_depth):
        stack: List[Tuple[BSTNode, int]] = []
        current: Optional[BSTNode] = root
        depth = 0
        while stack or current is not None:
            # Run down the left spine, remembering each node
            while current is not None:
                stack.append((current, depth))
                current, _ = self._children_within(current, depth, max_depth)
                depth += 1
            node, depth = stack.pop()
            yield (node, depth)
            _, current = self._children_within(node, depth, max_depth)
            depth += 1


class PreorderTraverser(TreeTraverser):
    """Preorder (node, left, right) traversal.

    Parent before children. Re-inserting a preorder sequence into an empty
    tree rebuilds the same shape.
    """

    def _walk_recursive(self, node, depth, max_depth):
        self._check_recursion(depth)
        yield (node, depth)
        left, right = self._children_within(node, depth, max_depth)
        if left is not None:
            yield from self._walk_recursive(left, depth + 1, max_depth)
        if right is not None:
            yield from self._walk_recursive(right, depth + 1, max_depth)

    def _walk_iterative(self, root, max_depth):
        stack: List[Tuple[BSTNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)
            left, right = self._children_within(node, depth, max_depth)
            # Right pushed first so left is popped first
            if right is not None:
                stack.append((right, depth + 1))
            if left is not None:
                stack.append((left, depth + 1))


class PostorderTraverser(TreeTraverser):
    """Postorder (left, right, node) traversal.

    Children before parent. Good for teardown or subtree aggregation.
    """

    def _walk_recursive(self, node, depth, max_depth):
        self._check_recursion(depth)
        left, right = self._children_within(node, depth, max_depth)
        if left is not None:
            yield from self._walk_recursive(left, depth + 1, max_depth)
        if right is not None:
            yield from self._walk_recursive(right, depth + 1, max_depth)
        yield (node, depth)

    def _walk_iterative(self, root, max_depth):
        # Each entry carries a flag telling whether its children were pushed
        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue
            stack.append((node, depth, True))
            left, right = self._children_within(node, depth, max_depth)
            if right is not None:
                stack.append((right, depth + 1, False))
            if left is not None:
                stack.append((left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal, left to right within each level.

    Uses a queue in both modes; there is no recursion to bound.
    """

    def _walk_recursive(self, node, depth, max_depth):
        return self._walk_iterative(node, max_depth)

    def _walk_iterative(self, root, max_depth):
        queue: Deque[Tuple[BSTNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            for child in self._children_within(node, depth, max_depth):
                if child is not None:
                    queue.append((child, depth + 1))


_TRAVERSERS = {
    WalkOrder.INORDER: InorderTraverser,
    WalkOrder.PREORDER: PreorderTraverser,
    WalkOrder.POSTORDER: PostorderTraverser,
    WalkOrder.LEVEL_ORDER: LevelOrderTraverser,
}

_ORDER_NAMES = {
    'in': WalkOrder.INORDER,
    'inorder': WalkOrder.INORDER,
    'sorted': WalkOrder.INORDER,
    'pre': WalkOrder.PREORDER,
    'preorder': WalkOrder.PREORDER,
    'post': WalkOrder.POSTORDER,
    'postorder': WalkOrder.POSTORDER,
    'level': WalkOrder.LEVEL_ORDER,
    'level_order': WalkOrder.LEVEL_ORDER,
    'bfs': WalkOrder.LEVEL_ORDER,
}


def parse_order(order: Union[WalkOrder, str]) -> WalkOrder:
    """Parse a walk order from string or enum.

    Raises:
        ValueError: If order name is not recognized
    """
    if isinstance(order, WalkOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower not in _ORDER_NAMES:
        raise ValueError(
            f"Unknown walk order: {order}. "
            f"Choose from: {', '.join(_ORDER_NAMES.keys())}"
        )
    return _ORDER_NAMES[order_lower]


def create_traverser(order: Union[WalkOrder, str],
                     mode: WalkMode = WalkMode.ITERATIVE,
                     max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH) -> TreeTraverser:
    """Create a traverser instance by order name or enum.

    Args:
        order: Walk order (inorder, preorder, postorder, level)
        mode: Recursive or explicit-stack descent
        max_recursion_depth: Ceiling for recursive walks

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)](mode, max_recursion_depth)
