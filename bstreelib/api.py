"""High-level API for BSTreeLib.

This module provides simple, functional interfaces for common questions
about a tree. These functions wrap WalkPlan and the traversers for ease of
use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Tuple, Union

from .config import WalkConfig, WalkOrder, DataRequirement
from .core.node import BSTNode
from .core.traverser import parse_order
from .core.tree import BinarySearchTree
from .planning import WalkPlan


def walk_tree(
    tree: BinarySearchTree,
    order: Union[WalkOrder, str] = WalkOrder.INORDER,
    start: Optional[BSTNode] = None,
    **kwargs
) -> Iterator[BSTNode]:
    """Simple interface for walking a tree.

    Args:
        tree: Tree to walk
        order: Walk order (inorder, preorder, postorder, level)
        start: Subtree root (defaults to tree.root)
        **kwargs: Additional WalkConfig options (mode, max_depth, ...).
            data_requirement is not accepted; walk_tree always yields nodes,
            use collect_tree_data to collect anything else.

    Yields:
        Nodes in the requested order

    Example:
        >>> tree = BinarySearchTree()
        >>> for value in [2, 1, 3]:
        ...     _ = tree.insert(value)
        >>> [node.data for node in walk_tree(tree, "preorder")]
        [2, 1, 3]
    """
    if 'data_requirement' in kwargs:
        raise TypeError("walk_tree() always yields nodes; "
                        "use collect_tree_data() to pick a data_requirement")
    for node, _ in collect_tree_data(tree, order, start,
                                     data_requirement=DataRequirement.FULL_NODE,
                                     **kwargs):
        yield node


def collect_tree_data(
    tree: BinarySearchTree,
    order: Union[WalkOrder, str] = WalkOrder.INORDER,
    start: Optional[BSTNode] = None,
    data_requirement: DataRequirement = DataRequirement.DATA,
    **kwargs
) -> Iterator[Tuple[BSTNode, Any]]:
    """Walk a tree and collect specified data.

    Similar to walk_tree but yields both nodes and collected data.

    Example:
        >>> tree = BinarySearchTree()
        >>> for value in [2, 1, 3]:
        ...     _ = tree.insert(value)
        >>> [data for _, data in collect_tree_data(tree, "level",
        ...                                        data_requirement=DataRequirement.DEPTH)]
        [(2, 0), (1, 1), (3, 1)]
    """
    kwargs.setdefault('mode', tree.config.walk_mode)
    kwargs.setdefault('max_recursion_depth', tree.config.max_recursion_depth)
    config = WalkConfig(order=parse_order(order),
                        data_requirement=data_requirement,
                        **kwargs)
    plan = WalkPlan(config)
    root = tree.root if start is None else start
    yield from plan.execute(root)


def count_nodes(tree: BinarySearchTree, start: Optional[BSTNode] = None) -> int:
    """Count nodes by walking, rather than trusting len(tree).

    Args:
        tree: Tree to count
        start: Subtree root (defaults to tree.root)

    Returns:
        Number of reachable nodes
    """
    count = 0
    for _ in walk_tree(tree, WalkOrder.PREORDER, start):
        count += 1
    return count


def tree_height(tree: BinarySearchTree, start: Optional[BSTNode] = None) -> int:
    """Height of the tree in edges: -1 when empty, 0 for a single node."""
    height = -1
    for _, (_, depth) in collect_tree_data(tree, WalkOrder.PREORDER, start,
                                           data_requirement=DataRequirement.DEPTH):
        height = max(height, depth)
    return height


def node_depth(node: BSTNode) -> int:
    """Number of parent links between node and its root (root = 0)."""
    depth = 0
    current = node.parent
    while current is not None:
        depth += 1
        current = current.parent
    return depth


def find_nodes(
    tree: BinarySearchTree,
    predicate: Callable[[BSTNode], bool],
    order: Union[WalkOrder, str] = WalkOrder.INORDER
) -> Iterator[BSTNode]:
    """Find nodes that match a predicate.

    Example:
        >>> tree = BinarySearchTree()
        >>> for value in [5, 2, 8, 4]:
        ...     _ = tree.insert(value)
        >>> [n.data for n in find_nodes(tree, lambda n: n.data % 2 == 0)]
        [2, 4, 8]
    """
    for node in walk_tree(tree, order):
        if predicate(node):
            yield node


def get_leaf_nodes(tree: BinarySearchTree) -> Iterator[BSTNode]:
    """Get all leaf nodes, left to right."""
    return find_nodes(tree, lambda node: node.is_leaf())


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with node_count, leaf_count, internal_count, height,
        min and max (None for an empty tree) and per-depth counts
    """
    stats: Dict[str, Any] = {
        'node_count': 0,
        'leaf_count': 0,
        'height': -1,
        'min': None,
        'max': None,
        'depths': {},
    }

    for node, (_, level) in collect_tree_data(tree, WalkOrder.LEVEL_ORDER,
                                              data_requirement=DataRequirement.DEPTH):
        stats['node_count'] += 1
        if node.is_leaf():
            stats['leaf_count'] += 1
        stats['height'] = max(stats['height'], level)
        stats['depths'][level] = stats['depths'].get(level, 0) + 1

    stats['internal_count'] = stats['node_count'] - stats['leaf_count']
    if tree.root is not None:
        stats['min'] = tree.tree_minimum(tree.root).data
        stats['max'] = tree.tree_maximum(tree.root).data

    return stats
