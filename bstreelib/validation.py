"""Structural invariant checks for BSTreeLib.

Each check returns a list of problems (empty if the tree is sound), the
same convention TreeConfig.validate() uses. assert_valid_tree() turns a
non-empty list into a TreeInvariantError.

All checks walk with an explicit stack, so they work on degenerate trees.
"""

from typing import Any, List, Optional, Set, Tuple

from .core.node import BSTNode
from .core.tree import BinarySearchTree
from .exceptions import TreeInvariantError

# (node, low, high, has_low, has_high): low <= data < high
_Bounded = Tuple[BSTNode, Optional[Any], Optional[Any], bool, bool]


def check_bst_order(tree: BinarySearchTree) -> List[str]:
    """Check that left subtrees hold smaller values and right subtrees
    hold greater-or-equal values, for every node.
    """
    problems = []
    if tree.root is None:
        return problems

    # Each entry carries the half-open range its payload must fall into
    stack: List[_Bounded] = [(tree.root, None, None, False, False)]
    seen: Set[int] = set()
    while stack:
        node, low, high, has_low, has_high = stack.pop()
        if id(node) in seen:
            # Cycles are reported by check_parent_links
            continue
        seen.add(id(node))

        if has_low and node.data < low:
            problems.append(f"{node!r} is smaller than ancestor bound {low!r}")
        if has_high and not node.data < high:
            problems.append(f"{node!r} is not smaller than ancestor bound {high!r}")

        if node.left is not None:
            stack.append((node.left, low, node.data, has_low, True))
        if node.right is not None:
            stack.append((node.right, node.data, high, True, has_high))
    return problems


def check_parent_links(tree: BinarySearchTree) -> List[str]:
    """Check parent back-references and that every node has one parent."""
    problems = []
    root = tree.root
    if root is None:
        return problems

    if root.parent is not None:
        problems.append(f"root {root!r} has parent {root.parent!r}")

    stack = [root]
    seen: Set[int] = {id(root)}
    while stack:
        node = stack.pop()
        for child in node.children():
            if child.parent is not node:
                problems.append(
                    f"{child!r} is a child of {node!r} but its parent is {child.parent!r}"
                )
            if id(child) in seen:
                problems.append(f"{child!r} is reachable through more than one parent")
                continue
            seen.add(id(child))
            stack.append(child)
    return problems


def check_size(tree: BinarySearchTree) -> List[str]:
    """Check that len(tree) matches the number of reachable nodes."""
    count = 0
    stack = [tree.root] if tree.root is not None else []
    seen: Set[int] = set()
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        count += 1
        stack.extend(node.children())
    if count != len(tree):
        return [f"tree reports {len(tree)} nodes but {count} are reachable"]
    return []


def validate_tree(tree: BinarySearchTree) -> List[str]:
    """Run every structural check.

    Returns:
        List of problems (empty if the tree is sound)
    """
    return check_parent_links(tree) + check_bst_order(tree) + check_size(tree)


def assert_valid_tree(tree: BinarySearchTree) -> None:
    """Raise TreeInvariantError if any structural check fails."""
    problems = validate_tree(tree)
    if problems:
        raise TreeInvariantError(problems)
