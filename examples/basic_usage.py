#!/usr/bin/env python3
"""
Basic usage example for BSTreeLib.

This example demonstrates:
- Building a tree from command line values
- Sorted, preorder and postorder walks
- Stepping through values with successor navigation
- Deleting a node and checking the tree stays sound
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinarySearchTree, get_tree_stats, validate_tree


def main():
    """Demonstrate the main tree operations."""
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    values = [int(arg) for arg in args] or [50, 30, 70, 20, 40, 60, 80]

    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)

    print(f"Inserted: {values}")
    print("-" * 50)
    print(f"  Sorted:    {tree.get_sorted_data()}")
    print(f"  Preorder:  {tree.get_preorder_walk_result()}")
    print(f"  Postorder: {tree.get_postorder_walk_result()}")

    # Walk forward from the minimum using successor links
    node = tree.tree_minimum(tree.root)
    steps = []
    while node is not None:
        steps.append(str(node.data))
        node = tree.tree_successor(node)
    print(f"  Successor chain: {' -> '.join(steps)}")

    stats = get_tree_stats(tree)
    print("\nTree Summary:")
    print(f"  Nodes: {stats['node_count']}")
    print(f"  Leaves: {stats['leaf_count']}")
    print(f"  Height: {stats['height']}")

    # Delete the root and show the replacement
    removed = tree.delete(tree.root)
    print(f"\nDeleted root {removed.data}; new root is "
          f"{tree.root.data if tree.root is not None else None}")
    print(f"  Sorted:    {tree.get_sorted_data()}")

    problems = validate_tree(tree)
    print(f"  Invariants: {'OK' if not problems else problems}")
    return 0 if not problems else 1


if __name__ == "__main__":
    sys.exit(main())
