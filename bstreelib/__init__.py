"""BSTreeLib - Unbalanced Binary Search Tree Library.

BSTreeLib provides an ordered binary search tree over any values that
support `<`, with insertion, search, deletion, successor/predecessor
navigation and inorder/preorder/postorder/level-order walks.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstreelib import BinarySearchTree

    tree = BinarySearchTree()
    for value in [50, 30, 70]:
        tree.insert(value)
    tree.get_sorted_data()          # [30, 50, 70]
    tree.delete(tree.find(50))
━━━━━━━━━━━━━━━━━━━━━━━━━━

The library installs no logging handlers; enable the `bstreelib` logger at
DEBUG level to trace structural edits.
"""

__version__ = "0.1.0"

import logging

from .core.node import BSTNode
from .core.tree import BinarySearchTree
from .core.traverser import (
    TreeTraverser,
    InorderTraverser,
    PreorderTraverser,
    PostorderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    DataValueCollector,
    FullNodeCollector,
    DepthCollector,
    CustomCollector,
    WalkBuffer,
)
from .config import (
    TreeConfig,
    WalkConfig,
    WalkMode,
    WalkOrder,
    DataRequirement,
)
from .exceptions import (
    BSTreeError,
    InvalidNodeError,
    NotInTreeError,
    TreeDepthError,
    TreeInvariantError,
    ConfigurationError,
)
from .planning import WalkPlan
from .validation import (
    check_bst_order,
    check_parent_links,
    check_size,
    validate_tree,
    assert_valid_tree,
)
from .api import (
    walk_tree,
    collect_tree_data,
    count_nodes,
    tree_height,
    node_depth,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    'BSTNode',
    'BinarySearchTree',
    'TreeTraverser',
    'InorderTraverser',
    'PreorderTraverser',
    'PostorderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'DataValueCollector',
    'FullNodeCollector',
    'DepthCollector',
    'CustomCollector',
    'WalkBuffer',
    # Config
    'TreeConfig',
    'WalkConfig',
    'WalkMode',
    'WalkOrder',
    'DataRequirement',
    'WalkPlan',
    # Errors
    'BSTreeError',
    'InvalidNodeError',
    'NotInTreeError',
    'TreeDepthError',
    'TreeInvariantError',
    'ConfigurationError',
    # Validation
    'check_bst_order',
    'check_parent_links',
    'check_size',
    'validate_tree',
    'assert_valid_tree',
    # API
    'walk_tree',
    'collect_tree_data',
    'count_nodes',
    'tree_height',
    'node_depth',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
