"""Core components of BSTreeLib.

This module contains the node, the tree, and the traversal and collection
machinery the tree is built on.
"""

from .node import BSTNode
from .tree import BinarySearchTree
from .traverser import (
    TreeTraverser,
    InorderTraverser,
    PreorderTraverser,
    PostorderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    DataValueCollector,
    FullNodeCollector,
    DepthCollector,
    CustomCollector,
    WalkBuffer,
)

__all__ = [
    "BSTNode",
    "BinarySearchTree",
    "TreeTraverser",
    "InorderTraverser",
    "PreorderTraverser",
    "PostorderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "DataValueCollector",
    "FullNodeCollector",
    "DepthCollector",
    "CustomCollector",
    "WalkBuffer",
]
