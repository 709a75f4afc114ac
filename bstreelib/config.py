"""Configuration system for BSTreeLib.

This module defines how users tune a tree and its walks: which traversal
order to use, whether walks recurse or run on an explicit stack, what data
to collect from visited nodes, and how strictly node arguments are checked.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Any, List


class WalkMode(Enum):
    """How a traversal descends the tree.

    Recursion depth equals tree height, which is unbounded for sorted
    insertion orders, so the iterative mode is the default.
    """
    ITERATIVE = "iterative"     # Explicit stack, no depth ceiling
    RECURSIVE = "recursive"     # Generator recursion, bounded by max_recursion_depth


class WalkOrder(Enum):
    """Order in which a traversal visits nodes."""
    INORDER = "inorder"         # Left, node, right (sorted)
    PREORDER = "preorder"       # Node, left, right
    POSTORDER = "postorder"     # Left, right, node
    LEVEL_ORDER = "level"       # Level by level, left to right


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    DATA = "data"               # Node payload only
    FULL_NODE = "full"          # The node object itself
    DEPTH = "depth"             # (payload, depth) pairs
    CUSTOM = "custom"           # User-defined collector


DEFAULT_MAX_RECURSION_DEPTH = 500


@dataclass
class TreeConfig:
    """Configuration for a BinarySearchTree instance.

    Attributes:
        walk_mode: How the tree's own walks descend
        check_membership: Verify that nodes passed to delete/transplant/
            successor/predecessor belong to this tree (costs O(h) per call)
        max_recursion_depth: Ceiling for RECURSIVE walks (lowered at walk
            time if the interpreter recursion limit leaves less room)
    """

    walk_mode: WalkMode = WalkMode.ITERATIVE
    check_membership: bool = False
    max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config that rejects foreign nodes.

        Returns:
            TreeConfig with membership checks enabled
        """
        return cls(walk_mode=WalkMode.ITERATIVE, check_membership=True)

    @classmethod
    def fast(cls) -> 'TreeConfig':
        """Create config with no membership checks and recursive walks.

        Returns:
            TreeConfig tuned for small, well-shaped trees
        """
        return cls(walk_mode=WalkMode.RECURSIVE, check_membership=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.walk_mode, WalkMode):
            errors.append(f"walk_mode must be a WalkMode, got {self.walk_mode!r}")

        if not isinstance(self.max_recursion_depth, int) or self.max_recursion_depth <= 0:
            errors.append("max_recursion_depth must be a positive integer")

        return errors


@dataclass
class WalkConfig:
    """Complete configuration for a single walk over a tree.

    This is what WalkPlan validates and executes.
    """

    order: WalkOrder = WalkOrder.INORDER
    mode: WalkMode = WalkMode.ITERATIVE
    data_requirement: DataRequirement = DataRequirement.DATA
    custom_collector: Optional[Any] = None  # Custom collector instance
    max_depth: Optional[int] = None         # Deepest level to visit
    max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, WalkOrder):
            errors.append(f"order must be a WalkOrder, got {self.order!r}")

        if not isinstance(self.mode, WalkMode):
            errors.append(f"mode must be a WalkMode, got {self.mode!r}")

        if self.max_depth is not None:
            if not isinstance(self.max_depth, int):
                errors.append(f"max_depth must be an integer or None, got {self.max_depth!r}")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if not isinstance(self.max_recursion_depth, int) or self.max_recursion_depth <= 0:
            errors.append("max_recursion_depth must be a positive integer")

        if self.data_requirement == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirement is CUSTOM")

        return errors
