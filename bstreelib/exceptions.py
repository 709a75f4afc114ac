"""Exception hierarchy for BSTreeLib.

Search and traversal never raise for a missing value; they return None or
an empty result. The errors below cover caller preconditions that would
otherwise corrupt the tree or fail with an obscure AttributeError.
"""

from typing import List, Optional


class BSTreeError(Exception):
    """Base class for all BSTreeLib errors."""
    pass


class InvalidNodeError(BSTreeError, ValueError):
    """Raised when an operation that requires a node receives None or a detached node."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or f"{operation}() requires a node, got None")


class NotInTreeError(InvalidNodeError):
    """Raised when a node does not belong to the tree it is used with."""

    def __init__(self, operation: str, node):
        self.node = node
        super().__init__(
            operation,
            f"{operation}() got {node!r}, which is not a member of this tree"
        )


class TreeDepthError(BSTreeError, RecursionError):
    """Raised when a recursive walk goes deeper than the configured ceiling."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"Recursive walk exceeded max_recursion_depth={limit}; "
            f"use WalkMode.ITERATIVE for degenerate trees"
        )


class TreeInvariantError(BSTreeError):
    """Raised by assert_valid_tree() when the tree structure is broken."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(f"Tree invariants violated: {'; '.join(self.problems)}")


class ConfigurationError(BSTreeError, ValueError):
    """Raised when a TreeConfig or WalkConfig fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
