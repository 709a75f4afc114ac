"""Data collection strategies for BSTreeLib.

DataCollectors define what information to extract from nodes during a walk.
WalkBuffer is the accumulation list that lets several partial walks be
concatenated into one result.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator, List, Tuple
from .node import BSTNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    The same traversal can feed different collectors, e.g. payloads only
    for a sorted listing, or full nodes for successor navigation.
    """

    @abstractmethod
    def collect(self, node: BSTNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class DataValueCollector(DataCollector):
    """Collects node payloads. The default collector."""

    def collect(self, node: BSTNode, depth: int) -> Any:
        return node.data


class FullNodeCollector(DataCollector):
    """Collects the node objects themselves."""

    def collect(self, node: BSTNode, depth: int) -> BSTNode:
        return node


class DepthCollector(DataCollector):
    """Collects (payload, depth) pairs. Useful for drawing tree shape."""

    def collect(self, node: BSTNode, depth: int) -> Tuple[Any, int]:
        return (node.data, depth)


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[BSTNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: BSTNode, depth: int) -> Any:
        return self.collect_func(node, depth)


class WalkBuffer:
    """Ordered accumulation buffer for walk results.

    A walk started with should_clear=True resets the buffer; later walks
    with should_clear=False append, so results for several subtrees can be
    composed. Readers get copies via snapshot().
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._items: List[Any] = []

    def clear(self) -> None:
        self._items.clear()

    def extend(self, values: Iterable[Any]) -> None:
        self._items.extend(values)

    def fill(self, values: Iterable[Any], should_clear: bool) -> List[Any]:
        """Append values (after clearing if asked) and return a snapshot."""
        if should_clear:
            self.clear()
        self.extend(values)
        return self.snapshot()

    def snapshot(self) -> List[Any]:
        """Return a fresh copy of the buffered values."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"WalkBuffer({self.name!r}, size={len(self._items)})"
