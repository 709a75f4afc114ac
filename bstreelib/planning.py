"""Walk planning for BSTreeLib.

The WalkPlan validates a WalkConfig once, assembles the matching traverser
and collector, and then runs walks over any subtree.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .config import WalkConfig, DataRequirement
from .core.collector import (
    DataCollector,
    DataValueCollector,
    FullNodeCollector,
    DepthCollector,
)
from .core.node import BSTNode
from .core.traverser import TreeTraverser, create_traverser
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class WalkPlan:
    """Validated execution plan for a tree walk.

    The WalkPlan is the bridge between user intent (WalkConfig) and
    execution. Configuration problems surface when the plan is built,
    before any node is visited.
    """

    def __init__(self, config: WalkConfig):
        """Create and validate a walk plan.

        Args:
            config: Walk configuration

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(
            self.config.order,
            self.config.mode,
            self.config.max_recursion_depth
        )

    def _select_collector(self) -> DataCollector:
        """Select data collector based on requirements.

        Returns:
            DataCollector instance
        """
        if self.config.data_requirement == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.DATA: DataValueCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.DEPTH: DepthCollector,
        }
        return collector_map[self.config.data_requirement]()

    def execute(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, Any]]:
        """Execute the walk from root.

        Args:
            root: Subtree root to walk (None yields nothing)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        for node, depth in self.traverser.traverse(root, max_depth=self.config.max_depth):
            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)
        logger.debug("%s walk visited %d nodes",
                     self.config.order.value, self.nodes_processed)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the walk plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'mode': self.config.mode.value,
            'data_requirement': self.config.data_requirement.value,
            'max_depth': self.config.max_depth,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
