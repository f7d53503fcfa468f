"""Configuration system for SearchTreeLib.

This module defines how users specify tree behaviour that is not part of
the core ordering contract: which traversal order to use by default and
how node depth is measured.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    LEVEL_ORDER = "level"   # Breadth-first, left to right within a depth
    IN_ORDER = "in"         # Left, node, right (ascending keys)
    PRE_ORDER = "pre"       # Node before its subtrees
    POST_ORDER = "post"     # Subtrees before the node


class DepthStrategy(Enum):
    """How depth (edges from a node up to the root) is computed."""
    PARENT_LINK = "parent"  # Follow the maintained parent back-references
    ROOT_SEARCH = "search"  # Search down from the root, no parent pointers


# String aliases accepted wherever a TraversalOrder is expected
_ORDER_ALIASES = {
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'dfs_pre': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'dfs_post': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a string alias.

    Args:
        order: TraversalOrder member or alias such as 'in', 'bfs', 'post'

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not a known order
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree.

    The tree validates this configuration on construction and refuses
    to start with an inconsistent one.
    """

    # Order used by traverse() when no order is given
    default_order: TraversalOrder = TraversalOrder.IN_ORDER

    # Depth measurement
    depth_strategy: DepthStrategy = DepthStrategy.PARENT_LINK

    @classmethod
    def pointer_free(cls) -> 'TreeConfig':
        """Create config that measures depth without parent pointers.

        Returns:
            TreeConfig using DepthStrategy.ROOT_SEARCH
        """
        return cls(depth_strategy=DepthStrategy.ROOT_SEARCH)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(
                f"default_order must be a TraversalOrder, got {self.default_order!r}"
            )

        if not isinstance(self.depth_strategy, DepthStrategy):
            errors.append(
                f"depth_strategy must be a DepthStrategy, got {self.depth_strategy!r}"
            )

        return errors
