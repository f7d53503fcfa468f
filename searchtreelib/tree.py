"""BinarySearchTree: the object-oriented entry point of SearchTreeLib.

The tree owns its root and delegates every structural algorithm to the
functions in searchtreelib.core. Mutations never rebalance on their own;
rebalance() is an explicit, full rebuild.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Union

from .config import TraversalOrder, TreeConfig, DepthStrategy
from .errors import ConfigurationError, NodeNotInTreeError
from .core.adapter import BSTAdapter
from .core.builder import build_balanced
from .core.locator import find_node
from .core.metrics import depth as _depth, height as _height, is_balanced as _is_balanced
from .core.mutators import delete_key, find_max, find_min, insert_key
from .core.node import BSTNode
from .core.traverser import Visitor, walk

logger = logging.getLogger(__name__)

# Sentinel so height() can default to the root while height(None) stays -1
ROOT = object()


class BinarySearchTree:
    """Ordered set of unique, comparable keys stored as a binary search tree.

    Example:
        >>> tree = BinarySearchTree([5, 3, 8, 3])
        >>> tree.in_order()
        [3, 5, 8]
        >>> tree.insert(4)
        >>> 4 in tree
        True
    """

    def __init__(self, values: Iterable[Any] = (), config: Optional[TreeConfig] = None):
        """Build a balanced tree from values.

        Args:
            values: Keys in any order; duplicates are dropped
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the config fails validation
            IncomparableKeyError: If the values cannot be ordered
        """
        self.config = config or TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.adapter = BSTAdapter()
        self._root: Optional[BSTNode] = build_balanced(values)

    @property
    def root(self) -> Optional[BSTNode]:
        """Root node, or None when the tree is empty."""
        return self._root

    # Mutators

    def insert(self, key: Any) -> None:
        """Insert key; an existing key is silently ignored."""
        self._root = insert_key(self._root, key)

    def delete(self, key: Any) -> None:
        """Delete key; an absent key is silently ignored."""
        self._root = delete_key(self._root, key)

    def find(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding key, or None."""
        return find_node(self._root, key)

    # Traversals

    def traverse(self,
                 order: Union[TraversalOrder, str, None] = None,
                 visitor: Optional[Visitor] = None) -> List[Any]:
        """Walk the tree and return the visited keys.

        Args:
            order: Traversal order (defaults to config.default_order)
            visitor: Called once per node, in visiting order

        Returns:
            Keys in visiting order
        """
        return walk(self._root, order or self.config.default_order, visitor, self.adapter)

    def level_order(self, visitor: Optional[Visitor] = None) -> List[Any]:
        return self.traverse(TraversalOrder.LEVEL_ORDER, visitor)

    def in_order(self, visitor: Optional[Visitor] = None) -> List[Any]:
        return self.traverse(TraversalOrder.IN_ORDER, visitor)

    def pre_order(self, visitor: Optional[Visitor] = None) -> List[Any]:
        return self.traverse(TraversalOrder.PRE_ORDER, visitor)

    def post_order(self, visitor: Optional[Visitor] = None) -> List[Any]:
        return self.traverse(TraversalOrder.POST_ORDER, visitor)

    # Metrics

    def height(self, node: Any = ROOT) -> int:
        """Return the height of node (the root by default); -1 for None."""
        if node is ROOT:
            node = self._root
        return _height(node)

    def depth(self, node: Optional[BSTNode]) -> int:
        """Return the number of edges from node up to this tree's root.

        Args:
            node: A node of this tree, or None (depth -1)

        Raises:
            NodeNotInTreeError: If node does not belong to this tree
        """
        if node is None:
            return -1

        if self.config.depth_strategy is DepthStrategy.ROOT_SEARCH:
            result = _depth(node, self._root, DepthStrategy.ROOT_SEARCH)
            if result is None:
                raise NodeNotInTreeError(f"{node!r} is not a node of this tree")
            return result

        if self.adapter.get_root(node) is not self._root:
            raise NodeNotInTreeError(f"{node!r} is not a node of this tree")
        return _depth(node)

    def is_balanced(self) -> bool:
        return _is_balanced(self._root)

    def rebalance(self) -> None:
        """Rebuild the tree from its in-order keys so it is height-balanced."""
        keys = self.in_order()
        old_height = self.height()
        self._root = build_balanced(keys)
        logger.debug(
            "Rebalanced %d keys: height %d -> %d",
            len(keys), old_height, self.height()
        )

    # Conveniences

    def min(self) -> Optional[Any]:
        """Smallest key, or None for an empty tree."""
        return find_min(self._root).key if self._root is not None else None

    def max(self) -> Optional[Any]:
        """Largest key, or None for an empty tree."""
        return find_max(self._root).key if self._root is not None else None

    def __len__(self) -> int:
        return len(self.in_order())

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.in_order()!r})"
