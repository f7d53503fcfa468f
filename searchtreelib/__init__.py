"""SearchTreeLib - Ordered binary search trees.

SearchTreeLib builds a height-balanced binary search tree from any
collection of comparable keys and supports insertion, deletion, lookup,
four traversal orders, height/depth queries, a balance check and an
explicit, on-demand rebalance.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import BinarySearchTree

    tree = BinarySearchTree([1, 7, 4, 23, 8])
    tree.insert(5)
    tree.in_order()        # [1, 4, 5, 7, 8, 23]
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree is not self-balancing: mutations leave the shape as it falls,
and rebalance() rebuilds it.
"""

__version__ = "0.1.0"

from .tree import BinarySearchTree
from .core.node import TreeNode, BSTNode
from .core.adapter import TreeAdapter, BSTAdapter
from .core.traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

# Configuration and errors
from .config import TreeConfig, TraversalOrder, DepthStrategy
from .errors import (
    SearchTreeError,
    ConfigurationError,
    IncomparableKeyError,
    NodeNotInTreeError,
)

# High-level API
from .api import (
    build_tree,
    traverse_tree,
    count_nodes,
    get_leaf_keys,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinarySearchTree',
    'TreeNode',
    'BSTNode',
    'TreeAdapter',
    'BSTAdapter',
    'TreeTraverser',
    'LevelOrderTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    # Config
    'TreeConfig',
    'TraversalOrder',
    'DepthStrategy',
    # Errors
    'SearchTreeError',
    'ConfigurationError',
    'IncomparableKeyError',
    'NodeNotInTreeError',
    # API
    'build_tree',
    'traverse_tree',
    'count_nodes',
    'get_leaf_keys',
    'get_tree_stats',
]
