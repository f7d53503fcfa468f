"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases, and also accept a bare root node where that makes sense.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from .config import TraversalOrder, TreeConfig, parse_order
from .core.adapter import BSTAdapter
from .core.metrics import height, is_balanced
from .core.mutators import find_max, find_min
from .core.node import BSTNode
from .core.traverser import LevelOrderTraverser, Visitor, walk
from .tree import BinarySearchTree

TreeOrRoot = Union[BinarySearchTree, BSTNode, None]


def build_tree(values: Iterable[Any], **config_kwargs) -> BinarySearchTree:
    """Build a balanced BinarySearchTree from values.

    Args:
        values: Keys in any order, duplicates permitted
        **config_kwargs: TreeConfig fields (default_order, depth_strategy)

    Returns:
        New BinarySearchTree

    Example:
        >>> tree = build_tree([3, 1, 2], default_order='level')
        >>> tree.traverse()
        [2, 1, 3]
    """
    if 'default_order' in config_kwargs and isinstance(config_kwargs['default_order'], str):
        config_kwargs['default_order'] = parse_order(config_kwargs['default_order'])
    return BinarySearchTree(values, TreeConfig(**config_kwargs))


def traverse_tree(tree: TreeOrRoot,
                  order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                  visitor: Optional[Visitor] = None) -> List[Any]:
    """Walk a tree (or bare root node) and return the visited keys.

    Example:
        >>> traverse_tree(build_tree([2, 1, 3]), 'post')
        [1, 3, 2]
    """
    return walk(_root_of(tree), order, visitor)


def count_nodes(tree: TreeOrRoot) -> int:
    """Count the nodes of a tree (or bare root node)."""
    count = 0
    for _ in LevelOrderTraverser(BSTAdapter()).traverse(_root_of(tree)):
        count += 1
    return count


def get_leaf_keys(tree: TreeOrRoot) -> List[Any]:
    """Return the keys of all leaf nodes, in ascending order."""
    leaves: List[Any] = []
    walk(_root_of(tree), TraversalOrder.IN_ORDER,
         lambda node: leaves.append(node.key) if node.is_leaf() else None)
    return leaves


def get_tree_stats(tree: TreeOrRoot) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        balanced, min_key, max_key and depths (node count per depth)

    Example:
        >>> stats = get_tree_stats(build_tree(range(7)))
        >>> stats['height'], stats['depths']
        (2, {0: 1, 1: 2, 2: 4})
    """
    root = _root_of(tree)
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': height(root),
        'balanced': is_balanced(root),
        'min_key': find_min(root).key if root is not None else None,
        'max_key': find_max(root).key if root is not None else None,
        'depths': {},
    }

    for node, depth in LevelOrderTraverser(BSTAdapter()).traverse(root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _root_of(tree: TreeOrRoot) -> Optional[BSTNode]:
    """Return the root node of a BinarySearchTree, or tree itself if a node."""
    if isinstance(tree, BinarySearchTree):
        return tree.root
    return tree
