"""Core structural algorithms of SearchTreeLib.

Everything here operates on bare BSTNode roots; the BinarySearchTree
facade in searchtreelib.tree owns a root and delegates to these functions.
"""

from .node import TreeNode, BSTNode
from .adapter import TreeAdapter, BSTAdapter
from .builder import build_balanced, sorted_unique
from .locator import find_node, compare_keys
from .mutators import insert_key, delete_key, find_min, find_max
from .traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    walk,
)
from .metrics import height, depth, is_balanced

__all__ = [
    'TreeNode',
    'BSTNode',
    'TreeAdapter',
    'BSTAdapter',
    'build_balanced',
    'sorted_unique',
    'find_node',
    'compare_keys',
    'insert_key',
    'delete_key',
    'find_min',
    'find_max',
    'TreeTraverser',
    'LevelOrderTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    'walk',
    'height',
    'depth',
    'is_balanced',
]
