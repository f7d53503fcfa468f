"""Height, depth and balance measurements.

Heights count edges: an absent node has height -1 and a leaf height 0.
Nothing is memoized; every call recomputes from the current structure.
"""

from typing import Dict, Optional, Tuple

from ..config import DepthStrategy
from .adapter import BSTAdapter
from .locator import search_path_length
from .node import BSTNode
from .traverser import PostOrderTraverser

_adapter = BSTAdapter()


def _subtree_heights(node: Optional[BSTNode]) -> Tuple[Dict[int, int], bool]:
    """Compute the height of every node under node in one post-order pass.

    Returns:
        Tuple of (heights keyed by id(node), True if every node is balanced)
    """
    heights: Dict[int, int] = {}
    balanced = True

    for current, _ in PostOrderTraverser(_adapter).traverse(node):
        left = heights[id(current.left)] if current.left is not None else -1
        right = heights[id(current.right)] if current.right is not None else -1
        heights[id(current)] = 1 + max(left, right)
        if abs(left - right) > 1:
            balanced = False

    return heights, balanced


def height(node: Optional[BSTNode]) -> int:
    """Return the number of edges on the longest downward path from node.

    Args:
        node: Subtree root, or None

    Returns:
        -1 for None, 0 for a leaf, otherwise 1 + max(child heights)
    """
    if node is None:
        return -1
    heights, _ = _subtree_heights(node)
    return heights[id(node)]


def is_balanced(node: Optional[BSTNode]) -> bool:
    """Check the AVL balance criterion at every node of the subtree.

    True iff |height(left) - height(right)| <= 1 everywhere; vacuously
    true for None.
    """
    _, balanced = _subtree_heights(node)
    return balanced


def depth(node: Optional[BSTNode],
          root: Optional[BSTNode] = None,
          strategy: DepthStrategy = DepthStrategy.PARENT_LINK) -> Optional[int]:
    """Return the number of edges from node up to the root.

    PARENT_LINK follows parent back-references and needs no root.
    ROOT_SEARCH searches down from root by node.key and needs root.

    Args:
        node: Node to measure, or None
        root: Tree root (required for ROOT_SEARCH)
        strategy: How to measure

    Returns:
        -1 for None, the edge count otherwise, or None when ROOT_SEARCH
        cannot reach node from root
    """
    if node is None:
        return -1

    if strategy is DepthStrategy.ROOT_SEARCH:
        return search_path_length(root, node)

    return _adapter.get_depth(node)
