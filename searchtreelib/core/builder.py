"""Balanced construction of binary search trees.

The builder turns an arbitrary (unordered, possibly duplicated) sequence
of keys into a height-balanced BST by repeatedly splitting the sorted
unique keys at their midpoint.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..errors import IncomparableKeyError
from .locator import check_orderable
from .node import BSTNode

logger = logging.getLogger(__name__)


def sorted_unique(values: Iterable[Any]) -> List[Any]:
    """Return values sorted ascending with equal keys collapsed.

    Equality is judged by comparison after sorting, so unhashable keys
    are fine as long as they are mutually orderable.

    Raises:
        IncomparableKeyError: If two keys cannot be ordered, or a key is
            not ordered with itself (NaN)
    """
    values = list(values)
    for key in values:
        check_orderable(key)

    try:
        ordered = sorted(values)
    except TypeError as e:
        raise IncomparableKeyError(f"Keys cannot be ordered: {e}") from e

    unique: List[Any] = []
    for key in ordered:
        if not unique or unique[-1] < key:
            unique.append(key)
    return unique


def build_balanced(values: Iterable[Any]) -> Optional[BSTNode]:
    """Build a height-balanced BST from values.

    The node at index (start + end) // 2 of each sorted sub-range becomes
    the subtree root; the halves on either side recurse. Recursion depth is
    logarithmic in the number of keys.

    Args:
        values: Keys in any order, duplicates permitted

    Returns:
        Root of the new tree, or None for empty input
    """
    keys = sorted_unique(values)

    def _build_range(start: int, end: int, parent: Optional[BSTNode]) -> Optional[BSTNode]:
        if start > end:
            return None

        mid = (start + end) // 2
        node = BSTNode(keys[mid], parent)
        node.set_left(_build_range(start, mid - 1, node))
        node.set_right(_build_range(mid + 1, end, node))
        return node

    logger.debug("Building balanced tree from %d unique keys", len(keys))
    return _build_range(0, len(keys) - 1, None)
