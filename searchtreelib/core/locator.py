"""Exact-key lookup for binary search trees."""

from typing import Any, Optional

from ..errors import IncomparableKeyError
from .node import BSTNode


def check_orderable(key: Any) -> None:
    """Raise IncomparableKeyError for keys unordered with themselves, e.g. NaN."""
    if key != key:
        raise IncomparableKeyError(f"Key {key!r} is not ordered with itself")


def compare_keys(key: Any, node_key: Any) -> int:
    """Three-way compare key against node_key.

    A key that is not equal to itself (float NaN) has no place in the
    ordering and is rejected rather than treated as equal to everything.

    Returns:
        -1 if key sorts before node_key, 1 if after, 0 if equal

    Raises:
        IncomparableKeyError: If the keys cannot be ordered
    """
    try:
        if key < node_key:
            return -1
        if key > node_key:
            return 1
    except TypeError as e:
        raise IncomparableKeyError(
            f"Cannot compare {key!r} with {node_key!r}"
        ) from e
    check_orderable(key)
    return 0


def find_node(root: Optional[BSTNode], key: Any) -> Optional[BSTNode]:
    """Find the node holding key.

    Standard binary-search descent, O(height) comparisons.

    Args:
        root: Root of the (sub)tree to search
        key: Key to look for

    Returns:
        The matching node, or None if absent or the tree is empty
    """
    current = root
    while current is not None:
        order = compare_keys(key, current.key)
        if order == 0:
            return current
        current = current.left if order < 0 else current.right
    return None


def search_path_length(root: Optional[BSTNode], target: BSTNode) -> Optional[int]:
    """Count edges on the search path from root down to target.

    Descends by target.key and succeeds only when the exact target node
    object is reached.

    Returns:
        Number of edges, or None if target is not reachable from root
    """
    edges = 0
    current = root
    while current is not None:
        order = compare_keys(target.key, current.key)
        if order == 0:
            return edges if current is target else None
        current = current.left if order < 0 else current.right
        edges += 1
    return None
