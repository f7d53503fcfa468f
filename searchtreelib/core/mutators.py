"""Order-preserving insertion and deletion.

Both operations walk the tree with an explicit loop instead of Python
recursion, so a degenerate (linear chain) tree of any size is handled
without hitting the interpreter's recursion limit. Neither operation
rebalances; call BinarySearchTree.rebalance() for that.
"""

import logging
from typing import Any, Optional

from .locator import check_orderable, compare_keys, find_node
from .node import BSTNode

logger = logging.getLogger(__name__)


def find_min(node: BSTNode) -> BSTNode:
    """Return the leftmost (minimum-key) node of the subtree."""
    while node.left is not None:
        node = node.left
    return node


def find_max(node: BSTNode) -> BSTNode:
    """Return the rightmost (maximum-key) node of the subtree."""
    while node.right is not None:
        node = node.right
    return node


def insert_key(root: Optional[BSTNode], key: Any) -> BSTNode:
    """Insert key into the subtree rooted at root.

    Equal keys are rejected silently. A new leaf is linked where the
    descent reaches an empty child slot.

    Args:
        root: Subtree root, or None for an empty tree
        key: Key to insert

    Returns:
        The subtree root; a fresh node when root was None. Callers must
        store the returned value as their root.
    """
    if root is None:
        check_orderable(key)
        return BSTNode(key)

    current = root
    while True:
        order = compare_keys(key, current.key)
        if order == 0:
            logger.debug("Ignoring duplicate key %r", key)
            return root

        if order < 0:
            if current.left is None:
                current.set_left(BSTNode(key))
                return root
            current = current.left
        else:
            if current.right is None:
                current.set_right(BSTNode(key))
                return root
            current = current.right


def delete_key(root: Optional[BSTNode], key: Any) -> Optional[BSTNode]:
    """Delete key from the subtree rooted at root.

    Cases at the matching node:
    - leaf: removed
    - one child: spliced out, the child takes its place
    - two children: takes the key of the minimum of its right subtree,
      and that minimum node (which has no left child) is removed instead

    Args:
        root: Subtree root, or None for an empty tree
        key: Key to delete

    Returns:
        The (possibly new) subtree root; unchanged if key is absent
    """
    target = find_node(root, key)
    if target is None:
        logger.debug("Key %r not present, nothing to delete", key)
        return root

    if target.left is not None and target.right is not None:
        successor = find_min(target.right)
        target.key = successor.key
        target = successor

    # target now has at most one child
    child = target.left if target.left is not None else target.right
    parent = target.parent

    if target is root:
        new_root = child
        if child is not None:
            child.parent = parent
    else:
        if parent.left is target:
            parent.set_left(child)
        else:
            parent.set_right(child)
        new_root = root

    target.detach()
    return new_root
