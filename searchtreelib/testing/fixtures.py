"""Test fixtures for SearchTreeLib consumers.

These fixtures verify structural invariants and build awkward tree shapes
without each test suite re-implementing tree walks.
"""

from typing import Any, Iterable, List, Optional

from ..core.adapter import BSTAdapter
from ..core.node import BSTNode
from ..core.traverser import PreOrderTraverser
from ..tree import BinarySearchTree


class SearchTreeTestHelper:
    """Public test fixture for BST invariant verification.

    Example:
        helper = SearchTreeTestHelper(tree)
        assert helper.is_search_tree()
        assert helper.parent_links_consistent()
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: BinarySearchTree to inspect
        """
        self._tree = tree
        self._adapter = BSTAdapter()

    def _nodes(self) -> List[BSTNode]:
        return [node for node, _ in PreOrderTraverser(self._adapter).traverse(self._tree.root)]

    def node_count(self) -> int:
        """Count nodes by walking the structure directly."""
        return len(self._nodes())

    def is_search_tree(self) -> bool:
        """Check strict BST ordering using per-node (low, high) bounds."""
        root = self._tree.root
        if root is None:
            return True

        stack = [(root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low < node.key:
                return False
            if high is not None and not node.key < high:
                return False
            if node.left is not None:
                stack.append((node.left, low, node.key))
            if node.right is not None:
                stack.append((node.right, node.key, high))
        return True

    def parent_links_consistent(self) -> bool:
        """Check that every child points back at its parent and the root has none."""
        root = self._tree.root
        if root is not None and root.parent is not None:
            return False

        for node in self._nodes():
            for child in self._adapter.get_children(node):
                if child.parent is not node:
                    return False
        return True

    def check_invariants(self) -> None:
        """Assert ordering and parent-link invariants, with a useful message."""
        assert self.is_search_tree(), f"BST ordering violated: {self._tree.pre_order()}"
        assert self.parent_links_consistent(), (
            f"Parent links inconsistent: {self._tree.pre_order()}"
        )

    @staticmethod
    def make_degenerate(keys: Iterable[Any]) -> BinarySearchTree:
        """Build a tree by inserting keys one at a time into an empty tree.

        Sorted input produces a linear chain of maximal height.
        """
        tree = BinarySearchTree()
        for key in keys:
            tree.insert(key)
        return tree

    @staticmethod
    def subtree_keys(node: Optional[BSTNode]) -> List[Any]:
        """Return the keys under node in pre-order."""
        return [n.key for n, _ in PreOrderTraverser(BSTAdapter()).traverse(node)]
