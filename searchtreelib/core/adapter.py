"""TreeAdapter abstraction for SearchTreeLib.

The TreeAdapter provides the navigation logic for a specific node type,
decoupling the node representation from the traversal mechanism.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional
from .node import TreeNode, BSTNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure.

    While TreeNode is just a data container, the adapter knows HOW to
    navigate it. Traversers only ever talk to the adapter.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Children must be yielded in their natural left-to-right order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is root
        """
        pass

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.
        Adapters can override for more efficient implementations.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_root(self, node: TreeNode) -> TreeNode:
        """Follow parent links from node to the top of its tree."""
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                return current
            current = parent


class BSTAdapter(TreeAdapter):
    """Adapter for BSTNode trees.

    Exposes the binary layout as an ordered child list and offers
    the left/right accessors that in-order traversal needs.
    """

    def get_children(self, node: BSTNode) -> Iterator[BSTNode]:
        """Yield the left child then the right child, skipping empty slots."""
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_parent(self, node: BSTNode) -> Optional[BSTNode]:
        return node.parent

    def get_left(self, node: BSTNode) -> Optional[BSTNode]:
        return node.left

    def get_right(self, node: BSTNode) -> Optional[BSTNode]:
        return node.right
