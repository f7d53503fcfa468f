"""Node abstractions for SearchTreeLib.

The TreeNode is intentionally kept simple - it's primarily a data container.
Navigation logic is delegated to the TreeAdapter so traversers never need
to know how a particular node stores its children.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TreeNode(ABC):
    """Abstract base class for nodes the traversers can walk.

    Defines the minimal interface every node must implement. Navigation
    (children, parent) is handled by the TreeAdapter.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        The identifier must be unique within the tree and stable for as
        long as the node holds the same key.

        Returns:
            str: Unique, stable identifier for this node
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is a leaf (has no children).

        Returns:
            bool: True if this node has no children, False otherwise
        """
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node.

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.identifier()})"


class BSTNode(TreeNode):
    """Storage unit of a binary search tree.

    Holds one key, owns at most one left and one right child, and keeps a
    non-owning (weak) reference to its parent. Children must be attached
    through set_left/set_right so the parent link stays correct.
    """

    def __init__(self, key: Any, parent: Optional['BSTNode'] = None):
        """Initialize a detached node.

        Args:
            key: Comparable key stored in the node
            parent: Parent node (None for root)
        """
        self.key = key
        self.left: Optional['BSTNode'] = None
        self.right: Optional['BSTNode'] = None
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional['BSTNode']:
        """Parent node, or None for a root or detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['BSTNode']) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    def set_left(self, child: Optional['BSTNode']) -> None:
        """Attach child as the left subtree and point it back at self."""
        self.left = child
        if child is not None:
            child.parent = self

    def set_right(self, child: Optional['BSTNode']) -> None:
        """Attach child as the right subtree and point it back at self."""
        self.right = child
        if child is not None:
            child.parent = self

    def detach(self) -> None:
        """Drop every link so the node no longer claims a place in a tree."""
        self.left = None
        self.right = None
        self._parent_ref = None

    def identifier(self) -> str:
        """Return repr of the key; keys are unique within a tree."""
        return repr(self.key)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def metadata(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'is_leaf': self.is_leaf(),
            'child_count': (self.left is not None) + (self.right is not None),
        }
