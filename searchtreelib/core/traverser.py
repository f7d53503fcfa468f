"""Tree traversal strategies for SearchTreeLib.

Traversers implement the different algorithms for walking through a tree.
They navigate only through a TreeAdapter and keep their own explicit
queue or stack, so traversal depth is never bounded by Python's
recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalOrder, parse_order
from .adapter import BSTAdapter, TreeAdapter
from .node import BSTNode, TreeNode

Visitor = Callable[[BSTNode], Any]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversals are read-only: they never mutate the tree, and every call
    to traverse() starts a fresh walk.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node, or None for an empty tree

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree breadth-first using a FIFO queue."""
        queue: Deque[Tuple[TreeNode, int]] = deque()
        if root is not None:
            queue.append((root, 0))

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            for child in self.adapter.get_children(node):
                queue.append((child, depth + 1))


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its left subtree, then its right subtree.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree depth-first, pre-order."""
        if root is None:
            return

        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Reversed so the leftmost child is popped first
            children = list(self.adapter.get_children(node))
            for child in reversed(children):
                stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree. On a
    binary search tree this yields keys in ascending order.
    """

    adapter: BSTAdapter

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse tree in-order with an explicit stack."""
        stack: List[Tuple[BSTNode, int]] = []
        node, depth = root, 0

        while stack or node is not None:
            # Run down the left spine
            while node is not None:
                stack.append((node, depth))
                node, depth = self.adapter.get_left(node), depth + 1

            node, depth = stack.pop()
            yield (node, depth)
            node, depth = self.adapter.get_right(node), depth + 1


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits both subtrees before the node itself. Good for computing
    aggregate values such as subtree heights.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree depth-first, post-order."""
        if root is None:
            return

        # Entries are (node, depth, children_already_expanded)
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            children = list(self.adapter.get_children(node))
            for child in reversed(children):
                stack.append((child, depth + 1, False))


_TRAVERSERS = {
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str],
                     adapter: Optional[TreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or alias (level, bfs, in, pre, post, ...)
        adapter: TreeAdapter for the tree structure (defaults to BSTAdapter)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If the order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)](adapter or BSTAdapter())


def walk(root: Optional[BSTNode],
         order: Union[TraversalOrder, str],
         visitor: Optional[Visitor] = None,
         adapter: Optional[TreeAdapter] = None) -> List[Any]:
    """Walk the tree in the given order and collect the visited keys.

    Args:
        root: Root of the tree, or None for an empty tree
        order: Traversal order
        visitor: Called once with each node, in visiting order
        adapter: TreeAdapter to navigate with (defaults to BSTAdapter)

    Returns:
        Keys in the order they were visited
    """
    traverser = create_traverser(order, adapter)
    keys: List[Any] = []
    for node, _ in traverser.traverse(root):
        keys.append(node.key)
        if visitor is not None:
            visitor(node)
    return keys
