"""Unit tests for traversal strategies.

Tests the four traversal orders on a known tree, the visitor contract,
and the traverser factory.
"""

import unittest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import (
    BinarySearchTree,
    BSTAdapter,
    TraversalOrder,
    TreeConfig,
    create_traverser,
)
from searchtreelib.core.traverser import (
    InOrderTraverser,
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    walk,
)


class TestTraversalOrders(unittest.TestCase):
    """Test each traversal order against the demonstration tree.

    The tree built from the demonstration list has this shape:

                    8
              4            67
           1     5      9      324
            3     7      23       6345
    """

    def setUp(self):
        self.tree = BinarySearchTree([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])

    def test_level_order(self):
        self.assertEqual(
            self.tree.level_order(),
            [8, 4, 67, 1, 5, 9, 324, 3, 7, 23, 6345]
        )

    def test_in_order(self):
        self.assertEqual(
            self.tree.in_order(),
            [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]
        )

    def test_pre_order(self):
        self.assertEqual(
            self.tree.pre_order(),
            [8, 4, 1, 3, 5, 7, 67, 9, 23, 324, 6345]
        )

    def test_post_order(self):
        self.assertEqual(
            self.tree.post_order(),
            [3, 1, 7, 5, 4, 23, 9, 6345, 324, 67, 8]
        )

    def test_traverse_uses_default_order(self):
        self.assertEqual(self.tree.traverse(), self.tree.in_order())

        tree = BinarySearchTree([1, 2, 3], TreeConfig(default_order=TraversalOrder.POST_ORDER))
        self.assertEqual(tree.traverse(), [1, 3, 2])

    def test_traverse_accepts_string_alias(self):
        self.assertEqual(self.tree.traverse('bfs'), self.tree.level_order())
        self.assertEqual(self.tree.traverse('dfs_post'), self.tree.post_order())

    def test_repeatable(self):
        first = self.tree.pre_order()
        second = self.tree.pre_order()
        self.assertEqual(first, second)


class TestVisitor(unittest.TestCase):
    """Test the per-node visitor callback."""

    def setUp(self):
        self.tree = BinarySearchTree(range(10))

    def test_visitor_called_once_per_node_in_order(self):
        for order in TraversalOrder:
            with self.subTest(order=order):
                visited = []
                keys = self.tree.traverse(order, lambda node: visited.append(node.key))
                self.assertEqual(visited, keys)
                self.assertEqual(len(visited), 10)

    def test_visitor_receives_nodes(self):
        nodes = []
        self.tree.level_order(nodes.append)
        self.assertIs(nodes[0], self.tree.root)

    def test_empty_tree_never_calls_visitor(self):
        tree = BinarySearchTree()

        def visitor(node):
            raise AssertionError("visitor must not be called")

        for order in TraversalOrder:
            with self.subTest(order=order):
                self.assertEqual(tree.traverse(order, visitor), [])


class TestTraversers(unittest.TestCase):
    """Test the traverser classes directly."""

    def setUp(self):
        self.adapter = BSTAdapter()
        self.root = BinarySearchTree([1, 2, 3, 4, 5, 6, 7]).root

    def test_in_order_depths(self):
        pairs = [(node.key, depth) for node, depth in InOrderTraverser(self.adapter).traverse(self.root)]
        self.assertEqual(pairs, [(1, 2), (2, 1), (3, 2), (4, 0), (5, 2), (6, 1), (7, 2)])

    def test_level_order_depths_increase(self):
        depths = [depth for _, depth in LevelOrderTraverser(self.adapter).traverse(self.root)]
        self.assertEqual(depths, sorted(depths))
        self.assertEqual(depths, [0, 1, 1, 2, 2, 2, 2])

    def test_pre_order_parent_before_children(self):
        keys = [node.key for node, _ in PreOrderTraverser(self.adapter).traverse(self.root)]
        self.assertEqual(keys[0], 4)
        self.assertLess(keys.index(2), keys.index(1))

    def test_post_order_children_before_parent(self):
        keys = [node.key for node, _ in PostOrderTraverser(self.adapter).traverse(self.root)]
        self.assertEqual(keys[-1], 4)
        self.assertLess(keys.index(1), keys.index(2))

    def test_none_root_yields_nothing(self):
        for traverser_class in (LevelOrderTraverser, InOrderTraverser,
                                PreOrderTraverser, PostOrderTraverser):
            with self.subTest(traverser=traverser_class.__name__):
                self.assertEqual(list(traverser_class(self.adapter).traverse(None)), [])

    def test_walk_on_bare_root(self):
        self.assertEqual(walk(self.root, 'pre'), [4, 2, 1, 3, 6, 5, 7])


class TestTraverserFactory(unittest.TestCase):
    """Test create_traverser."""

    def test_aliases(self):
        cases = {
            'level': LevelOrderTraverser,
            'bfs': LevelOrderTraverser,
            'in': InOrderTraverser,
            'INORDER': InOrderTraverser,
            'pre_order': PreOrderTraverser,
            'post': PostOrderTraverser,
            TraversalOrder.POST_ORDER: PostOrderTraverser,
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                self.assertIsInstance(create_traverser(name), expected)

    def test_default_adapter(self):
        self.assertIsInstance(create_traverser('in').adapter, BSTAdapter)

    def test_in_order_traverser_uses_base_constructor(self):
        adapter = BSTAdapter()
        traverser = InOrderTraverser(adapter)
        self.assertIs(traverser.adapter, adapter)
        self.assertNotIn("__init__", vars(InOrderTraverser))

    def test_unknown_order(self):
        with self.assertRaises(ValueError):
            create_traverser('zigzag')


if __name__ == "__main__":
    unittest.main()
