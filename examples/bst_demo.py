#!/usr/bin/env python3
"""
Binary search tree walkthrough.

This example demonstrates:
- Building a balanced tree from unsorted input with duplicates
- All four traversal orders with a printing visitor
- Skewed insertion followed by an explicit rebalance
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import BinarySearchTree, TraversalOrder, get_tree_stats

logger = logging.getLogger(__name__)

DEMO_VALUES = [1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324]
EXTRA_VALUES = [200, 150, 180]


def _print_node(node) -> None:
    print(f"  {node.key}")


def run_demo(values: List[int], extra: List[int]) -> BinarySearchTree:
    """Walk through the tree operations, printing as it goes."""
    tree = BinarySearchTree(values)
    print(f"Is the tree balanced? {tree.is_balanced()}")

    for order in (TraversalOrder.LEVEL_ORDER, TraversalOrder.PRE_ORDER,
                  TraversalOrder.POST_ORDER, TraversalOrder.IN_ORDER):
        print(f"{order.name.replace('_', '-').lower()} traversal:")
        tree.traverse(order, _print_node)

    print(f"Inserting values > 100: {extra}")
    for value in extra:
        tree.insert(value)
    print(f"Is the tree balanced? {tree.is_balanced()}")

    tree.rebalance()
    print(f"After rebalance: balanced={tree.is_balanced()} height={tree.height()}")
    print(f"In-order: {tree.in_order()}")
    return tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Binary search tree walkthrough.")
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="Keys to build the tree from (defaults to a fixed demo list).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices={"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
        help="Configure logging verbosity for troubleshooting.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    tree = run_demo(args.values or DEMO_VALUES, EXTRA_VALUES)
    logger.info("Final stats: %s", get_tree_stats(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())
