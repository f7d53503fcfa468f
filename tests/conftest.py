"""Shared pytest configuration for the SearchTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import BinarySearchTree

DEMO_VALUES = [1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests (deselect with -m 'not slow')")


@pytest.fixture
def demo_tree():
    """Tree built from the fixed demonstration list."""
    return BinarySearchTree(DEMO_VALUES)


@pytest.fixture
def seven_tree():
    """Perfect tree over 1..7 (root 4)."""
    return BinarySearchTree([1, 2, 3, 4, 5, 6, 7])
