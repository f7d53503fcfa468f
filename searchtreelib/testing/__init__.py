"""Testing utilities for SearchTreeLib consumers."""

from .fixtures import SearchTreeTestHelper

__all__ = ['SearchTreeTestHelper']
