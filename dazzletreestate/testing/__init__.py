"""Testing utilities for projects that consume DazzleTreeState."""

from .fixtures import node, TreeStateTestHelper

__all__ = ['node', 'TreeStateTestHelper']
