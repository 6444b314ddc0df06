"""Shared fixtures for the DazzleTreeState test suite."""

import logging

import pytest

from dazzletreestate import convert_nested_tree
from dazzletreestate.testing import node


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py by default")


def make_standard_tree():
    """Nested tree used across the suite.

    Structure (+ open, - closed):
    root+
    ├── A+
    │   ├── A1
    │   └── A2-
    │       └── A2a
    ├── B-
    │   └── B1
    └── C
    """
    return node(
        "root",
        node("A", "A1", node("A2", "A2a"), is_open=True),
        node("B", "B1"),
        "C",
        is_open=True,
    )


@pytest.fixture
def flat_tree():
    return convert_nested_tree(make_standard_tree())


@pytest.fixture
def toggle_calls():
    """List collecting the ids passed to a toggle callback."""
    return []


@pytest.fixture
def restore_package_logger():
    """Undo setup_logging changes so caplog keeps seeing records."""
    package_logger = logging.getLogger("dazzletreestate")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield package_logger
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]
