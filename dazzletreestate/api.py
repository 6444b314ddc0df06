"""High-level query helpers for DazzleTreeState.

These functions wrap the walker for common questions a renderer or a test
asks about a flat tree map.
"""

from typing import Any, Callable, Dict, List

from .core.node import TreeIdNodeMap, TreeNodeRecord
from .core.walker import iter_tree


def count_nodes(tree: TreeIdNodeMap) -> int:
    """Count the nodes reachable from the root, root included.

    Example:
        >>> count_nodes(convert_nested_tree({"id": "A", "children": [{"id": "B"}]}))
        2
    """
    return sum(1 for _ in iter_tree(tree, include_start=True))


def find_nodes(tree: TreeIdNodeMap,
               predicate: Callable[[TreeNodeRecord], bool]) -> List[TreeNodeRecord]:
    """Find records matching a predicate, in preorder.

    Args:
        tree: Flat tree map
        predicate: Function returning True for records to keep

    Returns:
        Matching records, root included if it matches
    """
    return [node for node in iter_tree(tree, include_start=True) if predicate(node)]


def get_leaf_nodes(tree: TreeIdNodeMap) -> List[TreeNodeRecord]:
    """Get all leaf records in preorder."""
    return find_nodes(tree, lambda node: node.is_leaf)


def get_tree_stats(tree: TreeIdNodeMap) -> Dict[str, Any]:
    """Get statistics about a tree map.

    Returns:
        Dictionary with:
        - total_nodes: Number of records
        - leaf_nodes: Records without children
        - open_nodes: Non-leaf records that are open
        - hidden_nodes: Records under a closed ancestor
        - max_level: Deepest level (0 for a single root, -1 when empty)

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Visible: {stats['total_nodes'] - stats['hidden_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'open_nodes': 0,
        'hidden_nodes': 0,
        'max_level': -1,
    }

    for node in iter_tree(tree, include_start=True):
        stats['total_nodes'] += 1
        if node.is_leaf:
            stats['leaf_nodes'] += 1
        elif node.is_open:
            stats['open_nodes'] += 1
        if node.is_hidden:
            stats['hidden_nodes'] += 1
        stats['max_level'] = max(stats['max_level'], node.level)

    return stats
