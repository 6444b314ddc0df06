"""Open/close state transitions for flat tree maps."""

import logging
from dataclasses import replace

from ..config import WalkOptions
from ..errors import TreeNodeNotFoundError
from .node import TreeIdNodeMap, TreeNodeId, TreeNodeRecord
from .walker import map_tree

logger = logging.getLogger(__name__)


def toggle_tree_node_record(node_id: TreeNodeId,
                            prev_tree: TreeIdNodeMap,
                            is_open: bool) -> TreeIdNodeMap:
    """Set the open/close state of a tree node.

    The hidden state of every descendant is recomputed from its parent.
    Preorder guarantees a parent is updated before its children are
    visited. The input map is never changed.

    Args:
        node_id: Id of the node to open or close
        prev_tree: Current flat tree map
        is_open: Desired open state

    Returns:
        A new map, or prev_tree itself when the node already has the
        requested state

    Raises:
        TreeNodeNotFoundError: If node_id is not in the map
    """
    current = prev_tree.get(node_id)
    if current is None:
        raise TreeNodeNotFoundError(node_id)

    if current.is_open == is_open:
        return prev_tree

    new_tree = dict(prev_tree)
    new_tree[node_id] = replace(current, is_open=is_open)

    def _update_hidden(node: TreeNodeRecord, tree: TreeIdNodeMap) -> None:
        parent = tree[node.parent]
        tree[node.id] = replace(node, is_hidden=not parent.is_open or parent.is_hidden)

    map_tree(new_tree, _update_hidden, WalkOptions(start_id=node_id))

    logger.debug("Node %r %s", node_id, "opened" if is_open else "closed")
    return new_tree


def flip_tree_node_record(node_id: TreeNodeId, prev_tree: TreeIdNodeMap) -> TreeIdNodeMap:
    """Toggle a node to the opposite of its current open state.

    This is the meaning of a toggle request (Enter key, TreeContext).

    Raises:
        TreeNodeNotFoundError: If node_id is not in the map
    """
    current = prev_tree.get(node_id)
    if current is None:
        raise TreeNodeNotFoundError(node_id)
    return toggle_tree_node_record(node_id, prev_tree, not current.is_open)
