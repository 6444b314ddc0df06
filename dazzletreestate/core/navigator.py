"""Keyboard navigation for flat tree maps.

Implements the WAI-ARIA tree view keyboard interaction:
https://www.w3.org/WAI/ARIA/apg/patterns/treeview/

The navigator never changes the map. It computes where focus goes next
and, for expand/collapse/activate, asks the caller to toggle a node
through the injected callback.
"""

import logging
from typing import Optional, Set, Union

from ..config import NavKey
from ..errors import TreeCycleError
from .node import ToggleTreeNode, TreeIdNodeMap, TreeNodeId, TreeNodeRecord

logger = logging.getLogger(__name__)


def _is_root_child(tree: TreeIdNodeMap, node: TreeNodeRecord) -> bool:
    return node.parent is not None and tree[node.parent].parent is None


def _request_toggle(toggle_tree_node: Optional[ToggleTreeNode], node_id: TreeNodeId) -> None:
    if toggle_tree_node is None:
        raise TypeError(f'A toggle_tree_node callback is required to toggle node "{node_id}".')
    toggle_tree_node(node_id)


def _find_next_node(tree: TreeIdNodeMap, active_id: TreeNodeId) -> TreeNodeId:
    """Find the node below the active one in display order."""
    current = tree[active_id]

    # Step into an open node
    if not current.is_leaf and current.is_open:
        return current.children[0]

    loop_check: Set[TreeNodeId] = set()

    # Otherwise, find the next sibling of the node or of an ancestor
    while True:
        if current.parent is None:
            # Reached the last node of the tree
            return active_id

        parent = tree[current.parent]
        position = current.index + 1
        if position < len(parent.children):
            return parent.children[position]

        # End of the parent's children, move up one level
        current = parent
        if current.id in loop_check:
            raise TreeCycleError(current.id)
        loop_check.add(current.id)


def _find_previous_node(tree: TreeIdNodeMap,
                        active_id: TreeNodeId,
                        exclude_root: bool) -> TreeNodeId:
    """Find the node above the active one in display order."""
    current = tree[active_id]

    # Already at the root
    if current.parent is None:
        return active_id

    if current.index == 0:
        if exclude_root and _is_root_child(tree, current):
            return active_id
        # Move one level up
        return current.parent

    # Last visible descendant of the previous sibling
    candidate = tree[tree[current.parent].children[current.index - 1]]
    loop_check: Set[TreeNodeId] = {active_id, candidate.id}

    while not candidate.is_leaf and candidate.is_open:
        candidate = tree[candidate.children[-1]]
        if candidate.id in loop_check:
            raise TreeCycleError(candidate.id)
        loop_check.add(candidate.id)

    return candidate.id


def _open_next_node(tree: TreeIdNodeMap,
                    active_id: TreeNodeId,
                    toggle_tree_node: Optional[ToggleTreeNode]) -> TreeNodeId:
    """Open the active node, or move to its first child if already open."""
    current = tree[active_id]

    if current.is_leaf:
        return active_id

    if not current.is_open:
        _request_toggle(toggle_tree_node, active_id)
        return active_id

    return current.children[0]


def _close_next_node(tree: TreeIdNodeMap,
                     active_id: TreeNodeId,
                     exclude_root: bool,
                     toggle_tree_node: Optional[ToggleTreeNode]) -> TreeNodeId:
    """Close the active node, or move to its parent if already closed."""
    current = tree[active_id]

    if current.is_open and not current.is_leaf:
        _request_toggle(toggle_tree_node, active_id)
        return active_id

    if current.parent is None or (exclude_root and _is_root_child(tree, current)):
        return active_id

    return current.parent


def get_next_active_node(tree: TreeIdNodeMap,
                         active_id: TreeNodeId,
                         key: Union[NavKey, str],
                         exclude_root: bool = True,
                         toggle_tree_node: Optional[ToggleTreeNode] = None) -> TreeNodeId:
    """Get the next active tree node based on the pressed key.

    Args:
        tree: Flat tree map
        active_id: Currently active node
        key: NavKey, DOM key name or alias ("up", "enter", ...)
        exclude_root: Never move focus onto the root node
        toggle_tree_node: Called with a node id to request an open/close
            flip; required for RIGHT/LEFT/ENTER when a toggle is needed

    Returns:
        Id of the node that should become active

    Raises:
        ValueError: If the key is not a navigation key
        TreeCycleError: If the map contains a parent/child cycle
        TypeError: If a toggle is needed but no callback was given

    Example:
        >>> get_next_active_node(tree, "A", "ArrowDown", toggle_tree_node=ctx.request_toggle)
        'B'
    """
    nav_key = NavKey.parse(key)

    if active_id not in tree:
        logger.warning('Tree node not found for id: "%s".', active_id)
        return active_id

    if nav_key is NavKey.UP:
        return _find_previous_node(tree, active_id, exclude_root)
    if nav_key is NavKey.DOWN:
        return _find_next_node(tree, active_id)
    if nav_key is NavKey.RIGHT:
        return _open_next_node(tree, active_id, toggle_tree_node)
    if nav_key is NavKey.LEFT:
        return _close_next_node(tree, active_id, exclude_root, toggle_tree_node)

    # ENTER toggles in place, focus never moves
    if not tree[active_id].is_leaf:
        _request_toggle(toggle_tree_node, active_id)
    return active_id
