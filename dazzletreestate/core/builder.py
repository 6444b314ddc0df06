"""Conversion of nested trees into flat tree maps."""

import logging
from typing import Any, List, Optional, Set, Tuple

from ..errors import DuplicateNodeIdError, InvalidTreeNodeError
from .adapter import NestedTreeAdapter, resolve_adapter
from .node import TreeIdNodeMap, TreeNodeId, TreeNodeRecord

logger = logging.getLogger(__name__)


def convert_nested_tree(root: Any,
                        adapter: Optional[NestedTreeAdapter] = None) -> TreeIdNodeMap:
    """Traverse a nested tree and convert it to a map between node id and record.

    Each record gets its parent, level, sibling index, leaf flag and hidden
    flag. A node is hidden when its parent is hidden or was not open by
    default. An explicit stack is used instead of recursion so very deep
    trees don't hit the interpreter's recursion limit.

    Args:
        root: Root node of the nested tree
        adapter: Adapter used to read nodes (resolved from root if None)

    Returns:
        New TreeIdNodeMap, in preorder insertion order

    Raises:
        DuplicateNodeIdError: If two nodes share an id
        InvalidTreeNodeError: If a node can't be read

    Example:
        >>> tree = convert_nested_tree({"id": "A", "children": [{"id": "B"}]})
        >>> tree["B"].parent
        'A'
    """
    if adapter is None:
        adapter = resolve_adapter(root)

    tree: TreeIdNodeMap = {}
    seen: Set[TreeNodeId] = set()
    # Stack stores (node, parent_id, level, index, is_hidden) tuples
    stack: List[Tuple[Any, Optional[TreeNodeId], int, int, bool]] = [
        (root, None, 0, 0, False)
    ]

    while stack:
        node, parent_id, level, index, is_hidden = stack.pop()

        node_id = adapter.get_id(node)
        if node_id is None:
            raise InvalidTreeNodeError(f"Tree node id can't be None: {node!r}")
        if node_id in seen:
            raise DuplicateNodeIdError(node_id)
        seen.add(node_id)

        child_nodes = adapter.get_children(node)
        is_open = adapter.is_open_by_default(node)
        children = tuple(adapter.get_id(child) for child in child_nodes)

        tree[node_id] = TreeNodeRecord(
            id=node_id,
            parent=parent_id,
            children=children,
            index=index,
            level=level,
            is_leaf=not children,
            is_open=is_open,
            is_hidden=is_hidden,
        )

        # Push in reverse so the first child is popped next (preorder)
        child_hidden = is_hidden or not is_open
        for child_index in range(len(child_nodes) - 1, -1, -1):
            stack.append(
                (child_nodes[child_index], node_id, level + 1, child_index, child_hidden)
            )

    logger.debug("Built flat tree with %d nodes", len(tree))
    return tree


def get_tree_root_id(tree: TreeIdNodeMap) -> Optional[TreeNodeId]:
    """Get the root node id of a tree map.

    Args:
        tree: Flat tree map

    Returns:
        Id of the record without a parent, or None for an empty map
    """
    for record in tree.values():
        if record.parent is None:
            return record.id
    return None
