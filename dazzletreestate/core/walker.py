"""Depth-first traversal of flat tree maps.

The walker is the shared primitive behind cascading updates (the toggler
recomputes hidden flags with it) and behind renderer queries such as
"all visible descendants of X".
"""

from dataclasses import fields, replace
from typing import Any, Callable, Iterator, List, Optional, Set, TypeVar

from ..config import WalkOptions
from ..errors import TreeNodeNotFoundError
from .builder import get_tree_root_id
from .node import TreeIdNodeMap, TreeNodeId, TreeNodeRecord

T = TypeVar('T')

_WALK_OPTION_NAMES = {f.name for f in fields(WalkOptions)}


def _resolve_options(options: Optional[WalkOptions], overrides: dict) -> WalkOptions:
    unknown = set(overrides) - _WALK_OPTION_NAMES
    if unknown:
        raise TypeError(f"Unknown walk option(s): {', '.join(sorted(unknown))}")
    return replace(options or WalkOptions(), **overrides)


def _resolve_start(tree: TreeIdNodeMap, options: WalkOptions) -> TreeNodeId:
    start_id = options.start_id
    if start_id is None:
        start_id = get_tree_root_id(tree)
    if start_id not in tree:
        raise TreeNodeNotFoundError(
            start_id, f'Tree root node is not found for id: "{start_id}".'
        )
    return start_id


def _walk_preorder(tree: TreeIdNodeMap,
                   start_id: TreeNodeId,
                   include_start: bool) -> Iterator[TreeNodeRecord]:
    """Yield records in preorder, reading each record when it is reached.

    Records are looked up lazily so a caller replacing records of visited
    ancestors (as the toggler does) is seen by their descendants.
    """
    stack: List[TreeNodeId] = [start_id]
    visited: Set[TreeNodeId] = set()

    while stack:
        node_id = stack.pop()

        # Skip if already visited (handles cycles in corrupted maps)
        if node_id in visited:
            continue
        visited.add(node_id)

        node = tree.get(node_id)
        if node is None:
            raise TreeNodeNotFoundError(node_id)

        if include_start or node_id != start_id:
            yield node

        # Reverse push keeps the first child on top of the stack
        stack.extend(reversed(node.children))


def iter_tree(tree: TreeIdNodeMap,
              options: Optional[WalkOptions] = None,
              **overrides: Any) -> Iterator[TreeNodeRecord]:
    """Lazily iterate the records of a tree in depth-first preorder.

    Args:
        tree: Flat tree map
        options: Walk options (start node, start inclusion)
        **overrides: Individual WalkOptions fields, e.g. start_id="A"

    Returns:
        Iterator of records; empty for an empty map

    Raises:
        TreeNodeNotFoundError: If the start node is not in the map
    """
    if not tree:
        return iter(())
    opts = _resolve_options(options, overrides)
    start_id = _resolve_start(tree, opts)
    return _walk_preorder(tree, start_id, opts.include_start)


def map_tree(tree: TreeIdNodeMap,
             callback: Callable[[TreeNodeRecord, TreeIdNodeMap], T],
             options: Optional[WalkOptions] = None,
             **overrides: Any) -> Optional[List[T]]:
    """Map each tree node to a new value by calling the callback function.

    Uses depth-first search with preorder traversal: a node is visited, then
    the whole subtree of its first child, then the next child. By default
    the start node itself is excluded and only its descendants are visited.

    Args:
        tree: Flat tree map
        callback: Called as callback(node, tree) for each visited node
        options: Walk options (start node, start inclusion)
        **overrides: Individual WalkOptions fields, e.g. include_start=True

    Returns:
        Callback results in visitation order, or None for an empty map

    Raises:
        TreeNodeNotFoundError: If the start node is not in the map

    Example:
        >>> map_tree(tree, lambda node, _: node.id)
        ['B', 'C']
    """
    if not tree:
        return None

    opts = _resolve_options(options, overrides)
    start_id = _resolve_start(tree, opts)

    return [callback(node, tree) for node in _walk_preorder(tree, start_id, opts.include_start)]


def get_visible_nodes(tree: TreeIdNodeMap, include_root: bool = False) -> List[TreeNodeRecord]:
    """Get the records a renderer shows, in display order.

    Args:
        tree: Flat tree map
        include_root: Whether the root itself is rendered as a row

    Returns:
        Preorder list of records that are not hidden
    """
    return [
        node for node in iter_tree(tree, include_start=include_root)
        if not node.is_hidden
    ]
