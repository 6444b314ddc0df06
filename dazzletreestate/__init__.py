"""DazzleTreeState - State engine for collapsible tree widgets.

DazzleTreeState keeps the logical state of an interactive tree view: which
nodes are open, which are hidden under a collapsed ancestor, and which node
is active under keyboard navigation.

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzletreestate import convert_nested_tree, TreeContext

    ctx = TreeContext.from_nested(nested_root)
    ctx.navigate("ArrowDown")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every state transition returns a new map; published maps are never mutated.
"""

import logging

__version__ = "0.1.0"

from .config import NavKey, WalkOptions, NavigationConfig, TreeStateConfig
from .errors import (
    TreeStateError,
    DuplicateNodeIdError,
    InvalidTreeNodeError,
    TreeNodeNotFoundError,
    TreeCycleError,
    TreeContextMissingError,
    InvalidConfigError,
)
from .core import (
    NestedTreeNode,
    TreeNodeRecord,
    TreeIdNodeMap,
    TreeNodeId,
    ToggleTreeNode,
    NestedTreeAdapter,
    NestedNodeAdapter,
    MappingTreeAdapter,
    resolve_adapter,
    convert_nested_tree,
    get_tree_root_id,
    iter_tree,
    map_tree,
    get_visible_nodes,
    toggle_tree_node_record,
    flip_tree_node_record,
    get_next_active_node,
)
from .api import count_nodes, find_nodes, get_leaf_nodes, get_tree_stats
from .context import TreeContext, require_tree_context

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    'NavKey',
    'WalkOptions',
    'NavigationConfig',
    'TreeStateConfig',
    # Errors
    'TreeStateError',
    'DuplicateNodeIdError',
    'InvalidTreeNodeError',
    'TreeNodeNotFoundError',
    'TreeCycleError',
    'TreeContextMissingError',
    'InvalidConfigError',
    # Core
    'NestedTreeNode',
    'TreeNodeRecord',
    'TreeIdNodeMap',
    'TreeNodeId',
    'ToggleTreeNode',
    'NestedTreeAdapter',
    'NestedNodeAdapter',
    'MappingTreeAdapter',
    'resolve_adapter',
    'convert_nested_tree',
    'get_tree_root_id',
    'iter_tree',
    'map_tree',
    'get_visible_nodes',
    'toggle_tree_node_record',
    'flip_tree_node_record',
    'get_next_active_node',
    # API
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
    # Context
    'TreeContext',
    'require_tree_context',
]
