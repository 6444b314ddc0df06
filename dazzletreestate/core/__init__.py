"""Core tree-state engine: model, builder, walker, toggler and navigator."""

from .node import (
    NestedTreeNode,
    TreeNodeRecord,
    TreeIdNodeMap,
    TreeNodeId,
    ToggleTreeNode,
)
from .adapter import (
    NestedTreeAdapter,
    NestedNodeAdapter,
    MappingTreeAdapter,
    resolve_adapter,
)
from .builder import convert_nested_tree, get_tree_root_id
from .walker import iter_tree, map_tree, get_visible_nodes
from .toggler import toggle_tree_node_record, flip_tree_node_record
from .navigator import get_next_active_node

__all__ = [
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
]
