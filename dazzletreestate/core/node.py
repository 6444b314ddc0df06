"""Node types for DazzleTreeState.

NestedTreeNode is the caller-owned, recursive description of a tree.
TreeNodeRecord is the flat, per-node state held in a TreeIdNodeMap; it is
intentionally a pure data container with no behavior.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, List, Optional, Tuple

TreeNodeId = Hashable


@dataclass
class NestedTreeNode:
    """A node of the nested tree given to convert_nested_tree.

    The tree is read-only to the library; children order is the
    rendering order.
    """

    id: TreeNodeId
    children: List['NestedTreeNode'] = field(default_factory=list)
    is_open_by_default: bool = False


@dataclass(frozen=True)
class TreeNodeRecord:
    """Flat state of a single tree node.

    Records are frozen: a state change replaces the record in a new map
    (see dataclasses.replace) instead of mutating it.

    Attributes:
        id: Unique, stable identifier of the node
        parent: Id of the parent record, None for the root
        children: Child ids in sibling order
        index: Position among siblings (0-based, root = 0)
        level: Depth from the root (root = 0)
        is_leaf: True iff children is empty
        is_open: Whether the node discloses its children
        is_hidden: True iff some ancestor is closed
    """

    id: TreeNodeId
    parent: Optional[TreeNodeId] = None
    children: Tuple[TreeNodeId, ...] = ()
    index: int = 0
    level: int = 0
    is_leaf: bool = True
    is_open: bool = False
    is_hidden: bool = False

    @property
    def is_root(self) -> bool:
        return self.parent is None


# A flat tree: exactly one entry per node and exactly one entry without a
# parent. Published maps are never mutated; operations return new maps.
TreeIdNodeMap = Dict[TreeNodeId, TreeNodeRecord]

# Callback used by the navigator to request an open/close flip of a node.
ToggleTreeNode = Callable[[TreeNodeId], None]
