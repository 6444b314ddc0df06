"""Test fixtures for DazzleTreeState consumers.

Helpers for writing compact trees in tests and for verifying that a map
still satisfies the structural invariants of a flat tree.
"""

from typing import Any, Dict, List, Optional, Union

from ..core.node import NestedTreeNode, TreeIdNodeMap, TreeNodeId
from ..core.walker import get_visible_nodes


def node(node_id: TreeNodeId,
         *children: Union[NestedTreeNode, TreeNodeId],
         is_open: bool = False) -> NestedTreeNode:
    """Create a NestedTreeNode; plain ids among children become leaves.

    Example:
        node("A", node("B", "B1", "B2"), "C", is_open=True)
    """
    return NestedTreeNode(
        id=node_id,
        children=[
            child if isinstance(child, NestedTreeNode) else NestedTreeNode(id=child)
            for child in children
        ],
        is_open_by_default=is_open,
    )


class TreeStateTestHelper:
    """Public test fixture for flat tree maps.

    Example:
        helper = TreeStateTestHelper(tree)
        assert helper.check_invariants() == []
        assert helper.visible_ids() == ["B", "C"]
    """

    def __init__(self, tree: TreeIdNodeMap):
        """Initialize with the map under test.

        Args:
            tree: Flat tree map to inspect
        """
        self.tree = tree

    def visible_ids(self, include_root: bool = False) -> List[TreeNodeId]:
        """Ids of the rendered rows, in display order."""
        return [record.id for record in get_visible_nodes(self.tree, include_root=include_root)]

    def hidden_ids(self) -> List[TreeNodeId]:
        """Ids of all hidden records, in map order."""
        return [record.id for record in self.tree.values() if record.is_hidden]

    def hidden_state(self) -> Dict[TreeNodeId, bool]:
        """Snapshot of every record's hidden flag."""
        return {node_id: record.is_hidden for node_id, record in self.tree.items()}

    def check_invariants(self) -> List[str]:
        """Verify the structural invariants of the map.

        Returns:
            List of violations (empty if the map is consistent)
        """
        violations = []
        roots = [record.id for record in self.tree.values() if record.parent is None]
        if self.tree and len(roots) != 1:
            violations.append(f"expected exactly one root, found {roots!r}")

        for node_id, record in self.tree.items():
            if record.id != node_id:
                violations.append(f"{node_id!r}: key does not match record id {record.id!r}")
            if record.is_leaf != (not record.children):
                violations.append(f"{node_id!r}: is_leaf disagrees with children")

            for position, child_id in enumerate(record.children):
                child = self.tree.get(child_id)
                if child is None:
                    violations.append(f"{node_id!r}: child {child_id!r} missing from map")
                    continue
                if child.parent != node_id:
                    violations.append(f"{child_id!r}: parent is {child.parent!r}, expected {node_id!r}")
                if child.index != position:
                    violations.append(f"{child_id!r}: index is {child.index}, expected {position}")
                if child.level != record.level + 1:
                    violations.append(f"{child_id!r}: level is {child.level}, expected {record.level + 1}")
                expected_hidden = not record.is_open or record.is_hidden
                if child.is_hidden != expected_hidden:
                    violations.append(f"{child_id!r}: is_hidden is {child.is_hidden}, expected {expected_hidden}")

            if record.parent is None and (record.level != 0 or record.is_hidden):
                violations.append(f"{node_id!r}: root must be level 0 and visible")

        return violations

    def get_summary(self) -> Dict[str, Any]:
        """High-level map state for assertions and failure messages."""
        root: Optional[TreeNodeId] = next(
            (record.id for record in self.tree.values() if record.parent is None), None
        )
        return {
            'total_nodes': len(self.tree),
            'root_id': root,
            'open_ids': [r.id for r in self.tree.values() if r.is_open and not r.is_leaf],
            'hidden_count': len(self.hidden_ids()),
        }
