"""NestedTreeAdapter abstraction for DazzleTreeState.

The adapter knows HOW to read a specific nested tree representation, so the
builder can flatten NestedTreeNode objects, JSON-shaped dicts, or any custom
structure without knowing about it.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Sequence

from ..errors import InvalidTreeNodeError
from .node import NestedTreeNode, TreeNodeId


class NestedTreeAdapter(ABC):
    """Abstract adapter for reading nested tree nodes.

    Implementations must return children in rendering order; the builder
    uses that order for record indexes.
    """

    @abstractmethod
    def get_id(self, node: Any) -> TreeNodeId:
        """Return the unique id of the node."""
        pass

    @abstractmethod
    def get_children(self, node: Any) -> Sequence[Any]:
        """Return the ordered child nodes (empty for a leaf)."""
        pass

    def is_open_by_default(self, node: Any) -> bool:
        """Return whether the node starts open. Defaults to closed."""
        return False


class NestedNodeAdapter(NestedTreeAdapter):
    """Reads NestedTreeNode objects.

    Works with any object exposing ``id``, ``children`` and
    ``is_open_by_default`` attributes; the last two are optional.
    """

    def get_id(self, node: Any) -> TreeNodeId:
        try:
            return node.id
        except AttributeError:
            raise InvalidTreeNodeError(
                f"Tree node has no 'id' attribute: {node!r}"
            ) from None

    def get_children(self, node: Any) -> Sequence[Any]:
        return list(getattr(node, 'children', None) or ())

    def is_open_by_default(self, node: Any) -> bool:
        return bool(getattr(node, 'is_open_by_default', False))


class MappingTreeAdapter(NestedTreeAdapter):
    """Reads JSON-shaped nested dicts.

    Example:
        {"id": "A", "isOpenByDefault": True, "children": [{"id": "B"}]}

    Both ``isOpenByDefault`` and ``is_open_by_default`` are accepted; the
    value must be a real boolean (null counts as closed).
    A missing ``children`` key means the node is a leaf.
    """

    OPEN_KEYS = ('isOpenByDefault', 'is_open_by_default')

    def __init__(self, id_key: str = 'id', children_key: str = 'children'):
        """Initialize adapter.

        Args:
            id_key: Key holding the node id
            children_key: Key holding the list of child dicts
        """
        self.id_key = id_key
        self.children_key = children_key

    def get_id(self, node: Any) -> TreeNodeId:
        if not isinstance(node, Mapping):
            raise InvalidTreeNodeError(f"Expected a mapping tree node, got {node!r}")
        if self.id_key not in node:
            raise InvalidTreeNodeError(f"Tree node has no {self.id_key!r} key: {node!r}")
        return node[self.id_key]

    def get_children(self, node: Any) -> Sequence[Any]:
        return list(node.get(self.children_key) or ())

    def is_open_by_default(self, node: Any) -> bool:
        for key in self.OPEN_KEYS:
            if key in node:
                value = node[key]
                if value is None:
                    return False
                if not isinstance(value, bool):
                    raise InvalidTreeNodeError(
                        f"{key!r} must be a boolean, got {value!r}"
                    )
                return value
        return False


def resolve_adapter(root: Any) -> NestedTreeAdapter:
    """Pick an adapter able to read the given root node.

    Args:
        root: Root of a nested tree

    Returns:
        NestedTreeAdapter instance

    Raises:
        InvalidTreeNodeError: If no built-in adapter understands the node
    """
    if isinstance(root, Mapping):
        return MappingTreeAdapter()
    if isinstance(root, NestedTreeNode) or hasattr(root, 'id'):
        return NestedNodeAdapter()
    raise InvalidTreeNodeError(
        f"No adapter for tree node of type {type(root).__name__}; "
        f"pass an explicit NestedTreeAdapter"
    )
