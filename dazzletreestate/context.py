"""TreeContext: the boundary object between a tree widget and the core.

The context owns the current map snapshot and the active node id. It hands
the navigator a toggle-request callback that applies a toggle and
republishes the resulting map to subscribers. The core functions stay
stateless; all state lives here.

Example:
    ctx = TreeContext.from_nested(root, active_id="docs")
    ctx.subscribe(lambda tree: widget.refresh(tree))
    ctx.navigate("ArrowRight")   # opens "docs"
    ctx.navigate("ArrowRight")   # moves to the first child
"""

import logging
from typing import Any, Callable, List, Optional, Union

from cachetools import LRUCache

from .config import NavKey, TreeStateConfig
from .errors import InvalidConfigError, TreeContextMissingError, TreeNodeNotFoundError
from .core.adapter import NestedTreeAdapter
from .core.builder import convert_nested_tree, get_tree_root_id
from .core.navigator import get_next_active_node
from .core.node import TreeIdNodeMap, TreeNodeId, TreeNodeRecord
from .core.toggler import flip_tree_node_record, toggle_tree_node_record
from .core.walker import get_visible_nodes

logger = logging.getLogger(__name__)

TreeListener = Callable[[TreeIdNodeMap], None]


class TreeContext:
    """Holds the published tree map and the active node of a tree widget.

    Maps are immutable snapshots: every state change publishes a new map,
    so listeners can detect changes by identity and derived data can be
    cached per snapshot.
    """

    def __init__(self,
                 tree: TreeIdNodeMap,
                 active_id: Optional[TreeNodeId] = None,
                 config: Optional[TreeStateConfig] = None):
        """Initialize context.

        Args:
            tree: Flat tree map (see convert_nested_tree)
            active_id: Initially active node (None = no focus yet)
            config: Navigation and cache configuration

        Raises:
            InvalidConfigError: If config fails validation
        """
        self.config = config or TreeStateConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise InvalidConfigError(f"Invalid configuration: {'; '.join(config_errors)}")

        self._tree = tree
        self._active_id = active_id
        self._listeners: List[TreeListener] = []
        # id(tree) -> (tree, rows); the tree is stored so its id can't be reused
        self._visible_cache = LRUCache(maxsize=self.config.visible_cache_size)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    @classmethod
    def from_nested(cls,
                    root: Any,
                    adapter: Optional[NestedTreeAdapter] = None,
                    config: Optional[TreeStateConfig] = None,
                    active_id: Optional[TreeNodeId] = None) -> 'TreeContext':
        """Build the flat map from a nested tree and wrap it in a context."""
        return cls(convert_nested_tree(root, adapter), active_id=active_id, config=config)

    @property
    def tree(self) -> TreeIdNodeMap:
        return self._tree

    @property
    def active_id(self) -> Optional[TreeNodeId]:
        return self._active_id

    @property
    def root_id(self) -> Optional[TreeNodeId]:
        return get_tree_root_id(self._tree)

    def subscribe(self, listener: TreeListener) -> Callable[[], None]:
        """Register a listener called with each newly published map.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, new_tree: TreeIdNodeMap) -> TreeIdNodeMap:
        if new_tree is self._tree:
            return new_tree
        self._tree = new_tree
        for listener in list(self._listeners):
            listener(new_tree)
        return new_tree

    def set_open(self, node_id: TreeNodeId, is_open: bool) -> TreeIdNodeMap:
        """Open or close a node and publish the resulting map.

        Raises:
            TreeNodeNotFoundError: If node_id is not in the map
        """
        return self._publish(toggle_tree_node_record(node_id, self._tree, is_open))

    def request_toggle(self, node_id: TreeNodeId) -> None:
        """Flip a node's open state. Used as the navigator's toggle callback."""
        self._publish(flip_tree_node_record(node_id, self._tree))

    def focus(self, node_id: TreeNodeId) -> None:
        """Make a node active without navigating.

        Raises:
            TreeNodeNotFoundError: If node_id is not in the map
        """
        if node_id not in self._tree:
            raise TreeNodeNotFoundError(node_id)
        self._active_id = node_id

    def navigate(self, key: Union[NavKey, str]) -> Optional[TreeNodeId]:
        """Handle a navigation key and return the new active node id.

        Without an active node the first visible row receives focus.

        Raises:
            ValueError: If the key is not a navigation key
        """
        key = NavKey.parse(key)

        if self._active_id is None:
            rows = self.visible_nodes()
            if rows:
                self._active_id = rows[0].id
            return self._active_id

        previous_id = self._active_id
        self._active_id = get_next_active_node(
            self._tree,
            previous_id,
            key,
            exclude_root=self.config.navigation.exclude_root,
            toggle_tree_node=self.request_toggle,
        )
        logger.debug("Key %s moved focus %r -> %r", key, previous_id, self._active_id)
        return self._active_id

    def visible_nodes(self) -> List[TreeNodeRecord]:
        """Get the rows to render for the current map, cached per snapshot."""
        tree = self._tree
        cached = self._visible_cache.get(id(tree))
        if cached is not None and cached[0] is tree:
            self.cache_hits += 1
            return list(cached[1])

        self.cache_misses += 1
        rows = get_visible_nodes(tree, include_root=not self.config.navigation.exclude_root)
        self._visible_cache[id(tree)] = (tree, tuple(rows))
        return rows

    def __repr__(self) -> str:
        return f"TreeContext(nodes={len(self._tree)}, active_id={self._active_id!r})"


def require_tree_context(value: Optional[TreeContext]) -> TreeContext:
    """Return the given context, failing loudly when there is none.

    Raises:
        TreeContextMissingError: If value is None
    """
    if value is None:
        raise TreeContextMissingError('Tree context is required but was not provided!')
    return value
