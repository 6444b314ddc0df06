"""Configuration system for DazzleTreeState.

This module defines how users specify walk options, navigation behavior and
the caching limits of a TreeContext.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List, Optional, Union


class NavKey(Enum):
    """Keyboard commands understood by the tree navigator.

    Values are the DOM key names so events coming from a web front end can
    be passed straight through.
    """
    UP = "ArrowUp"          # Previous visible node
    DOWN = "ArrowDown"      # Next visible node
    RIGHT = "ArrowRight"    # Expand, or move to first child
    LEFT = "ArrowLeft"      # Collapse, or move to parent
    ENTER = "Enter"         # Toggle in place

    @classmethod
    def parse(cls, value: Union["NavKey", str]) -> "NavKey":
        """Convert a key name or alias to a NavKey.

        Args:
            value: NavKey instance, DOM key name or alias (case-insensitive)

        Returns:
            Matching NavKey

        Raises:
            ValueError: If the key is not recognized
        """
        if isinstance(value, cls):
            return value

        key = str(value).lower()
        if key not in _NAV_KEY_ALIASES:
            raise ValueError(
                f"Unknown navigation key: {value}. "
                f"Choose from: {', '.join(_NAV_KEY_ALIASES.keys())}"
            )
        return _NAV_KEY_ALIASES[key]


_NAV_KEY_ALIASES: Dict[str, NavKey] = {
    'arrowup': NavKey.UP,
    'up': NavKey.UP,
    'arrowdown': NavKey.DOWN,
    'down': NavKey.DOWN,
    'arrowright': NavKey.RIGHT,
    'right': NavKey.RIGHT,
    'expand': NavKey.RIGHT,
    'arrowleft': NavKey.LEFT,
    'left': NavKey.LEFT,
    'collapse': NavKey.LEFT,
    'enter': NavKey.ENTER,
    'activate': NavKey.ENTER,
}


@dataclass
class WalkOptions:
    """Options for map_tree / iter_tree."""

    start_id: Optional[Hashable] = None  # None = root of the map
    include_start: bool = False          # Visit the start node itself


@dataclass
class NavigationConfig:
    """Configuration for keyboard navigation."""

    # Keep focus off the root: the root is usually not rendered as a row
    exclude_root: bool = True


@dataclass
class TreeStateConfig:
    """Complete configuration for a TreeContext.

    Combines navigation behavior with the size of the per-snapshot cache
    of visible rows.
    """

    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    visible_cache_size: int = 64  # Snapshots kept in the visible-rows cache

    @classmethod
    def include_root(cls, **kwargs: Any) -> 'TreeStateConfig':
        """Create config for trees whose root is rendered and focusable.

        Returns:
            TreeStateConfig with exclude_root disabled
        """
        return cls(navigation=NavigationConfig(exclude_root=False), **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.visible_cache_size, int) or isinstance(self.visible_cache_size, bool):
            errors.append("visible_cache_size must be an integer")
        elif self.visible_cache_size <= 0:
            errors.append("visible_cache_size must be positive")

        if not isinstance(self.navigation.exclude_root, bool):
            errors.append("navigation.exclude_root must be a boolean")

        return errors
