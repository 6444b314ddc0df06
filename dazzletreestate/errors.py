"""Exception hierarchy for DazzleTreeState.

Every error raised by the library derives from TreeStateError, and also from
the builtin exception that best describes it, so callers can catch either.
"""


class TreeStateError(Exception):
    """Base class for all DazzleTreeState errors."""
    pass


class DuplicateNodeIdError(TreeStateError, ValueError):
    """Raised when two nodes of a nested tree share the same id."""

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f'Duplicate node id found: "{node_id}".')


class InvalidTreeNodeError(TreeStateError, TypeError):
    """Raised when a nested tree node can't be read by any adapter."""
    pass


class TreeNodeNotFoundError(TreeStateError, LookupError):
    """Raised when a requested node id does not exist in a tree map."""

    def __init__(self, node_id, message: str = None):
        self.node_id = node_id
        super().__init__(message or f'Tree node is not found for id: "{node_id}".')


class TreeCycleError(TreeStateError, RuntimeError):
    """Raised when navigation revisits a node while walking up or down.

    A map produced by convert_nested_tree can't contain a cycle, so this
    means the map was corrupted after it was built.
    """

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(
            f'Infinite loop detected in the tree navigation at node "{node_id}".'
        )


class TreeContextMissingError(TreeStateError, RuntimeError):
    """Raised when a consumer requires a TreeContext but none was provided."""
    pass


class InvalidConfigError(TreeStateError, ValueError):
    """Raised when a TreeStateConfig fails validation."""
    pass
