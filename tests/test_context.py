"""Tests for TreeContext, the boundary object used by tree widgets."""

import pytest

from dazzletreestate import (
    InvalidConfigError,
    NavigationConfig,
    NavKey,
    TreeContext,
    TreeContextMissingError,
    TreeNodeNotFoundError,
    TreeStateConfig,
    require_tree_context,
)
from conftest import make_standard_tree


@pytest.fixture
def ctx():
    return TreeContext.from_nested(make_standard_tree(), active_id="A")


@pytest.fixture
def published(ctx):
    """Maps published to subscribers of ctx."""
    maps = []
    ctx.subscribe(maps.append)
    return maps


def test_from_nested(ctx):
    assert ctx.root_id == "root"
    assert ctx.active_id == "A"
    assert len(ctx.tree) == 8


def test_navigate_moves_focus(ctx):
    assert ctx.navigate(NavKey.DOWN) == "A1"
    assert ctx.navigate("ArrowDown") == "A2"
    assert ctx.active_id == "A2"


def test_expand_in_place_then_step_in(ctx, published):
    ctx.focus("A2")
    before = ctx.tree

    assert ctx.navigate(NavKey.RIGHT) == "A2"
    assert ctx.tree is not before
    assert ctx.tree["A2"].is_open
    assert published == [ctx.tree]

    assert ctx.navigate(NavKey.RIGHT) == "A2a"
    assert ctx.navigate(NavKey.DOWN) == "B"
    assert len(published) == 1


def test_collapse_then_move_to_parent(ctx, published):
    ctx.focus("A1")

    assert ctx.navigate(NavKey.LEFT) == "A"
    assert ctx.navigate(NavKey.LEFT) == "A"
    assert not ctx.tree["A"].is_open
    assert ctx.tree["A1"].is_hidden
    assert len(published) == 1


def test_enter_flips(ctx, published):
    ctx.focus("B")

    ctx.navigate(NavKey.ENTER)
    assert ctx.tree["B"].is_open
    ctx.navigate(NavKey.ENTER)
    assert not ctx.tree["B"].is_open
    assert ctx.active_id == "B"
    assert len(published) == 2


def test_set_open_same_state_publishes_nothing(ctx, published):
    tree = ctx.tree

    assert ctx.set_open("A", True) is tree
    assert published == []


def test_set_open_unknown_node(ctx):
    with pytest.raises(TreeNodeNotFoundError):
        ctx.set_open("nope", True)


def test_unsubscribe(ctx, published):
    extra = []
    unsubscribe = ctx.subscribe(extra.append)
    unsubscribe()
    unsubscribe()  # second call is harmless

    ctx.request_toggle("B")

    assert extra == []
    assert len(published) == 1


def test_focus_unknown_node(ctx):
    with pytest.raises(TreeNodeNotFoundError):
        ctx.focus("nope")
    assert ctx.active_id == "A"


def test_first_navigation_focuses_first_row():
    ctx = TreeContext.from_nested(make_standard_tree())

    assert ctx.active_id is None
    assert ctx.navigate(NavKey.DOWN) == "A"


def test_first_navigation_with_root_row():
    ctx = TreeContext.from_nested(make_standard_tree(), config=TreeStateConfig.include_root())

    assert ctx.navigate(NavKey.DOWN) == "root"
    assert ctx.navigate(NavKey.DOWN) == "A"
    assert ctx.navigate(NavKey.UP) == "root"


def test_visible_nodes_cached_per_snapshot(ctx):
    rows = ctx.visible_nodes()
    again = ctx.visible_nodes()

    assert [r.id for r in rows] == ["A", "A1", "A2", "B", "C"]
    assert again == rows
    assert ctx.cache_misses == 1
    assert ctx.cache_hits == 1

    ctx.request_toggle("B")
    assert [r.id for r in ctx.visible_nodes()] == ["A", "A1", "A2", "B", "B1", "C"]
    assert ctx.cache_misses == 2


def test_visible_nodes_returns_copy(ctx):
    ctx.visible_nodes().clear()

    assert len(ctx.visible_nodes()) == 5


def test_invalid_config_rejected():
    config = TreeStateConfig(visible_cache_size=0)

    with pytest.raises(InvalidConfigError):
        TreeContext({}, config=config)


def test_missing_active_node_keeps_id(ctx):
    ctx._active_id = "gone"

    assert ctx.navigate(NavKey.DOWN) == "gone"


def test_require_tree_context(ctx):
    assert require_tree_context(ctx) is ctx
    with pytest.raises(TreeContextMissingError):
        require_tree_context(None)


def test_config_defaults():
    config = TreeStateConfig()

    assert config.navigation == NavigationConfig(exclude_root=True)
    assert config.validate() == []
    assert TreeStateConfig.include_root().navigation.exclude_root is False


def test_config_validation_messages():
    config = TreeStateConfig(navigation=NavigationConfig(exclude_root="yes"), visible_cache_size=-1)

    errors = config.validate()

    assert "visible_cache_size must be positive" in errors
    assert "navigation.exclude_root must be a boolean" in errors


def test_repr(ctx):
    assert repr(ctx) == "TreeContext(nodes=8, active_id='A')"


def test_unknown_key_rejected_without_focus():
    """An unknown key fails even before any node has focus."""
    ctx = TreeContext.from_nested(make_standard_tree())

    with pytest.raises(ValueError):
        ctx.navigate("PageDown")
    assert ctx.active_id is None
