#!/usr/bin/env python3
"""
Keyboard navigation example for DazzleTreeState.

Replays a sequence of key presses against a small project tree and prints
the rendered rows after each one.

Usage:
    python examples/keyboard_navigation_demo.py down right right down left enter
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzletreestate import TreeContext
from dazzletreestate.logging_config import setup_logging

PROJECT = {
    "id": "project",
    "isOpenByDefault": True,
    "children": [
        {"id": "src", "children": [
            {"id": "app.py"},
            {"id": "utils", "children": [{"id": "io.py"}, {"id": "text.py"}]},
        ]},
        {"id": "tests", "children": [{"id": "test_app.py"}]},
        {"id": "README.md"},
    ],
}


def render(ctx: TreeContext) -> None:
    for row in ctx.visible_nodes():
        marker = " " if row.is_leaf else ("v" if row.is_open else ">")
        focus = "*" if row.id == ctx.active_id else " "
        print(f"{focus} {'  ' * (row.level - 1)}{marker} {row.id}")


def main():
    setup_logging()
    keys = sys.argv[1:] or ["down", "right", "right", "down", "left", "left", "down", "enter"]

    ctx = TreeContext.from_nested(PROJECT)
    render(ctx)

    for key in keys:
        ctx.navigate(key)
        print("-" * 40)
        print(f"[{key}] active: {ctx.active_id}")
        render(ctx)


if __name__ == "__main__":
    main()
