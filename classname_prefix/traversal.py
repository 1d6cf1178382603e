"""Depth-first, document-order traversal over ESTree dictionaries.

Handlers are keyed by node type. ``"JSXElement"`` fires when a node is
entered and ``"JSXElement:exit"`` once all of its children have been
visited, so ``"Program:exit"`` is the last call for a unit.
"""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping, Callable

Handler = Callable[[dict[str, Any]], None]

EXIT_SUFFIX = ":exit"

# Metadata keys that hold positions, back-references or token streams
SKIPPED_KEYS = frozenset({"loc", "range", "start", "end", "parent", "comments", "tokens", "extra"})


def is_node(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def _start_offset(node: dict[str, Any]) -> int | None:
    start = node.get("start")
    if isinstance(start, int):
        return start
    span = node.get("range")
    if isinstance(span, list) and span and isinstance(span[0], int):
        return span[0]
    return None


def child_nodes(node: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the direct children of *node* in source order.

    Children are ordered by start offset when every child carries one;
    otherwise key order (then list order) is kept.
    """
    children: list[dict[str, Any]] = []
    for key, value in node.items():
        if key in SKIPPED_KEYS:
            continue
        if is_node(value):
            children.append(value)
        elif isinstance(value, list):
            children.extend(item for item in value if is_node(item))

    offsets = [_start_offset(child) for child in children]
    if children and all(offset is not None for offset in offsets):
        order = sorted(range(len(children)), key=lambda i: offsets[i])
        children = [children[i] for i in order]
    return children


def walk(tree: dict[str, Any], handlers: Mapping[str, Handler]) -> None:
    """Visit *tree* depth-first, calling enter and exit handlers by node type."""
    if not is_node(tree):
        raise TypeError(f"expected an ESTree node, got {type(tree).__name__}")
    # Each exit marker sits beneath its node's children on the stack
    stack: list[tuple[dict[str, Any], bool]] = [(tree, False)]
    while stack:
        node, leaving = stack.pop()
        node_type = node["type"]
        if leaving:
            leave = handlers.get(node_type + EXIT_SUFFIX)
            if leave is not None:
                leave(node)
            continue
        enter = handlers.get(node_type)
        if enter is not None:
            enter(node)
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(child_nodes(node)))


__all__ = ["EXIT_SUFFIX", "SKIPPED_KEYS", "is_node", "child_nodes", "walk"]
