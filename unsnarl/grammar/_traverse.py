"""Stack-based traversal helpers over tree-sitter style nodes.

Everything here is iterative so that deeply nested or machine-generated
sources cannot exhaust the interpreter call stack. Nodes are read through
getattr with defaults: a node without children is treated as a leaf, a node
without field lookup has no fields.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class SyntaxNode(Protocol):
    """The node capabilities the detectors rely on (tree_sitter.Node fits)."""

    type: str
    start_point: tuple[int, int]
    end_point: tuple[int, int]
    children: Sequence["SyntaxNode"]
    named_children: Sequence["SyntaxNode"]
    text: bytes | str | None

    def child_by_field_name(self, name: str) -> "SyntaxNode | None": ...


def children_of(node) -> Sequence:
    """All children, punctuation included; empty for leaves or malformed nodes."""
    return getattr(node, "children", None) or ()


def named_children_of(node) -> Sequence:
    return getattr(node, "named_children", None) or ()


def field_of(node, name: str):
    """Return the child stored under field *name*, or None."""
    lookup = getattr(node, "child_by_field_name", None)
    if lookup is None:
        return None
    return lookup(name)


def node_text(node) -> str:
    """Get text from a node as a str."""
    text = getattr(node, "text", None)
    if text is None:
        return ""
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return str(text)


def root_of(tree):
    """Accept either a parsed tree or a node and return the root node."""
    if tree is None:
        raise TypeError("expected a syntax tree or node, got None")
    return getattr(tree, "root_node", tree)


def walk(root) -> Iterator:
    """Yield every node under *root* (inclusive) in source pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        kids = children_of(node)
        for i in range(len(kids) - 1, -1, -1):
            stack.append(kids[i])


def walk_with_depth(root, counts: Callable[[object], bool]) -> Iterator[tuple[object, int]]:
    """Yield ``(node, depth)`` pairs in pre-order.

    Depth grows by one at every node for which *counts* is true, and that
    increment is seen by the node itself and all its descendants, never by
    its siblings.
    """
    stack: list[tuple[object, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if counts(node):
            depth += 1
        yield node, depth
        kids = children_of(node)
        for i in range(len(kids) - 1, -1, -1):
            stack.append((kids[i], depth))


def fold(
    root,
    leaf: Callable[[object], T | None],
    combine: Callable[[object, list[T]], T],
) -> T:
    """Post-order fold without recursion.

    *leaf* may short-circuit any node by returning a value; otherwise nodes
    with children are reduced with *combine* over their children's results
    in source order (an empty list for childless nodes).
    """
    results: list[T] = []
    stack: list[tuple[object, int]] = [(root, -1)]
    while stack:
        node, pending = stack.pop()
        if pending >= 0:
            parts = results[len(results) - pending:]
            del results[len(results) - pending:]
            results.append(combine(node, parts))
            continue
        value = leaf(node)
        if value is not None:
            results.append(value)
            continue
        kids = children_of(node)
        stack.append((node, len(kids)))
        for i in range(len(kids) - 1, -1, -1):
            stack.append((kids[i], -1))
    return results[0]


__all__ = [
    "SyntaxNode",
    "children_of",
    "field_of",
    "fold",
    "named_children_of",
    "node_text",
    "root_of",
    "walk",
    "walk_with_depth",
]
