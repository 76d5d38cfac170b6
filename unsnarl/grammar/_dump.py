"""JSON-ready dump of a syntax tree, for debugging detectors."""

from __future__ import annotations

from ._traverse import children_of, fold, node_text


def _point(point) -> dict[str, int]:
    row, column = point
    return {"row": row, "column": column}


def _base(node) -> dict:
    return {
        "type": node.type,
        "start": _point(node.start_point),
        "end": _point(node.end_point),
    }


def tree_to_dict(node) -> dict:
    """Convert a node and its subtree into nested dicts.

    Composite nodes carry ``children``; leaves carry their source ``text``.
    """

    def leaf(n):
        if children_of(n):
            return None
        return {**_base(n), "text": node_text(n)}

    def combine(n, parts: list[dict]) -> dict:
        return {**_base(n), "children": parts}

    return fold(node, leaf, combine)


__all__ = ["tree_to_dict"]
