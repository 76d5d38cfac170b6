"""Structural signatures used as grouping keys by the duplicate detectors."""

from __future__ import annotations

from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import children_of, fold


def _placeholder(node, spec: GrammarSpec) -> str | None:
    kind = node.type
    if kind in spec.identifier_types:
        return "ID"
    if kind in spec.number_types:
        return "NUM"
    if kind in spec.string_types:
        return "STR"
    if kind in spec.boolean_types:
        return "BOOL"
    if kind in spec.null_types:
        return "NULL"
    if kind in spec.kept_token_types:
        return kind
    return None


def canonical_shape(node, spec: GrammarSpec = JS_SPEC) -> str:
    """Shape of *node* with identifier names and literal values erased.

    Identifiers become ``ID`` and literals ``NUM``/``STR``/``BOOL``/``NULL``;
    operators and punctuation stay as written; any other node renders as
    ``type(child,child,...)``. Two subtrees that differ only by renaming or
    by literal values produce the same string.
    """

    def leaf(n) -> str | None:
        token = _placeholder(n, spec)
        if token is not None:
            return token
        if not children_of(n):
            return n.type
        return None

    def combine(n, parts: list[str]) -> str:
        return f"{n.type}({','.join(parts)})"

    return fold(node, leaf, combine)


def literal_serialization(node, spec: GrammarSpec = JS_SPEC) -> str:
    """Flat serialization for block comparison.

    Identifiers collapse to ``ID``, other leaves render as their type and
    composite nodes are the comma-joined serializations of their children.
    Unlike ``canonical_shape`` no literal classes are introduced and the
    composite node types themselves are not recorded.
    """

    def leaf(n) -> str | None:
        if n.type in spec.block_identifier_types:
            return "ID"
        if not children_of(n):
            return n.type
        return None

    def combine(_n, parts: list[str]) -> str:
        return ",".join(parts)

    return fold(node, leaf, combine)


__all__ = ["canonical_shape", "literal_serialization"]
