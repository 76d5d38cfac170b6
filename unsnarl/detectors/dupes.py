"""Duplicate code detection.

Two granularities:
- ``detect_duplicate_code``: whole function bodies compared by canonical
  shape, so renamed variables and changed literals still match. One issue
  per group.
- ``detect_duplicate_blocks``: functions and any statement block compared
  by literal serialization. One issue per occurrence.

Grouping dicts live only for the duration of one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from unsnarl.enums import IssueKind
from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import field_of, named_children_of, walk
from unsnarl.issues import Issue, Span, make_issue

from .canonical import canonical_shape, literal_serialization
from .long_functions import body_line_span

logger = logging.getLogger(__name__)

DEFAULT_MIN_LINES = 4
DEFAULT_MIN_CHARS = 40
DEFAULT_MIN_STATEMENTS = 2


@dataclass
class _Block:
    node: object
    shape: str


def _collect_function_bodies(
    root, spec: GrammarSpec, min_lines: int, min_chars: int
) -> list[_Block]:
    blocks: list[_Block] = []
    for node in walk(root):
        if node.type not in spec.function_types:
            continue
        body = field_of(node, "body")
        if body is None:
            body = node
        if body_line_span(body) < min_lines:
            continue
        shape = canonical_shape(body, spec)
        if len(shape) < min_chars:
            logger.debug("dupes: skipping trivial body at row %d", node.start_point[0])
            continue
        blocks.append(_Block(node, shape))
    return blocks


def detect_duplicate_code(
    root,
    min_lines: int = DEFAULT_MIN_LINES,
    min_chars: int = DEFAULT_MIN_CHARS,
    *,
    spec: GrammarSpec = JS_SPEC,
) -> list[Issue]:
    """Group function-like nodes whose bodies share a canonical shape.

    Each group of two or more yields one issue located at its first member,
    listing every member (first included) in ``locations``.
    """
    groups: dict[str, list[_Block]] = {}
    for block in _collect_function_bodies(root, spec, min_lines, min_chars):
        groups.setdefault(block.shape, []).append(block)

    issues: list[Issue] = []
    for group in groups.values():
        if len(group) < 2:
            continue
        locations = tuple(Span.of(b.node) for b in group)
        issues.append(make_issue(
            IssueKind.DUPLICATE_CODE, group[0].node,
            f"Duplicate code detected in {len(group)} places (similar function bodies).",
            locations=locations,
            metric=len(group),
        ))
    return issues


def detect_duplicate_blocks(
    root, min_statements: int = DEFAULT_MIN_STATEMENTS, *, spec: GrammarSpec = JS_SPEC
) -> list[Issue]:
    """Flag every function or statement block that repeats elsewhere verbatim.

    A function can match a block nested in an unrelated function when their
    serializations coincide; that over-matching is accepted.
    """
    groups: dict[str, list[object]] = {}
    for node in walk(root):
        if node.type not in spec.block_candidate_types:
            continue
        if len(named_children_of(node)) < min_statements:
            continue
        groups.setdefault(literal_serialization(node, spec), []).append(node)

    issues: list[Issue] = []
    for nodes in groups.values():
        if len(nodes) < 2:
            continue
        for node in nodes:
            issues.append(make_issue(
                IssueKind.DUPLICATE_CODE_BLOCK, node,
                f"Duplicate code block detected ({len(nodes)} occurrences)",
                metric=len(nodes),
            ))
    return issues


__all__ = [
    "DEFAULT_MIN_CHARS",
    "DEFAULT_MIN_LINES",
    "DEFAULT_MIN_STATEMENTS",
    "detect_duplicate_blocks",
    "detect_duplicate_code",
]
