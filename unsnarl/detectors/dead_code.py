"""Unreachable code detection.

Finds statements that textually follow a return/throw/break/continue in the
same block. Each block is scanned on its own; there is no reachability
analysis across branches, so code after an if/else whose branches both
return is not reported.
"""

from __future__ import annotations

import logging

from unsnarl.enums import IssueKind
from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import named_children_of, walk
from unsnarl.issues import Issue, make_issue

logger = logging.getLogger(__name__)


def _check_sequence_for_unreachable(block, spec: GrammarSpec, issues: list[Issue]) -> None:
    """Flag every statement after the first terminator in *block*."""
    unreachable = False
    for child in named_children_of(block):
        if child.type in spec.comment_types:
            continue
        if unreachable:
            issues.append(make_issue(IssueKind.DEAD_CODE, child, "Unreachable code detected"))
        if child.type in spec.terminator_types:
            unreachable = True


def detect_dead_code(root, *, spec: GrammarSpec = JS_SPEC) -> list[Issue]:
    issues: list[Issue] = []
    for node in walk(root):
        if node.type in spec.container_types:
            _check_sequence_for_unreachable(node, spec, issues)
    logger.debug("dead code: %d unreachable statements", len(issues))
    return issues


__all__ = ["detect_dead_code"]
