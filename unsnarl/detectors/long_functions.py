"""Long function detection: body line span above a threshold."""

from __future__ import annotations

import logging

from unsnarl.enums import IssueKind
from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import field_of, walk
from unsnarl.issues import Issue, make_issue

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 30


def body_line_span(body) -> int:
    """Rows between the first and last line of *body* (end row exclusive)."""
    return body.end_point[0] - body.start_point[0]


def detect_long_functions(
    root, threshold: int = DEFAULT_THRESHOLD, *, spec: GrammarSpec = JS_SPEC
) -> list[Issue]:
    """Flag named functions and methods whose body spans more than *threshold* lines.

    Functions without a body (e.g. overload signatures) are skipped. The
    issue covers the whole function node, not just the body.
    """
    issues: list[Issue] = []
    for node in walk(root):
        if node.type not in spec.named_function_types:
            continue
        body = field_of(node, "body")
        if body is None:
            continue
        lines = body_line_span(body)
        if lines > threshold:
            issues.append(make_issue(
                IssueKind.LONG_FUNCTION, node,
                f"Function too long ({lines} lines)",
                metric=lines,
            ))
    logger.debug("long functions: %d over %d lines", len(issues), threshold)
    return issues


__all__ = ["DEFAULT_THRESHOLD", "body_line_span", "detect_long_functions"]
