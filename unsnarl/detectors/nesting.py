"""Deep nesting detection."""

from __future__ import annotations

import logging

from unsnarl.enums import IssueKind
from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import walk_with_depth
from unsnarl.issues import Issue, make_issue

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 3


def detect_deep_nesting(
    root, threshold: int = DEFAULT_THRESHOLD, *, spec: GrammarSpec = JS_SPEC
) -> list[Issue]:
    """Flag every nesting construct sitting deeper than *threshold* levels.

    Conditionals, loops, switch, try and catch each add a level that is
    visible to their descendants only. One issue per offending construct.
    """
    issues: list[Issue] = []
    for node, depth in walk_with_depth(root, lambda n: n.type in spec.nesting_types):
        if node.type in spec.nesting_types and depth > threshold:
            issues.append(make_issue(
                IssueKind.DEEP_NESTING, node,
                f"Code is nested too deeply ({depth} levels)",
                metric=depth,
            ))
    logger.debug("deep nesting: %d constructs over %d levels", len(issues), threshold)
    return issues


__all__ = ["DEFAULT_THRESHOLD", "detect_deep_nesting"]
