"""Per-function cyclomatic complexity.

Cyclomatic complexity = 1 + decision points in the function body:
if, loops, catch, ternary, one per switch label, one per && / ||.
Unlike the other detectors this one reports every function, whatever its
score, with a qualitative level attached.
"""

from __future__ import annotations

import logging

from unsnarl.enums import ComplexityLevel, IssueKind
from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import children_of, field_of, node_text, walk
from unsnarl.issues import Issue, make_issue

logger = logging.getLogger(__name__)

DEFAULT_WARN_AT = 10
DEFAULT_NOTE_AT = 5
ANONYMOUS = "<anonymous>"


def _switch_labels(switch_node, spec: GrammarSpec) -> int:
    """Count case/default labels belonging directly to *switch_node*."""
    body = field_of(switch_node, "body")
    holders = [body] if body is not None else [switch_node]
    return sum(
        1
        for holder in holders
        for child in children_of(holder)
        if child.type in spec.case_label_types
    )


def _is_logical(node, spec: GrammarSpec) -> bool:
    operator = field_of(node, "operator")
    if operator is not None:
        return operator.type in spec.logical_operators
    # Grammars without an operator field: look for the operator token.
    return any(child.type in spec.logical_operators for child in children_of(node))


def count_decisions(body, spec: GrammarSpec = JS_SPEC) -> int:
    """Count decision points anywhere under *body*."""
    count = 0
    for node in walk(body):
        kind = node.type
        if kind in spec.branch_types:
            count += 1
        elif kind in spec.switch_types:
            count += _switch_labels(node, spec)
        elif kind in spec.logical_expression_types and _is_logical(node, spec):
            count += 1
    return count


def function_name(node) -> str:
    """Name from the ``name`` field, else the ``key`` field, else a placeholder."""
    for field in ("name", "key"):
        named = field_of(node, field)
        if named is not None:
            text = node_text(named).strip()
            if text:
                return text
    return ANONYMOUS


def classify(score: int, warn_at: int = DEFAULT_WARN_AT, note_at: int = DEFAULT_NOTE_AT) -> ComplexityLevel:
    if score >= warn_at:
        return ComplexityLevel.HIGH
    if score >= note_at:
        return ComplexityLevel.MODERATE
    return ComplexityLevel.LOW


def detect_cyclomatic_complexity(
    root,
    warn_at: int = DEFAULT_WARN_AT,
    note_at: int = DEFAULT_NOTE_AT,
    *,
    spec: GrammarSpec = JS_SPEC,
) -> list[Issue]:
    """Report the complexity of every function-like node that has a body."""
    issues: list[Issue] = []
    for node in walk(root):
        if node.type not in spec.function_types:
            continue
        body = field_of(node, "body")
        if body is None:
            continue
        score = 1 + count_decisions(body, spec)
        level = classify(score, warn_at, note_at)
        name = function_name(node)
        issues.append(make_issue(
            IssueKind.CYCLOMATIC_COMPLEXITY, node,
            f"Function '{name}' has cyclomatic complexity {score} ({level})",
            metric=score,
        ))
    logger.debug("cyclomatic complexity: %d functions scored", len(issues))
    return issues


__all__ = [
    "ANONYMOUS",
    "DEFAULT_NOTE_AT",
    "DEFAULT_WARN_AT",
    "classify",
    "count_decisions",
    "detect_cyclomatic_complexity",
    "function_name",
]
