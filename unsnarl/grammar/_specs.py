"""Per-language node-type vocabularies.

Each ``GrammarSpec`` is the closed set of tree-sitter node types the
detectors care about for one grammar. Detectors never compare against raw
strings of their own; they read the sets off the spec they were given.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from unsnarl.enums import Language


@dataclass(frozen=True)
class GrammarSpec:
    """Node-type vocabulary for one tree-sitter grammar.

    Fields:
        grammar: tree-sitter-language-pack grammar name
        extensions: file extensions mapped to this grammar
        named_function_types: named function/method definitions (long functions)
        function_types: every function-like node (duplicates, complexity)
        block_candidate_types: nodes compared by the duplicate-block detector
        nesting_types: constructs that add one nesting level
        branch_types: constructs that add one decision point
        switch_types / case_label_types: switch statements and their labels
        logical_expression_types / logical_operators: short-circuit operators
        container_types: statement sequences scanned for unreachable code
        terminator_types: statements that end control flow in a block
        comment_types: extras that are not statements
        naming_types: leaves checked by the bad-naming detector
        identifier_types ... null_types: canonical placeholder classes
        kept_token_types: operators and punctuation kept verbatim
    """

    grammar: str
    extensions: tuple[str, ...]

    named_function_types: frozenset[str] = frozenset({
        "function_declaration",
        "generator_function_declaration",
        "method_definition",
    })
    function_types: frozenset[str] = frozenset({
        "function_declaration",
        "generator_function_declaration",
        "method_definition",
        "function",
        "function_expression",
        "generator_function",
        "arrow_function",
    })
    block_candidate_types: frozenset[str] = frozenset({
        "function_declaration",
        "method_definition",
        "statement_block",
    })

    nesting_types: frozenset[str] = frozenset({
        "if_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "switch_statement",
        "try_statement",
        "catch_clause",
    })

    branch_types: frozenset[str] = frozenset({
        "if_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "catch_clause",
        "ternary_expression",
    })
    switch_types: frozenset[str] = frozenset({"switch_statement"})
    case_label_types: frozenset[str] = frozenset({"switch_case", "switch_default"})
    logical_expression_types: frozenset[str] = frozenset({"binary_expression"})
    logical_operators: frozenset[str] = frozenset({"&&", "||"})

    container_types: frozenset[str] = frozenset({"statement_block", "program"})
    terminator_types: frozenset[str] = frozenset({
        "return_statement",
        "throw_statement",
        "break_statement",
        "continue_statement",
    })
    comment_types: frozenset[str] = frozenset({"comment", "html_comment"})

    naming_types: frozenset[str] = frozenset({"identifier", "property_identifier"})
    block_identifier_types: frozenset[str] = frozenset({"identifier"})

    identifier_types: frozenset[str] = frozenset({
        "identifier",
        "property_identifier",
        "shorthand_property_identifier",
    })
    number_types: frozenset[str] = frozenset({"number"})
    string_types: frozenset[str] = frozenset({
        "string",
        "string_fragment",
        "template_string",
        "template_substitution",
    })
    boolean_types: frozenset[str] = frozenset({"true", "false"})
    null_types: frozenset[str] = frozenset({"null"})
    kept_token_types: frozenset[str] = frozenset({
        "+", "-", "*", "/", "%",
        "==", "===", "!=", "!==", "<", "<=", ">", ">=",
        "&&", "||", "!", "?", ":", "=", "=>",
        ".", ",", ";", "(", ")", "{", "}", "[", "]",
    })


# ── JavaScript ────────────────────────────────────────────────

JS_SPEC = GrammarSpec(
    grammar="javascript",
    extensions=(".js", ".mjs", ".cjs", ".jsx"),
)

# ── TypeScript ────────────────────────────────────────────────

# Overload signatures (function_signature, method_signature) carry no body
# and are deliberately absent from the function sets.
TYPESCRIPT_SPEC = replace(
    JS_SPEC,
    grammar="typescript",
    extensions=(".ts", ".mts", ".cts"),
    identifier_types=JS_SPEC.identifier_types | {"type_identifier"},
)

TSX_SPEC = replace(TYPESCRIPT_SPEC, grammar="tsx", extensions=(".tsx",))

# ── Registry of all specs by language ─────────────────────────

GRAMMAR_SPECS: dict[Language, GrammarSpec] = {
    Language.JAVASCRIPT: JS_SPEC,
    Language.TYPESCRIPT: TYPESCRIPT_SPEC,
    Language.TSX: TSX_SPEC,
}


__all__ = [
    "GRAMMAR_SPECS",
    "GrammarSpec",
    "JS_SPEC",
    "TSX_SPEC",
    "TYPESCRIPT_SPEC",
]
