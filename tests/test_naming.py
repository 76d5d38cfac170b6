"""Tests for unsnarl.detectors.naming."""

import logging

import pytest

from unsnarl.detectors.naming import detect_bad_naming, is_suspicious_name, naming_message
from unsnarl.enums import IssueKind
from unsnarl.grammar import is_available

requires_grammar = pytest.mark.skipif(
    not is_available(), reason="tree-sitter-language-pack not installed"
)


class TestIsSuspiciousName:
    @pytest.mark.parametrize("name", ["foo", "bar", "baz", "tmp", "data", "test", "x", "z", "_", "$"])
    def test_flagged(self, name):
        assert is_suspicious_name(name)

    @pytest.mark.parametrize("name", ["i", "j", "k", "food", "testing", "metadata", "xs", "count"])
    def test_not_flagged(self, name):
        assert not is_suspicious_name(name)

    def test_custom_lists(self):
        assert is_suspicious_name("helper", bad_names={"helper"})
        assert not is_suspicious_name("foo", bad_names={"helper"})
        assert not is_suspicious_name("x", allowed_single={"x"})
        assert is_suspicious_name("i", allowed_single=set())

    def test_message_quotes_name(self):
        assert naming_message("tmp") == 'Suspicious variable name: "tmp"'


@requires_grammar
class TestDetectBadNaming:
    def test_flags_denylist_and_single_letters(self, parse):
        root = parse("""\
            let foo = 1;
            let x = 2;
            for (let i = 0; i < 3; i++) {}
            let z = 3;
        """)
        messages = [i.message for i in detect_bad_naming(root)]
        assert messages == [
            'Suspicious variable name: "foo"',
            'Suspicious variable name: "x"',
            'Suspicious variable name: "z"',
        ]

    def test_exact_match_only(self, parse):
        issues = detect_bad_naming(parse("let food = fetchAll();"))
        assert issues == []
        assert not any(i.message == naming_message("foo") for i in issues)

    def test_loop_counters_allowed(self, parse):
        root = parse("for (let i = 0; i < n.length; i++) { for (let j = i; j < k; j++) {} }")
        assert [i.message for i in detect_bad_naming(root)] == [naming_message("n")]

    def test_property_names_checked(self, parse):
        [issue] = detect_bad_naming(parse("record.tmp = load();"))
        assert issue.kind == IssueKind.BAD_NAMING
        assert issue.message == naming_message("tmp")
        assert issue.start.column == 7

    def test_each_occurrence_reported(self, parse):
        issues = detect_bad_naming(parse("a = a + a;"))
        assert len(issues) == 3
        assert [i.start.column for i in issues] == [0, 4, 8]

    def test_custom_denylist(self, parse):
        root = parse("let helper = foo;")
        issues = detect_bad_naming(root, bad_names={"helper"})
        assert [i.message for i in issues] == [naming_message("helper")]

    def test_custom_allowlist(self, parse):
        root = parse("let x = 1; let i = 2;")
        issues = detect_bad_naming(root, allowed_single={"x"})
        assert [i.message for i in issues] == [naming_message("i")]

    def test_string_contents_ignored(self, parse):
        assert detect_bad_naming(parse("log('foo', \"x\");")) == []

    def test_typescript(self, parse):
        root = parse("function load(data: string): void { const q = data; }", "typescript")
        assert [i.message for i in detect_bad_naming(root)] == [
            naming_message("data"),
            naming_message("q"),
            naming_message("data"),
        ]

    def test_debug_log_reports_count_only(self, parse, caplog):
        root = parse("let foo = tmp;")
        with caplog.at_level(logging.DEBUG, logger="unsnarl.detectors.naming"):
            detect_bad_naming(root)
        assert caplog.messages == ["bad naming: 2 suspicious names"]
