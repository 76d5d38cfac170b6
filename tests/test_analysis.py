"""Tests for unsnarl.analysis: reading files and building reports."""

import pytest

from unsnarl.analysis import analyze_file, analyze_source
from unsnarl.enums import IssueKind, Language
from unsnarl.errors import SourceReadError, UnsupportedLanguageError
from unsnarl.grammar import is_available

requires_grammar = pytest.mark.skipif(
    not is_available(), reason="tree-sitter-language-pack not installed"
)


# ── Reading ─────────────────────────────────────────────────


class TestAnalyzeFileErrors:
    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "binary.js"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(SourceReadError, match="Could not read") as exc:
            analyze_file(path)
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError, match="gone.ts"):
            analyze_file(tmp_path / "gone.ts")

    def test_unknown_extension_checked_before_read(self, tmp_path):
        with pytest.raises(UnsupportedLanguageError, match="notes.md"):
            analyze_file(tmp_path / "notes.md")


# ── Reports ─────────────────────────────────────────────────


@requires_grammar
class TestReports:
    def test_language_from_extension(self):
        report = analyze_source("widget.tsx", "const view = () => <b>hi</b>;\n")
        assert report.language == Language.TSX

    def test_explicit_language_wins(self):
        report = analyze_source("script.txt", "let x = 1;\n", "javascript")
        assert report.language == Language.JAVASCRIPT
        assert report.suggestions == ['Suspicious variable name: "x"']

    def test_counts_and_dict(self, tmp_path):
        path = tmp_path / "app.js"
        path.write_text("function run() {\n  return 1;\n  cleanup();\n}\n")
        report = analyze_file(path, only=["dead-code"])
        assert [i.kind for i in report.issues] == [IssueKind.DEAD_CODE]
        assert report.counts == {"dead-code": 1}
        payload = report.to_dict()
        assert payload["filename"] == str(path)
        assert payload["language"] == "javascript"
        assert payload["suggestions"] == ["Unreachable code detected"]
