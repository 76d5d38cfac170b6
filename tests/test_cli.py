"""Tests for the unsnarl CLI: argument parsing and command output."""

import json

import pytest

import unsnarl.config as config_mod
from unsnarl.cli import create_parser, main
from unsnarl.grammar import is_available

requires_grammar = pytest.mark.skipif(
    not is_available(), reason="tree-sitter-language-pack not installed"
)

NESTED = """\
function foo() {
  if (a) { if (b) { if (c) { if (d) { return 1; } } } }
  return 2;
  cleanup();
}
"""


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_mod, "CONFIG_FILE", tmp_path / ".unsnarl" / "config.json")


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "app.js"
    path.write_text(NESTED)
    return path


# ── Parser ──────────────────────────────────────────────────


class TestCreateParser:
    def test_analyze_defaults(self):
        args = create_parser().parse_args(["analyze", "src"])
        assert args.command == "analyze"
        assert args.paths == ["src"]
        assert args.json is False
        assert args.top == 50
        assert args.only is None
        assert args.verbose is False

    def test_detect_args(self):
        args = create_parser().parse_args(
            ["-v", "detect", "nesting", "a.js", "b.ts", "--threshold", "4", "--json"]
        )
        assert args.verbose is True
        assert args.detector == "nesting"
        assert args.paths == ["a.js", "b.ts"]
        assert args.threshold == 4

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_config_set(self):
        args = create_parser().parse_args(["config", "set", "nesting_threshold", "4"])
        assert (args.config_action, args.config_key, args.config_value) == (
            "set", "nesting_threshold", "4",
        )


# ── Commands ────────────────────────────────────────────────


@requires_grammar
class TestAnalyzeCommand:
    def test_json_output(self, source_file, capsys):
        main(["analyze", str(source_file), "--json"])
        payload = json.loads(capsys.readouterr().out)
        [result] = payload["results"]
        assert result["filename"] == str(source_file)
        assert result["language"] == "javascript"
        types = {issue["type"] for issue in result["issues"]}
        assert {"deep-nesting", "dead-code", "bad-naming", "cyclomatic-complexity"} <= types
        assert result["suggestions"] == [issue["message"] for issue in result["issues"]]
        assert result["counts"]["dead-code"] == 1

    def test_table_output(self, source_file, capsys):
        main(["analyze", str(source_file)])
        out = capsys.readouterr().out
        assert "Unreachable code detected" in out
        assert "Code is nested too deeply (4 levels)" in out
        assert "deep nesting: flatten with early returns" in out

    def test_only(self, source_file, capsys):
        main(["analyze", str(source_file), "--json", "--only", "dead-code"])
        [result] = json.loads(capsys.readouterr().out)["results"]
        assert [issue["type"] for issue in result["issues"]] == ["dead-code"]

    def test_unknown_only(self, source_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(source_file), "--only", "spelling"])
        assert exc.value.code == 1
        assert "Unknown detector: spelling" in capsys.readouterr().out

    def test_disabled_in_config(self, source_file, capsys):
        main(["config", "set", "disabled_detectors", "complexity"])
        capsys.readouterr()
        main(["analyze", str(source_file), "--json"])
        [result] = json.loads(capsys.readouterr().out)["results"]
        assert "cyclomatic-complexity" not in {issue["type"] for issue in result["issues"]}

    def test_directory_scan(self, tmp_path, capsys):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.js").write_text("let total = 1;\n")
        (tmp_path / "src" / "b.ts").write_text("const count: number = 2;\n")
        (tmp_path / "src" / "notes.md").write_text("# notes\n")
        (tmp_path / "src" / "node_modules").mkdir()
        (tmp_path / "src" / "node_modules" / "dep.js").write_text("let x = 1;\n")
        main(["analyze", str(tmp_path / "src"), "--json"])
        results = json.loads(capsys.readouterr().out)["results"]
        assert sorted(r["filename"].rsplit("/", 1)[-1] for r in results) == ["a.js", "b.ts"]

    def test_forced_language(self, tmp_path, capsys):
        path = tmp_path / "script.txt"
        path.write_text("let x = 1;\n")
        main(["analyze", str(path), "--lang", "javascript", "--json"])
        [result] = json.loads(capsys.readouterr().out)["results"]
        assert result["issues"][0]["message"] == 'Suspicious variable name: "x"'


class TestErrors:
    def test_unsupported_file(self, tmp_path, capsys):
        path = tmp_path / "README.md"
        path.write_text("# hi\n")
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(path)])
        assert exc.value.code == 1
        assert "Unsupported file type" in capsys.readouterr().err

    def test_missing_path(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(tmp_path / "gone.js")])
        assert exc.value.code == 1
        assert "No such file or directory" in capsys.readouterr().err

    def test_unknown_language(self, source_file, capsys):
        with pytest.raises(SystemExit):
            main(["analyze", str(source_file), "--lang", "cobol"])
        assert "Unsupported language" in capsys.readouterr().err

    def test_unknown_detector(self, source_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["detect", "spelling", str(source_file)])
        assert exc.value.code == 1
        assert "Unknown detector: spelling" in capsys.readouterr().out

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "binary.js"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(path)])
        assert exc.value.code == 1
        assert f"Error: Could not read {path}" in capsys.readouterr().err

    @requires_grammar
    def test_grammar_download_failure(self, source_file, capsys, monkeypatch):
        import tree_sitter_language_pack

        from unsnarl.grammar import _parser

        class FetchError(Exception):
            pass

        def boom(grammar):
            raise FetchError("network unreachable")

        monkeypatch.setattr(tree_sitter_language_pack, "Error", FetchError, raising=False)
        monkeypatch.setattr(_parser, "_get_parser", boom)
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(source_file)])
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "Error: Could not load tree-sitter grammar 'javascript'" in err
        assert "network unreachable" in err


@requires_grammar
class TestDetectCommand:
    def test_single_detector(self, source_file, capsys):
        main(["detect", "nesting", str(source_file), "--json"])
        [result] = json.loads(capsys.readouterr().out)["results"]
        assert [issue["type"] for issue in result["issues"]] == ["deep-nesting"]

    def test_threshold_override(self, source_file, capsys):
        main(["detect", "nesting", str(source_file), "--threshold", "4", "--json"])
        [result] = json.loads(capsys.readouterr().out)["results"]
        assert result["issues"] == []

    def test_threshold_ignored_without_option(self, source_file, capsys):
        main(["detect", "dead-code", str(source_file), "--threshold", "9", "--json"])
        out = capsys.readouterr().out
        assert "takes no threshold" in out


@requires_grammar
class TestAstCommand:
    def test_dump(self, source_file, capsys):
        main(["ast", str(source_file)])
        dump = json.loads(capsys.readouterr().out)
        assert dump["type"] == "program"
        assert dump["children"][0]["type"] == "function_declaration"


class TestConfigCommand:
    def test_set_persists(self, tmp_path, capsys):
        main(["config", "set", "nesting_threshold", "5"])
        assert "Set nesting_threshold = 5" in capsys.readouterr().out
        saved = json.loads((tmp_path / ".unsnarl" / "config.json").read_text())
        assert saved["nesting_threshold"] == 5

    def test_set_invalid_not_saved(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["config", "set", "nesting_threshold", "deep"])
        assert exc.value.code == 1
        assert "Error: Expected integer for nesting_threshold" in capsys.readouterr().err
        assert not (tmp_path / ".unsnarl" / "config.json").exists()

    def test_set_unknown_key(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["config", "set", "nesting_depth", "4"])
        assert exc.value.code == 1
        assert "Error: Unknown config key: nesting_depth" in capsys.readouterr().err
        assert not (tmp_path / ".unsnarl" / "config.json").exists()

    def test_unset_unknown_key(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["config", "unset", "nesting_depth"])
        assert exc.value.code == 1
        assert "Error: Unknown config key: nesting_depth" in capsys.readouterr().err

    def test_unset(self, tmp_path, capsys):
        main(["config", "set", "nesting_threshold", "5"])
        main(["config", "unset", "nesting_threshold"])
        assert "Reset nesting_threshold to default (3)" in capsys.readouterr().out
        saved = json.loads((tmp_path / ".unsnarl" / "config.json").read_text())
        assert saved["nesting_threshold"] == 3

    def test_show(self, capsys):
        main(["config", "show"])
        out = capsys.readouterr().out
        for key in ("long_function_threshold", "bad_names", "disabled_detectors"):
            assert key in out


class TestLangsCommand:
    def test_lists_languages(self, capsys):
        main(["langs"])
        out = capsys.readouterr().out
        assert "typescript" in out
        assert ".tsx" in out
