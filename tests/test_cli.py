"""Tests for the find-indent command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from find_indent.__main__ import main

TABS = "sub f {\n\treturn 1;\n}\n"
SPACES = "def f():\n    return 1\n"


@pytest.fixture
def tabs_file(tmp_path: Path) -> Path:
    p = tmp_path / "Foo.pm"
    p.write_text(TABS, encoding="utf-8")
    return p


class TestDefaultMode:
    def test_prints_signature(self, tabs_file, capsys) -> None:
        assert main([str(tabs_file)]) == 0
        assert capsys.readouterr().out == "t8\n"

    def test_json(self, tabs_file, capsys) -> None:
        assert main([str(tabs_file), "--json"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out == {"signature": "t8", "style": "tabs", "width": 8}

    def test_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(SPACES))
        assert main(["-"]) == 0
        assert capsys.readouterr().out == "s4\n"

    def test_expect_match(self, tabs_file) -> None:
        assert main([str(tabs_file), "--expect", "t8"]) == 0

    def test_expect_mismatch(self, tabs_file, capsys) -> None:
        assert main(["--expect", "s4", str(tabs_file)]) == 1
        assert "expected s4, detected t8" in capsys.readouterr().err

    def test_expect_invalid(self, tabs_file, capsys) -> None:
        assert main([str(tabs_file), "--expect", "x4"]) == 2
        assert "--expect" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "nope.py")]) == 2
        assert "error:" in capsys.readouterr().err

    def test_skip_pod_flag(self, tmp_path, capsys) -> None:
        p = tmp_path / "Doc.pm"
        p.write_text(
            "a {\n    b;\n}\n" * 3 + "\n=pod\n\n" + "  a\n    b\n" * 3 + "\n=cut\n",
            encoding="utf-8",
        )
        assert main([str(p)]) == 0
        assert main([str(p), "--skip-pod"]) == 0
        assert capsys.readouterr().out == "s2\ns4\n"

    def test_no_arguments(self, capsys) -> None:
        assert main([]) == 2
        assert "please provide a file" in capsys.readouterr().err


class TestScanCommand:
    def test_stdout(self, tabs_file, capsys) -> None:
        assert main(["scan", "--root", str(tabs_file.parent)]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["summary"]["prevailing"] == "t8"
        assert report["files"][0]["path"] == "Foo.pm"

    def test_out_file(self, tabs_file, tmp_path, capsys) -> None:
        out = tmp_path / "artifacts" / "report.json"
        assert main(["scan", "--root", str(tabs_file.parent), "--out", str(out)]) == 0
        text = out.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text)["summary"]["files_scanned"] == 1
        assert "prevailing style t8" in capsys.readouterr().err

    def test_strict_with_unknown(self, tmp_path) -> None:
        (tmp_path / "flat.py").write_text("a = 1\n", encoding="utf-8")
        assert main(["scan", "--root", str(tmp_path)]) == 0
        assert main(["scan", "--root", str(tmp_path), "--strict"]) == 1

    def test_missing_root(self, tmp_path, capsys) -> None:
        assert main(["scan", "--root", str(tmp_path / "nope")]) == 2
        assert "does not exist" in capsys.readouterr().err


class TestValidateCommand:
    def test_valid_report(self, tabs_file, tmp_path, capsys) -> None:
        out = tmp_path / "report.json"
        main(["scan", "--root", str(tabs_file.parent), "--out", str(out)])
        assert main(["validate", str(out)]) == 0
        assert "OK" in capsys.readouterr().out

    def test_wrong_schema_version(self, tmp_path, capsys) -> None:
        p = tmp_path / "bad.json"
        p.write_text(json.dumps({"schema_version": "other"}), encoding="utf-8")
        assert main(["validate", str(p)]) == 1
        assert "FAIL:" in capsys.readouterr().err

    def test_schema_violation(self, tmp_path, capsys) -> None:
        p = tmp_path / "bad.json"
        p.write_text(
            json.dumps({"schema_version": "indent_report_v1", "root": "."}),
            encoding="utf-8",
        )
        assert main(["validate", str(p)]) == 1
        assert "FAIL:" in capsys.readouterr().err

    def test_unreadable(self, tmp_path, capsys) -> None:
        assert main(["validate", str(tmp_path / "missing.json")]) == 2
        assert "ERROR:" in capsys.readouterr().err


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "find-indent" in capsys.readouterr().out


def test_scan_with_bad_size_limit_is_an_error(tabs_file, monkeypatch, capsys) -> None:
    monkeypatch.setenv("FIND_INDENT_MAX_FILE_BYTES", "2MB")
    assert main(["scan", "--root", str(tabs_file.parent)]) == 2
    assert "FIND_INDENT_MAX_FILE_BYTES" in capsys.readouterr().err
