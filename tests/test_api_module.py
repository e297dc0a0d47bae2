"""Tests for find_indent.api — programmatic entrypoints.

Validates the public API surface that editors and services use
without CLI coupling.
"""

from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from find_indent.api import detect_file, detect_text, scan_tree
from find_indent.contracts.load import validate_instance
from find_indent.core.config import MAX_FILE_BYTES_ENV, ScanConfig
from find_indent.model.signature import StyleSignature

SPACES = "def f():\n    return 1\n"
TABS = "sub f {\n\treturn 1;\n}\n"
FLAT = "a = 1\nb = 2\n"


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "a.py").write_text(SPACES, encoding="utf-8")
    (tmp_path / "b.py").write_text(TABS, encoding="utf-8")
    (tmp_path / "c.py").write_text(FLAT, encoding="utf-8")
    (tmp_path / "notes.txt").write_text(TABS, encoding="utf-8")
    nm = tmp_path / "node_modules"
    nm.mkdir()
    (nm / "x.py").write_text(TABS, encoding="utf-8")
    return tmp_path


# ── detect_text / detect_file ───────────────────────────────────────


class TestDetect:
    def test_detect_text(self) -> None:
        assert detect_text(SPACES) == StyleSignature.spaces(4)

    def test_detect_text_bytes(self) -> None:
        assert detect_text(TABS.encode()) == StyleSignature.tabs(8)

    def test_detect_file(self, tmp_path: Path) -> None:
        p = tmp_path / "x.pl"
        p.write_text(TABS, encoding="utf-8")
        assert detect_file(p) == StyleSignature.tabs(8)
        assert detect_file(str(p)) == StyleSignature.tabs(8)

    def test_detect_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="no such file"):
            detect_file(tmp_path / "missing.py")

    def test_detect_file_rejects_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            detect_file(tmp_path)


# ── scan_tree ───────────────────────────────────────────────────────


class TestScanTree:
    def test_report_shape(self, tree: Path) -> None:
        report = scan_tree(tree)
        assert report["schema_version"] == "indent_report_v1"
        assert [f["path"] for f in report["files"]] == ["a.py", "b.py", "c.py"]
        assert report["files"][0] == {
            "path": "a.py",
            "signature": "s4",
            "style": "spaces",
            "width": 4,
        }

    def test_summary(self, tree: Path) -> None:
        summary = scan_tree(tree)["summary"]
        assert summary == {
            "files_scanned": 3,
            "by_signature": {"s4": 1, "t8": 1, "u": 1},
            "prevailing": "s4",
            "unknown": 1,
        }

    def test_validates_against_schema(self, tree: Path) -> None:
        validate_instance(scan_tree(tree), "indent_report.schema.json")

    def test_deterministic_across_runs(self, tree: Path) -> None:
        assert scan_tree(tree) == scan_tree(tree)

    def test_single_file_root(self, tree: Path) -> None:
        report = scan_tree(tree / "b.py")
        assert [f["path"] for f in report["files"]] == ["b.py"]
        assert report["summary"]["prevailing"] == "t8"

    def test_empty_tree(self, tmp_path: Path) -> None:
        summary = scan_tree(tmp_path)["summary"]
        assert summary["files_scanned"] == 0
        assert summary["prevailing"] == "u"

    def test_overrides(self, tree: Path) -> None:
        report = scan_tree(tree, include_exts=(".txt",))
        assert [f["path"] for f in report["files"]] == ["notes.txt"]

    def test_config_root_is_replaced(self, tree: Path) -> None:
        cfg = ScanConfig(root=Path("/nonexistent"), ignore_dirs=frozenset())
        paths = [f["path"] for f in scan_tree(tree, config=cfg)["files"]]
        assert "node_modules/x.py" in paths

    def test_max_file_bytes_from_env(self, tree: Path, monkeypatch) -> None:
        monkeypatch.setenv(MAX_FILE_BYTES_ENV, "10")
        assert scan_tree(tree)["summary"]["files_scanned"] == 0

    @pytest.mark.parametrize("raw", ["2MB", "-1", "1.5"])
    def test_bad_max_file_bytes_raises(self, tree: Path, monkeypatch, raw) -> None:
        monkeypatch.setenv(MAX_FILE_BYTES_ENV, raw)
        with pytest.raises(ValueError, match=MAX_FILE_BYTES_ENV):
            scan_tree(tree)

    def test_nonexistent_root_raises(self) -> None:
        with pytest.raises(FileNotFoundError, match="does not exist"):
            scan_tree("/nonexistent/path/xyz")


def test_schema_rejects_bad_signature(tree: Path) -> None:
    report = scan_tree(tree)
    report["summary"]["prevailing"] = "s0"
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(report, "indent_report.schema.json")
