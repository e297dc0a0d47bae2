"""
find_indent.api
===============

Programmatic entrypoints for embedding find_indent in editors, formatters
and linters.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly outputs that match the bundled report schema

Non-goals:
  - Reformatting text or judging a style against a guide

Usage::

    from find_indent.api import detect_text, detect_file, scan_tree

    sig = detect_text("if x:\\n    y()\\n")          # StyleSignature.spaces(4)
    sig = detect_file("lib/Foo.pm", skip_doc_comments=True)
    report = scan_tree("src/")
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from find_indent.core.config import ScanConfig
from find_indent.core.detector import detect_indentation
from find_indent.core.runner import run_scan
from find_indent.model.signature import StyleSignature


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def detect_text(
    text: str | bytes, *, skip_doc_comments: bool = False
) -> StyleSignature:
    """Detect the indentation style of an in-memory text."""
    return detect_indentation(text, skip_doc_comments=skip_doc_comments)


def detect_file(
    path: str | Path,
    *,
    skip_doc_comments: bool = False,
    encoding: str = "utf-8",
) -> StyleSignature:
    """Read *path* and detect its indentation style.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist or is not a file.
    """
    p = _to_path(path)
    if not p.is_file():
        raise FileNotFoundError(f"detect_file: no such file: {p}")
    text = p.read_text(encoding=encoding, errors="replace")
    return detect_indentation(text, skip_doc_comments=skip_doc_comments)


def scan_tree(
    root: str | Path,
    *,
    config: Optional[ScanConfig] = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Detect every source file under *root* and return the scan report.

    Parameters
    ----------
    root:
        Directory (or single file) to scan.
    config:
        A full :class:`ScanConfig`; its ``root`` is replaced by *root*.
    **overrides:
        Individual :class:`ScanConfig` fields when no *config* is given.

    Raises
    ------
    FileNotFoundError
        If *root* does not exist.
    ValueError
        If ``FIND_INDENT_MAX_FILE_BYTES`` is set to something other than a
        byte count.
    """
    root_p = _to_path(root).resolve()
    if not root_p.exists():
        raise FileNotFoundError(f"scan_tree: root does not exist: {root_p}")
    if config is None:
        config = ScanConfig.from_env(root_p, **overrides)
    else:
        config = replace(config, root=root_p)
    return run_scan(config)
