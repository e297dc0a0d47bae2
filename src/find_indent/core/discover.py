"""File discovery — find source files respecting exclusion rules."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from find_indent.core.config import ScanConfig


def iter_source_files(cfg: ScanConfig) -> Iterator[Path]:
    """Yield source files under *cfg.root*, in sorted order.

    Symlinks (unless followed), ignored names, ignored directories, unknown
    extensions and files above ``cfg.max_file_bytes`` are skipped.
    """
    root = cfg.root
    if not root.exists():
        return
    if root.is_file():
        yield root.resolve()
        return
    for p in sorted(root.rglob("*")):
        try:
            if p.is_symlink() and not cfg.follow_symlinks:
                continue
            if not p.is_file():
                continue
            if p.name in cfg.ignore_files:
                continue
            if p.suffix.lower() not in cfg.include_exts:
                continue
            if any(part in cfg.ignore_dirs for part in p.relative_to(root).parts):
                continue
            if p.stat().st_size > cfg.max_file_bytes:
                continue
            yield p.resolve()
        except OSError:
            continue
