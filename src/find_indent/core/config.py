"""Detection and scan configuration dataclasses."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

MAX_FILE_BYTES_ENV = "FIND_INDENT_MAX_FILE_BYTES"

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    # Python
    ".py",
    # Perl
    ".pl", ".pm", ".t", ".pod",
    # JavaScript/TypeScript
    ".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs",
    # JVM / .NET
    ".java", ".kt", ".scala", ".cs",
    # Go, Rust
    ".go", ".rs",
    # C/C++
    ".c", ".cpp", ".cc", ".h", ".hpp",
    # Ruby, PHP, shell, Lisp
    ".rb", ".php", ".sh", ".el", ".lisp",
)

_DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "venv",
        "__pycache__",
        "node_modules",
        "dist",
        "build",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
    }
)

_DEFAULT_IGNORE_FILES = frozenset({".DS_Store"})


@dataclass(frozen=True)
class DetectOptions:
    """Options of a single detection call."""

    skip_doc_comments: bool = False   # ignore POD (``=pod`` ... ``=cut``) blocks


@dataclass(frozen=True)
class ScanConfig:
    """Immutable configuration of a directory scan."""

    root: Path = field(default_factory=lambda: Path("."))
    include_exts: tuple[str, ...] = DEFAULT_EXTENSIONS
    ignore_dirs: frozenset[str] = _DEFAULT_EXCLUDES
    ignore_files: frozenset[str] = _DEFAULT_IGNORE_FILES
    follow_symlinks: bool = False
    max_file_bytes: int = 2_000_000  # 2 MB safety limit
    skip_doc_comments: bool = False

    @property
    def detect_options(self) -> DetectOptions:
        return DetectOptions(skip_doc_comments=self.skip_doc_comments)

    @classmethod
    def from_env(cls, root: Path, **overrides) -> ScanConfig:
        """Build a config for *root*, honouring ``FIND_INDENT_MAX_FILE_BYTES``.

        Raises
        ------
        ValueError
            If the variable is set but is not a non-negative byte count.
        """
        cfg = cls(root=root, **overrides)
        raw = os.environ.get(MAX_FILE_BYTES_ENV, "").strip()
        if raw:
            if not (raw.isascii() and raw.isdigit()):
                raise ValueError(
                    f"{MAX_FILE_BYTES_ENV} must be a byte count, got {raw!r}"
                )
            cfg = replace(cfg, max_file_bytes=int(raw))
        return cfg
