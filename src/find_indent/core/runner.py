"""Runner — detects every discovered file and assembles the scan report."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from find_indent.contracts.load import validate_instance
from find_indent.core.config import ScanConfig
from find_indent.core.detector import detect_indentation
from find_indent.core.discover import iter_source_files
from find_indent.core.resolver import pick_winner
from find_indent.model.signature import StyleSignature

_logger = logging.getLogger(__name__)

REPORT_SCHEMA_VERSION = "indent_report_v1"
REPORT_SCHEMA = "indent_report.schema.json"


def _rel(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.name


def run_scan(cfg: ScanConfig) -> dict:
    """Detect the indentation of every file under ``cfg.root``.

    Unreadable files are logged and skipped.  The returned report is
    validated against ``indent_report.schema.json``.
    """
    root = cfg.root.resolve()
    base = root if root.is_dir() else root.parent
    options = cfg.detect_options

    entries: list[dict] = []
    votes: Counter[StyleSignature] = Counter()
    for path in iter_source_files(cfg):
        try:
            data = path.read_bytes()
        except OSError as e:
            _logger.warning("Skipping unreadable file '%s': %s", path, e)
            continue
        signature = detect_indentation(data, options=options)
        _logger.debug("%s: %s", path, signature)
        if not signature.is_unknown:
            votes[signature] += 1
        entries.append({"path": _rel(path, base), **signature.to_dict()})

    entries.sort(key=lambda e: e["path"])
    prevailing = pick_winner(votes) or StyleSignature.unknown()
    by_signature = Counter(e["signature"] for e in entries)

    report = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "root": root.as_posix(),
        "files": entries,
        "summary": {
            "files_scanned": len(entries),
            "by_signature": dict(sorted(by_signature.items())),
            "prevailing": prevailing.render(),
            "unknown": by_signature.get("u", 0),
        },
    }
    validate_instance(report, REPORT_SCHEMA)
    return report
