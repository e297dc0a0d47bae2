"""CLI entry-point for find_indent.

Usage:
    python -m find_indent <file>
    python -m find_indent <file> --json
    python -m find_indent - < some_file.pl
    python -m find_indent <file> --expect s4
    python -m find_indent scan --root <dir> [--out report.json] [--strict]
    python -m find_indent validate <report.json>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from find_indent import __version__
from find_indent.api import detect_file as _api_detect_file
from find_indent.api import detect_text as _api_detect_text
from find_indent.api import scan_tree as _api_scan_tree
from find_indent.contracts.load import validate_file
from find_indent.model.signature import StyleSignature
from find_indent.utils.exit_codes import ExitCode
from find_indent.utils.json_norm import stable_json_dump, stable_json_dumps

_KNOWN_COMMANDS = frozenset({"scan", "validate"})


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log detection decisions to stderr.",
    )


def _add_detect_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--skip-doc-comments",
        "--skip-pod",
        dest="skip_doc_comments",
        action="store_true",
        default=False,
        help="Ignore POD blocks (=head1 ... =cut) when collecting evidence.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="find-indent",
        description="Heuristically determine the indentation style of source files.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── scan subcommand ─────────────────────────────────────────────
    scan_p = sub.add_parser(
        "scan",
        help="Detect every source file under a directory and emit a report.",
    )
    scan_p.add_argument(
        "--root",
        type=Path,
        required=True,
        help="Root directory (or single file) to scan.",
    )
    scan_p.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the report JSON here instead of stdout.",
    )
    scan_p.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Exit 1 when any file's style cannot be determined.",
    )
    _add_detect_options(scan_p)
    _add_common(scan_p)

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a scan report against the bundled schema.",
    )
    val_p.add_argument("report", type=Path, help="Path to the report JSON file.")
    _add_common(val_p)
    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for default positional mode (``find-indent <file>``).

    Used when the first positional token is not a known subcommand, so that
    argparse does not mistake the path for a command name.
    """
    p = argparse.ArgumentParser(
        prog="find-indent",
        description="Heuristically determine the indentation style of source files.",
    )
    p.add_argument(
        "path",
        help="File to inspect, or '-' to read standard input.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the result as JSON instead of the short form (e.g. s4).",
    )
    p.add_argument(
        "--expect",
        default=None,
        metavar="SIG",
        help="Exit 1 unless the detected style equals SIG (e.g. s4, t8, m4, u).",
    )
    _add_detect_options(p)
    _add_common(p)
    p.set_defaults(command=None)
    return p


def _handle_detect(args: argparse.Namespace) -> int:
    expected = None
    if args.expect is not None:
        try:
            expected = StyleSignature.parse(args.expect)
        except ValueError as e:
            print(f"error: --expect: {e}", file=sys.stderr)
            return ExitCode.ERROR

    if args.path == "-":
        signature = _api_detect_text(
            sys.stdin.read(), skip_doc_comments=args.skip_doc_comments
        )
    else:
        try:
            signature = _api_detect_file(
                args.path, skip_doc_comments=args.skip_doc_comments
            )
        except FileNotFoundError as e:
            print(f"error: {e}", file=sys.stderr)
            return ExitCode.ERROR
        except OSError as e:
            print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
            return ExitCode.ERROR

    if args.json_out:
        stable_json_dump(signature.to_dict(), sys.stdout)
    else:
        print(signature.render())

    if expected is not None and signature != expected:
        print(
            f"mismatch: expected {expected.render()}, detected {signature.render()}",
            file=sys.stderr,
        )
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def _handle_scan(args: argparse.Namespace) -> int:
    try:
        report = _api_scan_tree(args.root, skip_doc_comments=args.skip_doc_comments)
    except (FileNotFoundError, ValueError) as e:
        # missing root or a bad FIND_INDENT_MAX_FILE_BYTES
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(stable_json_dumps(report), encoding="utf-8")
        summary = report["summary"]
        print(
            f"{summary['files_scanned']} files, prevailing style "
            f"{summary['prevailing']}, {summary['unknown']} undetermined",
            file=sys.stderr,
        )
    else:
        stable_json_dump(report, sys.stdout)

    if args.strict and report["summary"]["unknown"]:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    import jsonschema

    try:
        validate_file(args.report, "indent_report.schema.json")
    except (jsonschema.ValidationError, ValueError) as e:
        # Exit code contract: 1 = invalid report, 2 = unreadable
        print(f"FAIL: {e}", file=sys.stderr)
        return ExitCode.VIOLATION
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``utils.exit_codes``)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    first_positional = next(
        (a for a in effective_argv if not a.startswith("-") or a == "-"), None
    )
    if first_positional and first_positional not in _KNOWN_COMMANDS:
        args = _build_default_parser().parse_args(effective_argv)
    else:
        args = _build_parser().parse_args(effective_argv)

    _configure_logging(getattr(args, "verbose", False))

    if args.command == "scan":
        return _handle_scan(args)
    if args.command == "validate":
        return _handle_validate(args)
    if args.command is None and getattr(args, "path", None) is not None:
        return _handle_detect(args)

    print("error: please provide a file or use a subcommand.", file=sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
