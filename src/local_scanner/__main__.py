"""CLI entry-point for local_scanner.

Usage:
    python -m local_scanner <path>
    python -m local_scanner <path> --json --stats
    python -m local_scanner <path> --max-depth 2 --exclude vendor --include-ext .toml
    python -m local_scanner <path> --config scan.yaml --workers 4
    python -m local_scanner validate <instance.json> <schema_name>
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import jsonschema

from local_scanner import __version__
from local_scanner.api import scan_directory
from local_scanner.contracts.load import validate_instance
from local_scanner.core.config import ScanOptions
from local_scanner.core.errors import ScanError
from local_scanner.model.report import ScanReport
from local_scanner.utils.exit_codes import ExitCode
from local_scanner.utils.json_norm import stable_json_dump

_logger = logging.getLogger("local_scanner")

_KNOWN_COMMANDS = {"validate"}


def _print_human(report: ScanReport) -> None:
    """Pretty-print a human-readable summary to stderr."""
    files = report.files
    dirs = report.directories
    print(f"\nScanned  : {report.root}", file=sys.stderr)
    print(f"   Files      : {len(files)}", file=sys.stderr)
    print(f"   Directories: {len(dirs)}", file=sys.stderr)

    stats = report.statistics
    if stats is not None:
        print(f"   Total size : {stats.total_size} bytes", file=sys.stderr)
        if stats.categories:
            parts = [f"{k}={v}" for k, v in stats.categories.items()]
            print(f"   Categories : {', '.join(parts)}", file=sys.stderr)

    if report.diagnostics:
        print(f"\n   {len(report.diagnostics)} entr(y/ies) could not be read:", file=sys.stderr)
        for d in report.diagnostics[:5]:
            print(f"      - {d.path} ({d.operation}): {d.message}", file=sys.stderr)
        if len(report.diagnostics) > 5:
            print(f"      ... and {len(report.diagnostics) - 5} more", file=sys.stderr)

    if report.cancelled:
        print("\n   Scan was cancelled; results are partial.", file=sys.stderr)

    print("", file=sys.stderr)


def _add_scan_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Deepest level to descend to; 0 is the root itself (default: 5).",
    )
    p.add_argument(
        "--include-ext",
        dest="include_extensions",
        nargs="+",
        metavar="EXT",
        default=None,
        help="Extensions to record instead of the built-in IT-relevant list.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        nargs="+",
        metavar="PAT",
        default=None,
        help="Name substrings to skip instead of the built-in exclusion list.",
    )
    p.add_argument(
        "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        default=None,
        help="Follow symbolic links instead of skipping them.",
    )
    p.add_argument(
        "--stats",
        dest="include_statistics",
        action="store_true",
        default=False,
        help="Compute summary statistics.",
    )
    p.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Scan sibling directories on N threads (default: 1).",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML options file (default: .local-scanner.yaml in the root, if present).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full report JSON to stdout.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log per-directory progress.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="local-scanner",
        description="Discover and classify IT-relevant files on a local disk.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command")

    val_p = sub.add_parser(
        "validate",
        help="Validate a JSON instance against a bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")
    val_p.add_argument("schema_name", help="Schema filename, e.g. scan_report.schema.json")
    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for default positional mode.

    Argparse subparsers greedily consume the first positional token, so
    ``local-scanner <path> --json`` is parsed here whenever that token is
    not a known subcommand.
    """
    p = argparse.ArgumentParser(
        prog="local-scanner",
        description="Discover and classify IT-relevant files on a local disk.",
    )
    p.add_argument("path", help="Root directory to scan.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_scan_arguments(p)
    p.set_defaults(command=None)
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_options(args: argparse.Namespace) -> ScanOptions:
    if args.config is not None:
        return ScanOptions.from_yaml(args.config)
    root = Path(args.path).expanduser()
    found = ScanOptions.discover(root) if root.is_dir() else None
    if found is not None:
        _logger.info("Using options file %s", found)
        return ScanOptions.from_yaml(found)
    return ScanOptions()


def _handle_validate(args: argparse.Namespace) -> int:
    try:
        instance = json.loads(Path(args.instance).read_text(encoding="utf-8"))
        validate_instance(instance, args.schema_name)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.ISSUES
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _handle_scan(args: argparse.Namespace) -> int:
    _configure_logging(args.verbose)
    try:
        base = _load_options(args)
        report = scan_directory(
            args.path,
            max_depth=args.max_depth,
            include_extensions=args.include_extensions,
            exclude_patterns=args.exclude_patterns,
            follow_symlinks=args.follow_symlinks,
            include_statistics=args.include_statistics,
            workers=args.workers,
            options=base,
        )
    except ScanError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    _print_human(report)

    if args.json_out:
        stable_json_dump(report.to_dict(), sys.stdout, indent=2)

    return ExitCode.ISSUES if report.diagnostics else ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``utils.exit_codes``)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    first_positional = next((a for a in effective_argv if not a.startswith("-")), None)
    if first_positional in _KNOWN_COMMANDS:
        args = _build_parser().parse_args(effective_argv)
    elif first_positional is None and not any(
        a in ("-h", "--help", "--version") for a in effective_argv
    ):
        print("error: please provide a path or use a subcommand.", file=sys.stderr)
        return ExitCode.ERROR
    else:
        args = _build_default_parser().parse_args(effective_argv)

    if args.command == "validate":
        return _handle_validate(args)
    return _handle_scan(args)


if __name__ == "__main__":
    raise SystemExit(main())
