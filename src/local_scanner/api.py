"""
local_scanner.api
=================

Programmatic entrypoints for using the scanner as a backend engine.

Goals:
  - No argparse / HTTP dependencies
  - One call per scan, fully synchronous
  - JSON-friendly outputs (``ScanReport.to_dict()``) with camelCase keys

Non-goals:
  - Owning persistence — callers store results themselves
  - Timeouts — callers bound long scans at their own request boundary

Usage::

    from local_scanner.api import scan_directory

    report = scan_directory("/etc", max_depth=2, include_statistics=True)
    for entry in report.entries:
        print(entry.path, entry.category)
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Iterable, Optional

from local_scanner.core.config import ScanOptions
from local_scanner.core.paths import normalize_path
from local_scanner.core.statistics import aggregate
from local_scanner.core.walker import DiagnosticSink, TreeWalker
from local_scanner.model.entry import ScanEntry
from local_scanner.model.report import ScanReport, ScanStatistics

_logger = logging.getLogger(__name__)


def scan_directory(
    path: str | os.PathLike[str],
    *,
    max_depth: Optional[int] = None,
    include_extensions: Optional[Iterable[str]] = None,
    exclude_patterns: Optional[Iterable[str]] = None,
    follow_symlinks: Optional[bool] = None,
    include_statistics: bool = False,
    workers: Optional[int] = None,
    options: Optional[ScanOptions] = None,
    on_diagnostic: Optional[DiagnosticSink] = None,
    cancel: Optional[threading.Event] = None,
) -> ScanReport:
    """Scan *path* for IT-relevant files and folders.

    Parameters
    ----------
    path:
        Root to scan.  Windows- or POSIX-style separators are accepted.
    max_depth, include_extensions, exclude_patterns, follow_symlinks, workers:
        Per-call overrides.  ``None`` keeps the value from *options*, which
        itself defaults to the built-in policy.  An empty list is kept as
        given, so ``exclude_patterns=[]`` turns exclusion off.
    include_statistics:
        If True, ``report.statistics`` is filled after the walk.
    on_diagnostic:
        Called once for every recoverable per-entry failure.
    cancel:
        Event that stops the walk early when set.

    Returns
    -------
    ScanReport
        Entries in pre-order; an empty list is a valid result.

    Raises
    ------
    PathNotFoundError
        If *path* does not exist.
    ConfigError
        If the merged options are invalid (e.g. negative depth).
    """
    base = options or ScanOptions()
    opts = base.merged(
        max_depth=max_depth,
        include_extensions=tuple(include_extensions) if include_extensions is not None else None,
        exclude_patterns=tuple(exclude_patterns) if exclude_patterns is not None else None,
        follow_symlinks=follow_symlinks,
        workers=workers,
    )

    root = normalize_path(path)
    _logger.info("Scanning %s (max_depth=%d, workers=%d)", root, opts.max_depth, opts.workers)

    walker = TreeWalker(opts, on_diagnostic=on_diagnostic, cancel=cancel)
    entries = walker.walk(root)

    report = ScanReport(
        root=root,
        options=opts,
        entries=entries,
        diagnostics=list(walker.diagnostics),
        cancelled=walker.cancelled,
    )
    if include_statistics:
        report.statistics = generate_statistics(entries)

    _logger.info(
        "Scan of %s finished: %d entries, %d diagnostics",
        root,
        len(entries),
        len(report.diagnostics),
    )
    return report


def generate_statistics(entries: Iterable[ScanEntry]) -> ScanStatistics:
    """Summarize a finished result list."""
    return aggregate(entries)
