"""TreeWalker — bounded, pre-order directory traversal.

The walk uses an explicit ``(path, depth)`` stack instead of recursion.
Siblings are visited in name order, so two walks over an unchanged tree
return identical lists.  With ``options.workers > 1`` sibling directories
are scanned on a thread pool and the result is sorted back into the same
pre-order afterwards.

Failures on individual entries (``stat`` or directory listing) never
abort the walk; each one becomes a :class:`ScanDiagnostic`.
"""

from __future__ import annotations

import logging
import os
import stat as _stat
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Callable

from local_scanner.core.categorize import categorize
from local_scanner.core.config import ScanOptions
from local_scanner.core.filters import is_relevant, should_exclude
from local_scanner.model import EntryKind
from local_scanner.model.entry import ScanEntry
from local_scanner.model.report import ScanDiagnostic

_logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[ScanDiagnostic], None]

# (entry or None, child paths to visit at depth + 1)
_Visit = tuple["ScanEntry | None", list[str]]


class TreeWalker:
    """Walks one root under a fixed set of :class:`ScanOptions`.

    A walker instance collects the diagnostics of its most recent walk in
    :attr:`diagnostics`; *on_diagnostic* additionally receives each one as
    it happens.  Setting *cancel* stops new descents; stat calls already in
    flight complete normally.
    """

    def __init__(
        self,
        options: ScanOptions | None = None,
        *,
        on_diagnostic: DiagnosticSink | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        self.options = options or ScanOptions()
        self.diagnostics: list[ScanDiagnostic] = []
        self.cancelled = False
        self._sink = on_diagnostic
        self._cancel = cancel
        self._lock = threading.Lock()

    # ── public ──────────────────────────────────────────────────────

    def walk(self, root: str) -> list[ScanEntry]:
        """Return the ordered entries found under *root* (inclusive)."""
        self.diagnostics = []
        self.cancelled = False
        if self.options.workers > 1:
            return self._walk_parallel(root)
        return self._walk_sequential(root)

    # ── traversal strategies ────────────────────────────────────────

    def _walk_sequential(self, root: str) -> list[ScanEntry]:
        results: list[ScanEntry] = []
        stack: list[tuple[str, int]] = [(root, 0)]

        while stack:
            if self._cancel_requested():
                break
            path, depth = stack.pop()
            entry, children = self._visit(path, depth, is_root=(depth == 0))
            if entry is not None:
                results.append(entry)
            # reversed so the first name is popped first
            for child in reversed(children):
                stack.append((child, depth + 1))

        return results

    def _walk_parallel(self, root: str) -> list[ScanEntry]:
        results: list[ScanEntry] = []
        if self._cancel_requested():
            return results
        entry, children = self._visit(root, 0, is_root=True)
        if entry is not None:
            results.append(entry)

        with ThreadPoolExecutor(max_workers=self.options.workers) as pool:
            pending: set[Future] = set()
            if children and not self._cancel_requested():
                pending.add(pool.submit(self._visit_siblings, children, 1))
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    found, descents = future.result()
                    results.extend(found)
                    for sub_children, depth in descents:
                        if self._cancel_requested():
                            break
                        pending.add(pool.submit(self._visit_siblings, sub_children, depth))

        results.sort(key=lambda e: PurePath(e.path).parts)
        return results

    def _visit_siblings(
        self, paths: list[str], depth: int
    ) -> tuple[list[ScanEntry], list[tuple[list[str], int]]]:
        """Visit the children of one directory; runs on a worker thread."""
        found: list[ScanEntry] = []
        descents: list[tuple[list[str], int]] = []
        for path in paths:
            entry, children = self._visit(path, depth)
            if entry is not None:
                found.append(entry)
            if children:
                descents.append((children, depth + 1))
        return found, descents

    # ── single entry ────────────────────────────────────────────────

    def _visit(self, path: str, depth: int, *, is_root: bool = False) -> _Visit:
        opts = self.options
        if depth > opts.max_depth:
            return None, []

        st = self._stat(path, follow=is_root or opts.follow_symlinks)
        if st is None:
            return None, []

        name = os.path.basename(path) or path
        if should_exclude(name, opts.exclude_patterns):
            return None, []

        modified = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)

        if _stat.S_ISDIR(st.st_mode):
            entry = ScanEntry(
                path=path,
                name=name,
                kind=EntryKind.DIRECTORY,
                last_modified=modified,
            )
            # children at depth + 1 would be dropped anyway
            if depth >= opts.max_depth:
                return entry, []
            return entry, self._list_children(path)

        if _stat.S_ISREG(st.st_mode):
            extension = os.path.splitext(name)[1].lower()
            if not is_relevant(name, extension, opts.include_lookup):
                return None, []
            entry = ScanEntry(
                path=path,
                name=name,
                kind=EntryKind.FILE,
                last_modified=modified,
                size=st.st_size,
                extension=extension,
                category=categorize(extension, name),
            )
            return entry, []

        return None, []

    def _stat(self, path: str, *, follow: bool) -> os.stat_result | None:
        """Stat *path*; ``None`` means skip it (unfollowed symlink or failure)."""
        try:
            st = os.lstat(path)
            if _stat.S_ISLNK(st.st_mode):
                if not follow:
                    _logger.debug("Skipping symlink %s", path)
                    return None
                st = os.stat(path)
        except OSError as exc:
            self._report(ScanDiagnostic.from_os_error(path, "stat", exc))
            return None
        return st

    def _list_children(self, path: str) -> list[str]:
        try:
            with os.scandir(path) as it:
                names = sorted(entry.name for entry in it)
        except OSError as exc:
            self._report(ScanDiagnostic.from_os_error(path, "listdir", exc))
            return []
        _logger.debug("Listed %d entries in %s", len(names), path)
        return [os.path.join(path, n) for n in names]

    # ── diagnostics / cancellation ──────────────────────────────────

    def _report(self, diagnostic: ScanDiagnostic) -> None:
        _logger.warning(
            "Cannot access %s (%s): %s",
            diagnostic.path,
            diagnostic.operation,
            diagnostic.message,
        )
        with self._lock:
            self.diagnostics.append(diagnostic)
            if self._sink is not None:
                self._sink(diagnostic)

    def _cancel_requested(self) -> bool:
        if self._cancel is not None and self._cancel.is_set():
            if not self.cancelled:
                _logger.info("Scan cancelled; returning partial results")
            self.cancelled = True
            return True
        return False
