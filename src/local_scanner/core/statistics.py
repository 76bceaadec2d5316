"""Reduce an entry list into :class:`ScanStatistics`."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from local_scanner.model.entry import ScanEntry
from local_scanner.model.report import ScanStatistics


def aggregate(entries: Iterable[ScanEntry]) -> ScanStatistics:
    """Count directories, files, bytes, categories and extensions.

    Pure function of *entries*.  Histogram keys only appear when their
    count is non-zero; files without an extension are left out of the
    ``extensions`` histogram.
    """
    directories = 0
    files = 0
    total_size = 0
    categories: Counter[str] = Counter()
    extensions: Counter[str] = Counter()

    for entry in entries:
        if entry.is_directory:
            directories += 1
            continue
        files += 1
        total_size += entry.size or 0
        if entry.category is not None:
            categories[entry.category.value] += 1
        if entry.extension:
            extensions[entry.extension] += 1

    return ScanStatistics(
        total_files=files,
        total_directories=directories,
        total_size=total_size,
        categories=dict(sorted(categories.items())),
        extensions=dict(sorted(extensions.items())),
    )
