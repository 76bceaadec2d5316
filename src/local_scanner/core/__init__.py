"""Scanner core: path normalization, filters, categorization, walk, statistics."""

from local_scanner.core.categorize import categorize
from local_scanner.core.config import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_MAX_DEPTH,
    IT_EXTENSIONS,
    ScanOptions,
)
from local_scanner.core.errors import ConfigError, PathNotFoundError, ScanError
from local_scanner.core.filters import SPECIAL_FILENAMES, is_relevant, should_exclude
from local_scanner.core.paths import normalize_path
from local_scanner.core.statistics import aggregate
from local_scanner.core.walker import TreeWalker

__all__ = [
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_MAX_DEPTH",
    "IT_EXTENSIONS",
    "SPECIAL_FILENAMES",
    "ConfigError",
    "PathNotFoundError",
    "ScanError",
    "ScanOptions",
    "TreeWalker",
    "aggregate",
    "categorize",
    "is_relevant",
    "normalize_path",
    "should_exclude",
]
