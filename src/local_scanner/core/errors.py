"""Whole-scan failures.

Per-entry problems never raise; they become
:class:`~local_scanner.model.report.ScanDiagnostic` records instead.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base class for failures that abort a scan before any result exists."""


class PathNotFoundError(ScanError, FileNotFoundError):
    """Raised when the scan root does not exist after normalization."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path not found: {path}")

    def __str__(self) -> str:
        return f"Path not found: {self.path}"


class ConfigError(ScanError, ValueError):
    """Raised for malformed scan options or option files."""
