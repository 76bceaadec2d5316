"""Scan outputs: statistics, diagnostics and the assembled report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .entry import ScanEntry

if TYPE_CHECKING:
    from local_scanner.core.config import ScanOptions


@dataclass(frozen=True, slots=True)
class ScanStatistics:
    """Aggregate counts derived from a list of entries."""

    total_files: int = 0
    total_directories: int = 0
    total_size: int = 0
    categories: dict[str, int] = field(default_factory=dict)
    extensions: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "totalFiles": self.total_files,
            "totalDirectories": self.total_directories,
            "totalSize": self.total_size,
            "categories": dict(self.categories),
            "extensions": dict(self.extensions),
        }


@dataclass(frozen=True, slots=True)
class ScanDiagnostic:
    """A recoverable per-entry failure observed during a walk."""

    path: str
    operation: str          # stat | listdir
    message: str
    errno: int | None = None

    @classmethod
    def from_os_error(cls, path: str, operation: str, exc: OSError) -> "ScanDiagnostic":
        return cls(
            path=path,
            operation=operation,
            message=exc.strerror or str(exc),
            errno=exc.errno,
        )

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "operation": self.operation,
            "message": self.message,
            "errno": self.errno,
        }


@dataclass
class ScanReport:
    """Everything a single scan hands back to its caller.

    ``statistics`` is ``None`` unless the caller asked for it.
    """

    root: str
    options: "ScanOptions"
    entries: list[ScanEntry] = field(default_factory=list)
    statistics: ScanStatistics | None = None
    diagnostics: list[ScanDiagnostic] = field(default_factory=list)
    cancelled: bool = False

    @property
    def files(self) -> list[ScanEntry]:
        return [e for e in self.entries if e.is_file]

    @property
    def directories(self) -> list[ScanEntry]:
        return [e for e in self.entries if e.is_directory]

    def to_dict(self) -> dict:
        d: dict = {
            "root": self.root,
            "options": self.options.to_dict(),
            "results": [e.to_dict() for e in self.entries],
            "diagnostics": [x.to_dict() for x in self.diagnostics],
            "cancelled": self.cancelled,
        }
        if self.statistics is not None:
            d["statistics"] = self.statistics.to_dict()
        return d
