"""ScanEntry — one recorded file or directory."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from . import Category, EntryKind


@dataclass(frozen=True, slots=True)
class ScanEntry:
    """Immutable record of a visited entry that passed filtering.

    ``size``, ``extension`` and ``category`` are only set for files.
    """

    path: str
    name: str
    kind: EntryKind
    last_modified: datetime
    size: int | None = None
    extension: str | None = None
    category: Category | None = None

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {
            "path": self.path,
            "name": self.name,
            "type": self.kind.value,
            "lastModified": self.last_modified.isoformat(),
        }
        if self.kind is EntryKind.FILE:
            d["size"] = self.size if self.size is not None else 0
            d["extension"] = self.extension or ""
            if self.category is not None:
                d["category"] = self.category.value
        return d
