"""Scan options and their built-in defaults."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from local_scanner.core.errors import ConfigError

# Extensions (and a few bare names) considered IT-relevant by default.
IT_EXTENSIONS: tuple[str, ...] = (
    # configuration
    ".conf", ".config", ".cfg", ".ini", ".yaml", ".yml", ".json", ".xml",
    # documentation
    ".md", ".txt", ".doc", ".docx", ".pdf",
    # scripts
    ".sh", ".bat", ".ps1", ".cmd",
    # source code
    ".js", ".ts", ".py", ".java", ".cs", ".cpp", ".c", ".go", ".rb",
    # logs
    ".log",
    # databases
    ".sql", ".db", ".sqlite",
    # containers
    "Dockerfile", ".dockerignore", "docker-compose.yml",
    # infrastructure as code
    ".tf", ".tfvars",
)

# Entry-name substrings that remove a file or a whole subtree.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "node_modules",
    ".git",
    ".vscode",
    ".idea",
    "dist",
    "build",
    "target",
    "__pycache__",
    ".next",
    "coverage",
)

DEFAULT_MAX_DEPTH = 5

# Option files picked up from the scan root when none is given explicitly.
CONFIG_FILENAMES: tuple[str, ...] = (".local-scanner.yaml", ".local-scanner.yml")

# camelCase spellings accepted from JSON / YAML callers.
_ALIASES = {
    "maxDepth": "max_depth",
    "includeExtensions": "include_extensions",
    "excludePatterns": "exclude_patterns",
    "followSymlinks": "follow_symlinks",
}


def _as_tuple(value: Iterable[str] | str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """A missing list falls back to *default*; an empty one stays empty."""
    if value is None:
        return default
    if isinstance(value, str):
        value = [value]
    return tuple(str(v) for v in value if str(v))


@dataclass(frozen=True)
class ScanOptions:
    """Immutable options for one scan.

    All parameters are optional and default to the built-in policy.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    include_extensions: tuple[str, ...] = IT_EXTENSIONS
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    follow_symlinks: bool = False
    workers: int = 1
    _include_lower: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must be non-negative, got {self.max_depth}")
        if not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigError(f"workers must be a positive integer, got {self.workers!r}")
        object.__setattr__(
            self, "include_extensions", _as_tuple(self.include_extensions, IT_EXTENSIONS)
        )
        object.__setattr__(
            self, "exclude_patterns", _as_tuple(self.exclude_patterns, DEFAULT_EXCLUDE_PATTERNS)
        )
        object.__setattr__(
            self, "_include_lower", frozenset(e.lower() for e in self.include_extensions)
        )

    @property
    def include_lookup(self) -> frozenset[str]:
        """Lowercased include list for O(1) extension checks."""
        return self._include_lower

    # ── construction helpers ────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ScanOptions":
        """Build options from a dict with snake_case or camelCase keys.

        Unknown keys are ignored; ``None`` values mean "use the default".
        """
        known = {f.name for f in fields(cls) if f.init}
        kwargs: dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _ALIASES.get(key, key)
            if name in known and value is not None:
                kwargs[name] = value
        if "follow_symlinks" in kwargs:
            kwargs["follow_symlinks"] = bool(kwargs["follow_symlinks"])
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> "ScanOptions":
        """Load options from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read options file {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigError(f"{path}: expected a mapping at top level")
        return cls.from_mapping(data)

    @classmethod
    def discover(cls, root: Path) -> Path | None:
        """Return the first options file found directly under *root*."""
        for name in CONFIG_FILENAMES:
            candidate = root / name
            if candidate.is_file():
                return candidate
        return None

    def merged(self, **overrides: Any) -> "ScanOptions":
        """Copy with every non-``None`` override applied."""
        current = {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        current.update({k: v for k, v in overrides.items() if v is not None})
        return type(self)(**current)

    def to_dict(self) -> dict:
        return {
            "maxDepth": self.max_depth,
            "includeExtensions": list(self.include_extensions),
            "excludePatterns": list(self.exclude_patterns),
            "followSymlinks": self.follow_symlinks,
        }
