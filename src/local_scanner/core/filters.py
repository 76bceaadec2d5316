"""Name-based filters: subtree exclusion and file relevance."""

from __future__ import annotations

from typing import Iterable

# Bare names that make a file relevant whatever its extension.
SPECIAL_FILENAMES: tuple[str, ...] = (
    "Dockerfile",
    "Makefile",
    "README",
    "LICENSE",
    ".dockerignore",
    ".gitignore",
)


def should_exclude(name: str, exclude_patterns: Iterable[str]) -> bool:
    """True if *name* contains any of *exclude_patterns* (case-insensitive)."""
    lowered = name.lower()
    return any(pattern.lower() in lowered for pattern in exclude_patterns)


def is_relevant(file_name: str, extension: str, include_extensions: Iterable[str]) -> bool:
    """Decide whether a file is worth recording.

    Special filenames win first; otherwise the extension must equal one of
    *include_extensions*, ignoring case.
    """
    lowered = file_name.lower()
    if any(special.lower() in lowered for special in SPECIAL_FILENAMES):
        return True

    ext = extension.lower()
    return any(ext == candidate.lower() for candidate in include_extensions)
