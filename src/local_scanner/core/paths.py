"""Root path normalization."""

from __future__ import annotations

import os

from local_scanner.core.errors import PathNotFoundError


def normalize_path(raw: str | os.PathLike[str]) -> str:
    """Return an absolute, normalized form of *raw* usable on this host.

    Both ``\\`` and ``/`` separators are accepted.  Symlinks are left as
    they are (the path is not resolved).

    Raises
    ------
    PathNotFoundError
        If the normalized path does not exist, including a symlink whose
        target is missing.
    """
    text = os.fspath(raw).strip()
    if not text:
        raise PathNotFoundError(text)

    if os.sep == "/":
        text = text.replace("\\", "/")
    normalized = os.path.abspath(os.path.normpath(os.path.expanduser(text)))

    if not os.path.exists(normalized):
        raise PathNotFoundError(normalized)
    return normalized
