"""Shared utilities for local_scanner."""

from local_scanner.utils.exit_codes import ExitCode
from local_scanner.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
