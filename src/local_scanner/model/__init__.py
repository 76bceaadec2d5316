"""Enums shared across the walker, the aggregator and the output layers."""

from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    """Kind of a recorded filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"


class Category(str, Enum):
    """Semantic label assigned to every relevant file."""

    CONFIGURATION = "configuration"
    DOCUMENTATION = "documentation"
    SCRIPT = "script"
    SOURCE_CODE = "source-code"
    LOG = "log"
    DATABASE = "database"
    CONTAINER = "container"
    INFRASTRUCTURE = "infrastructure"
    OTHER = "other"
