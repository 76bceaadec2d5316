"""Map a relevant file onto exactly one :class:`Category`.

Rules are evaluated top to bottom and the first match wins.  Most rules
look at the extension only; the ``log`` and ``container`` rules also look
at the file name, so ``app.log.json`` is configuration and
``docker-compose.yml`` is configuration too.
"""

from __future__ import annotations

from local_scanner.model import Category

_CONFIG_EXTS = frozenset({".conf", ".config", ".cfg", ".ini", ".yaml", ".yml", ".json", ".xml"})
_DOC_EXTS = frozenset({".md", ".txt", ".doc", ".docx", ".pdf"})
_SCRIPT_EXTS = frozenset({".sh", ".bat", ".ps1", ".cmd"})
_SOURCE_EXTS = frozenset({".js", ".ts", ".py", ".java", ".cs", ".cpp", ".c", ".go", ".rb"})
_DATABASE_EXTS = frozenset({".sql", ".db", ".sqlite"})
_IAC_EXTS = frozenset({".tf", ".tfvars"})


def categorize(extension: str, file_name: str) -> Category:
    ext = extension.lower()
    name = file_name.lower()

    if ext in _CONFIG_EXTS:
        return Category.CONFIGURATION
    if ext in _DOC_EXTS:
        return Category.DOCUMENTATION
    if ext in _SCRIPT_EXTS:
        return Category.SCRIPT
    if ext in _SOURCE_EXTS:
        return Category.SOURCE_CODE
    if ext == ".log" or "log" in name:
        return Category.LOG
    if ext in _DATABASE_EXTS:
        return Category.DATABASE
    if "docker" in name:
        return Category.CONTAINER
    if ext in _IAC_EXTS:
        return Category.INFRASTRUCTURE
    return Category.OTHER
