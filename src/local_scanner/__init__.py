"""local_scanner — discover and classify IT-relevant files on a local disk."""

__all__ = [
    "__version__",
    "scan_directory",
    "generate_statistics",
    "validate_instance",
    "Category",
    "EntryKind",
    "ScanEntry",
    "ScanOptions",
    "ScanReport",
    "ScanStatistics",
    "PathNotFoundError",
    "ScanError",
]
__version__ = "0.1.0"

# Programmatic engine entrypoints (backend use).
from local_scanner.api import generate_statistics, scan_directory  # noqa: E402, F401
from local_scanner.contracts.load import validate_instance  # noqa: E402, F401
from local_scanner.core.config import ScanOptions  # noqa: E402, F401
from local_scanner.core.errors import PathNotFoundError, ScanError  # noqa: E402, F401
from local_scanner.model import Category, EntryKind  # noqa: E402, F401
from local_scanner.model.entry import ScanEntry  # noqa: E402, F401
from local_scanner.model.report import ScanReport, ScanStatistics  # noqa: E402, F401
