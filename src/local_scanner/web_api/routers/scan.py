"""
Scan Router
===========
The single endpoint that runs a local filesystem scan.
"""
import logging

from fastapi import APIRouter, HTTPException

from local_scanner import api as core_api
from local_scanner.core.errors import ConfigError, PathNotFoundError
from local_scanner.web_api.config import settings
from local_scanner.web_api.schemas.scan import (
    ScanRequest,
    ScanResponse,
    ScanStatisticsModel,
)

router = APIRouter()

_logger = logging.getLogger(__name__)


@router.post("/", response_model=ScanResponse)
def run_scan(request: ScanRequest):
    """
    Scan a local directory for IT-relevant files.

    - **path**: Local path to scan (Windows or POSIX separators)
    - **maxDepth**: Depth bound, 0 = root only
    - **includeStatistics**: Also return aggregate counts
    """
    max_depth = request.max_depth
    if max_depth is None:
        max_depth = settings.DEFAULT_MAX_DEPTH

    try:
        report = core_api.scan_directory(
            request.path,
            max_depth=max_depth,
            include_extensions=request.include_extensions,
            exclude_patterns=request.exclude_patterns,
            follow_symlinks=request.follow_symlinks,
            include_statistics=request.include_statistics,
            workers=settings.SCAN_WORKERS,
        )
    except PathNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConfigError as e:
        raise HTTPException(status_code=422, detail=str(e))

    payload = report.to_dict()
    statistics = None
    if report.statistics is not None:
        statistics = ScanStatisticsModel(**report.statistics.to_dict())

    _logger.info("Scan request for %s returned %d entries", report.root, len(report.entries))
    return ScanResponse(
        status="cancelled" if report.cancelled else "complete",
        root=report.root,
        results=payload["results"],
        statistics=statistics,
        diagnostics=payload["diagnostics"],
    )
