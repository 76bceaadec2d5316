"""
Scan Schemas
============
Request and response models for the scan endpoint.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScanRequest(BaseModel):
    """Request to scan a local directory"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "path": "/srv/config",
                "maxDepth": 3,
                "excludePatterns": ["node_modules", ".git"],
                "includeStatistics": True,
            }
        },
    )

    path: str = Field(..., min_length=1, description="Local path to scan")
    max_depth: Optional[int] = Field(
        default=None, ge=0, alias="maxDepth", description="Depth bound; 0 is the root"
    )
    include_extensions: Optional[List[str]] = Field(default=None, alias="includeExtensions")
    exclude_patterns: Optional[List[str]] = Field(default=None, alias="excludePatterns")
    follow_symlinks: bool = Field(default=False, alias="followSymlinks")
    include_statistics: bool = Field(default=False, alias="includeStatistics")


class ScanStatisticsModel(BaseModel):
    """Aggregate counts for one scan"""

    totalFiles: int = 0
    totalDirectories: int = 0
    totalSize: int = 0
    categories: Dict[str, int] = Field(default_factory=dict)
    extensions: Dict[str, int] = Field(default_factory=dict)


class ScanResponse(BaseModel):
    """Response from a scan operation"""

    status: str = Field(..., description="Scan status: complete, cancelled")
    root: str
    results: List[Dict[str, Any]] = Field(default_factory=list)
    statistics: Optional[ScanStatisticsModel] = None
    diagnostics: List[Dict[str, Any]] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
