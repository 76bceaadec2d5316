"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .scan import ScanRequest, ScanResponse, ScanStatisticsModel

__all__ = ["ScanRequest", "ScanResponse", "ScanStatisticsModel"]
