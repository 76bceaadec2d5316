"""
Local Scanner Web API
=====================
FastAPI-based REST boundary for the scanner.

Quick Start:
    uvicorn local_scanner.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
