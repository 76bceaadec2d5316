"""
FastAPI Application
==================
HTTP boundary for the local scanner.

Run with:
    uvicorn local_scanner.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from local_scanner import __version__
from local_scanner.web_api.config import settings
from local_scanner.web_api.routers import health, scan

# Create application
app = FastAPI(
    title="Local Scanner API",
    description="Discover and classify IT-relevant files on the host",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(scan.router, prefix="/scan", tags=["Scan"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Local Scanner API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m local_scanner.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
