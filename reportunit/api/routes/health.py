"""Health check endpoints."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "reportunit"}


@router.get("/")
def root() -> dict:
    """Root endpoint."""
    return {
        "service": "ReportUnit",
        "version": "0.1.0",
        "description": "xUnit v2 test result ingestion",
        "docs": "/docs",
    }
