"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from reportunit.api.routes import reports, health
from reportunit.config import settings
from reportunit.db import engine, Base

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="ReportUnit",
    description="Normalized reports from xUnit v2 test result files",
    version="0.1.0",
)

# Include routers
app.include_router(health.router)
app.include_router(reports.router)
