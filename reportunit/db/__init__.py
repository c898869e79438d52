"""Database module."""

from reportunit.db.session import get_db, engine, SessionLocal
from reportunit.db.models import Base, ReportRecord

__all__ = ["get_db", "engine", "SessionLocal", "Base", "ReportRecord"]
