"""SQLAlchemy database models."""

import uuid
from datetime import datetime

from sqlalchemy import String, Float, Integer, JSON, Enum as SQLEnum
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from reportunit.engine.models import TestRunner


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ReportRecord(Base):
    """A parsed result file: its counters plus the full serialized report."""

    __tablename__ = "reports"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    file_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    assembly_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    test_runner: Mapped[TestRunner] = mapped_column(SQLEnum(TestRunner), nullable=False)
    total: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    passed: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    failed: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    errors: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    skipped: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    duration: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    suite_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    test_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    report_json: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
