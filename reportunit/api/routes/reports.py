"""Result file ingestion endpoints."""

import logging
import xml.etree.ElementTree as ET

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from reportunit.api.schemas import ReportResponse, ReportSummaryResponse, StoredReportResponse
from reportunit.collectors.xunit_v2 import XUnitV2Parser
from reportunit.config import settings
from reportunit.db import get_db, ReportRecord
from reportunit.engine.errors import ReportParseError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


def get_parser() -> XUnitV2Parser:
    """Parser dependency, built from settings."""
    return XUnitV2Parser(logger=logger.getChild("xunit_v2"), max_workers=settings.max_workers)


def _stored_report(record: ReportRecord) -> dict:
    data = ReportSummaryResponse.model_validate(record).model_dump()
    data["report"] = record.report_json
    return data


@router.post("", response_model=StoredReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    request: Request,
    file_name: str = Query("results.xml", description="Name of the uploaded result file"),
    parser: XUnitV2Parser = Depends(get_parser),
    db: Session = Depends(get_db),
) -> dict:
    """Parse an uploaded xUnit v2 result file and store the report."""
    content = await request.body()
    if not content:
        raise HTTPException(status_code=400, detail="Request body is empty")
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Result file exceeds {settings.max_upload_bytes} bytes",
        )

    try:
        report = await run_in_threadpool(parser.parse_content, content, file_name)
    except (ET.ParseError, ReportParseError) as e:
        logger.warning(f"Rejected result file {file_name}: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e

    record = ReportRecord(
        file_name=report.file_name,
        assembly_name=report.assembly_name,
        test_runner=report.test_runner,
        total=report.total,
        passed=report.passed,
        failed=report.failed,
        errors=report.errors,
        skipped=report.skipped,
        duration=report.duration,
        suite_count=len(report.test_suite_list),
        test_count=report.test_count,
        report_json=ReportResponse.model_validate(report).model_dump(mode="json"),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return _stored_report(record)


@router.get("", response_model=list[ReportSummaryResponse])
def list_reports(db: Session = Depends(get_db)) -> list[ReportRecord]:
    """List stored reports, newest first."""
    return list(db.query(ReportRecord).order_by(ReportRecord.created_at.desc()).all())


@router.get("/{report_id}", response_model=StoredReportResponse)
def get_report(report_id: str, db: Session = Depends(get_db)) -> dict:
    """Get a stored report by ID."""
    record = db.query(ReportRecord).filter(ReportRecord.id == report_id).first()
    if not record:
        raise HTTPException(status_code=404, detail="Report not found")
    return _stored_report(record)
