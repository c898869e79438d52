"""Pydantic schemas for API responses."""

from datetime import datetime

from pydantic import BaseModel, Field

from reportunit.engine.models import Status, TestRunner


class TestResponse(BaseModel):
    """Response schema for a single test."""

    name: str
    status: Status
    duration: float
    status_message: str = ""
    stack_trace: str = ""
    category_list: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class TestSuiteResponse(BaseModel):
    """Response schema for a test suite."""

    name: str
    duration: float
    status: Status
    test_list: list[TestResponse]

    model_config = {"from_attributes": True}


class ReportResponse(BaseModel):
    """Response schema for a parsed result file."""

    file_name: str
    assembly_name: str
    test_runner: TestRunner
    run_info: dict[str, str] = Field(..., description="Run metadata in display order")
    total: float
    passed: float
    failed: float
    errors: float
    skipped: float
    duration: float
    status_list: list[Status]
    category_list: list[str]
    test_suite_list: list[TestSuiteResponse]

    model_config = {"from_attributes": True}


class ReportSummaryResponse(BaseModel):
    """Response schema for a stored report without its suites."""

    id: str
    file_name: str
    assembly_name: str
    test_runner: TestRunner
    total: float
    passed: float
    failed: float
    errors: float
    skipped: float
    duration: float
    suite_count: int
    test_count: int
    created_at: datetime

    model_config = {"from_attributes": True}


class StoredReportResponse(ReportSummaryResponse):
    """Response schema for a stored report with its full content."""

    report: ReportResponse
