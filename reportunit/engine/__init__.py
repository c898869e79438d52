"""Report model module."""

from reportunit.engine.errors import FormatError, ReportParseError, StructuralError
from reportunit.engine.models import Report, RunInfo, Status, Test, TestRunner, TestSuite
from reportunit.engine.status import get_fixture_status, to_status

__all__ = [
    "Report",
    "RunInfo",
    "Status",
    "Test",
    "TestRunner",
    "TestSuite",
    "ReportParseError",
    "StructuralError",
    "FormatError",
    "to_status",
    "get_fixture_status",
]
