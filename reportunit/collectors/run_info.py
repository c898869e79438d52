"""Run level metadata of an xUnit v2 result file."""

import xml.etree.ElementTree as ET
from typing import Optional

from reportunit.engine.errors import FormatError, StructuralError
from reportunit.engine.models import Report, RunInfo


def required_attr(element: ET.Element, name: str) -> str:
    """Return an attribute that must be present on the element."""
    value = element.get(name)
    if value is None:
        raise StructuralError(
            f"<{element.tag}> is missing required attribute '{name}'",
            element=element.tag,
            attribute=name,
        )
    return value


def required_number(element: ET.Element, name: str) -> float:
    """Return a required numeric attribute."""
    value = required_attr(element, name)
    try:
        return float(value)
    except ValueError:
        raise FormatError(element.tag, name, value) from None


def create_run_info(root: ET.Element, report: Report, results_file: str) -> Optional[RunInfo]:
    """
    Build run metadata from the first <assembly> of an <assemblies> document.

    Also sets the report's counters and duration. Returns None, leaving the
    report untouched, when the root is not <assemblies>.
    """
    if root.tag != "assemblies":
        return None

    assembly = root.find(".//assembly")
    if assembly is None:
        raise StructuralError("<assemblies> contains no <assembly> element", element="assembly")

    run_info = RunInfo(test_runner=report.test_runner)
    run_info.info["Test results file"] = results_file
    run_info.info["Test framework"] = required_attr(assembly, "test-framework")
    run_info.info["Assembly name"] = required_attr(assembly, "name")
    run_info.info["Run date"] = required_attr(assembly, "run-date")
    run_info.info["Run time"] = required_attr(assembly, "run-time")

    report.total = required_number(assembly, "total")
    report.passed = required_number(assembly, "passed")
    report.failed = required_number(assembly, "failed")
    report.errors = required_number(assembly, "errors")
    report.skipped = required_number(assembly, "skipped")
    report.duration = required_number(assembly, "time")

    return run_info
