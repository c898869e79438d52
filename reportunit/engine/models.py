"""Report model produced by the result file parsers."""

from dataclasses import dataclass, field
from enum import Enum


class Status(str, Enum):
    """Outcome of a test or of a whole suite."""

    PASSED = "Passed"
    FAILED = "Failed"
    SKIPPED = "Skipped"
    UNKNOWN = "Unknown"


class TestRunner(str, Enum):
    """Result file format a report was parsed from."""

    XUNIT_V2 = "XUnitV2"


@dataclass
class Test:
    """A single test case."""

    name: str
    status: Status
    duration: float
    status_message: str = ""
    stack_trace: str = ""
    category_list: list[str] = field(default_factory=list)


@dataclass
class TestSuite:
    """A test collection and its tests."""

    name: str
    duration: float
    status: Status = Status.UNKNOWN
    test_list: list[Test] = field(default_factory=list)


@dataclass
class RunInfo:
    """Run metadata collected before it is merged into a report."""

    test_runner: TestRunner
    info: dict[str, str] = field(default_factory=dict)


@dataclass
class Report:
    """Normalized content of one result file."""

    file_name: str
    assembly_name: str = ""
    test_runner: TestRunner = TestRunner.XUNIT_V2
    run_info: dict[str, str] = field(default_factory=dict)
    total: float = 0.0
    passed: float = 0.0
    failed: float = 0.0
    errors: float = 0.0
    skipped: float = 0.0
    duration: float = 0.0
    status_list: list[Status] = field(default_factory=list)
    category_list: list[str] = field(default_factory=list)
    test_suite_list: list[TestSuite] = field(default_factory=list)

    def add_run_info(self, info: dict[str, str]) -> None:
        """Merge run metadata labels, keeping their order."""
        self.run_info.update(info)

    @property
    def test_count(self) -> int:
        return sum(len(suite.test_list) for suite in self.test_suite_list)
