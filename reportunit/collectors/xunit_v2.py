"""xUnit v2 XML parser for test results.

Usage:
    from reportunit.collectors.xunit_v2 import XUnitV2Parser
    report = XUnitV2Parser().parse("path/to/results.xml")
"""

import logging
import xml.etree.ElementTree as ET
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from reportunit.collectors.categories import get_categories
from reportunit.collectors.run_info import create_run_info, required_attr, required_number
from reportunit.engine.errors import StructuralError
from reportunit.engine.models import Report, Status, Test, TestRunner, TestSuite
from reportunit.engine.status import get_fixture_status, to_status


def element_text(element: Optional[ET.Element]) -> str:
    """Concatenated text content of an element, "" when absent."""
    if element is None:
        return ""
    return "".join(element.itertext())


class XUnitV2Parser:
    """Builds a Report from an xUnit v2 result document.

    Tests are built on a thread pool. Workers only return their Test; the
    calling thread merges results into the suites and the report.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_workers: Optional[int] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.max_workers = max_workers

    def parse(self, results_file: str | Path) -> Report:
        """Parse an xUnit v2 XML file into a Report."""
        tree = ET.parse(results_file)
        return self._build_report(tree.getroot(), str(results_file))

    def parse_content(self, content: str | bytes, results_file: str) -> Report:
        """Parse an in-memory xUnit v2 document.

        results_file names the document's source in the report.
        """
        return self._build_report(ET.fromstring(content), results_file)

    def _build_report(self, root: Optional[ET.Element], results_file: str) -> Report:
        if root is None:
            raise StructuralError(f"{results_file} has no root element")

        report = Report(
            file_name=Path(results_file).stem,
            assembly_name=root.get("name", ""),
            test_runner=TestRunner.XUNIT_V2,
        )

        # run-info & assembly counters
        run_info = create_run_info(root, report, results_file)
        if run_info is not None:
            report.add_run_info(run_info.info)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending: list[tuple[TestSuite, list[Future]]] = []
            for collection in root.iter("collection"):
                suite = TestSuite(
                    name=required_attr(collection, "name"),
                    duration=required_number(collection, "time"),
                )
                self.logger.debug(f"Collection '{suite.name}' queued")
                futures = [executor.submit(self._build_test, tc) for tc in collection.findall(".//test")]
                pending.append((suite, futures))

            categories: set[str] = set()
            for suite, futures in pending:
                for future in futures:
                    test = future.result()
                    report.status_list.append(test.status)
                    categories.update(test.category_list)
                    suite.test_list.append(test)

                suite.status = get_fixture_status(suite.test_list)
                report.test_suite_list.append(suite)

        report.category_list = sorted(categories)

        self.logger.info(
            f"Parsed {results_file}: {len(report.test_suite_list)} suites, "
            f"{len(report.status_list)} tests"
        )
        return report

    def _build_test(self, tc: ET.Element) -> Test:
        result = required_attr(tc, "result")
        test = Test(
            name=required_attr(tc, "name"),
            status=to_status(result),
            duration=required_number(tc, "time"),
        )
        if test.status == Status.UNKNOWN:
            self.logger.warning(f"Test '{test.name}' has unrecognized result '{result}'")

        # test level categories
        categories = get_categories(tc, True)
        if categories:
            test.category_list = categories

        failure = tc.find("failure")
        if failure is not None:
            test.status_message = element_text(failure.find("message")).strip()
            test.stack_trace = element_text(failure.find("stack-trace")).strip()
        else:
            # reason for skipping a test
            reason = tc.find("reason")
            if reason is not None:
                test.status_message = element_text(reason)

        return test
