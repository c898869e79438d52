"""Outcome classification for tests and suites."""

from typing import Iterable, Optional

from reportunit.engine.models import Status, Test


# Runner outcome tokens, compared lower-cased
STATUS_TOKENS = {
    "pass": Status.PASSED,
    "passed": Status.PASSED,
    "success": Status.PASSED,
    "fail": Status.FAILED,
    "failed": Status.FAILED,
    "failure": Status.FAILED,
    "error": Status.FAILED,
    "skip": Status.SKIPPED,
    "skipped": Status.SKIPPED,
    "ignored": Status.SKIPPED,
    "notrun": Status.SKIPPED,
    "notexecuted": Status.SKIPPED,
}


def to_status(token: Optional[str]) -> Status:
    """Map a runner outcome string to a Status.

    Unrecognized or empty tokens map to Status.UNKNOWN.
    """
    if not token:
        return Status.UNKNOWN
    return STATUS_TOKENS.get(token.strip().lower(), Status.UNKNOWN)


def get_fixture_status(tests: Iterable[Test]) -> Status:
    """
    Roll the statuses of a suite's tests up into one suite status.

    Failed dominates Skipped, which dominates Passed. A suite with no tests,
    or only tests of unknown outcome, is Unknown.
    """
    statuses = {test.status for test in tests}

    if Status.FAILED in statuses:
        return Status.FAILED
    if Status.SKIPPED in statuses:
        return Status.SKIPPED
    if Status.PASSED in statuses:
        return Status.PASSED
    return Status.UNKNOWN
