from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Error, Failure, JUnitXml, Skipped, TestCase, TestSuite

from suitetally.outcome import Status

if TYPE_CHECKING:
    from suitetally.reporting.nunit import AnyResult

logger = logging.getLogger(__name__)


def _case(result: AnyResult, classname: str) -> TestCase:
    case = TestCase(result.name)
    case.classname = classname
    case.time = result.elapsed_seconds

    status = result.outcome.status
    if status == Status.FAILURE:
        failure = Failure(result.message or "")
        if result.stack_trace is not None:
            failure.text = result.stack_trace
        case.result = failure
    elif status in (Status.IGNORED, Status.SKIPPED):
        case.result = Skipped(result.message or "")
    elif status in (Status.ERROR, Status.NOT_RUNNABLE):
        case.result = Error(result.message or "")
    return case


def _collect_suites(result: AnyResult, xml: JUnitXml) -> None:
    cases = [child for child in result.children if not child.is_suite]
    if cases:
        suite = TestSuite(result.full_name)
        for child in cases:
            suite.add_testcase(_case(child, result.full_name))
        # Set time after add_testcase (add_testcase resets it via update_statistics)
        suite.time = result.elapsed_seconds
        # Use append (not +=) to preserve time
        xml.append(suite)

    for child in result.children:
        if child.is_suite:
            _collect_suites(child, xml)


def to_junit(result: AnyResult) -> JUnitXml:
    """Flatten a result tree into JUnit XML.

    JUnit has no nested suites, so every suite that directly holds test
    cases becomes one ``<testsuite>`` named after its full name. A bare test
    case is wrapped in a suite of its own.
    """
    xml = JUnitXml()
    if result.is_suite:
        _collect_suites(result, xml)
    else:
        suite = TestSuite(result.full_name)
        suite.add_testcase(_case(result, result.full_name))
        suite.time = result.elapsed_seconds
        xml.append(suite)
    return xml


def write_junit(result: AnyResult, path: Path) -> Path:
    """Write junit.xml for ``result``, return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    to_junit(result).write(str(path), pretty=True)
    logger.debug(f"Wrote JUnit report for {result.full_name!r} to {path}")
    return path
