"""Aggregate test and suite outcomes and render them as reports."""

from suitetally.aggregate import CHILD_FAILED_MESSAGE, ResultState, attach, combine
from suitetally.outcome import (
    CANCELLED,
    ERROR,
    FAILURE,
    IGNORED,
    INCONCLUSIVE,
    NOT_RUNNABLE,
    SKIPPED,
    SUCCESS,
    Outcome,
    Status,
)
from suitetally.reporting.nunit import to_document, to_xml, write_report
from suitetally.result import ResultIdentity, ResultSnapshot, TestResult

__all__ = [
    "CANCELLED",
    "CHILD_FAILED_MESSAGE",
    "ERROR",
    "FAILURE",
    "IGNORED",
    "INCONCLUSIVE",
    "NOT_RUNNABLE",
    "Outcome",
    "ResultIdentity",
    "ResultSnapshot",
    "ResultState",
    "SKIPPED",
    "SUCCESS",
    "Status",
    "TestResult",
    "attach",
    "combine",
    "to_document",
    "to_xml",
    "write_report",
]
