"""Rules for folding child outcomes into the outcome of their suite."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from suitetally.outcome import FAILURE, SUCCESS, Outcome, Status

if TYPE_CHECKING:
    from suitetally.result import ResultSnapshot, TestResult

logger = logging.getLogger(__name__)

CHILD_FAILED_MESSAGE = "Child test failed"


class ResultState(NamedTuple):
    outcome: Outcome
    message: str | None = None
    stack_trace: str | None = None


def combine(current: ResultState, child: Outcome) -> ResultState:
    """Return the suite state after seeing one more child outcome.

    A failing child always wins and leaves the suite with the fixed rollup
    message and no stack trace. A passing child upgrades anything except a
    failure. Every other status, including ones this module has never heard
    of, leaves ``current`` as it is.
    """
    if child.status == Status.FAILURE:
        return ResultState(FAILURE, CHILD_FAILED_MESSAGE, None)
    if child.status == Status.SUCCESS and current.outcome.status != Status.FAILURE:
        return ResultState(SUCCESS, None, None)
    return current


def attach(parent: TestResult, child: TestResult | ResultSnapshot) -> TestResult:
    """Record a frozen copy of ``child`` on ``parent`` and update its outcome."""
    parent.add_result(child)
    return parent
