from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from suitetally.aggregate import ResultState, combine
from suitetally.outcome import (
    FAILURE,
    IGNORED,
    INCONCLUSIVE,
    SUCCESS,
    Outcome,
    Status,
)

logger = logging.getLogger(__name__)


class ResultIdentity(BaseModel):
    """Who a result belongs to. Fixed for the lifetime of the result."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    name: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    is_suite: bool = False


@dataclass(frozen=True)
class ResultSnapshot:
    """Frozen copy of a result taken when it was attached to a suite."""

    name: str
    full_name: str
    is_suite: bool
    elapsed_seconds: float
    outcome: Outcome
    message: str | None = None
    stack_trace: str | None = None
    children: tuple[ResultSnapshot, ...] = ()

    @property
    def is_success(self) -> bool:
        return self.outcome.status == Status.SUCCESS

    def snapshot(self) -> ResultSnapshot:
        return self


def _require_text(value: str | None, what: str) -> str:
    if value is None or value == "":
        raise ValueError(f"{what} must not be empty")
    return value


class TestResult:
    """Mutable outcome of one test case or one suite.

    Every result starts out Inconclusive. Leaf results are driven through
    ``mark_success``/``mark_failure``/``mark_ignored``/``set_outcome``;
    suites additionally receive children through ``add_result``, which
    stores a frozen snapshot of the child and folds its outcome into the
    suite's own.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, name: str, full_name: str, is_suite: bool = False):
        self._identity = ResultIdentity(
            name=name, full_name=full_name, is_suite=is_suite
        )
        self._elapsed_seconds = 0.0
        self._outcome = INCONCLUSIVE
        self._message: str | None = None
        self._stack_trace: str | None = None
        self._children: list[ResultSnapshot] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        kind = "suite" if self.is_suite else "case"
        return f"<TestResult {kind} {self.full_name!r} {self._outcome.label}>"

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def full_name(self) -> str:
        return self._identity.full_name

    @property
    def is_suite(self) -> bool:
        return self._identity.is_suite

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed_seconds

    @elapsed_seconds.setter
    def elapsed_seconds(self, value: float) -> None:
        value = float(value)
        if not math.isfinite(value) or value < 0:
            raise ValueError(
                f"elapsed_seconds must be a finite non-negative number, got {value}"
            )
        self._elapsed_seconds = value

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def stack_trace(self) -> str | None:
        return self._stack_trace

    @property
    def children(self) -> tuple[ResultSnapshot, ...]:
        return tuple(self._children)

    @property
    def is_success(self) -> bool:
        return self._outcome.status == Status.SUCCESS

    def mark_success(self) -> None:
        self._apply(ResultState(SUCCESS))

    def mark_failure(self, message: str, stack_trace: str | None = None) -> None:
        _require_text(message, "failure message")
        self._apply(ResultState(FAILURE, message, stack_trace))

    def mark_ignored(self, reason: str) -> None:
        _require_text(reason, "ignore reason")
        self._apply(ResultState(IGNORED, reason))

    def set_outcome(
        self,
        outcome: Outcome,
        message: str | None = None,
        stack_trace: str | None = None,
    ) -> None:
        """Set any outcome. Stack traces are only kept for failures."""
        if outcome.status != Status.FAILURE and stack_trace is not None:
            logger.debug(
                f"Dropping stack trace for {self.full_name!r}: outcome is {outcome.label}"
            )
            stack_trace = None
        self._apply(ResultState(outcome, message, stack_trace))

    def snapshot(self) -> ResultSnapshot:
        return ResultSnapshot(
            name=self.name,
            full_name=self.full_name,
            is_suite=self.is_suite,
            elapsed_seconds=self._elapsed_seconds,
            outcome=self._outcome,
            message=self._message,
            stack_trace=self._stack_trace,
            children=tuple(self._children),
        )

    def add_result(self, child: TestResult | ResultSnapshot) -> None:
        """Append a snapshot of ``child`` and fold its outcome into this suite."""
        if not self.is_suite:
            raise ValueError(
                f"Cannot add results to test case {self.full_name!r}: not a suite"
            )
        entry = child.snapshot()
        with self._lock:
            self._children.append(entry)
            before = self._state()
            after = combine(before, entry.outcome)
            if after != before:
                logger.debug(
                    f"{self.full_name}: {before.outcome.label} -> {after.outcome.label} "
                    f"after child {entry.full_name!r} ({entry.outcome.label})"
                )
            self._apply(after)

    def _state(self) -> ResultState:
        return ResultState(self._outcome, self._message, self._stack_trace)

    def _apply(self, state: ResultState) -> None:
        self._outcome, self._message, self._stack_trace = state
