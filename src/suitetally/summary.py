from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np

from suitetally.outcome import Status

if TYPE_CHECKING:
    from suitetally.reporting.nunit import AnyResult


@dataclass
class TimeStatistics:
    """Elapsed-time statistics over leaf test cases."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass
class ResultSummary:
    """Counts of leaf test cases by outcome."""

    total: int
    passed: int
    failed: int
    ignored: int
    inconclusive: int
    other: int
    time: TimeStatistics

    @property
    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.passed / self.total * 100, 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "ignored": self.ignored,
            "inconclusive": self.inconclusive,
            "other": self.other,
            "pass_rate": self.pass_rate,
            "time": self.time.to_dict(),
        }


def compute_stats(values: list[float]) -> TimeStatistics:
    """Compute avg, min, max, stddev for a list of durations."""
    if not values:
        return TimeStatistics(avg=None, min=None, max=None, stddev=None)

    arr = np.array(values, dtype=float)
    return TimeStatistics(
        avg=round(float(np.mean(arr)), 4),
        min=round(float(np.min(arr)), 4),
        max=round(float(np.max(arr)), 4),
        stddev=round(float(np.std(arr)), 4),
    )


def iter_cases(result: AnyResult) -> Iterator[AnyResult]:
    """Yield every leaf test case under ``result`` in report order."""
    if not result.is_suite:
        yield result
        return
    for child in result.children:
        yield from iter_cases(child)


def summarize(result: AnyResult) -> ResultSummary:
    cases = list(iter_cases(result))
    statuses = [case.outcome.status for case in cases]

    passed = statuses.count(Status.SUCCESS)
    failed = statuses.count(Status.FAILURE)
    ignored = statuses.count(Status.IGNORED)
    inconclusive = statuses.count(Status.INCONCLUSIVE)

    return ResultSummary(
        total=len(cases),
        passed=passed,
        failed=failed,
        ignored=ignored,
        inconclusive=inconclusive,
        other=len(cases) - passed - failed - ignored - inconclusive,
        time=compute_stats([case.elapsed_seconds for case in cases]),
    )
