"""Outcome values: a categorical status plus the label shown in reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    INCONCLUSIVE = "Inconclusive"
    SUCCESS = "Success"
    FAILURE = "Failure"
    IGNORED = "Ignored"
    SKIPPED = "Skipped"
    NOT_RUNNABLE = "NotRunnable"
    ERROR = "Error"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class Outcome:
    """Immutable result state of a test or suite.

    Attributes:
        status: A ``Status`` member. Strings naming an unknown status are
            kept as-is so newer outcome kinds pass through untouched.
        label: Text written to the ``result`` attribute of a report.
            Defaults to the status value.
    """

    status: Status | str
    label: str = ""

    def __post_init__(self) -> None:
        status = self.status
        if not isinstance(status, Status):
            try:
                status = Status(status)
            except ValueError:
                pass
            object.__setattr__(self, "status", status)
        if not self.label:
            value = status.value if isinstance(status, Status) else str(status)
            object.__setattr__(self, "label", value)

    def __str__(self) -> str:
        return self.label


INCONCLUSIVE = Outcome(Status.INCONCLUSIVE)
SUCCESS = Outcome(Status.SUCCESS)
FAILURE = Outcome(Status.FAILURE)
IGNORED = Outcome(Status.IGNORED)
SKIPPED = Outcome(Status.SKIPPED)
NOT_RUNNABLE = Outcome(Status.NOT_RUNNABLE)
ERROR = Outcome(Status.ERROR)
CANCELLED = Outcome(Status.CANCELLED)
