from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from suitetally.outcome import Outcome, Status
from suitetally.result import TestResult


class ResultConfig(BaseModel):
    """One node of an outcome tree as written in YAML."""

    model_config = ConfigDict(extra="forbid")
    name: str = Field(min_length=1)
    fullname: str = Field(min_length=1)
    suite: bool = False
    time: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    outcome: Status = Status.INCONCLUSIVE
    label: str | None = None
    message: str | None = None
    stack_trace: str | None = None
    children: list[ResultConfig] = []

    @model_validator(mode="after")
    def check_consistency(self) -> ResultConfig:
        if self.children and not self.suite:
            raise ValueError(
                f"'{self.fullname}' has children but is not a suite (set suite: true)"
            )
        if self.outcome in (Status.FAILURE, Status.IGNORED) and not self.message:
            raise ValueError(
                f"'{self.fullname}' is {self.outcome.value} and needs a message"
            )
        if self.stack_trace is not None and self.outcome != Status.FAILURE:
            raise ValueError(
                f"'{self.fullname}' has a stack_trace but is {self.outcome.value}; "
                "stack traces are only allowed on failures"
            )
        return self


def build_result(config: ResultConfig) -> TestResult:
    """Turn a config node into a TestResult.

    The node's own outcome is applied first, then children are attached in
    file order, so a suite's final outcome is whatever aggregation makes of
    them.
    """
    result = TestResult(config.name, config.fullname, is_suite=config.suite)
    result.elapsed_seconds = config.time
    result.set_outcome(
        Outcome(config.outcome, config.label or ""),
        config.message,
        config.stack_trace,
    )
    for child in config.children:
        result.add_result(build_result(child))
    return result


def load_config(path: Path) -> ResultConfig:
    """Load and validate an outcome tree from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    return ResultConfig.model_validate(raw)


def load_results(path: Path) -> TestResult:
    return build_result(load_config(path))
