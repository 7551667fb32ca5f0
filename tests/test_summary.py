import pytest

from suitetally.outcome import ERROR, Outcome
from suitetally.result import TestResult
from suitetally.summary import compute_stats, iter_cases, summarize


def _case(name: str, seconds: float = 0.0) -> TestResult:
    result = TestResult(name, f"Demo.{name}")
    result.elapsed_seconds = seconds
    return result


@pytest.fixture
def tree() -> TestResult:
    root = TestResult("Demo", "Demo", is_suite=True)
    inner = TestResult("Inner", "Demo.Inner", is_suite=True)

    ok = _case("ok", 1.0)
    ok.mark_success()
    inner.add_result(ok)
    broken = _case("broken", 3.0)
    broken.mark_failure("boom")
    inner.add_result(broken)
    root.add_result(inner)

    skipped = _case("skipped")
    skipped.mark_ignored("later")
    root.add_result(skipped)
    root.add_result(_case("pending", 2.0))
    errored = _case("errored")
    errored.set_outcome(ERROR, "exploded")
    root.add_result(errored)
    return root


def test_iter_cases_yields_leaves_in_order(tree):
    assert [c.name for c in iter_cases(tree)] == [
        "ok",
        "broken",
        "skipped",
        "pending",
        "errored",
    ]


def test_summarize_counts(tree):
    s = summarize(tree)
    assert s.total == 5
    assert s.passed == 1
    assert s.failed == 1
    assert s.ignored == 1
    assert s.inconclusive == 1
    assert s.other == 1
    assert s.pass_rate == 20.0


def test_summarize_time_stats(tree):
    s = summarize(tree)
    assert s.time.min == 0.0
    assert s.time.max == 3.0
    assert s.time.avg == pytest.approx(1.2)


def test_summarize_leaf_counts_itself():
    case = _case("alone", 0.5)
    case.mark_success()
    s = summarize(case)
    assert s.total == 1
    assert s.passed == 1
    assert s.pass_rate == 100.0


def test_summarize_empty_suite():
    s = summarize(TestResult("Empty", "Empty", is_suite=True))
    assert s.total == 0
    assert s.pass_rate == 0.0
    assert s.time.to_dict() == {"avg": None, "min": None, "max": None, "stddev": None}


def test_unknown_status_counts_as_other():
    suite = TestResult("S", "S", is_suite=True)
    case = _case("warned")
    case.set_outcome(Outcome("Warning"), "careful")
    suite.add_result(case)
    assert summarize(suite).other == 1


def test_compute_stats():
    stats = compute_stats([1.0, 2.0, 3.0])
    assert stats.avg == 2.0
    assert stats.min == 1.0
    assert stats.max == 3.0
    assert stats.stddev == pytest.approx(0.8165, abs=1e-4)


def test_summary_to_dict(tree):
    d = summarize(tree).to_dict()
    assert d["total"] == 5
    assert d["pass_rate"] == 20.0
    assert set(d["time"]) == {"avg", "min", "max", "stddev"}
