"""Render result trees as nested ``test-suite``/``test-case`` XML elements."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Union

from junitparser import Attr, Element

from suitetally.outcome import Status

if TYPE_CHECKING:
    from suitetally.result import ResultSnapshot, TestResult

    AnyResult = Union[TestResult, ResultSnapshot]

logger = logging.getLogger(__name__)

# Code points XML 1.0 does not allow anywhere in a document, escaped or not.
_INVALID_XML_CHARS = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


class _TextElement(Element):
    @property
    def text(self) -> str | None:
        return self._elem.text

    @text.setter
    def text(self, value: str | None) -> None:
        self._elem.text = value


class Message(_TextElement):
    _tag = "message"


class StackTrace(_TextElement):
    _tag = "stacktrace"


class Reason(Element):
    _tag = "reason"


class FailureDetail(Element):
    _tag = "failure"


class _ResultElement(Element):
    name = Attr("name")
    fullname = Attr("fullname")
    time = Attr("time")
    result = Attr("result")


class TestCaseElement(_ResultElement):
    __test__ = False
    _tag = "test-case"


class TestSuiteElement(_ResultElement):
    __test__ = False
    _tag = "test-suite"


def format_time(seconds: float) -> str:
    return f"{seconds:.3f}"


def _xml_safe(value: str) -> str:
    return _INVALID_XML_CHARS.sub("\ufffd", value)


def _text(cls: type[_TextElement], value: str) -> _TextElement:
    elem = cls()
    elem.text = _xml_safe(value)
    return elem


def _diagnostics(result: AnyResult) -> Element | None:
    status = result.outcome.status
    if status == Status.IGNORED:
        if result.message is None:
            return None
        reason = Reason()
        reason.append(_text(Message, result.message))
        return reason
    if status == Status.FAILURE:
        failure = FailureDetail()
        if result.message is not None:
            failure.append(_text(Message, result.message))
        if result.stack_trace is not None:
            failure.append(_text(StackTrace, result.stack_trace))
        return failure
    return None


def to_document(result: AnyResult) -> _ResultElement:
    """Build the report element for ``result`` and, for suites, its children.

    Reads the current state of ``result`` without changing it.
    """
    elem = TestSuiteElement() if result.is_suite else TestCaseElement()
    elem.name = _xml_safe(result.name)
    elem.fullname = _xml_safe(result.full_name)
    elem.time = format_time(result.elapsed_seconds)
    elem.result = _xml_safe(result.outcome.label)

    detail = _diagnostics(result)
    if detail is not None:
        elem.append(detail)

    if result.is_suite:
        for child in result.children:
            elem.append(to_document(child))
    return elem


def to_xml(result: AnyResult) -> bytes:
    return to_document(result).tostring()


def write_report(result: AnyResult, path: Path) -> Path:
    """Write the XML report for ``result`` to ``path``, return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(to_xml(result))
    logger.debug(f"Wrote report for {result.full_name!r} to {path}")
    return path
