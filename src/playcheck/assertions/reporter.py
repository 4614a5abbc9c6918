"""Non-halting assertions that print one pass/fail line per call."""

from __future__ import annotations

import inspect
import logging
from typing import IO, Any

import typer

from playcheck.assertions.base import CheckResult
from playcheck.assertions.checks import (
    Expression,
    check_equal,
    check_equal_types,
    check_false,
    check_nil,
    check_not_nil,
    check_true,
)

logger = logging.getLogger(__name__)


def _caller_line() -> int | str:
    """Line number in the frame that called the function calling us."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        return caller.f_lineno if caller else "?"
    finally:
        del frame


class Reporter:
    """Writes check outcomes to a stream.

    ``stream`` defaults to whatever stdout is at the time of writing. A
    reporter keeps no results; every call stands on its own.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream

    def report(self, result: CheckResult) -> None:
        line = result.render()
        logger.debug(line)
        typer.echo(line, file=self.stream)

    def assert_true(self, value: Expression, line: int | str | None = None) -> None:
        line = _caller_line() if line is None else line
        self.report(check_true(value, line))

    def assert_false(self, value: Expression, line: int | str | None = None) -> None:
        line = _caller_line() if line is None else line
        self.report(check_false(value, line))

    def assert_equal(self, a: Any, b: Any, line: int | str | None = None) -> None:
        line = _caller_line() if line is None else line
        self.report(check_equal(a, b, line))

    def assert_equal_types(self, a: Any, b: Any, line: int | str | None = None) -> None:
        line = _caller_line() if line is None else line
        self.report(check_equal_types(a, b, line))

    def assert_nil(self, a: Any, line: int | str | None = None) -> None:
        line = _caller_line() if line is None else line
        self.report(check_nil(a, line))

    def assert_not_nil(self, a: Any, line: int | str | None = None) -> None:
        line = _caller_line() if line is None else line
        self.report(check_not_nil(a, line))


default_reporter = Reporter()


def assert_true(value: Expression, line: int | str | None = None) -> None:
    """Report whether ``value`` is truthy. Callables are evaluated lazily."""
    line = _caller_line() if line is None else line
    default_reporter.assert_true(value, line)


def assert_false(value: Expression, line: int | str | None = None) -> None:
    """Report whether ``value`` is falsy. Callables are evaluated lazily."""
    line = _caller_line() if line is None else line
    default_reporter.assert_false(value, line)


def assert_equal(a: Any, b: Any, line: int | str | None = None) -> None:
    line = _caller_line() if line is None else line
    default_reporter.assert_equal(a, b, line)


def assert_equal_types(a: Any, b: Any, line: int | str | None = None) -> None:
    line = _caller_line() if line is None else line
    default_reporter.assert_equal_types(a, b, line)


def assert_nil(a: Any, line: int | str | None = None) -> None:
    line = _caller_line() if line is None else line
    default_reporter.assert_nil(a, line)


def assert_not_nil(a: Any, line: int | str | None = None) -> None:
    line = _caller_line() if line is None else line
    default_reporter.assert_not_nil(a, line)
