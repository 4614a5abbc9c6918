"""Check evaluation: each function inspects its inputs and returns a CheckResult."""

from __future__ import annotations

import inspect
import logging
import types
from typing import Any, Callable, Union

from playcheck.assertions.base import CheckResult
from playcheck.describe import describe

logger = logging.getLogger(__name__)

Expression = Union[bool, Callable[[], Any], Any]


def _is_deferred(expression: Any) -> bool:
    """True for plain functions and lambdas callable without arguments."""
    if not isinstance(expression, types.FunctionType):
        return False
    for param in inspect.signature(expression).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


def _evaluate(expression: Expression) -> Any:
    # Deferred expressions run at check time; any other value, callable or
    # not, is judged by its truthiness.
    if _is_deferred(expression):
        return expression()
    return expression


def _raised(name: str, line: int | str, exc: Exception) -> CheckResult:
    logger.debug(f"{name} at line {line} raised {exc!r}")
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message=f"Evaluation raised {type(exc).__name__}: {exc}",
    )


def check_true(value: Expression, line: int | str) -> CheckResult:
    """Pass when ``value`` (or the result of calling it) is truthy."""
    name = "assert_true"
    try:
        passed = bool(_evaluate(value))
    except Exception as exc:
        return _raised(name, line, exc)

    logger.debug(f"{name} at line {line}: passed={passed}")
    if passed:
        return CheckResult(name=name, line=line, passed=True)
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message="Expression did not evaluate to True",
    )


def check_false(value: Expression, line: int | str) -> CheckResult:
    """Pass when ``value`` (or the result of calling it) is falsy."""
    name = "assert_false"
    try:
        passed = not _evaluate(value)
    except Exception as exc:
        return _raised(name, line, exc)

    logger.debug(f"{name} at line {line}: passed={passed}")
    if passed:
        return CheckResult(name=name, line=line, passed=True)
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message="Expression did not evaluate to False",
    )


def check_equal(a: Any, b: Any, line: int | str) -> CheckResult:
    """Pass when ``a == b``."""
    name = "assert_equal"
    try:
        passed = bool(a == b)
    except Exception as exc:
        return _raised(name, line, exc)

    logger.debug(f"{name} at line {line}: passed={passed}")
    if passed:
        return CheckResult(name=name, line=line, passed=True)
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message=f"{describe(a)} is not equal to {describe(b)}",
    )


def check_equal_types(a: Any, b: Any, line: int | str) -> CheckResult:
    """Pass when ``a`` and ``b`` have the same runtime type, whatever their values."""
    name = "assert_equal_types"
    passed = type(a) is type(b)

    logger.debug(f"{name} at line {line}: {type(a).__qualname__} vs {type(b).__qualname__}")
    if passed:
        return CheckResult(name=name, line=line, passed=True)
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message=f"Type {describe(a)} is not {describe(b)}",
    )


def check_nil(a: Any, line: int | str) -> CheckResult:
    """Pass when ``a`` is None."""
    name = "assert_nil"
    if a is None:
        return CheckResult(name=name, line=line, passed=True)
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message=f"{describe(a)} did not evaluate to None",
    )


def check_not_nil(a: Any, line: int | str) -> CheckResult:
    """Pass when ``a`` is not None."""
    name = "assert_not_nil"
    if a is not None:
        return CheckResult(name=name, line=line, passed=True)
    return CheckResult(
        name=name,
        line=line,
        passed=False,
        message=f"{describe(a)} did not produce a non-None value",
    )
