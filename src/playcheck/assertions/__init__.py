"""Assertion system for validating tutorial snippets."""

from playcheck.assertions.base import CheckResult
from playcheck.assertions.reporter import (
    Reporter,
    assert_equal,
    assert_equal_types,
    assert_false,
    assert_nil,
    assert_not_nil,
    assert_true,
)

__all__ = [
    "CheckResult",
    "Reporter",
    "assert_equal",
    "assert_equal_types",
    "assert_false",
    "assert_nil",
    "assert_not_nil",
    "assert_true",
]
