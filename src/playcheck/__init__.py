"""Assertion and inspection helpers for annotated tutorial pages."""

from playcheck.assertions import (
    CheckResult,
    Reporter,
    assert_equal,
    assert_equal_types,
    assert_false,
    assert_nil,
    assert_not_nil,
    assert_true,
)
from playcheck.describe import describe, type_name
from playcheck.inspector import ReferenceInspector, ReferenceReport, reference_counter
from playcheck.ownership import DeallocatedError, OwnershipError, Retained

__all__ = [
    "CheckResult",
    "DeallocatedError",
    "OwnershipError",
    "ReferenceInspector",
    "ReferenceReport",
    "Reporter",
    "Retained",
    "assert_equal",
    "assert_equal_types",
    "assert_false",
    "assert_nil",
    "assert_not_nil",
    "assert_true",
    "describe",
    "reference_counter",
    "type_name",
]
