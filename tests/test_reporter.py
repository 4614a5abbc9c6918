"""Tests for the printing assertion functions."""

import inspect
import io

from playcheck import (
    Reporter,
    assert_equal,
    assert_equal_types,
    assert_false,
    assert_nil,
    assert_not_nil,
    assert_true,
)


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_each_assertion_prints_one_line(capsys):
    assert_true(True, line=1)
    assert_false(False, line=2)
    assert_equal("a", "a", line=3)
    assert_equal_types(1, 2, line=4)
    assert_nil(None, line=5)
    assert_not_nil(0, line=6)

    assert _lines(capsys) == [
        "✅ 1: assert_true passed",
        "✅ 2: assert_false passed",
        "✅ 3: assert_equal passed",
        "✅ 4: assert_equal_types passed",
        "✅ 5: assert_nil passed",
        "✅ 6: assert_not_nil passed",
    ]


def test_failures_print_diagnostics_and_continue(capsys):
    assert_equal(1, 2, line=10)
    assert_equal_types(1, "x", line=11)
    assert_nil(3, line=12)

    assert _lines(capsys) == [
        "❌ 10: assert_equal int: 1 is not equal to int: 2",
        "❌ 11: assert_equal_types Type int: 1 is not str: 'x'",
        "❌ 12: assert_nil int: 3 did not evaluate to None",
    ]


def test_assertions_return_none(capsys):
    assert assert_true(False, line=1) is None
    assert assert_equal(1, 2, line=1) is None


def test_line_defaults_to_caller_line(capsys):
    expected = inspect.currentframe().f_lineno + 1
    assert_true(True)
    assert _lines(capsys) == [f"✅ {expected}: assert_true passed"]


def test_reporter_method_line_defaults_to_caller_line():
    stream = io.StringIO()
    reporter = Reporter(stream=stream)
    expected = inspect.currentframe().f_lineno + 1
    reporter.assert_false(0)
    assert stream.getvalue() == f"✅ {expected}: assert_false passed\n"


def test_reporter_writes_to_its_stream(capsys):
    stream = io.StringIO()
    reporter = Reporter(stream=stream)
    reporter.assert_not_nil(None, line=7)

    assert stream.getvalue() == "❌ 7: assert_not_nil NoneType: None did not produce a non-None value\n"
    assert capsys.readouterr().out == ""


def test_raising_expression_is_reported_not_raised(capsys):
    assert_true(lambda: 1 / 0, line=3)
    (line,) = _lines(capsys)
    assert line.startswith("❌ 3: assert_true Evaluation raised ZeroDivisionError")
