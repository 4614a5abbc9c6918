from pathlib import Path

import pytest
from typer.testing import CliRunner

from playcheck.cli import app

runner = CliRunner()


@pytest.fixture()
def playbook_path(write_file):
    write_file("pages/ok.py", """\
        from playcheck import assert_nil
        assert_nil(None, line=3)
    """)
    write_file("pages/failing.py", """\
        from playcheck import assert_not_nil
        assert_not_nil(None, line=4)
    """)
    write_file("pages/failing_exercise.py", """\
        from playcheck import assert_true
        assert_true(True, line=5)
    """)
    return write_file("playbook.yaml", """\
        title: CLI Demo
        pages:
          - name: ok
            description: Always passes
            solved: pages/ok.py
          - name: failing
            solved: pages/failing.py
            exercise: pages/failing_exercise.py
    """)


def test_run_prints_checks_and_exits_zero_on_failed_checks(playbook_path):
    result = runner.invoke(app, ["run", str(playbook_path)])
    assert result.exit_code == 0
    assert "✅ 3: assert_nil passed" in result.output
    assert "❌ 4: assert_not_nil NoneType: None did not produce a non-None value" in result.output


def test_run_single_page(playbook_path):
    result = runner.invoke(app, ["run", str(playbook_path), "--page", "ok"])
    assert result.exit_code == 0
    assert "== ok (solved)" in result.output
    assert "failing" not in result.output


def test_run_exercise_mode(playbook_path):
    result = runner.invoke(app, ["run", str(playbook_path), "--mode", "exercise"])
    assert result.exit_code == 0
    assert "== failing (exercise)" in result.output
    assert "✅ 5: assert_true passed" in result.output


def test_run_unknown_mode(playbook_path):
    result = runner.invoke(app, ["run", str(playbook_path), "--mode", "draft"])
    assert result.exit_code == 1


def test_run_unknown_page(playbook_path):
    result = runner.invoke(app, ["run", str(playbook_path), "--page", "nope"])
    assert result.exit_code == 1


def test_run_missing_config():
    result = runner.invoke(app, ["run", "nonexistent.yaml"])
    assert result.exit_code != 0


def test_run_invalid_config(write_file):
    path = write_file("bad.yaml", "title: Empty\npages: []\n")
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 1


def test_run_crashed_page_exits_nonzero(write_file):
    write_file("boom.py", "raise KeyError('missing')\n")
    path = write_file("playbook.yaml", """\
        title: Crash
        pages:
          - name: boom
            solved: boom.py
    """)
    result = runner.invoke(app, ["run", str(path)])
    assert result.exit_code == 1


def test_run_writes_debug_log(playbook_path, tmp_path):
    debug_log = tmp_path / "logs" / "debug.log"
    result = runner.invoke(
        app, ["run", str(playbook_path), "--debug-log", str(debug_log)]
    )
    assert result.exit_code == 0
    content = debug_log.read_text()
    assert "Running page ok" in content
    assert "assert_nil" in content


def test_run_twice_in_one_process(playbook_path, tmp_path):
    debug_log = tmp_path / "debug.log"
    for _ in range(2):
        result = runner.invoke(
            app, ["run", str(playbook_path), "--debug-log", str(debug_log)]
        )
        assert result.exit_code == 0


def test_pages_lists_modes(playbook_path):
    result = runner.invoke(app, ["pages", str(playbook_path)])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "CLI Demo"
    assert "  ok [solved] - Always passes" in lines
    assert "  failing [solved, exercise]" in lines


def test_pages_missing_config():
    result = runner.invoke(app, ["pages", "nonexistent.yaml"])
    assert result.exit_code == 1


def test_describe_literal():
    result = runner.invoke(app, ["describe", "12"])
    assert result.exit_code == 0
    assert result.output.strip() == "int: 12"


def test_describe_container_literal():
    result = runner.invoke(app, ["describe", "{'a': [1, 2]}"])
    assert result.exit_code == 0
    assert result.output.strip() == "dict[str, list[int]]: {'a': [1, 2]}"


def test_describe_rejects_non_literal():
    result = runner.invoke(app, ["describe", "open('x')"])
    assert result.exit_code == 1


def test_example_playbook_runs():
    config = Path(__file__).resolve().parents[1] / "examples" / "playbook.yaml"
    result = runner.invoke(app, ["run", str(config)])
    assert result.exit_code == 0
    assert "❌" not in result.output
    assert "Class: Counter | Deallocated" in result.output
