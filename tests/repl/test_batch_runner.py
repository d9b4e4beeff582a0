"""Tests for BatchRunner."""

from unittest.mock import MagicMock

import pytest

from graphsh.core.errors import BatchAbort, ExecutionError, FileIOError, ParseError, PlanError
from graphsh.core.statements import read_statements
from graphsh.repl.batch_runner import BatchResult, BatchRunner
from graphsh.repl.pipeline import QueryPipeline


@pytest.fixture
def pipeline(engine_state):
    return QueryPipeline(engine_state, engine_state, MagicMock(), channel_size=0)


@pytest.fixture
def runner(pipeline, console):
    return BatchRunner(pipeline, read_statements, console)


def write_statements(path, statements):
    path.write_text("\n".join(statements) + "\n")
    return str(path)


def test_runs_every_statement(runner, engine_state, tmp_path, output):
    path = write_statements(tmp_path / "ok.bql", ["select 1;", "select 2;", "select 3;"])

    result = runner.run_file(path)

    assert result == BatchResult(path=path, count=3)
    assert engine_state.executed == ["select 1;", "select 2;", "select 3;"]
    text = output.getvalue()
    assert "Processing statement (1/3)" in text
    assert "Processing statement (3/3)" in text


@pytest.mark.parametrize("failing", [1, 2, 4])
def test_stops_at_first_failure(runner, engine_state, tmp_path, failing):
    statements = [f"select {i};" for i in range(1, 5)]
    statements[failing - 1] = "fail-exec;"
    path = write_statements(tmp_path / "batch.bql", statements)

    with pytest.raises(BatchAbort) as exc_info:
        runner.run_file(path)

    abort = exc_info.value
    assert abort.index == failing
    assert abort.total == 4
    assert abort.completed == failing - 1
    assert abort.statement == "fail-exec;"
    assert isinstance(abort.error, ExecutionError)
    assert engine_state.executed == statements[:failing]


def test_parse_failure_aborts_before_execution(runner, engine_state, tmp_path, output):
    path = write_statements(tmp_path / "batch.bql", ["select 1;", "fail-parse;", "select 3;"])

    with pytest.raises(BatchAbort) as exc_info:
        runner.run_file(path)

    assert isinstance(exc_info.value.error, ParseError)
    assert engine_state.parsed == ["select 1;", "fail-parse;"]
    assert "(3/3)" not in output.getvalue()


def test_unreadable_file(runner, tmp_path):
    with pytest.raises(FileIOError):
        runner.run_file(str(tmp_path / "missing.bql"))


def test_empty_file(runner, tmp_path):
    path = write_statements(tmp_path / "empty.bql", ["# nothing here"])

    assert runner.run_file(path) == BatchResult(path=path, count=0)


def test_uses_injected_reader(pipeline, console, engine_state):
    reader = MagicMock(return_value=["select a;", "select b;"])
    runner = BatchRunner(pipeline, reader, console)

    result = runner.run_file("virtual.bql")

    reader.assert_called_once_with("virtual.bql")
    assert result.count == 2


@pytest.mark.parametrize(
    "failing, error_type, marker",
    [
        ("fail-parse;", ParseError, "[PARSE ERROR]"),
        ("fail-plan;", PlanError, "[PLAN ERROR]"),
        ("fail-exec;", ExecutionError, "[EXECUTION ERROR]"),
    ],
)
def test_abort_keeps_error_kind(runner, tmp_path, failing, error_type, marker):
    path = write_statements(tmp_path / "batch.bql", ["select 1;", "select 2;", failing, "select 4;"])

    with pytest.raises(BatchAbort) as exc_info:
        runner.run_file(path)

    abort = exc_info.value
    assert isinstance(abort.error, error_type)
    assert abort.cause_marker == marker.strip("[]")
    assert str(abort).startswith(f"statement 3/4 failed: {marker} ")
