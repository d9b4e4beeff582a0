"""Tests for the graphsh command-line entry point."""

import io
import sys
import types

import pytest

from graphsh import __version__
from graphsh.cli import build_parser, main
from graphsh.core.debug import get_debug_logger
from graphsh.core.engine import Engine
from graphsh.core.paths import ENV_GRAPHSH_DIR, ENV_GRAPHSH_LOG_DIR, reset_paths


class CliStore:
    def name(self) -> str:
        return "cli-store"


class CliTable:
    def bindings(self):
        return []


class CliPlan:
    def __init__(self, text):
        self.text = text

    def execute(self):
        if "fail" in self.text:
            raise RuntimeError("cannot run")
        return CliTable()

    def describe(self):
        return "plan"


class CliEngine:
    def parse(self, text):
        return text

    def build(self, store, statement, channel_size, trace_writer):
        return CliPlan(statement)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_GRAPHSH_DIR, str(tmp_path / "home"))
    monkeypatch.delenv(ENV_GRAPHSH_LOG_DIR, raising=False)
    monkeypatch.setenv("COLUMNS", "400")
    monkeypatch.chdir(tmp_path)
    reset_paths()
    yield
    reset_paths()


@pytest.fixture
def engine_spec(monkeypatch):
    module = types.ModuleType("cli_test_engine")
    module.create = lambda config: Engine(
        store=CliStore(), parser=CliEngine(), planner=CliEngine()
    )
    monkeypatch.setitem(sys.modules, "cli_test_engine", module)
    return "cli_test_engine:create"


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.command is None
    assert args.engine is None
    assert not args.verbose


def test_version_command(capsys):
    assert main(["version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_missing_engine(capsys):
    assert main([]) == 1
    assert "No engine configured" in capsys.readouterr().out


def test_unloadable_engine(capsys):
    assert main(["--engine", "nowhere_to_be_found:make"]) == 1
    assert "Cannot load engine" in capsys.readouterr().out


def test_missing_working_dir(tmp_path, capsys):
    assert main(["--working-dir", str(tmp_path / "absent"), "version"]) == 0
    assert main(["--working-dir", str(tmp_path / "absent")]) == 1
    assert "Working directory does not exist" in capsys.readouterr().out


def test_config_show(engine_spec, capsys):
    assert main(["--engine", engine_spec, "--bulk-size", "7", "config", "show"]) == 0

    out = capsys.readouterr().out
    assert "Current Configuration" in out
    assert "bulk_size" in out
    assert engine_spec in out


def test_console_reads_piped_stdin(engine_spec, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("help;\ncreate graph\n ?a;\nquit;\n"))

    assert main(["--engine", engine_spec]) == 0

    out = capsys.readouterr().out
    assert "Using driver 'cli-store'" in out
    assert "quits the console." in out
    assert "[OK] Time spent:" in out
    assert "Thanks for all those queries!" in out


def test_run_file_success(engine_spec, tmp_path, capsys):
    path = tmp_path / "ok.bql"
    path.write_text("create graph ?a;\ncreate graph ?b;\n")

    assert main(["--engine", engine_spec, "run", str(path)]) == 0
    assert "run 2 statements successfully" in capsys.readouterr().out


def test_run_file_failure(engine_spec, tmp_path, capsys):
    path = tmp_path / "bad.bql"
    path.write_text("create graph ?a;\nfail now;\ncreate graph ?c;\n")

    assert main(["--engine", engine_spec, "run", str(path)]) == 1

    out = capsys.readouterr().out
    assert "statement 2/3 failed" in out
    assert "1 statement(s) completed before the failure." in out


def test_run_missing_file(engine_spec, tmp_path, capsys):
    assert main(["--engine", engine_spec, "run", str(tmp_path / "missing.bql")]) == 1
    assert "[IO ERROR]" in capsys.readouterr().out


def test_verbose_writes_debug_log(engine_spec, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("quit;\n"))

    assert main(["--engine", engine_spec, "--verbose"]) == 0

    logs = list((tmp_path / "home" / "logs").glob("*.debug"))
    assert len(logs) == 1
    assert "session_start" in logs[0].read_text()
    assert not get_debug_logger().enabled
