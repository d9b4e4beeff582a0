"""Shared fixtures: an in-memory fake engine and a scripted console input."""

import io
from typing import List, Optional

import pytest
from rich.console import Console

from graphsh.core.engine import Engine
from graphsh.models.config import AppConfig
from graphsh.repl.session import Session


class FakeStore:
    def name(self) -> str:
        return "fake-store"


class FakeTable:
    def __init__(self, columns):
        self._columns = list(columns)

    def bindings(self):
        return self._columns

    def __str__(self) -> str:
        return "| " + " | ".join(self._columns) + " |"


class FakePlan:
    def __init__(self, engine: "FakeEngineState", text: str, trace_writer):
        self.engine = engine
        self.text = text
        self.trace_writer = trace_writer

    def execute(self):
        self.engine.executed.append(self.text)
        if "fail-exec" in self.text:
            raise RuntimeError("boom while executing")
        if self.trace_writer is not None:
            self.trace_writer.write(f"trace: {self.text}\n")
        if "select" in self.text:
            return FakeTable(["?s", "?p", "?o"])
        return FakeTable([])

    def describe(self) -> str:
        return f"PLAN[{self.text}]"


class FakeEngineState:
    """Records what the fake engine was asked to do."""

    def __init__(self):
        self.parsed: List[str] = []
        self.planned: List[tuple] = []
        self.executed: List[str] = []

    def parse(self, text: str):
        self.parsed.append(text)
        if "fail-parse" in text:
            raise ValueError("unexpected token")
        return text

    def build(self, store, statement, channel_size, trace_writer):
        self.planned.append((statement, channel_size, trace_writer))
        if "fail-plan" in statement:
            raise RuntimeError("no plan")
        return FakePlan(self, statement, trace_writer)


class ScriptedLineSource:
    """Line source returning canned lines, recording each prompt shown."""

    def __init__(self, lines: List[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.reads = 0

    def read_line(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        self.reads += 1
        line = self.lines.pop(0)
        if isinstance(line, Exception):
            raise line
        return line


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def engine_state():
    return FakeEngineState()


@pytest.fixture
def engine(engine_state):
    return Engine(
        store=FakeStore(),
        parser=engine_state,
        planner=engine_state,
        exporter=None,
        loader=None,
    )


@pytest.fixture
def config():
    return AppConfig(channel_size=7, bulk_size=11, builder_size=13)


@pytest.fixture
def trace_stream():
    return io.StringIO()


@pytest.fixture
def session(engine, config, console, trace_stream):
    session = Session(engine, config, console, trace_stream=trace_stream)
    yield session
    session.close()


@pytest.fixture
def make_source():
    """Factory for scripted line sources."""
    return ScriptedLineSource
