"""Turns console statements into typed commands."""

from __future__ import annotations

from typing import List

from graphsh.core.errors import InputSyntaxError
from graphsh.models.command import (
    Command,
    Describe,
    Export,
    Help,
    Load,
    Query,
    Quit,
    RunFile,
    StartTracing,
    StopTracing,
)

PROGRAM_NAME = "graphsh"

START_TRACING_USAGE = "start tracing [trace_file]"
RUN_USAGE = "run <file_with_statements>"


def strip_terminator(statement: str) -> str:
    """Return the statement body without surrounding blanks and its trailing ``;``."""
    body = statement.strip()
    if body.endswith(";"):
        body = body[:-1]
    return body.strip()


def _keywords(tokens: List[str], count: int) -> List[str]:
    return [t.lower() for t in tokens[:count]]


def parse_command(statement: str) -> Command:
    """Classify a complete statement.

    Commands are recognised by their leading keywords, compared as whole
    tokens regardless of case. Anything that is not a console command is a
    query and keeps its terminating ``;`` for the parser.

    Args:
        statement: Statement as produced by the line accumulator

    Returns:
        The matching command

    Raises:
        InputSyntaxError: If ``start tracing`` or ``run`` have the wrong number
            of arguments
    """
    body = strip_terminator(statement)
    tokens = body.split()
    head = _keywords(tokens, 1)

    if head == ["quit"]:
        return Quit()
    if head == ["help"]:
        return Help()

    if _keywords(tokens, 2) == ["start", "tracing"]:
        if len(tokens) == 2:
            return StartTracing()
        if len(tokens) == 3:
            return StartTracing(path=tokens[2])
        raise InputSyntaxError(START_TRACING_USAGE, command=StartTracing)

    if _keywords(tokens, 2) == ["stop", "tracing"]:
        return StopTracing()

    if head == ["export"]:
        return Export(args=(PROGRAM_NAME, *tokens))
    if head == ["load"]:
        return Load(args=(PROGRAM_NAME, *tokens))

    if head == ["desc"]:
        remainder = statement.strip()[len(tokens[0]):].strip()
        return Describe(query=remainder)

    if head == ["run"]:
        if len(tokens) != 2:
            raise InputSyntaxError(RUN_USAGE, command=RunFile)
        return RunFile(path=tokens[1])

    return Query(query=statement.strip())
