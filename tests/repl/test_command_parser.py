"""Tests for the console command tokenizer."""

import pytest

from graphsh.core.errors import InputSyntaxError
from graphsh.models.command import (
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
from graphsh.repl.command_parser import parse_command, strip_terminator


@pytest.mark.parametrize(
    "statement, expected",
    [
        ("quit;", Quit()),
        ("QUIT ;", Quit()),
        ("help;", Help()),
        ("start tracing;", StartTracing()),
        ("start tracing /tmp/trace.log;", StartTracing(path="/tmp/trace.log")),
        ("stop tracing;", StopTracing()),
        ("Stop Tracing;", StopTracing()),
        (
            "export ?a,?b /tmp/out.txt;",
            Export(args=("graphsh", "export", "?a,?b", "/tmp/out.txt")),
        ),
        (
            "load /tmp/in.txt ?a,?b;",
            Load(args=("graphsh", "load", "/tmp/in.txt", "?a,?b")),
        ),
        ("desc select ?s ?p ?o;", Describe(query="select ?s ?p ?o;")),
        ("run /tmp/stmts.bql;", RunFile(path="/tmp/stmts.bql")),
        ("select ?s from ?g where {?s ?p ?o};", Query(query="select ?s from ?g where {?s ?p ?o};")),
        ("create graph ?g;", Query(query="create graph ?g;")),
    ],
)
def test_parse_command(statement, expected):
    assert parse_command(statement) == expected


@pytest.mark.parametrize(
    "statement",
    [
        "quitter;",
        "helpme;",
        "description of ?g;",
        "runner ?x;",
        "starting tracing;",
        "loaded ?g;",
    ],
)
def test_keywords_match_whole_tokens_only(statement):
    assert parse_command(statement) == Query(query=statement)


@pytest.mark.parametrize(
    "statement, usage, command",
    [
        ("start tracing a b;", "start tracing [trace_file]", StartTracing),
        ("run;", "run <file_with_statements>", RunFile),
        ("run a b;", "run <file_with_statements>", RunFile),
    ],
)
def test_wrong_argument_count(statement, usage, command):
    with pytest.raises(InputSyntaxError) as exc_info:
        parse_command(statement)

    assert exc_info.value.usage == usage
    assert usage in str(exc_info.value)
    assert exc_info.value.command is command


def test_export_without_arguments_is_left_to_exporter():
    assert parse_command("export;") == Export(args=("graphsh", "export"))


def test_empty_statement_is_a_query():
    assert parse_command(";") == Query(query=";")


def test_strip_terminator():
    assert strip_terminator("  help ;  ") == "help"
    assert strip_terminator("help") == "help"
