"""Tests for help text and elapsed time formatting."""

import pytest

from graphsh.repl.help_text import COMMANDS_HELP, help_lines
from graphsh.repl.timing import format_elapsed


def test_help_lists_every_command():
    lines = help_lines()

    assert len(lines) == len(COMMANDS_HELP)
    for usage, text in COMMANDS_HELP:
        assert any(line.startswith(usage) and line.endswith(text) for line in lines)


def test_help_descriptions_aligned():
    columns = {line.index(" - ") for line in help_lines()}

    assert len(columns) == 1


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0000005, "0.5µs"),
        (0.0123, "12.3ms"),
        (1.5234, "1.52s"),
        (125.0, "2m5.0s"),
        (-1, "0.0µs"),
    ],
)
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected
