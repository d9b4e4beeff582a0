"""Turns raw input lines into complete statements."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Generator, Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


class StatementCancelled(Exception):
    """Raised by a line source when the user abandons the statement being typed."""


class LineSource(Protocol):
    def read_line(self, prompt: str) -> Optional[str]:
        """Return the next raw line, or None when the input is exhausted.

        Raises:
            StatementCancelled: The pending statement must be dropped
        """
        ...


class StreamLineSource:
    """Reads lines from a text stream such as piped stdin."""

    def __init__(self, stream: TextIO, console: Optional["Console"] = None):
        self.stream = stream
        self.console = console

    def read_line(self, prompt: str) -> Optional[str]:
        if prompt and self.console is not None:
            self.console.print(prompt, end="", markup=False, highlight=False)
        line = self.stream.readline()
        if line == "":
            return None
        return line


class PromptLineSource:
    """Interactive terminal input with history, backed by prompt_toolkit."""

    def __init__(
        self,
        history_file: Optional[Path] = None,
        bottom_toolbar: Optional[Callable[[], Any]] = None,
    ):
        if history_file is not None:
            history_file.parent.mkdir(parents=True, exist_ok=True)
            history = FileHistory(str(history_file))
        else:
            history = InMemoryHistory()
        self.session: PromptSession = PromptSession(history=history, bottom_toolbar=bottom_toolbar)

    def read_line(self, prompt: str) -> Optional[str]:
        try:
            return self.session.prompt(prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            raise StatementCancelled() from None


class LineAccumulator:
    """Accumulates raw lines until they form a ``;``-terminated statement.

    ``statements()`` yields one statement at a time and stays suspended until
    the consumer resumes it with ``send(done)``. Nothing is read ahead of the
    statement being processed. ``done=True`` ends the stream. A source that
    raises ``StatementCancelled`` drops the statement typed so far.
    """

    def __init__(self, source: LineSource, prompt: str = "graph> ", continuation_prompt: str = ""):
        self.source = source
        self.prompt = prompt
        self.continuation_prompt = continuation_prompt

    def statements(self) -> Generator[str, Optional[bool], None]:
        buffer = ""
        while True:
            try:
                line = self.source.read_line(self.continuation_prompt if buffer else self.prompt)
            except StatementCancelled:
                logger.debug("Statement cancelled: %r", buffer)
                buffer = ""
                continue
            if line is None:
                if buffer:
                    logger.debug("Discarding unterminated input: %r", buffer)
                return
            buffer = f"{buffer} {line.strip()}".strip()
            if not buffer.endswith(";"):
                continue
            done = yield buffer
            if done:
                return
            buffer = ""
