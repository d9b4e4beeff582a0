"""Interactive console loop."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable, Dict, Generator, Optional, Type

from rich.markup import escape

from graphsh import __version__
from graphsh.core.debug import get_debug_logger
from graphsh.core.errors import GraphshError, InputSyntaxError
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
from graphsh.repl.command_parser import parse_command
from graphsh.repl.commands import (
    CommandResult,
    QueryCommands,
    TracingCommands,
    TransferCommands,
)
from graphsh.repl.help_text import help_lines
from graphsh.repl.timing import format_elapsed
from graphsh.repl.ui.style_tokens import CYAN, ERROR, SUBTLE

if TYPE_CHECKING:
    from graphsh.repl.line_accumulator import LineAccumulator
    from graphsh.repl.session import Session

logger = logging.getLogger(__name__)

Handler = Callable[[Command], CommandResult]


class REPL:
    """Reads statements, runs them and reports the outcome.

    Statements come from a ``LineAccumulator``. After each statement the loop
    tells the accumulator whether to stop (only after ``quit``) or to read the
    next one, so a single statement is in flight at any time. Errors are
    reported and never end the session.
    """

    def __init__(self, session: "Session", accumulator: "LineAccumulator"):
        """Initialize the console loop.

        Args:
            session: Session the commands act on
            accumulator: Source of complete statements
        """
        self.session = session
        self.console = session.console
        self.accumulator = accumulator

        self.tracing_commands = TracingCommands(self.console, session)
        self.transfer_commands = TransferCommands(self.console, session)
        self.query_commands = QueryCommands(self.console, session)

        self._handlers: Dict[Type, Handler] = {
            Quit: self._quit,
            Help: self._help,
            StartTracing: self.tracing_commands.handle,
            StopTracing: self.tracing_commands.handle,
            Export: self.transfer_commands.handle,
            Load: self.transfer_commands.handle,
            Describe: self.query_commands.handle,
            RunFile: self.query_commands.handle,
            Query: self.query_commands.handle,
        }

    def run(self) -> int:
        """Run the console until ``quit;`` or the end of input.

        Returns:
            Exit status
        """
        debug = get_debug_logger()
        debug.session_start(self.session.store_name)
        self._print_banner()

        stream = self.accumulator.statements()
        try:
            statement = next(stream, None)
            while statement is not None:
                done = self.dispatch(statement)
                statement = self._acknowledge(stream, done)
        finally:
            stream.close()
            try:
                if self.session.close():
                    self.console.print("Closing tracing file.")
            except OSError as e:
                logger.warning("Trace file not closed cleanly: %s", e)
                self.console.print(f"[{ERROR}]\\[{GraphshError.marker}][/{ERROR}] {escape(str(e))}")
            self.console.print("\n\nThanks for all those queries!\n")
            debug.session_end()
        return 0

    def dispatch(self, statement: str) -> bool:
        """Run one statement.

        Args:
            statement: Complete ``;``-terminated statement

        Returns:
            True if the session must end
        """
        debug = get_debug_logger()
        debug.statement(statement)

        started = time.perf_counter()
        try:
            command = parse_command(statement)
        except InputSyntaxError as e:
            self.console.print(f"[{ERROR}]\\[{e.marker}][/{ERROR}] {escape(str(e))}")
            # run always reports its time, even when rejected
            if e.command is RunFile:
                elapsed = format_elapsed(time.perf_counter() - started)
                self.console.print(f"[{SUBTLE}]Time spent: {elapsed}[/{SUBTLE}]")
            debug.command_rejected(str(e))
            return False

        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"No handler registered for {type(command).__name__}")

        try:
            result = handler(command)
        except Exception as e:
            logger.debug("Command %s failed", type(command).__name__, exc_info=True)
            marker = e.marker if isinstance(e, GraphshError) else GraphshError.marker
            self.console.print(f"[{ERROR}]\\[{marker}][/{ERROR}] {escape(str(e))}")
            result = CommandResult(success=False, message=str(e))

        debug.command_done(type(command).__name__, result.success, result.elapsed)
        return isinstance(command, Quit)

    @staticmethod
    def _acknowledge(stream: Generator[str, Optional[bool], None], done: bool) -> Optional[str]:
        try:
            return stream.send(done)
        except StopIteration:
            return None

    def _quit(self, command: Command) -> CommandResult:
        return CommandResult(success=True, message="quit")

    def _help(self, command: Command) -> CommandResult:
        for line in help_lines():
            self.console.print(line, markup=False, highlight=False)
        self.console.print()
        return CommandResult(success=True)

    def _print_banner(self) -> None:
        self.console.print(f"[bold {CYAN}]Welcome to graphsh ({__version__})[/bold {CYAN}]")
        self.console.print(
            f"Using driver {escape(repr(self.session.store_name))}. Type quit; to exit"
        )
        self.console.print(
            f"[{SUBTLE}]Session started at {self.session.started_at:%Y-%m-%d %H:%M:%S}[/{SUBTLE}]\n"
        )
