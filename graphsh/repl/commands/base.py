"""Base command handler for console commands."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from rich.console import Console
from rich.markup import escape

from graphsh.core.errors import GraphshError
from graphsh.repl.timing import format_elapsed
from graphsh.repl.ui.style_tokens import ERROR, SUBTLE, SUCCESS, WARNING

if TYPE_CHECKING:
    from graphsh.models.command import Command
    from graphsh.repl.session import Session


@dataclass
class CommandResult:
    """Result of a command execution.

    Attributes:
        success: Whether the command executed successfully
        message: Optional message to display
        data: Optional data returned by the command
        elapsed: Seconds spent, for timed commands
    """
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    elapsed: Optional[float] = None


class CommandHandler(ABC):
    """Abstract base class for command handlers.

    Each command handler executes a group of related console commands
    against the session it was created with.
    """

    def __init__(self, console: Console, session: "Session"):
        """Initialize command handler.

        Args:
            console: Rich console for output
            session: Console session the commands act on
        """
        self.console = console
        self.session = session

    @abstractmethod
    def handle(self, command: "Command") -> CommandResult:
        """Handle the command execution.

        Args:
            command: Parsed console command

        Returns:
            CommandResult with execution status and optional message
        """
        pass

    def print_ok(self, message: str = "") -> None:
        """Print the success marker, optionally followed by a message."""
        suffix = f" {escape(message)}" if message else ""
        self.console.print(f"[{SUCCESS}]\\[OK][/{SUCCESS}]{suffix}")

    def print_error(self, error: Exception) -> None:
        """Print an error with the marker of its kind.

        Args:
            error: Error to display
        """
        marker = error.marker if isinstance(error, GraphshError) else GraphshError.marker
        self.console.print(f"[{ERROR}]\\[{marker}][/{ERROR}] {escape(str(error))}")

    def print_warning(self, message: str) -> None:
        """Print warning message.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[{WARNING}]\\[WARNING][/{WARNING}] {escape(message)}")

    def print_info(self, message: str) -> None:
        """Print a plain informational message."""
        self.console.print(escape(message))

    def print_verbatim(self, text: str) -> None:
        """Print engine output (tables, plans) exactly as produced."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def print_elapsed(self, started: float, ok: bool = True) -> float:
        """Print the time spent since ``started`` (a perf_counter value).

        Returns:
            Elapsed seconds
        """
        elapsed = time.perf_counter() - started
        if ok:
            self.print_ok(f"Time spent: {format_elapsed(elapsed)}")
        else:
            self.console.print(f"[{SUBTLE}]Time spent: {format_elapsed(elapsed)}[/{SUBTLE}]")
        return elapsed
