"""Tracing commands for the console."""

from graphsh.core.errors import FileIOError
from graphsh.models.command import Command, StartTracing, StopTracing
from graphsh.repl.commands.base import CommandHandler, CommandResult

TRACING_WARNING = "Tracing is on. This may slow your queries."


class TracingCommands(CommandHandler):
    """Handler for ``start tracing`` and ``stop tracing``."""

    def handle(self, command: Command) -> CommandResult:
        if isinstance(command, StartTracing):
            return self.start(command)
        if isinstance(command, StopTracing):
            return self.stop()
        raise TypeError(f"TracingCommands cannot handle {type(command).__name__}")

    def start(self, command: StartTracing) -> CommandResult:
        """Start tracing to the console or to a file.

        The previous sink is always released first. When the trace file cannot
        be created tracing stays off.
        """
        tracing = self.session.tracing
        self._report_closed(tracing.stop())
        if command.to_console:
            tracing.start_console()
        else:
            try:
                tracing.start_file(command.path)
            except FileIOError as e:
                self.print_error(e)
                return CommandResult(success=False, message=str(e))

        self.print_warning(TRACING_WARNING)
        return CommandResult(success=True, data=tracing.target)

    def stop(self) -> CommandResult:
        """Stop tracing; a no-op when tracing is already off."""
        self._report_closed(self.session.tracing.stop())
        self.print_info("Tracing is off.")
        return CommandResult(success=True)

    def _report_closed(self, closed_file: bool) -> None:
        if closed_file:
            self.print_info("Closing tracing file.")
