"""Query, describe and run-file commands for the console."""

import time

from graphsh.core.errors import BatchAbort, GraphshError
from graphsh.models.command import Command, Describe, Query, RunFile
from graphsh.repl.commands.base import CommandHandler, CommandResult


class QueryCommands(CommandHandler):
    """Handler for commands that go through the query pipeline."""

    def handle(self, command: Command) -> CommandResult:
        if isinstance(command, Query):
            return self.query(command)
        if isinstance(command, Describe):
            return self.describe(command)
        if isinstance(command, RunFile):
            return self.run_file(command)
        raise TypeError(f"QueryCommands cannot handle {type(command).__name__}")

    def describe(self, command: Describe) -> CommandResult:
        """Print the plan for a statement without executing it."""
        try:
            plan = self.session.pipeline.plan(command.query, trace=False)
        except GraphshError as e:
            self.print_error(e)
            self.console.print()
            return CommandResult(success=False, message=str(e), data=e)

        description = plan.describe()
        self.print_verbatim(description)
        self.print_ok()
        return CommandResult(success=True, data=description)

    def query(self, command: Query) -> CommandResult:
        """Run a query and print its results.

        Tables without bound columns are not printed; only the success marker
        and the time spent are.
        """
        started = time.perf_counter()
        try:
            table = self.session.pipeline.plan_and_execute(command.query)
        except GraphshError as e:
            self.print_error(e)
            elapsed = self.print_elapsed(started, ok=False)
            self.console.print()
            return CommandResult(success=False, message=str(e), data=e, elapsed=elapsed)

        if len(table.bindings()) > 0:
            self.print_verbatim(str(table))
        elapsed = self.print_elapsed(started)
        return CommandResult(success=True, data=table, elapsed=elapsed)

    def run_file(self, command: RunFile) -> CommandResult:
        """Run every statement of a file, stopping at the first failure."""
        started = time.perf_counter()
        try:
            result = self.session.batch_runner.run_file(command.path)
        except BatchAbort as e:
            self.print_error(e)
            self.print_info(f"{e.completed} statement(s) completed before the failure.")
            elapsed = self.print_elapsed(started, ok=False)
            return CommandResult(success=False, message=str(e), data=e, elapsed=elapsed)
        except GraphshError as e:
            self.print_error(e)
            elapsed = self.print_elapsed(started, ok=False)
            return CommandResult(success=False, message=str(e), data=e, elapsed=elapsed)

        self.print_info(f"Loaded {result.path!r} and run {result.count} statements successfully")
        self.console.print()
        elapsed = self.print_elapsed(started)
        return CommandResult(success=True, data=result, elapsed=elapsed)
