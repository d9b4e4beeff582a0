"""Export and load commands for the console."""

import logging
import time

from graphsh.core.errors import GraphshError
from graphsh.models.command import Command, Export, Load
from graphsh.repl.commands.base import CommandHandler, CommandResult
from graphsh.repl.help_text import EXPORT_USAGE, LOAD_USAGE

logger = logging.getLogger(__name__)


class TransferCommands(CommandHandler):
    """Handler for ``export`` and ``load``.

    Both delegate to the engine's exporter and loader, which report their own
    argument errors using the usage text they are given.
    """

    def handle(self, command: Command) -> CommandResult:
        if isinstance(command, Export):
            return self.export(command)
        if isinstance(command, Load):
            return self.load(command)
        raise TypeError(f"TransferCommands cannot handle {type(command).__name__}")

    def export(self, command: Export) -> CommandResult:
        exporter = self.session.engine.exporter
        if exporter is None:
            return self._unsupported("export")

        started = time.perf_counter()
        exporter.eval(EXPORT_USAGE, list(command.args), self.session.store, self.session.bulk_size)
        elapsed = self.print_elapsed(started)
        return CommandResult(success=True, elapsed=elapsed)

    def load(self, command: Load) -> CommandResult:
        loader = self.session.engine.loader
        if loader is None:
            return self._unsupported("load")

        started = time.perf_counter()
        loader.eval(
            LOAD_USAGE,
            list(command.args),
            self.session.store,
            self.session.bulk_size,
            self.session.builder_size,
        )
        elapsed = self.print_elapsed(started)
        return CommandResult(success=True, elapsed=elapsed)

    def _unsupported(self, name: str) -> CommandResult:
        error = GraphshError(f"the {self.session.store_name} engine does not support {name}")
        logger.debug("%s requested but the engine has no %ser", name, name)
        self.print_error(error)
        return CommandResult(success=False, message=str(error))
