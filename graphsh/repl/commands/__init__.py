"""Console command handlers."""

from graphsh.repl.commands.base import CommandHandler, CommandResult
from graphsh.repl.commands.query_commands import QueryCommands
from graphsh.repl.commands.tracing_commands import TracingCommands
from graphsh.repl.commands.transfer_commands import TransferCommands

__all__ = [
    "CommandHandler",
    "CommandResult",
    "QueryCommands",
    "TracingCommands",
    "TransferCommands",
]
