"""Exception classes for the graphsh console.

Every error raised while handling a statement derives from ``GraphshError``
so the dispatcher can report it and move on to the next statement.
"""

from __future__ import annotations

from typing import Optional


class GraphshError(Exception):
    """Base exception for console errors."""

    #: Marker printed in front of the message by the dispatcher.
    marker = "ERROR"


class InputSyntaxError(GraphshError):
    """Raised when a console command has the wrong number of arguments.

    ``command`` is the command type the statement was meant for, when known.
    """

    marker = "SYNTAX ERROR"

    def __init__(self, usage: str, command: Optional[type] = None):
        self.usage = usage
        self.command = command
        super().__init__(f"Invalid syntax\n\t{usage}")


class FileIOError(GraphshError):
    """Raised when a trace file or statement file cannot be opened."""

    marker = "IO ERROR"

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"failed to access file {path!r}"
        if reason:
            message += f" with error {reason}"
        super().__init__(message)


class ParseError(GraphshError):
    """Raised when the parser rejects a statement."""

    marker = "PARSE ERROR"


class PlanError(GraphshError):
    """Raised when the planner rejects a statement that parsed successfully.

    The planner is expected to accept every parsed statement, so this signals
    a contract violation in the engine rather than a user mistake.
    """

    marker = "PLAN ERROR"


class ExecutionError(GraphshError):
    """Raised when executing a plan fails."""

    marker = "EXECUTION ERROR"


class BatchAbort(GraphshError):
    """Raised when a statement file stops at its first failing statement."""

    def __init__(self, index: int, total: int, statement: str, error: Exception):
        self.index = index
        self.total = total
        self.statement = statement
        self.error = error
        super().__init__(
            f"statement {index}/{total} failed: [{self.cause_marker}] {error} on\n{statement}"
        )

    @property
    def cause_marker(self) -> str:
        """Marker of the error the failing statement raised."""
        return self.error.marker if isinstance(self.error, GraphshError) else GraphshError.marker

    @property
    def completed(self) -> int:
        """Number of statements that ran successfully before the failure."""
        return self.index - 1


class EngineLoadError(GraphshError):
    """Raised when the configured engine factory cannot be loaded."""

    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f"Cannot load engine {spec!r}: {reason}")
