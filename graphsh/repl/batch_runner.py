"""Runs every statement stored in a file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphsh.core.errors import BatchAbort, GraphshError

if TYPE_CHECKING:
    from rich.console import Console

    from graphsh.core.engine import StatementReader
    from graphsh.repl.pipeline import QueryPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    path: str
    count: int


class BatchRunner:
    """Executes the statements of a file in order, stopping at the first failure."""

    def __init__(self, pipeline: "QueryPipeline", reader: "StatementReader", console: "Console"):
        self.pipeline = pipeline
        self.reader = reader
        self.console = console

    def run_file(self, path: str) -> BatchResult:
        """Run all statements in ``path``.

        Returns:
            BatchResult with the path and number of statements run

        Raises:
            FileIOError: The file cannot be read
            BatchAbort: A statement failed; later statements were not attempted
        """
        statements = self.reader(path)
        total = len(statements)
        for index, statement in enumerate(statements, start=1):
            self.console.print(f"Processing statement ({index}/{total})")
            try:
                self.pipeline.plan_and_execute(statement)
            except GraphshError as e:
                logger.debug("Statement %d/%d of %s failed: %s", index, total, path, e)
                raise BatchAbort(index, total, statement, e) from e
        self.console.print()
        return BatchResult(path=path, count=total)
