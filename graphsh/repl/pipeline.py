"""Parse, plan and execute statements through the configured engine."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TextIO

from graphsh.core.engine import Parser, Plan, Planner, ResultTable, Store
from graphsh.core.errors import ExecutionError, ParseError, PlanError

logger = logging.getLogger(__name__)


class QueryPipeline:
    """Adapter over the engine's parser, planner and plan execution.

    Each stage's failure is reported as its own error type so the console can
    tell a bad statement (ParseError) from an engine fault (PlanError) or a
    failed run (ExecutionError).
    """

    def __init__(
        self,
        parser: Parser,
        planner: Planner,
        store: Store,
        channel_size: int,
        trace_writer: Callable[[], Optional[TextIO]] = lambda: None,
    ):
        """Initialize the pipeline.

        Args:
            parser: Statement parser
            planner: Plan builder
            store: Store queries run against
            channel_size: Passed through to the planner
            trace_writer: Returns the current trace writer; read on every call
        """
        self.parser = parser
        self.planner = planner
        self.store = store
        self.channel_size = channel_size
        self._trace_writer = trace_writer

    def plan(self, text: str, trace: bool = True) -> Plan:
        """Build the execution plan for a statement.

        Args:
            text: Statement text
            trace: Attach the current trace writer to the plan

        Raises:
            ParseError: The statement does not parse
            PlanError: The planner rejected a statement that parsed
        """
        try:
            statement = self.parser.parse(text)
        except Exception as e:
            raise ParseError(f"failed to parse statement with error {e}") from e

        writer = self._trace_writer() if trace else None
        try:
            return self.planner.build(self.store, statement, self.channel_size, writer)
        except Exception as e:
            logger.error("Planner rejected a parsed statement: %s", e)
            raise PlanError(
                f"should have not failed to create a plan for statement {text!r} with error {e}"
            ) from e

    def plan_and_execute(self, text: str) -> ResultTable:
        """Plan a statement and execute the plan.

        Raises:
            ParseError: The statement does not parse
            PlanError: The planner rejected a statement that parsed
            ExecutionError: The plan failed while executing
        """
        plan = self.plan(text)
        try:
            return plan.execute()
        except Exception as e:
            raise ExecutionError(f"failed to execute query plan with error {e}") from e
