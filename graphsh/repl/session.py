"""Console session state."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional, TextIO

from graphsh.repl.batch_runner import BatchRunner
from graphsh.repl.pipeline import QueryPipeline
from graphsh.repl.tracing import TracingManager

if TYPE_CHECKING:
    from rich.console import Console

    from graphsh.core.engine import Engine
    from graphsh.models.config import AppConfig

logger = logging.getLogger(__name__)


class Session:
    """State shared by every command of one console run.

    Holds the engine, the pass-through size settings and the trace sink.
    Closing the session stops tracing; closing twice is harmless.
    """

    def __init__(
        self,
        engine: "Engine",
        config: "AppConfig",
        console: "Console",
        trace_stream: Optional[TextIO] = None,
    ):
        self.id = uuid.uuid4().hex[:8]
        self.engine = engine
        self.config = config
        self.console = console
        self.started_at = datetime.now()
        self.tracing = TracingManager(trace_stream if trace_stream is not None else console.file)
        self.pipeline = QueryPipeline(
            engine.parser,
            engine.planner,
            engine.store,
            config.channel_size,
            trace_writer=lambda: self.tracing.writer,
        )
        self.batch_runner = BatchRunner(self.pipeline, engine.reader, console)
        self._closed = False

    @property
    def store(self):
        return self.engine.store

    @property
    def store_name(self) -> str:
        return self.engine.store.name()

    @property
    def channel_size(self) -> int:
        return self.config.channel_size

    @property
    def bulk_size(self) -> int:
        return self.config.bulk_size

    @property
    def builder_size(self) -> int:
        return self.config.builder_size

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> bool:
        """Tear the session down.

        Returns:
            True if an open trace file was closed
        """
        if self._closed:
            return False
        self._closed = True
        logger.debug("Closing session %s", self.id)
        return self.tracing.stop()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
