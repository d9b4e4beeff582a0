"""Scoped ownership of the query trace sink."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from graphsh.core.errors import FileIOError

logger = logging.getLogger(__name__)


class TraceTarget(str, Enum):
    """Where query traces go."""

    NONE = "none"
    CONSOLE = "console"
    FILE = "file"


class TracingManager:
    """Owns at most one trace sink for a console session.

    A console sink writes to a shared stream that is never closed. A file sink
    owns its handle; it is closed whenever tracing stops or switches target.
    Use as a context manager to guarantee release when the session ends.
    """

    def __init__(self, console_stream: Optional[TextIO] = None):
        self._console_stream = console_stream if console_stream is not None else sys.stdout
        self._writer: Optional[TextIO] = None
        self._target = TraceTarget.NONE
        self._path: Optional[str] = None

    @property
    def writer(self) -> Optional[TextIO]:
        """Writer handed to the planner, or None when tracing is off."""
        return self._writer

    @property
    def target(self) -> TraceTarget:
        return self._target

    @property
    def path(self) -> Optional[str]:
        """Trace file path when tracing to a file."""
        return self._path

    @property
    def active(self) -> bool:
        return self._target is not TraceTarget.NONE

    def stop(self) -> bool:
        """Stop tracing, closing the trace file if there is one.

        Safe to call when tracing is already off.

        Returns:
            True if a trace file was closed
        """
        writer, target, path = self._writer, self._target, self._path
        self._writer = None
        self._target = TraceTarget.NONE
        self._path = None
        if target is not TraceTarget.FILE or writer is None:
            return False
        try:
            writer.flush()
        finally:
            writer.close()
        logger.debug("Closed trace file %s", path)
        return True

    def start_console(self) -> None:
        """Trace to the shared console stream."""
        self.stop()
        self._writer = self._console_stream
        self._target = TraceTarget.CONSOLE

    def start_file(self, path: str) -> None:
        """Trace to ``path``, creating or truncating it.

        Raises:
            FileIOError: If the file cannot be created; tracing stays off
        """
        self.stop()
        try:
            handle = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise FileIOError(path, str(e)) from e
        self._writer = handle
        self._target = TraceTarget.FILE
        self._path = path
        logger.debug("Tracing to file %s", path)

    def __enter__(self) -> "TracingManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
