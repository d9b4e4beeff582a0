"""Event log of one console session, written under ``--verbose``.

Every statement the console sees leaves a trail of JSON lines in
``~/.graphsh/logs/<session_id>.debug``::

    {"ts": "...", "elapsed_ms": 12, "session": "1a2b3c4d", "event": "statement", "data": {"text": "help;"}}

The events, in the order a session produces them, are ``session_start``,
then per statement ``statement`` followed by ``command_done`` or
``command_rejected``, and finally ``session_end``.
"""

import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

_MAX_TEXT_LEN = 200


def _clip(text: str, limit: int = _MAX_TEXT_LEN) -> str:
    """Shorten long statements so a pasted script does not bloat the log."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"


class SessionDebugLogger:
    """Appends console events to ``<log_dir>/<session_id>.debug``."""

    def __init__(self, log_dir: Path, session_id: str):
        self.session_id = session_id
        self.file_path: Optional[Path] = Path(log_dir) / f"{session_id}.debug"
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self._started = time.monotonic()

    @property
    def enabled(self) -> bool:
        return self.file_path is not None

    def session_start(self, driver: str) -> None:
        self._write("session_start", driver=driver)

    def statement(self, text: str) -> None:
        self._write("statement", text=_clip(text))

    def command_done(self, command: str, success: bool, elapsed: Optional[float]) -> None:
        """Record the outcome of a dispatched command.

        Args:
            command: Command type name, e.g. ``Query`` or ``RunFile``
            success: Whether the handler reported success
            elapsed: Seconds spent, for commands that are timed
        """
        self._write("command_done", command=command, success=success, elapsed=elapsed)

    def command_rejected(self, error: str) -> None:
        self._write("command_rejected", error=_clip(error))

    def session_end(self) -> None:
        self._write("session_end")

    def _write(self, event: str, **data: Any) -> None:
        if self.file_path is None:
            return
        entry = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "elapsed_ms": int((time.monotonic() - self._started) * 1000),
            "session": self.session_id,
            "event": event,
            "data": data,
        }
        with open(self.file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")


class _DisabledLogger(SessionDebugLogger):
    """Stand-in used when ``--verbose`` is off; records nothing."""

    def __init__(self):
        self.session_id = ""
        self.file_path = None
        self._started = 0.0


_DISABLED = _DisabledLogger()
_current_logger: Optional[SessionDebugLogger] = None


def get_debug_logger() -> SessionDebugLogger:
    """Return the logger of the running session, or a disabled one."""
    return _current_logger if _current_logger is not None else _DISABLED


def set_debug_logger(logger: Optional[SessionDebugLogger]) -> None:
    global _current_logger
    _current_logger = logger
