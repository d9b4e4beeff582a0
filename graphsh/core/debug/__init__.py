"""Per-session debug logging for graphsh."""

from graphsh.core.debug.session_debug_logger import (
    SessionDebugLogger,
    get_debug_logger,
    set_debug_logger,
)

__all__ = ["SessionDebugLogger", "get_debug_logger", "set_debug_logger"]
