"""Interactive console for graphsh."""

from graphsh.repl.line_accumulator import LineAccumulator, PromptLineSource, StreamLineSource
from graphsh.repl.repl import REPL
from graphsh.repl.session import Session

__all__ = ["LineAccumulator", "PromptLineSource", "REPL", "Session", "StreamLineSource"]
