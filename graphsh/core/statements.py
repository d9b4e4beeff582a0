"""Reading statements from files."""

from __future__ import annotations

from typing import List

from graphsh.core.errors import FileIOError

COMMENT_PREFIX = "#"


def read_statements(path: str) -> List[str]:
    """Read the ``;``-terminated statements stored in a file.

    Blank lines and lines starting with ``#`` are skipped. A statement may span
    several lines; its trimmed lines are joined with a single space. Trailing
    text without a terminating ``;`` is dropped.

    Args:
        path: File to read

    Returns:
        Statements in file order, each ending with ``;``

    Raises:
        FileIOError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(path, str(e)) from e

    statements: List[str] = []
    buffer = ""
    for raw in raw_lines:
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        buffer = f"{buffer} {line}".strip()
        if buffer.endswith(";"):
            statements.append(buffer)
            buffer = ""
    return statements
