"""Console command models.

A statement typed at the console is turned into exactly one of these
commands by ``graphsh.repl.command_parser.parse_command``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class StartTracing:
    """Start tracing to the console, or to ``path`` when one is given."""

    path: Optional[str] = None

    @property
    def to_console(self) -> bool:
        return self.path is None


@dataclass(frozen=True)
class StopTracing:
    pass


@dataclass(frozen=True)
class Export:
    """Argument vector handed to the exporter (program name first)."""

    args: Tuple[str, ...]


@dataclass(frozen=True)
class Load:
    """Argument vector handed to the loader (program name first)."""

    args: Tuple[str, ...]


@dataclass(frozen=True)
class Describe:
    query: str


@dataclass(frozen=True)
class RunFile:
    path: str


@dataclass(frozen=True)
class Query:
    query: str


Command = Union[Quit, Help, StartTracing, StopTracing, Export, Load, Describe, RunFile, Query]
