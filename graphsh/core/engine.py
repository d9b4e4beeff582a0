"""Contracts for the query engine the console drives.

The console never interprets queries itself. It hands statement text to a
parser, builds a plan with a planner, executes the plan against a store and
prints whatever comes back. An ``Engine`` bundles those collaborators and is
produced by a factory named in the configuration (``"module:factory"``).
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    List,
    Optional,
    Protocol,
    Sequence,
    TextIO,
    runtime_checkable,
)

from graphsh.core.errors import EngineLoadError
from graphsh.core.statements import read_statements

if TYPE_CHECKING:
    from graphsh.models.config import AppConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Store(Protocol):
    """Graph data backend addressed by queries."""

    def name(self) -> str: ...


class ResultTable(Protocol):
    """Result of executing a plan. ``str(table)`` renders it."""

    def bindings(self) -> Sequence[str]: ...


class Plan(Protocol):
    """Executable representation of a parsed statement."""

    def execute(self) -> ResultTable: ...

    def describe(self) -> str: ...


class Parser(Protocol):
    def parse(self, text: str) -> Any: ...


class Planner(Protocol):
    def build(
        self,
        store: Store,
        statement: Any,
        channel_size: int,
        trace_writer: Optional[TextIO],
    ) -> Plan: ...


class Exporter(Protocol):
    """Dumps graphs into a file. Reports its own errors."""

    def eval(self, usage: str, args: List[str], store: Store, bulk_size: int) -> None: ...


class Loader(Protocol):
    """Loads triples from a file into graphs. Reports its own errors."""

    def eval(
        self,
        usage: str,
        args: List[str],
        store: Store,
        bulk_size: int,
        builder_size: int,
    ) -> None: ...


StatementReader = Callable[[str], List[str]]


@dataclass
class Engine:
    """Collaborators used by a console session."""

    store: Store
    parser: Parser
    planner: Planner
    exporter: Optional[Exporter] = None
    loader: Optional[Loader] = None
    reader: StatementReader = read_statements


def load_engine(spec: str, config: "AppConfig") -> Engine:
    """Load an engine from a ``"module:factory"`` string.

    Args:
        spec: Dotted module path and factory name separated by a colon
        config: Application configuration handed to the factory

    Returns:
        The Engine built by the factory

    Raises:
        EngineLoadError: If the module or factory cannot be resolved, or the
            factory does not return an Engine
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise EngineLoadError(spec, "expected 'module:factory'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineLoadError(spec, str(e)) from e

    factory = getattr(module, attr, None)
    if factory is None or not callable(factory):
        raise EngineLoadError(spec, f"module {module_name!r} has no callable {attr!r}")

    engine = factory(config)
    if not isinstance(engine, Engine):
        raise EngineLoadError(spec, f"factory returned {type(engine).__name__}, not Engine")

    logger.debug("Loaded engine %s with store %s", spec, engine.store.name())
    return engine
