"""Data models for graphsh."""

from graphsh.models.command import (
    Command,
    Describe,
    Export,
    Help,
    Load,
    Query,
    Quit,
    RunFile,
    StartTracing,
    StopTracing,
)
from graphsh.models.config import AppConfig

__all__ = [
    "AppConfig",
    "Command",
    "Describe",
    "Export",
    "Help",
    "Load",
    "Query",
    "Quit",
    "RunFile",
    "StartTracing",
    "StopTracing",
]
