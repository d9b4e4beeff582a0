"""Configuration model."""

from typing import Optional

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """Console configuration.

    The size knobs are handed to the engine untouched:
    ``channel_size`` to the planner, ``bulk_size`` to export and load,
    ``builder_size`` to load.
    """

    engine: Optional[str] = None  # "module:factory" building the Engine
    channel_size: int = Field(default=0, ge=0)
    bulk_size: int = Field(default=1000, ge=0)
    builder_size: int = Field(default=1000, ge=0)

    prompt: str = "graph> "
    continuation_prompt: str = ""
    history: bool = True
    verbose: bool = False
