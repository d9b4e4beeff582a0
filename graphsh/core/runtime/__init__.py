"""Runtime subsystem for graphsh.

This package manages runtime/operational concerns:
- config.py: Configuration management
"""

from graphsh.core.runtime.config import ConfigManager

__all__ = ["ConfigManager"]
