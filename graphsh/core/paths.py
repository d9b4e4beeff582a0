"""Centralized path management for graphsh.

This module provides a single source of truth for all path-related constants
and helper functions.

Example:
    from graphsh.core.paths import get_paths

    paths = get_paths()
    settings_file = paths.global_settings

    # Or with a specific working directory
    paths = get_paths(working_dir=Path.cwd())
    project_settings = paths.project_settings
"""

from __future__ import annotations

import os
from functools import cached_property
from pathlib import Path
from typing import Optional

# ============================================================================
# Constants
# ============================================================================

# Directory and file names
APP_DIR_NAME = ".graphsh"
LOGS_DIR_NAME = "logs"
SETTINGS_FILE_NAME = "settings.json"
HISTORY_FILE_NAME = "history.txt"

# Environment variable names for overrides
ENV_GRAPHSH_DIR = "GRAPHSH_DIR"
ENV_GRAPHSH_LOG_DIR = "GRAPHSH_LOG_DIR"


# ============================================================================
# Paths Class
# ============================================================================


class Paths:
    """Centralized path management.

    Provides access to all application paths with support for:
    - Global paths (~/.graphsh/...)
    - Project paths (<working_dir>/.graphsh/...)
    - Environment variable overrides

    Usage:
        paths = Paths()  # Uses Path.home() for global, Path.cwd() for project
        paths = Paths(working_dir=some_path)  # Specific project directory
    """

    def __init__(self, working_dir: Optional[Path] = None):
        """Initialize paths manager.

        Args:
            working_dir: Working directory for project-level paths.
                        Defaults to current working directory.
        """
        self._working_dir = working_dir or Path.cwd()

    @property
    def working_dir(self) -> Path:
        """Get the working directory."""
        return self._working_dir

    # ========================================================================
    # Global Paths (User-level, in ~/.graphsh/)
    # ========================================================================

    @cached_property
    def global_dir(self) -> Path:
        """Get the global graphsh directory.

        Can be overridden with GRAPHSH_DIR environment variable.
        Default: ~/.graphsh/
        """
        env_override = os.environ.get(ENV_GRAPHSH_DIR)
        if env_override:
            return Path(env_override)
        return Path.home() / APP_DIR_NAME

    @cached_property
    def global_settings(self) -> Path:
        """Get global settings file path.

        Default: ~/.graphsh/settings.json
        """
        return self.global_dir / SETTINGS_FILE_NAME

    @cached_property
    def global_logs_dir(self) -> Path:
        """Get global logs directory.

        Can be overridden with GRAPHSH_LOG_DIR environment variable.
        Default: ~/.graphsh/logs/
        """
        env_override = os.environ.get(ENV_GRAPHSH_LOG_DIR)
        if env_override:
            return Path(env_override)
        return self.global_dir / LOGS_DIR_NAME

    @cached_property
    def global_history_file(self) -> Path:
        """Get global console history file path.

        Default: ~/.graphsh/history.txt
        """
        return self.global_dir / HISTORY_FILE_NAME

    # ========================================================================
    # Project Paths (Project-level, in <working_dir>/.graphsh/)
    # ========================================================================

    @cached_property
    def project_dir(self) -> Path:
        """Get project-level graphsh directory.

        Default: <working_dir>/.graphsh/
        """
        return self._working_dir / APP_DIR_NAME

    @cached_property
    def project_settings(self) -> Path:
        """Get project settings file path.

        Default: <working_dir>/.graphsh/settings.json
        """
        return self.project_dir / SETTINGS_FILE_NAME


# ============================================================================
# Singleton Access
# ============================================================================

_paths: Optional[Paths] = None


def get_paths(working_dir: Optional[Path] = None) -> Paths:
    """Get the global Paths instance.

    Creates a singleton instance on first call. If working_dir is provided,
    creates a new instance with that working directory.

    Args:
        working_dir: Optional working directory. If provided, creates a new
                    Paths instance with this directory (not cached as singleton).

    Returns:
        Paths instance
    """
    global _paths

    if working_dir is not None:
        return Paths(working_dir)

    if _paths is None:
        _paths = Paths()

    return _paths


def set_paths(paths: Optional[Paths]) -> None:
    """Set the global Paths instance.

    Useful for testing or when needing to reset the singleton.

    Args:
        paths: Paths instance to set as global, or None to reset
    """
    global _paths
    _paths = paths


def reset_paths() -> None:
    """Reset the global Paths instance.

    Forces recreation on next get_paths() call.
    """
    global _paths
    _paths = None
