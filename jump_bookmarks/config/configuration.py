"""
Configuration management for Jump Bookmarks.

This module wraps the Pydantic-based loader with a small accessor class
used by the command-line layer.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jump_bookmarks.utils.error_handler import ConfigurationError

from .pydantic_config import ConfigurationManager, JumpConfig, format_config_error


class Configuration:
    """
    Resolved settings for one process run.

    Construction reads the config file and environment once; the values do
    not change afterwards except through ``update_from_args``.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        try:
            self._manager = ConfigurationManager(config_path)
        except FileNotFoundError as e:
            raise ConfigurationError(format_config_error(e)) from e
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self._config = self._manager.config

    @property
    def config(self) -> JumpConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    @property
    def config_path(self) -> Optional[Path]:
        """The configuration file that was loaded, if any."""
        return self._manager.config_path

    @property
    def bookmarks_file(self) -> Path:
        return self._config.bookmarks_file

    @property
    def editor(self) -> Optional[str]:
        return self._config.editor

    @property
    def sort_aliases(self) -> bool:
        return self._config.sort_aliases

    @property
    def log_level(self) -> str:
        return self._config.log_level

    @property
    def log_file(self) -> Optional[Path]:
        return self._config.log_file

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of parsed arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config
