"""
Configuration package for Jump Bookmarks.
"""

from .configuration import Configuration
from .pydantic_config import (
    BOOKMARKS_PATH_ENV,
    CONFIG_PATH_ENV,
    EDITOR_ENV,
    ConfigurationManager,
    JumpConfig,
    create_sample_config,
)

__all__ = [
    "Configuration",
    "ConfigurationManager",
    "JumpConfig",
    "create_sample_config",
    "BOOKMARKS_PATH_ENV",
    "CONFIG_PATH_ENV",
    "EDITOR_ENV",
]
