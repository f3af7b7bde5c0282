"""
Pydantic-based configuration system for Jump Bookmarks.

Settings come from an optional TOML or JSON file, with environment
variables applied on top.
"""

import json
import os
from pathlib import Path
from typing import Dict, Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

BOOKMARKS_PATH_ENV = "JUMP_BOOKMARKS_PATH"
CONFIG_PATH_ENV = "JUMP_CONFIG_PATH"
EDITOR_ENV = "EDITOR"


class JumpConfig(BaseModel):
    """Main configuration model."""

    bookmarks_file: Path = Field(
        default=Path("~/.jump.json"),
        validate_default=True,
        description="JSON file holding the alias -> path mapping",
    )
    editor: Optional[str] = Field(
        default=None,
        description="Command used by 'jump to' to open file bookmarks",
    )
    sort_aliases: bool = Field(
        default=False,
        description="List bookmarks alphabetically instead of in stored order",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Console log level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file receiving log output",
    )

    @field_validator("bookmarks_file", "log_file", mode="before")
    @classmethod
    def expand_user_path(cls, v):
        """Expand ``~`` in configured paths."""
        if isinstance(v, str) and not v.strip():
            return None
        if isinstance(v, (str, Path)):
            return Path(v).expanduser()
        return v

    @field_validator("editor", mode="before")
    @classmethod
    def blank_editor_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[JumpConfig] = None
        self.config_path: Optional[Path] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> list[Path]:
        """Get list of default configuration file paths to try."""
        xdg_home = os.getenv("XDG_CONFIG_HOME")
        config_root = Path(xdg_home) if xdg_home else Path.home() / ".config"
        return [
            config_root / "jump" / "config.toml",
            config_root / "jump" / "config.json",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict = {}

        if config_path is None and os.getenv(CONFIG_PATH_ENV):
            config_path = Path(os.environ[CONFIG_PATH_ENV])

        if config_path:
            config_path = Path(config_path).expanduser()
            config_data = self._load_config_file(config_path)
            self.config_path = config_path
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    self.config_path = path
                    break

        self._apply_env_overrides(config_data)

        try:
            self._config = JumpConfig(**config_data)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(
                2, "Configuration file not found", str(config_path)
            )

        try:
            if config_path.suffix.lower() == ".toml":
                data = toml.load(config_path)
            elif config_path.suffix.lower() == ".json":
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            else:
                raise ValueError(
                    f"Unsupported configuration file format: {config_path.suffix}"
                )
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise ValueError(f"Failed to load configuration from {config_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Failed to load configuration from {config_path}: "
                "top level must be a table/object"
            )
        return data

    def _apply_env_overrides(self, config_data: Dict) -> None:
        """Environment variables win over file settings."""
        bookmarks_path = os.getenv(BOOKMARKS_PATH_ENV)
        if bookmarks_path:
            config_data["bookmarks_file"] = bookmarks_path

        editor = os.getenv(EDITOR_ENV)
        if editor and editor.strip():
            config_data["editor"] = editor

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("verbose"):
            config_dict["log_level"] = "DEBUG"

        self._config = JumpConfig(**config_dict)

    @property
    def config(self) -> JumpConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config


def create_sample_config(output_path: Path, format: str = "toml") -> None:
    """Create a sample configuration file."""
    sample_config = {
        "bookmarks_file": "~/.jump.json",
        "editor": "vim",
        "sort_aliases": False,
        "log_level": "WARNING",
    }

    if format.lower() == "toml":
        with open(output_path, "w", encoding="utf-8") as f:
            toml.dump(sample_config, f)
    elif format.lower() == "json":
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(sample_config, f, indent=2)
    else:
        raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location,
                    error_detail["type"],
                    error_detail,
                    error_detail.get("input", "N/A"),
                )
            )

        header = "Configuration Validation Failed:\n"
        return header + "\n".join(error_messages)

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"
        return ".".join(str(part) for part in location)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""
        if error_type == "missing":
            return f"  {location}: Required field is missing"

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"  {location}: Must be one of {expected} (got: {input_value})"

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"  {location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            f"Configuration file not found: {error.filename}\n"
            f"Check the --config path or unset {CONFIG_PATH_ENV}."
        )

    else:
        return f"Configuration error: {error}"
