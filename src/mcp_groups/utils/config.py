"""
Configuration management for MCP Groups.

Provides hierarchical configuration loading with validation using Pydantic.
TOML files are merged in order, then environment variables and keyword
overrides are applied.
"""

import os
from pathlib import Path
from typing import Any, List, Optional, Union

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from mcp_groups.core.exceptions import ConfigError
from mcp_groups.utils.logging import get_logger

logger = get_logger(__name__)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    enabled: bool = Field(default=True, description="Enable logging completely")
    level: str = Field(default="INFO", description="File logging level")
    console_level: str = Field(default="WARNING", description="Console logging level")
    format_type: str = Field(default="text", description="Log format (text/json)")
    file: Optional[str] = Field(default=None, description="Log file path")
    enable_rich: bool = Field(default=True, description="Enable Rich console output")
    max_bytes: int = Field(default=10 * 1024 * 1024, description="Max log file size")
    backup_count: int = Field(default=5, description="Number of backup files")

    @field_validator("level", "console_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("format_type")
    @classmethod
    def validate_format_type(cls, v: str) -> str:
        """Validate format type."""
        if v not in ["text", "json"]:
            raise ValueError(f"Invalid format type: {v}")
        return v


class TreeConfig(BaseModel):
    """Group tree configuration."""

    default_separator: str = Field(
        default=".",
        description="Separator used to split group paths",
    )

    @field_validator("default_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate separator."""
        if not v:
            raise ValueError("Separator cannot be empty")
        return v


class Config(BaseSettings):
    """Main configuration class."""

    model_config = SettingsConfigDict(
        env_prefix="MCP_GROUPS_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    config_dir: str = Field(
        default="~/.config/mcp-groups",
        description="Configuration directory",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tree: TreeConfig = Field(default_factory=TreeConfig)

    def get_config_dir(self) -> Path:
        """Get configuration directory path."""
        return Path(os.path.expanduser(self.config_dir))

    def get_log_file(self) -> Optional[Path]:
        """Get log file path."""
        if self.logging.file:
            log_path = Path(os.path.expanduser(self.logging.file))
            if not log_path.is_absolute():
                log_path = self.get_config_dir() / log_path
            return log_path
        return None


class ConfigManager:
    """Configuration manager with hierarchical loading."""

    DEFAULT_FILES = [
        "/etc/mcp-groups/config.toml",
        "~/.config/mcp-groups/config.toml",
        "./.mcp-groups.toml",
    ]

    def __init__(self):
        self._config: Optional[Config] = None

    def load_config(
        self,
        config_files: Optional[List[Union[str, Path]]] = None,
        **overrides: Any,
    ) -> Config:
        """
        Load configuration from multiple sources.

        Args:
            config_files: List of configuration files to load
            **overrides: Configuration overrides

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the merged configuration is invalid
        """
        if self._config is not None:
            return self._config

        if config_files is None:
            config_files = self.DEFAULT_FILES

        config_data = {}

        for config_file in config_files:
            file_path = Path(os.path.expanduser(str(config_file)))
            if file_path.exists():
                try:
                    file_data = toml.load(file_path)
                    config_data.update(file_data)
                    logger.debug(f"Loaded configuration from {file_path}")
                except (OSError, toml.TomlDecodeError) as e:
                    logger.warning(f"Failed to load config from {file_path}: {e}")

        config_data.update(overrides)

        try:
            self._config = Config(**config_data)
        except PydanticValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e.error_count()} error(s)",
                error_code="INVALID_CONFIG",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e

        return self._config

    def get_config(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def reload_config(self, **overrides: Any) -> Config:
        """Reload configuration."""
        self._config = None
        return self.load_config(**overrides)


# Global configuration manager
_config_manager = ConfigManager()

# Convenience functions
load_config = _config_manager.load_config
get_config = _config_manager.get_config
reload_config = _config_manager.reload_config
