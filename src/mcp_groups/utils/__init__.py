"""Utility modules for MCP Groups."""

from mcp_groups.utils.logging import get_logger, setup_logging
from mcp_groups.utils.config import Config, get_config, load_config

__all__ = [
    "get_logger",
    "setup_logging",
    "Config",
    "get_config",
    "load_config",
]
