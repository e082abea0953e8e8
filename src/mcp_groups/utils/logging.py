"""
Logging setup for MCP Groups.

Modules log through standard library loggers obtained with ``get_logger``.
The CLI applies a ``LoggingConfig`` once per invocation: Rich or plain
console output, plus an optional rotating log file in text or JSON.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from mcp_groups.utils.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_TEXT_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

# Attributes every LogRecord has; anything else came in through ``extra=``.
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


def _level(value: str) -> int:
    return logging.getLevelName(value.upper())


class GroupsLogger:
    """Applies a LoggingConfig to the root logger."""

    def __init__(self):
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def _formatter(self, settings: "LoggingConfig", text_format: str) -> logging.Formatter:
        if settings.format_type == "json":
            return JSONFormatter()
        return logging.Formatter(text_format)

    def _console_handler(self, settings: "LoggingConfig") -> logging.Handler:
        if settings.enable_rich:
            return RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                markup=False,
                show_path=False,
            )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(settings, TEXT_FORMAT))
        return handler

    def _file_handler(self, settings: "LoggingConfig", log_file: Path) -> logging.Handler:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._formatter(settings, FILE_TEXT_FORMAT))
        return handler

    def setup_logging(
        self,
        settings: "LoggingConfig",
        log_file: Optional[Path] = None,
        console_level: Optional[str] = None,
        force: bool = False,
    ) -> None:
        """
        Configure the root logger.

        Args:
            settings: Logging section of the configuration
            log_file: Resolved log file path, or None for console only
            console_level: Overrides ``settings.console_level`` (e.g. from --debug)
            force: Reconfigure even if logging was already set up
        """
        if self._configured and not force:
            return

        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

        if not settings.enabled:
            root_logger.setLevel(logging.CRITICAL)
            self._configured = True
            return

        file_level = _level(settings.level)
        console = _level(console_level or settings.console_level)

        console_handler = self._console_handler(settings)
        console_handler.setLevel(console)
        root_logger.addHandler(console_handler)

        if log_file:
            file_handler = self._file_handler(settings, log_file)
            file_handler.setLevel(file_level)
            root_logger.addHandler(file_handler)
            root_logger.setLevel(min(file_level, console))
        else:
            root_logger.setLevel(console)

        self._configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)


# Global logging manager
_logger_manager = GroupsLogger()

setup_logging = _logger_manager.setup_logging
