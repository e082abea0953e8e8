"""
Error handling utilities for CLI commands.
"""

import functools
import sys

from rich.console import Console
from rich.markup import escape

from mcp_groups.core.exceptions import GroupsError
from mcp_groups.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


def handle_errors(func):
    """Decorator to handle common CLI errors."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except GroupsError as e:
            logger.debug(f"{func.__name__} failed", exc_info=True)
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            for err in e.details.get("errors", []):
                console.print(f"  [dim]- {escape(str(err))}[/dim]", highlight=False)
            sys.exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            sys.exit(130)

    return wrapper
