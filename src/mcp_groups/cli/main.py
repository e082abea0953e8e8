"""
Main CLI interface for MCP Groups.

Inspects and validates group payloads from the command line using Click
with Rich output.
"""

import json
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from mcp_groups import __version__
from mcp_groups.cli.helpers import (
    build_group_tree,
    handle_errors,
    show_extension_info,
    show_group_table,
)
from mcp_groups.core.converters import GroupSchemaConverter
from mcp_groups.core.exceptions import ValidationError
from mcp_groups.core.registry import GroupRegistry
from mcp_groups.core.schema import validate_groups_payload
from mcp_groups.utils.config import get_config
from mcp_groups.utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _load_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"{path} is not valid JSON: {e.msg} (line {e.lineno})",
            error_code="INVALID_JSON",
        ) from e
    except UnicodeDecodeError as e:
        raise ValidationError(
            f"{path} is not valid UTF-8: {e.reason} at byte {e.start}",
            error_code="INVALID_JSON",
        ) from e
    except RecursionError as e:
        raise ValidationError(
            f"{path} is nested too deeply to parse",
            error_code="INVALID_JSON",
        ) from e


@click.group(name="mcp-groups")
@click.version_option(version=__version__, prog_name="MCP Groups")
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, debug: bool, verbose: bool):
    """Inspect and validate MCP group hierarchies."""
    config = get_config()
    log_level = "DEBUG" if debug or config.debug else "INFO" if verbose else config.logging.console_level
    # Reconfigure on every invocation; one process may run several commands.
    setup_logging(config.logging, log_file=config.get_log_file(), console_level=log_level, force=True)
    ctx.ensure_object(dict)
    ctx.obj["separator"] = config.tree.default_separator


@cli.command()
def info():
    """Show the extension and capability identifiers."""
    show_extension_info()


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@handle_errors
def validate(ctx: click.Context, file: Path):
    """Validate a JSON file of wire groups."""
    groups = validate_groups_payload(_load_json(file))
    logger.info(f"Validated {len(groups)} group(s) from {file}")
    show_group_table(groups, ctx.obj["separator"])


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@handle_errors
def tree(ctx: click.Context, file: Path):
    """Print the group hierarchy described by a JSON file."""
    separator = ctx.obj["separator"]
    schemas = validate_groups_payload(_load_json(file))

    converter = GroupSchemaConverter(separator)
    registry = GroupRegistry(separator)
    for group in converter.to_internal_all(schemas):
        registry.add_root(group.get_root())

    console.print(build_group_tree(registry.roots))


def main():
    """Console script entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
