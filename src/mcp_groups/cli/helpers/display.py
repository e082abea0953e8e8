"""
Display helper functions for CLI commands.
"""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mcp_groups.core.entities import Group
from mcp_groups.core.extension import (
    CLIENT_CAPABILITIES_ID,
    EXTENSION_ID,
    SERVER_CAPABILITIES_ID,
)
from mcp_groups.core.schema import GroupSchema

console = Console()


def show_extension_info() -> None:
    """Print the extension identifiers."""
    table = Table(title="Groups Extension")
    table.add_column("Identifier", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("extension", EXTENSION_ID)
    table.add_row("server capability", SERVER_CAPABILITIES_ID)
    table.add_row("client capability", CLIENT_CAPABILITIES_ID)

    console.print(table)


def _qualified_name(schema: GroupSchema, separator: str) -> str:
    names = []
    node = schema
    while node is not None:
        names.append(node.name)
        node = node.parent
    return separator.join(reversed(names))


def show_group_table(groups: Iterable[GroupSchema], separator: str = ".") -> None:
    """Print validated wire groups with their qualified names."""
    table = Table(title="Groups")
    table.add_column("Qualified name", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Description", style="dim")

    count = 0
    for schema in groups:
        table.add_row(
            escape(_qualified_name(schema, separator)),
            escape(schema.title or ""),
            escape(schema.description or ""),
        )
        count += 1

    console.print(table)
    console.print(f"[green]✓[/green] {count} group(s) valid")


def _label(group: Group) -> str:
    label = f"[bold cyan]{escape(group.name)}[/bold cyan]"
    if group.title:
        label += f" [dim]{escape(group.title)}[/dim]"
    return label


def build_group_tree(roots: Iterable[Group]) -> Tree:
    """Build a Rich tree of groups, tools, prompts and resources."""
    forest = Tree("[bold]groups[/bold]")

    def add(node: Tree, group: Group) -> None:
        branch = node.add(_label(group))
        for tool in group.child_tools:
            branch.add(f"[green]tool[/green] {escape(tool.name)}")
        for prompt in group.child_prompts:
            branch.add(f"[yellow]prompt[/yellow] {escape(prompt.name)}")
        for resource in group.child_resources:
            branch.add(f"[magenta]resource[/magenta] {escape(resource.name)}")
        for child in group.child_groups:
            add(branch, child)

    for root in roots:
        add(forest, root)
    return forest
