"""
MCP Groups - hierarchical grouping of MCP tools, prompts and resources.

Organizes protocol entities into named, nested groups and converts the
resulting trees to and from their wire representation.
"""

__version__ = "0.1.0"
__description__ = "Hierarchical groups for MCP tools, prompts and resources"

# Public API
from mcp_groups.core.converters import Converter, GroupSchemaConverter, convert_all
from mcp_groups.core.entities import Group, Prompt, PromptArgument, Resource, Tool
from mcp_groups.core.exceptions import CycleDetectedError, GroupsError, InvalidArgumentError
from mcp_groups.core.extension import (
    CLIENT_CAPABILITIES_ID,
    EXTENSION_ID,
    SERVER_CAPABILITIES_ID,
)
from mcp_groups.core.models import Annotations, Icon, Role, ToolAnnotations

__all__ = [
    "__version__",
    "__description__",
    "GroupsError",
    "InvalidArgumentError",
    "CycleDetectedError",
    "Group",
    "Tool",
    "Prompt",
    "PromptArgument",
    "Resource",
    "Icon",
    "Annotations",
    "ToolAnnotations",
    "Role",
    "Converter",
    "GroupSchemaConverter",
    "convert_all",
    "EXTENSION_ID",
    "SERVER_CAPABILITIES_ID",
    "CLIENT_CAPABILITIES_ID",
]
