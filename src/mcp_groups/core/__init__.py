"""Core MCP Groups functionality."""

from mcp_groups.core.exceptions import (
    ConfigError,
    CycleDetectedError,
    GroupsError,
    InvalidArgumentError,
    ValidationError,
)
from mcp_groups.core.models import Annotations, Icon, Role, ToolAnnotations
from mcp_groups.core.entities import (
    Group,
    Leaf,
    NamedEntity,
    Prompt,
    PromptArgument,
    Resource,
    Tool,
)
from mcp_groups.core.schema import GroupSchema, validate_group_payload, validate_groups_payload
from mcp_groups.core.converters import Converter, GroupSchemaConverter, convert_all
from mcp_groups.core.registry import GroupRegistry

__all__ = [
    "GroupsError",
    "InvalidArgumentError",
    "CycleDetectedError",
    "ValidationError",
    "ConfigError",
    "Role",
    "Icon",
    "Annotations",
    "ToolAnnotations",
    "NamedEntity",
    "PromptArgument",
    "Leaf",
    "Tool",
    "Prompt",
    "Resource",
    "Group",
    "GroupSchema",
    "validate_group_payload",
    "validate_groups_payload",
    "Converter",
    "GroupSchemaConverter",
    "convert_all",
    "GroupRegistry",
]
