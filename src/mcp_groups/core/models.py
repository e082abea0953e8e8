"""
Value records for MCP Groups.

Defines Pydantic models for the plain attribute bags attached to named
entities: icons, resource annotations and tool behavior hints.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """Audience role for annotated content."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"


class WireModel(BaseModel):
    """Base for records that use camelCase names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class Icon(WireModel):
    """Icon definition."""

    src: Optional[str] = Field(default=None, description="Icon source URI")
    mime_type: Optional[str] = Field(default=None, description="Icon MIME type")
    sizes: Optional[List[str]] = Field(default=None, description="Available sizes, e.g. '48x48'")
    theme: Optional[str] = Field(default=None, description="Theme the icon targets")


class Annotations(WireModel):
    """Annotations attached to a resource."""

    audience: Optional[List[Role]] = Field(default=None, description="Intended audience")
    priority: Optional[float] = Field(default=None, description="Relative importance")
    last_modified: Optional[str] = Field(default=None, description="ISO-8601 timestamp")


class ToolAnnotations(WireModel):
    """Behavior hints describing a tool."""

    title: Optional[str] = Field(default=None, description="Human readable title")
    read_only_hint: Optional[bool] = Field(default=None, description="Tool does not modify state")
    destructive_hint: Optional[bool] = Field(default=None, description="Tool may destroy data")
    idempotent_hint: Optional[bool] = Field(default=None, description="Repeated calls have no extra effect")
    open_world_hint: Optional[bool] = Field(default=None, description="Tool talks to external entities")
    return_direct: Optional[bool] = Field(default=None, description="Result goes straight to the user")
