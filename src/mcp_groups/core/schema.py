"""
Wire schema for groups.

Validates incoming group payloads before they are mapped into the
internal model. A group refers to its parent group, so the schema is
self-referential and resolved after the class is defined.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from mcp_groups.core.exceptions import ValidationError
from mcp_groups.utils.logging import get_logger

logger = get_logger(__name__)


class GroupSchema(BaseModel):
    """Wire representation of a group."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(description="Group name")
    title: Optional[str] = Field(default=None, description="Human readable title")
    description: Optional[str] = Field(default=None, description="Group description")
    parent: Optional["GroupSchema"] = Field(default=None, description="Parent group")
    meta: Optional[Dict[str, Any]] = Field(default=None, alias="_meta", description="Open metadata")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate group name."""
        if not v:
            raise ValueError("Group name cannot be empty")
        return v

    def to_payload(self) -> Dict[str, Any]:
        """Dump to a wire dictionary, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Enable forward references for the recursive parent field
GroupSchema.model_rebuild()


def _errors_of(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


def validate_group_payload(payload: Any) -> GroupSchema:
    """
    Validate a single group payload.

    Args:
        payload: Decoded wire data for one group

    Returns:
        Validated GroupSchema

    Raises:
        ValidationError: If the payload does not match the schema
    """
    try:
        return GroupSchema.model_validate(payload)
    except PydanticValidationError as e:
        logger.debug(f"Rejected group payload: {e}")
        raise ValidationError(
            f"Invalid group payload: {e.error_count()} error(s)",
            error_code="INVALID_GROUP",
            details={"errors": _errors_of(e)},
        ) from e


def validate_groups_payload(payload: Any) -> List[GroupSchema]:
    """
    Validate a list of group payloads.

    Accepts either a list of groups or an object with a ``groups`` list.

    Raises:
        ValidationError: If the payload or any group in it is invalid
    """
    if isinstance(payload, dict) and "groups" in payload:
        payload = payload["groups"]
    if not isinstance(payload, list):
        raise ValidationError(
            "Groups payload must be a list or an object with a 'groups' list",
            error_code="INVALID_GROUPS",
        )

    groups = []
    for index, item in enumerate(payload):
        try:
            groups.append(validate_group_payload(item))
        except ValidationError as e:
            e.details["index"] = index
            raise
    return groups
