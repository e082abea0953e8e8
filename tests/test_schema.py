"""
Test wire schema validation for groups.
"""

import pytest

from mcp_groups.core.exceptions import ValidationError
from mcp_groups.core.schema import GroupSchema, validate_group_payload, validate_groups_payload


class TestGroupSchema:
    """Test the recursive group schema."""

    def test_minimal_group(self):
        """Test a name is enough."""
        schema = validate_group_payload({"name": "tools"})
        assert schema.name == "tools"
        assert schema.title is None
        assert schema.parent is None
        assert schema.meta is None

    def test_nested_parents(self):
        """Test parent groups validate recursively."""
        schema = validate_group_payload({
            "name": "c",
            "parent": {"name": "b", "parent": {"name": "a", "title": "Root"}},
        })
        assert isinstance(schema.parent, GroupSchema)
        assert schema.parent.parent.title == "Root"

    def test_meta_alias(self):
        """Test the _meta wire field."""
        schema = validate_group_payload({"name": "g", "_meta": {"k": 1}})
        assert schema.meta == {"k": 1}
        assert schema.to_payload() == {"name": "g", "_meta": {"k": 1}}

    def test_unknown_fields_allowed(self):
        """Test extra fields pass through."""
        schema = validate_group_payload({"name": "g", "icons": []})
        assert schema.model_dump()["icons"] == []

    def test_missing_name(self):
        """Test a group without a name is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_group_payload({"title": "No name"})
        assert exc_info.value.error_code == "INVALID_GROUP"
        assert exc_info.value.details["errors"][0]["loc"] == ["name"]

    def test_empty_name(self):
        """Test an empty name is rejected."""
        with pytest.raises(ValidationError):
            validate_group_payload({"name": ""})

    def test_invalid_parent(self):
        """Test errors inside a parent are reported."""
        with pytest.raises(ValidationError) as exc_info:
            validate_group_payload({"name": "c", "parent": {"title": "nameless"}})
        assert exc_info.value.details["errors"][0]["loc"] == ["parent", "name"]


class TestGroupsPayload:
    """Test validating several groups at once."""

    def test_list_payload(self):
        """Test a plain list."""
        groups = validate_groups_payload([{"name": "a"}, {"name": "b"}])
        assert [g.name for g in groups] == ["a", "b"]

    def test_object_payload(self, groups_payload):
        """Test an object with a groups list."""
        groups = validate_groups_payload(groups_payload)
        assert [g.name for g in groups] == ["api", "docs"]

    def test_not_a_list(self):
        """Test the payload shape is checked."""
        with pytest.raises(ValidationError) as exc_info:
            validate_groups_payload({"name": "a"})
        assert exc_info.value.error_code == "INVALID_GROUPS"

    def test_index_of_bad_group(self):
        """Test the failing index is reported."""
        with pytest.raises(ValidationError) as exc_info:
            validate_groups_payload([{"name": "a"}, {"name": ""}])
        assert exc_info.value.details["index"] == 1
