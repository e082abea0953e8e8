"""
Pytest configuration and fixtures for MCP Groups testing.

Provides isolated configuration and ready-made group trees.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict

import pytest

from mcp_groups.core.entities import Group, Prompt, Resource, Tool
from mcp_groups.utils import config as config_module


class SampleTree:
    """The com.example.api tree with a few leaves attached."""

    def __init__(self):
        self.com = Group("com")
        self.example = Group("example")
        self.api = Group("api")
        self.com.add_child_group(self.example)
        self.example.add_child_group(self.api)

        self.list_tool = Tool("list")
        self.create_tool = Tool("create")
        self.api.add_child_tool(self.list_tool)
        self.api.add_child_tool(self.create_tool)

        self.help_prompt = Prompt("help")
        self.example.add_child_prompt(self.help_prompt)

        self.readme = Resource("readme")
        self.readme.uri = "file:///README.md"
        self.com.add_child_resource(self.readme)


@pytest.fixture
def sample_tree():
    """Provide the com.example.api sample tree."""
    return SampleTree()


@pytest.fixture
def temp_config_dir():
    """Provide a temporary configuration directory."""
    with tempfile.TemporaryDirectory(prefix="mcp_groups_test_") as temp_dir:
        yield Path(temp_dir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of user config files and environment."""
    for key in list(os.environ):
        if key.startswith("MCP_GROUPS_"):
            monkeypatch.delenv(key)
    manager = config_module._config_manager
    monkeypatch.setattr(manager, "DEFAULT_FILES", [])
    monkeypatch.setattr(manager, "_config", None)
    yield manager


@pytest.fixture
def groups_payload() -> Dict:
    """Wire payload describing two groups under one root."""
    return {
        "groups": [
            {
                "name": "api",
                "title": "API",
                "parent": {
                    "name": "example",
                    "parent": {"name": "com", "description": "Top level"},
                },
            },
            {
                "name": "docs",
                "parent": {
                    "name": "example",
                    "parent": {"name": "com"},
                },
                "_meta": {"owner": "docs-team"},
            },
        ]
    }


@pytest.fixture
def payload_file(temp_config_dir, groups_payload) -> Path:
    """Write the groups payload to a JSON file."""
    path = temp_config_dir / "groups.json"
    path.write_text(json.dumps(groups_payload), encoding="utf-8")
    return path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
