"""Command-line interface for MCP Groups."""
