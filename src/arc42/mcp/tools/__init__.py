"""MCP tools package. Importing each module registers its tools."""

from arc42.mcp.tools import (  # noqa: F401
    sections,
    templates,
    workspace,
)
