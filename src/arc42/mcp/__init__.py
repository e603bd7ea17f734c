"""arc42 MCP Server.

Model Context Protocol (MCP) server exposing arc42 documentation tools:
workflow guide, workspace init and status, section templates, and section
reads and writes.

Usage::

    # stdio mode (default)
    arc42-mcp /path/to/project

    # HTTP mode
    arc42-mcp --transport http --port 8142
"""

from arc42.mcp.server import create_server, mcp, run

__all__ = [
    "create_server",
    "mcp",
    "run",
]
