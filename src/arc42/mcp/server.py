"""arc42 MCP server.

Exposes the arc42 documentation tools over MCP. Shared state lives in
`arc42.mcp._app`; the tool functions in `arc42.mcp.tools.*`.

Tags: mcp, server, ai-tools, documentation, protocol
Doc-Types: API_REFERENCE, TECHNICAL_DESIGN
"""

from __future__ import annotations

import argparse

from arc42.mcp._app import (  # noqa: F401
    AppContext,
    _get_context,
    _get_version,
    lifespan,
    mcp,
    run_server,
    set_project_path,
)

# Import tools to trigger @mcp.tool() registration
from arc42.mcp.tools.sections import get_section, update_section  # noqa: F401
from arc42.mcp.tools.templates import arc42_workflow_guide, generate_template  # noqa: F401
from arc42.mcp.tools.workspace import arc42_init, arc42_status  # noqa: F401


def create_server():
    """Return the MCP server instance with every tool registered."""
    return mcp


def run(argv: list[str] | None = None) -> None:
    """Console-script entry point: ``arc42-mcp [--transport stdio|http] [--port N] [PROJECT]``."""
    parser = argparse.ArgumentParser(prog="arc42-mcp", description="arc42 documentation MCP server")
    parser.add_argument("project", nargs="?", help="Project directory (default: ARC42_PROJECT_PATH or cwd)")
    parser.add_argument("--transport", "-t", choices=["stdio", "http", "streamable-http"])
    parser.add_argument("--port", "-p", type=int)
    parser.add_argument("--host")
    args = parser.parse_args(argv)

    if args.project:
        set_project_path(args.project)
    run_server(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    run()
