"""
CLI: ``arc42 serve``, start the MCP server.
"""

from __future__ import annotations

import typer

from arc42.cli.utils import err_console


def serve(
    transport: str | None = typer.Option(None, "--transport", "-t", help="stdio or http"),
    host: str | None = typer.Option(None, "--host", help="Bind address (http)"),
    port: int | None = typer.Option(None, "--port", help="Bind port (http)"),
    project: str | None = typer.Option(None, "--project", "-p", help="Project directory"),
) -> None:
    """Start the arc42 MCP server."""
    from arc42.mcp.server import run_server, set_project_path

    if project:
        set_project_path(project)
    # stdout carries the protocol in stdio mode
    err_console.print(f"[bold green]Starting arc42 MCP server[/bold green] ({transport or 'default transport'})")
    run_server(transport=transport, host=host, port=port)
