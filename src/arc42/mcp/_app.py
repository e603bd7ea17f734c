"""Shared MCP application state: server instance, tool context, run helper.

Tags: mcp, server, internal
Doc-Types: TECHNICAL_DESIGN
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from arc42.core.logging import bind_context, clear_context, configure_logging, get_logger
from arc42.core.settings import get_settings
from arc42.locales import build_default_provider
from arc42.ops.context import ToolContext

logger = get_logger("arc42.mcp")

SERVER_NAME = "arc42-mcp-server"


@dataclass
class AppContext:
    """Lifespan state handed to FastMCP."""

    tool_context: ToolContext


_context: ToolContext | None = None


def _build_context(project_path: str | Path | None = None) -> ToolContext:
    settings = get_settings()
    if project_path is not None:
        settings = settings.model_copy(update={"project_path": Path(project_path)})
    return ToolContext.from_settings(settings, build_default_provider(), caller="mcp")


def _get_context() -> ToolContext:
    """The process-wide tool context, built on first use."""
    global _context
    if _context is None:
        _context = _build_context()
    return _context


def set_project_path(project_path: str | Path) -> ToolContext:
    """Point the server at another project (``arc42 serve --project``)."""
    global _context
    _context = _build_context(project_path)
    return _context


def reset_context() -> None:
    global _context
    _context = None


def _get_version() -> str:
    from arc42 import __version__

    return __version__


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """MCP server lifespan: build registries once, before the first call."""
    ctx = _get_context()
    bind_context(caller=ctx.caller, project=str(ctx.project_path))
    logger.info(
        "mcp_server_started",
        project=str(ctx.project_path),
        workspace=str(ctx.workspace_root),
        languages=ctx.provider.language_factory.get_available_codes(),
    )
    try:
        yield AppContext(tool_context=ctx)
    finally:
        logger.info("mcp_server_stopped")
        clear_context()


mcp = FastMCP(
    SERVER_NAME,
    instructions="""
arc42 architecture documentation server.

Capabilities:
- Explain the arc42 workflow (arc42-workflow-guide)
- Create a documentation workspace in one of 11 languages,
  as Markdown or AsciiDoc (arc42-init)
- Report per-section progress (arc42-status)
- Produce localized section templates (generate-template)
- Read and write section content (get-section, update-section)

Start with arc42-workflow-guide, then arc42-init.
""",
    lifespan=lifespan,
)


def run_server(
    *,
    transport: str | None = None,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Configure logging and run the server over stdio or streamable HTTP."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs, service=SERVER_NAME)

    transport = (transport or settings.default_transport).lower()
    if transport in ("http", "streamable-http"):
        mcp.settings.host = host or settings.mcp_host
        mcp.settings.port = port or settings.mcp_port
        logger.info("mcp_transport", transport="streamable-http", host=mcp.settings.host, port=mcp.settings.port)
        mcp.run(transport="streamable-http")
    else:
        logger.info("mcp_transport", transport="stdio")
        mcp.run(transport="stdio")
