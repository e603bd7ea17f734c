"""Section MCP tools: get-section and update-section."""

from __future__ import annotations

from typing import Any

from arc42.mcp import _app

mcp = _app.mcp


@mcp.tool(name="get-section")
async def get_section(section: str, target_folder: str | None = None) -> dict[str, Any]:
    """Read the content of one arc42 section.

    Args:
        section: Section identifier, e.g. "01_introduction_and_goals"
        target_folder: Absolute path of the project holding arc42-docs

    Returns:
        Result envelope with the content, path, word count, size and mtime
    """
    from arc42.ops.sections import get_section as _get_section

    return _get_section(_app._get_context(), section, target_folder=target_folder).to_dict()


@mcp.tool(name="update-section")
async def update_section(
    section: str,
    content: str,
    mode: str = "replace",
    target_folder: str | None = None,
) -> dict[str, Any]:
    """Write content into one arc42 section.

    Args:
        section: Section identifier, e.g. "04_solution_strategy"
        content: Text to write, in the workspace's format (Markdown or AsciiDoc)
        mode: "replace" (default) overwrites the file, "append" adds to it
        target_folder: Absolute path of the project holding arc42-docs

    Returns:
        Result envelope with the file path and resulting word count
    """
    from arc42.ops.sections import update_section as _update_section

    result = _update_section(_app._get_context(), section, content, mode=mode, target_folder=target_folder)
    return result.to_dict()
