"""Workspace MCP tools: arc42-init and arc42-status."""

from __future__ import annotations

from typing import Any

from arc42.mcp import _app

mcp = _app.mcp


@mcp.tool(name="arc42-init")
async def arc42_init(
    project_name: str,
    language: str | None = None,
    format: str | None = None,
    force: bool = False,
    target_folder: str | None = None,
) -> dict[str, Any]:
    """Initialize an arc42 documentation workspace for a project.

    Creates arc42-docs/ with config.yaml, a README, the main document and
    templates for all 12 sections. Use once at the start of documenting.

    Args:
        project_name: Name of the project being documented
        language: Language code (EN, DE, FR, ES, IT, NL, PT, RU, CZ, UKR, ZH). Default EN
        format: Output format, "markdown" or "asciidoc" (aliases md/adoc accepted). Default asciidoc
        force: Re-initialize even if the workspace exists
        target_folder: Absolute path of the project; arc42-docs is created inside it.
            Defaults to the project the server was started for.

    Returns:
        Result envelope with the workspace path and the written config
    """
    from arc42.ops.workspace import init_workspace

    result = init_workspace(
        _app._get_context(),
        project_name,
        language=language,
        format=format,
        force=force,
        target_folder=target_folder,
    )
    return result.to_dict()


@mcp.tool(name="arc42-status")
async def arc42_status(target_folder: str | None = None) -> dict[str, Any]:
    """Show the documentation status of the arc42 workspace.

    Reports per-section existence, word count and completeness, overall
    completeness, the workspace language and format, and the arc42 template
    version the workspace is based on.

    Args:
        target_folder: Absolute path of the project holding arc42-docs

    Returns:
        Result envelope with the status report
    """
    from arc42.ops.workspace import workspace_status

    return workspace_status(_app._get_context(), target_folder=target_folder).to_dict()
