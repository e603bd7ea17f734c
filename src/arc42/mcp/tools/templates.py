"""Template MCP tools: generate-template and arc42-workflow-guide."""

from __future__ import annotations

from typing import Any

from arc42.mcp import _app

mcp = _app.mcp


@mcp.tool(name="generate-template")
async def generate_template(
    section: str,
    language: str | None = None,
    format: str | None = None,
    target_folder: str | None = None,
) -> dict[str, Any]:
    """Generate a localized template for one arc42 section.

    When a workspace exists, omitted language and format come from its
    config.yaml.

    Args:
        section: Section identifier, e.g. "01_introduction_and_goals"
        language: Language code (EN, DE, FR, ...)
        format: "markdown" or "asciidoc" (aliases md/adoc accepted)
        target_folder: Absolute path of the project holding arc42-docs

    Returns:
        Result envelope with the template text and localized section metadata
    """
    from arc42.ops.templates import generate_template as _generate_template

    result = _generate_template(
        _app._get_context(),
        section,
        language=language,
        format=format,
        target_folder=target_folder,
    )
    return result.to_dict()


@mcp.tool(name="arc42-workflow-guide")
async def arc42_workflow_guide(language: str | None = None, format: str | None = None) -> dict[str, Any]:
    """Load the arc42 documentation workflow guide.

    Explains the 12 sections, the recommended order of work and the
    available tools. Call this first.

    Args:
        language: Language code for the guide (default EN)
        format: "markdown" or "asciidoc" (default asciidoc)

    Returns:
        Result envelope with the guide text, available languages and formats
    """
    from arc42.ops.templates import workflow_guide

    return workflow_guide(_app._get_context(), language=language, format=format).to_dict()
