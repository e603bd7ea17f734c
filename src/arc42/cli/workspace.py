"""
CLI: ``arc42 init`` and ``arc42 status``.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from arc42.cli.utils import console, make_context, output_result, print_footer, print_table


def init(
    project_name: str = typer.Argument(..., help="Name of the documented project"),
    language: str | None = typer.Option(None, "--language", "-l", help="Language code (EN, DE, FR, ...)"),
    format: str | None = typer.Option(None, "--format", "-f", help="markdown or asciidoc"),
    force: bool = typer.Option(False, "--force", help="Re-initialize an existing workspace"),
    project: str | None = typer.Option(None, "--project", "-p", help="Project directory"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Create an arc42-docs workspace with templates for all 12 sections."""
    from arc42.ops.workspace import init_workspace

    ctx = make_context(project)
    result = init_workspace(ctx, project_name, language=language, format=format, force=force)
    output_result(result, as_json=json_out, title="Workspace")


def status(
    project: str | None = typer.Option(None, "--project", "-p", help="Project directory"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show per-section progress of the workspace."""
    from arc42.ops.workspace import workspace_status

    ctx = make_context(project)
    result = workspace_status(ctx)
    if json_out or not result.success:
        output_result(result, as_json=json_out)
        return

    data = result.data
    console.print(f"[bold]{escape(str(data['project_name'] or data['project_path']))}[/bold]")
    console.print(
        f"  language: {data['language']}  format: {data['format']}  "
        f"overall: {data['overall_completeness']}%",
        highlight=False,
    )
    rows = [
        {
            "section": section,
            "title": info["title"],
            "words": info.get("word_count", "-"),
            "complete": f"{info['completeness']}%",
        }
        for section, info in data["sections"].items()
    ]
    print_table(rows, title=data["arc42_template_reference"]["label"])
    print_footer(result)
