"""
CLI: templates, the workflow guide, and the supported languages and formats.
"""

from __future__ import annotations

import typer

from arc42.cli.utils import make_context, output_result, print_json, print_table


def template(
    section: str = typer.Argument(..., help="Section id, e.g. 01_introduction_and_goals"),
    language: str | None = typer.Option(None, "--language", "-l"),
    format: str | None = typer.Option(None, "--format", "-f"),
    project: str | None = typer.Option(None, "--project", "-p", help="Project directory"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Print the localized template for one section."""
    from arc42.ops.templates import generate_template

    ctx = make_context(project)
    result = generate_template(ctx, section, language=language, format=format)
    output_result(result, as_json=json_out, text_key="template")


def guide(
    language: str | None = typer.Option(None, "--language", "-l"),
    format: str | None = typer.Option(None, "--format", "-f"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Print the arc42 workflow guide."""
    from arc42.ops.templates import workflow_guide

    result = workflow_guide(make_context(), language=language, format=format)
    output_result(result, as_json=json_out, text_key="guide")


def languages(json_out: bool = typer.Option(False, "--json")) -> None:
    """List the supported documentation languages."""
    ctx = make_context()
    rows = [info.to_dict() for info in ctx.provider.get_available_languages()]
    if json_out:
        print_json(rows)
        return
    print_table(rows, title="Languages")


def formats(json_out: bool = typer.Option(False, "--json")) -> None:
    """List the supported output formats."""
    factory = make_context().provider.format_factory
    default = factory.get_default_code()
    rows = []
    for code in factory.get_available_codes():
        fmt = factory.create(code)
        rows.append(
            {
                "code": code,
                "name": fmt.name,
                "extension": fmt.file_extension,
                "default": code == default,
            }
        )
    if json_out:
        print_json(rows)
        return
    print_table(rows, title="Formats")
