"""
CLI: ``arc42 section``, read and write section files.
"""

from __future__ import annotations

import sys

import typer

from arc42.cli.utils import make_context, output_result

app = typer.Typer(no_args_is_help=True)


@app.command("get")
def get(
    section: str = typer.Argument(..., help="Section id, e.g. 04_solution_strategy"),
    project: str | None = typer.Option(None, "--project", "-p", help="Project directory"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Print the content of a section file."""
    from arc42.ops.sections import get_section

    result = get_section(make_context(project), section)
    output_result(result, as_json=json_out, text_key="content")


@app.command("update")
def update(
    section: str = typer.Argument(..., help="Section id, e.g. 04_solution_strategy"),
    content: str | None = typer.Option(None, "--content", "-c", help="New content; read from stdin when omitted"),
    append: bool = typer.Option(False, "--append", help="Append instead of replacing"),
    project: str | None = typer.Option(None, "--project", "-p", help="Project directory"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Replace (or append to) the content of a section file."""
    from arc42.ops.sections import update_section

    if content is None:
        content = sys.stdin.read()
    result = update_section(
        make_context(project),
        section,
        content,
        mode="append" if append else "replace",
    )
    output_result(result, as_json=json_out, title="Section")
