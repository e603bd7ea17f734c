"""
Root Typer application for the arc42 CLI.

The same operations the MCP server exposes, runnable from a shell: create
a workspace, check its progress, print templates and the workflow guide,
and read or write section files. ``arc42 serve`` starts the MCP server.
"""

from __future__ import annotations

import typer
from typer import Typer

from arc42.core.logging import bind_context, configure_logging
from arc42.core.settings import get_settings

app = Typer(
    name="arc42",
    help="arc42: architecture documentation templates in 11 languages.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

DIST_NAME = "arc42-mcp-server"


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version(DIST_NAME)
        except PackageNotFoundError:
            from arc42 import __version__ as v
        typer.echo(f"arc42 {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """arc42 CLI: initialize, inspect and fill arc42 documentation workspaces."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs, service="arc42-cli")
    bind_context(caller="cli")


# ── Sub-command registration ─────────────────────────────────────────────

from arc42.cli.sections import app as section_app  # noqa: E402
from arc42.cli.serve import serve  # noqa: E402
from arc42.cli.templates import formats, guide, languages, template  # noqa: E402
from arc42.cli.workspace import init, status  # noqa: E402

app.command("init")(init)
app.command("status")(status)
app.command("template")(template)
app.command("guide")(guide)
app.command("languages")(languages)
app.command("formats")(formats)
app.command("serve")(serve)
app.add_typer(section_app, name="section", help="Read and write section files.")


if __name__ == "__main__":
    app()
