"""
arc42 CLI: Typer-based command-line interface.

Entry point: ``arc42`` (configured in pyproject.toml ``[project.scripts]``).
"""

from arc42.cli.app import app

__all__ = ["app"]
