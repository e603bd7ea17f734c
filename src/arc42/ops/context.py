"""
Request-scoped context for tool operations.

Every operation function receives a :class:`ToolContext` as its first
argument. The context carries the default project/workspace the server was
started for, and the template provider built once at startup. A tool call
may redirect to another project with ``target_folder``; see
:func:`resolve_workspace`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from arc42.core.settings import WORKSPACE_DIRNAME, Arc42Settings
from arc42.locales.provider import LocalizedTemplateProvider


@dataclass
class ToolContext:
    """Context passed to every operation function.

    Attributes:
        project_path: Project the documentation belongs to.
        workspace_root: ``<project_path>/arc42-docs`` unless configured otherwise.
        provider: Template provider shared by all calls.
        caller: Origin of the request, ``"mcp"`` or ``"cli"``.
    """

    project_path: Path
    workspace_root: Path
    provider: LocalizedTemplateProvider
    workspace_dirname: str = WORKSPACE_DIRNAME
    caller: str = "mcp"

    @classmethod
    def from_settings(
        cls,
        settings: Arc42Settings,
        provider: LocalizedTemplateProvider,
        *,
        caller: str = "mcp",
    ) -> ToolContext:
        project = settings.project_path.expanduser().resolve()
        return cls(
            project_path=project,
            workspace_root=project / settings.workspace_dirname,
            provider=provider,
            workspace_dirname=settings.workspace_dirname,
            caller=caller,
        )


@dataclass(frozen=True, slots=True)
class ResolvedWorkspace:
    project_path: Path
    workspace_root: Path


def resolve_workspace(ctx: ToolContext, target_folder: str | Path | None = None) -> ResolvedWorkspace:
    """``target_folder`` wins over the context default; docs live in its ``arc42-docs``."""
    if target_folder:
        project = Path(target_folder).expanduser()
        return ResolvedWorkspace(project_path=project, workspace_root=project / ctx.workspace_dirname)
    return ResolvedWorkspace(project_path=ctx.project_path, workspace_root=ctx.workspace_root)


__all__ = ["ResolvedWorkspace", "ToolContext", "resolve_workspace"]
