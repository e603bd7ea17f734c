"""arc42 tool operations.

Plain functions taking a :class:`~arc42.ops.context.ToolContext` and
returning an :class:`~arc42.ops.result.OperationResult`. The MCP tools and
the CLI are thin adapters over these.
"""

from arc42.ops.context import ResolvedWorkspace, ToolContext, resolve_workspace
from arc42.ops.result import OperationError, OperationResult
from arc42.ops.sections import get_section, update_section
from arc42.ops.templates import generate_template, workflow_guide
from arc42.ops.workspace import init_workspace, workspace_status

__all__ = [
    "OperationError",
    "OperationResult",
    "ResolvedWorkspace",
    "ToolContext",
    "generate_template",
    "get_section",
    "init_workspace",
    "resolve_workspace",
    "update_section",
    "workflow_guide",
    "workspace_status",
]
