"""
Section operations: read and write one section file of a workspace.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from arc42.core.errors import Arc42Error, StorageError
from arc42.core.logging import get_logger
from arc42.core.sections import parse_section
from arc42.locales.renderer import SECTIONS_DIRNAME
from arc42.ops.context import ToolContext, resolve_workspace
from arc42.ops.result import OperationResult, start_timer
from arc42.ops.workspace import NOT_INITIALIZED_MESSAGE, find_section_file, word_count, workspace_format

logger = get_logger(__name__)

UPDATE_MODES = ("replace", "append")


def _section_title(ctx: ToolContext, root: Path, section: str) -> str:
    language = ctx.provider.read_language_from_config(root)
    return ctx.provider.get_section_metadata(section, language).title


def get_section(
    ctx: ToolContext,
    section: str,
    *,
    target_folder: str | None = None,
) -> OperationResult[dict[str, Any]]:
    """Read a section file along with its size, word count and mtime."""
    timer = start_timer()
    if not section:
        return OperationResult.fail("VALIDATION", "Section parameter is required", elapsed_ms=timer.elapsed_ms)
    try:
        section_id = parse_section(section).value
    except Arc42Error as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    root = resolve_workspace(ctx, target_folder).workspace_root
    if not root.exists():
        return OperationResult.fail("NOT_INITIALIZED", NOT_INITIALIZED_MESSAGE, elapsed_ms=timer.elapsed_ms)

    format_code = workspace_format(ctx, root)
    path = find_section_file(ctx, root, section_id, format_code)
    if path is None:
        expected = ctx.provider.format_factory.create(format_code).get_section_filename(section_id)
        return OperationResult.fail(
            "NOT_FOUND",
            f"Section file not found: {expected}. This section might not have been created yet.",
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        content = path.read_text(encoding="utf-8")
        stat = path.stat()
    except (OSError, UnicodeDecodeError) as exc:
        logger.exception("section_read_failed", path=str(path), error=str(exc))
        err = StorageError(f"Failed to retrieve section: {exc}", cause=exc).with_context(path=str(path))
        return OperationResult.from_error(err, elapsed_ms=timer.elapsed_ms)

    title = _section_title(ctx, root, section_id)
    return OperationResult.ok(
        {
            "section": section_id,
            "section_title": title,
            "content": content,
            "metadata": {
                "path": str(path),
                "last_modified": datetime.fromtimestamp(stat.st_mtime, tz=UTC).isoformat(),
                "word_count": word_count(content),
                "size": stat.st_size,
            },
        },
        message=f"Section {title} retrieved successfully",
        next_steps=[
            "Use update-section to modify this content",
            "Check status with arc42-status",
            "Generate a template for this section with generate-template",
        ],
        elapsed_ms=timer.elapsed_ms,
    )


def update_section(
    ctx: ToolContext,
    section: str,
    content: str,
    *,
    mode: str = "replace",
    target_folder: str | None = None,
) -> OperationResult[dict[str, Any]]:
    """Replace a section file, or append to it separated by a blank line.

    New files are written in the workspace's format. An existing file keeps
    whatever extension it already has.
    """
    timer = start_timer()
    if not section or not content:
        return OperationResult.fail("VALIDATION", "Section and content are required", elapsed_ms=timer.elapsed_ms)
    mode = (mode or "replace").strip().lower()
    if mode not in UPDATE_MODES:
        return OperationResult.fail(
            "VALIDATION",
            f'Invalid mode: "{mode}". Use "replace" or "append".',
            details={"code": mode, "available": list(UPDATE_MODES)},
            elapsed_ms=timer.elapsed_ms,
        )
    try:
        section_id = parse_section(section).value
    except Arc42Error as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    root = resolve_workspace(ctx, target_folder).workspace_root
    if not root.exists():
        return OperationResult.fail("NOT_INITIALIZED", NOT_INITIALIZED_MESSAGE, elapsed_ms=timer.elapsed_ms)

    format_code = workspace_format(ctx, root)
    path = find_section_file(ctx, root, section_id, format_code)
    if path is None:
        path = root / SECTIONS_DIRNAME / ctx.provider.format_factory.create(format_code).get_section_filename(section_id)

    try:
        final = content
        if mode == "append" and path.is_file():
            final = path.read_text(encoding="utf-8") + "\n\n" + content
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(final, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.exception("section_write_failed", path=str(path), error=str(exc))
        err = StorageError(f"Failed to update section: {exc}", cause=exc).with_context(path=str(path))
        return OperationResult.from_error(err, elapsed_ms=timer.elapsed_ms)

    logger.info("section_updated", section=section_id, mode=mode, path=str(path))
    title = _section_title(ctx, root, section_id)
    return OperationResult.ok(
        {
            "section": section_id,
            "section_title": title,
            "path": str(path),
            "word_count": word_count(final),
            "mode": mode,
        },
        message=f"Section {title} updated successfully",
        next_steps=[
            "Check progress with: arc42-status",
            "Continue with next section if needed",
            "Review the updated content",
        ],
        elapsed_ms=timer.elapsed_ms,
    )


__all__ = ["UPDATE_MODES", "get_section", "update_section"]
