"""
Template operations: section templates and the workflow guide.

``generate_template`` is strict about the section and an explicit language
(an unknown one is a caller mistake worth reporting), but lenient about the
format: aliases are accepted and anything else falls back to the default
with a logged warning. When a workspace exists, omitted language and format
are taken from its ``config.yaml``.
"""

from __future__ import annotations

from typing import Any

from arc42.core.errors import Arc42Error, InvalidLanguageError
from arc42.core.sections import parse_section
from arc42.ops.context import ToolContext, resolve_workspace
from arc42.ops.result import OperationResult, start_timer


def _effective_format(ctx: ToolContext, format: str | None, configured: str | None) -> str:
    factory = ctx.provider.format_factory
    if format:
        code = factory.normalize_code(format)
        return code if factory.is_supported(code) else factory.get_default_code()
    return configured or factory.get_default_code()


def generate_template(
    ctx: ToolContext,
    section: str,
    *,
    language: str | None = None,
    format: str | None = None,
    target_folder: str | None = None,
) -> OperationResult[dict[str, Any]]:
    """Localized template text for one section, plus its localized title and description."""
    timer = start_timer()
    if not section:
        return OperationResult.fail("VALIDATION", "Section parameter is required", elapsed_ms=timer.elapsed_ms)

    provider = ctx.provider
    try:
        section_id = parse_section(section).value
        if language and not provider.is_supported(language):
            raise InvalidLanguageError(language, provider.language_factory.get_available_codes())
    except Arc42Error as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    root = resolve_workspace(ctx, target_folder).workspace_root
    if root.is_dir():
        template = provider.get_template_with_config_and_format(section_id, root, language, format)
        configured_language = provider.read_language_from_config(root)
        configured_format = provider.read_format_from_config(root)
    else:
        template = provider.get_template_for_format(section_id, language, format)
        configured_language = configured_format = None

    metadata = provider.get_section_metadata(section_id, language or configured_language)
    return OperationResult.ok(
        {
            "section": section_id,
            "metadata": metadata.to_dict(),
            "language": metadata.language_code,
            "format": _effective_format(ctx, format, configured_format),
            "template": template,
        },
        message=f"Template for {metadata.title} generated",
        next_steps=[
            "Review the template structure and guidance",
            "Create content based on the template",
            "Use update-section to save your content",
            "Check status with arc42-status",
        ],
        elapsed_ms=timer.elapsed_ms,
    )


def workflow_guide(
    ctx: ToolContext,
    *,
    language: str | None = None,
    format: str | None = None,
) -> OperationResult[dict[str, Any]]:
    """The localized workflow guide; unknown language or format falls back."""
    timer = start_timer()
    provider = ctx.provider
    guide = provider.get_workflow_guide_for_format(language, format)
    return OperationResult.ok(
        {
            "guide": guide,
            "workspace_root": str(ctx.workspace_root),
            "available_languages": [info.to_dict() for info in provider.get_available_languages()],
            "available_formats": provider.format_factory.get_available_codes(),
        },
        message="arc42 workflow guide loaded successfully",
        next_steps=[
            "Initialize arc42 documentation with: arc42-init",
            "Check current status with: arc42-status",
            "Generate section templates with: generate-template",
            "Update sections with: update-section",
        ],
        elapsed_ms=timer.elapsed_ms,
    )


__all__ = ["generate_template", "workflow_guide"]
