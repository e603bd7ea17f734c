"""
Workspace operations: create a documentation workspace, report its status.

A workspace is the ``arc42-docs`` directory inside a project::

    arc42-docs/
      config.yaml
      README.<ext>
      arc42-documentation.<ext>
      sections/NN_name.<ext>   (12 files)
      images/

The helpers at the bottom locate section files. A workspace is written in
one format, but files are looked up under every known extension so a
workspace whose ``config.yaml`` was edited (or lost) still reads.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from arc42.core.errors import Arc42Error, InvalidFormatError, InvalidLanguageError, StorageError
from arc42.core.logging import get_logger
from arc42.core.project_config import ProjectConfig, read_project_name, write_project_config
from arc42.core.reference import get_reference, reference_config, reference_string
from arc42.core.sections import ARC42_SECTIONS
from arc42.formats import detect_format_from_filename
from arc42.locales.content import load_locale_content
from arc42.locales.renderer import SECTIONS_DIRNAME, LocaleRenderer
from arc42.ops.context import ToolContext, resolve_workspace
from arc42.ops.result import OperationResult, start_timer

logger = get_logger(__name__)

IMAGES_DIRNAME = "images"
NOT_INITIALIZED_MESSAGE = "arc42 workspace not initialized. Run arc42-init first."
CONTENT_THRESHOLD = 50


def word_count(text: str) -> int:
    return len(text.split())


def completeness(words: int) -> int:
    """Percentage heuristic: one point per word, capped at 100."""
    return min(100, words)


# ------------------------------------------------------------------ #
# Init
# ------------------------------------------------------------------ #


def _validate_language(ctx: ToolContext, language: str | None) -> str:
    factory = ctx.provider.language_factory
    if not language or not language.strip():
        return factory.get_default_code()
    code = factory.normalize_code(language)
    if not factory.is_supported(code):
        raise InvalidLanguageError(language, factory.get_available_codes())
    return code


def _validate_format(ctx: ToolContext, format: str | None) -> str:
    factory = ctx.provider.format_factory
    if not format or not format.strip():
        return factory.get_default_code()
    code = factory.normalize_code(format)
    if not factory.is_supported(code):
        raise InvalidFormatError(format, factory.get_available_codes())
    return code


def init_workspace(
    ctx: ToolContext,
    project_name: str,
    *,
    language: str | None = None,
    format: str | None = None,
    force: bool = False,
    target_folder: str | None = None,
) -> OperationResult[dict[str, Any]]:
    """Create the workspace tree with localized templates in the chosen format.

    Language and format are validated strictly here: a typo must not
    silently produce a workspace in the wrong language.
    """
    timer = start_timer()

    if not project_name or not project_name.strip():
        return OperationResult.fail("VALIDATION", "Project name is required", elapsed_ms=timer.elapsed_ms)
    project_name = project_name.strip()

    try:
        language_code = _validate_language(ctx, language)
        format_code = _validate_format(ctx, format)
    except Arc42Error as exc:
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)

    ws = resolve_workspace(ctx, target_folder)
    root = ws.workspace_root
    if root.exists() and not force:
        return OperationResult.fail(
            "ALREADY_EXISTS",
            f"Workspace already exists at {root}. Use force=true to re-initialize.",
            elapsed_ms=timer.elapsed_ms,
        )

    provider = ctx.provider
    fmt = provider.format_factory.create(format_code)
    try:
        sections_dir = root / SECTIONS_DIRNAME
        sections_dir.mkdir(parents=True, exist_ok=True)
        (root / IMAGES_DIRNAME).mkdir(exist_ok=True)

        config = ProjectConfig(
            project_name=project_name,
            format=format_code,
            language=language_code,
            **reference_config(),
        )
        write_project_config(root, config)

        (root / fmt.get_readme_filename()).write_text(
            provider.get_readme_content_for_format(language_code, project_name, format_code),
            encoding="utf-8",
        )
        renderer = LocaleRenderer(load_locale_content(language_code), fmt)
        (root / renderer.main_document_filename()).write_text(
            renderer.render_main_document(project_name), encoding="utf-8"
        )

        if force:
            _remove_stale_sections(sections_dir, keep_suffix=fmt.file_extension)
        for section in ARC42_SECTIONS:
            (sections_dir / fmt.get_section_filename(section)).write_text(
                provider.get_template_for_format(section, language_code, format_code),
                encoding="utf-8",
            )
    except OSError as exc:
        logger.exception("workspace_init_failed", workspace=str(root), error=str(exc))
        err = StorageError(f"Failed to initialize workspace: {exc}", cause=exc).with_context(path=str(root))
        return OperationResult.from_error(err, elapsed_ms=timer.elapsed_ms)

    logger.info("workspace_initialized", workspace=str(root), language=language_code, format=format_code)
    return OperationResult.ok(
        {
            "workspace_root": str(root),
            "project_name": project_name,
            "language": language_code,
            "format": format_code,
            "sections_created": len(ARC42_SECTIONS),
            "config": config.model_dump(by_alias=True, exclude_none=True),
        },
        message=f"arc42 workspace initialized successfully for project: {project_name}",
        next_steps=[
            "Check workspace status with: arc42-status",
            "Generate section templates with: generate-template",
            "Start with Section 1: Introduction and Goals",
            "Read the workflow guide again if needed: arc42-workflow-guide",
        ],
        elapsed_ms=timer.elapsed_ms,
    )


def _remove_stale_sections(sections_dir: Path, *, keep_suffix: str) -> None:
    """On re-init in another format, drop section files of the old one."""
    for path in sorted(sections_dir.iterdir()):
        if path.stem in ARC42_SECTIONS and path.suffix != keep_suffix and detect_format_from_filename(path.name):
            path.unlink()


# ------------------------------------------------------------------ #
# Status
# ------------------------------------------------------------------ #


def workspace_status(ctx: ToolContext, *, target_folder: str | None = None) -> OperationResult[dict[str, Any]]:
    """Per-section fill level plus the workspace's language and format."""
    timer = start_timer()
    ws = resolve_workspace(ctx, target_folder)
    root = ws.workspace_root
    if not root.exists():
        return OperationResult.fail("NOT_INITIALIZED", NOT_INITIALIZED_MESSAGE, elapsed_ms=timer.elapsed_ms)

    provider = ctx.provider
    configured_language = provider.read_language_from_config(root)
    language = provider.language_factory.create_with_fallback(configured_language) if configured_language else None
    language_code = language.code if language else provider.language_factory.get_default_code()
    warnings = []
    if configured_language and configured_language != language_code:
        warnings.append(f"Unknown language {configured_language} in config.yaml, using {language_code}")
    format_code = workspace_format(ctx, root)

    try:
        sections: dict[str, Any] = {}
        total = 0
        with_content = 0
        latest: datetime | None = None
        for section in ARC42_SECTIONS:
            meta = provider.get_section_metadata(section, language_code)
            path = find_section_file(ctx, root, section, format_code)
            if path is None:
                sections[section] = {"exists": False, "completeness": 0, "title": meta.title}
                continue
            stat = path.stat()
            words = word_count(path.read_text(encoding="utf-8"))
            score = completeness(words)
            modified = datetime.fromtimestamp(stat.st_mtime, tz=UTC)
            sections[section] = {
                "exists": True,
                "path": str(path),
                "last_modified": modified.isoformat(),
                "word_count": words,
                "completeness": score,
                "title": meta.title,
                "description": meta.description,
            }
            total += score
            if score > CONTENT_THRESHOLD:
                with_content += 1
            if latest is None or modified > latest:
                latest = modified
    except (OSError, UnicodeDecodeError) as exc:
        logger.exception("workspace_status_failed", workspace=str(root), error=str(exc))
        err = StorageError(f"Failed to check status: {exc}", cause=exc).with_context(path=str(root))
        return OperationResult.from_error(err, elapsed_ms=timer.elapsed_ms)

    ref = get_reference()
    return OperationResult.ok(
        {
            "project_path": str(ws.project_path),
            "workspace_root": str(root),
            "project_name": read_project_name(root),
            "initialized": True,
            "language": language_code,
            "format": format_code,
            "available_languages": [info.to_dict() for info in provider.get_available_languages()],
            "arc42_template_reference": {
                "version": ref.version,
                "date": ref.date,
                "source": ref.source_repo,
                "label": reference_string(ref),
            },
            "sections": sections,
            "overall_completeness": total // len(ARC42_SECTIONS),
            "last_modified": latest.isoformat() if latest else None,
        },
        message=f"Documentation status: {with_content}/{len(ARC42_SECTIONS)} sections have content",
        next_steps=[
            "Use generate-template to get section templates",
            "Use update-section to add content",
            "Focus on sections with low completeness",
        ],
        warnings=warnings,
        elapsed_ms=timer.elapsed_ms,
    )


# ------------------------------------------------------------------ #
# Section file helpers
# ------------------------------------------------------------------ #


def workspace_format(ctx: ToolContext, root: Path) -> str:
    """Format from ``config.yaml``, else the one existing section files use, else the default."""
    configured = ctx.provider.read_format_from_config(root)
    if configured:
        return configured
    sections_dir = root / SECTIONS_DIRNAME
    if sections_dir.is_dir():
        for path in sorted(sections_dir.iterdir()):
            detected = detect_format_from_filename(path.name)
            if detected and path.stem in ARC42_SECTIONS:
                return detected.value
    return ctx.provider.format_factory.get_default_code()


def find_section_file(ctx: ToolContext, root: Path, section: str, format_code: str) -> Path | None:
    """Existing file for *section*, preferring the workspace format's extension."""
    factory = ctx.provider.format_factory
    preferred = factory.create(format_code)
    candidates = [preferred] + [factory.create(code) for code in factory.get_available_codes() if code != format_code]
    for fmt in candidates:
        path = root / SECTIONS_DIRNAME / fmt.get_section_filename(section)
        if path.is_file():
            return path
    return None


__all__ = [
    "CONTENT_THRESHOLD",
    "NOT_INITIALIZED_MESSAGE",
    "completeness",
    "find_section_file",
    "init_workspace",
    "word_count",
    "workspace_format",
    "workspace_status",
]
