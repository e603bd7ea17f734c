"""
Shared pytest fixtures for arc42 tests.

This module provides:
- Fresh format/language registries and a template provider per test
- A ToolContext rooted in a temporary project directory
- Settings cache and structlog cleanup for test isolation
"""

from pathlib import Path

import pytest
import structlog

from arc42.core.settings import clear_settings_cache
from arc42.formats import build_format_factory
from arc42.locales import build_default_provider
from arc42.ops.context import ToolContext


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch):
    """Drop cached settings and logging config between tests."""
    for var in ("ARC42_PROJECT_PATH", "ARC42_LOG_LEVEL", "ARC42_LOG_FORMAT", "ARC42_TEMPLATE_DIR"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    clear_settings_cache()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture()
def format_factory():
    return build_format_factory()


@pytest.fixture()
def provider():
    """A provider over freshly built registries (no shared globals)."""
    return build_default_provider()


@pytest.fixture()
def project_dir(tmp_path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture()
def tool_ctx(project_dir, provider) -> ToolContext:
    return ToolContext(
        project_path=project_dir,
        workspace_root=project_dir / "arc42-docs",
        provider=provider,
        caller="test",
    )


@pytest.fixture()
def write_config():
    """Write a raw ``config.yaml`` into a workspace directory."""

    def _write(workspace: Path, text: str) -> Path:
        workspace.mkdir(parents=True, exist_ok=True)
        path = workspace / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
