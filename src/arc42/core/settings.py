"""
Process settings for the arc42 server.

Manifesto:
    One validated, cached settings object instead of ad-hoc ``os.environ``
    lookups scattered through the CLI and server. Values come from
    ``ARC42_*`` environment variables or a ``.env`` file; CLI flags override
    them per invocation.

Note that these are *process* settings. A documentation project's own
language and format live in its workspace ``config.yaml`` (see
:mod:`arc42.core.project_config`).

Tags:
    configuration, settings, pydantic, caching, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

WORKSPACE_DIRNAME = "arc42-docs"


class Arc42Settings(BaseSettings):
    """arc42 server configuration.

    All fields can be set via ``ARC42_*`` environment variables (e.g.
    ``ARC42_PROJECT_PATH=/work/my-app``) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARC42_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Workspace ────────────────────────────────────────────────
    project_path: Path = Field(default_factory=Path.cwd, description="Project the docs belong to")
    workspace_dirname: str = Field(default=WORKSPACE_DIRNAME)

    # ── MCP transport ────────────────────────────────────────────
    default_transport: str = Field(default="stdio", description="stdio or http")
    mcp_host: str = Field(default="127.0.0.1")
    mcp_port: int = Field(default=8142)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="auto", description="json, console, or auto")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("default_transport")
    @classmethod
    def _check_transport(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("stdio", "http", "streamable-http"):
            raise ValueError(f"Unsupported transport: {value}")
        return value

    @property
    def workspace_root(self) -> Path:
        return self.project_path / self.workspace_dirname

    @property
    def json_logs(self) -> bool | None:
        """``None`` lets the logger auto-detect from the terminal."""
        if self.log_format == "json":
            return True
        if self.log_format == "console":
            return False
        return None


_settings_cache: dict[str, Arc42Settings] = {}


def get_settings(*, _force_reload: bool = False) -> Arc42Settings:
    """Load, validate, and cache an :class:`Arc42Settings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = Arc42Settings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "Arc42Settings",
    "WORKSPACE_DIRNAME",
    "clear_settings_cache",
    "get_settings",
]
