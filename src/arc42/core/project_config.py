"""
Workspace ``config.yaml`` access.

A documentation workspace carries a small flat YAML file recording the
project name, the chosen language and output format, and the arc42 template
release it was created from.

Reading is deliberately forgiving: :func:`load_config_mapping` returns
``None`` for an absent file, unreadable file, YAML syntax error, or a
document that is not a mapping. Callers treat every field they cannot use
as "not set". A corrupt project file must never abort a template request.

Tags:
    configuration, yaml, workspace, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from arc42.core.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "config.yaml"


def config_path(workspace_path: str | Path) -> Path:
    return Path(workspace_path) / CONFIG_FILENAME


def load_config_mapping(workspace_path: str | Path) -> dict[str, Any] | None:
    """Read ``config.yaml`` fresh from disk. Any failure yields ``None``."""
    path = config_path(workspace_path)
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.debug("project_config_unreadable", path=str(path), error=str(e))
        return None
    if not isinstance(data, dict):
        return None
    return data


class ProjectConfig(BaseModel):
    """Contents of a workspace ``config.yaml``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    project_name: str = Field(alias="projectName")
    version: str = "1.0.0"
    created: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    format: str = "asciidoc"
    language: str = "EN"
    arc42_template_version: str | None = None
    arc42_template_date: str | None = None
    arc42_template_source: str | None = None
    arc42_template_commit: str | None = None

    def to_yaml(self) -> str:
        """Render with the comment header new workspaces are created with."""
        body = yaml.safe_dump(
            self.model_dump(by_alias=True, exclude_none=True),
            sort_keys=False,
            allow_unicode=True,
        )
        return "# arc42 Documentation Configuration\n" + body


def write_project_config(workspace_path: str | Path, config: ProjectConfig) -> Path:
    path = config_path(workspace_path)
    path.write_text(config.to_yaml(), encoding="utf-8")
    return path


def read_project_name(workspace_path: str | Path) -> str | None:
    data = load_config_mapping(workspace_path)
    if data is None:
        return None
    name = data.get("projectName")
    return name if isinstance(name, str) and name.strip() else None


__all__ = [
    "CONFIG_FILENAME",
    "ProjectConfig",
    "config_path",
    "load_config_mapping",
    "read_project_name",
    "write_project_config",
]
