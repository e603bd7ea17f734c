"""
arc42 template reference information.

Records which release of the upstream arc42 template the bundled content is
based on. The values are written into every new workspace's ``config.yaml``
and reported by the status tool.

When ``ARC42_TEMPLATE_DIR`` points at a checkout of
https://github.com/arc42/arc42-template, the version and date are read from
its ``EN/version.properties`` instead of the bundled values.

Tags:
    arc42, reference, versioning

Doc-Types:
    api-reference
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from arc42.core.logging import get_logger

logger = get_logger(__name__)

SOURCE_REPO = "https://github.com/arc42/arc42-template"


@dataclass(frozen=True)
class Arc42Reference:
    """Upstream template release the content is derived from."""

    version: str
    date: str
    commit_sha: str
    source_repo: str = SOURCE_REPO
    checkout_available: bool = False
    notes: tuple[str, ...] = field(default_factory=tuple)


BUNDLED_REFERENCE = Arc42Reference(
    version="9.0-EN",
    date="July 2025",
    commit_sha="b29e08928644af7ae49f51d729d14313db0d934c",
    notes=(
        "Templates available in AsciiDoc and Markdown",
        "Section guidance text customized for AI-assisted documentation",
    ),
)


def parse_version_properties(content: str) -> dict[str, str]:
    """Parse a Java-style ``key=value`` properties file."""
    props: dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        props[key.strip()] = value.strip()
    return props


def load_reference(template_dir: Path | None = None) -> Arc42Reference:
    """Load the reference from a template checkout, else the bundled values."""
    if template_dir is None:
        env_dir = os.environ.get("ARC42_TEMPLATE_DIR")
        if not env_dir:
            return BUNDLED_REFERENCE
        template_dir = Path(env_dir)

    version_file = template_dir / "EN" / "version.properties"
    if not version_file.is_file():
        return BUNDLED_REFERENCE

    try:
        props = parse_version_properties(version_file.read_text(encoding="utf-8"))
    except OSError as e:
        logger.warning("arc42_reference_unreadable", path=str(version_file), error=str(e))
        return BUNDLED_REFERENCE

    version = props.get("revnumber", "")
    date = props.get("revdate", "")
    if not version or not date:
        logger.warning("arc42_reference_incomplete", path=str(version_file))
        return BUNDLED_REFERENCE

    return Arc42Reference(
        version=version,
        date=date,
        commit_sha=props.get("commit", "unknown"),
        checkout_available=True,
        notes=BUNDLED_REFERENCE.notes[:1],
    )


@lru_cache(maxsize=1)
def get_reference() -> Arc42Reference:
    """Process-wide reference, loaded once."""
    return load_reference()


def reference_string(ref: Arc42Reference | None = None) -> str:
    ref = ref or get_reference()
    return f"arc42 Template v{ref.version} ({ref.date})"


def reference_config(ref: Arc42Reference | None = None) -> dict[str, str]:
    """Keys recorded in a workspace's ``config.yaml``."""
    ref = ref or get_reference()
    return {
        "arc42_template_version": ref.version,
        "arc42_template_date": ref.date,
        "arc42_template_source": ref.source_repo,
        "arc42_template_commit": ref.commit_sha,
    }


__all__ = [
    "Arc42Reference",
    "BUNDLED_REFERENCE",
    "SOURCE_REPO",
    "get_reference",
    "load_reference",
    "parse_version_properties",
    "reference_config",
    "reference_string",
]
