"""
Locale content data.

The literal text of every locale lives in ``arc42/locales/data/<code>.yaml``
rather than in code. Each file is validated into a :class:`LocaleContent`
model on load. Adding a locale is a data change: a new YAML file plus a
manifest entry.

Content is format-neutral. A section is a list of :class:`ContentBlock`
items (heading, paragraph, purpose line, hint, list, table, code) that
:mod:`arc42.locales.renderer` turns into Markdown or AsciiDoc through the
format strategies.

Tags:
    i18n, content, pydantic, yaml, arc42

Doc-Types:
    api-reference, data-model
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from arc42.core.errors import Arc42Error, ErrorCategory
from arc42.core.sections import ARC42_SECTIONS

DATA_DIR = Path(__file__).resolve().parent / "data"


class ContentError(Arc42Error):
    """Locale data file missing or invalid."""

    default_category = ErrorCategory.PARSE


class TableData(BaseModel):
    model_config = ConfigDict(frozen=True)

    headers: list[str]
    rows: list[list[str]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _rows_match_headers(self) -> TableData:
        for row in self.rows:
            if len(row) != len(self.headers):
                raise ValueError(f"table row {row!r} has {len(row)} cells, expected {len(self.headers)}")
        return self


class CodeData(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    language: str | None = None


_BLOCK_KINDS = ("heading", "text", "purpose", "hint", "items", "steps", "table", "code")


class ContentBlock(BaseModel):
    """One format-neutral block. Exactly one kind field is set."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    heading: str | None = None
    level: int = 2
    text: str | None = None
    purpose: str | None = None
    hint: str | None = None
    items: list[str] | None = None
    steps: list[str] | None = None
    table: TableData | None = None
    code: CodeData | None = None

    @model_validator(mode="after")
    def _exactly_one_kind(self) -> ContentBlock:
        kinds = [k for k in _BLOCK_KINDS if getattr(self, k) is not None]
        if len(kinds) != 1:
            raise ValueError(f"a content block needs exactly one of {_BLOCK_KINDS}, got {kinds or 'none'}")
        return self

    @property
    def kind(self) -> str:
        return next(k for k in _BLOCK_KINDS if getattr(self, k) is not None)


class SectionContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    hint: str = Field(description="One-line summary used in the workflow guide")
    blocks: list[ContentBlock] = Field(min_length=1)


class GuideStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    text: str
    example: str


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    url: str


class Labels(BaseModel):
    """Short UI strings reused across templates."""

    model_config = ConfigDict(frozen=True)

    purpose: str
    code: str = "Code"
    language: str
    native_name: str


class WorkflowGuideContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    overview_heading: str
    overview: str
    languages_heading: str
    languages_intro: str
    getting_started_heading: str
    steps: list[GuideStep]
    sections_heading: str
    best_practices_heading: str
    best_practices: list[str]
    tools_heading: str
    tools: dict[str, str]
    resources_heading: str
    resources: list[Link]


class ReadmeContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_project_name: str
    title: str = Field(description="Format string with a {project_name} placeholder")
    intro: str
    structure_heading: str
    structure: dict[str, str] = Field(description="Path -> explanation. {ext} expands to the file extension")
    sections_heading: str
    getting_started_heading: str
    getting_started: list[str]
    resources_heading: str
    resources: list[Link]
    toc_heading: str
    about_heading: str
    about: str


class LocaleContent(BaseModel):
    """Complete content of one locale."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    native_name: str
    labels: Labels
    sections: dict[str, SectionContent]
    workflow_guide: WorkflowGuideContent
    readme: ReadmeContent

    @model_validator(mode="after")
    def _all_sections_present(self) -> LocaleContent:
        missing = [s for s in ARC42_SECTIONS if s not in self.sections]
        if missing:
            raise ValueError(f"locale {self.code} is missing sections: {', '.join(missing)}")
        unknown = [s for s in self.sections if s not in ARC42_SECTIONS]
        if unknown:
            raise ValueError(f"locale {self.code} has unknown sections: {', '.join(unknown)}")
        return self

    def section_title(self, section: str) -> str:
        return self.sections[section].title

    def section_description(self, section: str) -> str:
        return self.sections[section].description


def parse_locale_content(text: str, *, source: str = "<string>") -> LocaleContent:
    """Validate YAML text into a :class:`LocaleContent`."""
    try:
        data = yaml.safe_load(text)
        return LocaleContent.model_validate(data)
    except (yaml.YAMLError, ValueError) as e:
        raise ContentError(f"Invalid locale content in {source}: {e}", cause=e) from e


@lru_cache(maxsize=None)
def load_locale_content(code: str) -> LocaleContent:
    """Load the bundled content for *code* (e.g. ``"DE"``). Cached per code."""
    filename = f"{code.lower()}.yaml"
    try:
        text = (DATA_DIR / filename).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ContentError(f"No locale content bundled for {code}", cause=e) from e
    content = parse_locale_content(text, source=filename)
    if content.code != code:
        raise ContentError(f"{filename} declares code {content.code}, expected {code}")
    return content


__all__ = [
    "CodeData",
    "ContentBlock",
    "ContentError",
    "GuideStep",
    "Labels",
    "Link",
    "LocaleContent",
    "ReadmeContent",
    "SectionContent",
    "TableData",
    "WorkflowGuideContent",
    "load_locale_content",
    "parse_locale_content",
]
