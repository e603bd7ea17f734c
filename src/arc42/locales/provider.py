"""
Localized template provider.

Manifesto:
    Tool handlers ask one question: "the template / guide / README for
    section S, in language L and format F". L and F are optional. When they
    are missing they come from the workspace ``config.yaml``, and failing
    that from the system defaults. Every operation here is total: bad
    language or format input degrades to a default with a warning and
    never aborts the request.

Architecture:
    ::

        caller ──► LocalizedTemplateProvider
                     │  language: explicit ▸ config.yaml ▸ EN
                     │  format:   explicit ▸ config.yaml ▸ asciidoc
                     ▼
                   LanguageFactory.create_with_fallback(language)
                     ▼
                   LanguageStrategy.get_template_for_format(section, format)
                     ▼
                   FormatTemplatePlugin (locale × format)

    The config file is re-read on every call. There is no cache, so edits
    between calls are observed immediately.

Tags:
    facade, i18n, configuration, fallback, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from arc42.core.project_config import load_config_mapping
from arc42.core.sections import Arc42Section
from arc42.formats import build_format_factory
from arc42.formats.factory import OutputFormatFactory
from arc42.formats.strategy import is_output_format_code
from arc42.locales.factory import LanguageFactory
from arc42.locales.strategy import LanguageInfo, LanguageStrategy


@dataclass(frozen=True, slots=True)
class LocalizedSectionMetadata:
    """Section title/description as produced by the resolved locale."""

    section: str
    title: str
    description: str
    language_code: str

    def to_dict(self) -> dict[str, str]:
        return {
            "section": self.section,
            "title": self.title,
            "description": self.description,
            "languageCode": self.language_code,
        }


class LocalizedTemplateProvider:
    """Facade resolving (section, language, format) to localized text."""

    def __init__(self, language_factory: LanguageFactory, format_factory: OutputFormatFactory | None = None):
        self._languages = language_factory
        self._formats = format_factory or build_format_factory()

    @property
    def language_factory(self) -> LanguageFactory:
        return self._languages

    @property
    def format_factory(self) -> OutputFormatFactory:
        return self._formats

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #

    def _resolve_language(self, language: str | None) -> LanguageStrategy:
        if language:
            return self._languages.create_with_fallback(language)
        return self._languages.get_default()

    def _resolve_format(self, format: str | None) -> str:
        """Canonical format code; aliases accepted, unknown input falls back with a warning."""
        if not format:
            return self._formats.get_default_code()
        return self._formats.create_with_fallback(format).code.value

    # ------------------------------------------------------------------ #
    # Content
    # ------------------------------------------------------------------ #

    def get_template_for_format(
        self,
        section: str | Arc42Section,
        language: str | None = None,
        format: str | None = None,
    ) -> str:
        strategy = self._resolve_language(language)
        return strategy.get_template_for_format(section, self._resolve_format(format))

    def get_template_with_config_and_format(
        self,
        section: str | Arc42Section,
        workspace_path: str | Path,
        language: str | None = None,
        format: str | None = None,
    ) -> str:
        """Like :meth:`get_template_for_format`, filling omitted values from ``config.yaml``."""
        effective_language = (
            language or self.read_language_from_config(workspace_path) or self._languages.get_default_code()
        )
        effective_format = format or self.read_format_from_config(workspace_path) or self._formats.get_default_code()
        return self.get_template_for_format(section, effective_language, effective_format)

    def get_section_metadata(
        self,
        section: str | Arc42Section,
        language: str | None = None,
    ) -> LocalizedSectionMetadata:
        """Title and description. ``language_code`` is the locale actually used."""
        strategy = self._resolve_language(language)
        return LocalizedSectionMetadata(
            section=str(section),
            title=strategy.get_section_title(section).title,
            description=strategy.get_section_description(section).description,
            language_code=strategy.code,
        )

    def get_workflow_guide_for_format(self, language: str | None = None, format: str | None = None) -> str:
        strategy = self._resolve_language(language)
        return strategy.get_workflow_guide_for_format(self._resolve_format(format))

    def get_readme_content_for_format(
        self,
        language: str | None = None,
        project_name: str | None = None,
        format: str | None = None,
    ) -> str:
        strategy = self._resolve_language(language)
        return strategy.get_readme_content_for_format(project_name, self._resolve_format(format))

    def get_available_languages(self) -> list[LanguageInfo]:
        return [self._languages.create(code).info for code in self._languages.get_available_codes()]

    def is_supported(self, language: str) -> bool:
        return self._languages.is_supported(language)

    # ------------------------------------------------------------------ #
    # Config file
    # ------------------------------------------------------------------ #

    def read_language_from_config(self, workspace_path: str | Path) -> str | None:
        """``language`` from ``config.yaml``, trimmed and uppercased. Not validated."""
        data = load_config_mapping(workspace_path)
        if data is None:
            return None
        value = data.get("language")
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip().upper()

    def read_format_from_config(self, workspace_path: str | Path) -> str | None:
        """``format`` from ``config.yaml``; only exact canonical codes are honoured."""
        data = load_config_mapping(workspace_path)
        if data is None:
            return None
        value = data.get("format")
        if not isinstance(value, str):
            return None
        value = value.strip().lower()
        return value if is_output_format_code(value) else None


__all__ = ["LocalizedSectionMetadata", "LocalizedTemplateProvider"]
