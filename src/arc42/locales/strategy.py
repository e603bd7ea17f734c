"""
Language strategy contract.

A :class:`LanguageStrategy` answers everything locale-specific: localized
section titles and descriptions, and rendered template, workflow guide and
README text for each output format. Rendering is delegated to one
:class:`~arc42.locales.plugins.FormatTemplatePlugin` per format; the strategy
itself only selects the plugin.

Tags:
    strategy-pattern, i18n, locales, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from arc42.core.sections import Arc42Section

if TYPE_CHECKING:
    from arc42.locales.plugins import FormatTemplatePlugin


class LanguageCode(str, Enum):
    """Supported locales. Canonical form is uppercase."""

    EN = "EN"
    DE = "DE"
    CZ = "CZ"
    ES = "ES"
    FR = "FR"
    IT = "IT"
    NL = "NL"
    PT = "PT"
    RU = "RU"
    UKR = "UKR"
    ZH = "ZH"

    def __str__(self) -> str:
        return self.value


SUPPORTED_LANGUAGE_CODES: tuple[str, ...] = tuple(c.value for c in LanguageCode)

DEFAULT_LANGUAGE = LanguageCode.EN


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Display information for a locale."""

    code: str
    name: str
    native_name: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name, "nativeName": self.native_name}


# Static display names, used where no registry is at hand (workflow guides).
LANGUAGE_INFO: dict[str, LanguageInfo] = {
    info.code: info
    for info in (
        LanguageInfo("EN", "English", "English"),
        LanguageInfo("DE", "German", "Deutsch"),
        LanguageInfo("CZ", "Czech", "Čeština"),
        LanguageInfo("ES", "Spanish", "Español"),
        LanguageInfo("FR", "French", "Français"),
        LanguageInfo("IT", "Italian", "Italiano"),
        LanguageInfo("NL", "Dutch", "Nederlands"),
        LanguageInfo("PT", "Portuguese", "Português"),
        LanguageInfo("RU", "Russian", "Русский"),
        LanguageInfo("UKR", "Ukrainian", "Українська"),
        LanguageInfo("ZH", "Chinese", "中文"),
    )
}


@dataclass(frozen=True, slots=True)
class SectionTitle:
    title: str
    section: str


@dataclass(frozen=True, slots=True)
class SectionDescription:
    description: str
    section: str


def is_language_code(value: object) -> bool:
    """True when *value* is exactly one of the canonical language codes."""
    return isinstance(value, str) and value in SUPPORTED_LANGUAGE_CODES


def normalize_language_code(code: str) -> str:
    """Trim and uppercase. Does not validate."""
    return code.strip().upper()


@dataclass(frozen=True)
class LanguageStrategy:
    """
    One locale's content, dispatching rendering to per-format plugins.

    Instances are built by :func:`arc42.locales.plugins.create_language_strategy`
    and shared read-only. ``format_plugins`` is keyed by canonical format code.
    """

    code: str
    name: str
    native_name: str
    section_title_lookup: Callable[[str], str]
    section_description_lookup: Callable[[str], str]
    format_plugins: Mapping[str, FormatTemplatePlugin]

    @property
    def info(self) -> LanguageInfo:
        return LanguageInfo(self.code, self.name, self.native_name)

    def get_section_title(self, section: str | Arc42Section) -> SectionTitle:
        section = str(section)
        return SectionTitle(title=self.section_title_lookup(section), section=section)

    def get_section_description(self, section: str | Arc42Section) -> SectionDescription:
        section = str(section)
        return SectionDescription(description=self.section_description_lookup(section), section=section)

    def get_template_for_format(self, section: str | Arc42Section, format: str) -> str:
        return self.format_plugins[str(format)].get_template(str(section))

    def get_workflow_guide_for_format(self, format: str) -> str:
        return self.format_plugins[str(format)].get_workflow_guide()

    def get_readme_content_for_format(self, project_name: str | None, format: str) -> str:
        return self.format_plugins[str(format)].get_readme_content(project_name)

    def __repr__(self) -> str:
        return f"LanguageStrategy(code={self.code!r}, formats={sorted(self.format_plugins)})"


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_INFO",
    "LanguageCode",
    "LanguageInfo",
    "LanguageStrategy",
    "SUPPORTED_LANGUAGE_CODES",
    "SectionDescription",
    "SectionTitle",
    "is_language_code",
    "normalize_language_code",
]
