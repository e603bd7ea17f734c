"""arc42 locales -- language strategies, plugin composition, template provider.

Modules
-------
strategy   LanguageCode, LanguageStrategy, SectionTitle/SectionDescription
plugins    FormatTemplatePlugin and strategy assembly
content    Pydantic models for the YAML locale data
renderer   LocaleRenderer (content x format strategy -> text)
manifest   locale -> {format -> plugin source}; registry assembly
registry   LanguageRegistry
factory    LanguageFactory (fallback to EN)
provider   LocalizedTemplateProvider facade

Tags:
    arc42, i18n, package-overview

Doc-Types:
    package-overview, module-index
"""

from __future__ import annotations

from arc42.formats import build_format_factory
from arc42.locales.factory import LanguageFactory
from arc42.locales.manifest import LOCALE_MANIFEST, build_language_registry
from arc42.locales.plugins import (
    FormatTemplatePlugin,
    compose_format_plugins,
    create_format_plugin,
    create_language_strategy,
)
from arc42.locales.provider import LocalizedSectionMetadata, LocalizedTemplateProvider
from arc42.locales.registry import LanguageRegistry
from arc42.locales.strategy import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGE_CODES,
    LanguageCode,
    LanguageInfo,
    LanguageStrategy,
    SectionDescription,
    SectionTitle,
    is_language_code,
    normalize_language_code,
)


def build_default_provider() -> LocalizedTemplateProvider:
    """Wire fresh registries for every bundled locale and both formats."""
    format_factory = build_format_factory()
    language_registry = build_language_registry(format_registry=format_factory.registry)
    return LocalizedTemplateProvider(LanguageFactory(language_registry), format_factory)


__all__ = [
    "DEFAULT_LANGUAGE",
    "FormatTemplatePlugin",
    "LOCALE_MANIFEST",
    "LanguageCode",
    "LanguageFactory",
    "LanguageInfo",
    "LanguageRegistry",
    "LanguageStrategy",
    "LocalizedSectionMetadata",
    "LocalizedTemplateProvider",
    "SUPPORTED_LANGUAGE_CODES",
    "SectionDescription",
    "SectionTitle",
    "build_default_provider",
    "build_language_registry",
    "compose_format_plugins",
    "create_format_plugin",
    "create_language_strategy",
    "is_language_code",
    "normalize_language_code",
]
