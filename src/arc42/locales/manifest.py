"""
Locale manifest: which plugin every (locale, format) pair uses.

Each entry maps an output format to the locale whose content renders it.
An entry pointing at its own locale means the locale authored that format
itself; an entry pointing elsewhere reuses the other locale's plugin object,
fixed at build time. Every bundled locale currently authors both formats.
A locale that only ships Markdown would be listed as::

    "XX": {"markdown": "XX", "asciidoc": "EN"},

:func:`build_language_registry` is the one place that turns this table into
strategies.

Tags:
    i18n, manifest, composition, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from arc42.core.logging import get_logger
from arc42.formats import build_format_registry
from arc42.formats.registry import OutputFormatRegistry
from arc42.locales.content import LocaleContent, load_locale_content
from arc42.locales.plugins import (
    FormatTemplatePlugin,
    compose_format_plugins,
    create_format_plugin,
    create_language_strategy,
)
from arc42.locales.registry import LanguageRegistry
from arc42.locales.renderer import LocaleRenderer
from arc42.locales.strategy import SUPPORTED_LANGUAGE_CODES, LanguageStrategy

logger = get_logger(__name__)

LocaleManifest = Mapping[str, Mapping[str, str]]

LOCALE_MANIFEST: LocaleManifest = MappingProxyType(
    {code: MappingProxyType({"markdown": code, "asciidoc": code}) for code in SUPPORTED_LANGUAGE_CODES}
)


class _PluginBuilder:
    """Builds each (source locale, format) plugin once and hands out the same object."""

    def __init__(
        self,
        format_registry: OutputFormatRegistry,
        content_loader: Callable[[str], LocaleContent],
    ):
        self._formats = format_registry
        self._load = content_loader
        self._plugins: dict[tuple[str, str], FormatTemplatePlugin] = {}

    def get(self, source: str, fmt_code: str) -> FormatTemplatePlugin:
        key = (source, fmt_code)
        plugin = self._plugins.get(key)
        if plugin is None:
            renderer = LocaleRenderer(self._load(source), self._formats.get_or_raise(fmt_code))
            plugin = create_format_plugin(
                renderer.render_section,
                renderer.render_workflow_guide,
                renderer.render_readme,
                source=f"{source}/{fmt_code}",
            )
            self._plugins[key] = plugin
        return plugin


def build_language_strategies(
    manifest: LocaleManifest = LOCALE_MANIFEST,
    *,
    format_registry: OutputFormatRegistry | None = None,
    content_loader: Callable[[str], LocaleContent] = load_locale_content,
) -> list[LanguageStrategy]:
    """Assemble one strategy per manifest entry."""
    builder = _PluginBuilder(format_registry or build_format_registry(), content_loader)
    strategies = []
    for code, formats in manifest.items():
        content = content_loader(code)
        own = {fmt: builder.get(code, fmt) for fmt, source in formats.items() if source == code}
        borrowed = {fmt: builder.get(source, fmt) for fmt, source in formats.items() if source != code}
        if borrowed:
            logger.debug("locale_reuses_plugins", locale=code, borrowed={f: formats[f] for f in borrowed})
        strategies.append(
            create_language_strategy(
                code=content.code,
                name=content.name,
                native_name=content.native_name,
                get_section_title=content.section_title,
                get_section_description=content.section_description,
                format_plugins=compose_format_plugins(own, borrowed),
            )
        )
    return strategies


def build_language_registry(
    manifest: LocaleManifest = LOCALE_MANIFEST,
    *,
    format_registry: OutputFormatRegistry | None = None,
    content_loader: Callable[[str], LocaleContent] = load_locale_content,
) -> LanguageRegistry:
    """A fresh :class:`LanguageRegistry` holding every locale in *manifest*."""
    registry = LanguageRegistry()
    for strategy in build_language_strategies(
        manifest, format_registry=format_registry, content_loader=content_loader
    ):
        registry.register(strategy)
    return registry


__all__ = [
    "LOCALE_MANIFEST",
    "LocaleManifest",
    "build_language_registry",
    "build_language_strategies",
]
