"""
Format template plugins and language strategy assembly.

A plugin is the per-(locale, format) bundle of three pure rendering
functions. A locale is assembled from two lookups (section title, section
description) plus one plugin per output format::

    strategy = create_language_strategy(
        code="DE",
        name="German",
        native_name="Deutsch",
        get_section_title=content.section_title,
        get_section_description=content.section_description,
        format_plugins={"markdown": de_markdown, "asciidoc": de_asciidoc},
    )

Template, guide and README requests are a direct lookup of the plugin for
the requested format. A locale without its own plugin for some format may
borrow another locale's plugin object at build time via
:func:`compose_format_plugins`; that choice is static and recorded in
:mod:`arc42.locales.manifest`.

Tags:
    plugin, composition, strategy-pattern, i18n, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from arc42.core.errors import ConfigError
from arc42.formats.strategy import SUPPORTED_OUTPUT_FORMAT_CODES
from arc42.locales.strategy import LanguageStrategy


@dataclass(frozen=True, slots=True)
class FormatTemplatePlugin:
    """Rendering functions for one locale in one output format."""

    get_template: Callable[[str], str]
    get_workflow_guide: Callable[[], str]
    get_readme_content: Callable[[str | None], str]
    source: str = ""


def create_format_plugin(
    get_template: Callable[[str], str],
    get_workflow_guide: Callable[[], str],
    get_readme_content: Callable[[str | None], str],
    *,
    source: str = "",
) -> FormatTemplatePlugin:
    """Bundle three rendering functions. ``source`` names where they come from (e.g. ``"DE/markdown"``)."""
    return FormatTemplatePlugin(
        get_template=get_template,
        get_workflow_guide=get_workflow_guide,
        get_readme_content=get_readme_content,
        source=source,
    )


def compose_format_plugins(
    primary: Mapping[str, FormatTemplatePlugin],
    fallback: Mapping[str, FormatTemplatePlugin],
) -> dict[str, FormatTemplatePlugin]:
    """Complete *primary* with *fallback* plugins for the formats it lacks.

    The fallback plugin objects are shared by reference, not copied. A format
    neither mapping covers is left out; :func:`create_language_strategy`
    rejects the result.
    """
    composed: dict[str, FormatTemplatePlugin] = {}
    for code in SUPPORTED_OUTPUT_FORMAT_CODES:
        plugin = primary.get(code) or fallback.get(code)
        if plugin is not None:
            composed[code] = plugin
    return composed


def create_language_strategy(
    code: str,
    name: str,
    native_name: str,
    get_section_title: Callable[[str], str],
    get_section_description: Callable[[str], str],
    format_plugins: Mapping[str, FormatTemplatePlugin],
) -> LanguageStrategy:
    """Assemble a :class:`LanguageStrategy`.

    Raises:
        ConfigError: If ``format_plugins`` does not cover every output format.
    """
    missing = [fmt for fmt in SUPPORTED_OUTPUT_FORMAT_CODES if fmt not in format_plugins]
    if missing:
        raise ConfigError(f"Language {code} has no plugin for format(s): {', '.join(missing)}")

    return LanguageStrategy(
        code=code,
        name=name,
        native_name=native_name,
        section_title_lookup=get_section_title,
        section_description_lookup=get_section_description,
        format_plugins=MappingProxyType(dict(format_plugins)),
    )


__all__ = [
    "FormatTemplatePlugin",
    "compose_format_plugins",
    "create_format_plugin",
    "create_language_strategy",
]
