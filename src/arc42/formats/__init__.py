"""arc42 output formats -- strategies, registry, factory, detection.

Modules
-------
strategy   FormatCode, aliases, OutputFormatStrategy ABC
markdown   MarkdownFormatStrategy
asciidoc   AsciidocFormatStrategy
registry   OutputFormatRegistry
factory    OutputFormatFactory (aliases + fallback)

Tags:
    arc42, formats, package-overview

Doc-Types:
    package-overview, module-index
"""

from __future__ import annotations

from pathlib import PurePath

from arc42.formats.asciidoc import AsciidocFormatStrategy
from arc42.formats.factory import OutputFormatFactory
from arc42.formats.markdown import MarkdownFormatStrategy
from arc42.formats.registry import OutputFormatRegistry
from arc42.formats.strategy import (
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMAT_ALIASES,
    SUPPORTED_OUTPUT_FORMAT_CODES,
    FormatCode,
    OutputFormatStrategy,
    is_output_format_code,
)

_EXTENSION_FORMATS = {
    ".md": FormatCode.MARKDOWN,
    ".markdown": FormatCode.MARKDOWN,
    ".adoc": FormatCode.ASCIIDOC,
    ".asciidoc": FormatCode.ASCIIDOC,
    ".asc": FormatCode.ASCIIDOC,
}


def build_format_registry() -> OutputFormatRegistry:
    """A fresh registry holding the Markdown and AsciiDoc strategies."""
    return OutputFormatRegistry().register(MarkdownFormatStrategy()).register(AsciidocFormatStrategy())


def build_format_factory() -> OutputFormatFactory:
    return OutputFormatFactory(build_format_registry())


def detect_format_from_extension(extension: str) -> FormatCode | None:
    """``.md`` -> markdown, ``.adoc`` -> asciidoc; leading dot optional."""
    ext = extension.strip().lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return _EXTENSION_FORMATS.get(ext)


def detect_format_from_filename(filename: str) -> FormatCode | None:
    suffix = PurePath(filename).suffix
    return detect_format_from_extension(suffix) if suffix else None


__all__ = [
    "AsciidocFormatStrategy",
    "DEFAULT_OUTPUT_FORMAT",
    "FormatCode",
    "MarkdownFormatStrategy",
    "OUTPUT_FORMAT_ALIASES",
    "OutputFormatFactory",
    "OutputFormatRegistry",
    "OutputFormatStrategy",
    "SUPPORTED_OUTPUT_FORMAT_CODES",
    "build_format_factory",
    "build_format_registry",
    "detect_format_from_extension",
    "detect_format_from_filename",
    "is_output_format_code",
]
