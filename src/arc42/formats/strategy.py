"""
Output format strategy contract.

Manifesto:
    Template content talks in semantic markup operations (heading, bold,
    table, ...). A strategy maps each operation onto one concrete syntax.
    Every operation is an ``abstractmethod``: a strategy that forgets one
    cannot be instantiated, so coverage is a structural guarantee rather
    than a convention.

Strategies are stateless. One instance per format is built at startup and
shared by every request.

Tags:
    strategy-pattern, markup, markdown, asciidoc, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from types import MappingProxyType


class FormatCode(str, Enum):
    """Canonical output format codes."""

    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"

    def __str__(self) -> str:
        return self.value


SUPPORTED_OUTPUT_FORMAT_CODES: tuple[str, ...] = tuple(f.value for f in FormatCode)

DEFAULT_OUTPUT_FORMAT = FormatCode.ASCIIDOC

OUTPUT_FORMAT_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        # Markdown
        "md": "markdown",
        "markdown": "markdown",
        "mdown": "markdown",
        "mkd": "markdown",
        # AsciiDoc
        "adoc": "asciidoc",
        "asciidoc": "asciidoc",
        "ascii": "asciidoc",
        "asciidoctor": "asciidoc",
        "asc": "asciidoc",
    }
)

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


def clamp_heading_level(level: int) -> int:
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))


def is_output_format_code(value: object) -> bool:
    """True when *value* is exactly one of the canonical format codes."""
    return isinstance(value, str) and value in SUPPORTED_OUTPUT_FORMAT_CODES


class OutputFormatStrategy(ABC):
    """Renders semantic markup operations in one concrete syntax."""

    code: FormatCode
    name: str
    file_extension: str

    @abstractmethod
    def format_heading(self, text: str, level: int) -> str:
        """Heading at *level*, clamped to 1..6."""

    @abstractmethod
    def format_bold(self, text: str) -> str: ...

    @abstractmethod
    def format_italic(self, text: str) -> str: ...

    @abstractmethod
    def format_code(self, code: str, language: str | None = None) -> str:
        """Fenced/delimited code block, optionally tagged with a language."""

    @abstractmethod
    def format_inline_code(self, code: str) -> str: ...

    @abstractmethod
    def format_unordered_list(self, items: Sequence[str]) -> str: ...

    @abstractmethod
    def format_ordered_list(self, items: Sequence[str]) -> str: ...

    @abstractmethod
    def format_link(self, text: str, url: str) -> str: ...

    @abstractmethod
    def format_image(self, alt_text: str, url: str) -> str: ...

    @abstractmethod
    def format_table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        """Table with a header row. Empty string when there are no headers."""

    @abstractmethod
    def format_blockquote(self, text: str) -> str: ...

    @abstractmethod
    def format_horizontal_rule(self) -> str: ...

    @abstractmethod
    def format_anchor(self, anchor_id: str) -> str:
        """Explicit anchor, or an empty string where the syntax derives anchors itself."""

    @abstractmethod
    def get_readme_filename(self) -> str: ...

    @abstractmethod
    def get_section_filename(self, section: str) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r})"


__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "FormatCode",
    "MAX_HEADING_LEVEL",
    "MIN_HEADING_LEVEL",
    "OUTPUT_FORMAT_ALIASES",
    "OutputFormatStrategy",
    "SUPPORTED_OUTPUT_FORMAT_CODES",
    "clamp_heading_level",
    "is_output_format_code",
]
