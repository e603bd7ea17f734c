"""AsciiDoc output format.

AsciiDoc is the native syntax of the upstream arc42 template and the
default for new documentation workspaces.
"""

from __future__ import annotations

from collections.abc import Sequence

from arc42.formats.strategy import FormatCode, OutputFormatStrategy, clamp_heading_level


class AsciidocFormatStrategy(OutputFormatStrategy):
    """AsciiDoc syntax: ``=`` headings, ``----`` listing blocks, ``|===`` tables."""

    code = FormatCode.ASCIIDOC
    name = "AsciiDoc"
    file_extension = ".adoc"

    def format_heading(self, text: str, level: int) -> str:
        return f"{'=' * clamp_heading_level(level)} {text}"

    def format_bold(self, text: str) -> str:
        return f"*{text}*"

    def format_italic(self, text: str) -> str:
        return f"_{text}_"

    def format_code(self, code: str, language: str | None = None) -> str:
        attrs = f"[source,{language}]" if language else "[source]"
        return f"{attrs}\n----\n{code}\n----"

    def format_inline_code(self, code: str) -> str:
        return f"`{code}`"

    def format_unordered_list(self, items: Sequence[str]) -> str:
        return "\n".join(f"* {item}" for item in items)

    def format_ordered_list(self, items: Sequence[str]) -> str:
        return "\n".join(f". {item}" for item in items)

    def format_link(self, text: str, url: str) -> str:
        return f"link:{url}[{text}]"

    def format_image(self, alt_text: str, url: str) -> str:
        return f"image::{url}[{alt_text}]"

    def format_table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        if not headers:
            return ""
        lines = [
            f'[cols="{",".join("1" for _ in headers)}", options="header"]',
            "|===",
            f"| {' | '.join(headers)}",
        ]
        for row in rows:
            lines.append("")
            lines.append(f"| {' | '.join(row)}")
        lines.append("|===")
        return "\n".join(lines)

    def format_blockquote(self, text: str) -> str:
        return f"[quote]\n____\n{text}\n____"

    def format_horizontal_rule(self) -> str:
        return "'''"

    def format_anchor(self, anchor_id: str) -> str:
        return f"[[{anchor_id}]]"

    def get_readme_filename(self) -> str:
        return "README.adoc"

    def get_section_filename(self, section: str) -> str:
        return f"{section}.adoc"


__all__ = ["AsciidocFormatStrategy"]
