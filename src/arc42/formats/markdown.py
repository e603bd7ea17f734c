"""Markdown (GitHub-flavoured) output format."""

from __future__ import annotations

from collections.abc import Sequence

from arc42.formats.strategy import FormatCode, OutputFormatStrategy, clamp_heading_level


class MarkdownFormatStrategy(OutputFormatStrategy):
    """GFM syntax: ``#`` headings, fenced code, pipe tables."""

    code = FormatCode.MARKDOWN
    name = "Markdown"
    file_extension = ".md"

    def format_heading(self, text: str, level: int) -> str:
        return f"{'#' * clamp_heading_level(level)} {text}"

    def format_bold(self, text: str) -> str:
        return f"**{text}**"

    def format_italic(self, text: str) -> str:
        return f"*{text}*"

    def format_code(self, code: str, language: str | None = None) -> str:
        return f"```{language or ''}\n{code}\n```"

    def format_inline_code(self, code: str) -> str:
        return f"`{code}`"

    def format_unordered_list(self, items: Sequence[str]) -> str:
        return "\n".join(f"- {item}" for item in items)

    def format_ordered_list(self, items: Sequence[str]) -> str:
        # GFM renumbers, so every item is "1."
        return "\n".join(f"1. {item}" for item in items)

    def format_link(self, text: str, url: str) -> str:
        return f"[{text}]({url})"

    def format_image(self, alt_text: str, url: str) -> str:
        return f"![{alt_text}]({url})"

    def format_table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        if not headers:
            return ""
        lines = [
            f"| {' | '.join(headers)} |",
            f"| {' | '.join('---' for _ in headers)} |",
        ]
        lines.extend(f"| {' | '.join(row)} |" for row in rows)
        return "\n".join(lines)

    def format_blockquote(self, text: str) -> str:
        return "\n".join(f"> {line}" for line in text.split("\n"))

    def format_horizontal_rule(self) -> str:
        return "---"

    def format_anchor(self, anchor_id: str) -> str:
        return ""

    def get_readme_filename(self) -> str:
        return "README.md"

    def get_section_filename(self, section: str) -> str:
        return f"{section}.md"


__all__ = ["MarkdownFormatStrategy"]
