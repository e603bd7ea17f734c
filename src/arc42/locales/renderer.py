"""
Render locale content through an output format strategy.

:class:`LocaleRenderer` binds one :class:`LocaleContent` to one
:class:`OutputFormatStrategy`. Its bound methods are the rendering functions
packed into a :class:`~arc42.locales.plugins.FormatTemplatePlugin`. All
rendering is pure: same content, same format, same output.
"""

from __future__ import annotations

from arc42.core.errors import InvalidSectionError
from arc42.core.sections import ARC42_SECTIONS, SECTION_METADATA
from arc42.formats.strategy import OutputFormatStrategy
from arc42.locales.content import ContentBlock, LocaleContent
from arc42.locales.strategy import LANGUAGE_INFO

SECTIONS_DIRNAME = "sections"
MAIN_DOCUMENT_STEM = "arc42-documentation"


def section_anchor_id(section: str) -> str:
    """``03_context_and_scope`` -> ``section-context-and-scope``."""
    return "section-" + section.split("_", 1)[1].replace("_", "-")


class LocaleRenderer:
    """Turns format-neutral locale content into Markdown or AsciiDoc text."""

    def __init__(self, content: LocaleContent, fmt: OutputFormatStrategy):
        self.content = content
        self.fmt = fmt

    # -- blocks -------------------------------------------------------------

    def render_block(self, block: ContentBlock) -> str:
        fmt = self.fmt
        match block.kind:
            case "heading":
                return fmt.format_heading(block.heading, block.level)
            case "text":
                return block.text
            case "purpose":
                return f"{fmt.format_bold(self.content.labels.purpose)}: {block.purpose}"
            case "hint":
                return fmt.format_italic(block.hint)
            case "items":
                return fmt.format_unordered_list(block.items)
            case "steps":
                return fmt.format_ordered_list(block.steps)
            case "table":
                return fmt.format_table(block.table.headers, block.table.rows)
            case "code":
                return fmt.format_code(block.code.content, block.code.language)
        raise ValueError(f"Unhandled block kind: {block.kind}")

    def _join(self, parts: list[str]) -> str:
        return "\n\n".join(p for p in parts if p) + "\n"

    # -- plugin functions ---------------------------------------------------

    def render_section(self, section: str) -> str:
        """Full template for one section, headed by its number and localized title."""
        data = self.content.sections.get(section)
        if data is None:
            raise InvalidSectionError(section, ARC42_SECTIONS)
        order = SECTION_METADATA[section].order
        anchor = self.fmt.format_anchor(section_anchor_id(section))
        heading = self.fmt.format_heading(f"{order}. {data.title}", 1)
        return self._join(
            [
                f"{anchor}\n{heading}" if anchor else heading,
                *(self.render_block(b) for b in data.blocks),
            ]
        )

    def render_workflow_guide(self) -> str:
        fmt = self.fmt
        guide = self.content.workflow_guide
        labels = self.content.labels

        parts = [
            fmt.format_heading(guide.title, 1),
            fmt.format_heading(guide.overview_heading, 2),
            guide.overview,
            fmt.format_heading(guide.languages_heading, 2),
            guide.languages_intro,
            fmt.format_table(
                [labels.code, labels.language, labels.native_name],
                [[info.code, info.name, info.native_name] for info in LANGUAGE_INFO.values()],
            ),
            fmt.format_heading(guide.getting_started_heading, 2),
        ]
        for step in guide.steps:
            parts += [fmt.format_heading(step.title, 3), step.text, fmt.format_code(step.example)]

        parts += [
            fmt.format_heading(guide.sections_heading, 2),
            fmt.format_ordered_list(
                [f"{fmt.format_bold(s.title)} - {s.hint}" for s in self._sections_in_order()]
            ),
            fmt.format_heading(guide.best_practices_heading, 2),
            fmt.format_ordered_list(guide.best_practices),
            fmt.format_heading(guide.tools_heading, 2),
            fmt.format_unordered_list(
                [f"{fmt.format_inline_code(tool)} - {text}" for tool, text in guide.tools.items()]
            ),
            fmt.format_heading(guide.resources_heading, 2),
            fmt.format_unordered_list([fmt.format_link(link.text, link.url) for link in guide.resources]),
        ]
        return self._join(parts)

    def render_readme(self, project_name: str | None = None) -> str:
        fmt = self.fmt
        readme = self.content.readme
        name = project_name or readme.default_project_name
        ext = fmt.file_extension

        return self._join(
            [
                fmt.format_heading(readme.title.format(project_name=name), 1),
                readme.intro.format(project_name=name),
                fmt.format_heading(readme.structure_heading, 2),
                fmt.format_unordered_list(
                    [
                        f"{fmt.format_inline_code(path.format(ext=ext))} - {text}"
                        for path, text in readme.structure.items()
                    ]
                ),
                fmt.format_heading(readme.sections_heading, 2),
                fmt.format_ordered_list(
                    [f"{fmt.format_bold(s.title)} - {s.description}" for s in self._sections_in_order()]
                ),
                fmt.format_heading(readme.getting_started_heading, 2),
                fmt.format_ordered_list(readme.getting_started),
                fmt.format_heading(readme.resources_heading, 2),
                fmt.format_unordered_list([fmt.format_link(link.text, link.url) for link in readme.resources]),
            ]
        )

    # -- workspace documents ------------------------------------------------

    def render_main_document(self, project_name: str) -> str:
        """Top-level document linking every section file."""
        fmt = self.fmt
        readme = self.content.readme
        toc = [
            fmt.format_link(
                self.content.sections[section].title,
                f"{SECTIONS_DIRNAME}/{fmt.get_section_filename(section)}",
            )
            for section in ARC42_SECTIONS
        ]
        return self._join(
            [
                fmt.format_heading(readme.title.format(project_name=project_name), 1),
                readme.intro.format(project_name=project_name),
                fmt.format_horizontal_rule(),
                fmt.format_heading(readme.toc_heading, 2),
                fmt.format_ordered_list(toc),
                fmt.format_horizontal_rule(),
                fmt.format_heading(readme.about_heading, 2),
                fmt.format_blockquote(readme.about),
            ]
        )

    def main_document_filename(self) -> str:
        return f"{MAIN_DOCUMENT_STEM}{self.fmt.file_extension}"

    def _sections_in_order(self):
        return [self.content.sections[s] for s in ARC42_SECTIONS]


__all__ = ["LocaleRenderer", "MAIN_DOCUMENT_STEM", "SECTIONS_DIRNAME", "section_anchor_id"]
