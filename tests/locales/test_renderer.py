"""Tests for LocaleRenderer."""

import re

import pytest

from arc42.core.errors import InvalidSectionError
from arc42.formats import AsciidocFormatStrategy, MarkdownFormatStrategy
from arc42.locales.content import load_locale_content
from arc42.locales.renderer import LocaleRenderer, section_anchor_id


@pytest.fixture()
def en_md():
    return LocaleRenderer(load_locale_content("EN"), MarkdownFormatStrategy())


@pytest.fixture()
def en_adoc():
    return LocaleRenderer(load_locale_content("EN"), AsciidocFormatStrategy())


def test_section_anchor_id():
    assert section_anchor_id("03_context_and_scope") == "section-context-and-scope"


class TestRenderSection:
    def test_markdown_heading_and_purpose(self, en_md):
        text = en_md.render_section("01_introduction_and_goals")
        assert text.startswith("# 1. Introduction and Goals\n")
        assert "## Requirements Overview" in text
        assert "**Purpose**: Describe the relevant requirements" in text
        assert "| ID | Requirement | Priority |" in text
        assert text.endswith("\n")

    def test_asciidoc_anchor_precedes_heading(self, en_adoc):
        text = en_adoc.render_section("12_glossary")
        lines = text.splitlines()
        assert lines[0] == "[[section-glossary]]"
        assert lines[1] == "= 12. Glossary"
        assert "|===" in text

    def test_markdown_has_no_asciidoc_headings(self, en_md):
        text = en_md.render_section("05_building_block_view")
        assert re.search(r"^#", text, re.M)
        assert not re.search(r"^=", text, re.M)

    def test_is_deterministic(self, en_md):
        assert en_md.render_section("08_concepts") == en_md.render_section("08_concepts")

    def test_unknown_section(self, en_md):
        with pytest.raises(InvalidSectionError):
            en_md.render_section("13_appendix")


class TestWorkflowGuide:
    def test_lists_all_languages_and_sections(self, en_md):
        guide = en_md.render_workflow_guide()
        assert guide.startswith("# arc42 Architecture Documentation Workflow Guide")
        assert "| UKR | Ukrainian | Українська |" in guide
        assert "**Risks and Technical Debt** - " in guide
        assert "`update-section` - Update section content" in guide
        assert "[arc42 Website](https://arc42.org/)" in guide

    def test_asciidoc_guide(self, en_adoc):
        guide = en_adoc.render_workflow_guide()
        assert guide.startswith("= arc42 Architecture Documentation Workflow Guide")
        assert "link:https://arc42.org/[arc42 Website]" in guide


class TestReadme:
    def test_project_name_substituted(self, en_md):
        readme = en_md.render_readme("Webshop")
        assert readme.startswith("# Webshop - Architecture Documentation")
        assert "`arc42-documentation.md` - Main combined documentation" in readme

    def test_default_project_name(self, en_adoc):
        readme = en_adoc.render_readme()
        assert readme.startswith("= Project - Architecture Documentation")
        assert "`arc42-documentation.adoc`" in readme


class TestMainDocument:
    def test_links_every_section_file(self, en_md):
        doc = en_md.render_main_document("Webshop")
        assert "[Introduction and Goals](sections/01_introduction_and_goals.md)" in doc
        assert "[Glossary](sections/12_glossary.md)" in doc
        assert "> arc42, the template" in doc

    def test_filename(self, en_md, en_adoc):
        assert en_md.main_document_filename() == "arc42-documentation.md"
        assert en_adoc.main_document_filename() == "arc42-documentation.adoc"
