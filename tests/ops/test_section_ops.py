"""Tests for arc42.ops.sections: get and update."""

from pathlib import Path

import pytest

from arc42.ops.sections import get_section, update_section
from arc42.ops.workspace import init_workspace


@pytest.fixture()
def md_workspace(tool_ctx):
    init_workspace(tool_ctx, "Webshop", language="DE", format="markdown")
    return tool_ctx.workspace_root


class TestGetSection:
    def test_reads_content_and_metadata(self, tool_ctx, md_workspace):
        result = get_section(tool_ctx, "01_introduction_and_goals")
        assert result.success
        assert result.message == "Section Einführung und Ziele retrieved successfully"
        assert result.data["section_title"] == "Einführung und Ziele"
        assert result.data["content"].startswith("# 1. Einführung und Ziele")
        meta = result.data["metadata"]
        assert meta["path"] == str(md_workspace / "sections" / "01_introduction_and_goals.md")
        assert meta["word_count"] > 0
        assert meta["size"] > 0

    def test_section_required(self, tool_ctx, md_workspace):
        result = get_section(tool_ctx, "")
        assert result.message == "Section parameter is required"

    def test_invalid_section(self, tool_ctx, md_workspace):
        result = get_section(tool_ctx, "99_appendix")
        assert not result.success
        assert result.error.code == "VALIDATION"

    def test_not_initialized(self, tool_ctx):
        result = get_section(tool_ctx, "12_glossary")
        assert result.error.code == "NOT_INITIALIZED"

    def test_missing_file(self, tool_ctx, md_workspace):
        (md_workspace / "sections" / "12_glossary.md").unlink()
        result = get_section(tool_ctx, "12_glossary")
        assert not result.success
        assert result.error.code == "NOT_FOUND"
        assert result.message == (
            "Section file not found: 12_glossary.md. This section might not have been created yet."
        )

    def test_finds_file_in_other_format(self, tool_ctx, md_workspace):
        sections = md_workspace / "sections"
        (sections / "12_glossary.md").unlink()
        (sections / "12_glossary.adoc").write_text("= Glossar\n", encoding="utf-8")
        result = get_section(tool_ctx, "12_glossary")
        assert result.success
        assert result.data["content"] == "= Glossar\n"


class TestUpdateSection:
    def test_replace(self, tool_ctx, md_workspace):
        result = update_section(tool_ctx, "04_solution_strategy", "# Strategy\n\nMicroservices.")
        assert result.success
        assert result.data["mode"] == "replace"
        assert result.data["word_count"] == 3
        path = md_workspace / "sections" / "04_solution_strategy.md"
        assert path.read_text(encoding="utf-8") == "# Strategy\n\nMicroservices."
        assert result.message == f"Section {result.data['section_title']} updated successfully"

    def test_append_joins_with_blank_line(self, tool_ctx, md_workspace):
        update_section(tool_ctx, "12_glossary", "first")
        update_section(tool_ctx, "12_glossary", "second", mode="append")
        text = (md_workspace / "sections" / "12_glossary.md").read_text(encoding="utf-8")
        assert text == "first\n\nsecond"

    def test_append_to_missing_file_creates_it(self, tool_ctx, md_workspace):
        (md_workspace / "sections" / "12_glossary.md").unlink()
        result = update_section(tool_ctx, "12_glossary", "only", mode="APPEND")
        assert result.success
        assert (md_workspace / "sections" / "12_glossary.md").read_text(encoding="utf-8") == "only"

    def test_content_required(self, tool_ctx, md_workspace):
        result = update_section(tool_ctx, "12_glossary", "")
        assert result.message == "Section and content are required"

    def test_invalid_mode(self, tool_ctx, md_workspace):
        result = update_section(tool_ctx, "12_glossary", "x", mode="prepend")
        assert not result.success
        assert result.message == 'Invalid mode: "prepend". Use "replace" or "append".'

    def test_not_initialized(self, tool_ctx):
        result = update_section(tool_ctx, "12_glossary", "x")
        assert result.error.code == "NOT_INITIALIZED"
        assert not tool_ctx.workspace_root.exists()

    def test_new_file_uses_workspace_format(self, tool_ctx):
        init_workspace(tool_ctx, "Webshop", format="asciidoc")
        (tool_ctx.workspace_root / "sections" / "08_concepts.adoc").unlink()
        result = update_section(tool_ctx, "08_concepts", "== Persistence")
        assert result.data["path"].endswith("08_concepts.adoc")

    def test_write_failure_reports_storage_error(self, tool_ctx, md_workspace, monkeypatch):
        def _deny(self, *args, **kwargs):
            raise PermissionError("read-only file system")

        monkeypatch.setattr(Path, "write_text", _deny)
        result = update_section(tool_ctx, "12_glossary", "x")
        assert not result.success
        assert result.error.code == "STORAGE"
        assert result.message.startswith("Failed to update section: ")
        assert result.error.details["path"].endswith("12_glossary.md")


class TestUndecodableSection:
    @pytest.fixture()
    def broken(self, md_workspace):
        path = md_workspace / "sections" / "12_glossary.md"
        path.write_bytes(b"\xff\xfe broken \x80")
        return path

    def test_get_reports_storage_error(self, tool_ctx, broken):
        result = get_section(tool_ctx, "12_glossary")
        assert not result.success
        assert result.error.code == "STORAGE"
        assert result.error.details["path"] == str(broken)

    def test_append_reports_storage_error(self, tool_ctx, broken):
        result = update_section(tool_ctx, "12_glossary", "more", mode="append")
        assert result.error.code == "STORAGE"
        assert broken.read_bytes() == b"\xff\xfe broken \x80"

    def test_replace_overwrites(self, tool_ctx, broken):
        assert update_section(tool_ctx, "12_glossary", "fresh").success
        assert broken.read_text(encoding="utf-8") == "fresh"
