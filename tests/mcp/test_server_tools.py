"""Tests for the arc42 MCP tools.

Tools are called as plain async functions with ``_get_context`` patched to
return a ToolContext rooted in a temporary project.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from arc42.mcp.server import (
    arc42_init,
    arc42_status,
    arc42_workflow_guide,
    generate_template,
    get_section,
    update_section,
)


class TestWorkflowGuideTool:
    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_guide(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await arc42_workflow_guide()
        assert result["success"] is True
        assert result["message"] == "arc42 workflow guide loaded successfully"
        assert result["data"]["guide"].startswith("= arc42")

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_guide_language(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await arc42_workflow_guide(language="ZH", format="markdown")
        assert result["data"]["guide"].startswith("# ")


class TestInitAndStatusTools:
    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_status_before_init(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await arc42_status()
        assert result["success"] is False
        assert result["error"]["code"] == "NOT_INITIALIZED"

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_init_then_status(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        init = await arc42_init(project_name="Webshop", language="NL", format="adoc")
        assert init["success"] is True
        assert init["data"]["language"] == "NL"
        assert init["data"]["format"] == "asciidoc"
        assert "next_steps" in init

        status = await arc42_status()
        assert status["success"] is True
        assert status["data"]["project_name"] == "Webshop"
        assert status["message"].startswith("Documentation status: ")

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_init_target_folder(self, mock_ctx, tool_ctx, tmp_path):
        mock_ctx.return_value = tool_ctx
        target = tmp_path / "elsewhere"
        result = await arc42_init(project_name="Elsewhere", target_folder=str(target))
        assert result["success"] is True
        status = await arc42_status(target_folder=str(target))
        assert status["data"]["workspace_root"] == str(target / "arc42-docs")

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_init_invalid_language(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await arc42_init(project_name="Webshop", language="XX")
        assert result["success"] is False
        assert result["error"]["details"]["code"] == "XX"


class TestTemplateTool:
    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_generate(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await generate_template(section="03_context_and_scope", language="es", format="markdown")
        assert result["success"] is True
        assert result["data"]["language"] == "ES"
        assert result["data"]["template"].startswith("# 3. ")

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_generate_invalid_section(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await generate_template(section="introduction")
        assert result["success"] is False
        assert result["error"]["code"] == "VALIDATION"


class TestSectionTools:
    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_update_then_get(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        await arc42_init(project_name="Webshop", format="markdown")

        updated = await update_section(section="09_architecture_decisions", content="## ADR-1\n\nUse PostgreSQL.")
        assert updated["success"] is True
        appended = await update_section(section="09_architecture_decisions", content="## ADR-2", mode="append")
        assert appended["data"]["mode"] == "append"

        got = await get_section(section="09_architecture_decisions")
        assert got["data"]["content"] == "## ADR-1\n\nUse PostgreSQL.\n\n## ADR-2"

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_get_before_init(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        result = await get_section(section="12_glossary")
        assert result["error"]["code"] == "NOT_INITIALIZED"

    @pytest.mark.asyncio
    @patch("arc42.mcp._app._get_context")
    async def test_status_with_undecodable_section(self, mock_ctx, tool_ctx):
        mock_ctx.return_value = tool_ctx
        await arc42_init(project_name="Webshop", format="markdown")
        (tool_ctx.workspace_root / "sections" / "12_glossary.md").write_bytes(b"\xff\xfe broken \x80")
        result = await arc42_status()
        assert result["success"] is False
        assert result["error"]["code"] == "STORAGE"
