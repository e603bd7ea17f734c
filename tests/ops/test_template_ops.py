"""Tests for arc42.ops.templates and the result envelope."""

from arc42.core.errors import InvalidLanguageError
from arc42.ops.result import OperationResult
from arc42.ops.templates import generate_template, workflow_guide
from arc42.ops.workspace import init_workspace


class TestGenerateTemplate:
    def test_without_workspace_uses_defaults(self, tool_ctx):
        result = generate_template(tool_ctx, "12_glossary")
        assert result.success
        assert result.message == "Template for Glossary generated"
        assert result.data["language"] == "EN"
        assert result.data["format"] == "asciidoc"
        assert "= 12. Glossary" in result.data["template"]
        assert result.data["metadata"]["languageCode"] == "EN"

    def test_workspace_config_applies(self, tool_ctx):
        init_workspace(tool_ctx, "Webshop", language="DE", format="markdown")
        result = generate_template(tool_ctx, "01_introduction_and_goals")
        assert result.data["language"] == "DE"
        assert result.data["format"] == "markdown"
        assert result.data["template"].startswith("# 1. Einführung und Ziele")
        assert result.message == "Template for Einführung und Ziele generated"

    def test_explicit_language_overrides_workspace(self, tool_ctx):
        init_workspace(tool_ctx, "Webshop", language="DE", format="markdown")
        result = generate_template(tool_ctx, "01_introduction_and_goals", language="fr")
        assert result.data["language"] == "FR"
        assert result.data["template"].startswith("# 1. Introduction et Objectifs")

    def test_format_alias_and_unknown_format(self, tool_ctx):
        assert generate_template(tool_ctx, "12_glossary", format="md").data["format"] == "markdown"
        fallback = generate_template(tool_ctx, "12_glossary", format="docx")
        assert fallback.success
        assert fallback.data["format"] == "asciidoc"

    def test_section_required(self, tool_ctx):
        assert generate_template(tool_ctx, "").message == "Section parameter is required"

    def test_invalid_section(self, tool_ctx):
        result = generate_template(tool_ctx, "00_preface")
        assert result.error.code == "VALIDATION"
        assert "00_preface" in result.message

    def test_invalid_explicit_language(self, tool_ctx):
        result = generate_template(tool_ctx, "12_glossary", language="XX")
        assert not result.success
        assert result.error.code == "VALIDATION"
        assert result.error.details["code"] == "XX"


class TestWorkflowGuide:
    def test_default(self, tool_ctx):
        result = workflow_guide(tool_ctx)
        assert result.success
        assert result.message == "arc42 workflow guide loaded successfully"
        assert result.data["guide"].startswith("= arc42 Architecture Documentation Workflow Guide")
        assert result.data["available_formats"] == ["markdown", "asciidoc"]
        assert len(result.data["available_languages"]) == 11
        assert result.next_steps[0] == "Initialize arc42 documentation with: arc42-init"

    def test_localized_markdown(self, tool_ctx):
        guide = workflow_guide(tool_ctx, language="DE", format="markdown").data["guide"]
        assert guide.startswith("# ")
        assert "Deutsch" in guide

    def test_unknown_language_still_succeeds(self, tool_ctx):
        assert workflow_guide(tool_ctx, language="XX").success


class TestOperationResult:
    def test_ok_to_dict(self):
        d = OperationResult.ok({"a": 1}, message="done", next_steps=["next"]).to_dict()
        assert d == {"success": True, "message": "done", "data": {"a": 1}, "next_steps": ["next"]}

    def test_fail_to_dict(self):
        d = OperationResult.fail("NOT_FOUND", "missing", details={"path": "x"}).to_dict()
        assert d == {
            "success": False,
            "message": "missing",
            "error": {"code": "NOT_FOUND", "message": "missing", "details": {"path": "x"}},
        }

    def test_from_error(self):
        result = OperationResult.from_error(InvalidLanguageError("XX", ["EN"]))
        assert result.error.code == "VALIDATION"
        assert result.error_message == 'Invalid language code: "XX". Supported codes: EN'
        assert result.error.details == {"code": "XX", "available": ["EN"]}

    def test_elapsed_rounded(self):
        assert OperationResult.ok(None, elapsed_ms=1.23456).to_dict()["elapsed_ms"] == 1.23
