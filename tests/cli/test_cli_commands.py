"""
Tests for the arc42 CLI.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest
import structlog
from typer.testing import CliRunner

from arc42.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Keep structlog output out of captured stdout; skip real logging setup."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    with patch("arc42.cli.app.configure_logging"):
        yield


@pytest.fixture()
def project(tmp_path):
    return str(tmp_path)


def _json(result):
    return json.loads(result.stdout)


class TestRootApp:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "arc42" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("arc42 ")

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code in (0, 2)

    @pytest.mark.parametrize("command", ["init", "status", "template", "guide", "languages", "formats", "serve"])
    def test_command_help(self, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    def test_section_group_help(self):
        result = runner.invoke(app, ["section", "--help"])
        assert result.exit_code == 0
        assert "update" in result.output


class TestInitAndStatus:
    def test_init_json(self, project, tmp_path):
        result = runner.invoke(app, ["init", "Webshop", "-l", "de", "-f", "md", "-p", project, "--json"])
        assert result.exit_code == 0, result.output
        payload = _json(result)
        assert payload["success"] is True
        assert payload["data"]["language"] == "DE"
        assert (tmp_path / "arc42-docs" / "sections" / "01_introduction_and_goals.md").is_file()

    def test_init_text(self, project):
        result = runner.invoke(app, ["init", "Webshop", "--project", project])
        assert result.exit_code == 0
        assert "arc42 workspace initialized successfully for project: Webshop" in result.output

    def test_init_twice_fails(self, project):
        runner.invoke(app, ["init", "Webshop", "-p", project])
        result = runner.invoke(app, ["init", "Webshop", "-p", project])
        assert result.exit_code == 1
        assert "ALREADY_EXISTS" in result.output

    def test_init_force(self, project):
        runner.invoke(app, ["init", "Webshop", "-p", project])
        result = runner.invoke(app, ["init", "Webshop", "-p", project, "--force", "--json"])
        assert result.exit_code == 0
        assert _json(result)["success"] is True

    def test_init_invalid_language_json(self, project):
        result = runner.invoke(app, ["init", "Webshop", "-l", "xx", "-p", project, "--json"])
        assert result.exit_code == 1
        assert _json(result)["error"]["code"] == "VALIDATION"

    def test_status_not_initialized(self, project):
        result = runner.invoke(app, ["status", "-p", project])
        assert result.exit_code == 1
        assert "NOT_INITIALIZED" in result.output

    def test_status_table(self, project):
        runner.invoke(app, ["init", "Webshop", "-p", project])
        result = runner.invoke(app, ["status", "-p", project])
        assert result.exit_code == 0
        assert "Webshop" in result.output
        assert "Documentation status:" in result.output

    def test_status_json(self, project):
        runner.invoke(app, ["init", "Webshop", "-p", project])
        result = runner.invoke(app, ["status", "-p", project, "--json"])
        payload = _json(result)
        assert payload["data"]["format"] == "asciidoc"
        assert len(payload["data"]["sections"]) == 12


class TestTemplates:
    def test_template_prints_raw_text(self, project):
        result = runner.invoke(app, ["template", "12_glossary", "-l", "it", "-f", "markdown", "-p", project])
        assert result.exit_code == 0
        assert result.stdout.startswith("# 12. Glossario")

    def test_template_invalid_section(self, project):
        result = runner.invoke(app, ["template", "glossary", "-p", project])
        assert result.exit_code == 1

    def test_guide(self):
        result = runner.invoke(app, ["guide", "-f", "markdown"])
        assert result.exit_code == 0
        assert "# arc42 Architecture Documentation Workflow Guide" in result.stdout

    def test_languages_json(self):
        result = runner.invoke(app, ["languages", "--json"])
        codes = [entry["code"] for entry in _json(result)]
        assert len(codes) == 11
        assert "UKR" in codes

    def test_formats_json(self):
        rows = _json(runner.invoke(app, ["formats", "--json"]))
        assert rows == [
            {"code": "markdown", "name": "Markdown", "extension": ".md", "default": False},
            {"code": "asciidoc", "name": "AsciiDoc", "extension": ".adoc", "default": True},
        ]

    def test_formats_table(self):
        result = runner.invoke(app, ["formats"])
        assert result.exit_code == 0
        assert "asciidoc" in result.output


class TestSections:
    def test_update_and_get(self, project):
        runner.invoke(app, ["init", "Webshop", "-f", "markdown", "-p", project])
        update = runner.invoke(app, ["section", "update", "12_glossary", "-c", "Term: meaning", "-p", project])
        assert update.exit_code == 0, update.output
        got = runner.invoke(app, ["section", "get", "12_glossary", "-p", project])
        assert got.exit_code == 0
        assert "Term: meaning" in got.stdout

    def test_update_from_stdin_append(self, project):
        runner.invoke(app, ["init", "Webshop", "-f", "markdown", "-p", project])
        runner.invoke(app, ["section", "update", "12_glossary", "-c", "first", "-p", project])
        result = runner.invoke(
            app, ["section", "update", "12_glossary", "--append", "-p", project, "--json"], input="second"
        )
        assert _json(result)["data"]["mode"] == "append"
        got = _json(runner.invoke(app, ["section", "get", "12_glossary", "-p", project, "--json"]))
        assert got["data"]["content"] == "first\n\nsecond"


class TestServe:
    @patch("arc42.mcp.server.run_server")
    @patch("arc42.mcp.server.set_project_path")
    def test_serve(self, mock_set, mock_run, project):
        result = runner.invoke(app, ["serve", "--transport", "http", "--port", "9001", "-p", project])
        assert result.exit_code == 0
        mock_set.assert_called_once_with(project)
        mock_run.assert_called_once_with(transport="http", host=None, port=9001)
