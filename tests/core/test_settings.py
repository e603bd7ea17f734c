"""Tests for arc42.core.settings.

Covers:
- Defaults
- ARC42_* environment overrides
- Validation of transport and log level
- Settings cache
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from arc42.core.settings import Arc42Settings, clear_settings_cache, get_settings


class TestDefaults:
    def test_defaults(self):
        s = Arc42Settings()
        assert s.workspace_dirname == "arc42-docs"
        assert s.default_transport == "stdio"
        assert s.mcp_host == "127.0.0.1"
        assert s.mcp_port == 8142
        assert s.log_level == "INFO"
        assert s.log_format == "auto"

    def test_project_path_defaults_to_cwd(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert Arc42Settings().project_path.resolve() == tmp_path.resolve()

    def test_workspace_root(self, tmp_path):
        s = Arc42Settings(project_path=tmp_path)
        assert s.workspace_root == tmp_path / "arc42-docs"


class TestEnvOverride:
    def test_project_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ARC42_PROJECT_PATH", str(tmp_path))
        s = Arc42Settings()
        assert s.project_path == tmp_path
        assert isinstance(s.project_path, Path)

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("ARC42_MCP_PORT", "9000")
        assert Arc42Settings().mcp_port == 9000

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("ARC42_LOG_LEVEL", "debug")
        assert Arc42Settings().log_level == "DEBUG"

    def test_transport_is_normalized(self, monkeypatch):
        monkeypatch.setenv("ARC42_DEFAULT_TRANSPORT", " HTTP ")
        assert Arc42Settings().default_transport == "http"

    def test_unknown_transport_rejected(self, monkeypatch):
        monkeypatch.setenv("ARC42_DEFAULT_TRANSPORT", "carrier-pigeon")
        with pytest.raises(ValidationError):
            Arc42Settings()


class TestJsonLogs:
    @pytest.mark.parametrize("fmt, expected", [("json", True), ("console", False), ("auto", None)])
    def test_json_logs(self, fmt, expected):
        assert Arc42Settings(log_format=fmt).json_logs is expected


class TestCache:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self):
        first = get_settings()
        assert get_settings(_force_reload=True) is not first

    def test_clear_picks_up_env_changes(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("ARC42_MCP_PORT", "9100")
        clear_settings_cache()
        assert get_settings().mcp_port == 9100
