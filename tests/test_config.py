"""Tests for HeyGen MCP configuration."""

import dataclasses
import os

import pytest

from heygen_mcp.config import Config, ConfigError, Settings, _load_config_env, load_settings


class TestConfig:
    def test_defaults(self):
        assert Config.SERVER_NAME == "heygen-mcp-server"
        assert Config.SERVER_VERSION == "1.0.0"
        assert Config.PROTOCOL_VERSION == "2024-11-05"
        assert Config.API_KEY_HEADER == "X-Api-Key"

    def test_ensure_dirs(self, tmp_data_dir):
        Config.ensure_dirs()
        assert Config.DATA_DIR.exists()
        assert Config.LOG_DIR.exists()

    def test_config_env_loading(self, tmp_path, monkeypatch):
        (tmp_path / "config.env").write_text(
            "# Comment line\n"
            "HEYGEN_TEST_VAR=hello_world\n"
            "\n"
            "HEYGEN_TEST_QUOTED=\"quoted value\"\n"
            "HEYGEN_TEST_PRESET=from_file\n"
        )
        monkeypatch.setenv("HEYGEN_MCP_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("HEYGEN_TEST_VAR", raising=False)
        monkeypatch.delenv("HEYGEN_TEST_QUOTED", raising=False)
        monkeypatch.setenv("HEYGEN_TEST_PRESET", "from_env")

        _load_config_env()

        assert os.environ["HEYGEN_TEST_VAR"] == "hello_world"
        assert os.environ["HEYGEN_TEST_QUOTED"] == "quoted value"
        assert os.environ["HEYGEN_TEST_PRESET"] == "from_env"

        monkeypatch.delenv("HEYGEN_TEST_VAR")
        monkeypatch.delenv("HEYGEN_TEST_QUOTED")


class TestLoadSettings:
    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("HEYGEN_API_KEY", raising=False)
        with pytest.raises(ConfigError, match="HEYGEN_API_KEY"):
            load_settings()

    def test_blank_key(self, monkeypatch):
        monkeypatch.setenv("HEYGEN_API_KEY", "   ")
        with pytest.raises(ConfigError):
            load_settings()

    def test_loads_key(self, monkeypatch):
        monkeypatch.setenv("HEYGEN_API_KEY", "sk-123")
        monkeypatch.delenv("HEYGEN_HTTP_TIMEOUT", raising=False)
        settings = load_settings()
        assert settings.api_key == "sk-123"
        assert settings.timeout is None
        assert not settings.api_base_url.endswith("/")

    def test_timeout(self, monkeypatch):
        monkeypatch.setenv("HEYGEN_API_KEY", "sk-123")
        monkeypatch.setenv("HEYGEN_HTTP_TIMEOUT", "45")
        assert load_settings().timeout == 45.0

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("HEYGEN_API_KEY", "sk-123")
        monkeypatch.setenv("HEYGEN_HTTP_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            load_settings()

    def test_settings_are_frozen(self):
        settings = Settings(api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.api_key = "other"
