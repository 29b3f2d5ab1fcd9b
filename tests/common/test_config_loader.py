"""Tests for taigamart/common/config_loader.py"""

import pytest

from taigamart.common import config_loader
from taigamart.common.config_loader import DEFAULT_SETTINGS, Settings, load_config, load_settings


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the loader at a temporary config directory."""
    monkeypatch.setattr(config_loader, "_get_config_dir", lambda: tmp_path)
    return tmp_path


class TestLoadConfig:
    def test_loads_repo_settings_file(self):
        config = load_config("settings.yaml")
        assert "api" in config
        assert config["api"]["currency"] == "LKR"

    def test_missing_file_raises(self, config_dir):
        with pytest.raises(FileNotFoundError):
            load_config("missing.yaml")

    def test_empty_file_is_empty_dict(self, config_dir):
        (config_dir / "empty.yaml").write_text("", encoding="utf-8")
        assert load_config("empty.yaml") == {}


class TestLoadSettings:
    def test_defaults_without_file(self, config_dir):
        settings = load_settings("absent.yaml", environ={})
        assert settings == Settings(**DEFAULT_SETTINGS)

    def test_file_overrides_defaults(self, config_dir):
        (config_dir / "settings.yaml").write_text(
            "api:\n  api_url: https://shop.example.com\n  timeout: 10\n", encoding="utf-8")
        settings = load_settings(environ={})
        assert settings.api_url == "https://shop.example.com"
        assert settings.timeout == 10
        assert settings.pos_api_url == DEFAULT_SETTINGS["pos_api_url"]

    def test_environment_overrides_file(self, config_dir):
        (config_dir / "settings.yaml").write_text(
            "api:\n  api_url: https://shop.example.com\n", encoding="utf-8")
        settings = load_settings(environ={
            "TAIGA_API_URL": "https://staging.example.com",
            "TAIGA_TIMEOUT": "5",
            "TAIGA_AUTH_FILE": "/tmp/auth.json",
        })
        assert settings.api_url == "https://staging.example.com"
        assert settings.timeout == 5
        assert settings.auth_file == "/tmp/auth.json"

    def test_unknown_keys_ignored(self, config_dir):
        (config_dir / "settings.yaml").write_text("api:\n  colour: blue\n", encoding="utf-8")
        settings = load_settings(environ={})
        assert not hasattr(settings, "colour")

    def test_bad_integer_falls_back_to_default(self, config_dir):
        settings = load_settings("absent.yaml", environ={"TAIGA_TIMEOUT": "soon"})
        assert settings.timeout == DEFAULT_SETTINGS["timeout"]

    def test_auth_path_expands_user(self):
        settings = Settings(api_url="a", pos_api_url="b", auth_file="~/auth.json")
        assert "~" not in str(settings.auth_path)
