"""Settings and the user .env helpers."""

from __future__ import annotations

import pytest
from dotenv import dotenv_values
from pydantic import ValidationError

from zenity_bridge.core.config import (
    ZenitySettings,
    get_user_config_dir,
    get_user_env_file,
    write_user_env_vars,
)


def test_defaults(settings):
    assert settings.binary == "zenity"
    assert settings.display is None
    assert settings.log_level == "WARNING"
    assert settings.child_env() is None


def test_environment_variables_are_read(clean_env, monkeypatch):
    monkeypatch.setenv("ZENITY_BRIDGE_BINARY", "/usr/local/bin/zenity")
    monkeypatch.setenv("ZENITY_BRIDGE_DEFAULT_WIDTH", "480")
    monkeypatch.setenv("ZENITY_BRIDGE_LOG_LEVEL", "debug")
    settings = ZenitySettings(_env_file=None)
    assert settings.binary == "/usr/local/bin/zenity"
    assert settings.default_width == 480
    assert settings.log_level == "DEBUG"


def test_project_env_file_is_read(clean_env):
    (clean_env / ".env").write_text("ZENITY_BRIDGE_DEFAULT_TITLE=From file\n", encoding="utf-8")
    settings = ZenitySettings(_env_file=".env")
    assert settings.default_title == "From file"


def test_invalid_values_are_rejected(clean_env):
    with pytest.raises(ValidationError):
        ZenitySettings(_env_file=None, default_height=0)
    with pytest.raises(ValidationError):
        ZenitySettings(_env_file=None, log_level="LOUD")


def test_display_override_builds_child_env(clean_env):
    env = ZenitySettings(_env_file=None, display=":3").child_env()
    assert env is not None
    assert env["DISPLAY"] == ":3"


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "zenity-bridge"


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"ZENITY_BRIDGE_BINARY": "zenity", "ZENITY_BRIDGE_DISPLAY": ":0"}, env_path)
    write_user_env_vars({"ZENITY_BRIDGE_DISPLAY": ":1", "ZENITY_BRIDGE_DEFAULT_TITLE": None}, env_path)

    assert env_path.read_text(encoding="utf-8").startswith("#")
    assert dotenv_values(env_path) == {"ZENITY_BRIDGE_BINARY": "zenity", "ZENITY_BRIDGE_DISPLAY": ":1"}


@pytest.mark.parametrize(
    "title",
    ["Build #1 'final'", 'say "hi"', "a=b # not a comment", "  padded  ", "back\\slash"],
)
def test_written_values_read_back_unchanged(clean_env, title):
    env_path = clean_env / "cfg" / ".env"
    write_user_env_vars({"ZENITY_BRIDGE_DEFAULT_TITLE": title}, env_path)
    assert ZenitySettings(_env_file=env_path).default_title == title


def test_user_env_file_is_isolated_per_test(clean_env):
    assert get_user_env_file() == clean_env / "config" / "zenity-bridge" / ".env"
    assert ZenitySettings().binary == "zenity"

    write_user_env_vars({"ZENITY_BRIDGE_BINARY": "/opt/zenity"})
    assert ZenitySettings().binary == "/opt/zenity"
