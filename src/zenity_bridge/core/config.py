"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets the service layer and adapters read settings consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from dotenv import set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "zenity-bridge"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env file.

    Existing keys are preserved; keys mapped to ``None`` are left untouched.
    Values are always quoted so `#` and quotes survive the round trip
    through the settings loader.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# zenity-bridge user config (.env)\n", encoding="utf-8")

    for key in sorted(values):
        value = values[key]
        if value is not None:
            set_key(str(env_path), key, value, quote_mode="always")
    return env_path


class ZenitySettings(BaseSettings):
    """Central settings for invoking the dialog program.

    Values come from ``ZENITY_BRIDGE_*`` environment variables, the project
    ``.env`` and then the user's config ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZENITY_BRIDGE_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    binary: str = Field(
        default="zenity",
        min_length=1,
        description="Name or path of the dialog executable.",
    )
    display: str | None = Field(
        default=None,
        description="DISPLAY override passed to the dialog process.",
    )

    default_title: str | None = Field(
        default=None,
        description="Title applied when a dialog does not set one.",
    )
    default_width: int | None = Field(
        default=None,
        gt=0,
        description="Width applied when a dialog does not set one.",
    )
    default_height: int | None = Field(
        default=None,
        gt=0,
        description="Height applied when a dialog does not set one.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def child_env(self) -> dict[str, str] | None:
        """Environment for the dialog process, or None to inherit ours."""

        if not self.display:
            return None
        env = dict(os.environ)
        env["DISPLAY"] = self.display
        return env
