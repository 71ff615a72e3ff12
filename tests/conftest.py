"""Shared pytest fixtures."""

from __future__ import annotations

import os
from typing import Mapping, Sequence

import pytest

from zenity_bridge.core import config
from zenity_bridge.core.config import ZenitySettings
from zenity_bridge.core.interfaces.runner import ProcessOutcome


class FakeRunner:
    """`ProcessRunner` that records calls and returns a canned outcome."""

    def __init__(
        self,
        returncode: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
        error: OSError | None = None,
    ) -> None:
        self.outcome = ProcessOutcome(returncode=returncode, stdout=stdout, stderr=stderr)
        self.error = error
        self.calls: list[tuple[list[str], Mapping[str, str] | None]] = []

    def run(self, argv: Sequence[str], *, env: Mapping[str, str] | None = None) -> ProcessOutcome:
        self.calls.append((list(argv), env))
        if self.error is not None:
            raise self.error
        return self.outcome

    @property
    def last_argv(self) -> list[str]:
        return self.calls[-1][0]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no ZENITY_BRIDGE_* variables set.

    The user config .env is moved under tmp_path too, so a real
    ~/.config/zenity-bridge/.env never leaks into a test.
    """

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path / "config" / "zenity-bridge")
    monkeypatch.setitem(ZenitySettings.model_config, "env_file", (".env", str(config.get_user_env_file())))
    for key in list(os.environ):
        if key.startswith("ZENITY_BRIDGE_"):
            monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def settings(clean_env) -> ZenitySettings:
    return ZenitySettings(_env_file=None)


@pytest.fixture
def make_runner():
    return FakeRunner
