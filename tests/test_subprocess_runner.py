"""Real process invocation, using the running interpreter as the program."""

from __future__ import annotations

import sys

import pytest

from zenity_bridge.adapters.subprocess_runner import SubprocessRunner
from zenity_bridge.core.config import ZenitySettings
from zenity_bridge.core.domain.dialog import ZenityDialog
from zenity_bridge.core.domain.outputs import Unknown
from zenity_bridge.core.errors import ZenityNotInstalledError
from zenity_bridge.core.interfaces.runner import ProcessRunner
from zenity_bridge.core.services.dialog_service import show_dialog


def test_runner_satisfies_the_protocol():
    assert isinstance(SubprocessRunner(), ProcessRunner)


def test_captures_code_and_both_streams():
    script = "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(3)"
    outcome = SubprocessRunner().run([sys.executable, "-c", script])
    assert outcome.returncode == 3
    assert outcome.stdout == b"out"
    assert outcome.stderr == b"err"


def test_env_is_passed_to_the_child():
    script = "import os, sys; sys.stdout.write(os.environ['DISPLAY'])"
    outcome = SubprocessRunner().run([sys.executable, "-c", script], env={"DISPLAY": ":42"})
    assert outcome.stdout == b":42"


def test_missing_executable_raises_file_not_found():
    with pytest.raises(FileNotFoundError):
        SubprocessRunner().run(["zenity-bridge-no-such-binary"])


def test_show_dialog_reports_missing_binary(clean_env):
    settings = ZenitySettings(_env_file=None, binary="zenity-bridge-no-such-binary")
    with pytest.raises(ZenityNotInstalledError):
        show_dialog(ZenityDialog(), settings=settings)


def test_unrecognised_program_exit_is_unknown(clean_env):
    # The interpreter rejects --info as an unknown option with exit code 2.
    settings = ZenitySettings(_env_file=None, binary=sys.executable)
    result = show_dialog(ZenityDialog(), settings=settings)
    assert isinstance(result, Unknown)
    assert result.exit_code == 2
    assert result.stderr
