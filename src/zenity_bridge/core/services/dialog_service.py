"""Showing a dialog: argv assembly, invocation and outcome classification.

The CLI and library callers both go through `show_dialog`. Classification
is a pure function (`classify_outcome`) so it can be checked without
spawning anything.
"""

from __future__ import annotations

import logging

from zenity_bridge.adapters.subprocess_runner import SubprocessRunner
from zenity_bridge.core.config import ZenitySettings
from zenity_bridge.core.domain.dialog import ZenityDialog
from zenity_bridge.core.domain.outputs import (
    Affirmed,
    DialogResult,
    ExtraButton,
    Rejected,
    Unknown,
)
from zenity_bridge.core.errors import (
    InvalidOutputEncodingError,
    MissingExitCodeError,
    UnexpectedIoError,
    ZenityNotInstalledError,
)
from zenity_bridge.core.interfaces.runner import ProcessOutcome, ProcessRunner

logger = logging.getLogger(__name__)

AFFIRMED_CODE = 0
REJECTED_CODE = 1


def apply_defaults(dialog: ZenityDialog, settings: ZenitySettings) -> ZenityDialog:
    """Fill unset window options from the configured defaults."""

    changes: dict[str, object] = {}
    if dialog.title is None and settings.default_title is not None:
        changes["title"] = settings.default_title
    if dialog.width is None and settings.default_width is not None:
        changes["width"] = settings.default_width
    if dialog.height is None and settings.default_height is not None:
        changes["height"] = settings.default_height
    if not changes:
        return dialog
    return dialog.model_copy(update=changes)


def build_command(dialog: ZenityDialog, settings: ZenitySettings | None = None) -> list[str]:
    """Full command line: the binary followed by the dialog's argv."""

    settings = settings or ZenitySettings()
    return [settings.binary, *apply_defaults(dialog, settings).to_argv()]


def classify_outcome(dialog: ZenityDialog, outcome: ProcessOutcome) -> DialogResult:
    """Map an exit code and captured output to a result.

    - 0: `Affirmed`, with stdout parsed by the application when non-empty.
    - 1: `Rejected`, or `ExtraButton` when stdout is the extra button label.
    - anything else: `Unknown` with the exact code, stdout and stderr.
    """

    if outcome.returncode < 0:
        raise MissingExitCodeError(-outcome.returncode)

    try:
        raw_stdout = outcome.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidOutputEncodingError(exc) from exc
    stdout = raw_stdout.strip()

    if outcome.returncode == AFFIRMED_CODE:
        if not stdout:
            return Affirmed()
        return Affirmed(content=dialog.application.parse(stdout))

    if outcome.returncode == REJECTED_CODE:
        if not stdout:
            return Rejected()
        if dialog.extra_button is not None and stdout == dialog.extra_button:
            return ExtraButton(content=stdout)
        return Rejected(content=stdout)

    return Unknown(
        exit_code=outcome.returncode,
        stdout=raw_stdout,
        stderr=outcome.stderr.decode("utf-8", errors="replace"),
    )


def show_dialog(
    dialog: ZenityDialog,
    *,
    runner: ProcessRunner | None = None,
    settings: ZenitySettings | None = None,
) -> DialogResult:
    """Render the dialog and wait for the user's response.

    Raises:
        ZenityNotInstalledError: the configured binary cannot be found.
        UnexpectedIoError: the process could not be spawned for another reason.
        InvalidOutputEncodingError: stdout is not UTF-8.
        MissingExitCodeError: the process was killed by a signal.
        ParseResultError: affirmed output could not be parsed (calendar dates).
    """

    settings = settings or ZenitySettings()
    runner = runner or SubprocessRunner()

    command = build_command(dialog, settings)
    try:
        outcome = runner.run(command, env=settings.child_env())
    except FileNotFoundError as exc:
        logger.error("Dialog binary %r not found", settings.binary)
        raise ZenityNotInstalledError(settings.binary) from exc
    except OSError as exc:
        logger.error("Failed to spawn %r: %s", settings.binary, exc)
        raise UnexpectedIoError(settings.binary, exc) from exc

    result = classify_outcome(dialog, outcome)
    logger.debug("Dialog %s finished: %s", dialog.application.mode, result.kind)
    return result
