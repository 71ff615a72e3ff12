"""Errors raised while launching a dialog.

Only failures to run the program (or to read what it printed) are errors.
Any exit code the program returns is a valid result, see
`zenity_bridge.core.domain.outputs`.
"""

from __future__ import annotations


class ZenityError(Exception):
    """Base class for every error raised by zenity-bridge."""


class ZenityNotInstalledError(ZenityError):
    """The dialog executable could not be found on this host."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"{binary} is not installed or not on PATH")
        self.binary = binary


class UnexpectedIoError(ZenityError):
    """Spawning the dialog process failed for a reason other than a missing binary."""

    def __init__(self, binary: str, error: OSError) -> None:
        super().__init__(f"Unexpected io error while running {binary}: {error}")
        self.binary = binary


class InvalidOutputEncodingError(ZenityError):
    """The dialog wrote bytes to stdout that are not valid UTF-8."""

    def __init__(self, error: UnicodeDecodeError) -> None:
        super().__init__(f"Failed to decode stdout as utf-8: {error}")


class MissingExitCodeError(ZenityError):
    """The process ended without an exit code (terminated by a signal)."""

    def __init__(self, signal_number: int) -> None:
        super().__init__(f"Dialog process was terminated by signal {signal_number}")
        self.signal_number = signal_number


class ParseResultError(ZenityError):
    """The dialog output could not be converted into the expected type."""

    def __init__(self, stdout: str, reason: str) -> None:
        super().__init__(f"Failed to parse the output {stdout!r}: {reason}")
        self.stdout = stdout
