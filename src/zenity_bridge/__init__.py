"""A thin wrapper around zenity, the Linux dialog box program.

Build a `ZenityDialog`, call `show_dialog` and match on the result::

    from zenity_bridge import Question, ZenityDialog, Affirmed, show_dialog

    result = show_dialog(ZenityDialog(application=Question(text="Continue?")))
    if isinstance(result, Affirmed):
        ...
"""

from zenity_bridge.core.config import ZenitySettings
from zenity_bridge.core.domain import (
    Affirmed,
    Arg,
    Calendar,
    DialogApplication,
    DialogResult,
    Entry,
    ErrorMessage,
    ExtraButton,
    Icon,
    InfoMessage,
    Month,
    Question,
    Rejected,
    Unknown,
    WarningMessage,
    ZenityDialog,
)
from zenity_bridge.core.errors import (
    InvalidOutputEncodingError,
    MissingExitCodeError,
    ParseResultError,
    UnexpectedIoError,
    ZenityError,
    ZenityNotInstalledError,
)
from zenity_bridge.core.services.dialog_service import build_command, classify_outcome, show_dialog

__version__ = "0.1.0"

__all__ = [
    "Affirmed",
    "Arg",
    "Calendar",
    "DialogApplication",
    "DialogResult",
    "Entry",
    "ErrorMessage",
    "ExtraButton",
    "Icon",
    "InfoMessage",
    "InvalidOutputEncodingError",
    "MissingExitCodeError",
    "Month",
    "ParseResultError",
    "Question",
    "Rejected",
    "UnexpectedIoError",
    "Unknown",
    "WarningMessage",
    "ZenityDialog",
    "ZenityError",
    "ZenityNotInstalledError",
    "ZenitySettings",
    "build_command",
    "classify_outcome",
    "show_dialog",
]
