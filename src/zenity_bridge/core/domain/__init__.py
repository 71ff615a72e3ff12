"""Domain models: dialog configuration and results.

No subprocess, no CLI: only the concepts of the problem.
"""

from zenity_bridge.core.domain.applications import (
    Calendar,
    DialogApplication,
    Entry,
    ErrorMessage,
    InfoMessage,
    Question,
    WarningMessage,
)
from zenity_bridge.core.domain.arg import Arg
from zenity_bridge.core.domain.dialog import ZenityDialog
from zenity_bridge.core.domain.icon import Icon
from zenity_bridge.core.domain.month import Month
from zenity_bridge.core.domain.outputs import Affirmed, DialogResult, ExtraButton, Rejected, Unknown

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
    "Month",
    "Question",
    "Rejected",
    "Unknown",
    "WarningMessage",
    "ZenityDialog",
]
