"""Dialog icons."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Icon(str, Enum):
    """Standard icons understood by the dialog program."""

    ERROR = "error"
    INFO = "info"
    QUESTION = "question"
    WARNING = "warning"

    @classmethod
    def resolve(cls, value: "Icon | Path | str") -> "Icon | Path":
        """Map a CLI/user value to a standard icon, or treat it as a path."""

        if isinstance(value, (Icon, Path)):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            return Path(value)


def render_icon(icon: Icon | Path) -> str:
    """Value passed to ``--icon-name``."""

    if isinstance(icon, Icon):
        return icon.value
    return str(icon)
