"""Rich UI components for the CLI.

Keeps command logic apart from presentation so `main` and `doctor` can
share panels and tables.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from zenity_bridge.core.config import ZenitySettings
from zenity_bridge.core.domain.outputs import Affirmed, ExtraButton, Rejected, Unknown

_STYLES = {
    "affirmed": "green",
    "rejected": "yellow",
    "extra_button": "cyan",
    "unknown": "red",
}


def build_result_panel(result: Affirmed | Rejected | ExtraButton | Unknown) -> Panel:
    """Panel describing a dialog result."""

    style = _STYLES.get(result.kind, "white")
    title = Text(result.kind.replace("_", " ").title(), style=f"bold {style}")
    body = Text()

    if isinstance(result, Unknown):
        body.append(f"Exit code: {result.exit_code}\n", style="bold")
        if result.stdout:
            body.append("stdout:\n", style="dim")
            body.append(result.stdout.rstrip() + "\n")
        if result.stderr:
            body.append("stderr:\n", style="dim")
            body.append(result.stderr.rstrip(), style="red")
    elif result.content is None:
        body.append("(no content)", style="dim")
    else:
        body.append(str(result.content))

    return Panel(body, title=title, border_style=style)


def build_settings_table(settings: ZenitySettings) -> Table:
    """Table with the effective configuration."""

    table = Table(title="Settings")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in settings.model_dump().items():
        table.add_row(key, "-" if value is None else str(value))
    return table
